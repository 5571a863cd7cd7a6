"""LZ77 sliding-window compressor."""

from __future__ import annotations

import io
from typing import NamedTuple

from squeezebench.encoders import CompactVLQ, Compressor, Encoder
from squeezebench.utils import find_last_index

DEFAULT_WINDOW_SIZE = 512


class _Match(NamedTuple):
    offset: int
    count: int


class LZ77Compressor(Compressor):
    """Emits (offset, count, next) links; a ``next`` of 0 stands for no byte."""

    def __init__(
        self, window_size: int = DEFAULT_WINDOW_SIZE, encoder: Encoder | None = None
    ) -> None:
        self.window_size = window_size
        self.encoder = encoder if encoder is not None else CompactVLQ()

    def compress(self, data: bytes) -> bytes:
        out = bytearray()
        wend = 0
        while wend < len(data):
            wstart = max(0, wend - self.window_size)
            match = self._find_longest_match(data, wstart, wend)

            if match is None or match.count == 0:
                match = _Match(0, 0)
                following = data[wend]
                wend += 1
            else:
                idx = wend + match.count
                if idx < len(data):
                    following = data[idx]
                    wend += match.count + 1
                else:
                    following = 0
                    wend += match.count

            out += self._encode_link(match.offset, match.count, following)
        return bytes(out)

    def decompress(self, data: bytes) -> bytes:
        stream = io.BytesIO(data)
        out = bytearray()
        while True:
            try:
                offset = self.encoder.decode_int(stream)
            except EOFError:
                return bytes(out)
            try:
                count = self.encoder.decode_int(stream)
                following = self.encoder.decode_int(stream) & 0xFF
            except EOFError as exc:
                raise ValueError("truncated LZ77 link") from exc

            if offset == 0 and count == 0:
                out.append(following)
                continue

            start = len(out) - offset
            if start < 0 or (count > 0 and offset == 0):
                raise ValueError("LZ77 link points outside decoded data")
            for i in range(count):
                out.append(out[start + i])
            if following != 0:
                out.append(following)

    def _encode_link(self, offset: int, count: int, following: int) -> bytes:
        return (
            self.encoder.encode_int(offset)
            + self.encoder.encode_int(count)
            + self.encoder.encode_int(following)
        )

    @staticmethod
    def _find_longest_match(data: bytes, wstart: int, wend: int) -> _Match | None:
        window = data[wstart:wend]
        match = None
        for size in range(1, len(data) - wend + 1):
            target = data[wend : wend + size]
            idx = find_last_index(window, target)
            if idx == -1:
                break
            match = _Match(len(window) - idx, size)
        return match