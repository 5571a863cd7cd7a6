"""Compressor interface and variable-length integer encoders."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterable

from squeezebench.utils import is_nth_bit_set

ASCII_MAX_VAL = 127


class Compressor(ABC):
    """A reversible transformation of a byte string."""

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Return the compressed form of ``data``."""

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Return the original bytes of a compressed ``data``."""


class Encoder(ABC):
    """Serializes single non-negative integers to bytes and back."""

    @abstractmethod
    def encode_int(self, num: int) -> bytes:
        """Return the byte representation of ``num``."""

    @abstractmethod
    def decode_int(self, stream: BinaryIO) -> int:
        """Read one integer from ``stream``.

        Raises EOFError when the stream is exhausted before the first byte,
        ValueError when the data is truncated or malformed.
        """


def _read_byte(stream: BinaryIO, first: bool, name: str) -> int:
    chunk = stream.read(1)
    if not chunk:
        if first:
            raise EOFError(f"{name}: end of stream")
        raise ValueError(f"{name}: truncated value")
    return chunk[0]


class AsciiEncoder(Encoder):
    """Packs numbers up to 16255 into one or two 7-bit bytes."""

    def encode_int(self, num: int) -> bytes:
        if num < 0:
            raise ValueError("negative values not supported")
        chunks = num // ASCII_MAX_VAL
        if chunks > ASCII_MAX_VAL:
            raise ValueError("too big number")
        out = bytearray()
        if chunks > 0:
            out.append(0x80 | chunks)
        out.append(num - ASCII_MAX_VAL * chunks)
        return bytes(out)

    def decode_int(self, stream: BinaryIO) -> int:
        chunks = 0
        first = True
        while True:
            b = _read_byte(stream, first, "ASCII")
            first = False
            if not is_nth_bit_set(b, 7):
                return b + ASCII_MAX_VAL * chunks
            chunks = b & ASCII_MAX_VAL


class CompactVLQ(Encoder):
    """Little-endian base-128 varint encoding."""

    def encode_int(self, num: int) -> bytes:
        if num < 0:
            raise ValueError("CompactVLQ: negative values not supported")
        out = bytearray()
        while True:
            num, b = divmod(num, 128)
            if num:
                b |= 0x80
            out.append(b)
            if not num:
                return bytes(out)

    def decode_int(self, stream: BinaryIO) -> int:
        result = 0
        shift = 0
        first = True
        while True:
            b = _read_byte(stream, first, "CompactVLQ")
            first = False
            result += (b & 0x7F) << shift
            if not b & 0x80:
                return result
            shift += 7
            if shift > 63:
                raise ValueError("CompactVLQ: value too large")


class VLQ(Encoder):
    """Base-128 varint encoding limited to 42 bits on decode."""

    def encode_int(self, num: int) -> bytes:
        if num < 0:
            raise ValueError("VLQ: negative values not supported")
        out = bytearray()
        while True:
            b = num & 0x7F
            num >>= 7
            if num == 0:
                out.append(b)
                return bytes(out)
            out.append(0x80 | b)

    def decode_int(self, stream: BinaryIO) -> int:
        result = 0
        shift = 0
        first = True
        while True:
            b = _read_byte(stream, first, "VLQ")
            first = False
            result |= (b & 0x7F) << shift
            if not b & 0x80:
                return result
            shift += 7
            if shift > 35:
                raise ValueError("VLQ decoding overflow")


class IntsEncoder:
    """Converts sequences of integers to bytes with an integer encoder."""

    def __init__(self, encoder: Encoder | None = None) -> None:
        self.encoder = encoder if encoder is not None else CompactVLQ()

    def encode(self, ints: Iterable[int]) -> bytes:
        return b"".join(self.encoder.encode_int(num) for num in ints)

    def decode(self, data: bytes) -> list[int]:
        stream = io.BytesIO(data)
        values: list[int] = []
        while True:
            try:
                values.append(self.encoder.decode_int(stream))
            except EOFError:
                return values