"""Arithmetic coding compressor working on fixed-size chunks."""

from __future__ import annotations

import io
from collections import Counter
from typing import Mapping

import mpmath
from mpmath import mpf

from squeezebench.encoders import CompactVLQ, Compressor, Encoder

DEFAULT_PRECISION = 166
DEFAULT_CHUNK_SIZE = 50

MIN_RANGE = 0
MAX_RANGE = 1

_NEGATIVE_FLAG = 0x01

_Ranges = dict[int, tuple[mpf, mpf]]


class ArithmeticCompressor(Compressor):
    """Encodes each chunk as one high-precision fraction plus symbol frequencies.

    Every chunk is written as a length-prefixed block holding the symbol
    count, the frequency table and the coded value. Precision is in bits.
    """

    def __init__(
        self,
        precision: int = DEFAULT_PRECISION,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoder: Encoder | None = None,
    ) -> None:
        if precision < 1:
            raise ValueError("precision must be positive")
        if chunk_size < 1:
            raise ValueError("chunk size must be positive")
        self.precision = precision
        self.chunk_size = chunk_size
        self.encoder = encoder if encoder is not None else CompactVLQ()

    def compress(self, data: bytes) -> bytes:
        out = bytearray()
        for start in range(0, len(data), self.chunk_size):
            block = self._compress_chunk(data[start : start + self.chunk_size])
            out += self.encoder.encode_int(len(block))
            out += block
        return bytes(out)

    def decompress(self, data: bytes) -> bytes:
        stream = io.BytesIO(data)
        out = bytearray()
        while True:
            try:
                size = self.encoder.decode_int(stream)
            except EOFError:
                return bytes(out)
            block = stream.read(size)
            if len(block) < size:
                raise ValueError("truncated arithmetic chunk")
            out += self._decompress_chunk(block)

    def _compress_chunk(self, chunk: bytes) -> bytes:
        frequencies = Counter(chunk)
        with mpmath.workprec(self.precision):
            ranges = self._probability_ranges(frequencies)
            value = self._compute_value(chunk, ranges)
            value_bytes = self._encode_value(value)
        return self._encode_meta(len(chunk), frequencies) + value_bytes

    def _decompress_chunk(self, block: bytes) -> bytes:
        stream = io.BytesIO(block)
        try:
            count, frequencies = self._decode_meta(stream)
        except EOFError as exc:
            raise ValueError("truncated arithmetic chunk header") from exc

        out = bytearray()
        with mpmath.workprec(self.precision):
            value = self._decode_value(stream)
            ranges = self._probability_ranges(frequencies)
            low, high = mpf(MIN_RANGE), mpf(MAX_RANGE)
            for _ in range(count):
                width = high - low
                for symbol, (sym_low, sym_high) in ranges.items():
                    lo = low + width * sym_low
                    hi = low + width * sym_high
                    if lo <= value < hi:
                        out.append(symbol)
                        low, high = lo, hi
                        break
        return bytes(out)

    @staticmethod
    def _probability_ranges(frequencies: Mapping[int, int]) -> _Ranges:
        # Symbols are ordered so that encoding and decoding build identical ranges.
        total = mpf(sum(frequencies.values()))
        symbols = sorted(frequencies)
        ranges: _Ranges = {}
        cursor = mpf(MIN_RANGE)
        for i, symbol in enumerate(symbols):
            probability = mpf(frequencies[symbol]) / total
            low = cursor
            high = cursor + probability
            if i == len(symbols) - 1:
                high = mpf(MAX_RANGE)
            ranges[symbol] = (low, high)
            cursor = cursor + probability
        return ranges

    @staticmethod
    def _compute_value(chunk: bytes, ranges: _Ranges) -> mpf:
        low, high = mpf(MIN_RANGE), mpf(MAX_RANGE)
        for symbol in chunk:
            sym_low, sym_high = ranges[symbol]
            width = high - low
            low, high = low + width * sym_low, low + width * sym_high
        # Any point of [low, high) identifies the chunk; take the middle.
        return (low + high) / 2

    def _encode_meta(self, count: int, frequencies: Mapping[int, int]) -> bytes:
        parts = [self.encoder.encode_int(count), self.encoder.encode_int(len(frequencies))]
        for symbol in sorted(frequencies):
            parts.append(self.encoder.encode_int(symbol))
            parts.append(self.encoder.encode_int(frequencies[symbol]))
        return b"".join(parts)

    def _decode_meta(self, stream: io.BytesIO) -> tuple[int, dict[int, int]]:
        count = self.encoder.decode_int(stream)
        size = self.encoder.decode_int(stream)
        frequencies: dict[int, int] = {}
        for _ in range(size):
            symbol = self.encoder.decode_int(stream)
            frequencies[symbol & 0xFF] = self.encoder.decode_int(stream)
        return count, frequencies

    def _encode_value(self, value: mpf) -> bytes:
        mantissa, exponent = value.man_exp
        mantissa = int(mantissa)
        exponent = int(exponent)
        flags = _NEGATIVE_FLAG if mantissa < 0 else 0
        mantissa = abs(mantissa)
        zigzag = exponent << 1 if exponent >= 0 else ((-exponent) << 1) - 1
        raw = (
            bytes([flags])
            + self.encoder.encode_int(zigzag)
            + mantissa.to_bytes((mantissa.bit_length() + 7) // 8, "big")
        )
        return self.encoder.encode_int(len(raw)) + raw

    def _decode_value(self, stream: io.BytesIO) -> mpf:
        try:
            length = self.encoder.decode_int(stream)
        except EOFError as exc:
            raise ValueError("missing arithmetic value") from exc
        raw = stream.read(length)
        if len(raw) < length or not raw:
            raise ValueError("truncated arithmetic value")

        value_stream = io.BytesIO(raw[1:])
        try:
            zigzag = self.encoder.decode_int(value_stream)
        except EOFError as exc:
            raise ValueError("truncated arithmetic value") from exc
        exponent = zigzag >> 1 if zigzag % 2 == 0 else -((zigzag + 1) >> 1)
        mantissa = int.from_bytes(value_stream.read(), "big")
        if raw[0] & _NEGATIVE_FLAG:
            mantissa = -mantissa
        return mpf((mantissa, exponent))