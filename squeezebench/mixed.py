"""Compressor chaining LZ77 with Huffman coding."""

from __future__ import annotations

from squeezebench.encoders import Compressor
from squeezebench.huffman import HuffmanCompressor
from squeezebench.lz77 import LZ77Compressor

MIXED_WINDOW_SIZE = 64


class MixedCompressor(Compressor):
    """Runs an LZ77 pass and compresses its output with Huffman coding."""

    def __init__(
        self, main: Compressor | None = None, postprocess: Compressor | None = None
    ) -> None:
        self.main = main if main is not None else LZ77Compressor(window_size=MIXED_WINDOW_SIZE)
        self.postprocess = postprocess if postprocess is not None else HuffmanCompressor()

    def compress(self, data: bytes) -> bytes:
        return self.postprocess.compress(self.main.compress(data))

    def decompress(self, data: bytes) -> bytes:
        return self.main.decompress(self.postprocess.decompress(data))