import random

import pytest

from squeezebench.huffman import HuffmanCompressor
from squeezebench.lz77 import LZ77Compressor
from squeezebench.mixed import MixedCompressor


@pytest.fixture
def compressor():
    return MixedCompressor()


@pytest.mark.parametrize(
    "data",
    [
        b"ab",
        b"abcabcabcabcabc",
        b"mixed compression of some sample text",
        bytes(range(1, 200)) * 2,
    ],
)
def test_round_trip(compressor, data):
    assert compressor.decompress(compressor.compress(data)) == data


def test_round_trip_random(compressor):
    rnd = random.Random(3)
    data = bytes(sorted(rnd.randrange(1, 50) for _ in range(1000)))
    assert compressor.decompress(compressor.compress(data)) == data


def test_output_is_huffman_of_lz77(compressor):
    data = b"banana bandana banana"
    lz = LZ77Compressor(window_size=64).compress(data)
    huffman = HuffmanCompressor()
    assert huffman.decompress(compressor.compress(data)) == lz


def test_repetitive_data_gets_smaller(compressor):
    data = b"xyz" * 300
    assert len(compressor.compress(data)) < len(data)


def test_empty_input_rejected(compressor):
    with pytest.raises(ValueError):
        compressor.compress(b"")


def test_corrupt_input_rejected(compressor):
    with pytest.raises(ValueError):
        compressor.decompress(b"")