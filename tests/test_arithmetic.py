import pytest

from squeezebench.arithmetic import ArithmeticCompressor


@pytest.mark.parametrize(
    "data",
    [
        b"hello world",
        b"aaaa",
        b"ab" * 60,
        bytes([1, 2, 3, 1, 2, 1]),
        b"x",
    ],
)
def test_round_trip(data):
    compressor = ArithmeticCompressor()
    assert compressor.decompress(compressor.compress(data)) == data


def test_round_trip_small_chunks():
    compressor = ArithmeticCompressor(chunk_size=4)
    data = b"abracadabra" * 3
    assert compressor.decompress(compressor.compress(data)) == data


def test_empty_input_gives_empty_output():
    compressor = ArithmeticCompressor()
    assert compressor.compress(b"") == b""
    assert compressor.decompress(b"") == b""


def test_single_chunk_is_length_prefixed():
    compressed = ArithmeticCompressor().compress(b"abc")
    assert compressed[0] == len(compressed) - 1


def test_chunks_are_independent():
    compressor = ArithmeticCompressor(chunk_size=3)
    first = compressor.compress(b"abc")
    second = compressor.compress(b"xyz")
    assert compressor.compress(b"abcxyz") == first + second


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        ArithmeticCompressor(chunk_size=0)


def test_invalid_precision():
    with pytest.raises(ValueError):
        ArithmeticCompressor(precision=0)


def test_truncated_chunk_raises():
    compressor = ArithmeticCompressor()
    compressed = compressor.compress(b"hello")
    with pytest.raises(ValueError):
        compressor.decompress(compressed[:-1])


def test_truncated_header_raises():
    compressor = ArithmeticCompressor()
    with pytest.raises(ValueError):
        compressor.decompress(bytes([1, 5]))