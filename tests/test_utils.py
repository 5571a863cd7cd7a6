import pytest

from squeezebench.utils import (
    bytes_to_ints,
    find_last_index,
    ints_to_bytes,
    is_nth_bit_set,
    read_logfile,
    save_logfile,
    to_ascii,
)


def test_to_ascii_roundtrip_for_all_bytes():
    for n in range(256):
        assert to_ascii(str(n)) == n


def test_to_ascii_wraps_modulo_byte():
    for n in range(0, 256, 17):
        assert to_ascii(str(n + 256)) == to_ascii(str(n))


@pytest.mark.parametrize("text", ["", "abc", "1.5", "12x"])
def test_to_ascii_invalid_is_zero(text):
    assert to_ascii(text) == 0


def test_is_nth_bit_set():
    for n in range(8):
        assert is_nth_bit_set(1 << n, n) is True
        assert is_nth_bit_set(0xFF ^ (1 << n), n) is False


def test_bytes_ints_roundtrip():
    data = bytes(range(256))
    assert ints_to_bytes(bytes_to_ints(data)) == data


def test_bytes_to_ints_preserves_values():
    assert bytes_to_ints(b"\x00\x7f\xff") == [0, 127, 255]


def test_ints_to_bytes_truncates():
    assert ints_to_bytes([1, 257, 512]) == ints_to_bytes([1, 1, 0])


def test_find_last_index_empty_target():
    assert find_last_index([1, 2, 3], []) == -1


def test_find_last_index_target_longer():
    assert find_last_index([1, 2], [1, 2, 3]) == -1


def test_find_last_index_not_found():
    assert find_last_index([1, 2, 3], [4]) == -1


def test_find_last_index_picks_last_occurrence():
    assert find_last_index([1, 2, 3, 1, 2], [1, 2]) == 3


def test_find_last_index_whole_source():
    source = [5, 6, 7]
    assert find_last_index(source, source) == 0


@pytest.mark.parametrize(
    "source,target",
    [
        ([1, 1, 2, 1, 1], [1, 1]),
        ([3, 4, 3, 4, 5], [3, 4]),
        (b"abcabc", b"bc"),
        ([9, 8, 7, 6], [8, 7]),
    ],
)
def test_find_last_index_result_matches(source, target):
    idx = find_last_index(source, target)
    assert idx >= 0
    assert list(source[idx : idx + len(target)]) == list(target)


def test_logfile_roundtrip(tmp_path):
    path = tmp_path / "log.bin"
    save_logfile(b"\x00\x01hello", path)
    assert read_logfile(path) == b"\x00\x01hello"


def test_save_logfile_truncates(tmp_path):
    path = tmp_path / "log.bin"
    save_logfile(b"long content here", path)
    save_logfile(b"short", path)
    assert read_logfile(path) == b"short"


def test_read_logfile_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_logfile(tmp_path / "missing.txt")