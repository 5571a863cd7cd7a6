"""Small byte and sequence helpers."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")

DEFAULT_LOGFILE = "logfile.txt"
DEFAULT_COMPRESSED_LOGFILE = "logfile.compressed"


def to_ascii(text: str) -> int:
    """Parse a decimal string into a byte value; unparsable text gives 0."""
    if not _INTEGER.fullmatch(text):
        return 0
    return int(text) & 0xFF


def is_nth_bit_set(num: int, n: int) -> bool:
    """Return whether bit ``n`` of byte ``num`` is set."""
    mask = (1 << n) & 0xFF
    return (num & mask) != 0


def bytes_to_ints(data: bytes) -> list[int]:
    return list(data)


def ints_to_bytes(ints: Iterable[int]) -> bytes:
    """Truncate each integer to a byte and join them."""
    return bytes(i & 0xFF for i in ints)


def find_last_index(source: Sequence[T], target: Sequence[T]) -> int:
    """Find the start of a trailing match of ``target`` in ``source``.

    Scans backwards; on a mismatch the match restarts from the end of
    ``target`` without re-examining the current element. Returns -1 when
    nothing is found.
    """
    if not target or len(source) < len(target):
        return -1

    last = len(target) - 1
    t = last
    for i in range(len(source) - 1, -1, -1):
        if source[i] == target[t]:
            t -= 1
            if t < 0:
                return i
        elif t < last:
            t = last
    return -1


def read_logfile(path: str | Path = DEFAULT_LOGFILE) -> bytes:
    return Path(path).read_bytes()


def save_logfile(data: bytes, path: str | Path = DEFAULT_COMPRESSED_LOGFILE) -> None:
    Path(path).write_bytes(data)