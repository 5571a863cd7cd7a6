"""Benchmark of the compressors on generated integer sequences."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from squeezebench.encoders import Compressor, IntsEncoder
from squeezebench.huffman import HuffmanCompressor
from squeezebench.lz77 import LZ77Compressor
from squeezebench.mixed import MixedCompressor
from squeezebench.seed import SeedFn, seed_by_ratio, seed_equally, seed_random

DEFAULT_TESTS_COUNT = 250
SIZES = (50, 100, 500, 1000, 10000)
MAX_VALUES = (10, 50, 100, 300)
RATIOS = (0.96, 0.9, 0.7)
EDGE_CASE_MULTIPLIER = 3


def compression_ratio(compressor: Compressor, values: Sequence[int]) -> float:
    """Percentage of bytes saved when compressing the encoded values."""
    data = IntsEncoder().encode(values)
    if not data:
        raise ValueError("nothing to compress")
    compressed = compressor.compress(data)
    return (1 - len(compressed) / len(data)) * 100


def run(tests_count: int, seed_fn: SeedFn, sort_input: bool) -> list[float]:
    """Average compression of Huffman, LZ77 and mixed over generated inputs."""
    if tests_count < 1:
        raise ValueError("tests count must be positive")
    compressors = (HuffmanCompressor(), LZ77Compressor(), MixedCompressor())
    totals = [0.0] * len(compressors)
    for _ in range(tests_count):
        values = seed_fn()
        if sort_input:
            values = sorted(values)
        for i, compressor in enumerate(compressors):
            totals[i] += compression_ratio(compressor, values)
    return [total / tests_count for total in totals]


def format_row(compression: Sequence[float], description: str) -> str:
    huffman, lz77, mixed = compression
    return f"| {huffman:10.6f}% | {lz77:10.6f}% | {mixed:10.6f}% | {description} |"


def _benchmarks() -> Iterator[tuple[str, SeedFn, bool]]:
    for seed_type in range(len(RATIOS) + 1):
        for size in SIZES:
            for max_value in MAX_VALUES:
                if seed_type == 0 and max_value < 50:
                    continue
                if seed_type < len(RATIOS):
                    description, seed_fn = seed_by_ratio(size, max_value, RATIOS[seed_type])
                else:
                    description, seed_fn = seed_random(size, max_value)
                yield description, seed_fn, True

    for max_value in MAX_VALUES:
        description, seed_fn = seed_equally(EDGE_CASE_MULTIPLIER, max_value)
        yield description, seed_fn, False


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="squeezebench",
        description="Compare Huffman, LZ77 and mixed compression on generated data.",
    )
    parser.add_argument(
        "--tests-count",
        type=_positive_int,
        default=DEFAULT_TESTS_COUNT,
        help="inputs generated per row (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    for description, seed_fn, sort_input in _benchmarks():
        try:
            compression = run(args.tests_count, seed_fn, sort_input)
        except ValueError as exc:
            print(f"squeezebench: {exc}", file=sys.stderr)
            return 1
        print(format_row(compression, description), flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())