"""Generators of integer sequences for benchmarking compressors."""

from __future__ import annotations

import random
from typing import Callable

SeedFn = Callable[[], list[int]]


def _format_number(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def seed_random(count: int, max_value: int) -> tuple[str, SeedFn]:
    """Values drawn uniformly from 1 to max_value - 1."""

    def generate() -> list[int]:
        rnd = random.Random()
        return [rnd.randrange(1, max_value) for _ in range(count)]

    description = (
        f"size = {count}, with values from 1 to {max_value}, distributed randomly"
    )
    return description, generate


def seed_equally(mul: int, max_value: int) -> tuple[str, SeedFn]:
    """The values 1..max_value repeated mul times in order."""
    count = max_value * mul

    def generate() -> list[int]:
        return [i % max_value + 1 for i in range(count)]

    description = (
        f"size = {count}, with values from 1 to {max_value}, distributed equally"
    )
    return description, generate


def seed_by_ratio(count: int, max_value: int, ratio: float) -> tuple[str, SeedFn]:
    """A share ``ratio`` of low-diversity values followed by random ones."""
    main_part_size = int(count * ratio)
    random_part_size = count - main_part_size
    main_part_max_value = max(int(max_value * (1.0 - ratio)), 2)

    def generate() -> list[int]:
        rnd = random.Random()
        values = [rnd.randrange(1, main_part_max_value) for _ in range(main_part_size)]
        values.extend(rnd.randrange(1, max_value) for _ in range(random_part_size))
        return values

    description = (
        f"size = {count}, with values from 1 to {max_value}, where "
        f"{_format_number(ratio * 100)}% of values are from 1 to {main_part_max_value}, "
        "others are random"
    )
    return description, generate