import pytest

from squeezebench.seed import seed_by_ratio, seed_equally, seed_random


def test_seed_random_description():
    description, _ = seed_random(5, 10)
    assert description == "size = 5, with values from 1 to 10, distributed randomly"


def test_seed_random_values_in_range():
    _, generate = seed_random(200, 10)
    values = generate()
    assert len(values) == 200
    assert all(1 <= v <= 9 for v in values)


def test_seed_random_rejects_too_small_max():
    _, generate = seed_random(3, 1)
    with pytest.raises(ValueError):
        generate()


def test_seed_equally_values():
    description, generate = seed_equally(2, 3)
    assert generate() == [1, 2, 3, 1, 2, 3]
    assert description == "size = 6, with values from 1 to 3, distributed equally"


def test_seed_equally_is_deterministic():
    _, generate = seed_equally(3, 50)
    assert generate() == generate()
    assert len(generate()) == 150


def test_seed_by_ratio_description():
    description, _ = seed_by_ratio(100, 50, 0.5)
    assert description == (
        "size = 100, with values from 1 to 50, where 50% of values are from 1 to 25, "
        "others are random"
    )


def test_seed_by_ratio_parts():
    _, generate = seed_by_ratio(100, 50, 0.5)
    values = generate()
    assert len(values) == 100
    assert all(1 <= v <= 24 for v in values[:50])
    assert all(1 <= v <= 49 for v in values[50:])


def test_seed_by_ratio_clamps_main_range():
    description, generate = seed_by_ratio(10, 10, 0.96)
    values = generate()
    assert values[:9] == [1] * 9
    assert "from 1 to 2, others" in description