import math

from techradar.random_source import PseudoRandomSource, Range


def test_first_draw_uses_starting_seed():
    source = PseudoRandomSource()
    gen = math.sin(42) * 10_000

    assert source.random() == gen - math.floor(gen)
    assert source.seed == 43


def test_identical_seeds_give_identical_sequences():
    left = PseudoRandomSource(42)
    right = PseudoRandomSource(42)

    assert [left.random() for _ in range(50)] == [right.random() for _ in range(50)]


def test_values_stay_in_unit_interval():
    source = PseudoRandomSource(0)
    values = [source.random() for _ in range(500)]

    assert all(0.0 <= value < 1.0 for value in values)


def test_random_between_spans_range():
    source = PseudoRandomSource()
    rng = Range(min=-2.0, max=3.0)
    values = [source.random_between(rng) for _ in range(200)]

    assert all(-2.0 <= value < 3.0 for value in values)


def test_normal_between_stays_in_lower_half():
    source = PseudoRandomSource()
    rng = Range(min=130.0, max=220.0)
    values = [source.normal_between(rng) for _ in range(200)]

    assert all(130.0 <= value <= 175.0 for value in values)
    # Each sample consumes two draws.
    assert source.seed == 42 + 400
