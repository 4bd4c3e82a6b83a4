"""MT19937 regression tests anchored to the published reference outputs."""

from collections import Counter

import pytest

from role_dice import InvalidArgument, MersenneTwister
from role_dice import twister

# init_genrand(5489), the reference default seed
REFERENCE_5489 = [3499211612, 581869302, 3890346734, 3586334585, 545404204]
REFERENCE_0 = [2357136044, 2546248239, 3071714933, 3626093760, 2588848963]


def test_seed_zero_matches_reference_words():
    rng = MersenneTwister(0)
    assert [rng.next_word() for _ in range(5)] == REFERENCE_0


def test_default_reference_seed_matches_published_words():
    rng = MersenneTwister(5489)
    assert [rng.next_word() for _ in range(5)] == REFERENCE_5489


def test_ten_thousandth_word_matches_reference():
    rng = MersenneTwister(5489)
    for _ in range(9999):
        rng.next_word()
    assert rng.next_word() == 4123659995


def test_seed_is_truncated_to_32_bits():
    wide = MersenneTwister(5489 + (7 << 32))
    negative = MersenneTwister(-1)

    assert wide.seed == 5489
    assert [wide.next_word() for _ in range(5)] == REFERENCE_5489
    assert negative.seed == 0xFFFFFFFF
    assert negative.state[0] == 0xFFFFFFFF


def test_initial_state_shape():
    rng = MersenneTwister(1)
    assert len(rng.state) == twister.N
    assert rng.index == twister.N
    assert rng.regenerations == 0
    assert all(0 <= word <= 0xFFFFFFFF for word in rng.state)


def test_regeneration_boundary():
    rng = MersenneTwister(5489)
    words = [rng.next_word() for _ in range(624)]

    assert rng.regenerations == 1
    assert rng.index == 624
    assert words[-2:] == [2227348307, 4020325887]

    assert rng.next_word() == 4178893912
    assert rng.regenerations == 2
    assert rng.index == 1
    assert len(rng.state) == twister.N

    assert rng.next_word() == 610818241
    assert rng.regenerations == 2


def test_next_boolean_reads_top_bit():
    rng = MersenneTwister(5489)
    expected = [word >= 2**31 for word in REFERENCE_5489]
    assert [rng.next_boolean() for _ in range(5)] == expected


def test_next_int_pinned_d6_values():
    rng = MersenneTwister(5489)
    # (word >> 1) % 6 + 1 for the reference words above
    assert [rng.next_int(6) for _ in range(5)] == [5, 4, 2, 3, 3]


def test_next_int_power_of_two_is_one_based():
    rng = MersenneTwister(5489)
    # ((1024 * (word >> 1)) >> 31) + 1
    assert [rng.next_int(1024) for _ in range(5)] == [835, 139, 928, 856, 131]


def test_next_int_rejects_partial_top_block(monkeypatch):
    rng = MersenneTwister(5489)
    # bits=2**31 - 2 lies in the partial block for n=6; bits=12 does not.
    words = iter([(2**31 - 2) << 1, 12 << 1])
    monkeypatch.setattr(rng, "next_word", lambda: next(words))

    assert rng.next_int(6) == 1  # 12 % 6 + 1


@pytest.mark.parametrize("n", [1, 0, -5])
def test_next_int_invalid_bounds(n):
    rng = MersenneTwister(7)
    with pytest.raises(InvalidArgument):
        rng.next_int(n)
    assert rng.index == twister.N  # nothing drawn


def test_next_int_rejects_bounds_beyond_int32():
    with pytest.raises(InvalidArgument):
        MersenneTwister(7).next_int(2**31)


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgument, ValueError)


@pytest.mark.parametrize("n", [2, 3, 6, 20, 100, 1024, 2**31 - 1])
def test_next_int_range_law(n):
    rng = MersenneTwister(0xC0FFEE)
    values = [rng.next_int(n) for _ in range(5000)]
    assert min(values) >= 1
    assert max(values) <= n


def test_d6_uniformity():
    rng = MersenneTwister(20240601)
    draws = 600_000
    counts = Counter(rng.next_int(6) for _ in range(draws))

    assert sorted(counts) == [1, 2, 3, 4, 5, 6]
    for face in range(1, 7):
        assert abs(counts[face] / draws - 1 / 6) < 0.005


def test_power_of_two_uniformity():
    rng = MersenneTwister(99)
    draws = 1024 * 1000
    counts = Counter(rng.next_int(1024) for _ in range(draws))

    assert sorted(counts) == list(range(1, 1025))
    assert all(800 < counts[value] < 1200 for value in range(1, 1025))


def test_same_seed_same_sequence():
    first = MersenneTwister(0xDEADBEEF)
    second = MersenneTwister(0xDEADBEEF)

    a = [(first.next_int(6), first.next_boolean(), first.next_word()) for _ in range(1000)]
    b = [(second.next_int(6), second.next_boolean(), second.next_word()) for _ in range(1000)]
    assert a == b


def test_default_seed_uses_wall_clock_millis(monkeypatch):
    monkeypatch.setattr(twister.time, "time_ns", lambda: 1_700_000_000_123_456_789)
    rng = MersenneTwister()

    assert rng.seed == 1_700_000_000_123 & 0xFFFFFFFF
    replay = MersenneTwister(rng.seed)
    assert [rng.next_word() for _ in range(10)] == [replay.next_word() for _ in range(10)]


def test_default_engines_diverge_across_clock_ticks(monkeypatch):
    ticks = iter([1_000_000_000_000_000, 1_000_000_001_000_000])
    monkeypatch.setattr(twister.time, "time_ns", lambda: next(ticks))

    first = MersenneTwister()
    second = MersenneTwister()
    assert [first.next_word() for _ in range(5)] != [second.next_word() for _ in range(5)]
