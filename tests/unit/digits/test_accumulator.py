import pytest

from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.exceptions import DegenerateInputError


def test_increment_keeps_total_equal_to_sum():
    acc = FrequencyAccumulator()
    observations = [1, 5, 0, 10, None, 9, True, -3, 5, 2.0]
    accepted = [acc.increment(obs) for obs in observations]

    assert accepted == [True, True, False, False, False, True, False, False, True, False]
    assert acc.counts == [1, 0, 0, 0, 2, 0, 0, 0, 1]
    assert acc.total == sum(acc.counts) == 4


def test_extend_returns_accepted_count():
    acc = FrequencyAccumulator()
    assert acc.extend([1, 1, None, 3, 42]) == 3
    assert acc.total == sum(acc.counts) == 3


def test_reset_zeroes_everything():
    acc = FrequencyAccumulator.from_counts([1, 2, 3, 4, 5, 6, 7, 8, 9])
    acc.reset()
    assert acc.counts == [0] * 9
    assert acc.total == 0


def test_from_counts_validates_shape_and_sign():
    assert FrequencyAccumulator.from_counts([1] * 9).total == 9
    with pytest.raises(ValueError):
        FrequencyAccumulator.from_counts([1] * 8)
    with pytest.raises(ValueError):
        FrequencyAccumulator.from_counts([1] * 8 + [-1])


def test_merged_is_union_and_leaves_members_untouched():
    a = FrequencyAccumulator.from_counts([1, 0, 0, 0, 0, 0, 0, 0, 2])
    b = FrequencyAccumulator.from_counts([3, 1, 0, 0, 0, 0, 0, 0, 0])
    union = FrequencyAccumulator.merged([a, b])

    assert union.counts == [4, 1, 0, 0, 0, 0, 0, 0, 2]
    assert union.total == 7
    assert a.total == 3 and b.total == 4


def test_observed_fractions_require_observations():
    with pytest.raises(DegenerateInputError):
        FrequencyAccumulator().observed_fractions()
    fractions = FrequencyAccumulator.from_counts([1, 1, 0, 0, 0, 0, 0, 0, 2]).observed_fractions()
    assert fractions[0] == pytest.approx(0.25)
    assert fractions[8] == pytest.approx(0.5)
