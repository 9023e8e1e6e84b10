"""Tests for value-mapping transforms."""

import math

import numpy as np
import pytest

from streamstats.core.models.sample import OrderedSample
from streamstats.core.transforms import apply_transform, center, reduce, sigmoid, entropy


def _sample(values, **kwargs):
    return OrderedSample.create(values=values, **kwargs)


def _assert_power_sums_consistent(sample):
    v = np.asarray(sample.values)
    assert sample.power_sums[0] == pytest.approx(v.sum(), abs=1e-9)
    assert sample.power_sums[1] == pytest.approx((v ** 2).sum(), rel=1e-9, abs=1e-9)


class TestApply:

    def test_apply_maps_every_value(self):
        sample = _sample([1, 2, 3])
        apply_transform(sample, lambda v: v + 1)
        assert list(sample.values) == [2.0, 3.0, 4.0]
        _assert_power_sums_consistent(sample)

    def test_non_monotone_mapping_keeps_order(self):
        sample = _sample([-3, -1, 2, 5])
        sample.apply(lambda v: -v)

        assert list(sample.values) == [-5.0, -2.0, 1.0, 3.0]
        _assert_power_sums_consistent(sample)

    def test_apply_without_update_keeps_power_sums(self):
        sample = _sample([1, 2, 3])
        sample.apply(lambda v: v * 10, update_aggregates=False)
        assert list(sample.power_sums) == [6.0, 14.0]


class TestCenter:

    def test_copy_round_trip(self):
        """Adding the original mean back to a centered copy restores the data."""
        rng = np.random.default_rng(5)
        data = rng.normal(10.0, 3.0, size=100)
        sample = _sample(data)
        original = sample.values
        mu = sample.mean()

        centered = sample.center(inplace=False)

        assert centered is not sample
        assert sample.values == original
        assert centered.mean() == pytest.approx(0.0, abs=1e-9)
        restored = [v + mu for v in centered.values]
        assert restored == pytest.approx(list(original), rel=1e-12, abs=1e-9)

    def test_inplace_returns_none(self):
        sample = _sample([1, 2, 3, 6])
        assert center(sample) is None
        assert list(sample.values) == [-2.0, -1.0, 0.0, 3.0]
        assert sample.mean() == pytest.approx(0.0)
        _assert_power_sums_consistent(sample)

    def test_variance_is_preserved(self):
        sample = _sample([1, 2, 3, 6])
        before = sample.var()
        sample.center()
        assert sample.var() == pytest.approx(before)


class TestReduce:

    def test_center_then_reduce_gives_unit_stddev(self):
        rng = np.random.default_rng(8)
        sample = _sample(rng.uniform(-5, 20, size=60))
        standardized = reduce(center(sample, inplace=False), inplace=False)

        assert standardized.mean() == pytest.approx(0.0, abs=1e-9)
        assert standardized.stddev() == pytest.approx(1.0)

    def test_reduce_with_zero_spread_gives_nan(self):
        sample = _sample([0.0, 0.0, 0.0])
        sample.reduce()
        assert all(math.isnan(v) for v in sample.values)


class TestSigmoid:

    def test_values_in_unit_interval(self):
        sample = _sample([-3, 0, 2])
        squashed = sample.sigmoid(inplace=False)

        assert squashed.at(1) == 0.5
        assert all(0.0 < v < 1.0 for v in squashed.values)
        assert squashed.at(0) == pytest.approx(1 / (1 + math.exp(3)))
        assert sample.at(1) == 0.0

    def test_extreme_values_do_not_overflow(self):
        sample = _sample([-1000.0, 1000.0])
        sigmoid(sample)
        assert list(sample.values) == [0.0, 1.0]

    def test_empty_sample_returns_none(self):
        assert OrderedSample().sigmoid(inplace=False) is None
        assert OrderedSample().sigmoid(inplace=True) is None

    def test_aggregates_follow_transform(self):
        sample = _sample([-1, 0, 1], enable_harmonic=True)
        assert math.isnan(sample.harmonic_mean())

        sample.sigmoid()
        assert sample.harmonic_mean() == pytest.approx(sample.harmonic_mean(recompute=True))
        assert not math.isnan(sample.harmonic_mean())


class TestEntropy:

    def test_empty_sample_is_nan(self):
        assert math.isnan(entropy(OrderedSample()))

    def test_standardized_negative_values_make_entropy_nan(self):
        assert math.isnan(_sample([1, 2, 3, 4]).entropy())

    def test_entropy_does_not_mutate(self):
        sample = _sample([1, 2, 3, 4])
        sample.entropy()
        assert list(sample.values) == [1.0, 2.0, 3.0, 4.0]
