import math

import numpy as np
import pytest

from streamstats.core.statistics.distributions import normal_ppf, normal_cdf, expected_order_statistics


@pytest.mark.parametrize(
    "p, expected",
    [
        (0.5, 0.0),
        (0.975, 1.959963984540054),
        (0.025, -1.959963984540054),
    ],
)
def test_normal_ppf_matches_stdlib(p, expected):
    assert normal_ppf(p) == pytest.approx(expected, rel=0, abs=1e-12)


@pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
def test_normal_ppf_rejects_out_of_range(p):
    with pytest.raises(ValueError):
        normal_ppf(p)


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.0, 0.5),
        (1.959963984540054, 0.975),
        (-1.0, 0.15865525393145707),
        (math.inf, 1.0),
        (-math.inf, 0.0),
    ],
)
def test_normal_cdf_known_values(x, expected):
    assert normal_cdf(x) == pytest.approx(expected, abs=1e-12)


def test_normal_cdf_nan_propagates():
    assert math.isnan(normal_cdf(float("nan")))


def test_cdf_ppf_roundtrip():
    for p in (0.001, 0.1, 0.37, 0.9, 0.999):
        assert normal_cdf(normal_ppf(p)) == pytest.approx(p, abs=1e-12)


def test_expected_order_statistics_blom_positions():
    m = expected_order_statistics(5)
    assert m[0] == pytest.approx(normal_ppf((1 - 0.375) / 5.25))
    assert m[2] == pytest.approx(0.0, abs=1e-15)
    assert np.allclose(m, -m[::-1])
    assert np.all(np.diff(m) > 0)


def test_expected_order_statistics_requires_positive_n():
    with pytest.raises(ValueError):
        expected_order_statistics(0)
