"""
Tests for SampleOptions.
"""

import pytest

from streamstats.core.models.aggregates import AggregateKind
from streamstats.core.models.options import SampleOptions, ConfigurationError


class TestSampleOptions:
    """Tests for option defaults and validation."""

    def test_defaults(self):
        opts = SampleOptions()
        assert opts.degree == 2
        assert opts.enable_harmonic is False
        assert opts.enable_geometric is False
        assert opts.enabled_kinds == []

    @pytest.mark.parametrize("degree", [1, 0, -3])
    def test_degree_below_two(self, degree):
        with pytest.raises(ConfigurationError):
            SampleOptions(degree=degree)

    @pytest.mark.parametrize("degree", [2.5, "3", True])
    def test_degree_must_be_integer(self, degree):
        with pytest.raises(ConfigurationError):
            SampleOptions(degree=degree)

    def test_enabled_kinds_order(self):
        opts = SampleOptions(enable_harmonic=True, enable_geometric=True)
        assert opts.enabled_kinds == [AggregateKind.GEOMETRIC, AggregateKind.HARMONIC]

    def test_to_dict(self):
        opts = SampleOptions(degree=4, enable_harmonic=True)
        assert opts.to_dict() == {
            "degree": 4,
            "enable_harmonic": True,
            "enable_geometric": False,
        }

    def test_from_dict_round_trip(self):
        opts = SampleOptions(degree=5, enable_geometric=True)
        assert SampleOptions.from_dict(opts.to_dict()) == opts

    def test_from_dict_parses_strings(self):
        opts = SampleOptions.from_dict({"degree": "3", "harmonic": "yes", "geometric": "false"})
        assert opts.degree == 3
        assert opts.enable_harmonic is True
        assert opts.enable_geometric is False

    def test_from_dict_defaults(self):
        assert SampleOptions.from_dict({}) == SampleOptions()
