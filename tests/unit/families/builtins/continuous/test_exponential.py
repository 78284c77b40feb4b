"""
Tests for the Exponential family

Covers parametrizations, constraints, supports and sampling.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import pytest

from pysatl_variates.configuration import configure_variates_register
from pysatl_variates.diagnostics import goodness_of_fit
from pysatl_variates.errors import InvalidParameterError
from pysatl_variates.types import Kind, VariateName

from ..base import BaseFamilyTest


class TestExponentialFamily(BaseFamilyTest):
    """Test suite for Exponential family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_variates_register()
        self.exponential_family = registry.get(VariateName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(rate=0.5)

    def test_family_properties(self):
        assert self.exponential_family.name == VariateName.EXPONENTIAL
        assert self.exponential_family.kind is Kind.CONTINUOUS

        assert set(self.exponential_family.parametrization_names) == {"rate", "scale"}
        assert self.exponential_family.base_parametrization_name == "rate"

    def test_rate_parametrization_creation(self):
        dist = self.exponential_family(rate=0.5)

        assert dist.family_name == VariateName.EXPONENTIAL
        assert dist.parameters.parameters == {"rate": 0.5}
        assert dist.parametrization_name == "rate"

    def test_default_rate(self):
        assert self.exponential_family().parameters.parameters == {"rate": 1.0}

    def test_scale_parametrization_creation(self):
        dist = self.exponential_family("scale", scale=2.0)

        assert dist.parameters.parameters == {"scale": 2.0}
        assert dist.parametrization_name == "scale"
        assert dist.base_parameters.parameters == pytest.approx({"rate": 0.5})

    def test_parametrization_constraints(self):
        with pytest.raises(InvalidParameterError, match="rate > 0"):
            self.exponential_family(rate=-1.0)

        # InvalidParameterError is a ValueError
        with pytest.raises(ValueError, match="scale > 0"):
            self.exponential_family("scale", scale=0.0)

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_rate",
        [
            ("rate", {"rate": 0.5}, 0.5),
            ("scale", {"scale": 4.0}, 0.25),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params, expected_rate):
        family = self.exponential_family
        base_params = family.to_base(family.get_parametrization(parametrization_name)(**params))

        assert abs(base_params.parameters["rate"] - expected_rate) < self.CALCULATION_PRECISION

    def test_support(self):
        support = self.exponential_dist_example.support

        assert support is not None
        assert 0.0 in support
        assert -1e-9 not in support

    def test_sampling(self):
        arr = self.draw_sample(self.exponential_dist_example, n=5_000)

        assert float(arr.mean()) == pytest.approx(2.0, abs=0.15)
        assert goodness_of_fit(arr, VariateName.EXPONENTIAL, rate=0.5).pvalue > 1e-4

    def test_scale_and_rate_sample_identically(self):
        by_rate = self.draw_sample(self.exponential_family(rate=0.25))
        by_scale = self.draw_sample(self.exponential_family("scale", scale=4.0))

        self.assert_arrays_almost_equal(by_rate, by_scale)
