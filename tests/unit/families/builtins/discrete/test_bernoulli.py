"""
Tests for the Bernoulli family
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest

from pysatl_variates.configuration import configure_variates_register
from pysatl_variates.diagnostics import goodness_of_fit, reference_distribution
from pysatl_variates.types import Kind, VariateName
from tests.utils.mocks import ConstantUniformSource

from ..base import BaseFamilyTest


class TestBernoulliFamily(BaseFamilyTest):
    def setup_method(self):
        registry = configure_variates_register()
        self.bernoulli_family = registry.get(VariateName.BERNOULLI)

    def test_is_discrete(self):
        assert self.bernoulli_family.kind is Kind.DISCRETE

    def test_draw_returns_bool(self):
        dist = self.bernoulli_family(p=0.5)

        assert dist.draw(ConstantUniformSource(0.5)) is True
        assert dist.draw(ConstantUniformSource(0.75)) is False

    @pytest.mark.parametrize("p", [0.0, 0.2, 1.0])
    def test_samples_are_zero_or_one(self, p):
        arr = self.draw_sample(self.bernoulli_family(p=p), n=5_000)

        assert set(np.unique(arr)) <= {0.0, 1.0}
        assert float(arr.mean()) == pytest.approx(p, abs=0.03)

    def test_reference_is_scipy_bernoulli(self):
        assert reference_distribution(VariateName.BERNOULLI, p=0.3).mean() == pytest.approx(0.3)

    def test_ks_test_rejected_for_discrete(self):
        with pytest.raises(ValueError, match="discrete"):
            goodness_of_fit(np.zeros(10), VariateName.BERNOULLI)

    def test_support_bounds_outcomes_only(self):
        dist = self.bernoulli_family(p=0.3)

        assert 0.0 in dist.support
        assert 1.0 in dist.support
        assert 0.5 in dist.support
        assert "endpoints" in self.bernoulli_family.__doc__
        assert set(np.unique(self.draw_sample(dist, n=500))) <= {0.0, 1.0}
