"""
Tests for the uniform, normal and exponential samplers.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
import pytest

from pysatl_variates import variates
from tests.utils.mocks import ConstantUniformSource, ReplayUniformSource


def _draws(func, source, n, *args):
    return np.array([func(source, *args) for _ in range(n)], dtype=np.float64)


class TestUniform:
    def test_replays_affine_transform(self):
        src = ReplayUniformSource([0.25])
        assert variates.uniform(src, 2.0, 6.0) == pytest.approx(3.0)
        assert src.remaining == 0

    def test_defaults_return_raw_draw(self):
        assert variates.uniform(ReplayUniformSource([0.375])) == 0.375

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (-3.0, 5.0), (10.0, 10.5)])
    def test_bounds_and_mean(self, source, a, b):
        arr = _draws(variates.uniform, source, 100_000, a, b)

        assert ((arr >= a) & (arr < b)).all()
        assert float(arr.mean()) == pytest.approx((a + b) / 2, abs=0.01 * (b - a))

    def test_degenerate_interval(self, source):
        assert variates.uniform(source, 4.0, 4.0) == 4.0


class TestNormal:
    def test_fixed_sequence(self):
        src = ReplayUniformSource([0.5, 0.25])

        result = variates.normal(src, 0.0, 1.0)

        expected = math.sqrt(-2.0 * math.log(0.5)) * math.cos(2.0 * math.pi * 0.25)
        assert result == pytest.approx(expected, abs=1e-12)
        assert result == pytest.approx(0.0, abs=1e-12)
        assert src.consumed == 2

    def test_first_draw_feeds_radius(self):
        src = ReplayUniformSource([math.exp(-2.0), 0.0])
        # radius sqrt(4) = 2, angle 0
        assert variates.normal(src, 1.0, 3.0) == pytest.approx(7.0)

    def test_gaussian_is_alias(self):
        assert variates.gaussian is variates.normal

    def test_moments(self, source):
        arr = _draws(variates.normal, source, 100_000)

        assert float(arr.mean()) == pytest.approx(0.0, abs=0.05)
        assert float(arr.var()) == pytest.approx(1.0, abs=0.05)

    def test_location_and_scale(self, source):
        arr = _draws(variates.normal, source, 50_000, 5.0, 2.0)

        assert float(arr.mean()) == pytest.approx(5.0, abs=0.05)
        assert float(arr.std()) == pytest.approx(2.0, abs=0.05)

    def test_zero_draw_is_not_trapped(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = variates.normal(ReplayUniformSource([0.0, 0.0]))
        assert math.isinf(result)


class TestExponential:
    def test_inverse_transform(self):
        src = ReplayUniformSource([math.exp(-3.0)])
        assert variates.exponential(src, 2.0) == pytest.approx(1.5)

    def test_non_negative_and_mean(self, source):
        rate = 2.0
        arr = _draws(variates.exponential, source, 50_000, rate)

        assert (arr >= 0.0).all()
        assert float(arr.mean()) == pytest.approx(1.0 / rate, abs=0.02)

    def test_zero_draw_gives_infinity(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = variates.exponential(ConstantUniformSource(0.0), 1.0)
        assert result == math.inf
