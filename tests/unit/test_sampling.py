__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import numpy as np
import pytest

from pysatl_variates.configuration import configure_variates_register
from pysatl_variates.sampling import ArraySample, DefaultVariateSamplingStrategy
from pysatl_variates.types import VariateName
from tests.utils.mocks import ConstantUniformSource


class TestArraySample:
    def test_properties(self):
        data = np.arange(6, dtype=float).reshape(3, 2)
        sample = ArraySample(data)

        assert len(sample) == 3
        assert sample.shape == (3, 2)
        assert sample.dimension == 2
        assert sample.array is data
        assert [row.tolist() for row in sample] == [[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]]
        assert sample.ravel().tolist() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    @pytest.mark.parametrize("data", [np.zeros(4), np.zeros((2, 2, 2))])
    def test_requires_2d(self, data):
        with pytest.raises(ValueError, match="2D"):
            ArraySample(data)


class TestDefaultVariateSamplingStrategy:
    def setup_method(self):
        self.strategy = DefaultVariateSamplingStrategy()
        self.exponential = configure_variates_register().get(VariateName.EXPONENTIAL)(rate=1.0)

    def test_uses_given_source(self):
        src = ConstantUniformSource(np.exp(-3.0))

        sample = self.strategy.sample(4, self.exponential, source=src)

        assert src.consumed == 4
        np.testing.assert_allclose(sample.array, np.full((4, 1), 3.0))

    def test_fresh_source_when_omitted(self):
        sample = self.strategy.sample(100, self.exponential)

        assert sample.shape == (100, 1)
        assert (sample.array >= 0.0).all()

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            self.strategy.sample(-1, self.exponential)

    def test_distribution_delegates_to_strategy(self):
        sample = self.exponential.sample(3, source=ConstantUniformSource(np.exp(-1.0)))

        np.testing.assert_allclose(sample.ravel(), [1.0, 1.0, 1.0])

    def test_logs_sample_size(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pysatl_variates.sampling"):
            self.strategy.sample(2, self.exponential, source=ConstantUniformSource(0.5))

        assert "Drawing 2 variates from Exponential" in caplog.text
