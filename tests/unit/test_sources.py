__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_variates.sources import NumpyUniformSource, UniformSource
from tests.utils.mocks import ConstantUniformSource, ReplayUniformSource


class TestNumpyUniformSource:
    def test_seeded_reproducibility(self):
        a = NumpyUniformSource(seed=42)
        b = NumpyUniformSource(seed=42)

        assert [a.next_uniform() for _ in range(10)] == [b.next_uniform() for _ in range(10)]

    def test_values_in_unit_interval(self):
        src = NumpyUniformSource(seed=0)
        values = [src.next_uniform() for _ in range(10_000)]

        assert all(isinstance(v, float) for v in values)
        assert min(values) >= 0.0
        assert max(values) < 1.0

    def test_wraps_existing_generator(self):
        rng = np.random.default_rng(3)
        src = NumpyUniformSource(rng)

        assert src.generator is rng
        assert src.next_uniform() == np.random.default_rng(3).random()

    def test_draw_array_matches_single_draws(self):
        batch = NumpyUniformSource(seed=8).draw_array(5)
        single = NumpyUniformSource(seed=8)

        np.testing.assert_array_equal(batch, [single.next_uniform() for _ in range(5)])


def test_protocol_is_structural():
    assert isinstance(NumpyUniformSource(), UniformSource)
    assert isinstance(ReplayUniformSource([0.5]), UniformSource)
    assert isinstance(ConstantUniformSource(0.5), UniformSource)
    assert not isinstance(object(), UniformSource)
