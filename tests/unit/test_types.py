__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_variates.types import Interval1D, Kind, VariateName


class TestInterval1D:
    def test_infinite_endpoints_are_open(self):
        interval = Interval1D()

        assert not interval.left_closed
        assert not interval.right_closed
        assert 0.0 in interval
        assert math.inf not in interval

    @pytest.mark.parametrize(
        "interval, inside, outside",
        [
            (Interval1D(left=0.0), [0.0, 1e300], [-1e-12]),
            (Interval1D(left=0.0, left_closed=False), [1e-300], [0.0]),
            (Interval1D(left=0.0, right=1.0, right_closed=False), [0.0, 0.999], [1.0]),
            (Interval1D(left=0.0, right=1.0), [0.0, 1.0], [1.5, -0.5]),
        ],
    )
    def test_membership(self, interval, inside, outside):
        assert all(x in interval for x in inside)
        assert not any(x in interval for x in outside)

    def test_vectorized_contains(self):
        mask = Interval1D(left=-1.0, right=1.0).contains(np.array([-2.0, -1.0, 0.0, 1.0, 2.0]))

        assert mask.tolist() == [False, True, True, True, False]


def test_enum_values():
    assert Kind.DISCRETE != Kind.CONTINUOUS
    assert VariateName.CHI_SQUARE == "ChiSquare"
    assert VariateName("StudentT") is VariateName.STUDENT_T
    assert len(VariateName) == 14
