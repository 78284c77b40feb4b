"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Variates.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of variate kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete variates (Bernoulli trials).
    CONTINUOUS : str
        Continuous variates.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class VariateName(StrEnum):
    """Names under which the built-in families are registered."""

    UNIFORM = "Uniform"
    NORMAL = "Normal"
    EXPONENTIAL = "Exponential"
    WEIBULL = "Weibull"
    RAYLEIGH = "Rayleigh"
    PARETO = "Pareto"
    CAUCHY = "Cauchy"
    ERLANG = "Erlang"
    GAMMA = "Gamma"
    CHI_SQUARE = "ChiSquare"
    STUDENT_T = "StudentT"
    F = "F"
    BETA = "Beta"
    BERNOULLI = "Bernoulli"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure, used to describe variate supports.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "Kind",
    "VariateName",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "ParametrizationName",
    "Interval1D",
]
