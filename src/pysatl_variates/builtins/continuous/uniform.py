"""
Continuous uniform family with bounds and mean-width parametrizations.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_variates import variates
from pysatl_variates.family import VariateFamily
from pysatl_variates.parametrizations import Parametrization, constraint, parametrization
from pysatl_variates.registry import VariateFamilyRegister
from pysatl_variates.types import Interval1D, Kind, VariateName

if TYPE_CHECKING:
    from pysatl_variates.sources import UniformSource


def configure_uniform_family() -> None:
    """
    Configure and register the continuous uniform family.
    """

    if VariateFamilyRegister.contains(VariateName.UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution on ``[a, b)``.

    Sampled as ``a + (b - a) * u`` from a single uniform draw.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_Bounds, parameters)
        return variates.uniform(source, parameters.a, parameters.b)

    def _support(parameters: Parametrization) -> Interval1D:
        parameters = cast(_Bounds, parameters)
        return Interval1D(left=parameters.a, right=parameters.b, right_closed=False)

    Uniform = VariateFamily(
        name=VariateName.UNIFORM,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["bounds", "meanWidth"],
        sampler=_draw,
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="bounds")
    class _Bounds(Parametrization):
        """
        Bounds parametrization.

        Parameters
        ----------
        a : float
            Lower bound (inclusive).
        b : float
            Upper bound (exclusive).
        """

        a: float = 0.0
        b: float = 1.0

        @constraint(description="a <= b")
        def check_bounds_ordered(self) -> bool:
            return self.a <= self.b

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization.

        Parameters
        ----------
        mean : float
            Midpoint of the interval.
        width : float
            Length of the interval, ``b - a``.
        """

        mean: float = 0.5
        width: float = 1.0

        @constraint(description="width >= 0")
        def check_width_non_negative(self) -> bool:
            return self.width >= 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half = self.width / 2.0
            return _Bounds(a=self.mean - half, b=self.mean + half)

    VariateFamilyRegister.register(Uniform)
