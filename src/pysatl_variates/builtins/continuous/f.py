"""
F (Fisher–Snedecor) family implementation.
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


def configure_f_family() -> None:
    """
    Configure and register the F family.
    """

    if VariateFamilyRegister.contains(VariateName.F):
        return

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return variates.f_distribution(source, int(parameters.d1), int(parameters.d2))

    F = VariateFamily(
        name=VariateName.F,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["df"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0),
    )
    F.__doc__ = "F distribution: ratio of two chi-square draws, each divided by its df."

    @parametrization(family=F, name="df")
    class _DegreesOfFreedom(Parametrization):
        """
        Parameters
        ----------
        d1 : int
            Numerator degrees of freedom.
        d2 : int
            Denominator degrees of freedom.
        """

        d1: int = 4
        d2: int = 6

        @constraint(description="d1 is a positive integer")
        def check_d1_positive_integer(self) -> bool:
            return float(self.d1).is_integer() and self.d1 >= 1

        @constraint(description="d2 is a positive integer")
        def check_d2_positive_integer(self) -> bool:
            return float(self.d2).is_integer() and self.d2 >= 1

    VariateFamilyRegister.register(F)
