"""
Chi-square family implementation.
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


def configure_chi_square_family() -> None:
    """
    Configure and register the Chi-square family.
    """

    if VariateFamilyRegister.contains(VariateName.CHI_SQUARE):
        return

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return variates.chi_square(source, int(parameters.df))

    ChiSquare = VariateFamily(
        name=VariateName.CHI_SQUARE,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["df"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0),
    )
    ChiSquare.__doc__ = "Chi-square distribution: sum of k squared standard normal draws."

    @parametrization(family=ChiSquare, name="df")
    class _DegreesOfFreedom(Parametrization):
        df: int = 10

        @constraint(description="df is a positive integer")
        def check_df_positive_integer(self) -> bool:
            return float(self.df).is_integer() and self.df >= 1

    VariateFamilyRegister.register(ChiSquare)
