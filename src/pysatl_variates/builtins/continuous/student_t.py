"""
Student-t family implementation.
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


def configure_student_t_family() -> None:
    """
    Configure and register the Student-t family.
    """

    if VariateFamilyRegister.contains(VariateName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution.

    ``T = Z / sqrt(X / n)`` with ``Z`` standard normal and ``X`` chi-square.
    The chi-square draw uses ``int(n)`` degrees of freedom while the real
    ``n`` is kept in the denominator, so fractional ``n`` does not give an
    exact t distribution.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return variates.student_t(source, parameters.df)

    StudentT = VariateFamily(
        name=VariateName.STUDENT_T,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["df"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(),
    )
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="df")
    class _DegreesOfFreedom(Parametrization):
        df: float = 10.0

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    VariateFamilyRegister.register(StudentT)
