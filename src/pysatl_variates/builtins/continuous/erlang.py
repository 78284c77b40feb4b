"""
Erlang family implementation.
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


def configure_erlang_family() -> None:
    """
    Configure and register the Erlang family.
    """

    if VariateFamilyRegister.contains(VariateName.ERLANG):
        return

    ERLANG_DOC = """
    Erlang distribution.

    A gamma distribution with integer shape k, drawn as the sum of k
    independent unit exponentials each scaled by ``1 / rate``. The mean is
    ``k / rate``.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_ShapeRate, parameters)
        return variates.erlang(source, int(parameters.shape), parameters.rate)

    Erlang = VariateFamily(
        name=VariateName.ERLANG,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["shapeRate"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0),
    )
    Erlang.__doc__ = ERLANG_DOC

    @parametrization(family=Erlang, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Parameters
        ----------
        shape : int
            Number of exponential phases k.
        rate : float
            Rate β of each phase.
        """

        shape: int = 2
        rate: float = 0.5

        @constraint(description="shape is a positive integer")
        def check_shape_positive_integer(self) -> bool:
            return float(self.shape).is_integer() and self.shape >= 1

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    VariateFamilyRegister.register(Erlang)
