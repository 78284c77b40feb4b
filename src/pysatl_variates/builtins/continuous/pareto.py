"""
Pareto family implementation.
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


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto family.
    """

    if VariateFamilyRegister.contains(VariateName.PARETO):
        return

    PARETO_DOC = """
    Pareto (type I) distribution.

    Parametrized by the scale ``x_m`` (the minimum value) and the shape ``α``.
    Variates are ``x_m * u ** (-1 / α)`` and never fall below ``x_m``.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_ScaleShape, parameters)
        return variates.pareto(source, parameters.scale, parameters.shape)

    def _support(parameters: Parametrization) -> Interval1D:
        parameters = cast(_ScaleShape, parameters)
        return Interval1D(left=parameters.scale)

    Pareto = VariateFamily(
        name=VariateName.PARETO,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["scaleShape"],
        sampler=_draw,
        support_by_parametrization=_support,
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Minimum value ``x_m``.
        shape : float
            Tail index ``α``.
        """

        scale: float = 2.0
        shape: float = 3.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    VariateFamilyRegister.register(Pareto)
