"""
Weibull family implementation.
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


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull family.
    """

    if VariateFamilyRegister.contains(VariateName.WEIBULL):
        return

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_ScaleShape, parameters)
        return variates.weibull(source, parameters.scale, parameters.shape)

    Weibull = VariateFamily(
        name=VariateName.WEIBULL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["scaleShape"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0),
    )
    Weibull.__doc__ = """
    Weibull distribution with scale λ and shape k, sampled as
    ``λ * (-ln u) ** (1 / k)``. ``k = 1`` reduces to the exponential
    distribution with rate ``1 / λ``.
    """

    @parametrization(family=Weibull, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Scale λ.
        shape : float
            Shape k.
        """

        scale: float = 1.0
        shape: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    VariateFamilyRegister.register(Weibull)
