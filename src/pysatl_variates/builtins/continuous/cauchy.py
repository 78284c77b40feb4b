"""
Cauchy family implementation.
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


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy family.
    """

    if VariateFamilyRegister.contains(VariateName.CAUCHY):
        return

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_LocationScale, parameters)
        return variates.cauchy(source, parameters.location, parameters.scale)

    Cauchy = VariateFamily(
        name=VariateName.CAUCHY,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["locationScale"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(),
    )
    Cauchy.__doc__ = """
    Cauchy distribution with location x0 and scale γ.

    Heavy-tailed: mean and variance are undefined, so sample moments do not
    converge.
    """

    @parametrization(family=Cauchy, name="locationScale")
    class _LocationScale(Parametrization):
        location: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    VariateFamilyRegister.register(Cauchy)
