"""
Rayleigh family implementation.
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


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh family.
    """

    if VariateFamilyRegister.contains(VariateName.RAYLEIGH):
        return

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_Sigma, parameters)
        return variates.rayleigh(source, parameters.sigma)

    Rayleigh = VariateFamily(
        name=VariateName.RAYLEIGH,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["sigma"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0),
    )
    Rayleigh.__doc__ = "Rayleigh distribution with scale σ."

    @parametrization(family=Rayleigh, name="sigma")
    class _Sigma(Parametrization):
        sigma: float = 0.5

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    VariateFamilyRegister.register(Rayleigh)
