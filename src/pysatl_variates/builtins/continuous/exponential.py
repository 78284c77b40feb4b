"""
Exponential family implementation.

Contains the Exponential family with rate and scale parametrizations.
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


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential family.
    """

    if VariateFamilyRegister.contains(VariateName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ). Variates are drawn by inverse
    transform, ``-ln(u) / λ``.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_Rate, parameters)
        return variates.exponential(source, parameters.rate)

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D(left=0.0)

    Exponential = VariateFamily(
        name=VariateName.EXPONENTIAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["rate", "scale"],
        sampler=_draw,
        support_by_parametrization=_support,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        rate : float
            Rate parameter (λ) of the distribution.
        """

        rate: float = 1.0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        scale : float
            Scale parameter (β) of the distribution, β = 1/λ.
        """

        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(rate=1.0 / self.scale)

    VariateFamilyRegister.register(Exponential)
