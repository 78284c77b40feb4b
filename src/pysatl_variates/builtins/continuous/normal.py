"""
Normal (Gaussian) family.

Contains the Normal family with mean-standard deviation and mean-precision
parametrizations.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_variates import variates
from pysatl_variates.family import VariateFamily
from pysatl_variates.parametrizations import Parametrization, constraint, parametrization
from pysatl_variates.registry import VariateFamilyRegister
from pysatl_variates.types import Interval1D, Kind, VariateName

if TYPE_CHECKING:
    from pysatl_variates.sources import UniformSource


def configure_normal_family() -> None:
    """
    Configure and register the Normal family.
    """

    if VariateFamilyRegister.contains(VariateName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Variates come from the Box–Muller transform: two uniform draws ``u1, u2``
    give ``stddev * sqrt(-2 ln u1) * cos(2 pi u2) + mean``.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> float:
        parameters = cast(_MeanStd, parameters)
        return variates.normal(source, parameters.mean, parameters.stddev)

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D()

    Normal = VariateFamily(
        name=VariateName.NORMAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["meanStd", "meanPrec"],
        sampler=_draw,
        support_by_parametrization=_support,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Mean-standard deviation parametrization.

        Parameters
        ----------
        mean : float
            Mean of the distribution.
        stddev : float
            Standard deviation of the distribution.
        """

        mean: float = 0.0
        stddev: float = 1.0

        @constraint(description="stddev >= 0")
        def check_stddev_non_negative(self) -> bool:
            return self.stddev >= 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization.

        Parameters
        ----------
        mean : float
            Mean of the distribution.
        tau : float
            Precision (inverse variance).
        """

        mean: float = 0.0
        tau: float = 1.0

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mean=self.mean, stddev=math.sqrt(1 / self.tau))

    VariateFamilyRegister.register(Normal)
