"""
Gamma family implementation.

Contains the Gamma family with shape-rate and shape-scale parametrizations.
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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma family.
    """

    if VariateFamilyRegister.contains(VariateName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Parametrized by shape (α) and rate (β), or by shape and scale (θ = 1/β).

    Variates come from the rejection method of Marsaglia and Tsang, also used
    by the GNU Scientific Library. Shapes below one are boosted to ``α + 1``
    and corrected by ``u ** (1 / α)``. The rejection loop may be capped with
    ``max_iterations``.
    """

    def _draw(
        parameters: Parametrization, source: UniformSource, max_iterations: int | None
    ) -> float:
        parameters = cast(_ShapeRate, parameters)
        return variates.gamma(source, parameters.shape, parameters.rate, max_iterations)

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D(left=0.0, left_closed=False)

    Gamma = VariateFamily(
        name=VariateName.GAMMA,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["shapeRate", "shapeScale"],
        sampler=_draw,
        support_by_parametrization=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization.

        Parameters
        ----------
        shape : float
            Shape α.
        rate : float
            Rate β.
        """

        shape: float = 2.0
        rate: float = 0.5

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization.

        Parameters
        ----------
        shape : float
            Shape α.
        scale : float
            Scale θ = 1/β.
        """

        shape: float = 2.0
        scale: float = 2.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)

    VariateFamilyRegister.register(Gamma)
