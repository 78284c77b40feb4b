"""
Beta family implementation.
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


def configure_beta_family() -> None:
    """
    Configure and register the Beta family.
    """

    if VariateFamilyRegister.contains(VariateName.BETA):
        return

    BETA_DOC = """
    Beta distribution on (0, 1).

    With ``X ~ Gamma(a, 1)`` and ``Y ~ Gamma(b, 1)``, ``X / (X + Y)`` follows
    ``Beta(a, b)``. Both gamma draws share the rejection cap.
    """

    def _draw(
        parameters: Parametrization, source: UniformSource, max_iterations: int | None
    ) -> float:
        parameters = cast(_Shapes, parameters)
        return variates.beta(source, parameters.a, parameters.b, max_iterations)

    Beta = VariateFamily(
        name=VariateName.BETA,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["shapes"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(
            left=0.0, right=1.0, left_closed=False, right_closed=False
        ),
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Parameters
        ----------
        a : float
            First shape α.
        b : float
            Second shape β.
        """

        a: float = 2.0
        b: float = 5.0

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

    VariateFamilyRegister.register(Beta)
