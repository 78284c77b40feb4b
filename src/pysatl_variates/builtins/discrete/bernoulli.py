"""
Bernoulli family implementation.
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


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli family.
    """

    if VariateFamilyRegister.contains(VariateName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli trial with success probability p.

    A trial succeeds when the uniform draw is ``<= p``. Batched samples store
    success as ``1.0`` and failure as ``0.0``.

    The support is reported as the closed interval ``[0, 1]``, which only
    bounds the outcomes: the sampler yields the two endpoints and nothing in
    between, even though ``0.5 in support`` is True.
    """

    def _draw(parameters: Parametrization, source: UniformSource, _: int | None) -> bool:
        parameters = cast(_Probability, parameters)
        return variates.bernoulli(source, parameters.p)

    Bernoulli = VariateFamily(
        name=VariateName.BERNOULLI,
        kind=Kind.DISCRETE,
        distr_parametrizations=["probability"],
        sampler=_draw,
        support_by_parametrization=lambda _: Interval1D(left=0.0, right=1.0),
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="probability")
    class _Probability(Parametrization):
        p: float = 0.5

        @constraint(description="0 <= p <= 1")
        def check_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    VariateFamilyRegister.register(Bernoulli)
