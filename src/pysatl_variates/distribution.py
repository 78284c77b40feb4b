"""
Concrete distribution instances with specific parameter values.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

    from pysatl_variates.family import VariateFamily
    from pysatl_variates.parametrizations import Parametrization
    from pysatl_variates.sampling import Sample, SamplingStrategy
    from pysatl_variates.sources import UniformSource
    from pysatl_variates.types import Interval1D, Kind


@dataclass(slots=True)
class VariateDistribution:
    """
    A specific distribution from a variate family.

    Parameters
    ----------
    family : VariateFamily
        Family the distribution was created from.
    parameters : Parametrization
        Parameter values as given by the caller.
    base_parameters : Parametrization
        The same values in the family's base parametrization.
    support : Interval1D or None
        Support of this distribution.
    """

    family: VariateFamily
    parameters: Parametrization
    base_parameters: Parametrization
    support: Interval1D | None

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self.family.name

    @property
    def kind(self) -> Kind:
        """Discrete or continuous."""
        return self.family.kind

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def draw(self, source: UniformSource, max_iterations: int | None = None) -> float | bool:
        """Draw a single variate from ``source``."""
        return self.family.draw(self.base_parameters, source, max_iterations)

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate ``n`` variates.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Passed to the sampling strategy (``source``, ``max_iterations``).

        Returns
        -------
        Sample
            Generated samples.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)


__all__ = ["VariateDistribution"]
