"""
Variate family definitions and management infrastructure.

A :class:`VariateFamily` ties together a family's parametrizations, its
support and the sampler from :mod:`pysatl_variates.variates` that draws a
single variate given base parameters.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, TypeAlias, dataclass_transform

from pysatl_variates.distribution import VariateDistribution
from pysatl_variates.sampling import DefaultVariateSamplingStrategy

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.parametrizations import Parametrization
    from pysatl_variates.sampling import SamplingStrategy
    from pysatl_variates.sources import UniformSource
    from pysatl_variates.types import Interval1D, Kind, ParametrizationName

    Sampler: TypeAlias = Callable[[Parametrization, UniformSource, int | None], float | bool]
    SupportResolver: TypeAlias = Callable[[Parametrization], Interval1D | None]


class VariateFamily:
    """
    A family of variates with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the family.
    kind : Kind
        Whether the family is discrete or continuous.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    sampler : Callable[[Parametrization, UniformSource, int | None], float | bool]
        Draws one variate from base parameters, a source and an optional
        rejection cap.
    support_by_parametrization : Callable or None, optional
        Returns the support for given base parameters.
    sampling_strategy : SamplingStrategy, optional
        Strategy used by :meth:`VariateDistribution.sample`.
    """

    def __init__(
        self,
        name: str,
        kind: Kind,
        distr_parametrizations: list[ParametrizationName],
        sampler: Sampler,
        support_by_parametrization: SupportResolver | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ):
        self._name = name
        self.kind = kind
        self._sampler = sampler

        if support_by_parametrization is None:
            self._support_resolver: SupportResolver = lambda _params: None
        else:
            self._support_resolver = support_by_parametrization

        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy = (
            DefaultVariateSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered or not declared by the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def draw(
        self,
        parameters: Parametrization,
        source: UniformSource,
        max_iterations: int | None = None,
    ) -> float | bool:
        """
        Draw one variate for ``parameters`` without validating them.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any registered parametrization.
        source : UniformSource
            Uniform source to draw from.
        max_iterations : int or None, default None
            Rejection cap, used by gamma-based families.
        """
        return self._sampler(self.to_base(parameters), source, max_iterations)

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> VariateDistribution:
        """
        Create a distribution instance with given parameters.

        Omitted parameters take the defaults of the parametrization class.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        InvalidParameterError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        return VariateDistribution(
            family=self,
            parameters=parameters,
            base_parameters=base_parameters,
            support=self._support_resolver(base_parameters),
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Create a class decorator that registers a parametrization on this family."""
        from pysatl_variates.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = ["VariateFamily"]
