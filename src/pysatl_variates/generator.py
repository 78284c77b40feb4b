"""
Variate Generator
=================

:class:`VariateGenerator` binds one uniform source and exposes every sampler
as a method with its canonical defaults. Use one generator per thread, or
share a source behind an external lock.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates import variates
from pysatl_variates.configuration import configure_variates_register
from pysatl_variates.sources import NumpyUniformSource
from pysatl_variates.types import VariateName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_variates.sampling import Sample
    from pysatl_variates.sources import UniformSource


@dataclass(frozen=True, slots=True)
class SamplingOptions:
    """
    Options shared by all methods of a :class:`VariateGenerator`.

    Parameters
    ----------
    validate_parameters : bool, default False
        Check parameters against the family constraints before sampling and
        raise :class:`~pysatl_variates.errors.InvalidParameterError` on
        violation. Off by default: invalid parameters then produce whatever
        the formulas give.
    max_iterations : int or None, default None
        Cap on candidate draws in the gamma rejection loop (also used by
        beta). ``None`` keeps it unbounded.
    """

    validate_parameters: bool = False
    max_iterations: int | None = None

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}.")


class VariateGenerator:
    """
    Source-bound facade over :mod:`pysatl_variates.variates`.

    Parameters
    ----------
    source : UniformSource, optional
        Uniform source; defaults to a freshly seeded :class:`NumpyUniformSource`.
    options : SamplingOptions, optional
        Validation and rejection-cap settings.

    Notes
    -----
    Counts (Erlang shape, chi-square and F degrees of freedom) go through
    ``int()`` like in the family samplers, so integral floats such as ``2.0``
    are accepted.

    Examples
    --------
    >>> gen = VariateGenerator(NumpyUniformSource(seed=7))
    >>> x = gen.gamma(0.5, 1.0)
    >>> batch = gen.sample("Beta", 100, a=2.0, b=5.0)
    """

    def __init__(
        self,
        source: UniformSource | None = None,
        options: SamplingOptions | None = None,
    ) -> None:
        self._source: UniformSource = NumpyUniformSource() if source is None else source
        self.options = SamplingOptions() if options is None else options

    @property
    def source(self) -> UniformSource:
        """The uniform source all draws come from."""
        return self._source

    def _check(self, name: VariateName, **parameters: Any) -> None:
        if self.options.validate_parameters:
            configure_variates_register().get(name)(**parameters)

    def uniform(self, a: float = 0.0, b: float = 1.0) -> float:
        self._check(VariateName.UNIFORM, a=a, b=b)
        return variates.uniform(self._source, a, b)

    def normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        self._check(VariateName.NORMAL, mean=mean, stddev=stddev)
        return variates.normal(self._source, mean, stddev)

    gaussian = normal

    def exponential(self, rate: float = 1.0) -> float:
        self._check(VariateName.EXPONENTIAL, rate=rate)
        return variates.exponential(self._source, rate)

    def weibull(self, scale: float = 1.0, shape: float = 1.0) -> float:
        self._check(VariateName.WEIBULL, scale=scale, shape=shape)
        return variates.weibull(self._source, scale, shape)

    def rayleigh(self, sigma: float = 0.5) -> float:
        self._check(VariateName.RAYLEIGH, sigma=sigma)
        return variates.rayleigh(self._source, sigma)

    def pareto(self, scale: float = 2.0, shape: float = 3.0) -> float:
        self._check(VariateName.PARETO, scale=scale, shape=shape)
        return variates.pareto(self._source, scale, shape)

    def cauchy(self, location: float = 0.0, scale: float = 1.0) -> float:
        self._check(VariateName.CAUCHY, location=location, scale=scale)
        return variates.cauchy(self._source, location, scale)

    def erlang(self, shape: int = 2, rate: float = 0.5) -> float:
        self._check(VariateName.ERLANG, shape=shape, rate=rate)
        return variates.erlang(self._source, int(shape), rate)

    def gamma(self, shape: float = 2.0, rate: float = 0.5) -> float:
        self._check(VariateName.GAMMA, shape=shape, rate=rate)
        return variates.gamma(self._source, shape, rate, self.options.max_iterations)

    def chi_square(self, df: int = 10) -> float:
        self._check(VariateName.CHI_SQUARE, df=df)
        return variates.chi_square(self._source, int(df))

    def student_t(self, df: float = 10.0) -> float:
        self._check(VariateName.STUDENT_T, df=df)
        return variates.student_t(self._source, df)

    def f_distribution(self, d1: int = 4, d2: int = 6) -> float:
        self._check(VariateName.F, d1=d1, d2=d2)
        return variates.f_distribution(self._source, int(d1), int(d2))

    def beta(self, a: float = 2.0, b: float = 5.0) -> float:
        self._check(VariateName.BETA, a=a, b=b)
        return variates.beta(self._source, a, b, self.options.max_iterations)

    def bernoulli(self, p: float = 0.5) -> bool:
        self._check(VariateName.BERNOULLI, p=p)
        return variates.bernoulli(self._source, p)

    def sample(
        self,
        name: str,
        n: int,
        parametrization_name: str | None = None,
        **parameters: Any,
    ) -> Sample:
        """
        Draw ``n`` variates of a registered family.

        Parameters are always validated here, since they go through the
        family's parametrization.

        Parameters
        ----------
        name : str
            Family name, e.g. ``VariateName.GAMMA`` or ``"Gamma"``.
        n : int
            Number of variates.
        parametrization_name : str, optional
            Parametrization of ``parameters``; defaults to the base one.
        **parameters : Any
            Parameter values; omitted ones take the canonical defaults.

        Returns
        -------
        Sample
            Array sample of shape ``(n, 1)``.
        """
        family = configure_variates_register().get(name)
        distr = family(parametrization_name, **parameters)
        return distr.sample(n, source=self._source, max_iterations=self.options.max_iterations)


__all__ = [
    "SamplingOptions",
    "VariateGenerator",
]
