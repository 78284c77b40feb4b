"""
Sampling Interfaces
===================

Sample containers and the strategies that fill them:

- :class:`Sample` protocol and the array-backed :class:`ArraySample`.
- :class:`SamplingStrategy` protocol.
- :class:`DefaultVariateSamplingStrategy`: draws ``(n, 1)`` samples by calling
  the distribution's sampler ``n`` times against one uniform source.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_variates.sources import NumpyUniformSource

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_variates.distribution import VariateDistribution

logger = logging.getLogger(__name__)


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)

    def ravel(self) -> npt.NDArray[np.floating[Any]]:
        """Return the samples as a flat 1D array."""
        return self.data.ravel()


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: VariateDistribution, **options: Any) -> Sample: ...


class DefaultVariateSamplingStrategy:
    """
    Default univariate sampler.

    Options
    -------
    source : UniformSource, optional
        Source to draw from. A fresh :class:`NumpyUniformSource` is used when
        omitted.
    max_iterations : int, optional
        Rejection cap forwarded to the distribution's sampler.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``; Bernoulli outcomes are stored as
        ``0.0``/``1.0``.
    """

    def sample(self, n: int, distr: VariateDistribution, **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")

        source = options.get("source")
        if source is None:
            source = NumpyUniformSource()
        max_iterations = options.get("max_iterations")

        logger.debug("Drawing %d variates from %s", n, distr.family_name)
        vals = np.fromiter(
            (float(distr.draw(source, max_iterations)) for _ in range(n)),
            dtype=np.float64,
            count=n,
        )
        return ArraySample(vals.reshape(n, 1))


__all__ = [
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "DefaultVariateSamplingStrategy",
]
