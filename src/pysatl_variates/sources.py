"""
Uniform Sources
===============

Every sampler in :mod:`pysatl_variates.variates` consumes draws from a
:class:`UniformSource`. Sources are passed explicitly so that callers can use
a fixed seed in tests or one source per thread.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for i.i.d. uniform draws in ``[0, 1)``."""

    def next_uniform(self) -> float: ...


class NumpyUniformSource:
    """
    Uniform source backed by a :class:`numpy.random.Generator`.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, default None
        Seed passed to :func:`numpy.random.default_rng`, or an existing
        generator to wrap as is.

    Notes
    -----
    Not synchronized. Share an instance between threads only behind an
    external lock.
    """

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying numpy generator."""
        return self._rng

    def next_uniform(self) -> float:
        """Draw one value in ``[0, 1)``, advancing the generator by one draw."""
        return float(self._rng.random())

    def draw_array(self, n: int) -> npt.NDArray[np.floating[Any]]:
        """Draw ``n`` uniforms at once."""
        return self._rng.random(n)


__all__ = [
    "UniformSource",
    "NumpyUniformSource",
]
