"""
Error types raised by PySATL Variates.

Samplers never raise on valid input; these exceptions only surface when
parameters are validated explicitly or a rejection cap is imposed.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """Raised when a parametrization violates one of its constraints."""


class SamplingExhaustedError(RuntimeError):
    """
    Raised when a rejection sampler exceeds its iteration cap.

    Parameters
    ----------
    iterations : int
        Number of candidate draws made before giving up.
    """

    def __init__(self, iterations: int) -> None:
        super().__init__(f"Rejection sampler did not accept a candidate in {iterations} iterations")
        self.iterations = iterations


__all__ = [
    "InvalidParameterError",
    "SamplingExhaustedError",
]
