"""
Variate Families Configuration
==============================

Registers the built-in variate families in the global
:class:`~pysatl_variates.registry.VariateFamilyRegister`.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_square_family,
    configure_erlang_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_normal_family,
    configure_pareto_family,
    configure_rayleigh_family,
    configure_student_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_variates.registry import VariateFamilyRegister


@lru_cache(maxsize=1)
def configure_variates_register() -> VariateFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Safe to call repeatedly; the registry is built once and cached.

    Returns
    -------
    VariateFamilyRegister
        The global registry of variate families.
    """
    configure_uniform_family()
    configure_normal_family()
    configure_exponential_family()
    configure_weibull_family()
    configure_rayleigh_family()
    configure_pareto_family()
    configure_cauchy_family()
    configure_erlang_family()
    configure_gamma_family()
    configure_chi_square_family()
    configure_student_t_family()
    configure_f_family()
    configure_beta_family()
    configure_bernoulli_family()
    return VariateFamilyRegister()


def reset_variates_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_variates_register.cache_clear()
    VariateFamilyRegister._reset()


__all__ = [
    "configure_variates_register",
    "reset_variates_register",
]
