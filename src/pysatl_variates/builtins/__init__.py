"""
Built-in variate families for PySATL Variates.

This package contains the families available by default: one module per
family, grouped by kind.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.builtins.continuous import (
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
from pysatl_variates.builtins.discrete import configure_bernoulli_family

__all__ = [
    "configure_uniform_family",
    "configure_normal_family",
    "configure_exponential_family",
    "configure_weibull_family",
    "configure_rayleigh_family",
    "configure_pareto_family",
    "configure_cauchy_family",
    "configure_erlang_family",
    "configure_gamma_family",
    "configure_chi_square_family",
    "configure_student_t_family",
    "configure_f_family",
    "configure_beta_family",
    "configure_bernoulli_family",
]
