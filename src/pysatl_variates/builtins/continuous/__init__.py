"""
Built-in continuous variate families.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.builtins.continuous.beta import configure_beta_family
from pysatl_variates.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_variates.builtins.continuous.chi_square import configure_chi_square_family
from pysatl_variates.builtins.continuous.erlang import configure_erlang_family
from pysatl_variates.builtins.continuous.exponential import configure_exponential_family
from pysatl_variates.builtins.continuous.f import configure_f_family
from pysatl_variates.builtins.continuous.gamma import configure_gamma_family
from pysatl_variates.builtins.continuous.normal import configure_normal_family
from pysatl_variates.builtins.continuous.pareto import configure_pareto_family
from pysatl_variates.builtins.continuous.rayleigh import configure_rayleigh_family
from pysatl_variates.builtins.continuous.student_t import configure_student_t_family
from pysatl_variates.builtins.continuous.uniform import configure_uniform_family
from pysatl_variates.builtins.continuous.weibull import configure_weibull_family

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
]
