"""
Built-in discrete variate families.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.builtins.discrete.bernoulli import configure_bernoulli_family

__all__ = ["configure_bernoulli_family"]
