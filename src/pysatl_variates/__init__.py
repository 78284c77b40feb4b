"""
PySATL Variates
===============

Pseudo-random variate generators for common statistical distributions, all
built on an injected uniform ``[0, 1)`` source:

- single-variate samplers (:mod:`.variates`);
- uniform sources (:mod:`.sources`);
- parametrized families with validation and batch sampling (:mod:`.family`,
  :mod:`.builtins`, :mod:`.configuration`);
- a source-bound facade (:mod:`.generator`);
- scipy-based goodness-of-fit checks (:mod:`.diagnostics`).
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .configuration import configure_variates_register, reset_variates_register
from .diagnostics import goodness_of_fit, reference_distribution
from .distribution import VariateDistribution
from .errors import InvalidParameterError, SamplingExhaustedError
from .family import VariateFamily
from .generator import SamplingOptions, VariateGenerator
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import VariateFamilyRegister
from .sampling import ArraySample, DefaultVariateSamplingStrategy, Sample, SamplingStrategy
from .sources import NumpyUniformSource, UniformSource
from .types import *
from .types import __all__ as _types_all
from .variates import *
from .variates import __all__ as _variates_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    # sources
    "UniformSource",
    "NumpyUniformSource",
    # errors
    "InvalidParameterError",
    "SamplingExhaustedError",
    # families
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
    "VariateFamily",
    "VariateDistribution",
    "VariateFamilyRegister",
    "configure_variates_register",
    "reset_variates_register",
    # sampling
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "DefaultVariateSamplingStrategy",
    # facade
    "SamplingOptions",
    "VariateGenerator",
    # diagnostics
    "reference_distribution",
    "goodness_of_fit",
    *_types_all,
    *_variates_all,
]

del _types_all
del _variates_all
