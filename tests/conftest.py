from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_variates.configuration import reset_variates_register
from pysatl_variates.sources import NumpyUniformSource

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_variates_register()
    yield


@pytest.fixture
def source() -> NumpyUniformSource:
    """Seeded source so that statistical assertions are reproducible."""
    return NumpyUniformSource(seed=20250519)
