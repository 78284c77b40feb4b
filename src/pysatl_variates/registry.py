"""
Global registry for variate families using singleton pattern.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_variates.family import VariateFamily

logger = logging.getLogger(__name__)


class VariateFamilyRegister:
    """
    Singleton registry for variate families.

    Maintains a global registry of all families, allowing them to be accessed
    by name.
    """

    _instance: ClassVar[VariateFamilyRegister | None] = None
    _registered_families: dict[str, VariateFamily]

    def __new__(cls) -> VariateFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> VariateFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family is registered under ``name``."""
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def register(cls, family: VariateFamily) -> None:
        """
        Register a new family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family
        logger.debug("Registered variate family %s", family.name)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


__all__ = ["VariateFamilyRegister"]
