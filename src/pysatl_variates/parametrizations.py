"""
Parametrization classes and constraints for variate families.

A parametrization is a frozen dataclass holding one way of writing down a
family's parameters, together with the constraints they must satisfy and a
conversion to the family's base parametrization. Dataclass field defaults
carry the canonical parameter values of each family.

Example
-------
>>> @parametrization(family=Exponential, name="scale")
... class Scale(Parametrization):
...     scale: float = 1.0
...
...     @constraint(description="scale > 0")
...     def check_scale(self) -> bool:
...         return self.scale > 0
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from typing import TYPE_CHECKING

from pysatl_variates.errors import InvalidParameterError
from pysatl_variates.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar, TypeAlias

    from pysatl_variates.family import VariateFamily

    Predicate: TypeAlias = Callable[[Any], bool]

_CONSTRAINT_MARKER = "__variate_constraint__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    A named predicate over the values of one parametrization.

    Parameters
    ----------
    description : str
        Human-readable form of the condition, used in error messages.
    check : Callable[[Parametrization], bool]
        Returns True when the condition holds.
    """

    description: str
    check: Predicate

    def holds(self, parameters: Parametrization) -> bool:
        return bool(self.check(parameters))


class Parametrization(ABC):
    """
    Abstract base class for variate parametrizations.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`,
    which also sets the owning family, the parametrization name and the
    collected constraints.
    """

    __family__: ClassVar[VariateFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> str:
        """Name the parametrization was registered under."""
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return list(self._constraints)

    def violations(self) -> list[str]:
        """Descriptions of every constraint that does not hold."""
        return [c.description for c in self._constraints if not c.holds(self)]

    def validate(self) -> None:
        """
        Check the parameter values against all constraints.

        Raises
        ------
        InvalidParameterError
            Naming the family and every violated constraint.
        """
        failed = self.violations()
        if not failed:
            return
        family = self.__family__.name
        if len(failed) == 1:
            raise InvalidParameterError(f'{family}: constraint "{failed[0]}" does not hold')
        listed = ", ".join(f'"{d}"' for d in failed)
        raise InvalidParameterError(f"{family}: constraints {listed} do not hold")

    def transform_to_base_parametrization(self) -> Parametrization:
        """Express the same distribution in the family's base parametrization."""
        return self


def constraint(description: str) -> Callable[[Predicate], Predicate]:
    """
    Mark an instance method of a parametrization as a constraint.

    The method must take only ``self`` and return whether the condition
    described by ``description`` holds.
    """

    def mark(func: Predicate) -> Predicate:
        setattr(func, _CONSTRAINT_MARKER, description)
        return func

    return mark


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, (staticmethod, classmethod)):
            if hasattr(attr.__func__, _CONSTRAINT_MARKER):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        description = getattr(attr, _CONSTRAINT_MARKER, None)
        if callable(attr) and description is not None:
            found.append(ParametrizationConstraint(description=description, check=attr))
    return tuple(found)


def parametrization(
    *,
    family: VariateFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register the decorated class as parametrization ``name`` of ``family``.

    Plain classes become frozen slotted dataclasses. Methods marked with
    :func:`constraint` are collected in definition order.

    Raises
    ------
    TypeError
        If a static or class method is marked as a constraint.
    ValueError
        If the family does not declare ``name`` or already has it registered.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        checks = _collect_constraints(cls)
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = checks
        family.register_parametrization(name, cls)
        return cls

    return register


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
