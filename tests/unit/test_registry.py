__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates import variates
from pysatl_variates.configuration import configure_variates_register, reset_variates_register
from pysatl_variates.family import VariateFamily
from pysatl_variates.parametrizations import Parametrization
from pysatl_variates.registry import VariateFamilyRegister
from pysatl_variates.types import Kind


def _toy_family(name: str = "Toy") -> VariateFamily:
    return VariateFamily(
        name=name,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["default"],
        sampler=lambda params, source, _cap: variates.uniform(source),
    )


class TestVariateFamilyRegister:
    def test_singleton(self):
        assert VariateFamilyRegister() is VariateFamilyRegister()

    def test_register_and_get(self):
        family = _toy_family()
        VariateFamilyRegister.register(family)

        assert VariateFamilyRegister.get("Toy") is family
        assert VariateFamilyRegister.contains("Toy")
        assert VariateFamilyRegister.names() == ["Toy"]

    def test_duplicate_name(self):
        VariateFamilyRegister.register(_toy_family())

        with pytest.raises(ValueError, match="already"):
            VariateFamilyRegister.register(_toy_family())

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="No family Toy"):
            VariateFamilyRegister.get("Toy")

    def test_reset_forgets_families(self):
        VariateFamilyRegister.register(_toy_family())
        VariateFamilyRegister._reset()

        assert not VariateFamilyRegister.contains("Toy")

    def test_configuration_rebuilds_after_reset(self):
        first = configure_variates_register().get("Gamma")
        reset_variates_register()
        second = configure_variates_register().get("Gamma")

        assert first is not second
        assert first.parametrization_names == second.parametrization_names


class TestVariateFamily:
    def test_base_requires_registration(self):
        with pytest.raises(ValueError, match="not registered"):
            _ = _toy_family().base

    def test_undeclared_parametrization(self):
        family = _toy_family()

        with pytest.raises(ValueError, match="not declared"):

            @family.parametrization(name="other")
            class Other(Parametrization):
                pass

    def test_without_support_resolver(self):
        family = _toy_family()

        @family.parametrization(name="default")
        class Default(Parametrization):
            pass

        dist = family()
        assert dist.support is None
        assert dist.parametrization_name == "default"
