"""
Tests for the soliton families registry.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_soliton.soliton import (
    IdealSolitonParametrization,
    SolitonDistribution,
    SolitonFamily,
    SolitonFamilyRegister,
    build_ideal_splits,
    configure_families_register,
)
from pysatl_soliton.types import FamilyName


class TestFamiliesRegister:
    def test_builtin_families_registered(self):
        registry = configure_families_register()
        assert set(registry.names()) == {FamilyName.SOLITON, FamilyName.ROBUST_SOLITON}

    def test_configuration_is_cached(self):
        assert configure_families_register() is configure_families_register()

    def test_unknown_family(self):
        configure_families_register()
        with pytest.raises(ValueError, match="No family Raptor found"):
            SolitonFamilyRegister.get("Raptor")

    def test_duplicate_family(self):
        configure_families_register()
        family = SolitonFamily(
            name=FamilyName.SOLITON,
            parametrization=IdealSolitonParametrization,
            builder=lambda *, k: build_ideal_splits(k),
        )
        with pytest.raises(ValueError, match="already found in register"):
            SolitonFamilyRegister.register(family)

    def test_custom_family(self, rng):
        configure_families_register()
        SolitonFamilyRegister.register(
            SolitonFamily(
                name="Uniform",
                parametrization=IdealSolitonParametrization,
                builder=lambda *, k: np.arange(1, k + 1) / k,
            )
        )
        dist = SolitonFamilyRegister.get("Uniform")(rng, k=4)
        assert dist.splits.tolist() == [0.25, 0.5, 0.75, 1.0]
        assert dist.family_name == "Uniform"


class TestFamilyCall:
    def setup_method(self):
        registry = configure_families_register()
        self.ideal_family = registry.get(FamilyName.SOLITON)
        self.robust_family = registry.get(FamilyName.ROBUST_SOLITON)

    def test_parameter_names(self):
        assert self.ideal_family.parameter_names == ["k"]
        assert self.robust_family.parameter_names == ["k", "c", "delta"]

    def test_ideal_matches_direct_construction(self, rng):
        assert self.ideal_family(rng, k=30) == SolitonDistribution.ideal(rng, 30)

    def test_robust_matches_direct_construction(self, rng):
        from_family = self.robust_family(rng, k=300, c=0.1, delta=0.5)
        assert from_family == SolitonDistribution.robust(rng, 300, 0.1, 0.5)
        assert from_family.family_name == FamilyName.ROBUST_SOLITON

    def test_precision_option(self, rng):
        dist = self.robust_family(rng, k=300, c=0.1, delta=0.5, precision=100)
        assert dist == SolitonDistribution.robust(rng, 300, 0.1, 0.5, precision=100)
        assert self.ideal_family(rng, k=3, precision=100).k == 3

    @pytest.mark.parametrize(
        "params",
        [{}, {"k": 10, "c": 0.1}, {"k": 10, "c": 0.1, "delta": 0.5, "extra": 1}],
        ids=["none", "missing", "unexpected"],
    )
    def test_parameter_set_checked(self, rng, params):
        with pytest.raises(ValueError, match="expects parameters"):
            self.robust_family(rng, **params)

    def test_domain_checked(self, rng):
        with pytest.raises(ValueError, match="0 < delta < 1"):
            self.robust_family(rng, k=10, c=0.1, delta=2.0)
