"""
Soliton subpackage

Ideal and Robust Soliton degree distributions for fountain (LT) codes:

- probability mass functions (:mod:`.pmf`);
- extended-precision accumulation (:mod:`.precision`);
- split table builders (:mod:`.builder`);
- validated parametrizations (:mod:`.parametrizations`);
- table-backed distributions (:mod:`.distribution`);
- families and their registry (:mod:`.families`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .builder import build_ideal_splits, build_robust_splits
from .distribution import SolitonDistribution, robust_soliton, soliton
from .families import (
    SolitonFamily,
    SolitonFamilyRegister,
    configure_families_register,
    reset_families_register,
)
from .parametrizations import (
    IdealSolitonParametrization,
    Parametrization,
    ParametrizationConstraint,
    RobustSolitonParametrization,
    constraint,
    parametrization,
)
from .pmf import rho, ripple, spike_position, tau
from .precision import DEFAULT_PRECISION

__all__ = [
    # pmf
    "rho",
    "tau",
    "ripple",
    "spike_position",
    # builders
    "DEFAULT_PRECISION",
    "build_ideal_splits",
    "build_robust_splits",
    # parametrizations
    "Parametrization",
    "ParametrizationConstraint",
    "IdealSolitonParametrization",
    "RobustSolitonParametrization",
    "constraint",
    "parametrization",
    # distributions
    "SolitonDistribution",
    "soliton",
    "robust_soliton",
    # families
    "SolitonFamily",
    "SolitonFamilyRegister",
    "configure_families_register",
    "reset_families_register",
]
