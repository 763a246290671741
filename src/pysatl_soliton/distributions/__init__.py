"""
Distributions subpackage

Interfaces and default implementations shared by table-backed degree
distributions:

- distribution protocol (:mod:`.distribution`);
- discrete degree support (:mod:`.support`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import InverseTransformSamplingStrategy, SamplingStrategy
from .support import DegreeSupport, DiscreteSupport, Support

__all__ = [
    # distribution
    "Distribution",
    # support
    "Support",
    "DiscreteSupport",
    "DegreeSupport",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
