"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Soliton.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays (split tables, PMF vectors)."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@runtime_checkable
class UniformSource(Protocol):
    """
    Source of i.i.d. uniform variates on ``[0, 1)``.

    Both :class:`numpy.random.Generator` and :class:`random.Random` satisfy
    this protocol. The source is owned by the caller; distributions only keep
    a reference to it.
    """

    def random(self) -> float: ...


class FamilyName(StrEnum):
    SOLITON = "Soliton"
    ROBUST_SOLITON = "RobustSoliton"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "UniformSource",
    "FamilyName",
]
