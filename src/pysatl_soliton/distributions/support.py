from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_soliton.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def iter_leq(self, x: Number) -> Iterator[Number]: ...

    def prev(self, x: Number) -> Number | None: ...


@dataclass(frozen=True, slots=True)
class DegreeSupport(DiscreteSupport):
    """
    Support ``{1, ..., k}`` of a degree distribution.

    Parameters
    ----------
    k : int
        Largest degree. Must be positive.
    """

    k: int

    def __post_init__(self) -> None:
        if self.k < 1:
            raise ValueError("k must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        is_integer = np.isfinite(xf) & (xf == np.floor(xf))
        result = is_integer & (xf >= 1) & (xf <= self.k)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[int]:
        return iter(range(1, self.k + 1))

    def iter_leq(self, x: Number) -> Iterator[int]:
        threshold = int(floor(float(x)))
        return iter(range(1, min(threshold, self.k) + 1))

    def prev(self, x: Number) -> int | None:
        if float(x) <= 1:
            return None
        target = int(floor(float(x)))
        if target == float(x):
            target -= 1
        return min(target, self.k)

    def first(self) -> int:
        return 1

    def last(self) -> int:
        return self.k

    def next(self, current: int) -> int | None:
        nxt = current + 1
        if nxt > self.k:
            return None
        return nxt

    def __len__(self) -> int:
        return self.k

    __iter__ = iter_points


__all__ = [
    "Support",
    "DiscreteSupport",
    "DegreeSupport",
]
