"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol implemented by
table-backed degree distributions.

Notes
-----
- ``sample()`` without arguments draws a single degree; ``sample(n)`` returns
  a :class:`~pysatl_soliton.distributions.sampling.Sample` built by the
  distribution's sampling strategy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

if TYPE_CHECKING:
    from pysatl_soliton.distributions.sampling import Sample
    from pysatl_soliton.distributions.strategies import SamplingStrategy
    from pysatl_soliton.distributions.support import DiscreteSupport
    from pysatl_soliton.types import DistributionType, FloatArray, UniformSource


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by sampling strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> DiscreteSupport: ...

    @property
    def source(self) -> UniformSource: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @overload
    def sample(self) -> int: ...
    @overload
    def sample(self, n: int) -> Sample: ...

    def sample(self, n: int | None = None) -> int | Sample: ...

    def pmf(self) -> FloatArray: ...

    def mean(self) -> float: ...
