"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`InverseTransformSamplingStrategy` — draws ``(n, 1)`` integer
  samples by mapping i.i.d. uniforms through the split table.

Notes
-----
- Strategies are stateless; randomness always comes from the distribution's
  uniform source.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Default degree sampler using inverse transform sampling.

    Each row is produced by one call to the distribution's single-draw
    :meth:`~pysatl_soliton.distributions.distribution.Distribution.sample`,
    so exactly ``n`` uniforms are consumed from its source.

    Returns
    -------
    ArraySample
        A 2D integer sample of shape ``(n, 1)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")
        vals = np.fromiter((distr.sample() for _ in range(n)), dtype=np.int64, count=n)
        return ArraySample(vals.reshape(n, 1))
