"""
Split table construction.

Converts the piecewise Soliton masses into a cumulative table ``splits`` of
length ``k`` with ``splits[i-1] = P(X <= i)`` and ``splits[k-1] == 1.0``
exactly. The table partitions ``[0, 1)`` into ``k`` pieces for inverse
transform sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np

from pysatl_soliton.soliton.pmf import rho, spike_position, tau
from pysatl_soliton.soliton.precision import (
    DEFAULT_PRECISION,
    extended_prefix_sums,
    normalized_ratios,
)
from pysatl_soliton.types import FloatArray


def _point_mass() -> FloatArray:
    return np.ones(1, dtype=np.float64)


def build_ideal_splits(k: int) -> FloatArray:
    """
    Build the split table of the ideal Soliton distribution.

    Masses are accumulated sequentially in increasing degree order; the
    masses already sum to one, so no normalization is needed.

    Parameters
    ----------
    k : int
        Largest degree, ``k >= 1``.

    Returns
    -------
    FloatArray
        Non-decreasing table of length ``k`` ending in exactly ``1.0``.
    """
    if k == 1:
        return _point_mass()

    splits = np.empty(k, dtype=np.float64)
    last = 0.0
    for i in range(1, k):
        last += rho(k, i)
        splits[i - 1] = last
    splits[k - 1] = 1.0
    # rounding must not push a partial sum past the final split
    np.clip(splits, 0.0, 1.0, out=splits)
    return splits


def build_robust_splits(
    k: int, c: float, delta: float, *, precision: int = DEFAULT_PRECISION
) -> FloatArray:
    """
    Build the split table of the Robust Soliton distribution.

    Unnormalized masses ``rho + tau`` are evaluated in float64, while prefix
    sums, the total mass and the normalizing division are carried out in
    ``precision`` significant decimal digits. Each split is rounded to float64
    exactly once.

    Parameters
    ----------
    k : int
        Largest degree, ``k >= 1``.
    c : float
        Tuning constant, ``c > 0``.
    delta : float
        Admissible decoding failure probability, ``0 < delta < 1``.
    precision : int, default=DEFAULT_PRECISION
        Significant digits of the accumulator.

    Returns
    -------
    FloatArray
        Non-decreasing table of length ``k`` ending in exactly ``1.0``.

    Warns
    -----
    UserWarning
        If the spike position ``round(k/R)`` lies beyond ``k``; the correction
        then has no spike inside the support.
    """
    if k == 1:
        return _point_mass()

    spike = spike_position(c, delta, k)
    if spike > k:
        warnings.warn(
            f"Robust soliton spike at degree {spike} lies outside support 1..{k} "
            f"(c={c}, delta={delta}); the correction term has no spike.",
            UserWarning,
            stacklevel=2,
        )

    masses = (rho(k, i) + tau(c, delta, k, i) for i in range(1, k + 1))
    ratios = normalized_ratios(extended_prefix_sums(masses, precision), precision)

    splits = np.asarray(ratios, dtype=np.float64)
    splits[k - 1] = 1.0
    return splits


__all__ = [
    "build_ideal_splits",
    "build_robust_splits",
]
