from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from fractions import Fraction

import numpy as np
import pytest

from pysatl_soliton.soliton.builder import build_ideal_splits, build_robust_splits
from pysatl_soliton.soliton.pmf import rho, tau

# k=3, c=0.12, delta=0.001 normalized with arbitrary-precision arithmetic
ROBUST_K3_REFERENCE = [
    0.1566493603878993030143281532615261342211803355562430962538559755,
    0.9705998618429641852703276471816809044716254319807433471959590362,
    1.0,
]


def _exact_robust_splits(k: int, c: float, delta: float) -> np.ndarray:
    """Reference table: float masses, exact rational prefix sums, one rounding."""
    prefix = []
    running = Fraction(0)
    for i in range(1, k + 1):
        running += Fraction(rho(k, i) + tau(c, delta, k, i))
        prefix.append(running)
    ratios = [float(p / running) for p in prefix]
    ratios[-1] = 1.0
    return np.asarray(ratios)


class TestBuildIdealSplits:
    def test_point_mass(self):
        splits = build_ideal_splits(1)
        assert splits.tolist() == [1.0]

    def test_two_degrees(self):
        assert build_ideal_splits(2).tolist() == [0.5, 1.0]

    def test_three_degrees_exact(self):
        splits = build_ideal_splits(3)
        assert splits.tolist() == [1.0 / 3.0, 1.0 / 3.0 + 0.5, 1.0]

    @pytest.mark.parametrize("k", [1, 2, 3, 10, 257, 10_000, 100_000])
    def test_table_invariants(self, k):
        splits = build_ideal_splits(k)
        assert splits.dtype == np.float64
        assert splits.shape == (k,)
        assert splits[-1] == 1.0
        assert np.all(np.diff(splits) >= 0)
        assert np.all((splits > 0) & (splits <= 1))

    def test_partial_sums_match_closed_form(self):
        # P(X <= i) = 1/k + 1 - 1/i for i >= 2
        k = 1000
        splits = build_ideal_splits(k)
        i = np.arange(2, k)
        np.testing.assert_allclose(splits[1:-1], 1.0 / k + 1.0 - 1.0 / i, rtol=0, atol=1e-12)


class TestBuildRobustSplits:
    def test_point_mass_skips_correction(self):
        assert build_robust_splits(1, 1.2, 0.001).tolist() == [1.0]

    def test_reference_table(self):
        splits = build_robust_splits(3, 0.12, 0.001)
        assert splits.shape == (3,)
        assert splits[-1] == 1.0
        np.testing.assert_allclose(splits, ROBUST_K3_REFERENCE, rtol=0, atol=1e-6)

    @pytest.mark.parametrize(
        "k, c, delta",
        [(50, 0.1, 0.5), (500, 0.05, 0.01), (3000, 0.03, 0.1)],
        ids=["k50", "k500", "k3000"],
    )
    def test_matches_exact_rational_normalization(self, k, c, delta):
        splits = build_robust_splits(k, c, delta)
        np.testing.assert_array_equal(splits, _exact_robust_splits(k, c, delta))

    @pytest.mark.parametrize("k", [2, 3, 64, 10_000])
    def test_table_invariants(self, k):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            splits = build_robust_splits(k, 0.5, 0.05)
        assert splits.shape == (k,)
        assert splits[-1] == 1.0
        assert np.all(np.diff(splits) >= 0)
        pmf = np.diff(splits, prepend=0.0)
        assert np.all(pmf >= 0)
        assert pmf.sum() == pytest.approx(1.0, abs=1e-9)

    def test_spike_beyond_support_warns(self):
        with pytest.warns(UserWarning, match="outside support"):
            splits = build_robust_splits(4, 0.01, 0.02)
        assert splits.shape == (4,)
        assert splits[-1] == 1.0

    def test_precision_is_forwarded(self):
        with pytest.raises(ValueError, match="must exceed 17 digits"):
            build_robust_splits(10, 0.5, 0.05, precision=10)

    def test_higher_precision_gives_same_table(self):
        np.testing.assert_array_equal(
            build_robust_splits(2000, 0.1, 0.05),
            build_robust_splits(2000, 0.1, 0.05, precision=120),
        )
