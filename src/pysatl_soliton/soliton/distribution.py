"""
Soliton distribution instances.

A :class:`SolitonDistribution` wraps an immutable split table together with a
reference to a caller-owned uniform source, and answers sampling and
characteristic queries from the table alone.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_soliton.distributions.distribution import Distribution
from pysatl_soliton.distributions.strategies import InverseTransformSamplingStrategy
from pysatl_soliton.distributions.support import DegreeSupport
from pysatl_soliton.soliton.builder import build_ideal_splits, build_robust_splits
from pysatl_soliton.soliton.parametrizations import (
    IdealSolitonParametrization,
    RobustSolitonParametrization,
)
from pysatl_soliton.soliton.precision import DEFAULT_PRECISION
from pysatl_soliton.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from pysatl_soliton.distributions.sampling import Sample
    from pysatl_soliton.distributions.strategies import SamplingStrategy
    from pysatl_soliton.soliton.parametrizations import Parametrization
    from pysatl_soliton.types import (
        EuclideanDistributionType,
        FloatArray,
        Number,
        NumericArray,
        UniformSource,
    )


class SolitonDistribution(Distribution):
    """
    Soliton or Robust Soliton distribution over degrees ``{1, ..., k}``.

    Parameters
    ----------
    source : UniformSource
        Caller-owned generator of uniforms on ``[0, 1)``.
    splits : array_like
        Cumulative table; ``splits[i-1] = P(X <= i)``. Must be non-decreasing,
        non-empty and end in exactly ``1.0``.
    family_name : str
        Name of the family the table was built for.
    parameters : Parametrization
        Validated parameters the table was built from.
    sampling_strategy : SamplingStrategy, optional
        Strategy used by ``sample(n)``; inverse transform sampling by default.

    Notes
    -----
    Instances are immutable: the table is stored as a read-only array, so a
    distribution may be shared by readers as long as each one uses a source
    it is allowed to draw from.

    Use :meth:`ideal` and :meth:`robust` to build distributions from
    parameters.
    """

    __slots__ = ("_source", "_splits", "_family_name", "_parameters", "_sampling_strategy")

    def __init__(
        self,
        source: UniformSource,
        splits: NumericArray,
        family_name: str,
        parameters: Parametrization,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        table = np.array(splits, dtype=np.float64)
        if table.ndim != 1 or table.size == 0:
            raise ValueError("Split table must be a non-empty 1D array.")
        if table[-1] != 1.0:
            raise ValueError(f"Split table must end in exactly 1.0, got {table[-1]!r}.")
        if np.any(np.diff(table) < 0):
            raise ValueError("Split table must be non-decreasing.")
        table.flags.writeable = False

        self._source = source
        self._splits = table
        self._family_name = family_name
        self._parameters = parameters
        self._sampling_strategy = sampling_strategy or InverseTransformSamplingStrategy()

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def ideal(cls, source: UniformSource, k: int) -> SolitonDistribution:
        """
        Build the ideal Soliton distribution.

        Parameters
        ----------
        source : UniformSource
            Caller-owned uniform generator.
        k : int
            Largest degree, ``k >= 1``.

        Raises
        ------
        ValueError
            If ``k`` is not a positive integer.
        """
        params = IdealSolitonParametrization(k=k)  # type: ignore[call-arg]
        params.validate()
        return cls(source, build_ideal_splits(int(k)), FamilyName.SOLITON, params)

    @classmethod
    def robust(
        cls,
        source: UniformSource,
        k: int,
        c: float,
        delta: float,
        *,
        precision: int = DEFAULT_PRECISION,
    ) -> SolitonDistribution:
        """
        Build the Robust Soliton distribution.

        Parameters
        ----------
        source : UniformSource
            Caller-owned uniform generator.
        k : int
            Largest degree, ``k >= 1``.
        c : float
            Tuning constant, ``c > 0``.
        delta : float
            Admissible decoding failure probability, ``0 < delta < 1``.
        precision : int, default=DEFAULT_PRECISION
            Significant digits used to normalize the table.

        Raises
        ------
        ValueError
            If any parameter lies outside its domain.
        """
        params = RobustSolitonParametrization(k=k, c=c, delta=delta)  # type: ignore[call-arg]
        params.validate()
        splits = build_robust_splits(int(k), float(c), float(delta), precision=precision)
        return cls(source, splits, FamilyName.ROBUST_SOLITON, params)

    # ------------------------------------------------------------------ #
    # Descriptors
    # ------------------------------------------------------------------ #

    @property
    def k(self) -> int:
        """Largest degree."""
        return int(self._splits.size)

    @property
    def splits(self) -> FloatArray:
        """Read-only cumulative table."""
        return self._splits

    @property
    def source(self) -> UniformSource:
        return self._source

    @property
    def family_name(self) -> str:
        return self._family_name

    @property
    def parameters(self) -> Parametrization:
        return self._parameters

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> DegreeSupport:
        return DegreeSupport(self.k)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._sampling_strategy

    # ------------------------------------------------------------------ #
    # Sampling
    # ------------------------------------------------------------------ #

    @overload
    def sample(self) -> int: ...
    @overload
    def sample(self, n: int, **options: Any) -> Sample: ...

    def sample(self, n: int | None = None, **options: Any) -> int | Sample:
        """
        Draw degrees from the distribution.

        Parameters
        ----------
        n : int, optional
            Number of draws. If omitted a single degree is returned.
        **options
            Passed to the sampling strategy.

        Returns
        -------
        int or Sample
            A degree in ``{1, ..., k}``, or an ``(n, 1)`` sample.

        Raises
        ------
        AssertionError
            If the table and the source disagree so that no degree can be
            selected (a uniform at or above the last split). This signals a
            programming error and is not meant to be handled.
        """
        if n is not None:
            return self._sampling_strategy.sample(n, distr=self, **options)

        u = self._source.random()
        idx = int(np.searchsorted(self._splits, u, side="left"))
        if idx >= self._splits.size:
            raise AssertionError(
                f"Uniform {u!r} lies beyond the last split; the source must draw from [0, 1)."
            )
        return idx + 1

    # ------------------------------------------------------------------ #
    # Characteristics
    # ------------------------------------------------------------------ #

    def pmf(self) -> FloatArray:
        """
        Probability mass of each degree.

        Returns
        -------
        FloatArray
            ``pmf[i-1] = P(X = i)`` for ``i = 1, ..., k``.
        """
        return np.diff(self._splits, prepend=0.0)

    def mean(self) -> float:
        """
        Expected degree ``sum(i * P(X = i))`` computed in one pass over the table.
        """
        res = 0.0
        last_cdf = 0.0
        for i, split in enumerate(self._splits.tolist(), start=1):
            res += (split - last_cdf) * i
            last_cdf = split
        return res

    def variance(self) -> float:
        """Variance of the degree."""
        degrees = np.arange(1, self.k + 1, dtype=np.float64)
        pmf = self.pmf()
        mean = float(np.dot(degrees, pmf))
        return max(float(np.dot(degrees * degrees, pmf)) - mean * mean, 0.0)

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: NumericArray) -> FloatArray: ...

    def cdf(self, x: Number | NumericArray) -> float | FloatArray:
        """
        Cumulative distribution function ``P(X <= x)``.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) at which to evaluate the step function.

        Returns
        -------
        float or FloatArray
            0 below degree 1, 1 at or above degree ``k``.
        """
        arr = np.asarray(x, dtype=np.float64)
        idx = np.floor(np.nan_to_num(arr, nan=0.0, posinf=self.k, neginf=0.0))
        idx = np.clip(idx, 0, self.k).astype(np.int64)
        table = np.concatenate(([0.0], self._splits))
        result = np.where(np.isnan(arr), np.nan, table[idx])

        if np.ndim(arr) == 0:
            return float(result)
        return cast("FloatArray", result)

    @overload
    def ppf(self, q: Number) -> int: ...
    @overload
    def ppf(self, q: NumericArray) -> NumericArray: ...

    def ppf(self, q: Number | NumericArray) -> int | NumericArray:
        """
        Percent point function: the smallest degree ``d`` with ``cdf(d) >= q``.

        Parameters
        ----------
        q : Number or NumericArray
            Probabilities in ``[0, 1]``.

        Returns
        -------
        int or NumericArray
            Degrees in ``{1, ..., k}``.

        Raises
        ------
        ValueError
            If a probability is outside ``[0, 1]``.
        """
        arr = np.asarray(q, dtype=np.float64)
        if np.any(~((arr >= 0) & (arr <= 1))):
            raise ValueError("Probability must be in [0, 1]")

        result = np.searchsorted(self._splits, arr, side="left") + 1

        if np.ndim(arr) == 0:
            return int(result)
        return cast("NumericArray", result.astype(np.int64))

    # ------------------------------------------------------------------ #
    # Comparison
    # ------------------------------------------------------------------ #

    def equals(self, other: SolitonDistribution) -> bool:
        """
        Exact structural equality of two split tables.

        Tables compare element-wise without tolerance; equal tables mean the
        distributions were built from identical parameters.
        """
        if self.k != other.k:
            return False
        if self._splits.shape != other._splits.shape:
            return False
        return bool(np.array_equal(self._splits, other._splits))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SolitonDistribution):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.k, self._splits.tobytes()))

    def __repr__(self) -> str:
        params = ", ".join(
            f"{name}={value!r}" for name, value in self._parameters.parameters.items()
        )
        return f"{type(self).__name__}({self._family_name}, {params})"


def soliton(source: UniformSource, k: int) -> SolitonDistribution:
    """Shortcut for :meth:`SolitonDistribution.ideal`."""
    return SolitonDistribution.ideal(source, k)


def robust_soliton(
    source: UniformSource, k: int, c: float, delta: float, **options: Any
) -> SolitonDistribution:
    """Shortcut for :meth:`SolitonDistribution.robust`."""
    return SolitonDistribution.robust(source, k, c, delta, **options)


__all__ = [
    "SolitonDistribution",
    "soliton",
    "robust_soliton",
]
