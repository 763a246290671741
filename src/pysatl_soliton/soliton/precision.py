"""
Extended-precision accumulation.

Normalizing a Robust Soliton table sums terms spanning many orders of
magnitude. Prefix sums and totals are therefore kept as :class:`decimal.Decimal`
values in a local context; every float term is converted exactly, and the only
rounding back to double precision happens once per output value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from decimal import Decimal, localcontext
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from decimal import Context

DEFAULT_PRECISION = 50
"""Significant decimal digits used for accumulation."""


@contextmanager
def extended_precision(precision: int = DEFAULT_PRECISION) -> Iterator[Context]:
    """
    Enter a thread-local decimal context with ``precision`` significant digits.

    Parameters
    ----------
    precision : int, default=DEFAULT_PRECISION
        Number of significant digits. Must exceed the 17 digits that
        round-trip a float64.

    Raises
    ------
    ValueError
        If ``precision`` is not larger than 17.
    """
    if precision <= 17:
        raise ValueError(f"Extended precision must exceed 17 digits, got {precision}.")
    with localcontext() as ctx:
        ctx.prec = precision
        yield ctx


def extended_prefix_sums(
    terms: Iterable[float], precision: int = DEFAULT_PRECISION
) -> list[Decimal]:
    """
    Running sums of ``terms`` in extended precision.

    Parameters
    ----------
    terms : Iterable[float]
        Non-negative masses in index order.
    precision : int, default=DEFAULT_PRECISION
        Significant digits of the accumulator.

    Returns
    -------
    list[Decimal]
        ``sums[i] = terms[0] + ... + terms[i]``. The last element is the total.
    """
    sums: list[Decimal] = []
    with extended_precision(precision):
        running = Decimal(0)
        for term in terms:
            running += Decimal(term)
            sums.append(running)
    return sums


def normalized_ratios(sums: list[Decimal], precision: int = DEFAULT_PRECISION) -> list[float]:
    """
    Divide each prefix sum by the total and round once to float.

    Parameters
    ----------
    sums : list[Decimal]
        Prefix sums as returned by :func:`extended_prefix_sums`.
    precision : int, default=DEFAULT_PRECISION
        Significant digits used for the division.

    Returns
    -------
    list[float]
        ``sums[i] / sums[-1]`` rounded to the nearest float.

    Raises
    ------
    ValueError
        If ``sums`` is empty or the total is not positive.
    """
    if not sums:
        raise ValueError("Cannot normalize an empty sequence of sums.")
    total = sums[-1]
    if total <= 0:
        raise ValueError(f"Total mass must be positive, got {total}.")
    with extended_precision(precision):
        return [float(s / total) for s in sums]


__all__ = [
    "DEFAULT_PRECISION",
    "extended_precision",
    "extended_prefix_sums",
    "normalized_ratios",
]
