"""
Soliton probability mass functions.

Unnormalized masses of the ideal Soliton (``rho``) and of the Robust Soliton
correction term (``tau``) as introduced by M. Luby, "LT codes" (FOCS 2002).

All functions are pure and perform no validation: callers guarantee
``k >= 1``, ``1 <= i <= k``, ``c > 0`` and ``0 < delta < 1``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math


def rho(k: int, i: int) -> float:
    """
    Ideal Soliton mass at degree ``i``.

    Probability mass function:
        rho(1) = 1/k
        rho(i) = 1/(i*(i-1)) for i = 2, ..., k

    Parameters
    ----------
    k : int
        Largest degree.
    i : int
        Degree in ``{1, ..., k}``.

    Returns
    -------
    float
        Mass at ``i``. Masses over ``{1, ..., k}`` sum to 1.
    """
    if i == 1:
        return 1.0 / k
    return 1.0 / (i * (i - 1))


def ripple(c: float, delta: float, k: int) -> float:
    """
    Expected ripple size ``R = c * ln(k/delta) * sqrt(k)``.
    """
    return c * math.log(k / delta) * math.sqrt(k)


def spike_position(c: float, delta: float, k: int) -> int:
    """
    Degree ``round(k/R)`` at which the robust correction places its spike.

    Halves are rounded away from zero.
    """
    return int(math.floor(k / ripple(c, delta, k) + 0.5))


def tau(c: float, delta: float, k: int, i: int) -> float:
    """
    Robust Soliton correction mass at degree ``i``.

    With ``R = ripple(c, delta, k)`` and ``t = spike_position(c, delta, k)``:
        tau(i) = R/(i*k)                  for i < t
        tau(t) = R*(ln(R) - ln(delta))/k
        tau(i) = 0                        for i > t

    Parameters
    ----------
    c : float
        Tuning constant, ``c > 0``.
    delta : float
        Admissible decoding failure probability, ``0 < delta < 1``.
    k : int
        Largest degree.
    i : int
        Degree in ``{1, ..., k}``.

    Returns
    -------
    float
        Unnormalized correction mass at ``i``.
    """
    r = ripple(c, delta, k)
    threshold = int(math.floor(k / r + 0.5))
    if i < threshold:
        return r / (i * k)
    if i == threshold:
        return r * (math.log(r) - math.log(delta)) / k
    return 0.0


__all__ = [
    "rho",
    "ripple",
    "spike_position",
    "tau",
]
