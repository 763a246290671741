"""
Parameterization classes for soliton distribution families.

This module provides the parametrization abstraction used to validate the
parameters of the ideal and robust Soliton families before a split table is
built, together with the ``@constraint`` decorator that declares the domain
restrictions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Integral
from typing import TYPE_CHECKING, ParamSpec

from pysatl_soliton.soliton.pmf import spike_position

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are frozen dataclasses whose ``@constraint``
    methods are collected by :func:`parametrization`.
    """

    # These attributes are set by the @parametrization decorator
    __param_name__: ClassVar[str]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", None)
        if fields:
            return {f: getattr(self, f) for f in fields}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Constraints are checked in declaration order and the first failing
        one is reported.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(*, name: str) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator that turns a class into a named, validated parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one
    and collects methods marked with @constraint, including inherited ones.
    """

    def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        seen: set[str] = set()
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                if isinstance(attr, staticmethod | classmethod):
                    if getattr(attr.__func__, "__is_constraint", False):
                        raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                    continue

                func = attr if callable(attr) and isfunction(attr) else None
                if not func or not getattr(func, "__is_constraint", False):
                    continue
                if attr_name in seen:
                    continue
                seen.add(attr_name)
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


def _is_positive_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and int(value) >= 1


@parametrization(name="ideal")
class IdealSolitonParametrization(Parametrization):
    """
    Parameters of the ideal Soliton distribution.

    Parameters
    ----------
    k : int
        Largest degree (number of source symbols).
    """

    k: int

    @constraint(description="k is a positive integer")
    def check_k_positive_integer(self) -> bool:
        return _is_positive_integer(self.k)


@parametrization(name="robust")
class RobustSolitonParametrization(Parametrization):
    """
    Parameters of the Robust Soliton distribution.

    Parameters
    ----------
    k : int
        Largest degree (number of source symbols).
    c : float
        Tuning constant of the ripple size.
    delta : float
        Admissible decoding failure probability.
    """

    k: int
    c: float
    delta: float

    @constraint(description="k is a positive integer")
    def check_k_positive_integer(self) -> bool:
        return _is_positive_integer(self.k)

    @constraint(description="c > 0")
    def check_c_positive(self) -> bool:
        return bool(self.c > 0) and self.c != float("inf")

    @constraint(description="0 < delta < 1")
    def check_delta_in_unit_interval(self) -> bool:
        return bool(0 < self.delta < 1)

    @constraint(description="spike position round(k/R) >= 1")
    def check_spike_inside_lower_bound(self) -> bool:
        """A ripple larger than ``2k`` leaves the spike at degree 0."""
        if self.k == 1:
            return True
        return spike_position(self.c, self.delta, int(self.k)) >= 1


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
    "IdealSolitonParametrization",
    "RobustSolitonParametrization",
]
