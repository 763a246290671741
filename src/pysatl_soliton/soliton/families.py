"""
Soliton families and their global registry.

A :class:`SolitonFamily` binds a family name to its parametrization and split
table builder. Families are kept in the :class:`SolitonFamilyRegister`
singleton, which :func:`configure_families_register` seeds lazily with the
ideal and robust Soliton families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_soliton.soliton.builder import build_ideal_splits, build_robust_splits
from pysatl_soliton.soliton.distribution import SolitonDistribution
from pysatl_soliton.soliton.parametrizations import (
    IdealSolitonParametrization,
    RobustSolitonParametrization,
)
from pysatl_soliton.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar, TypeAlias

    from pysatl_soliton.soliton.parametrizations import Parametrization
    from pysatl_soliton.types import FloatArray, UniformSource

    SplitsBuilder: TypeAlias = Callable[..., FloatArray]


@dataclass(frozen=True, slots=True)
class SolitonFamily:
    """
    A family of degree distributions sharing one parametrization.

    Parameters
    ----------
    name : str
        Name of the family.
    parametrization : type[Parametrization]
        Parametrization class validating the family parameters.
    builder : Callable[..., FloatArray]
        Split table builder called with the parameters as keyword arguments.
    """

    name: str
    parametrization: type[Parametrization]
    builder: SplitsBuilder

    @property
    def parameter_names(self) -> list[str]:
        return list(self.parametrization.__dataclass_fields__)  # type: ignore[attr-defined]

    def __call__(
        self, source: UniformSource, /, *, precision: int | None = None, **parameters: Any
    ) -> SolitonDistribution:
        """
        Create a distribution of this family.

        Parameters
        ----------
        source : UniformSource
            Caller-owned uniform generator.
        precision : int, optional
            Accumulator precision for builders that normalize in extended
            precision.
        **parameters
            Family parameters, e.g. ``k``, ``c`` and ``delta``.

        Returns
        -------
        SolitonDistribution
            Distribution built from the validated parameters.

        Raises
        ------
        ValueError
            If parameters are missing, unexpected or outside their domain.
        """
        expected = set(self.parameter_names)
        if set(parameters) != expected:
            raise ValueError(
                f"Family {self.name} expects parameters {sorted(expected)}, "
                f"got {sorted(parameters)}"
            )
        params = self.parametrization(**parameters)
        params.validate()

        options: dict[str, Any] = {}
        if precision is not None:
            options["precision"] = precision
        splits = self.builder(**params.parameters, **options)
        return SolitonDistribution(source, splits, self.name, params)


class SolitonFamilyRegister:
    """
    Singleton registry for soliton families.

    Maintains a global registry of families, allowing them to be accessed by
    name.
    """

    _instance: ClassVar[SolitonFamilyRegister | None] = None
    _registered_families: dict[str, SolitonFamily]

    def __new__(cls) -> SolitonFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> SolitonFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def register(cls, family: SolitonFamily) -> None:
        """
        Register a new family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._registered_families)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


def _build_ideal(*, k: int, **_options: Any) -> FloatArray:
    return build_ideal_splits(int(k))


def _build_robust(*, k: int, c: float, delta: float, **options: Any) -> FloatArray:
    return build_robust_splits(int(k), float(c), float(delta), **options)


@lru_cache(maxsize=1)
def configure_families_register() -> SolitonFamilyRegister:
    """
    Register the ideal and robust Soliton families in the global registry.

    Returns
    -------
    SolitonFamilyRegister
        The global registry of families.
    """
    SolitonFamilyRegister.register(
        SolitonFamily(
            name=FamilyName.SOLITON,
            parametrization=IdealSolitonParametrization,
            builder=_build_ideal,
        )
    )
    SolitonFamilyRegister.register(
        SolitonFamily(
            name=FamilyName.ROBUST_SOLITON,
            parametrization=RobustSolitonParametrization,
            builder=_build_robust,
        )
    )
    return SolitonFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    SolitonFamilyRegister._reset()


__all__ = [
    "SolitonFamily",
    "SolitonFamilyRegister",
    "configure_families_register",
    "reset_families_register",
]
