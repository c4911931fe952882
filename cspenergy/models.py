from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar

import numpy as np

from cspenergy.errors import ConstraintError

SpecT = TypeVar("SpecT")
WeightT = TypeVar("WeightT")


@dataclass(frozen=True)
class UnitWeight(Sequence):
    """All-ones weight vector of length ``n`` that is never materialized."""

    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"UnitWeight length must be non-negative, got {self.n}")

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index):
        if isinstance(index, slice):
            return UnitWeight(len(range(*index.indices(self.n))))
        if not -self.n <= index < self.n:
            raise IndexError(f"UnitWeight index {index} out of range for length {self.n}")
        return 1


def _unique_variables(variables) -> Tuple[int, ...]:
    out = tuple(int(v) for v in variables)
    if len(set(out)) != len(out):
        raise ConstraintError(f"constraint variables must be unique, got {list(out)}")
    return out


@dataclass(frozen=True)
class HardConstraint(Generic[SpecT]):
    """A constraint whose violation makes a configuration infeasible."""

    variables: Tuple[int, ...]
    specification: SpecT

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", _unique_variables(self.variables))

    @property
    def num_variables(self) -> int:
        return len(self.variables)


@dataclass(frozen=True)
class SoftConstraint(Generic[SpecT, WeightT]):
    """A constraint contributing a finite energy; ``weight`` is folded in by the problem."""

    variables: Tuple[int, ...]
    specification: SpecT
    weight: WeightT

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", _unique_variables(self.variables))

    @property
    def num_variables(self) -> int:
        return len(self.variables)


@dataclass(frozen=True, eq=False)
class EnergyTerm:
    """Local energy table of one constraint over every flavor assignment of its variables.

    ``strides[i]`` is ``len(flavors) ** i``; the energy of the local assignment with
    1-based flavor positions ``p`` sits at ``energies[sum(s * (q - 1) for s, q in zip(strides, p))]``.
    """

    variables: Tuple[int, ...]
    flavors: Tuple[Any, ...]
    strides: Tuple[int, ...]
    energies: np.ndarray

    @property
    def num_variables(self) -> int:
        return len(self.variables)


@dataclass(frozen=True)
class SolutionSize:
    size: Any
    is_valid: bool
