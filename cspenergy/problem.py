from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, NamedTuple, Sequence, Tuple, Union

import numpy as np

from cspenergy.config import DEFAULT_ENERGY_TYPE
from cspenergy.errors import ArityError, WeightTypeError
from cspenergy.models import HardConstraint, SoftConstraint, UnitWeight

Constraint = Union[HardConstraint, SoftConstraint]


class ConstraintSatisfactionProblem(ABC):
    """Base class of problems expressed as hard and soft constraints over a flavor domain.

    Subclasses are immutable data holders. They list their constraints and own the
    two predicates the compiler calls for every local flavor assignment:
    ``is_satisfied`` for hard constraints and ``local_energy`` for soft ones.
    ``local_energy`` is responsible for applying ``constraint.weight``. Weighted
    problems expose their weight vector as a ``weights`` attribute.
    """

    # "min" if a smaller soft energy is a better solution, "max" if the soft
    # energies are negated sizes to be maximized
    objective_sense: ClassVar[str] = "min"

    @abstractmethod
    def num_variables(self) -> int:
        ...

    def variables(self) -> List[int]:
        return list(range(1, self.num_variables() + 1))

    @classmethod
    @abstractmethod
    def flavors(cls) -> Tuple[Any, ...]:
        ...

    def num_flavors(self) -> int:
        return len(self.flavors())

    def hard_constraints(self) -> List[HardConstraint]:
        return []

    @abstractmethod
    def soft_constraints(self) -> List[SoftConstraint]:
        ...

    def is_satisfied(self, constraint: HardConstraint, config: Sequence[Any]) -> bool:
        raise NotImplementedError(f"{type(self).__name__} declares no hard constraints")

    @abstractmethod
    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        ...

    @abstractmethod
    def set_weights(self, weights: Sequence[Any]) -> "ConstraintSatisfactionProblem":
        ...

    @abstractmethod
    def problem_size(self) -> NamedTuple:
        ...

    def energy_type(self) -> type:
        if not hasattr(self, "weights"):
            return DEFAULT_ENERGY_TYPE
        return _as_numpy_type(weight_type(self))


def is_machine_type(tp: type) -> bool:
    """True for types NumPy stores natively: its scalar types and Python int, float, complex, bool."""
    return issubclass(tp, np.generic) or tp in (int, float, complex, bool)


def _as_numpy_type(tp: type) -> type:
    if tp is int:
        return DEFAULT_ENERGY_TYPE
    if not is_machine_type(tp):
        # Fraction, Decimal, ...: kept as is, tables use the object dtype
        return tp
    return np.dtype(tp).type


def check_local_config(constraint: Constraint, config: Sequence[Any]) -> None:
    if len(config) != constraint.num_variables:
        raise ArityError(
            f"local configuration has {len(config)} values, constraint on {list(constraint.variables)} expects "
            f"{constraint.num_variables}"
        )


def num_variables(problem: ConstraintSatisfactionProblem) -> int:
    return problem.num_variables()


def variables(problem: ConstraintSatisfactionProblem) -> List[int]:
    return problem.variables()


def flavors(problem) -> Tuple[Any, ...]:
    return tuple(problem.flavors())


def num_flavors(problem) -> int:
    return len(flavors(problem))


def problem_size(problem: ConstraintSatisfactionProblem) -> NamedTuple:
    return problem.problem_size()


def weights(problem: ConstraintSatisfactionProblem) -> Sequence[Any]:
    return problem.weights


def set_weights(problem: ConstraintSatisfactionProblem, new_weights: Sequence[Any]) -> ConstraintSatisfactionProblem:
    return problem.set_weights(new_weights)


def is_weighted(problem) -> bool:
    """True unless the problem has no weights or its weights are a ``UnitWeight``.

    This is a type check: a plain vector of ones still counts as weighted.
    """
    return hasattr(problem, "weights") and not isinstance(problem.weights, UnitWeight)


def weight_type(problem: ConstraintSatisfactionProblem) -> type:
    w = problem.weights
    if isinstance(w, UnitWeight):
        return int
    dtype = getattr(w, "dtype", None)
    if dtype is not None and dtype != np.dtype(object):
        return dtype.type
    values = list(w)
    for v in values:
        if not isinstance(v, numbers.Number):
            raise WeightTypeError(f"weights must be numbers, got {type(v).__name__}: {v!r}")
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return int
    inferred = np.asarray(values).dtype
    if inferred != np.dtype(object):
        return inferred.type
    # the type arithmetic promotes to, e.g. Fraction for a mix of Fraction and int
    return type(sum(values))


def configuration_space_size(problem: ConstraintSatisfactionProblem) -> float:
    """Return the log2 size of the configuration space of the problem."""
    return math.log2(num_flavors(problem)) * num_variables(problem)
