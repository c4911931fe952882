from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from cspenergy.errors import ConfigurationError
from cspenergy.models import HardConstraint, SoftConstraint
from cspenergy.problem import ConstraintSatisfactionProblem, check_local_config
from cspenergy.utils.weights import normalize_weights, same_weights


class SetPackingSpec(enum.Enum):
    DISJOINT = "disjoint"
    SET = "set"


class SetPackingSize(NamedTuple):
    num_elements: int
    num_sets: int


@dataclass(frozen=True, eq=False)
class SetPacking(ConstraintSatisfactionProblem):
    """Maximum weight set packing: select pairwise disjoint sets.

    Variable ``i`` selects ``sets[i - 1]``. Soft energies are negated weights, so
    the minimum energy is the heaviest packing.
    """

    sets: Sequence[Sequence[Any]]
    weights: Optional[Sequence[Any]] = None

    objective_sense = "max"

    def __post_init__(self) -> None:
        object.__setattr__(self, "sets", tuple(tuple(s) for s in self.sets))
        object.__setattr__(self, "weights", normalize_weights(self.weights, len(self.sets), "sets"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetPacking):
            return NotImplemented
        return self.sets == other.sets and same_weights(self.weights, other.weights)

    def num_variables(self) -> int:
        return len(self.sets)

    @classmethod
    def flavors(cls) -> Tuple[int, ...]:
        return (0, 1)

    def problem_size(self) -> SetPackingSize:
        elements = {e for s in self.sets for e in s}
        return SetPackingSize(num_elements=len(elements), num_sets=len(self.sets))

    def set_weights(self, weights: Sequence[Any]) -> "SetPacking":
        return SetPacking(self.sets, weights)

    def hard_constraints(self) -> List[HardConstraint]:
        constraints = []
        for i, j in itertools.combinations(range(len(self.sets)), 2):
            if set(self.sets[i]) & set(self.sets[j]):
                constraints.append(HardConstraint((i + 1, j + 1), SetPackingSpec.DISJOINT))
        return constraints

    def is_satisfied(self, constraint: HardConstraint, config: Sequence[Any]) -> bool:
        check_local_config(constraint, config)
        return not all(c == 1 for c in config)

    def soft_constraints(self) -> List[SoftConstraint]:
        return [SoftConstraint((i,), SetPackingSpec.SET, self.weights[i - 1]) for i in range(1, len(self.sets) + 1)]

    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        check_local_config(constraint, config)
        return -constraint.weight * config[0]


def is_set_packing(problem: SetPacking, config: Sequence[Any]) -> bool:
    """True if the selected sets are pairwise disjoint."""
    if len(config) != len(problem.sets):
        raise ConfigurationError(f"configuration has {len(config)} values, problem has {len(problem.sets)} sets")
    seen = set()
    for selected, s in zip(config, problem.sets):
        if selected == 1:
            if seen & set(s):
                return False
            seen |= set(s)
    return True
