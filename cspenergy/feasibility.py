from __future__ import annotations

from typing import Any, List, Sequence

from cspenergy.codec import config_to_id
from cspenergy.compiler import energy_max
from cspenergy.models import HardConstraint, SolutionSize
from cspenergy.problem import ConstraintSatisfactionProblem


def _local(config: Sequence[Any], variables: Sequence[int]) -> List[Any]:
    return [config[v - 1] for v in variables]


def violated_constraints(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> List[HardConstraint]:
    """Hard constraints of ``problem`` that ``config`` does not satisfy, in declaration order."""
    config_to_id(problem, config)  # length and domain check
    return [c for c in problem.hard_constraints() if not problem.is_satisfied(c, _local(config, c.variables))]


def is_feasible(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> bool:
    return not violated_constraints(problem, config)


def direct_energy(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> Any:
    """Energy computed constraint by constraint, without compiled tables."""
    energy_type = problem.energy_type()
    total = energy_type(0)
    infeasible = energy_max(energy_type)
    for _ in violated_constraints(problem, config):
        total += infeasible
    for c in problem.soft_constraints():
        total += energy_type(problem.local_energy(c, _local(config, c.variables)))
    return total


def solution_size(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> SolutionSize:
    """Soft energy of ``config`` as a solution size, plus whether every hard constraint holds.

    For problems maximizing a size the soft energies are negated sizes, so the sign
    is flipped back.
    """
    is_valid = is_feasible(problem, config)
    size = sum(problem.local_energy(c, _local(config, c.variables)) for c in problem.soft_constraints())
    if problem.objective_sense == "max":
        size = -size
    return SolutionSize(size=size, is_valid=is_valid)
