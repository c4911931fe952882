from __future__ import annotations

import math
from typing import Any, Callable, List, Sequence, Tuple

import numpy as np

from cspenergy.errors import ConstraintError
from cspenergy.models import EnergyTerm
from cspenergy.problem import Constraint, ConstraintSatisfactionProblem, flavors, is_machine_type
from cspenergy.utils.logging_utils import get_logger

logger = get_logger()


def energy_max(energy_type: type) -> Any:
    """Energy stored for a violated hard constraint.

    Floating types use their largest finite value. Fixed-width integer types use
    the floor of the square root of their maximum so that up to that many
    violations can be summed without overflow. Other numeric types (Fraction,
    Decimal, ...) use infinity in their own type, or the float infinity when
    they cannot represent it.
    """
    if not is_machine_type(energy_type):
        try:
            return energy_type(math.inf)
        except (OverflowError, ValueError, TypeError):
            return math.inf
    tp = np.dtype(energy_type).type
    if np.issubdtype(tp, np.integer):
        return tp(math.isqrt(int(np.iinfo(tp).max)))
    return tp(np.finfo(tp).max)


def _check_variables(constraint: Constraint, n: int) -> None:
    for v in constraint.variables:
        if not 1 <= v <= n:
            raise ConstraintError(f"constraint variable {v} outside [1, {n}]")


def _local_configs(flvs: Tuple[Any, ...], arity: int):
    # first variable varies fastest, matching strides[i] = N**i
    nflv = len(flvs)
    for k in range(nflv**arity):
        yield [flvs[(k // nflv**i) % nflv] for i in range(arity)]


def _compile(
    constraint: Constraint, flvs: Tuple[Any, ...], energy_type: type, local: Callable[[Sequence[Any]], Any]
) -> EnergyTerm:
    arity = constraint.num_variables
    energies = np.fromiter(
        (local(cfg) for cfg in _local_configs(flvs, arity)),
        dtype=energy_type if is_machine_type(energy_type) else object,
        count=len(flvs) ** arity,
    )
    energies.flags.writeable = False
    strides = tuple(len(flvs) ** i for i in range(arity))
    return EnergyTerm(variables=constraint.variables, flavors=flvs, strides=strides, energies=energies)


def energy_terms(problem: ConstraintSatisfactionProblem) -> List[EnergyTerm]:
    """Compile one energy term per constraint, hard constraints first."""
    energy_type = problem.energy_type()
    flvs = flavors(problem)
    n = problem.num_variables()
    zero = energy_type(0)
    infeasible = energy_max(energy_type)
    terms: List[EnergyTerm] = []
    hard = problem.hard_constraints()
    for constraint in hard:
        _check_variables(constraint, n)
        terms.append(
            _compile(
                constraint,
                flvs,
                energy_type,
                lambda cfg, c=constraint: zero if problem.is_satisfied(c, cfg) else infeasible,
            )
        )
    soft = problem.soft_constraints()
    for constraint in soft:
        _check_variables(constraint, n)
        terms.append(
            _compile(
                constraint,
                flvs,
                energy_type,
                lambda cfg, c=constraint: energy_type(problem.local_energy(c, cfg)),
            )
        )
    logger.debug(
        "Compiled %d energy terms (%d hard, %d soft) for %s",
        len(terms),
        len(hard),
        len(soft),
        type(problem).__name__,
    )
    return terms
