from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence

from cspenergy.codec import config_to_id
from cspenergy.compiler import energy_terms
from cspenergy.errors import FlavorError
from cspenergy.models import EnergyTerm
from cspenergy.problem import ConstraintSatisfactionProblem


def energy_eval_byid(
    terms: Sequence[EnergyTerm], config_id: Sequence[int], energy_type: Optional[type] = None
) -> Any:
    """Sum one table lookup per term; cost is the total arity of ``terms``.

    ``energy_type`` sets the type of the zero the sum starts from, which is what a
    problem without constraints evaluates to.
    """
    if energy_type is not None:
        total = energy_type(0)
    else:
        total = terms[0].energies.dtype.type(0) if terms else 0
    for term in terms:
        nflv = len(term.flavors)
        k = 0
        for stride, var in zip(term.strides, term.variables):
            pos = config_id[var - 1]
            if not 1 <= pos <= nflv:
                raise FlavorError(f"flavor position {pos} of variable {var} outside [1, {nflv}]")
            k += stride * (pos - 1)
        total += term.energies[k]
    return total


def energy_eval_byid_multiple(problem: ConstraintSatisfactionProblem, ids: Iterable[Sequence[int]]) -> Iterator[Any]:
    terms = energy_terms(problem)
    energy_type = problem.energy_type()
    return map(lambda config_id: energy_eval_byid(terms, config_id, energy_type), ids)


def energy(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> Any:
    """Energy of ``config``; lower is better and infeasible configurations carry the sentinel."""
    return next(energy_eval_byid_multiple(problem, [config_to_id(problem, config)]))
