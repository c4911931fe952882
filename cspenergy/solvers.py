from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, List

from cspenergy.codec import id_to_config
from cspenergy.config import MAX_BRUTE_FORCE_STATES
from cspenergy.errors import SearchSpaceTooLargeError
from cspenergy.evaluator import energy_eval_byid_multiple
from cspenergy.problem import ConstraintSatisfactionProblem
from cspenergy.utils.logging_utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class BruteForce:
    """Exhaustive enumeration of the configuration space."""

    max_states: int = MAX_BRUTE_FORCE_STATES


def brute_force(problem: ConstraintSatisfactionProblem, max_states: int = MAX_BRUTE_FORCE_STATES) -> List[List[Any]]:
    n = problem.num_variables()
    nflv = problem.num_flavors()
    total_states = nflv**n
    if total_states > max_states:
        raise SearchSpaceTooLargeError(f"{total_states} states exceed the brute force limit of {max_states}")
    # two generators in lockstep so the space is never materialised
    ids = itertools.product(range(1, nflv + 1), repeat=n)
    energies = energy_eval_byid_multiple(problem, itertools.product(range(1, nflv + 1), repeat=n))
    best_energy = None
    best_ids: List[tuple] = []
    for config_id, e in zip(ids, energies):
        if best_energy is None or e < best_energy:
            best_energy = e
            best_ids = [config_id]
        elif e == best_energy:
            best_ids.append(config_id)
    logger.info(
        "Brute force over %d states of %s: best energy %s (%d configurations)",
        total_states,
        type(problem).__name__,
        best_energy,
        len(best_ids),
    )
    return [id_to_config(problem, config_id) for config_id in best_ids]


def findbest(problem: ConstraintSatisfactionProblem, method: Any) -> List[List[Any]]:
    """Return every configuration of minimal energy found by ``method``."""
    if isinstance(method, BruteForce):
        return brute_force(problem, method.max_states)
    raise TypeError(f"unsupported search method {type(method).__name__}")
