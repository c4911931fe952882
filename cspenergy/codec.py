from __future__ import annotations

from typing import Any, List, Sequence

from cspenergy.errors import ConfigurationError, FlavorError
from cspenergy.problem import ConstraintSatisfactionProblem, flavors


def _flavor_position(flvs: Sequence[Any], value: Any) -> int:
    for pos, flv in enumerate(flvs, start=1):
        if flv == value:
            return pos
    raise FlavorError(f"value {value!r} is not one of the flavors {tuple(flvs)}")


def config_to_id(problem: ConstraintSatisfactionProblem, config: Sequence[Any]) -> List[int]:
    """Return the 1-based flavor position of every value in ``config``."""
    n = problem.num_variables()
    if len(config) != n:
        raise ConfigurationError(f"configuration has {len(config)} values, problem has {n} variables")
    flvs = flavors(problem)
    return [_flavor_position(flvs, c) for c in config]


def id_to_config(problem: ConstraintSatisfactionProblem, config_id: Sequence[int]) -> List[Any]:
    flvs = flavors(problem)
    config = []
    for i in config_id:
        if not 1 <= i <= len(flvs):
            raise FlavorError(f"flavor position {i} outside [1, {len(flvs)}]")
        config.append(flvs[i - 1])
    return config


def flavor_to_logical(problem, flavor: Any) -> bool:
    """Map the first of exactly two flavors to False and the second to True."""
    flvs = flavors(problem)
    if len(flvs) != 2:
        raise FlavorError(f"the number of flavors must be 2, got: {len(flvs)}")
    if flavor == flvs[0]:
        return False
    if flavor == flvs[1]:
        return True
    raise FlavorError(f"the flavor must be one of the flavors {flvs}, got: {flavor!r}")
