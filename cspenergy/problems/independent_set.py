from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

import networkx as nx

from cspenergy.models import HardConstraint, SoftConstraint
from cspenergy.problem import ConstraintSatisfactionProblem, check_local_config
from cspenergy.utils.graphs import check_vertices, same_graph, sorted_edges
from cspenergy.utils.weights import normalize_weights, same_weights


class IndependentSetSpec(enum.Enum):
    NO_EDGE = "no_edge"
    VERTEX = "vertex"


class IndependentSetSize(NamedTuple):
    num_vertices: int
    num_edges: int


@dataclass(frozen=True, eq=False)
class IndependentSet(ConstraintSatisfactionProblem):
    """Maximum weight independent set: no edge may have both endpoints selected."""

    graph: nx.Graph
    weights: Optional[Sequence[Any]] = None

    objective_sense = "max"

    def __post_init__(self) -> None:
        check_vertices(self.graph)
        object.__setattr__(
            self, "weights", normalize_weights(self.weights, self.graph.number_of_nodes(), "vertices")
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndependentSet):
            return NotImplemented
        return same_graph(self.graph, other.graph) and same_weights(self.weights, other.weights)

    def num_variables(self) -> int:
        return self.graph.number_of_nodes()

    @classmethod
    def flavors(cls) -> Tuple[int, ...]:
        return (0, 1)

    def problem_size(self) -> IndependentSetSize:
        return IndependentSetSize(num_vertices=self.graph.number_of_nodes(), num_edges=self.graph.number_of_edges())

    def set_weights(self, weights: Sequence[Any]) -> "IndependentSet":
        return IndependentSet(self.graph, weights)

    def hard_constraints(self) -> List[HardConstraint]:
        return [HardConstraint(edge, IndependentSetSpec.NO_EDGE) for edge in sorted_edges(self.graph)]

    def is_satisfied(self, constraint: HardConstraint, config: Sequence[Any]) -> bool:
        check_local_config(constraint, config)
        return not all(c == 1 for c in config)

    def soft_constraints(self) -> List[SoftConstraint]:
        return [
            SoftConstraint((v,), IndependentSetSpec.VERTEX, self.weights[v - 1])
            for v in range(1, self.num_variables() + 1)
        ]

    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        check_local_config(constraint, config)
        return -constraint.weight * config[0]


def is_independent_set(graph: nx.Graph, config: Sequence[Any]) -> bool:
    return not any(config[u - 1] == 1 and config[v - 1] == 1 for u, v in graph.edges)
