from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

import networkx as nx

from cspenergy.errors import ConfigurationError
from cspenergy.models import HardConstraint, SoftConstraint
from cspenergy.problem import ConstraintSatisfactionProblem, check_local_config
from cspenergy.utils.graphs import check_vertices, same_graph, sorted_edges
from cspenergy.utils.weights import normalize_weights, same_weights


class VertexCoveringSpec(enum.Enum):
    COVER = "cover"
    VERTEX = "vertex"


class VertexCoveringSize(NamedTuple):
    num_vertices: int
    num_edges: int


@dataclass(frozen=True, eq=False)
class VertexCovering(ConstraintSatisfactionProblem):
    """Minimum weight vertex cover: every edge needs at least one selected endpoint.

    Weights are associated with the vertices and default to unit weights.
    """

    graph: nx.Graph
    weights: Optional[Sequence[Any]] = None

    def __post_init__(self) -> None:
        check_vertices(self.graph)
        object.__setattr__(
            self, "weights", normalize_weights(self.weights, self.graph.number_of_nodes(), "vertices")
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexCovering):
            return NotImplemented
        return same_graph(self.graph, other.graph) and same_weights(self.weights, other.weights)

    def num_variables(self) -> int:
        return self.graph.number_of_nodes()

    @classmethod
    def flavors(cls) -> Tuple[int, ...]:
        return (0, 1)  # 1 if the vertex is selected

    def problem_size(self) -> VertexCoveringSize:
        return VertexCoveringSize(num_vertices=self.graph.number_of_nodes(), num_edges=self.graph.number_of_edges())

    def set_weights(self, weights: Sequence[Any]) -> "VertexCovering":
        return VertexCovering(self.graph, weights)

    def hard_constraints(self) -> List[HardConstraint]:
        return [HardConstraint(edge, VertexCoveringSpec.COVER) for edge in sorted_edges(self.graph)]

    def is_satisfied(self, constraint: HardConstraint, config: Sequence[Any]) -> bool:
        check_local_config(constraint, config)
        return any(c != 0 for c in config)

    def soft_constraints(self) -> List[SoftConstraint]:
        return [
            SoftConstraint((v,), VertexCoveringSpec.VERTEX, self.weights[v - 1])
            for v in range(1, self.num_variables() + 1)
        ]

    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        check_local_config(constraint, config)
        return constraint.weight * config[0]


def is_vertex_covering(graph: nx.Graph, config: Sequence[Any]) -> bool:
    """True if every edge of ``graph`` has at least one selected endpoint."""
    if len(config) != graph.number_of_nodes():
        raise ConfigurationError(
            f"configuration has {len(config)} values, graph has {graph.number_of_nodes()} vertices"
        )
    for u, v in graph.edges:
        if config[u - 1] == 0 and config[v - 1] == 0:
            return False
    return True
