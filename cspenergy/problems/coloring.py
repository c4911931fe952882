from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

import networkx as nx

from cspenergy.errors import FlavorError
from cspenergy.models import SoftConstraint
from cspenergy.problem import ConstraintSatisfactionProblem, check_local_config
from cspenergy.utils.graphs import check_vertices, same_graph, sorted_edges
from cspenergy.utils.weights import normalize_weights, same_weights


class ColoringSpec(enum.Enum):
    EDGE = "edge"


class ColoringSize(NamedTuple):
    num_vertices: int
    num_edges: int


@dataclass(frozen=True, eq=False)
class Coloring(ConstraintSatisfactionProblem):
    """Vertex coloring with ``num_colors`` colors.

    Every edge whose endpoints share a color costs the edge weight; weights are
    aligned with the edges sorted as ``(min, max)`` pairs.

    The palette depends on ``num_colors``, so ``flavors`` is an instance method
    here. ``Coloring.with_colors(k)`` returns a subclass whose palette is fixed,
    for callers that ask the class for its flavors.
    """

    graph: nx.Graph
    num_colors: int
    weights: Optional[Sequence[Any]] = None

    def __post_init__(self) -> None:
        check_vertices(self.graph)
        if self.num_colors < 1:
            raise FlavorError(f"num_colors must be positive, got {self.num_colors}")
        if len(self.flavors()) != self.num_colors:
            raise FlavorError(
                f"{type(self).__name__} has {len(self.flavors())} colors, got num_colors={self.num_colors}"
            )
        object.__setattr__(
            self, "weights", normalize_weights(self.weights, self.graph.number_of_edges(), "edges")
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coloring):
            return NotImplemented
        return (
            self.num_colors == other.num_colors
            and same_graph(self.graph, other.graph)
            and same_weights(self.weights, other.weights)
        )

    @classmethod
    def with_colors(cls, num_colors: int) -> type:
        if num_colors < 1:
            raise FlavorError(f"num_colors must be positive, got {num_colors}")
        k = num_colors
        palette = tuple(range(k))

        @dataclass(frozen=True, eq=False)
        class FixedColoring(cls):
            num_colors: int = k

            @classmethod
            def flavors(klass) -> Tuple[int, ...]:
                return palette

        FixedColoring.__name__ = FixedColoring.__qualname__ = f"Coloring{k}"
        return FixedColoring

    def num_variables(self) -> int:
        return self.graph.number_of_nodes()

    def flavors(self) -> Tuple[int, ...]:
        return tuple(range(self.num_colors))

    def problem_size(self) -> ColoringSize:
        return ColoringSize(num_vertices=self.graph.number_of_nodes(), num_edges=self.graph.number_of_edges())

    def set_weights(self, weights: Sequence[Any]) -> "Coloring":
        return type(self)(self.graph, self.num_colors, weights)

    def soft_constraints(self) -> List[SoftConstraint]:
        return [
            SoftConstraint(edge, ColoringSpec.EDGE, w) for edge, w in zip(sorted_edges(self.graph), self.weights)
        ]

    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        check_local_config(constraint, config)
        a, b = config
        return constraint.weight if a == b else 0


def is_vertex_coloring(graph: nx.Graph, config: Sequence[Any]) -> bool:
    """True if no edge joins two vertices of the same color."""
    return all(config[u - 1] != config[v - 1] for u, v in graph.edges)
