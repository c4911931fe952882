from __future__ import annotations

from typing import List, Tuple

import networkx as nx

from cspenergy.errors import ConstraintError

Edge = Tuple[int, int]


def check_vertices(graph: nx.Graph) -> None:
    """Vertices must be exactly 1..n so they can double as variable indices."""
    n = graph.number_of_nodes()
    if set(graph.nodes) != set(range(1, n + 1)):
        raise ConstraintError(f"graph vertices must be 1..{n}, got {sorted(graph.nodes)}")


def sorted_edges(graph: nx.Graph) -> List[Edge]:
    return sorted((min(u, v), max(u, v)) for u, v in graph.edges)


def same_graph(a: nx.Graph, b: nx.Graph) -> bool:
    return set(a.nodes) == set(b.nodes) and sorted_edges(a) == sorted_edges(b)
