import networkx as nx
import pytest


def _graph(edges):
    g = nx.Graph()
    g.add_nodes_from(range(1, max(max(e) for e in edges) + 1))
    g.add_edges_from(edges)
    return g


@pytest.fixture
def cycle4():
    return _graph([(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def cover_graph():
    return _graph([(1, 2), (1, 3), (3, 4), (2, 3), (1, 4)])


@pytest.fixture
def packing_sets():
    return [[1, 2, 5], [1, 3], [2, 4], [3, 6], [2, 3, 6]]
