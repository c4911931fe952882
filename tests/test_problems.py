import math

import networkx as nx
import numpy as np
import pytest

from cspenergy.errors import ConstraintError, FlavorError, WeightLengthError
from cspenergy.models import UnitWeight
from cspenergy.problem import (
    configuration_space_size,
    flavors,
    is_weighted,
    num_flavors,
    num_variables,
    problem_size,
    set_weights,
    variables,
    weight_type,
    weights,
)
from cspenergy.problems.coloring import Coloring, is_vertex_coloring
from cspenergy.problems.independent_set import IndependentSet, is_independent_set
from cspenergy.problems.qubo import QUBO
from cspenergy.problems.set_packing import SetPacking
from cspenergy.problems.vertex_covering import VertexCovering, is_vertex_covering


def test_coloring_interface(cycle4):
    c = Coloring(cycle4, 3, UnitWeight(4))
    assert c == Coloring(cycle4, 3)
    assert isinstance(weights(c), UnitWeight)
    assert flavors(c) == (0, 1, 2)
    assert num_flavors(c) == 3
    assert variables(c) == [1, 2, 3, 4]
    assert problem_size(c) == (4, 4)
    assert problem_size(c).num_edges == 4
    assert set_weights(c, [1, 2, 2, 1]) == Coloring(cycle4, 3, [1, 2, 2, 1])
    assert not is_vertex_coloring(cycle4, [0, 1, 2, 0])
    assert is_vertex_coloring(cycle4, [0, 1, 0, 1])


def test_coloring_with_fixed_palette(cycle4):
    K = Coloring.with_colors(3)
    assert K.flavors() == (0, 1, 2)
    assert num_flavors(K) == 3
    assert K(cycle4) == Coloring(cycle4, 3)
    assert isinstance(set_weights(K(cycle4), [1, 2, 2, 1]), K)
    with pytest.raises(FlavorError):
        K(cycle4, 4)
    with pytest.raises(FlavorError):
        Coloring.with_colors(0)


def test_set_weights_returns_new_instance(cover_graph):
    vc = VertexCovering(cover_graph)
    vc2 = set_weights(vc, [1, 2, 3, 4])
    assert vc2 is not vc
    assert isinstance(vc.weights, UnitWeight)
    assert vc2 == VertexCovering(cover_graph, [1, 2, 3, 4])
    assert vc2.graph is vc.graph


def test_vertex_covering_interface(cover_graph):
    vc = VertexCovering(cover_graph, [1, 3, 1, 4])
    assert num_variables(vc) == 4
    assert VertexCovering.flavors() == (0, 1)
    assert problem_size(vc) == (4, 5)
    assert is_vertex_covering(cover_graph, [1, 0, 1, 0])
    assert not is_vertex_covering(cover_graph, [1, 0, 0, 1])


def test_set_packing_interface(packing_sets):
    sp = SetPacking(packing_sets)
    assert set_weights(sp, [1, 2, 2, 1, 1]) == SetPacking(packing_sets, [1, 2, 2, 1, 1])
    assert sp == SetPacking([[1, 2, 5], [1, 3], [2, 4], [3, 6], [2, 3, 6]])
    assert sp != SetPacking([[1, 3], [1, 2, 5], [2, 4], [3, 6], [2, 3, 6]])
    assert problem_size(sp) == (6, 5)
    assert problem_size(sp).num_elements == 6
    assert variables(sp) == [1, 2, 3, 4, 5]
    assert SetPacking.flavors() == (0, 1)


def test_independent_set_interface(cover_graph):
    s = IndependentSet(cover_graph)
    assert is_independent_set(cover_graph, [0, 1, 0, 1])
    assert not is_independent_set(cover_graph, [1, 1, 0, 0])
    assert s.objective_sense == "max"


def test_qubo_interface():
    q = QUBO([[1.0, -1.0], [0.0, 2.0]])
    assert num_variables(q) == 2
    assert is_weighted(q)
    assert weight_type(q) is np.float64
    assert [c.variables for c in q.soft_constraints()] == [(1,), (2,), (1, 2)]
    assert set_weights(q, np.eye(2)) == QUBO(np.eye(2))
    with pytest.raises(WeightLengthError):
        QUBO(np.zeros((2, 3)))


def test_is_weighted_is_a_type_check(cover_graph):
    vc = VertexCovering(cover_graph)
    assert not is_weighted(vc)
    assert is_weighted(set_weights(vc, [1, 2, 3, 4]))
    assert is_weighted(set_weights(vc, [1, 1, 1, 1]))


def test_weight_type(cover_graph):
    vc = VertexCovering(cover_graph)
    assert weight_type(vc) is int
    assert weight_type(set_weights(vc, [1, 2, 3, 4])) is int
    assert weight_type(set_weights(vc, [0.5, 1, 1, 1])) is np.float64
    assert weight_type(set_weights(vc, np.ones(4, dtype=np.int16))) is np.int16
    assert set_weights(vc, [0.5, 1, 1, 1]).energy_type() is np.float64
    assert vc.energy_type() is np.int64


def test_weight_length_checked_at_construction(cover_graph, cycle4, packing_sets):
    with pytest.raises(WeightLengthError):
        VertexCovering(cover_graph, [1, 2])
    with pytest.raises(WeightLengthError):
        Coloring(cycle4, 3, [1, 2, 3])
    with pytest.raises(WeightLengthError):
        SetPacking(packing_sets, [1])


def test_vertices_must_be_one_based():
    g = nx.Graph([(0, 1), (1, 2)])
    with pytest.raises(ConstraintError):
        VertexCovering(g)


def test_weights_are_frozen(cover_graph):
    raw = np.array([1, 2, 3, 4])
    vc = VertexCovering(cover_graph, raw)
    raw[0] = 10
    assert vc.weights[0] == 1
    with pytest.raises(ValueError):
        vc.weights[0] = 5


def test_configuration_space_size(cycle4, cover_graph):
    assert configuration_space_size(VertexCovering(cover_graph)) == 4.0
    assert configuration_space_size(Coloring(cycle4, 3)) == pytest.approx(4 * math.log2(3))
