"""Tests for the Edge record and LatticeGraph multigraph."""

import dataclasses

import pytest

from lattice_graph.lattice.models import Edge, LatticeGraph, StateType


class TestEdge:
    """Edge identity ignores weight; ordering uses only weight."""

    def test_fields(self):
        edge = Edge(3, 7, "OUT", 1.5)
        assert edge.start_state == 3
        assert edge.end_state == 7
        assert edge.output_symbol == "OUT"
        assert edge.weight == 1.5

    def test_weight_defaults_to_zero(self):
        assert Edge(1, 2, "y").weight == 0.0

    def test_equal_when_only_weight_differs(self):
        assert Edge(1, 2, "a", 0.5) == Edge(1, 2, "a", 9.0)
        assert hash(Edge(1, 2, "a", 0.5)) == hash(Edge(1, 2, "a", 9.0))

    def test_set_collapses_weight_variants(self):
        edges = {Edge(1, 2, "a", 0.5), Edge(1, 2, "a", 1.0), Edge(1, 2, "b", 0.5)}
        assert len(edges) == 2

    @pytest.mark.parametrize(
        "other",
        [Edge(2, 2, "a"), Edge(1, 3, "a"), Edge(1, 2, "b")],
    )
    def test_not_equal_when_identity_differs(self, other):
        assert Edge(1, 2, "a") != other

    def test_orders_by_weight(self):
        light = Edge(5, 6, "z", -1.0)
        heavy = Edge(0, 1, "a", 2.0)
        assert light < heavy
        assert light <= heavy
        assert heavy > light
        assert heavy >= light
        assert not heavy < light

    def test_sorted_by_weight(self):
        edges = [Edge(0, 1, "a", 3.0), Edge(0, 2, "b", -1.0), Edge(0, 3, "c", 0.0)]
        assert [e.weight for e in sorted(edges)] == [-1.0, 0.0, 3.0]

    def test_same_weight_compares_equal_order(self):
        a = Edge(0, 1, "a", 1.0)
        b = Edge(4, 5, "b", 1.0)
        assert a <= b and b <= a
        assert not a < b

    def test_immutable(self):
        edge = Edge(1, 2, "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.weight = 2.0  # type: ignore[misc]

    def test_comparison_with_non_edge(self):
        with pytest.raises(TypeError):
            Edge(1, 2, "a") < 3  # noqa: B015


class TestStateType:
    def test_values(self):
        assert {t.value for t in StateType} == {"initial", "final", "goal", "intermediate"}


class TestLatticeGraph:
    """Multigraph bookkeeping."""

    def test_empty(self):
        graph = LatticeGraph()
        assert graph.state_count == 0
        assert graph.edge_count == 0
        assert graph.max_out_degree == 0
        assert graph.states == []

    def test_add_edge_creates_endpoints(self):
        graph = LatticeGraph()
        graph.add_edge(Edge(3, 7, "x"))
        assert 3 in graph
        assert 7 in graph
        assert graph.states == [3, 7]

    def test_add_state_is_idempotent(self):
        graph = LatticeGraph()
        assert graph.add_state(1) is True
        assert graph.add_state(1) is False
        assert graph.state_count == 1

    def test_in_and_out_edges(self):
        graph = LatticeGraph()
        e1 = Edge(0, 1, "a")
        e2 = Edge(1, 2, "b")
        graph.add_edge(e1)
        graph.add_edge(e2)
        assert list(graph.out_edges(1)) == [e2]
        assert list(graph.in_edges(1)) == [e1]
        assert list(graph.in_edges(0)) == []
        assert list(graph.out_edges(2)) == []

    def test_parallel_edges_are_kept(self):
        graph = LatticeGraph()
        graph.add_edge(Edge(0, 1, "a", 0.1))
        graph.add_edge(Edge(0, 1, "a", 0.2))
        graph.add_edge(Edge(0, 1, "b"))
        assert graph.edge_count == 3
        assert len(graph.out_edges(0)) == 3
        assert len(graph.in_edges(1)) == 3

    def test_self_loop(self):
        graph = LatticeGraph()
        loop = Edge(4, 4, "sil")
        graph.add_edge(loop)
        assert graph.state_count == 1
        assert list(graph.in_edges(4)) == [loop]
        assert list(graph.out_edges(4)) == [loop]

    def test_edge_views_are_snapshots(self):
        graph = LatticeGraph()
        graph.add_edge(Edge(0, 1, "a"))
        out_edges = graph.out_edges(0)
        assert isinstance(out_edges, tuple)
        assert isinstance(graph.in_edges(1), tuple)
        graph.add_edge(Edge(0, 2, "b"))
        assert len(out_edges) == 1
        assert len(graph.out_edges(0)) == 2
        assert graph.edge_count == 2

    def test_unknown_state_has_no_edges(self):
        graph = LatticeGraph()
        assert list(graph.in_edges(99)) == []
        assert list(graph.out_edges(99)) == []
        assert 99 not in graph

    def test_edges_in_insertion_order(self):
        graph = LatticeGraph()
        edges = [Edge(2, 3, "c"), Edge(0, 1, "a"), Edge(1, 2, "b")]
        for edge in edges:
            graph.add_edge(edge)
        assert graph.edges == edges

    def test_states_sorted(self):
        graph = LatticeGraph()
        graph.add_edge(Edge(9, 2, "a"))
        graph.add_state(5)
        assert graph.states == [2, 5, 9]
        assert list(graph) == [2, 5, 9]
        assert len(graph) == 3

    def test_max_out_degree(self):
        graph = LatticeGraph()
        for end in (1, 2, 3):
            graph.add_edge(Edge(0, end, "x"))
        graph.add_edge(Edge(1, 2, "y"))
        assert graph.max_out_degree == 3
