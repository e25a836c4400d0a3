import pytest

from isograph.lattice.graph import DirectedGraph, Direction


def test_from_mapping_adds_keys_and_targets_as_vertices() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b", "c"], "b": ["c"], "d": []})

    assert graph.vertices() == {"a", "b", "c", "d"}
    assert graph.edge_pairs() == [("a", "b"), ("a", "c"), ("b", "c")]
    assert graph.successors("a") == {"b", "c"}
    assert graph.predecessors("c") == {"a", "b"}
    assert graph.successors("d") == frozenset()
    assert "d" in graph
    assert len(graph) == 4


def test_empty_mapping_gives_empty_graph() -> None:
    graph = DirectedGraph.from_mapping({})

    assert graph.vertices() == frozenset()
    assert graph.edge_pairs() == []
    assert len(graph) == 0


def test_reachable_follows_direction() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"], "b": ["c"], "x": ["c"]})

    assert graph.reachable({"a"}, Direction.OUT) == {"a", "b", "c"}
    assert graph.reachable({"c"}, Direction.IN) == {"a", "b", "c", "x"}
    assert graph.reachable({"b"}, Direction.IN) == {"a", "b"}


def test_reachable_from_several_seeds() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"], "c": ["d"]})

    assert graph.reachable(["a", "c"], Direction.OUT) == {"a", "b", "c", "d"}


def test_reachable_with_no_seeds_is_empty() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"]})

    assert graph.reachable([], Direction.OUT) == frozenset()
    assert graph.reachable(set(), Direction.IN) == frozenset()


def test_reachable_terminates_on_cycles() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"], "b": ["c"], "c": ["a"]})

    assert graph.reachable({"a"}, Direction.OUT) == {"a", "b", "c"}
    assert graph.reachable({"a"}, Direction.IN) == {"a", "b", "c"}


def test_unknown_seed_is_isolated() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"]})

    assert graph.reachable({"zzz"}, Direction.OUT) == {"zzz"}
    assert graph.reachable({"zzz"}, Direction.IN) == {"zzz"}


def test_map_vertices_merges_edges() -> None:
    graph = DirectedGraph.from_mapping({"x1": ["y"], "x2": ["z"], "w": ["x1"]})
    merged = graph.map_vertices(lambda v: "x" if v.startswith("x") else v)

    assert merged.vertices() == {"x", "y", "z", "w"}
    assert merged.successors("x") == {"y", "z"}
    assert merged.predecessors("x") == {"w"}
    assert merged.edge_pairs() == [("w", "x"), ("x", "y"), ("x", "z")]


def test_map_vertices_does_not_duplicate_edges() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b1", "b2"]})
    merged = graph.map_vertices(lambda v: v.rstrip("12"))

    assert merged.edge_pairs() == [("a", "b")]
    assert merged.predecessors("b") == {"a"}


def test_map_vertices_keeps_isolated_vertices() -> None:
    graph = DirectedGraph.from_mapping({"lonely": [], "a": ["b"]})
    merged = graph.map_vertices(str.upper)

    assert merged.vertices() == {"LONELY", "A", "B"}


def test_map_vertices_collapsing_an_edge_leaves_a_self_loop() -> None:
    graph = DirectedGraph.from_mapping({"a": ["alias-of-a"]})
    merged = graph.map_vertices(lambda v: "a")

    assert merged.vertices() == {"a"}
    assert merged.successors("a") == {"a"}
    assert merged.reachable({"a"}, Direction.OUT) == {"a"}


def test_graph_adjacency_is_read_only() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b"]})

    with pytest.raises(TypeError):
        graph.edges["a"] = frozenset({"c"})  # type: ignore[index]
    with pytest.raises(AttributeError):
        graph.nodes = frozenset()  # type: ignore[misc]
