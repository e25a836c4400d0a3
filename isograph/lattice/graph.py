"""Directed graph construction, vertex merging and reachability."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Iterable, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)


class Direction(str, Enum):
    """Which edges a traversal follows."""

    IN = "in"  # predecessors
    OUT = "out"  # successors


def _freeze(adjacency: Mapping[T, Iterable[T]]) -> Mapping[T, frozenset[T]]:
    return MappingProxyType({vertex: frozenset(dsts) for vertex, dsts in adjacency.items()})


@dataclass(frozen=True)
class DirectedGraph(Generic[T]):
    """Immutable directed graph with forward and reverse adjacency.

    Every edge endpoint is also a vertex. Cycles are allowed.
    """

    nodes: frozenset[T] = field(default_factory=frozenset)
    edges: Mapping[T, frozenset[T]] = field(
        default_factory=lambda: MappingProxyType({})
    )  # vertex -> successors
    reverse_edges: Mapping[T, frozenset[T]] = field(
        default_factory=lambda: MappingProxyType({})
    )  # vertex -> predecessors

    @classmethod
    def from_mapping(cls, mapping: Mapping[T, Iterable[T]]) -> "DirectedGraph[T]":
        """Build a graph from a ``{src: [dst, ...]}`` mapping.

        Keys and listed targets all become vertices; each (key, target) pair
        becomes an edge.
        """
        graph = cls.from_edges((src, dst) for src, dsts in mapping.items() for dst in dsts)
        return graph._with_nodes(mapping.keys())

    @classmethod
    def from_edges(cls, pairs: Iterable[tuple[T, T]]) -> "DirectedGraph[T]":
        """Build a graph from (src, dst) pairs."""
        nodes: set[T] = set()
        edges: dict[T, set[T]] = defaultdict(set)
        reverse_edges: dict[T, set[T]] = defaultdict(set)

        for src, dst in pairs:
            nodes.add(src)
            nodes.add(dst)
            edges[src].add(dst)
            reverse_edges[dst].add(src)

        return cls(
            nodes=frozenset(nodes),
            edges=_freeze(edges),
            reverse_edges=_freeze(reverse_edges),
        )

    def _with_nodes(self, extra: Iterable[T]) -> "DirectedGraph[T]":
        # Keys with an empty target list still count as vertices.
        return DirectedGraph(
            nodes=self.nodes | frozenset(extra),
            edges=self.edges,
            reverse_edges=self.reverse_edges,
        )

    def map_vertices(self, rename: Callable[[T], U]) -> "DirectedGraph[U]":
        """Rename every vertex, merging vertices that share an image.

        When two vertices collapse onto one name, the union of their outgoing
        and incoming edges lands on the merged vertex.
        """
        images: dict[T, U] = {vertex: rename(vertex) for vertex in self.nodes}

        merged: dict[U, set[U]] = defaultdict(set)
        for src, dsts in self.edges.items():
            merged[images[src]].update(images[dst] for dst in dsts)

        reverse_merged: dict[U, set[U]] = defaultdict(set)
        for src, dsts in merged.items():
            for dst in dsts:
                reverse_merged[dst].add(src)

        return DirectedGraph(
            nodes=frozenset(images.values()),
            edges=_freeze(merged),
            reverse_edges=_freeze(reverse_merged),
        )

    def vertices(self) -> frozenset[T]:
        return self.nodes

    def successors(self, vertex: T) -> frozenset[T]:
        """Vertices this one has an edge to."""
        return self.edges.get(vertex, frozenset())

    def predecessors(self, vertex: T) -> frozenset[T]:
        """Vertices with an edge to this one."""
        return self.reverse_edges.get(vertex, frozenset())

    def neighbors(self, vertex: T, direction: Direction) -> frozenset[T]:
        if direction is Direction.OUT:
            return self.successors(vertex)
        return self.predecessors(vertex)

    def edge_pairs(self) -> list[tuple[T, T]]:
        """All edges as sorted (src, dst) pairs."""
        return sorted((src, dst) for src, dsts in self.edges.items() for dst in dsts)

    def reachable(self, seeds: Iterable[T], direction: Direction) -> frozenset[T]:
        """Breadth-first closure from every seed at once.

        Returns the seeds plus everything reachable along ``direction``.
        Seeds that are not vertices come back as themselves. No seeds, no
        result.
        """
        visited: set[T] = set()
        queue: deque[T] = deque()

        for seed in seeds:
            if seed not in visited:
                visited.add(seed)
                queue.append(seed)

        while queue:
            current = queue.popleft()
            for nxt in self.neighbors(current, direction):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)

        return frozenset(visited)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)
