"""Hierarchical navigable small world graph for approximate nearest neighbours."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from .util import EF_CONSTRUCTION, M, M_MAX, get_random_level, l2distance

_DEFAULT_EF_SEARCH = 50


class Node:
    """A stored vector with its label and per-layer neighbour sets."""

    _ids = itertools.count()

    def __init__(self, data: Sequence[int], label: int, max_level: int = 0) -> None:
        self.global_id = next(Node._ids)
        self.data = tuple(data)
        self.label = label
        self.max_level = max_level
        self.neighbors: list[set[Node]] = [set() for _ in range(max_level + 1)]

    def set_neighbors(self, neighbors: Iterable["Node"], level: int) -> None:
        """Replace the neighbour set on ``level``."""
        self.neighbors[level] = set(neighbors)

    def add_neighbor(self, node: "Node", level: int) -> None:
        """Link ``node`` as a neighbour on ``level``."""
        self.neighbors[level].add(node)

    def __repr__(self) -> str:
        return f"Node(label={self.label!r}, max_level={self.max_level})"


class HNSW:
    """Layered proximity graph supporting insertion and k-nearest queries."""

    def __init__(
        self,
        dim: int = 128,
        level_fn: Optional[Callable[[], int]] = None,
    ) -> None:
        self.entry_point: Optional[Node] = None
        self.M = M
        self.M_max = M_MAX
        self.ef_construction = EF_CONSTRUCTION
        self.ef_search = _DEFAULT_EF_SEARCH
        self.vec_dim = dim
        self.max_level = 0
        self.nodes: list[Node] = []
        self._level_fn = level_fn if level_fn is not None else get_random_level

    def __len__(self) -> int:
        return len(self.nodes)

    def _check(self, data: Sequence[int]) -> tuple:
        vector = tuple(data)
        if len(vector) != self.vec_dim:
            raise ValueError(
                f"vector has dimension {len(vector)}, expected {self.vec_dim}"
            )
        return vector

    def insert(self, data: Sequence[int], label: int) -> None:
        """Add a vector under ``label``."""
        data = self._check(data)
        if self.entry_point is None:
            node = Node(data, label, 0)
            self.nodes.append(node)
            self.entry_point = node
            return

        ep = self.entry_point
        level = self._level_fn()
        new_node = Node(data, label, level)
        self.nodes.append(new_node)

        for layer in range(self.max_level, level, -1):
            found = self.search_layer(data, ep, 1, layer)
            ep = self.get_nearest(found, data)

        for layer in range(min(level, self.max_level), -1, -1):
            found = self.search_layer(data, ep, self.ef_construction, layer)
            neighbors = self.select_neighbors(data, found, self.M)
            new_node.set_neighbors(neighbors, layer)
            for neighbor in neighbors:
                neighbor.add_neighbor(new_node, layer)
                links = neighbor.neighbors[layer]
                if len(links) > self.M_max:
                    links.discard(self.get_furthest(links, neighbor.data))
            ep = self.get_nearest(found, data)

        if level > self.max_level:
            self.max_level = level
            self.entry_point = new_node

    def query(self, data: Sequence[int], k: int) -> list[int]:
        """Labels of (approximately) the ``k`` nearest vectors, nearest first."""
        data = self._check(data)
        if self.entry_point is None:
            return []
        ep = self.entry_point
        for layer in range(self.max_level, 0, -1):
            found = self.search_layer(data, ep, 1, layer)
            ep = self.get_nearest(found, data)
        found = self.search_layer(data, ep, self.ef_search, 0)
        return [node.label for node in self.select_neighbors(data, found, k)]

    def search_layer(
        self, q: Sequence[int], ep: Node, ef: int, layer: int
    ) -> set[Node]:
        """Greedy best-first search on one layer, keeping up to ``ef`` results."""
        cache: dict[Node, int] = {}

        def dist(node: Node) -> int:
            d = cache.get(node)
            if d is None:
                d = cache[node] = l2distance(node.data, q)
            return d

        found = {ep}
        visited = {ep}
        candidates = {ep}
        while candidates:
            current = min(candidates, key=dist)
            candidates.discard(current)
            furthest = max(found, key=dist)
            if dist(current) > dist(furthest):
                break
            for neighbor in current.neighbors[layer]:
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                furthest = max(found, key=dist)
                if len(found) < ef or dist(neighbor) < dist(furthest):
                    found.add(neighbor)
                    candidates.add(neighbor)
                    if len(found) > ef:
                        found.discard(furthest)
        return found

    def select_neighbors(
        self, q: Sequence[int], candidates: Iterable[Node], num: int
    ) -> list[Node]:
        """The ``num`` candidates closest to ``q``, nearest first."""
        if num <= 0:
            return []
        return heapq.nsmallest(num, candidates, key=lambda n: l2distance(n.data, q))

    def get_nearest(self, candidates: Iterable[Node], q: Sequence[int]) -> Optional[Node]:
        """The candidate closest to ``q``, or None when there are none."""
        return min(candidates, key=lambda n: l2distance(n.data, q), default=None)

    def get_furthest(self, candidates: Iterable[Node], q: Sequence[int]) -> Optional[Node]:
        """The candidate furthest from ``q``, or None when there are none."""
        return max(candidates, key=lambda n: l2distance(n.data, q), default=None)