"""Directed graph with per-node and per-edge payloads held in indexed lists."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Edge:
    """A directed edge from ``source`` to ``target`` with optional data."""

    source: int
    target: int
    data: Any = None


@dataclass(slots=True)
class _Node:
    data: Any
    successors: list[int] = field(default_factory=list)


class Graph:
    """A directed graph whose nodes are addressed by position.

    Nodes are numbered in the order they are added. Deleting a node shifts
    every later node down by one, and edges are renumbered to match.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []
        self._edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """The edges in the order they were added."""
        return tuple(self._edges)

    def _check_node(self, node_id: int) -> None:
        if not 0 <= node_id < len(self._nodes):
            raise IndexError(f"no node {node_id} in a graph of {len(self._nodes)}")

    def add_node(self, data: Any) -> int:
        """Add a node holding a copy of ``data`` and return its index."""
        self._nodes.append(_Node(copy.deepcopy(data)))
        return len(self._nodes) - 1

    def add_edge(self, u: int, v: int, data: Any = None) -> None:
        """Add an edge from node ``u`` to node ``v``."""
        self._check_node(u)
        self._check_node(v)
        self._edges.append(Edge(u, v, copy.deepcopy(data)))
        self._nodes[u].successors.append(v)

    def delete_edge(self, edge_id: int) -> None:
        """Remove the edge at position ``edge_id``; out-of-range ids are ignored."""
        if not 0 <= edge_id < len(self._edges):
            return
        edge = self._edges.pop(edge_id)
        successors = self._nodes[edge.source].successors
        if edge.target in successors:
            successors.remove(edge.target)

    def delete_node(self, node_id: int) -> None:
        """Remove a node and every edge touching it; out-of-range ids are ignored."""
        if not 0 <= node_id < len(self._nodes):
            return
        for edge_id in reversed(range(len(self._edges))):
            edge = self._edges[edge_id]
            if node_id in (edge.source, edge.target):
                self.delete_edge(edge_id)
        del self._nodes[node_id]

        def shifted(index: int) -> int:
            return index - 1 if index > node_id else index

        for node in self._nodes:
            node.successors = [shifted(t) for t in node.successors if t != node_id]
        for edge in self._edges:
            edge.source = shifted(edge.source)
            edge.target = shifted(edge.target)

    def successors(self, node_id: int) -> list[int]:
        """Return the targets of the edges leaving ``node_id``, in insertion order."""
        self._check_node(node_id)
        return list(self._nodes[node_id].successors)

    def node_data(self, node_id: int) -> Any:
        """Return the data stored at ``node_id``."""
        self._check_node(node_id)
        return self._nodes[node_id].data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes)

    def adjacency_matrix(self) -> list[list[int]]:
        """Return a square 0/1 matrix with a 1 where an edge leads from row to column."""
        size = len(self._nodes)
        matrix = [[0] * size for _ in range(size)]
        for row, node in zip(matrix, self._nodes):
            for target in node.successors:
                row[target] = 1
        return matrix

    def format_adjacency_matrix(self) -> str:
        """Render the adjacency matrix, one line per row, each entry followed by a space."""
        return "".join(
            "".join(f"{cell} " for cell in row) + "\n"
            for row in self.adjacency_matrix()
        )