from typing import Sequence, Tuple

import hamiltonian_dp
from distance_matrix import DistanceMatrix
from utils import MAXIMUM_NODE_COUNT, ORIGIN


class GraphCapacityError(ValueError):
    """
    Raised when a graph has more nodes than a subset bitmask can track.
    """


class Graph:
    """
    Complete undirected graph with a synthetic origin at index 0.

    `nodes` holds every node name in index order, origin first. The graph is
    read-only once built.
    """

    def __init__(self, nodes: Sequence[str], distances: DistanceMatrix) -> None:
        if len(nodes) > MAXIMUM_NODE_COUNT:
            raise GraphCapacityError(
                f"can only track as many nodes as bits in a {MAXIMUM_NODE_COUNT}-bit word, got {len(nodes)}"
            )
        if len(nodes) > distances.node_count:
            raise ValueError("distance matrix must have room for every node")
        self._nodes: Tuple[str, ...] = tuple(nodes)
        self._distances = distances
        self._ids = {name: idx for idx, name in enumerate(self._nodes)}

    @property
    def nodes(self) -> Tuple[str, ...]:
        return self._nodes

    @property
    def node_count(self) -> int:
        """Number of nodes, origin included."""
        return len(self._nodes)

    @property
    def distances(self) -> DistanceMatrix:
        return self._distances

    def real_nodes(self) -> Tuple[str, ...]:
        return self._nodes[ORIGIN + 1:]

    def distance(self, a: str, b: str) -> int:
        """
        Distance between two nodes given by name.
        """
        return self._distances.get(self._ids[a], self._ids[b])

    def shortest_path(self) -> int:
        return hamiltonian_dp.shortest_path(self._distances, self.node_count)

    @classmethod
    def parse_from(cls, text: str) -> "Graph":
        from graph_parser import parse_graph
        return parse_graph(text)

    def __repr__(self) -> str:
        return f"Graph(nodes={list(self.real_nodes())})"
