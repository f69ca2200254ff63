from typing import List


class DistanceMatrix:
    """
    Dense symmetric table of non-negative integer distances.

    Entries start at 0. Indices must be less than `node_count`, anything else
    is a programming error and raises IndexError.
    """

    __slots__ = ("_node_count", "_matrix")

    def __init__(self, node_count: int):
        if node_count < 0:
            raise ValueError("node count must be non-negative")
        self._node_count = node_count
        self._matrix: List[int] = [0] * (node_count * node_count)

    @property
    def node_count(self) -> int:
        return self._node_count

    def update(self, a: int, b: int, distance: int) -> None:
        """
        Set the distance between a and b in both directions.
        """
        if distance < 0:
            raise ValueError(f"distance must be non-negative, got {distance}")
        self._matrix[self._index_at(a, b)] = distance
        self._matrix[self._index_at(b, a)] = distance

    def get(self, a: int, b: int) -> int:
        return self._matrix[self._index_at(a, b)]

    def _index_at(self, row: int, column: int) -> int:
        if not 0 <= row < self._node_count:
            raise IndexError(f"row {row} must be less than matrix width {self._node_count}")
        if not 0 <= column < self._node_count:
            raise IndexError(f"column {column} must be less than matrix width {self._node_count}")
        return row * self._node_count + column

    def __repr__(self) -> str:
        return f"DistanceMatrix(node_count={self._node_count})"
