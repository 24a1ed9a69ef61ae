"""Day 12: counting paths through a cave system."""

from collections.abc import Iterable
from typing import Optional


class Graph:
    """Undirected graph of named caves; lower-case caves are small."""

    def __init__(self) -> None:
        self.nodes: list[str] = []
        self._is_small: list[bool] = []
        self._adjacent: dict[int, list[int]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]]) -> "Graph":
        graph = cls()
        for a, b in edges:
            first = graph._index_or_add(a)
            second = graph._index_or_add(b)
            graph._adjacent.setdefault(first, []).append(second)
            graph._adjacent.setdefault(second, []).append(first)
        return graph

    def _index_or_add(self, node: str) -> int:
        index = self.node_to_index(node)
        if index is None:
            self.nodes.append(node)
            self._is_small.append(all("a" <= char <= "z" for char in node))
            index = len(self.nodes) - 1
        return index

    def node_to_index(self, node: str) -> Optional[int]:
        try:
            return self.nodes.index(node)
        except ValueError:
            return None

    def is_node_small(self, node: str) -> bool:
        index = self.node_to_index(node)
        if index is None:
            raise KeyError(node)
        return self._is_small[index]

    def _neighbors(self, index: int) -> list[int]:
        return self._adjacent.get(index, [])

    def _require(self, node: str, what: str) -> int:
        index = self.node_to_index(node)
        if index is None:
            raise ValueError(f"Invalid {what}: {node!r}")
        return index

    def find_simple_paths(
        self, start: str, end: str, visiting_twice: Optional[str] = None
    ) -> int:
        """Count paths from ``start`` to ``end`` visiting small caves once.

        With ``visiting_twice`` set, only paths that visit that small cave
        exactly twice are counted.
        """
        start_index = self._require(start, "start")
        end_index = self._require(end, "stop")
        twice = None if visiting_twice is None else self._require(visiting_twice, "visit twice")

        visited = [0] * len(self.nodes)
        visited[start_index] = 1
        stack = [(start_index, iter(self._neighbors(start_index)))]
        paths = 0

        while stack:
            root, children = stack[-1]
            child = next(children, None)
            if child is None:
                if self._is_small[root]:
                    visited[root] -= 1
                stack.pop()
                continue
            if visited[child] > 0 and (twice != child or visited[child] >= 2):
                continue
            if child == end_index:
                if twice is None or visited[twice] == 2:
                    paths += 1
            else:
                stack.append((child, iter(self._neighbors(child))))
                if self._is_small[child]:
                    visited[child] += 1
        return paths

    def __str__(self) -> str:
        lines = []
        for key in sorted(self._adjacent):
            targets = "".join(f"{self.nodes[v]} " for v in self._adjacent[key])
            lines.append(f"{self.nodes[key]} → {targets}\n")
        return "".join(lines)


def parse(text: str) -> Graph:
    edges = []
    for line in text.splitlines():
        a, sep, b = line.partition("-")
        if not sep:
            raise ValueError("Malformated input!")
        edges.append((a, b))
    return Graph.from_edges(edges)


def part_a(graph: Graph) -> int:
    """Paths visiting every small cave at most once."""
    return graph.find_simple_paths("start", "end")


def part_b(graph: Graph) -> int:
    """Paths where one small cave other than start/end may be visited twice."""
    total = sum(
        graph.find_simple_paths("start", "end", node)
        for node in graph.nodes
        if node not in ("start", "end") and graph.is_node_small(node)
    )
    return total + graph.find_simple_paths("start", "end")