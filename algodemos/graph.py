"""Breadth-first and depth-first traversal over adjacency lists."""

from __future__ import annotations

from collections import deque


def _traversal_line(order: list[int]) -> str:
    return "".join(f"{node} " for node in order)


class Graph:
    """An undirected graph kept as adjacency lists."""

    def __init__(self, vertices: int = 0) -> None:
        self.vertices = vertices
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, v: int, w: int) -> None:
        """Connect v and w in both directions."""
        self._adjacency.setdefault(v, []).append(w)
        self._adjacency.setdefault(w, []).append(v)

    def bfs(self, start: int) -> list[int]:
        """Return the nodes reachable from start in breadth-first order."""
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            node = pending.popleft()
            order.append(node)
            for neighbor in self._adjacency.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    pending.append(neighbor)
        return order


class DirectedGraph:
    """A directed graph that remembers which nodes were already visited."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}
        self._visited: set[int] = set()

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from u to v."""
        self._adjacency.setdefault(u, []).append(v)

    def dfs(self, node: int) -> list[int]:
        """Return nodes newly reached from node in depth-first order.

        Visited nodes are remembered across calls, so a second traversal
        only yields nodes that no earlier traversal reached.
        """
        if node in self._visited:
            return []
        self._visited.add(node)
        order = [node]
        stack = [iter(self._adjacency.get(node, ()))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in self._visited:
                    self._visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adjacency.get(neighbor, ())))
                    break
            else:
                stack.pop()
        return order


def run_graphs() -> None:
    """Print the breadth-first and depth-first examples."""
    graph = Graph(6)
    for v, w in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]:
        graph.add_edge(v, w)
    print("Breadth-First Search starting from node 0:")
    print(_traversal_line(graph.bfs(0)), end="")

    directed = DirectedGraph()
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 4), (3, 4), (4, 5)]:
        directed.add_edge(u, v)
    print("DFS Traversal: ", end="")
    print(_traversal_line(directed.dfs(0)), end="")