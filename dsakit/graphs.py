"""Adjacency-list graphs with traversal, cycle detection and topological sorting."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Set, Tuple


class Graph:
    """A graph on vertices ``0 .. vertices - 1`` stored as adjacency lists.

    Neighbours keep the order in which their edges were added, and every
    traversal visits them in that order.
    """

    def __init__(self, vertices: int, undirected: bool = True) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self._adjacency: List[List[int]] = [[] for _ in range(vertices)]
        self.undirected = undirected

    @property
    def vertices(self) -> int:
        """The number of vertices."""
        return len(self._adjacency)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._adjacency):
            raise IndexError(f"vertex {u} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``, and ``v -> u`` too when the graph is undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if self.undirected:
            self._adjacency[v].append(u)

    def neighbours(self, u: int) -> Tuple[int, ...]:
        """Return the neighbours of ``u`` in insertion order."""
        self._check(u)
        return tuple(self._adjacency[u])

    def __str__(self) -> str:
        return "\n".join(
            f"{u} : {' '.join(map(str, neighbours))}".rstrip()
            for u, neighbours in enumerate(self._adjacency)
        )

    def _bfs_from(self, start: int, visited: Set[int]) -> List[int]:
        order: List[int] = []
        queue = deque([start])
        visited.add(start)
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._adjacency[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def _dfs_from(self, start: int, visited: Set[int]) -> List[int]:
        order = [start]
        visited.add(start)
        stack: List[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for v in stack[-1]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    stack.append(iter(self._adjacency[v]))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int = 0) -> List[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        return self._bfs_from(start, set())

    def dfs(self, start: int = 0) -> List[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        return self._dfs_from(start, set())

    def has_path(self, source: int, destination: int) -> bool:
        """Tell whether ``destination`` can be reached from ``source``."""
        self._check(source)
        self._check(destination)
        if source == destination:
            return True
        return destination in self._dfs_from(source, set())

    def is_bipartite(self) -> bool:
        """Tell whether the component of vertex 0 can be two-coloured."""
        if not self._adjacency:
            return True
        color = {0: 0}
        queue = deque([0])
        while queue:
            current = queue.popleft()
            for v in self._adjacency[current]:
                if v not in color:
                    color[v] = 1 - color[current]
                    queue.append(v)
                elif color[v] == color[current]:
                    return False
        return True

    def has_cycle_undirected(self) -> bool:
        """Tell whether the component of vertex 0 contains a cycle, edges undirected."""
        if not self._adjacency:
            return False
        visited = {0}
        stack: List[Tuple[int, int, Iterator[int]]] = [(0, -1, iter(self._adjacency[0]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for v in neighbours:
                if v not in visited:
                    visited.add(v)
                    stack.append((v, node, iter(self._adjacency[v])))
                    break
                if v != parent:
                    return True
            else:
                stack.pop()
        return False

    def has_cycle_directed(self) -> bool:
        """Tell whether the graph, edges taken as directed, contains a cycle."""
        visited: Set[int] = set()
        on_path: Set[int] = set()
        for root in range(len(self._adjacency)):
            if root in visited:
                continue
            visited.add(root)
            on_path.add(root)
            stack: List[Tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                node, neighbours = stack[-1]
                for v in neighbours:
                    if v not in visited:
                        visited.add(v)
                        on_path.add(v)
                        stack.append((v, iter(self._adjacency[v])))
                        break
                    if v in on_path:
                        return True
                else:
                    stack.pop()
                    on_path.discard(node)
        return False

    def bfs_components(self) -> List[List[int]]:
        """Return each connected component in breadth-first order."""
        visited: Set[int] = set()
        return [
            self._bfs_from(u, visited)
            for u in range(len(self._adjacency))
            if u not in visited
        ]

    def dfs_components(self) -> List[List[int]]:
        """Return each connected component in depth-first order."""
        visited: Set[int] = set()
        return [
            self._dfs_from(u, visited)
            for u in range(len(self._adjacency))
            if u not in visited
        ]

    def topological_sort(self) -> List[int]:
        """Return a topological order found by depth-first search."""
        visited: Set[int] = set()
        finished: List[int] = []
        for root in range(len(self._adjacency)):
            if root in visited:
                continue
            visited.add(root)
            stack: List[Tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                node, neighbours = stack[-1]
                for v in neighbours:
                    if v not in visited:
                        visited.add(v)
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]

    def topological_sort_kahn(self) -> List[int]:
        """Return a topological order by Kahn's algorithm; vertices on cycles are left out."""
        indegree = [0] * len(self._adjacency)
        for neighbours in self._adjacency:
            for v in neighbours:
                indegree[v] += 1
        queue = deque(u for u, degree in enumerate(indegree) if degree == 0)
        order: List[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for v in self._adjacency[current]:
                indegree[v] -= 1
                if indegree[v] == 0:
                    queue.append(v)
        return order