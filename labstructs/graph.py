"""A directed graph stored as adjacency lists, with depth- and breadth-first traversal."""

from __future__ import annotations

import argparse
from typing import Iterable, Iterator, List, Optional, Sequence

from labstructs.linked_queue import LinkedQueue
from labstructs.unordered_linked_list import UnorderedLinkedList

END_OF_LIST = -999


class Graph:
    """Graph whose vertices are 0 .. n-1, each with an ordered list of neighbours."""

    def __init__(self, adjacency: Iterable[Iterable[int]] = ()) -> None:
        lists: List[UnorderedLinkedList] = [UnorderedLinkedList(row) for row in adjacency]
        size = len(lists)
        for vertex, neighbours in enumerate(lists):
            for neighbour in neighbours:
                if not 0 <= neighbour < size:
                    raise ValueError(
                        f"vertex {vertex} has neighbour {neighbour}, "
                        f"outside 0..{size - 1}"
                    )
        self._adjacency = lists

    @classmethod
    def parse(cls, text: str) -> "Graph":
        """Build a graph from text: a vertex count, then for each vertex its
        number followed by its neighbours and a closing -999."""
        tokens = iter(text.split())

        def next_int() -> int:
            token = next(tokens, None)
            if token is None:
                raise ValueError("unexpected end of graph description")
            try:
                return int(token)
            except ValueError:
                raise ValueError(f"{token!r} is not an integer") from None

        size = next_int()
        if size < 0:
            raise ValueError("the number of vertices must not be negative")
        rows: List[List[int]] = [[] for _ in range(size)]
        for _ in range(size):
            vertex = next_int()
            if not 0 <= vertex < size:
                raise ValueError(f"vertex {vertex} is outside 0..{size - 1}")
            neighbour = next_int()
            while neighbour != END_OF_LIST:
                rows[vertex].append(neighbour)
                neighbour = next_int()
        return cls(rows)

    @classmethod
    def from_file(cls, path) -> "Graph":
        """Read a graph description from the file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            return cls.parse(handle.read())

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return iter(self._adjacency[vertex])

    def _dft(self, start: int, visited: List[bool]) -> Iterator[int]:
        visited[start] = True
        yield start
        stack = [self._neighbours(start)]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    yield neighbour
                    stack.append(self._neighbours(neighbour))
                    break
            else:
                stack.pop()

    def depth_first(self) -> List[int]:
        """Return every vertex in depth-first order, restarting at each unvisited one."""
        visited = [False] * len(self._adjacency)
        order: List[int] = []
        for vertex in range(len(self._adjacency)):
            if not visited[vertex]:
                order.extend(self._dft(vertex, visited))
        return order

    def dft_at_vertex(self, vertex: int) -> List[int]:
        """Return the vertices reachable from ``vertex`` in depth-first order."""
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is not in the graph")
        visited = [False] * len(self._adjacency)
        return list(self._dft(vertex, visited))

    def breadth_first(self) -> List[int]:
        """Return every vertex in breadth-first order, restarting at each unvisited one."""
        visited = [False] * len(self._adjacency)
        order: List[int] = []
        queue = LinkedQueue()
        for vertex in range(len(self._adjacency)):
            if visited[vertex]:
                continue
            queue.add(vertex)
            visited[vertex] = True
            order.append(vertex)
            while not queue.is_empty():
                current = queue.remove()
                for neighbour in self._adjacency[current]:
                    if not visited[neighbour]:
                        queue.add(neighbour)
                        visited[neighbour] = True
                        order.append(neighbour)
        return order

    def is_empty(self) -> bool:
        return not self._adjacency

    def clear(self) -> None:
        """Remove every vertex."""
        self._adjacency = []

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "".join(
            f"{vertex} {neighbours}\n" for vertex, neighbours in enumerate(self._adjacency)
        ) + "\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._adjacency]!r})"


def _line(vertices: Iterable[int]) -> str:
    return "".join(f" {vertex} " for vertex in vertices)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print depth- and breadth-first traversals of a graph read from a file."
    )
    parser.add_argument("file", nargs="?", help="graph description file")
    args = parser.parse_args(argv)

    path = args.file
    if path is None:
        try:
            path = input("Enter input file name: ").strip()
        except EOFError:
            print()
            return 1
        print()

    try:
        graph = Graph.from_file(path)
    except OSError:
        print("Cannot open input file.")
        return 1
    except ValueError as exc:
        print(f"Invalid graph description: {exc}")
        return 1

    print("Depth First Traversal: ")
    print(_line(graph.depth_first()))
    print("\nBreadth First Traversal: ")
    print(_line(graph.breadth_first()))
    return 0