"""Graphs stored as adjacency matrices or adjacency lists."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, TypeVar, Union

INFINITY = math.inf
"""Cost of a missing edge in a weighted graph."""

Cost = Union[int, float]
PathLike = Union[str, "os.PathLike[str]"]
N = TypeVar("N")

_ADJACENCY_LINE = re.compile(r"\s*(\d+)\s*\S(.*)")


@dataclass
class Edge:
    """A weighted edge; edges are ordered by cost alone."""

    orig: int = 0
    dest: int = 0
    cost: Cost = 0

    def __lt__(self, other: Edge) -> bool:
        return self.cost < other.cost


@dataclass(eq=False)
class VertexCost:
    """An entry of a weighted adjacency list; equal when the vertices match."""

    vertex: int
    cost: Cost

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexCost):
            return NotImplemented
        return self.vertex == other.vertex

    def __hash__(self) -> int:
        return hash(self.vertex)


def _parse_cost(token: str) -> Cost:
    try:
        return int(token)
    except ValueError:
        return float(token)


def _cost_text(value: Cost) -> str:
    if value == INFINITY:
        return "-"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _leading(tokens: list[str], convert: Callable[[str], N]) -> list[N]:
    values: list[N] = []
    for token in tokens:
        try:
            values.append(convert(token))
        except ValueError:
            break
    return values


def _split_count(path: PathLike) -> tuple[int, str]:
    text = Path(path).read_text()
    parts = text.split(None, 1)
    if not parts:
        raise ValueError("missing vertex count")
    n = int(parts[0])
    if n < 0:
        raise ValueError("vertex count must not be negative")
    return n, parts[1] if len(parts) > 1 else ""


def _adjacency_lines(text: str, n: int) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(vertex, tokens)`` for each ``v: ...`` line until one fails to parse."""
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ADJACENCY_LINE.match(line)
        if match is None:
            return
        v = int(match.group(1))
        if v >= n:
            raise ValueError(f"vertex {v} out of range")
        yield v, match.group(2).split()


def _check_vertex(w: int, n: int) -> int:
    if not 0 <= w < n:
        raise ValueError(f"vertex {w} out of range")
    return w


class Graph:
    """An unweighted graph stored as a boolean adjacency matrix."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._adj = [[False] * n for _ in range(n)]

    @classmethod
    def from_file(cls, path: PathLike) -> Graph:
        """Read a vertex count followed by lines of the form ``v: w1 w2 ...``."""
        n, rest = _split_count(path)
        graph = cls(n)
        for v, tokens in _adjacency_lines(rest, n):
            for w in _leading(tokens, int):
                graph._adj[v][_check_vertex(w, n)] = True
        return graph

    @classmethod
    def from_weighted(cls, graph: WeightedGraph) -> Graph:
        """Build the graph whose edges are the finite-cost edges of ``graph``."""
        n = len(graph)
        result = cls(n)
        result._adj = [[cost != INFINITY for cost in graph[i]] for i in range(n)]
        return result

    def __len__(self) -> int:
        return len(self._adj)

    def __getitem__(self, v: int) -> list[bool]:
        return self._adj[v]

    def is_directed(self) -> bool:
        """True unless the adjacency matrix is symmetric."""
        n = len(self._adj)
        return any(
            self._adj[i][j] != self._adj[j][i]
            for i in range(n)
            for j in range(i + 1, n)
        )

    def __str__(self) -> str:
        n = len(self._adj)
        lines = [f"{n} vertices", "   " + "".join(f"{j:>3}" for j in range(n))]
        for i, row in enumerate(self._adj):
            lines.append(f"{i:>3}" + "".join(f"{int(x):>3}" for x in row))
        return "\n".join(lines) + "\n"


class WeightedGraph:
    """A weighted graph stored as a cost matrix; missing edges cost INFINITY."""

    INFINITY = INFINITY

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._costs: list[list[Cost]] = [[INFINITY] * n for _ in range(n)]

    @classmethod
    def from_file(cls, path: PathLike) -> WeightedGraph:
        """Read a vertex count followed by the ``n * n`` costs in row order."""
        tokens = Path(path).read_text().split()
        if not tokens:
            raise ValueError("missing vertex count")
        n = int(tokens[0])
        if n < 0:
            raise ValueError("vertex count must not be negative")
        values = tokens[1 : 1 + n * n]
        if len(values) < n * n:
            raise ValueError(f"expected {n * n} costs, found {len(values)}")
        graph = cls(n)
        graph._costs = [
            [_parse_cost(values[i * n + j]) for j in range(n)] for i in range(n)
        ]
        return graph

    @classmethod
    def from_graph(cls, graph: Graph) -> WeightedGraph:
        """Give every edge of ``graph`` cost 1."""
        n = len(graph)
        result = cls(n)
        result._costs = [[1 if x else INFINITY for x in graph[i]] for i in range(n)]
        return result

    def __len__(self) -> int:
        return len(self._costs)

    def __getitem__(self, v: int) -> list[Cost]:
        return self._costs[v]

    def is_directed(self) -> bool:
        """True unless the cost matrix is symmetric."""
        n = len(self._costs)
        return any(
            self._costs[i][j] != self._costs[j][i]
            for i in range(n)
            for j in range(i + 1, n)
        )

    def __str__(self) -> str:
        n = len(self._costs)
        lines = [f"{n} vertices", "    " + "".join(f"{j:>4}" for j in range(n))]
        for i, row in enumerate(self._costs):
            lines.append(f"{i:>4}" + "".join(f"{_cost_text(c):>4}" for c in row))
        return "\n".join(lines) + "\n"


class AdjacencyListGraph:
    """An unweighted graph stored as one list of successors per vertex."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(n)]

    @classmethod
    def from_file(cls, path: PathLike) -> AdjacencyListGraph:
        """Read a vertex count followed by lines of the form ``v: w1 w2 ...``."""
        n, rest = _split_count(path)
        graph = cls(n)
        for v, tokens in _adjacency_lines(rest, n):
            graph._adj[v].extend(_leading(tokens, int))
        return graph

    def __len__(self) -> int:
        return len(self._adj)

    def adjacent(self, v: int) -> list[int]:
        """The successors of ``v``, in insertion order."""
        return self._adj[v]

    def __str__(self) -> str:
        lines = [f"{len(self._adj)} vertices"]
        for i, succ in enumerate(self._adj):
            if succ:
                lines.append(f"{i}:" + "".join(f" {w}" for w in succ))
        return "\n".join(lines) + "\n"


class WeightedAdjacencyListGraph:
    """A weighted graph stored as one list of (vertex, cost) pairs per vertex."""

    INFINITY = INFINITY

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._adj: list[list[VertexCost]] = [[] for _ in range(n)]

    @classmethod
    def from_file(cls, path: PathLike) -> WeightedAdjacencyListGraph:
        """Read a vertex count followed by lines ``v: w1 c1 w2 c2 ...``."""
        n, rest = _split_count(path)
        graph = cls(n)
        for v, tokens in _adjacency_lines(rest, n):
            for w_text, c_text in zip(tokens[0::2], tokens[1::2]):
                try:
                    entry = VertexCost(int(w_text), _parse_cost(c_text))
                except ValueError:
                    break
                graph._adj[v].append(entry)
        return graph

    def __len__(self) -> int:
        return len(self._adj)

    def adjacent(self, v: int) -> list[VertexCost]:
        """The weighted successors of ``v``, in insertion order."""
        return self._adj[v]

    def __str__(self) -> str:
        lines = [f"{len(self._adj)} vertices"]
        for i, succ in enumerate(self._adj):
            if succ:
                lines.append(
                    f"{i}:"
                    + "".join(f" {e.vertex} {_cost_text(e.cost)}" for e in succ)
                )
        return "\n".join(lines) + "\n"