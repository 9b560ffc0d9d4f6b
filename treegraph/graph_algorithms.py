"""Traversals, shortest paths, transitive closure and spanning trees."""

from __future__ import annotations

from collections import deque
from typing import Sequence, Union

from treegraph.graph import INFINITY, Edge, Graph, WeightedGraph
from treegraph.heap import MinHeap
from treegraph.partition import Partition

Cost = Union[int, float]


def _add(x: Cost, y: Cost) -> Cost:
    """Sum of two costs, INFINITY if either one is."""
    if x == INFINITY or y == INFINITY:
        return INFINITY
    return x + y


def _check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range")


def warshall(graph: Graph) -> list[list[bool]]:
    """Reflexive-transitive closure of ``graph`` as a boolean matrix."""
    n = len(graph)
    closure = [list(graph[i]) for i in range(n)]
    for i, row in enumerate(closure):
        row[i] = True
    for k in range(n):
        row_k = closure[k]
        for row_i in closure:
            if row_i[k]:
                for j in range(n):
                    if not row_i[j]:
                        row_i[j] = row_k[j]
    return closure


def depth_first(graph: Graph, start: int) -> list[int]:
    """Depth-first order of every vertex, starting at ``start`` and wrapping round."""
    n = len(graph)
    _check_vertex(start, n)
    visited = [False] * n
    order: list[int] = []

    def visit(v: int) -> None:
        visited[v] = True
        order.append(v)
        row = graph[v]
        for w in range(n):
            if row[w] and not visited[w]:
                visit(w)

    for i in (*range(start, n), *range(start)):
        if not visited[i]:
            visit(i)
    return order


def depth_first_iterative(graph: Graph, start: int) -> list[int]:
    """Depth-first order computed with an explicit stack."""
    n = len(graph)
    _check_vertex(start, n)
    visited = [False] * n
    order: list[int] = []
    for i in (*range(start, n), *range(start)):
        if visited[i]:
            continue
        stack = [i]
        while stack:
            v = stack.pop()
            if visited[v]:
                continue
            visited[v] = True
            order.append(v)
            row = graph[v]
            stack.extend(w for w in reversed(range(n)) if row[w] and not visited[w])
    return order


def breadth_first(graph: Graph, start: int) -> list[int]:
    """Breadth-first order; the successors of a vertex are queued highest first."""
    n = len(graph)
    _check_vertex(start, n)
    visited = [False] * n
    order: list[int] = []
    for i in (*range(start, n), *range(start)):
        if visited[i]:
            continue
        queue = deque([i])
        while queue:
            v = queue.popleft()
            if visited[v]:
                continue
            visited[v] = True
            order.append(v)
            row = graph[v]
            queue.extend(w for w in reversed(range(n)) if row[w] and not visited[w])
    return order


def dijkstra(graph: WeightedGraph, origin: int) -> tuple[list[Cost], list[int]]:
    """Least costs from ``origin`` to every vertex and the predecessor of each."""
    n = len(graph)
    _check_vertex(origin, n)
    dist = list(graph[origin])
    dist[origin] = 0
    pred = [origin] * n
    done = [False] * n
    done[origin] = True
    for _ in range(n - 2):
        best: Cost = INFINITY
        w = origin
        for v in range(n):
            if not done[v] and dist[v] <= best:
                best, w = dist[v], v
        done[w] = True
        row = graph[w]
        for v in range(n):
            if not done[v]:
                through = _add(dist[w], row[v])
                if through < dist[v]:
                    dist[v] = through
                    pred[v] = w
    return dist, pred


def path_from_predecessors(origin: int, v: int, predecessors: Sequence[int]) -> list[int]:
    """The path from ``origin`` to ``v`` recorded in a predecessor vector."""
    path = [v]
    for _ in range(len(predecessors)):
        v = predecessors[v]
        path.append(v)
        if v == origin:
            path.reverse()
            return path
    raise ValueError(f"no path to {origin} in the predecessor vector")


def floyd(graph: WeightedGraph) -> tuple[list[list[Cost]], list[list[int]]]:
    """All-pairs least costs and, for each pair, an intermediate vertex."""
    n = len(graph)
    costs = [list(graph[i]) for i in range(n)]
    via = [[i] * n for i in range(n)]
    for i, row in enumerate(costs):
        row[i] = 0
    for k in range(n):
        row_k = costs[k]
        for i in range(n):
            row_i = costs[i]
            for j in range(n):
                through = _add(row_i[k], row_k[j])
                if through < row_i[j]:
                    row_i[j] = through
                    via[i][j] = k
    return costs, via


def _intermediate(v: int, w: int, via: Sequence[Sequence[int]]) -> list[int]:
    u = via[v][w]
    if u == v:
        return []
    return _intermediate(v, u, via) + [u] + _intermediate(u, w, via)


def floyd_path(v: int, w: int, via: Sequence[Sequence[int]]) -> list[int]:
    """The path from ``v`` to ``w`` given the intermediate matrix of :func:`floyd`."""
    return [v, *_intermediate(v, w, via), w]


def _require_undirected(graph: WeightedGraph) -> None:
    if graph.is_directed():
        raise ValueError("a spanning tree needs an undirected graph")


def prim(graph: WeightedGraph) -> WeightedGraph:
    """Minimum spanning tree grown from vertex 0."""
    _require_undirected(graph)
    n = len(graph)
    tree = WeightedGraph(n)
    if n == 0:
        return tree
    in_tree = [False] * n
    in_tree[0] = True
    heap: MinHeap[Edge] = MinHeap(max(1, n * n))
    for v in range(1, n):
        if graph[0][v] != INFINITY:
            heap.push(Edge(0, v, graph[0][v]))
    for _ in range(n - 1):
        while True:
            if not heap:
                raise ValueError("graph is not connected")
            edge = heap.pop()
            if not in_tree[edge.dest]:
                break
        tree[edge.orig][edge.dest] = tree[edge.dest][edge.orig] = edge.cost
        u = edge.dest
        in_tree[u] = True
        row = graph[u]
        for v in range(n):
            if not in_tree[v] and row[v] != INFINITY:
                heap.push(Edge(u, v, row[v]))
    return tree


def kruskal(graph: WeightedGraph) -> WeightedGraph:
    """Minimum spanning tree built by joining the cheapest edges between components."""
    _require_undirected(graph)
    n = len(graph)
    tree = WeightedGraph(n)
    components = Partition(n)
    heap: MinHeap[Edge] = MinHeap(max(1, n * n))
    for u in range(n):
        for v in range(u + 1, n):
            if graph[u][v] != INFINITY:
                heap.push(Edge(u, v, graph[u][v]))
    joined = 0
    while joined < n - 1:
        if not heap:
            raise ValueError("graph is not connected")
        edge = heap.pop()
        a = components.find(edge.orig)
        b = components.find(edge.dest)
        if a != b:
            components.union(a, b)
            tree[edge.orig][edge.dest] = tree[edge.dest][edge.orig] = edge.cost
            joined += 1
    return tree


def dijkstra_inverse(
    graph: WeightedGraph, destination: int
) -> tuple[list[Cost], list[int]]:
    """Least costs from every vertex to ``destination`` and the next vertex on each path."""
    n = len(graph)
    _check_vertex(destination, n)
    dist = [graph[i][destination] for i in range(n)]
    dist[destination] = 0
    succ = [destination] * n
    done = [False] * n
    done[destination] = True
    for _ in range(n - 2):
        best: Cost = INFINITY
        w = destination
        for v in range(n):
            if not done[v] and dist[v] <= best:
                best, w = dist[v], v
        done[w] = True
        for v in range(n):
            if not done[v]:
                through = _add(dist[w], graph[v][w])
                if through < dist[v]:
                    dist[v] = through
                    succ[v] = w
    return dist, succ