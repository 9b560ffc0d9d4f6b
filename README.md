# treegraph

Graph and tree data structures and the textbook algorithms that work on them,
in plain Python with no dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

### `treegraph.heap`

`MinHeap(capacity)` is a binary min-heap that holds at most `capacity` items
and orders them only with `<`.

- `push(item)` adds an item. It raises `OverflowError` when the heap is full.
- `pop()` removes and returns the smallest item.
- `peek()` returns the smallest item and leaves it in place.

Both `pop()` and `peek()` raise `IndexError` on an empty heap. `len()` and
truth testing work as expected.

### `treegraph.partition`

`Partition(n)` is a disjoint-set forest over `0 .. n-1`. It uses union by rank
and path compression.

- `find(x)` returns the representative of the set that holds `x`.
- `union(a, b)` joins the sets whose representatives are `a` and `b`.

An element out of range raises `IndexError`.

### `treegraph.graph`

These are the graph representations. Each one is built empty with `Cls(n)` or
loaded with `Cls.from_file(path)`.

- `Graph` is an unweighted boolean adjacency matrix.
  - `graph[v][w]` is `True` when there is an edge from `v` to `w`.
  - `Graph.from_weighted(wg)` keeps the finite-cost edges of a `WeightedGraph`.
- `WeightedGraph` is a cost matrix. Missing edges cost `INFINITY`, which is
  `math.inf`.
  - `WeightedGraph.from_graph(g)` gives every edge of `g` the cost 1.
- `AdjacencyListGraph` keeps one successor list per vertex, returned by
  `adjacent(v)`.
- `WeightedAdjacencyListGraph` keeps one list of `VertexCost(vertex, cost)`
  entries per vertex. Two entries are equal when their vertices are equal.

`Graph` and `WeightedGraph` also have `is_directed()`, which is true unless the
matrix is symmetric. Every class has a `str()` form. `Edge(orig, dest, cost)`
is a weighted edge, and edges are ordered by cost.

File formats read by `from_file`:

- `Graph`, `AdjacencyListGraph`: the vertex count, then lines `v: w1 w2 ...`.
- `WeightedAdjacencyListGraph`: the vertex count, then lines
  `v: w1 c1 w2 c2 ...`.
- `WeightedGraph`: the vertex count, then the `n * n` costs in row order. A
  missing edge is written `inf`.

### `treegraph.graph_algorithms`

- `warshall(graph)` returns the reflexive-transitive closure of a `Graph` as a
  boolean matrix.
- `depth_first(graph, start)` and `depth_first_iterative(graph, start)` list
  every vertex in depth-first order. The first is recursive and the second uses
  an explicit stack. After `start` the unvisited vertices are taken in turn and
  wrap round, and `breadth_first(graph, start)` does the same in breadth-first
  order.
- `dijkstra(graph, origin)` returns `(costs, predecessors)`.
  `path_from_predecessors(origin, v, predecessors)` rebuilds a path from them.
- `dijkstra_inverse(graph, destination)` returns the least costs from every
  vertex to `destination`, together with the next vertex on each path.
- `floyd(graph)` returns `(costs, via)` for all pairs of vertices.
  `floyd_path(v, w, via)` rebuilds the path from `v` to `w`.
- `prim(graph)` and `kruskal(graph)` return a minimum spanning tree as a
  `WeightedGraph`. Both raise `ValueError` for a directed or disconnected graph.

### `treegraph.formatting`

These functions render results as fixed-width text:

- `format_costs(values)` and `format_cost_matrix(matrix)` use four columns per
  cell and write `-` for `INFINITY`.
- `format_bool_matrix(matrix)` writes `1` and `0` in three columns per cell.
- `format_path(path)` writes the vertices of a path, separated by spaces.

### `treegraph.binary_tree`

`BinaryTree` is a linked binary tree of `BinaryNode`s. Each node has `value`,
`parent`, `left` and `right`.

- `insert_root`, `insert_left` and `insert_right` add nodes and return them.
- `remove_left`, `remove_right` and `remove_root` remove only leaves.
- `height(node)` gives the height of a subtree, and -1 when there is no node.
- `depth(node)` gives the distance of a node from the root.
- `is_empty()` tells whether the tree has a root.
- `copy.copy(tree)` makes a deep copy of the nodes.

These functions read, write and fill trees:

- `write_tree(tree, stream, end)` writes a tree in preorder. The first token is
  the end marker, and that marker stands for every missing child.
- `read_tree(stream)` reads that format back as a tree of strings.
- `fill_tree(tree, end, ask=input)` builds a tree by asking for each node in
  preorder. The prompts are in Spanish.
- `describe_tree(tree)` returns one line per parent–child link. The lines are in
  Spanish.

### `treegraph.general_tree`

`GeneralTree` stores a tree with first-child and next-sibling links. Each
`TreeNode` has `value`, `parent`, `first_child` and `next_sibling`, and
`children()` iterates over its children.

- `insert_root`, `insert_first_child` and `insert_next_sibling` add nodes.
- `remove_first_child`, `remove_next_sibling` and `remove_root` remove only
  leaves.
- `copy.copy(tree)` makes a deep copy.

## Example

```python
from treegraph.graph import WeightedGraph
from treegraph.graph_algorithms import dijkstra, path_from_predecessors

g = WeightedGraph(3)
g[0][1] = 4
g[1][2] = 1
g[0][2] = 7

costs, pred = dijkstra(g, 0)
print(costs)                               # [0, 4, 5]
print(path_from_predecessors(0, 2, pred))  # [0, 1, 2]
```

## What it does not do

treegraph is a library only and has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```