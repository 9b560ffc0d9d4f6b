[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treegraph"
version = "0.1.0"
description = "Graph and tree data structures with classic algorithms: traversals, shortest paths, spanning trees, transitive closure, heaps and disjoint sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "tree",
    "binary-tree",
    "dijkstra",
    "floyd",
    "prim",
    "kruskal",
    "warshall",
    "heap",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
