"""Graphs, trees, heaps and disjoint sets, with traversal, shortest-path and spanning-tree algorithms."""

__version__ = "0.1.0"