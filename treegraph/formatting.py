"""Text layouts for cost vectors, matrices and paths."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from treegraph.graph import INFINITY

Cost = Union[int, float]


def _cost_text(value: Cost) -> str:
    if value == INFINITY:
        return "-"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_costs(values: Iterable[Cost]) -> str:
    """Each cost right-aligned in four columns, ``-`` for INFINITY."""
    return "".join(f"{_cost_text(v):>4}" for v in values)


def format_cost_matrix(matrix: Sequence[Sequence[Cost]]) -> str:
    """A square cost matrix with row and column headers, four columns per cell."""
    n = len(matrix)
    lines = ["    " + "".join(f"{j:>4}" for j in range(n))]
    for i in range(n):
        row = matrix[i]
        lines.append(f"{i:>4}" + "".join(f"{_cost_text(row[j]):>4}" for j in range(n)))
    return "\n".join(lines) + "\n"


def format_bool_matrix(matrix: Sequence[Sequence[bool]]) -> str:
    """A square boolean matrix as 1/0 with headers, three columns per cell."""
    n = len(matrix)
    lines = ["   " + "".join(f"{j:>3}" for j in range(n))]
    for i in range(n):
        row = matrix[i]
        lines.append(f"{i:>3}" + "".join(f"{int(row[j]):>3}" for j in range(n)))
    return "\n".join(lines) + "\n"


def format_path(path: Iterable[int]) -> str:
    """The vertices of a path, each followed by a space."""
    return "".join(f"{v} " for v in path)