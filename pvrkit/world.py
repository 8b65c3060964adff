"""Reader for the plain-text world description used by the walkthrough demo.

The file lists triangles after a header line ``NUMPOLLIES <count>``. Each
triangle takes three lines, one per vertex, with five numbers each:
``x y z u v``. Lines that start with ``/`` are comments. Empty lines are
skipped as well.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_HEADER = "NUMPOLLIES"
_VERTEX_FIELDS = 5


class WorldError(ValueError):
    """Raised when a world description cannot be read."""


@dataclass(frozen=True)
class Vertex:
    """One corner of a triangle: position and texture coordinates."""

    x: float
    y: float
    z: float
    u: float
    v: float


@dataclass(frozen=True)
class Triangle:
    """Three vertices that make up one face of the world."""

    vertices: tuple[Vertex, Vertex, Vertex]


def _content_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        if line.startswith("/") or line.rstrip("\r\n") == "":
            continue
        yield line


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise WorldError(f"unexpected end of world data while reading {what}") from None


def _parse_count(line: str) -> int:
    if not line.startswith(_HEADER):
        raise WorldError(f"expected {_HEADER} header, got {line.strip()!r}")
    tokens = line[len(_HEADER):].split()
    if not tokens:
        raise WorldError("missing triangle count")
    try:
        count = int(tokens[0])
    except ValueError:
        raise WorldError(f"invalid triangle count {tokens[0]!r}") from None
    if count < 0:
        raise WorldError(f"triangle count must not be negative, got {count}")
    return count


def _parse_vertex(line: str) -> Vertex:
    tokens = line.split()
    if len(tokens) < _VERTEX_FIELDS:
        raise WorldError(f"vertex line needs {_VERTEX_FIELDS} numbers: {line.strip()!r}")
    try:
        x, y, z, u, v = (float(token) for token in tokens[:_VERTEX_FIELDS])
    except ValueError:
        raise WorldError(f"invalid number in vertex line {line.strip()!r}") from None
    return Vertex(x, y, z, u, v)


def parse_world(lines: Iterable[str]) -> list[Triangle]:
    """Read the triangles of a world description from *lines*."""
    content = _content_lines(lines)
    count = _parse_count(_next_line(content, "the header"))
    triangles = []
    for index in range(count):
        corners = tuple(
            _parse_vertex(_next_line(content, f"triangle {index}"))
            for _ in range(3)
        )
        triangles.append(Triangle(corners))  # type: ignore[arg-type]
    return triangles


def load_world(path: str | os.PathLike[str]) -> list[Triangle]:
    """Read the world description file at *path*."""
    with open(path, encoding="utf-8") as handle:
        return parse_world(handle)