"""Vertex/index buffers built from 2D triangles."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from hazetri.geombase.predicates import approximately_equal
from hazetri.geombase.primitives import Triangle, Vec3
from hazetri.geombase.winding import certify_winding_order
from hazetri.settings import get_settings


def add_vertex_to_mesh(vertices: list, indices: list, vertex) -> int:
    """
    Add a vertex to mesh data, reusing an approximately equal existing vertex.

    Appends the index of the vertex used to `indices` and returns it.
    Linear scan, so adding n vertices costs O(n^2).
    """
    for i, existing in enumerate(vertices):
        if approximately_equal(existing, vertex):
            indices.append(i)
            return i
    vertices.append((float(vertex[0]), float(vertex[1]), float(vertex[2])))
    index = len(vertices) - 1
    indices.append(index)
    return index


def add_triangle_to_mesh(
    vertices: list,
    indices: list,
    tri: Triangle,
    z: float,
    clockwise: bool,
) -> None:
    """
    Add a single triangle to mesh data.

    The triangle is first brought to the requested winding order, then its
    vertices are added in a, b, c order at depth `z`. The three appended
    indices always form one face.
    """
    tri = certify_winding_order(tri, clockwise)
    add_vertex_to_mesh(vertices, indices, (tri.a[0], tri.a[1], z))
    add_vertex_to_mesh(vertices, indices, (tri.b[0], tri.b[1], z))
    add_vertex_to_mesh(vertices, indices, (tri.c[0], tri.c[1], z))


def add_triangles_to_mesh(
    vertices: list,
    indices: list,
    tris: Iterable[Triangle],
    z: float,
    clockwise: bool,
) -> None:
    """Add triangles to mesh data in list order. Buffers may already hold geometry."""
    for tri in tris:
        add_triangle_to_mesh(vertices, indices, tri, z, clockwise)


class MeshBuffers:
    """
    Accumulator for deduplicated vertex and index buffers.

    Same buffer instance keeps growing across repeated add calls.
    Not synchronized: share between threads only under external locking.
    """

    def __init__(self, vertices: Optional[list] = None, indices: Optional[list] = None):
        self.vertices: list[Vec3] = vertices if vertices is not None else []
        self.indices: list[int] = indices if indices is not None else []

    def add_vertex(self, vertex) -> int:
        return add_vertex_to_mesh(self.vertices, self.indices, vertex)

    def add_triangle(self, tri: Triangle, z: Optional[float] = None, clockwise: Optional[bool] = None) -> None:
        z, clockwise = self._defaults(z, clockwise)
        add_triangle_to_mesh(self.vertices, self.indices, tri, z, clockwise)

    def add_triangles(self, tris: Iterable[Triangle], z: Optional[float] = None, clockwise: Optional[bool] = None) -> None:
        """Add triangles; depth and winding default to the configured settings."""
        z, clockwise = self._defaults(z, clockwise)
        add_triangles_to_mesh(self.vertices, self.indices, tris, z, clockwise)

    def _defaults(self, z, clockwise):
        settings = get_settings()
        if z is None:
            z = settings.depth
        if clockwise is None:
            clockwise = settings.clockwise
        return z, clockwise

    def vertex_count(self) -> int:
        return len(self.vertices)

    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def faces(self) -> list[tuple[int, int, int]]:
        """Index triples, one per face."""
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx) - 2, 3)]

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Vertices as float32 (N, 3) and indices as uint32 (M, 3), ready for upload."""
        verts = np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3)
        idx = np.asarray(self.indices, dtype=np.uint32).reshape(-1, 3)
        return verts, idx

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()
