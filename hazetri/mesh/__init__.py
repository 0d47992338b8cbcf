"""Mesh data assembly from triangulated polygons."""

from hazetri.mesh.buffers import (
    MeshBuffers,
    add_vertex_to_mesh,
    add_triangle_to_mesh,
    add_triangles_to_mesh,
)

__all__ = [
    "MeshBuffers",
    "add_vertex_to_mesh",
    "add_triangle_to_mesh",
    "add_triangles_to_mesh",
]
