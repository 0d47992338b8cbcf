"""
Hazetri - триангуляция простых 2D полигонов и сборка буферов меша.

Основные модули:
- geombase - примитивы, геометрические предикаты, направление обхода
- triangulation - разбиение полигона на треугольники отсечением ушей
- mesh - сборка вершинного и индексного буферов без дубликатов
- path_asset - модель редактируемого пути и её сохранение
"""

from .geombase import (
    Segment,
    Triangle,
    segments_intersect,
    bounding_box,
    point_in_polygon,
    is_polygon_clockwise,
    is_triangle_clockwise,
    approximately_equal,
    certify_winding_order,
    certify_winding_order_all,
    rotate_path_clockwise,
)
from .triangulation import triangulate
from .mesh import (
    MeshBuffers,
    add_vertex_to_mesh,
    add_triangle_to_mesh,
    add_triangles_to_mesh,
)
from .path_asset import PolygonPath, PathPersistence
from .settings import TriangulatorSettings, SettingsManager

__version__ = '0.1.0'

__all__ = [
    # Geombase
    'Segment',
    'Triangle',
    'segments_intersect',
    'bounding_box',
    'point_in_polygon',
    'is_polygon_clockwise',
    'is_triangle_clockwise',
    'approximately_equal',
    'certify_winding_order',
    'certify_winding_order_all',
    'rotate_path_clockwise',
    # Triangulation
    'triangulate',
    # Mesh
    'MeshBuffers',
    'add_vertex_to_mesh',
    'add_triangle_to_mesh',
    'add_triangles_to_mesh',
    # Assets
    'PolygonPath',
    'PathPersistence',
    'TriangulatorSettings',
    'SettingsManager',
]
