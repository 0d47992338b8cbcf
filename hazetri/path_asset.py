"""
Редактируемый путь полигона, его триангуляция и сохранение в файл.

Модель данных без визуальной части: хэндлы, гизмо и кнопки
инспектора реализует внешний редактор, который читает и меняет
PolygonPath и вызывает triangulate() по команде пользователя.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from hazetri import log
from hazetri.geombase.primitives import Segment, Triangle, Vec2, as_path
from hazetri.mesh.buffers import MeshBuffers
from hazetri.triangulation.triangulator import triangulate


POLYPATH_FILE_EXTENSION = ".polypath"
POLYPATH_FORMAT_VERSION = "1.0"


def default_points() -> list[Vec2]:
    """Начальный путь: треугольник."""
    return [(-0.7, 0.7), (0.5, 0.5), (-0.5, -0.5)]


@dataclass
class PolygonPath:
    """
    Путь полигона и результат его последней триангуляции.
    """

    points: list[Vec2] = field(default_factory=default_points)
    """Вершины пути в локальных координатах."""

    triangles: list[Triangle] = field(default_factory=list)
    """Треугольники последней успешной триангуляции."""

    view_handles: bool = True
    """Показывать ли хэндлы редактирования вершин."""

    view_triangles: bool = True
    """Показывать ли результат триангуляции."""

    name: str = ""

    def reset(self) -> None:
        """Вернуть вершины в начальное положение."""
        self.points = default_points()
        self.triangles = []

    def add_point(self) -> Vec2:
        """
        Добавить вершину между последней и первой.

        Если вершин меньше двух, добавляется (1, 1).
        """
        if len(self.points) < 2:
            point = (1.0, 1.0)
        else:
            p1 = self.points[-1]
            p2 = self.points[0]
            point = ((p1[0] + p2[0]) * 0.5, (p1[1] + p2[1]) * 0.5)
        self.points.append(point)
        return point

    def triangulate(self) -> bool:
        """
        Триангулировать путь.

        При неудаче список треугольников очищается.

        Returns:
            True если триангуляция удалась.
        """
        result = triangulate(self.points)
        if result is None:
            self.triangles = []
            return False
        self.triangles = result
        return True

    def vertex_count(self) -> int:
        return len(self.points)

    def triangle_count(self) -> int:
        return len(self.triangles)

    def edges(self) -> list[Segment]:
        """Рёбра замкнутого контура (для отрисовки)."""
        n = len(self.points)
        if n < 3:
            return []
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def build_mesh(
        self,
        depth: Optional[float] = None,
        clockwise: Optional[bool] = None,
        buffers: Optional[MeshBuffers] = None,
    ) -> MeshBuffers:
        """Добавить треугольники в буферы меша (новые, если не переданы)."""
        if buffers is None:
            buffers = MeshBuffers()
        buffers.add_triangles(self.triangles, depth, clockwise)
        return buffers

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "points": [list(p) for p in self.points],
            "triangles": [[list(tri.a), list(tri.b), list(tri.c)] for tri in self.triangles],
            "view_handles": self.view_handles,
            "view_triangles": self.view_triangles,
        }

    @staticmethod
    def from_dict(data: dict) -> "PolygonPath":
        points = data.get("points")
        try:
            points = as_path(points) if points is not None else default_points()
            triangles = [Triangle.from_points(t) for t in data.get("triangles", [])]
        except (TypeError, IndexError) as e:
            raise ValueError(f"Invalid polypath data: {e}") from e

        return PolygonPath(
            points=points,
            triangles=triangles,
            view_handles=bool(data.get("view_handles", True)),
            view_triangles=bool(data.get("view_triangles", True)),
            name=data.get("name", ""),
        )


class PathPersistence:
    """
    Сохранение и загрузка PolygonPath в файл .polypath.

    Формат: JSON со списками вершин и треугольников.
    """

    @staticmethod
    def save(path_model: PolygonPath, path: Union[str, Path]) -> None:
        """
        Сохранить путь в файл.

        Args:
            path_model: PolygonPath для сохранения.
            path: Путь к файлу (.polypath).
        """
        path = Path(path)

        data = {"version": POLYPATH_FORMAT_VERSION}
        data.update(path_model.to_dict())

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        log.info(f"[PathPersistence] saved {len(path_model.points)} points to {path}")

    @staticmethod
    def load(path: Union[str, Path]) -> PolygonPath:
        """
        Загрузить путь из файла.

        Raises:
            ValueError: Если формат файла неверный.
            FileNotFoundError: Если файл не найден.
        """
        path = Path(path)

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid polypath file: {path}")

        version = str(data.get("version", ""))
        if not version.startswith("1."):
            raise ValueError(f"Unsupported polypath format version: {version}")

        return PolygonPath.from_dict(data)
