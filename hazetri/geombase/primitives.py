"""
Геометрические примитивы: точка, путь, отрезок, треугольник.

Точка: кортеж (x, y). Путь: список точек, замкнутый неявно:
последняя вершина соединяется с первой.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


def as_point(p) -> Vec2:
    """Привести (x, y), список или строку numpy к кортежу из двух float."""
    return (float(p[0]), float(p[1]))


def as_path(points) -> list[Vec2]:
    """
    Привести последовательность точек или массив shape (N, 2) к пути.

    Всегда возвращает новый список, исходные данные не изменяются.

    Raises:
        TypeError: Если points равен None.
        ValueError: Если данные не приводятся к shape (N, 2).
    """
    if points is None:
        raise TypeError("Path must not be None")

    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Path must be a Nx2 array, got shape {arr.shape}")

    return [(float(x), float(y)) for x, y in arr]


@dataclass(frozen=True)
class Segment:
    """Отрезок [a, b]. Для луча a: начало, b: дальняя точка."""

    a: Vec2
    b: Vec2

    @property
    def center(self) -> Vec2:
        """Середина отрезка."""
        return ((self.a[0] + self.b[0]) * 0.5, (self.a[1] + self.b[1]) * 0.5)


@dataclass(frozen=True)
class Triangle:
    """
    Треугольник из вершин a, b, c.

    Порядок вершин задаёт направление обхода, но геометрически
    любая циклическая перестановка: тот же треугольник.
    """

    a: Vec2
    b: Vec2
    c: Vec2

    def __iter__(self) -> Iterator[Vec2]:
        return iter((self.a, self.b, self.c))

    @staticmethod
    def from_points(points: Sequence) -> "Triangle":
        a, b, c = points
        return Triangle(as_point(a), as_point(b), as_point(c))
