"""
Приведение треугольников к заданному направлению обхода.
"""

from __future__ import annotations

from hazetri.geombase.predicates import is_triangle_clockwise
from hazetri.geombase.primitives import Triangle


def certify_winding_order(tri: Triangle, clockwise: bool) -> Triangle:
    """
    Вернуть треугольник с обходом по (или против) часовой стрелке.

    Если направление не совпадает, вершины b и c меняются местами.
    Повторное применение ничего не меняет.
    """
    if is_triangle_clockwise(tri) != clockwise:
        return Triangle(tri.a, tri.c, tri.b)
    return tri


def certify_winding_order_all(tris: list[Triangle], clockwise: bool) -> list[Triangle]:
    """Привести все треугольники списка к одному направлению (на месте)."""
    if tris is None:
        raise TypeError("Tris is None; invalid operation.")
    for i in range(len(tris)):
        tris[i] = certify_winding_order(tris[i], clockwise)
    return tris
