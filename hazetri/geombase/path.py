"""
Операции над порядком вершин пути.
"""

from __future__ import annotations

from hazetri import log


def rotate_path_clockwise(path: list) -> None:
    """
    Перенести первую вершину пути в конец (на месте).

    Геометрия полигона не меняется, так как последняя вершина
    неявно соединена с первой. Меняется только начальная вершина.
    """
    if path is None:
        raise TypeError("Path must not be None")
    if len(path) < 1:
        log.warn("[Triangulator] attempting to rotate a path with no vertices")
        return
    path.append(path.pop(0))
