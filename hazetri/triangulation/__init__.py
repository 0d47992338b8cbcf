"""
Триангуляция простых 2D полигонов.
"""

from hazetri.triangulation.triangulator import triangulate, is_diagonal_valid

__all__ = [
    "triangulate",
    "is_diagonal_valid",
]
