"""
Shared geometry helpers for grid layout and trail drawing.
"""

from typing import Tuple

Rect = Tuple[float, float, float, float]  # left, top, right, bottom


class Point:
    """Represents a 2D point."""

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def as_tuple(self) -> Tuple[int, int]:
        """Integer pixel position, as drawing APIs expect."""
        return int(self.x), int(self.y)


def rect_contains(rect: Rect, x: float, y: float) -> bool:
    """Whether (x, y) lies inside rect, edges included."""
    left, top, right, bottom = rect
    return left <= x <= right and top <= y <= bottom
