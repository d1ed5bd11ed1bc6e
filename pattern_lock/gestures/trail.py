"""
Line trail drawn between the touch points of accepted cells.
"""

from typing import List, Optional, Tuple

from ..utils.geometry import Point

Segment = Tuple[Point, Point]


class PatternTrail:
    """Collects line segments joining consecutive accepted touch points."""

    def __init__(self):
        self.last_point: Optional[Point] = None
        self.segments: List[Segment] = []

    def add_point(self, x: float, y: float) -> Optional[Segment]:
        """
        Extend the trail to (x, y).

        The first point of a gesture only anchors the trail; every later
        point closes a segment from the previous anchor.

        Returns:
            The new segment, or None for the anchoring point
        """
        current = Point(x, y)
        segment = None
        if self.last_point is not None:
            segment = (self.last_point, current)
            self.segments.append(segment)
        self.last_point = current
        return segment

    def clear(self):
        """Drop every segment and the anchor."""
        self.last_point = None
        self.segments = []

    def __len__(self):
        return len(self.segments)
