"""
Utilities package for pattern geometry and logging.
"""

from .geometry import Point, Rect, rect_contains
from .logger import PatternLogger

__all__ = [
    'Point',
    'Rect',
    'rect_contains',
    'PatternLogger'
]
