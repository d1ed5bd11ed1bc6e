"""
Grid geometry and trail recording for pattern gestures.

This module maps touch positions onto grid cells and keeps the line
trail that joins the cells of the current pattern.
"""

from .grid_layout import GridLayout
from .trail import PatternTrail

__all__ = [
    'GridLayout',
    'PatternTrail'
]
