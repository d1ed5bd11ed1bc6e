"""
Pattern Lock Package
A 3x3 lock pattern input driven by a touchscreen.
"""

from .core.state import (
    CellOutOfRangeError,
    GridState,
    PathTracker,
    PatternObserver,
    PatternTracker,
    can_connect
)
from .core.listener import PatternListener
from .gestures.grid_layout import GridLayout
from .gestures.trail import PatternTrail
from .device.device_manager import DeviceManager

__version__ = "2.0.0"
__all__ = [
    "CellOutOfRangeError",
    "GridState",
    "PathTracker",
    "PatternObserver",
    "PatternTracker",
    "can_connect",
    "PatternListener",
    "GridLayout",
    "PatternTrail",
    "DeviceManager"
]
