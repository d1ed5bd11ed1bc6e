"""
Screen-space layout of the pattern grid and touch hit testing.
"""

from typing import Iterator, Optional, Tuple

from ..config.settings import PatternConfig
from ..utils.geometry import Point, Rect, rect_contains


class GridLayout:
    """Places the grid in the middle of the screen and maps points to cells."""

    def __init__(self, screen_width: int, screen_height: int,
                 size: int = PatternConfig.GRID_SIZE):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.size = size
        self.config = PatternConfig()

        # Calculate pixel values based on screen resolution
        self._calculate_pixel_values()

    def _calculate_pixel_values(self):
        """Calculate pixel values based on screen resolution."""
        short_side = min(self.screen_width, self.screen_height)

        self.CELL_SIZE = max(1, int(short_side * self.config.CELL_SIZE_PERCENT / 100))
        self.CELL_SPACING = int(short_side * self.config.CELL_SPACING_PERCENT / 100)

        self.grid_extent = self.size * self.CELL_SIZE + (self.size - 1) * self.CELL_SPACING
        self.origin_x = (self.screen_width - self.grid_extent) // 2
        self.origin_y = (self.screen_height - self.grid_extent) // 2

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every cell in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def cell_rect(self, row: int, col: int) -> Rect:
        """Bounding box of a cell as (left, top, right, bottom)."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Cell ({row}, {col}) is outside the grid")
        pitch = self.CELL_SIZE + self.CELL_SPACING
        left = self.origin_x + col * pitch
        top = self.origin_y + row * pitch
        return left, top, left + self.CELL_SIZE, top + self.CELL_SIZE

    def cell_center(self, row: int, col: int) -> Point:
        left, top, right, bottom = self.cell_rect(row, col)
        return Point((left + right) / 2, (top + bottom) / 2)

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Return the cell under (x, y), or None if the point is in a gap."""
        for row, col in self.cells():
            if rect_contains(self.cell_rect(row, col), x, y):
                return row, col
        return None
