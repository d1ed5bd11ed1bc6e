"""
Touch and path state tracking for the lock pattern grid.

The tracker owns two pieces of state for the current gesture: the
occupancy grid (which cells are already connected) and the ordered path
of connected cells. Both are only mutated through ``submit_touch`` and
are replaced wholesale by ``clear``.
"""

import logging
import weakref
from typing import List, Optional, Tuple

import numpy as np

from ..config.settings import PatternConfig

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class CellOutOfRangeError(ValueError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, row, col, size: int = PatternConfig.GRID_SIZE):
        super().__init__(f"Cell ({row}, {col}) is outside the {size}x{size} grid")
        self.row = row
        self.col = col


class GridState:
    """Occupancy table: True where a cell has already been connected."""

    def __init__(self, size: int = PatternConfig.GRID_SIZE):
        self.size = size
        self.lock_locations = np.zeros((size, size), dtype=bool)

    def check_bounds(self, row: int, col: int):
        """Raise CellOutOfRangeError unless (row, col) addresses a cell."""
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise CellOutOfRangeError(row, col, self.size)
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise CellOutOfRangeError(row, col, self.size)

    def is_connected(self, row: int, col: int) -> bool:
        self.check_bounds(row, col)
        return bool(self.lock_locations[row, col])

    def mark(self, row: int, col: int):
        self.check_bounds(row, col)
        self.lock_locations[row, col] = True

    @property
    def connected_count(self) -> int:
        return int(np.count_nonzero(self.lock_locations))

    @property
    def is_full(self) -> bool:
        return bool(self.lock_locations.all())

    def copy(self) -> np.ndarray:
        """Return a copy of the occupancy table."""
        return self.lock_locations.copy()


class PathTracker:
    """Ordered record of connected cells, in touch order."""

    def __init__(self):
        self._cells: List[Cell] = []

    def append(self, row: int, col: int):
        self._cells.append((int(row), int(col)))

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    @property
    def last(self) -> Optional[Cell]:
        return self._cells[-1] if self._cells else None

    def __len__(self):
        return len(self._cells)

    def __contains__(self, cell):
        return tuple(cell) in self._cells

    def __iter__(self):
        return iter(list(self._cells))

    def __repr__(self):
        return f"PathTracker({self._cells})"


def can_connect(row: int, col: int, grid: GridState) -> bool:
    """Return whether (row, col) may still be added to the path.

    Pure check: the grid is not modified.

    Raises:
        CellOutOfRangeError: If the coordinate is outside the grid
    """
    return not grid.is_connected(row, col)


class PatternObserver:
    """Receives pattern events from a PatternTracker.

    Callbacks run synchronously on the thread that called the tracker.
    Observers that need to touch UI state must redispatch themselves.
    """

    def on_connected(self, row: int, col: int):
        """Called after cell (row, col) joined the path."""

    def on_cleared(self):
        """Called after every cell was reset."""


class PatternTracker:
    """Admits touches into the path and notifies a single observer.

    The observer is held through a weak reference, so registering it does
    not keep it alive. Once it has been garbage collected notifications
    are simply dropped.
    """

    def __init__(self, observer: Optional[PatternObserver] = None,
                 size: int = PatternConfig.GRID_SIZE):
        self.size = size
        self.grid = GridState(size)
        self.user_path = PathTracker()
        self._observer_ref = None
        self.set_observer(observer)

    def set_observer(self, observer: Optional[PatternObserver]):
        """Register the observer, or detach it by passing None."""
        self._observer_ref = weakref.ref(observer) if observer is not None else None

    @property
    def observer(self) -> Optional[PatternObserver]:
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    def submit_touch(self, row: int, col: int) -> bool:
        """Try to connect (row, col).

        Returns:
            True if the cell was added to the path, False if it was
            already connected

        Raises:
            CellOutOfRangeError: If the coordinate is outside the grid
        """
        if not can_connect(row, col, self.grid):
            logger.debug("Rejected touch at (%s, %s): already connected", row, col)
            return False

        row, col = int(row), int(col)
        self.grid.mark(row, col)
        self.user_path.append(row, col)

        observer = self.observer
        if observer is not None:
            observer.on_connected(row, col)
        return True

    def clear(self):
        """Reset the grid and path. Always succeeds."""
        self.grid = GridState(self.size)
        self.user_path = PathTracker()

        observer = self.observer
        if observer is not None:
            observer.on_cleared()

    @property
    def path(self) -> List[Cell]:
        return self.user_path.cells

    @property
    def occupancy(self) -> np.ndarray:
        return self.grid.copy()

    @property
    def connected_count(self) -> int:
        return self.grid.connected_count

    @property
    def is_full(self) -> bool:
        return self.grid.is_full

    def is_connected(self, row: int, col: int) -> bool:
        return self.grid.is_connected(row, col)
