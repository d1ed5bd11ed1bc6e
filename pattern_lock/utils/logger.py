"""
Logging utilities for pattern events.
"""

import datetime
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class PatternLogger:
    """Prints pattern events to the console and mirrors them to a debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file is None:
            return
        try:
            self.debug_file = open(debug_file, 'w')
            self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
            self.debug_file.flush()
        except OSError as e:
            print(f"Warning: Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _write_debug(self, timestamp: str, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(f"[{timestamp}] {message}\n")
            self.debug_file.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write debug file: {e}")

    def log_gesture_start(self, x: float, y: float):
        """Log the finger landing that begins a pattern."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 👆 PATTERN START at ({int(x)}, {int(y)})")
        self._write_debug(timestamp, f"start x={x} y={y}")

    def log_connected(self, row: int, col: int, path_length: int):
        """Log a newly connected cell."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 🔵 CONNECTED: cell ({row}, {col}) [{path_length}/9]")
        self._write_debug(timestamp, f"connected row={row} col={col} length={path_length}")

    def log_pattern(self, path: List[Tuple[int, int]]):
        """Log a finished pattern when the finger is lifted."""
        timestamp = self._timestamp()
        if not path:
            print(f"[{timestamp}] ✋ PATTERN END: no cells connected")
        else:
            sequence = " → ".join(f"({r},{c})" for r, c in path)
            print(f"[{timestamp}] ✋ PATTERN END: {len(path)} cell(s)")
            print(f"   Sequence: {sequence}")
        self._write_debug(timestamp, f"pattern {path}")

    def log_cleared(self):
        timestamp = self._timestamp()
        print(f"[{timestamp}] 🧹 CLEARED")
        self._write_debug(timestamp, "cleared")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
