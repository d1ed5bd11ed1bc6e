"""
Touchscreen listener that turns finger drags into lock patterns.
"""

import threading
from collections import deque
import logging
from typing import Deque, Dict, List, Optional, Tuple
from evdev import ecodes

from ..config.settings import PatternConfig
from ..device.device_manager import DeviceManager
from ..gestures.grid_layout import GridLayout
from ..gestures.trail import PatternTrail
from ..utils.logger import PatternLogger
from .state import PatternObserver, PatternTracker

X_CODES = (ecodes.ABS_MT_POSITION_X, ecodes.ABS_X)
Y_CODES = (ecodes.ABS_MT_POSITION_Y, ecodes.ABS_Y)


class PatternListener:
    """Reads touchscreen events and feeds the primary finger into a PatternTracker."""

    def __init__(self, observer: Optional[PatternObserver] = None,
                 debug_file: Optional[str] = PatternConfig.DEBUG_LOG_FILE,
                 history_size: int = PatternConfig.MAX_COMPLETED_PATTERNS):
        self.device_manager = DeviceManager()
        self.layout: Optional[GridLayout] = None
        self.logger = PatternLogger(debug_file)

        self.tracker = PatternTracker(observer)
        self.trail = PatternTrail()
        # Most recent finished patterns, oldest dropped first
        self.completed_patterns: Deque[List[Tuple[int, int]]] = deque(maxlen=history_size)

        # State management
        self.running = False
        self.multitouch = True
        self.current_slot = 0
        self.primary_slot: Optional[int] = None
        self.gesture_active = False
        self.position = {'x': 0, 'y': 0}

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        device_info = self.device_manager.get_device_info()
        self.multitouch = device_info['multitouch']
        self.attach_screen(device_info['screen_width'], device_info['screen_height'])

        self.running = True
        self._print_startup_info(device_info)

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()

        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()

    def attach_screen(self, screen_width: int, screen_height: int):
        """Lay the grid out for a screen of the given size."""
        self.layout = GridLayout(screen_width, screen_height)

    def _print_startup_info(self, device_info: Dict):
        """Print startup information."""
        print(f"✅ Found: {self.device_manager.device.name}")
        print(f"📺 Screen: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"🔲 Cell size: {self.layout.CELL_SIZE}px, spacing: {self.layout.CELL_SPACING}px")
        print(f"🎯 Grid origin: ({self.layout.origin_x}, {self.layout.origin_y})")
        print("🎯 Ready! Drag across the grid to draw a pattern, lift to reset.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception as e:
            logging.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch):
        """Process one SYN_REPORT frame of events."""
        began = False
        ended = False
        moved = False

        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                if ev.code == ecodes.ABS_MT_SLOT:
                    self.current_slot = ev.value
                elif ev.code == ecodes.ABS_MT_TRACKING_ID:
                    if ev.value == -1:
                        ended = ended or self._is_primary()
                    elif self.primary_slot is None:
                        self.primary_slot = self.current_slot
                        began = True
                elif self._is_position_code(ev.code, X_CODES) and self._is_primary():
                    self.position['x'] = ev.value
                    moved = True
                elif self._is_position_code(ev.code, Y_CODES) and self._is_primary():
                    self.position['y'] = ev.value
                    moved = True
            elif ev.type == ecodes.EV_KEY and ev.code == ecodes.BTN_TOUCH and not self.multitouch:
                if ev.value and self.primary_slot is None:
                    self.primary_slot = 0
                    began = True
                elif not ev.value:
                    ended = ended or self.primary_slot is not None

        if began:
            self._begin_gesture()
        if moved and self.gesture_active:
            self._handle_position(self.position['x'], self.position['y'])
        if ended:
            self._end_gesture()

    def _is_position_code(self, code: int, codes: Tuple[int, int]) -> bool:
        # Multitouch panels also emit legacy single-touch axes; only one set counts
        mt_code, st_code = codes
        return code == (mt_code if self.multitouch else st_code)

    def _is_primary(self) -> bool:
        if self.primary_slot is None:
            return False
        return not self.multitouch or self.current_slot == self.primary_slot

    def _begin_gesture(self):
        self.gesture_active = True
        self.logger.log_gesture_start(self.position['x'], self.position['y'])

    def _handle_position(self, x: float, y: float) -> bool:
        """Hit test the finger position and try to connect the cell under it."""
        if self.layout is None:
            return False
        cell = self.layout.cell_at(x, y)
        if cell is None:
            return False
        if not self.tracker.submit_touch(*cell):
            return False
        self.trail.add_point(x, y)
        self.logger.log_connected(cell[0], cell[1], self.tracker.connected_count)
        return True

    def _end_gesture(self):
        """Finish the pattern when the primary finger lifts."""
        path = self.tracker.path
        if path:
            self.completed_patterns.append(path)
        self.logger.log_pattern(path)

        self.tracker.clear()
        self.trail.clear()
        self.logger.log_cleared()
        self.primary_slot = None
        self.gesture_active = False
