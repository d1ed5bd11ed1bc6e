"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)

MT_AXES = (ecodes.ABS_MT_POSITION_X, ecodes.ABS_MT_POSITION_Y)
ST_AXES = (ecodes.ABS_X, ecodes.ABS_Y)

# (x axis, y axis) pairs, preferred first
POSITION_AXES = [MT_AXES, ST_AXES]


class DeviceManager:
    """Finds the touchscreen that drives the pattern grid."""

    def __init__(self):
        self.device = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default
        self.axes = MT_AXES

    def find_device(self):
        """Find the first device that reports absolute X/Y positions.

        Multitouch axes only count on slotted (type B) devices; older
        type A panels are driven through their ABS_X/ABS_Y + BTN_TOUCH
        emulation instead.
        """
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for axes in POSITION_AXES:
            for device in devices:
                abs_info = dict(device.capabilities().get(ecodes.EV_ABS, []))
                x_code, y_code = axes
                if x_code not in abs_info or y_code not in abs_info:
                    continue
                if axes == MT_AXES and ecodes.ABS_MT_SLOT not in abs_info:
                    continue

                self.screen_width = abs_info[x_code].max + 1
                self.screen_height = abs_info[y_code].max + 1
                self.axes = axes
                self.device = device
                logger.info(f"Found touchscreen: {device.name}")
                logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                return device

        logger.error("No touchscreen device found")
        return None

    @property
    def is_multitouch(self) -> bool:
        return self.axes == MT_AXES

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
            'multitouch': self.is_multitouch
        }
