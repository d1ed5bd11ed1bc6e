"""
Configuration settings for the pattern lock.
"""

class PatternConfig:
    """Configuration constants for the lock pattern grid."""

    # Grid dimensions (cells per side)
    GRID_SIZE = 3

    # Layout configurations (as percentages of the shorter screen side)
    CELL_SIZE_PERCENT = 8.0
    CELL_SPACING_PERCENT = 8.0

    # Trail drawing
    LINE_WIDTH = 10

    # Debug output
    DEBUG_LOG_FILE = 'pattern_debug.log'

    # Finished patterns kept by the listener
    MAX_COMPLETED_PATTERNS = 100

    # Demo window
    DEMO_WINDOW_SIZE = (800, 800)
    DEMO_FPS = 60
    DEMO_COLORS = {
        'background': (0, 0, 255),
        'cell': (255, 255, 255),
        'border': (0, 0, 0),
        'dot': (0, 0, 0),
        'line': (20, 20, 20),
        'text': (255, 255, 255),
    }
