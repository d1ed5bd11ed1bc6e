#!/usr/bin/env python3
"""Lock Pattern Demo with Visual Feedback.

The mouse stands in for a finger: press and drag across the 3x3 grid
to connect cells, release to clear the pattern.
"""

import os
import sys
from typing import List, Optional, Tuple

import pygame

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pattern_lock.config.settings import PatternConfig
from pattern_lock.core.state import PatternObserver, PatternTracker
from pattern_lock.gestures.grid_layout import GridLayout
from pattern_lock.gestures.trail import PatternTrail


class PatternLockDemo(PatternObserver):
    """Interactive demo for the pattern lock."""

    def __init__(self) -> None:
        pygame.init()
        self.config = PatternConfig()
        width, height = self.config.DEMO_WINDOW_SIZE
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Pattern Lock Demo")

        self.layout = GridLayout(width, height)
        self.tracker = PatternTracker(self)
        self.trail = PatternTrail()
        self.is_drawing = False

        # Cell labels, updated only through observer callbacks
        self.labels = [["" for _ in range(self.layout.size)] for _ in range(self.layout.size)]
        self.last_pattern: Optional[List[Tuple[int, int]]] = None

        self.colors = self.config.DEMO_COLORS
        self.font = pygame.font.Font(None, self.layout.CELL_SIZE)
        self.small_font = pygame.font.Font(None, 32)

    def on_connected(self, row: int, col: int) -> None:
        self.labels[row][col] = "•"

    def on_cleared(self) -> None:
        for row in self.labels:
            for col in range(len(row)):
                row[col] = ""

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.is_drawing = True
                        self.touch(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing:
                        self.touch(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.release()

            self.draw()
            clock.tick(self.config.DEMO_FPS)

    def touch(self, pos: Tuple[int, int]) -> None:
        """Connect the cell under the pointer, if any."""
        cell = self.layout.cell_at(*pos)
        if cell is not None and self.tracker.submit_touch(*cell):
            self.trail.add_point(*pos)

    def release(self) -> None:
        """End the gesture and reset the grid."""
        self.is_drawing = False
        if self.tracker.path:
            self.last_pattern = self.tracker.path
        self.tracker.clear()
        self.trail.clear()

    def draw(self) -> None:
        """Render the grid, the trail and the last pattern."""
        self.screen.fill(self.colors['background'])

        radius = self.layout.CELL_SIZE // 2
        for row, col in self.layout.cells():
            left, top, right, bottom = self.layout.cell_rect(row, col)
            rect = pygame.Rect(left, top, right - left, bottom - top)
            pygame.draw.rect(self.screen, self.colors['cell'], rect, border_radius=radius)
            pygame.draw.rect(self.screen, self.colors['border'], rect, 1, border_radius=radius)

            label = self.labels[row][col]
            if label:
                txt = self.font.render(label, True, self.colors['dot'])
                self.screen.blit(txt, txt.get_rect(center=rect.center))

        for start, end in self.trail.segments:
            pygame.draw.line(self.screen, self.colors['line'],
                             start.as_tuple(), end.as_tuple(), self.config.LINE_WIDTH)

        if self.last_pattern:
            sequence = " ".join(f"({r},{c})" for r, c in self.last_pattern)
            txt = self.small_font.render(f"Last pattern: {sequence}", True, self.colors['text'])
            self.screen.blit(txt, (10, 10))

        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = PatternLockDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
