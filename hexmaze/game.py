"""The game window and its frame loop."""

from __future__ import annotations

import pygame

from hexmaze.context import Context
from hexmaze.main_menu import MainMenu

WINDOW_SIZE = (640, 320)
WINDOW_TITLE = "Pac Man"
FRAME_RATE = 60
TIME_PER_FRAME = 1.0 / FRAME_RATE


class Game:
    """Opens the window and runs the current screen once per frame."""

    def __init__(self) -> None:
        self.context = Context()
        self.context.window.create(WINDOW_SIZE, WINDOW_TITLE)
        self.context.states.add(MainMenu(self.context))

    def run(self) -> None:
        """Run frames until the window is closed."""
        clock = pygame.time.Clock()
        window = self.context.window
        states = self.context.states
        while window.is_open:
            clock.tick(FRAME_RATE)
            states.process_state_change()
            current = states.current_state()
            current.process_input()
            current.update(TIME_PER_FRAME)
            current.draw()


def main(argv=None) -> int:
    """Start the game and play until its window closes."""
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())