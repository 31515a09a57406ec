"""Screens of the game and the stack that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import pygame


class State(ABC):
    """One screen: it reads input, advances, and draws itself."""

    active = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the screen once it is pushed."""

    @abstractmethod
    def process_input(self) -> None:
        """Handle pending window events."""

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance by ``delta`` seconds."""

    @abstractmethod
    def draw(self) -> None:
        """Render the screen."""

    def pause(self) -> None:
        """Mark the screen as covered by another one."""
        self.active = False

    def start(self) -> None:
        """Mark the screen as the current one."""
        self.active = True

    def _pump_events(self, window, on_key: Callable[[int], None]) -> None:
        """Close the window on quit and pass each key press to ``on_key``."""
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
            elif event.type == pygame.KEYDOWN:
                on_key(event.key)


class StateManager:
    """A stack of screens whose changes are applied between frames."""

    def __init__(self) -> None:
        self._stack: list[State] = []
        self._new_state: State | None = None
        self._add = False
        self._replace = False
        self._remove = False

    def __len__(self) -> int:
        return len(self._stack)

    def add(self, state: State, replace: bool = False) -> None:
        """Schedule ``state`` to be pushed, replacing the top if asked."""
        self._add = True
        self._new_state = state
        self._replace = replace

    def pop_current(self) -> None:
        """Schedule the current screen to be removed."""
        self._remove = True

    def process_state_change(self) -> None:
        """Apply the scheduled removal and addition, in that order."""
        if self._remove and self._stack:
            self._stack.pop()
            if self._stack:
                self._stack[-1].start()
            self._remove = False

        if self._add:
            if self._replace and self._stack:
                self._stack.pop()
                self._replace = False
            if self._stack:
                self._stack[-1].pause()
            new_state = self._new_state
            self._new_state = None
            self._stack.append(new_state)
            new_state.init()
            new_state.start()
            self._add = False

    def current_state(self) -> State:
        """Return the screen on top; ``IndexError`` if there is none."""
        if not self._stack:
            raise IndexError("no current state")
        return self._stack[-1]