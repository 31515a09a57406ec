"""A moving figure on the maze: the player or a ghost."""

from __future__ import annotations

import pygame

START_POSITION = (16, 16)


class Actor:
    """An image at a position that moves by whole steps."""

    def __init__(self) -> None:
        self.image: pygame.Surface | None = None
        self.position = pygame.Vector2(START_POSITION)

    def init(self, image: pygame.Surface) -> None:
        """Give the actor its image and put it at the start position."""
        self.image = image
        self.position = pygame.Vector2(START_POSITION)

    def move(self, direction) -> None:
        self.position = self.position + pygame.Vector2(direction)

    @property
    def bounds(self) -> pygame.Rect:
        """The area the actor covers on screen."""
        if self.image is None:
            raise RuntimeError("actor has no image")
        width, height = self.image.get_size()
        return pygame.Rect(round(self.position.x), round(self.position.y), width, height)

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is None:
            raise RuntimeError("actor has no image")
        surface.blit(self.image, (round(self.position.x), round(self.position.y)))

    def is_on(self, other: Actor | pygame.Rect) -> bool:
        """True when the actor covers exactly the same area as ``other``."""
        other_bounds = other.bounds if isinstance(other, Actor) else pygame.Rect(other)
        return self.bounds == other_bounds