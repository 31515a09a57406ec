"""The maze screen: the player eats food while three ghosts wander."""

from __future__ import annotations

import random

import pygame

from hexmaze.actor import Actor
from hexmaze.context import AssetID, Context
from hexmaze.game_over import GameOver
from hexmaze.pause import PauseGame
from hexmaze.state import State

TILE = 16
STEP_INTERVAL = 0.25

# 1 is a wall, 0 a corridor holding food.
MAZE = (
    "1111111111" "1111111111" "1111111111" "1111111111",
    "1000000000" "0000100000" "0010000000" "1000000001",
    "1011011011" "1110101111" "1010111110" "1011011011",
    "1011111011" "1110101111" "1010111110" "1011111001",
    "1011111011" "1110101111" "1010111110" "1011111011",
    "1000000000" "0000000000" "0000000000" "0000000001",
    "1011111011" "0111110110" "1101111101" "1011111011",
    "1011111011" "0111110110" "1101111101" "1011111001",
    "1000000011" "0111110110" "1101111101" "1000000011",
    "1011111011" "0000000110" "1100000001" "1011111011",
    "1011111011" "1110111110" "1111101111" "1011111011",
    "1000000011" "1110111110" "1111101111" "1000000011",
    "1011111011" "0000000110" "1100000001" "1011111001",
    "1011111011" "0111110110" "1101111101" "1011111011",
    "1000000011" "0111110110" "1101111101" "1000000001",
    "1011111011" "0111110110" "1101111101" "1011111011",
    "1011111000" "0000000000" "0000000000" "0011111001",
    "1011011011" "1111111111" "1111111111" "1011011011",
    "1000000000" "0000000000" "0000000000" "0000000001",
    "1111111111" "1111111111" "1111111111" "1111111111",
)

DIRECTIONS = ((0, TILE), (TILE, 0), (-TILE, 0), (0, -TILE))
GHOST_STARTS = ((TILE * 38, TILE), (TILE * 38, TILE * 18), (TILE, TILE * 18))

TEXTURE_FILES = (
    (AssetID.BLACK_SQUARE, "assets/textures/black_square.png", True),
    (AssetID.FOOD, "assets/textures/food.png", False),
    (AssetID.WALL, "assets/textures/wall.png", False),
    (AssetID.PACMAN, "assets/textures/hexagon-16.png", False),
    (AssetID.BLUE_GHOST, "assets/textures/blue_hexagon.png", False),
    (AssetID.PURPLE_GHOST, "assets/textures/purple_hexagon.png", False),
    (AssetID.RED_GHOST, "assets/textures/red_hexagon.png", False),
)

GHOST_TEXTURES = (AssetID.RED_GHOST, AssetID.BLUE_GHOST, AssetID.PURPLE_GHOST)

_KEY_DIRECTIONS = {
    pygame.K_UP: (0, -TILE),
    pygame.K_DOWN: (0, TILE),
    pygame.K_LEFT: (-TILE, 0),
    pygame.K_RIGHT: (TILE, 0),
}


class GamePlay(State):
    """The playing field, advanced one tile every quarter of a second."""

    def __init__(self, context: Context, rng=None) -> None:
        self.context = context
        self._rng = rng if rng is not None else random.Random()
        self.background: pygame.Surface | None = None
        self._wall_image: pygame.Surface | None = None
        self._food_image: pygame.Surface | None = None
        self.walls: list[pygame.Rect] = []
        self.foods: list[pygame.Rect] = []
        self.player = Actor()
        self.ghosts = [Actor() for _ in GHOST_STARTS]
        self.elapsed = 0.0
        self.direction = pygame.Vector2(TILE, 0)
        self.ghost_directions = [pygame.Vector2(0, 0) for _ in GHOST_STARTS]

    def init(self) -> None:
        assets = self.context.assets
        for asset_id, path, repeated in TEXTURE_FILES:
            assets.add_texture(asset_id, path, repeated)

        self.background = assets.texture(AssetID.BLACK_SQUARE).fill(self.context.window.size)
        self._wall_image = assets.texture(AssetID.WALL).fill((TILE, TILE))
        self._food_image = assets.texture(AssetID.FOOD).fill((TILE, TILE))

        self.walls = []
        self.foods = []
        for row, line in enumerate(MAZE):
            for column, cell in enumerate(line):
                tile = pygame.Rect(column * TILE, row * TILE, TILE, TILE)
                (self.walls if cell == "1" else self.foods).append(tile)

        self.player.init(assets.texture(AssetID.PACMAN).surface)
        for ghost, texture_id, start in zip(self.ghosts, GHOST_TEXTURES, GHOST_STARTS):
            ghost.init(assets.texture(texture_id).surface)
            ghost.position = pygame.Vector2(start)

    def process_input(self) -> None:
        self._pump_events(self.context.window, self.handle_key)

    def handle_key(self, key: int) -> None:
        """Turn the player with the arrows; pause with Escape."""
        if key in _KEY_DIRECTIONS:
            self.direction = pygame.Vector2(_KEY_DIRECTIONS[key])
        elif key == pygame.K_ESCAPE:
            self.context.states.add(PauseGame(self.context))

    def update(self, delta: float) -> None:
        self.elapsed += delta
        if self.elapsed > STEP_INTERVAL:
            self._step()
            self.elapsed = 0.0

    def _random_direction(self) -> pygame.Vector2:
        return pygame.Vector2(DIRECTIONS[self._rng.randrange(len(DIRECTIONS))])

    def _step(self) -> None:
        for index, ghost in enumerate(self.ghosts):
            last = self.ghost_directions[index]
            chosen = self._random_direction()
            while chosen == -last:
                chosen = self._random_direction()
            self.ghost_directions[index] = chosen
            ghost.move(chosen)

        if not self.foods:
            self.context.states.add(GameOver(self.context, "You Won!"), replace=True)
            return

        self.foods = [food for food in self.foods if not self.player.is_on(food)]
        if any(self.player.is_on(ghost) for ghost in self.ghosts):
            self.context.states.add(GameOver(self.context, "Game Over!"), replace=True)

        self.player.move(self.direction)
        for wall in self.walls:
            if self.player.is_on(wall):
                self.player.move(-self.direction)
                self.direction = pygame.Vector2(0, 0)
            for ghost, heading in zip(self.ghosts, self.ghost_directions):
                if ghost.is_on(wall):
                    ghost.move(-heading)

    def draw(self) -> None:
        window = self.context.window
        window.clear()
        if self.background is not None:
            window.blit(self.background, (0, 0))
        for wall in self.walls:
            window.blit(self._wall_image, wall.topleft)
        for food in self.foods:
            window.blit(self._food_image, food.topleft)
        for actor in (self.player, *self.ghosts):
            window.blit(actor.image, actor.bounds.topleft)
        window.display()

    def start(self) -> None:
        """Resume play; the step timer carries on where it stopped."""
        super().start()

    def pause(self) -> None:
        """Freeze play while another screen covers the maze."""
        super().pause()