"""Loading and lookup of the textures and fonts the game draws with."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

DEFAULT_CHARACTER_SIZE = 30


@dataclass
class Texture:
    """An image loaded from disk, optionally meant to be tiled."""

    surface: pygame.Surface
    repeated: bool = False

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def fill(self, size: tuple[int, int]) -> pygame.Surface:
        """Return a surface of ``size`` covered by this texture.

        A repeated texture is tiled over the whole area; otherwise it is
        drawn once at the top-left corner and the rest stays transparent.
        """
        width, height = size
        target = pygame.Surface((width, height), pygame.SRCALPHA)
        tile_width, tile_height = self.size
        if not self.repeated or tile_width == 0 or tile_height == 0:
            target.blit(self.surface, (0, 0))
            return target
        for y in range(0, height, tile_height):
            for x in range(0, width, tile_width):
                target.blit(self.surface, (x, y))
        return target


class FontFace:
    """A font file that can be rendered at any character size."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._sizes: dict[int, pygame.font.Font] = {}

    def at(self, size: int = DEFAULT_CHARACTER_SIZE) -> pygame.font.Font:
        """Return the font at ``size`` points, loading it on first use."""
        if size not in self._sizes:
            self._sizes[size] = pygame.font.Font(self.path, size)
        return self._sizes[size]

    def render(
        self,
        text: str,
        colour: tuple[int, int, int],
        size: int = DEFAULT_CHARACTER_SIZE,
    ) -> pygame.Surface:
        return self.at(size).render(text, True, colour)


class AssetManager:
    """Keeps textures and fonts by numeric identifier.

    Files that fail to load are silently skipped; asking for an identifier
    that was never loaded raises ``KeyError``.
    """

    def __init__(self) -> None:
        self._textures: dict[int, Texture] = {}
        self._fonts: dict[int, FontFace] = {}

    def add_texture(self, asset_id: int, path: str, repeated: bool = False) -> None:
        try:
            surface = pygame.image.load(path)
        except (OSError, pygame.error):
            return
        self._textures[asset_id] = Texture(surface, repeated)

    def add_font(self, asset_id: int, path: str) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        face = FontFace(path)
        try:
            face.at()
        except (OSError, pygame.error):
            return
        self._fonts[asset_id] = face

    def texture(self, asset_id: int) -> Texture:
        return self._textures[asset_id]

    def font(self, asset_id: int) -> FontFace:
        return self._fonts[asset_id]