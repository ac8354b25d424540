"""Drawing of the top-down map, the cast rays and the projected walls."""

from __future__ import annotations

import pygame

from rayquest.raycast import Column, cast_columns
from rayquest.world import TileMap

BACKGROUND_COLOR = (0, 0, 0)
WALL_COLOR = (255, 255, 255)
GRID_COLOR = (100, 0, 0)
PLAYER_COLOR = (55, 20, 200)
RAY_COLOR = (0, 200, 0)
COLUMN_COLOR = (200, 200, 200)
PLAYER_SIZE = 10


class Renderer:
    """Draws the world onto a surface: the map on the left, the 3D view on the right."""

    def __init__(self, surface: pygame.Surface, tiles: TileMap) -> None:
        self.surface = surface
        self.tiles = tiles

    @property
    def map_width(self) -> int:
        """Width in pixels of the top-down map."""
        return self.tiles.width * self.tiles.block_size

    @property
    def map_height(self) -> int:
        """Height in pixels of the top-down map."""
        return self.tiles.height * self.tiles.block_size

    @property
    def view_width(self) -> int:
        """Width in pixels left for the projected view beside the map."""
        return max(self.surface.get_width() - self.map_width, 0)

    def draw_minimap(self, player) -> None:
        """Draw wall tiles, grid lines and the player marker."""
        block = self.tiles.block_size
        for col, row in self.tiles.walls():
            rect = pygame.Rect(col * block, row * block, block, block)
            pygame.draw.rect(self.surface, WALL_COLOR, rect)
        for row in range(self.tiles.height):
            y = row * block
            pygame.draw.line(self.surface, GRID_COLOR, (0, y), (self.map_width, y))
        for col in range(self.tiles.width):
            x = col * block
            pygame.draw.line(self.surface, GRID_COLOR, (x, 0), (x, self.map_height))
        half = PLAYER_SIZE // 2
        marker = pygame.Rect(
            int(player.pos.x) - half, int(player.pos.y) - half, PLAYER_SIZE, PLAYER_SIZE
        )
        pygame.draw.rect(self.surface, PLAYER_COLOR, marker)

    def draw_rays(self, player, columns: list[Column]) -> None:
        """Draw each ray on the map and its wall slice in the projected view."""
        origin = (player.pos.x, player.pos.y)
        for column in columns:
            end = (column.hit.point.x, column.hit.point.y)
            pygame.draw.line(self.surface, RAY_COLOR, origin, end)
            x = self.map_width + column.x
            top = column.line_offset
            bottom = column.line_offset + column.line_height
            pygame.draw.line(self.surface, COLUMN_COLOR, (x, top), (x, bottom))

    def render(self, player) -> list[Column]:
        """Clear the surface and draw a whole frame; return the cast columns."""
        self.surface.fill(BACKGROUND_COLOR)
        self.draw_minimap(player)
        columns: list[Column] = []
        if self.view_width > 0:
            columns = cast_columns(
                player, self.tiles, self.view_width, self.surface.get_height()
            )
            self.draw_rays(player, columns)
        return columns