"""World constants and the tile map the player moves in."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

W = 896
H = 896
PI = 3.14159265
P2 = PI / 2
P3 = 3 * PI / 2
BLOCK_SIZE = 64
DR = 0.0174533

_DEFAULT_SIZE = 14
_DEFAULT_LAYOUT = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
)


@dataclass(frozen=True)
class TileMap:
    """A row-major grid of tiles; a value of 1 marks a wall."""

    width: int
    height: int
    cells: tuple[int, ...]
    block_size: int = BLOCK_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))
        if self.width <= 0 or self.height <= 0:
            raise ValueError("map dimensions must be positive")
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )
        if self.block_size <= 0:
            raise ValueError("block size must be positive")

    def __len__(self) -> int:
        return len(self.cells)

    def is_wall(self, index: int) -> bool:
        """Return True if the flat cell index lies on the map and holds a wall."""
        return 0 <= index < len(self.cells) and self.cells[index] == 1

    def cell(self, col: int, row: int) -> int:
        """Return the tile value at a column and row."""
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"cell ({col}, {row}) is outside the map")
        return self.cells[row * self.width + col]

    def cell_index(self, x: float, y: float) -> int:
        """Return the flat index of the tile under world coordinates (x, y)."""
        col = int(x) // self.block_size
        row = int(y) // self.block_size
        return row * self.width + col

    def walls(self) -> Iterator[tuple[int, int]]:
        """Yield the (col, row) of every wall tile, column by column."""
        for col in range(self.width):
            for row in range(self.height):
                if self.cells[row * self.width + col]:
                    yield col, row


def default_map() -> TileMap:
    """Return the built-in 14 by 14 level."""
    return TileMap(_DEFAULT_SIZE, _DEFAULT_SIZE, _DEFAULT_LAYOUT)