"""Grid ray casting: wall hits and projected wall columns."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rayquest.vector import Vec3
from rayquest.world import DR, H, P2, P3, PI, W, TileMap

_EPSILON = 0.0001


@dataclass(frozen=True)
class Hit:
    """Where a ray stopped and how far it travelled."""

    point: Vec3
    distance: float
    vertical: bool = False


@dataclass(frozen=True)
class Column:
    """One screen column of the projected view."""

    x: int
    angle: float
    hit: Hit
    line_height: int
    line_offset: int


def wrap_angle(angle: float) -> float:
    """Bring an angle that has stepped just outside [0, 2*PI] back into it."""
    if angle < 0:
        angle += 2 * PI
    if angle > 2 * PI:
        angle -= 2 * PI
    return angle


def _march(pos, rx, ry, step_x, step_y, tiles: TileMap, vertical: bool) -> Hit:
    for _ in range(max(tiles.width, tiles.height)):
        index = tiles.cell_index(rx, ry)
        if index > 0 and tiles.is_wall(index):
            break
        rx += step_x
        ry += step_y
    distance = math.hypot(rx - pos.x, ry - pos.y)
    return Hit(Vec3(rx, ry, 0.0), distance, vertical)


def _no_hit(pos, vertical: bool) -> Hit:
    return Hit(Vec3(pos.x, pos.y, 0.0), 0.0, vertical)


def horizontal_hit(pos, angle: float, tiles: TileMap) -> Hit:
    """Follow a ray across horizontal grid lines until it meets a wall."""
    if angle == 0 or angle == PI:
        return _no_hit(pos, False)
    block = tiles.block_size
    inverse = -1 / math.tan(angle)
    base = (int(pos.y) // block) * block
    if angle > PI:
        ry = base - _EPSILON
        step_y = -block
    else:
        ry = base + block
        step_y = block
    rx = (pos.y - ry) * inverse + pos.x
    step_x = -step_y * inverse
    return _march(pos, rx, ry, step_x, step_y, tiles, False)


def vertical_hit(pos, angle: float, tiles: TileMap) -> Hit:
    """Follow a ray across vertical grid lines until it meets a wall."""
    if angle in (0, PI, P2, P3):
        return _no_hit(pos, True)
    block = tiles.block_size
    inverse = -math.tan(angle)
    base = (int(pos.x) // block) * block
    if P2 < angle < P3:
        rx = base - _EPSILON
        step_x = -block
    else:
        rx = base + block
        step_x = block
    ry = (pos.x - rx) * inverse + pos.y
    step_y = -step_x * inverse
    return _march(pos, rx, ry, step_x, step_y, tiles, True)


def closest_hit(pos, angle: float, tiles: TileMap) -> Hit:
    """Return the nearer of the vertical and horizontal hits."""
    vert = vertical_hit(pos, angle, tiles)
    hori = horizontal_hit(pos, angle, tiles)
    return vert if vert.distance < hori.distance else hori


def cast_columns(player, tiles: TileMap, width: int = W, height: int = H) -> list[Column]:
    """Cast one ray per screen column across a 60 degree field of view."""
    angle = wrap_angle(player.angle - 30 * DR)
    step = 60 * DR / width
    columns = []
    for x in range(width):
        hit = closest_hit(player.pos, angle, tiles)
        tilt = wrap_angle(player.angle - angle)
        projected = hit.distance * math.cos(tilt)
        if projected == 0:
            line_height = height - 1
        else:
            line_height = min(int(tiles.block_size * height / projected), height - 1)
        line_offset = height // 2 - int(line_height / 2)
        columns.append(Column(x, angle, hit, line_height, line_offset))
        angle = wrap_angle(angle + step)
    return columns