"""Player state, held input actions and the per-frame update."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from rayquest.raycast import wrap_angle
from rayquest.vector import Vec3

SPEED = 5.0
MOVE_SCALE = 0.5
TURN_STEP = 0.01
START_POSITION = Vec3(500.0, 500.0, 0.0)


class Action(Enum):
    """Things the player can ask for during a frame."""

    QUIT = auto()
    JUMP = auto()
    CROUCH = auto()
    LOOK_UP = auto()
    LOOK_DOWN = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_FORWARD = auto()
    MOVE_BACK = auto()
    MOUSE_UP = auto()
    MOUSE_DOWN = auto()
    MOUSE_LEFT = auto()
    MOUSE_RIGHT = auto()


@dataclass
class InputState:
    """Which actions are held this frame and whether the game keeps running."""

    running: bool = True
    held: set[Action] = field(default_factory=set)

    def reset_keys(self) -> None:
        """Release every held action; the running flag is left alone."""
        self.held.clear()

    def apply(self, actions: Iterable[Action]) -> None:
        """Record actions for this frame; QUIT stops the game."""
        for action in actions:
            if action is Action.QUIT:
                self.running = False
            else:
                self.held.add(action)

    def __contains__(self, action: object) -> bool:
        return action in self.held


@dataclass
class Player:
    """The player's position on the map and facing angle in radians."""

    pos: Vec3 = START_POSITION
    angle: float = 0.0

    @property
    def delta(self) -> Vec3:
        """The step vector for the current facing."""
        return Vec3(math.cos(self.angle) * SPEED, math.sin(self.angle) * SPEED, 0.0)

    def turn(self, amount: float) -> None:
        """Rotate by amount radians, keeping the angle within [0, 2*PI]."""
        self.angle = wrap_angle(self.angle + amount)


def new_player() -> Player:
    """Return a player at the start position facing angle zero."""
    return Player(pos=START_POSITION, angle=0.0)


def update(player: Player, inputs: InputState) -> None:
    """Move and turn the player according to the held actions."""
    if Action.MOVE_FORWARD in inputs:
        player.pos = player.pos + player.delta * MOVE_SCALE
    if Action.MOVE_BACK in inputs:
        player.pos = player.pos - player.delta * MOVE_SCALE
    if Action.MOVE_RIGHT in inputs:
        player.turn(TURN_STEP)
    if Action.MOVE_LEFT in inputs:
        player.turn(-TURN_STEP)