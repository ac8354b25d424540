import math

import pytest

from rayquest.state import (
    Action,
    InputState,
    Player,
    TURN_STEP,
    new_player,
    update,
)
from rayquest.vector import Vec3
from rayquest.world import PI


def test_new_player_start():
    player = new_player()
    assert player.pos == Vec3(500.0, 500.0, 0.0)
    assert player.angle == 0.0


def test_delta_at_zero_angle():
    assert new_player().delta == Vec3(5.0, 0.0, 0.0)


def test_delta_length_is_constant():
    player = Player(angle=2.2)
    assert player.delta.magnitude() == pytest.approx(5.0)


def test_apply_quit_stops_running():
    inputs = InputState()
    inputs.apply([Action.QUIT])
    assert inputs.running is False
    assert Action.QUIT not in inputs


def test_apply_records_held_actions():
    inputs = InputState()
    inputs.apply([Action.JUMP, Action.MOVE_FORWARD])
    assert inputs.held == {Action.JUMP, Action.MOVE_FORWARD}
    assert inputs.running is True


def test_reset_keys_keeps_running_flag():
    inputs = InputState()
    inputs.apply([Action.CROUCH, Action.QUIT])
    inputs.reset_keys()
    assert inputs.held == set()
    assert inputs.running is False


def test_forward_then_back_returns_to_start():
    player = new_player()
    player.angle = 0.7
    start = player.pos
    update(player, InputState(held={Action.MOVE_FORWARD}))
    assert player.pos != start
    update(player, InputState(held={Action.MOVE_BACK}))
    assert player.pos.x == pytest.approx(start.x)
    assert player.pos.y == pytest.approx(start.y)


def test_forward_moves_half_a_step():
    player = new_player()
    start = player.pos
    update(player, InputState(held={Action.MOVE_FORWARD}))
    moved = (player.pos - start).magnitude()
    assert moved == pytest.approx(player.delta.magnitude() * 0.5)


def test_turn_right_increases_angle():
    player = Player(angle=1.0)
    update(player, InputState(held={Action.MOVE_RIGHT}))
    assert player.angle == pytest.approx(1.0 + TURN_STEP)


def test_turn_left_from_zero_wraps():
    player = new_player()
    update(player, InputState(held={Action.MOVE_LEFT}))
    assert PI < player.angle <= 2 * PI
    assert math.cos(player.angle) == pytest.approx(math.cos(-TURN_STEP))


def test_turn_round_trip():
    player = Player(angle=3.0)
    player.turn(0.25)
    player.turn(-0.25)
    assert player.angle == pytest.approx(3.0)


def test_no_actions_leave_player_unchanged():
    player = Player(pos=Vec3(120.0, 300.0, 0.0), angle=4.0)
    update(player, InputState())
    assert player.pos == Vec3(120.0, 300.0, 0.0)
    assert player.angle == 4.0