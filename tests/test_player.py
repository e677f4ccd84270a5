import math

import pytest

from cubcaster.errors import ERR_NO_PLAYER, Cub3dError
from cubcaster.geometry import TWO_PI
from cubcaster.player import Direction, Player, init_player, player_angle


def _room():
    return [
        list("11111"),
        list("10001"),
        list("10001"),
        list("10001"),
        list("11111"),
    ]


def test_player_angle_values():
    assert player_angle("E") == 0
    assert player_angle("N") == pytest.approx(3 * math.pi / 2)
    assert player_angle("W") == pytest.approx(math.pi)
    assert player_angle("S") == pytest.approx(math.pi)


def test_player_angle_rejects_other_characters():
    with pytest.raises(Cub3dError, match=ERR_NO_PLAYER):
        player_angle("X")


def test_init_player_places_and_clears_cell():
    grid = [list("111"), list("1N1"), list("111")]
    player = init_player(grid)
    assert (player.x, player.y) == (1.5, 1.5)
    assert player.angle == player_angle("N")
    assert grid[1][1] == "0"


def test_init_player_uses_first_player_found():
    grid = [list("1E1W1")]
    player = init_player(grid)
    assert player.x == 1.5
    assert grid[0] == list("101W1")


def test_init_player_without_player():
    with pytest.raises(Cub3dError, match=ERR_NO_PLAYER):
        init_player([list("111"), list("101")])


def test_default_parameters():
    player = Player(x=1.0, y=1.0, angle=0.0)
    assert player.half_fov == pytest.approx(player.fov / 2)
    assert player.fov == pytest.approx(math.pi / 3)


def test_turn_left_then_right_restores_angle():
    player = Player(x=2.5, y=2.5, angle=1.0)
    player.turn(Direction.LEFT)
    assert player.angle == pytest.approx(1.0 - player.turn_speed)
    player.turn(Direction.RIGHT)
    assert player.angle == pytest.approx(1.0)


def test_turn_stays_in_range():
    player = Player(x=2.5, y=2.5, angle=0.0)
    player.turn(Direction.LEFT)
    assert 0 <= player.angle < TWO_PI


def test_move_forward_in_open_space():
    grid = _room()
    player = Player(x=2.5, y=2.5, angle=0.0)
    player.move_forward_backward(grid, Direction.FORWARD)
    assert player.x == pytest.approx(2.5 + player.movement_speed)
    assert player.y == pytest.approx(2.5)


def test_move_forward_then_backward_returns():
    grid = _room()
    player = Player(x=2.5, y=2.5, angle=0.0)
    player.move_forward_backward(grid, Direction.FORWARD)
    player.move_forward_backward(grid, Direction.BACKWARD)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_move_forward_blocked_by_wall():
    grid = _room()
    player = Player(x=3.5, y=2.5, angle=0.0)
    player.move_forward_backward(grid, Direction.FORWARD)
    assert player.x == 3.5


def test_strafe_left_facing_east_moves_up():
    grid = _room()
    player = Player(x=2.5, y=2.5, angle=0.0)
    player.move_right_left(grid, Direction.LEFT)
    assert player.y == pytest.approx(2.5 - player.movement_speed)
    assert player.x == pytest.approx(2.5)


def test_strafe_right_then_left_returns():
    grid = _room()
    player = Player(x=2.5, y=2.5, angle=0.4)
    player.move_right_left(grid, Direction.RIGHT)
    player.move_right_left(grid, Direction.LEFT)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_strafe_blocked_by_wall():
    grid = _room()
    player = Player(x=2.5, y=1.5, angle=0.0)
    player.move_right_left(grid, Direction.LEFT)
    assert player.y == 1.5