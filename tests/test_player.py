# test_player.py
import pytest
from game.entities.player import Player
from game.maze import Map


@pytest.fixture
def maze():
    return Map.from_layout((
        "XXXXX",
        "XP  X",
        "XXXXX",
    ))


def test_player_position_and_measurement():
    player = Player(1, 1, scale=8)
    assert player.measurement == 16
    assert player.position == {'top': 4, 'left': 4}


def test_player_moves_to_target(maze):
    player = Player(1, 1, scale=8)
    assert player.set_new_target(1, 0, maze)

    arrived = False
    for _ in range(60):
        if player.move_towards_target(60):
            arrived = True
            break
        assert 12 < player.current_x < 20
    assert arrived
    assert (player.x, player.y) == (2, 1)
    assert player.position == {'top': 4, 'left': 12}


def test_player_cannot_target_walls(maze):
    player = Player(1, 1, scale=8)
    assert not player.set_new_target(0, -1, maze)
    assert not player.set_new_target(-1, 0, maze)
    assert (player.target_x, player.target_y) == (1, 1)


def test_player_reset():
    player = Player(1, 1, scale=8)
    player.last_direction = (1, 0)
    player.reset(3, 2)
    assert (player.x, player.y, player.target_x, player.target_y) == (3, 2, 3, 2)
    assert (player.current_x, player.current_y) == (28, 20)
    assert player.last_direction == (0, 0)
