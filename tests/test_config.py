# test_config.py
import pytest
from config import *


def test_maze_dimensions():
    assert MAZE_WIDTH == 19
    assert MAZE_HEIGHT == 21
    assert all(len(row) == MAZE_WIDTH for row in MAZE_LAYOUT)
    assert CELL_SIZE == 24


def test_tile_types():
    assert TILE_WALL == 'X'
    assert TILE_PATH == ' '
    assert TILE_PACDOT == 'o'
    assert TILE_POWER_PELLET == 'O'
    assert TILE_FRUIT == 'F'
    assert TILE_PLAYER_START == 'P'


def test_scoring_constants():
    assert PACDOT_POINTS == 10
    assert POWER_PELLET_POINTS == 50
    assert FRUIT_SPRITES[100] == DEFAULT_FRUIT_SPRITE == 'cherry'
    assert set(FRUIT_LEVEL_POINTS) <= set(FRUIT_SPRITES)


def test_event_names():
    assert EVENT_AWARD_POINTS == 'awardPoints'
    assert EVENT_DOT_EATEN == 'dotEaten'
    assert EVENT_POWER_UP == 'powerUp'
