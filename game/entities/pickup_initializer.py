# game/entities/pickup_initializer.py
"""
根據迷宮佈局建立所有拾取物：豆子、能量球和水果。
"""

from typing import List

from .pickup import Pickup
from config import (
    TILE_PACDOT, TILE_POWER_PELLET, TILE_FRUIT, PICKUP_PACDOT, PICKUP_POWER_PELLET, PICKUP_FRUIT,
)

# 迷宮圖塊符號對應的拾取物類型
TILE_PICKUPS = {
    TILE_PACDOT: PICKUP_PACDOT,
    TILE_POWER_PELLET: PICKUP_POWER_PELLET,
    TILE_FRUIT: PICKUP_FRUIT,
}


def initialize_pickups(maze, scale: float, pacman, maze_layer, notifier) -> List[Pickup]:
    """
    為迷宮中每個豆子、能量球和水果格子建立一個拾取物。

    原理：
    - 按行優先順序掃描迷宮，'o' 建立豆子，'O' 建立能量球，'F' 建立水果。
    - 所有拾取物共用同一個玩家、迷宮圖層和通知接收者。

    Args:
        maze: 迷宮物件，提供 width、height 和 get_tile。
        scale (float): 格子的像素尺寸。
        pacman: 玩家物件。
        maze_layer: 迷宮圖層。
        notifier: 通知接收者。

    Returns:
        List[Pickup]: 所有拾取物。
    """
    pickups = []
    for y in range(maze.height):
        for x in range(maze.width):
            pickup_type = TILE_PICKUPS.get(maze.get_tile(x, y))
            if pickup_type is not None:
                pickups.append(Pickup(pickup_type, scale, x, y, pacman, maze_layer, notifier))
    return pickups
