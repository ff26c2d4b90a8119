# game/entities/player.py
"""
定義玩家控制的 Pac-Man，負責在迷宮中逐像素移動，並提供拾取物碰撞所需的位置和尺寸。
"""

from typing import Dict

from config import CELL_SIZE

# 每秒移動的格子數
PLAYER_CELLS_PER_SECOND = 8


class Player:
    def __init__(self, x: int, y: int, scale: float = CELL_SIZE):
        """
        初始化玩家，設置格子坐標和像素坐標。

        原理：
        - 使用格子坐標 (x, y) 表示邏輯位置，像素坐標 (current_x, current_y) 表示格子中心的渲染位置。
        - 像素坐標計算公式：current_x = x * scale + scale / 2
        - 玩家的碰撞框邊長 measurement = scale * 2，以目前像素中心為中心。

        Args:
            x (int): 迷宮中的 x 坐標（格子坐標）。
            y (int): 迷宮中的 y 坐標（格子坐標）。
            scale (float): 格子的像素尺寸。
        """
        self.scale = scale
        self.measurement = scale * 2
        self.speed = PLAYER_CELLS_PER_SECOND * scale  # 像素/秒
        self.reset(x, y)

    def reset(self, x: int, y: int) -> None:
        """將玩家放回指定格子，清除移動目標。"""
        self.x = x
        self.y = y
        self.target_x = x
        self.target_y = y
        self.current_x = x * self.scale + self.scale / 2
        self.current_y = y * self.scale + self.scale / 2
        self.last_direction = (0, 0)

    @property
    def position(self) -> Dict[str, float]:
        """碰撞框左上角的像素坐標。"""
        half = self.measurement / 2
        return {'top': self.current_y - half, 'left': self.current_x - half}

    def move_towards_target(self, fps: int) -> bool:
        """
        逐像素移動到目標格子，防止速度溢出。

        原理：
        - 距離計算公式：dist = √((target_pixel_x - current_x)^2 + (target_pixel_y - current_y)^2)
        - 每幀移動距離：move_dist = min(speed / fps, dist)，確保不超過目標點。
        - 若到達目標格子，更新格子坐標 (x, y) 並返回 True。

        Args:
            fps (int): 每秒幀數。

        Returns:
            bool: 是否到達目標格子。
        """
        target_pixel_x = self.target_x * self.scale + self.scale / 2
        target_pixel_y = self.target_y * self.scale + self.scale / 2
        dx = target_pixel_x - self.current_x
        dy = target_pixel_y - self.current_y
        dist = (dx ** 2 + dy ** 2) ** 0.5

        if dist <= self.speed / fps:
            self.current_x = target_pixel_x
            self.current_y = target_pixel_y
            self.x = self.target_x
            self.y = self.target_y
            return True

        move_dist = min(self.speed / fps, dist)
        self.current_x += (dx / dist) * move_dist
        self.current_y += (dy / dist) * move_dist
        return False

    def set_new_target(self, dx: int, dy: int, maze) -> bool:
        """
        設置新目標格子，目標必須在迷宮內且不是牆壁。

        Args:
            dx (int): x 方向偏移。
            dy (int): y 方向偏移。
            maze: 迷宮物件，提供 is_walkable。

        Returns:
            bool: 是否成功設置目標。
        """
        new_x, new_y = self.x + dx, self.y + dy
        if maze.is_walkable(new_x, new_y):
            self.target_x, self.target_y = new_x, new_y
            return True
        return False
