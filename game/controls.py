# game/controls.py
"""
玩家的鍵盤控制：方向鍵決定移動方向，到達目標格子後再往該方向前進。
"""

import pygame

from config import FPS

# 方向鍵對應的移動方向
KEY_DIRECTIONS = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


class PlayerControl:
    def __init__(self):
        self.dx, self.dy = 0, 0  # 移動方向（x, y 增量）

    def handle_event(self, event) -> None:
        """
        處理鍵盤輸入事件，更新移動方向。

        Args:
            event (pygame.event.Event): Pygame 事件物件。
        """
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            self.dx, self.dy = KEY_DIRECTIONS[event.key]

    def move(self, player, maze) -> bool:
        """
        根據鍵盤輸入移動玩家。

        原理：
        - 玩家到達目標格子後，若有輸入方向，嘗試設置新目標（牆壁會被拒絕）。
        - 輸入方向被牆擋住時，沿用上一次的方向繼續前進。

        Returns:
            bool: 是否設置了新目標。
        """
        if not player.move_towards_target(FPS):
            return False
        if (self.dx, self.dy) != (0, 0) and player.set_new_target(self.dx, self.dy, maze):
            player.last_direction = (self.dx, self.dy)
            return True
        if player.last_direction != (0, 0):
            return player.set_new_target(*player.last_direction, maze)
        return False
