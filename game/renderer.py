# game/renderer.py
"""
負責渲染遊戲畫面，包括迷宮牆壁、拾取物、Pac-Man 和分數顯示。
"""
import pygame
from typing import Dict, Optional, Tuple

from .layers import parse_px, parse_url
from config import BLACK, BLUE, ORANGE, YELLOW, WHITE, PINK, TILE_WALL


class Renderer:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        """
        初始化渲染器。

        Args:
            screen (pygame.Surface): Pygame 畫面物件。
            font (pygame.font.Font): 用於渲染文字的字體。
        """
        self.screen = screen
        self.font = font
        # 以 (路徑, 寬, 高) 快取縮放後的圖片；載入失敗的路徑記為 None
        self._sprites: Dict[Tuple[str, int, int], Optional[pygame.Surface]] = {}

    def render(self, game) -> None:
        """
        渲染遊戲畫面。

        Args:
            game (Game): 遊戲實例。
        """
        self.screen.fill(BLACK)  # 清空畫面

        # 渲染迷宮牆壁
        maze = game.maze
        scale = game.scale
        for y in range(maze.height):
            for x in range(maze.width):
                if maze.get_tile(x, y) == TILE_WALL:
                    pygame.draw.rect(self.screen, BLUE, pygame.Rect(x * scale, y * scale, scale, scale))

        # 渲染拾取物（隱藏的跳過）
        for element in game.maze_layer.children:
            if element.is_hidden():
                continue
            self._draw_element(element)

        # 渲染 Pac-Man（能量狀態時顯示粉紅色）
        player = game.player
        color = PINK if game.is_powered_up() else YELLOW
        pygame.draw.circle(self.screen, color, (int(player.current_x), int(player.current_y)), int(scale // 2))

        # 渲染分數和關卡
        score_text = self.font.render(f"Score: {game.get_score()}", True, WHITE)
        self.screen.blit(score_text, (10, 10))
        level_text = self.font.render(f"Level: {game.get_level()}", True, WHITE)
        self.screen.blit(level_text, (10, 40))

    def _draw_element(self, element) -> None:
        style = element.style
        left, top = parse_px(style['left']), parse_px(style['top'])
        width, height = int(parse_px(style['width'])), int(parse_px(style['height']))
        sprite = self._load_sprite(parse_url(style['backgroundImage']), width, height)
        if sprite is not None:
            self.screen.blit(sprite, (left, top))
        else:
            # 找不到圖片時畫一個圓形代替
            pygame.draw.ellipse(self.screen, ORANGE, pygame.Rect(int(left), int(top), width, height))

    def _load_sprite(self, path: str, width: int, height: int) -> Optional[pygame.Surface]:
        """
        載入並縮放精靈圖，結果會被快取。

        Returns:
            pygame.Surface or None: 縮放後的圖片；檔案不存在或無法解析時返回 None。
        """
        key = (path, width, height)
        if key not in self._sprites:
            try:
                image = pygame.image.load(path).convert_alpha()
                self._sprites[key] = pygame.transform.smoothscale(image, (max(width, 1), max(height, 1)))
            except (FileNotFoundError, pygame.error) as e:
                print(f"Sprite '{path}' unavailable ({e}), drawing a placeholder instead.")
                self._sprites[key] = None
        return self._sprites[key]
