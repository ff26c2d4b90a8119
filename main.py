# main.py
"""
Pac-Man 遊戲的主程式，負責初始化遊戲、處理事件和運行主迴圈。
使用 Pygame 作為遊戲引擎；拾取物的通知經由 Pygame 事件佇列轉交給遊戲的事件匯流排。
"""

import sys
import pygame
from game.game import Game
from game.renderer import Renderer
from game.controls import PlayerControl
from game.events import PygameEventSink
from config import MAZE_WIDTH, MAZE_HEIGHT, CELL_SIZE, FPS


def main():
    """
    主遊戲入口，負責設置遊戲環境並運行主迴圈。

    原理：
    - 螢幕尺寸計算公式：screen_width = MAZE_WIDTH * CELL_SIZE, screen_height = MAZE_HEIGHT * CELL_SIZE。
    - 每幀先把上一幀拾取物發出的事件交給 game.events，再處理輸入、更新和渲染。
    - 按 ESC 或關閉視窗結束遊戲。
    """
    pygame.init()
    screen_width = MAZE_WIDTH * CELL_SIZE
    screen_height = MAZE_HEIGHT * CELL_SIZE
    screen = pygame.display.set_mode((screen_width, screen_height))
    pygame.display.set_caption("Pac-Man Pickups")

    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 28)

    game = Game(notifier=PygameEventSink())
    renderer = Renderer(screen, font)
    control = PlayerControl()

    while game.is_running():
        for event in pygame.event.get():
            if game.events.relay(event):
                continue  # 拾取物事件已處理
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                game.end_game()
            else:
                control.handle_event(event)

        game.update(lambda: control.move(game.player, game.maze))
        renderer.render(game)

        pygame.display.flip()
        clock.tick(FPS)

    print(f"遊戲結束！分數：{game.get_score()}")
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
