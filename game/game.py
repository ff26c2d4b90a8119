# game/game.py
"""
定義 Pac-Man 遊戲的核心邏輯：建立迷宮、玩家和拾取物，並處理分數、水果和過關。

拾取物之間互不認識，它們只發出通知；這個模組透過 EventBus 監聽通知，
負責累計分數、在吃到指定數量的豆子時讓水果出現，以及在豆子吃完後進入下一關。
"""

from typing import Callable, List, Optional

from .entities.pickup import Pickup, PickupType
from .entities.pickup_initializer import initialize_pickups
from .entities.player import Player
from .events import EventBus
from .layers import MazeLayer
from .maze import Map
from config import (
    CELL_SIZE, MAZE_LAYOUT, TILE_PLAYER_START, FRUIT_LEVEL_POINTS, FRUIT_DOT_THRESHOLDS,
    FRUIT_DURATION, POWER_UP_DURATION, EVENT_AWARD_POINTS, EVENT_DOT_EATEN, EVENT_POWER_UP,
)


def fruit_points_for_level(level: int) -> int:
    """返回指定關卡的水果分數，超過表格長度時沿用最後一項。"""
    index = min(max(level, 1), len(FRUIT_LEVEL_POINTS)) - 1
    return FRUIT_LEVEL_POINTS[index]


class Game:
    def __init__(self, layout=MAZE_LAYOUT, scale: float = CELL_SIZE, notifier=None):
        """
        初始化遊戲，設置迷宮、玩家、拾取物和事件監聽。

        原理：
        - 迷宮由固定佈局建立，玩家從 'P' 格子出發。
        - 每個豆子、能量球和水果格子建立一個拾取物，共用同一個迷宮圖層。
        - 拾取物的通知發送到 notifier；預設就是 self.events，通知立即被處理。
          主程式可以傳入 PygameEventSink，通知經由 Pygame 佇列在下一幀轉交給 self.events。

        Args:
            layout (Iterable[str]): 迷宮佈局。
            scale (float): 格子的像素尺寸。
            notifier: 拾取物使用的通知接收者，預設為 self.events。
        """
        self.maze = Map.from_layout(layout)
        self.scale = scale
        starts = self.maze.find_tiles(TILE_PLAYER_START)
        if not starts:
            raise ValueError(f"Maze layout has no player start ('{TILE_PLAYER_START}')")
        self.player_start = starts[0]
        self.player = Player(*self.player_start, scale=scale)

        self.maze_layer = MazeLayer()
        self.events = EventBus()
        self.notifier = notifier if notifier is not None else self.events
        self.pickups: List[Pickup] = initialize_pickups(self.maze, scale, self.player, self.maze_layer, self.notifier)
        self.active_pickups: List[Pickup] = list(self.pickups)
        self.fruits = [pickup for pickup in self.pickups if pickup.kind is PickupType.FRUIT]
        self.total_dots = sum(1 for pickup in self.pickups
                              if pickup.kind in (PickupType.PACDOT, PickupType.POWER_PELLET))

        self.level = 1
        self.score = 0
        self.dots_eaten = 0
        self.fruit_timer = 0  # 水果剩餘顯示時間（幀）
        self.power_timer = 0  # 能量狀態剩餘時間（幀）
        self.running = True

        self.events.add_listener(EVENT_AWARD_POINTS, self._on_award_points)
        self.events.add_listener(EVENT_DOT_EATEN, self._on_dot_eaten)
        self.events.add_listener(EVENT_POWER_UP, self._on_power_up)

    def _on_award_points(self, detail: Optional[dict]) -> None:
        self.score += detail['points']

    def _on_dot_eaten(self, detail: Optional[dict]) -> None:
        """
        累計吃掉的豆子；到達門檻時讓水果出現。
        """
        self.dots_eaten += 1
        if self.dots_eaten in FRUIT_DOT_THRESHOLDS:
            self.show_fruit()

    def _on_power_up(self, detail: Optional[dict]) -> None:
        self.power_timer = POWER_UP_DURATION

    def show_fruit(self) -> None:
        points = fruit_points_for_level(self.level)
        for fruit in self.fruits:
            fruit.show_fruit(points)
        self.fruit_timer = FRUIT_DURATION
        print(f"水果出現！分數：{points}")

    def update(self, move_player: Callable[[], None]) -> None:
        """
        更新遊戲狀態：移動玩家、更新拾取物、倒數計時並檢查是否過關。

        原理：
        - 每幀呼叫一次；每個未被吃掉的拾取物自行檢查碰撞並發出通知。
        - 被吃掉的豆子和能量球從 active_pickups 移除，之後不再更新；
          水果會在同一關再次出現，所以一直保留。
        - 水果計時歸零時隱藏水果，能量計時歸零時結束能量狀態。
        - 所有豆子和能量球吃完後進入下一關。

        Args:
            move_player (Callable[[], None]): 控制玩家移動的函數。
        """
        if not self.running:
            return

        move_player()

        for pickup in self.active_pickups:
            pickup.update()
        self.active_pickups = [pickup for pickup in self.active_pickups
                               if pickup.kind is PickupType.FRUIT or not pickup.animation_target.is_hidden()]

        if self.fruit_timer > 0:
            self.fruit_timer -= 1
            if self.fruit_timer == 0:
                for fruit in self.fruits:
                    fruit.hide_fruit()
        if self.power_timer > 0:
            self.power_timer -= 1

        if self.is_level_cleared():
            self.advance_level()

    def is_level_cleared(self) -> bool:
        return self.total_dots > 0 and self.dots_eaten >= self.total_dots

    def advance_level(self) -> None:
        """
        進入下一關：重設所有拾取物和玩家位置，分數保留。
        """
        print(f"第 {self.level} 關完成！分數：{self.score}")
        self.level += 1
        self.dots_eaten = 0
        self.fruit_timer = 0
        self.power_timer = 0
        for pickup in self.pickups:
            pickup.reset()
        self.active_pickups = list(self.pickups)
        self.player.reset(*self.player_start)

    def is_powered_up(self) -> bool:
        return self.power_timer > 0

    def end_game(self) -> None:
        self.running = False

    def is_running(self) -> bool:
        return self.running

    def get_score(self) -> int:
        return self.score

    def get_level(self) -> int:
        return self.level
