# game/maze.py
"""
迷宮模組，從固定佈局建立 Pac-Man 迷宮，提供圖塊查詢和可通行判斷。
"""

from typing import Iterable, List, Tuple

from config import TILE_WALL, TILE_PATH


class Map:
    def __init__(self, width: int, height: int):
        """
        初始化迷宮，所有格子預設為路徑。

        Args:
            width (int): 迷宮寬度（格子數）。
            height (int): 迷宮高度（格子數）。
        """
        self.width = width
        self.height = height
        self.tiles = [TILE_PATH for _ in range(self.width * self.height)]

    @classmethod
    def from_layout(cls, rows: Iterable[str]) -> 'Map':
        """
        從字串佈局建立迷宮。

        原理：
        - 每個字串是一行，每個字元是一個圖塊符號（'X' 牆壁、'o' 豆子、'O' 能量球等）。
        - 所有行的長度必須相同。

        Args:
            rows (Iterable[str]): 佈局字串。

        Returns:
            Map: 建立好的迷宮。
        """
        rows = list(rows)
        if not rows or not rows[0]:
            raise ValueError("Maze layout is empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Maze row {y} has length {len(row)}, expected {width}")
        maze = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                maze.set_tile(x, y, tile)
        return maze

    def __str__(self):
        return '\n'.join(''.join(self.tiles[y * self.width:(y + 1) * self.width]) for y in range(self.height))

    def xy_to_i(self, x: int, y: int) -> int:
        return x + y * self.width

    def i_to_xy(self, i: int) -> Tuple[int, int]:
        return i % self.width, i // self.width

    def xy_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int):
        """
        獲取指定座標的圖塊，無效座標返回 None。
        """
        if not self.xy_valid(x, y):
            return None
        return self.tiles[self.xy_to_i(x, y)]

    def set_tile(self, x: int, y: int, value: str) -> None:
        if self.xy_valid(x, y):
            self.tiles[self.xy_to_i(x, y)] = value

    def find_tiles(self, symbol: str) -> List[Tuple[int, int]]:
        """按行優先順序返回所有指定符號的格子坐標。"""
        return [self.i_to_xy(i) for i, tile in enumerate(self.tiles) if tile == symbol]

    def is_walkable(self, x: int, y: int) -> bool:
        # 迷宮內除牆壁外的格子都可通行
        tile = self.get_tile(x, y)
        return tile is not None and tile != TILE_WALL
