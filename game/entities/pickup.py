# game/entities/pickup.py
"""
定義迷宮中的拾取物（Pickup）：豆子（pacdot）、能量球（powerPellet）和限時出現的水果（fruit）。

每個拾取物擁有一個精靈元素，負責計算自己的尺寸和位置、選擇精靈圖、
檢測與 Pac-Man 的碰撞，並在被吃掉時隱藏自己並發出分數和狀態通知。
"""

from enum import Enum
from typing import NamedTuple, Optional, Union

from config import (
    SPRITE_BASE_PATH, FRUIT_SPRITES, DEFAULT_FRUIT_SPRITE, PACDOT_POINTS, POWER_PELLET_POINTS,
    EVENT_AWARD_POINTS, EVENT_DOT_EATEN, EVENT_POWER_UP,
)
from ..events import EventBus
from ..layers import SpriteElement, px


class PickupType(Enum):
    PACDOT = 'pacdot'
    POWER_PELLET = 'powerPellet'
    FRUIT = 'fruit'
    UNKNOWN = 'unknown'

    @classmethod
    def _missing_(cls, value):
        # 無法識別的標籤一律視為 UNKNOWN
        return cls.UNKNOWN


class Hitbox(NamedTuple):
    """正方形碰撞框：左上角坐標和邊長。"""
    x: float
    y: float
    size: float


# 各類型拾取物的預設分數（水果在 show_fruit 時才設定）
DEFAULT_POINTS = {
    PickupType.PACDOT: PACDOT_POINTS,
    PickupType.POWER_PELLET: POWER_PELLET_POINTS,
}


class Pickup:
    def __init__(self, pickup_type: Union[str, PickupType], scale: float, column: int, row: int,
                 pacman, maze_layer, notifier=None):
        """
        初始化拾取物，建立精靈元素並放入迷宮圖層。

        原理：
        - 每個迷宮格子在關卡開始時建立一個拾取物，之後每幀由遊戲迴圈呼叫 update。
        - 尺寸和位置由 set_style_measurements 根據類型和格子坐標計算。
        - 水果一開始是隱藏的，直到 show_fruit 被呼叫。

        Args:
            pickup_type (str | PickupType): 類型標籤（'pacdot'、'powerPellet'、'fruit' 或其他）。
            scale (float): 格子的像素尺寸。
            column (int): 格子所在的列（x）。
            row (int): 格子所在的行（y）。
            pacman: 玩家物件，需提供 position['top']、position['left'] 和 measurement。
            maze_layer: 承載精靈元素的迷宮圖層，需提供 append_child。
            notifier: 通知接收者，需提供 emit(name, detail)；預設使用新的 EventBus。
        """
        self.type = pickup_type
        self.pacman = pacman
        self.notifier = notifier if notifier is not None else EventBus()
        self.points = DEFAULT_POINTS.get(self.kind, 0)

        self.animation_target = SpriteElement('div')
        self.animation_target.add_class('pickup')
        self.set_style_measurements(self.type, scale, column, row)
        maze_layer.append_child(self.animation_target)

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: Union[str, PickupType]) -> None:
        self._type = value.value if isinstance(value, PickupType) else value

    @property
    def kind(self) -> PickupType:
        return PickupType(self._type)

    def set_style_measurements(self, pickup_type: Union[str, PickupType], scale: float, column: int, row: int,
                               fruit_points: Optional[int] = None) -> None:
        """
        計算拾取物的尺寸和位置，並重設精靈元素的樣式。

        原理：
        - 豆子：size = scale / 4，置於格子中央。
        - 能量球：size = scale，剛好填滿格子。
        - 其他（水果等）：size = scale * 2，以格子為中心向外延伸半格。
        - 位置公式：x = column * scale + (scale - size) / 2，y 同理。
        - 水果額外設置 visibility: hidden，等待 show_fruit 顯示。

        Args:
            pickup_type (str | PickupType): 類型標籤。
            scale (float): 格子的像素尺寸。
            column (int): 格子所在的列。
            row (int): 格子所在的行。
            fruit_points (int, optional): 水果的分數，用於選擇精靈圖。
        """
        kind = PickupType(pickup_type.value if isinstance(pickup_type, PickupType) else pickup_type)
        if kind is PickupType.PACDOT:
            self.size = scale / 4
        elif kind is PickupType.POWER_PELLET:
            self.size = scale
        else:
            self.size = scale * 2
        offset = (scale - self.size) / 2
        self.x = column * scale + offset
        self.y = row * scale + offset

        style = {
            'backgroundImage': self.determine_image(pickup_type, fruit_points),
            'backgroundSize': px(self.size),
            'height': px(self.size),
            'left': px(self.x),
            'position': 'absolute',
            'top': px(self.y),
            'width': px(self.size),
        }
        if kind is PickupType.FRUIT:
            style['visibility'] = 'hidden'
        self.animation_target.style = style

    def determine_image(self, pickup_type: Union[str, PickupType], fruit_points: Optional[int] = None) -> str:
        """
        返回拾取物的精靈圖 URL。

        水果按分數選擇圖片（100 -> cherry），無法識別的分數一律使用 cherry；
        其他類型直接以類型名稱作為圖片名稱。
        """
        tag = pickup_type.value if isinstance(pickup_type, PickupType) else pickup_type
        if PickupType(tag) is PickupType.FRUIT:
            image_name = FRUIT_SPRITES.get(fruit_points, DEFAULT_FRUIT_SPRITE)
        else:
            image_name = tag
        return f"url({SPRITE_BASE_PATH}{image_name}.svg"

    def show_fruit(self, fruit_points: int) -> None:
        """
        顯示水果並設定其分數和對應的精靈圖。

        Args:
            fruit_points (int): 本關水果的分數。
        """
        self.points = fruit_points
        self.animation_target.style['backgroundImage'] = self.determine_image('fruit', fruit_points)
        self.animation_target.style['visibility'] = 'visible'

    def hide_fruit(self) -> None:
        self.animation_target.style['visibility'] = 'hidden'

    def reset(self) -> None:
        """關卡重新開始時恢復初始可見性：水果隱藏，其他拾取物顯示。"""
        if self.kind is PickupType.FRUIT:
            self.animation_target.style['visibility'] = 'hidden'
        else:
            self.animation_target.style['visibility'] = 'visible'

    @staticmethod
    def check_for_collision(pickup, pacman) -> bool:
        """
        檢查兩個正方形碰撞框是否重疊。

        原理：
        - 較大的框只計算其中央一半的區域（Pac-Man 的實際「嘴巴」範圍）。
        - 每個軸上的中心距離必須嚴格小於：較小框的一半 + 較大框的四分之一。
        - 公式對兩個參數對稱，交換參數結果相同。
        - 例如 (7.4, 7.4, 5) 與 (0, 0, 10) 碰撞，(7.5, 7.5, 5) 則不碰撞。

        Args:
            pickup: 具有 x、y、size 屬性的碰撞框。
            pacman: 具有 x、y、size 屬性的碰撞框。

        Returns:
            bool: 是否碰撞。
        """
        smaller = min(pickup.size, pacman.size)
        larger = max(pickup.size, pacman.size)
        reach = smaller / 2 + larger / 4
        dx = abs((pickup.x + pickup.size / 2) - (pacman.x + pacman.size / 2))
        dy = abs((pickup.y + pickup.size / 2) - (pacman.y + pacman.size / 2))
        return dx < reach and dy < reach

    def update(self) -> None:
        """
        每幀呼叫一次：檢查是否被 Pac-Man 吃掉，吃掉後隱藏並發出通知。

        原理：
        - 已隱藏的拾取物不再檢測碰撞，每個拾取物最多被吃一次。
        - 碰撞後一律發出 awardPoints（內容為 {'points': points}）。
        - 豆子和能量球額外發出 dotEaten，能量球再發出 powerUp。
        - 無法識別的類型只發出 awardPoints。
        """
        if self.animation_target.style.get('visibility') == 'hidden':
            return

        pacman_box = Hitbox(
            x=self.pacman.position['left'],
            y=self.pacman.position['top'],
            size=self.pacman.measurement,
        )
        if not self.check_for_collision(self, pacman_box):
            return

        self.animation_target.style['visibility'] = 'hidden'
        self.notifier.emit(EVENT_AWARD_POINTS, {'points': self.points})

        kind = self.kind
        if kind in (PickupType.PACDOT, PickupType.POWER_PELLET):
            self.notifier.emit(EVENT_DOT_EATEN)
        if kind is PickupType.POWER_PELLET:
            self.notifier.emit(EVENT_POWER_UP)

    def __repr__(self):
        return f"Pickup({self.type!r}, x={self.x}, y={self.y}, size={self.size}, points={self.points})"
