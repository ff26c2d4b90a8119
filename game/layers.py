# game/layers.py
"""
提供可渲染的精靈元素和承載它們的迷宮圖層。

每個元素只保存一份類似 CSS 的樣式字典（位置、尺寸、背景圖和可見性），
由擁有它的實體負責修改；渲染器只讀取這些樣式並繪製到畫面上。
"""

from typing import Dict, List, Set


def px(value: float) -> str:
    """
    將數值轉換為像素字串，整數值不帶小數點（例如 2.0 -> '2px'，7.5 -> '7.5px'）。
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


def parse_px(value: str) -> float:
    """將 '11px' 之類的樣式值轉回數值。"""
    return float(value[:-2]) if value.endswith('px') else float(value)


def parse_url(value: str) -> str:
    """
    從 'url(path' 或 'url(path)' 取出路徑。

    Args:
        value (str): backgroundImage 樣式值。

    Returns:
        str: 圖片路徑；若不是 url(...) 格式，原樣返回。
    """
    if value.startswith('url('):
        value = value[len('url('):]
        if value.endswith(')'):
            value = value[:-1]
    return value


class SpriteElement:
    def __init__(self, tag: str = 'div'):
        """
        初始化精靈元素。

        Args:
            tag (str): 元素標籤名稱，僅作識別用途。
        """
        self.tag = tag
        # 樣式字典，擁有者可以整個替換
        self.style: Dict[str, str] = {}
        self.class_list: Set[str] = set()

    def add_class(self, name: str) -> None:
        self.class_list.add(name)

    def is_hidden(self) -> bool:
        return self.style.get('visibility') == 'hidden'

    def __repr__(self):
        return f"SpriteElement({self.tag!r}, classes={sorted(self.class_list)}, style={self.style})"


class MazeLayer:
    """
    迷宮圖層，按加入順序保存元素；不擁有元素，只負責承載。
    """
    def __init__(self):
        self._children: List[SpriteElement] = []

    def append_child(self, element: SpriteElement) -> SpriteElement:
        self._children.append(element)
        return element

    def remove_child(self, element: SpriteElement) -> None:
        if element in self._children:
            self._children.remove(element)

    def clear(self) -> None:
        self._children.clear()

    @property
    def children(self) -> List[SpriteElement]:
        return list(self._children)

    def __len__(self) -> int:
        return len(self._children)
