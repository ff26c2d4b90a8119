# game/events.py
"""
定義遊戲中的通知機制：同步的事件匯流排（EventBus）和投遞到 Pygame 事件佇列的 PygameEventSink。

拾取物只依賴 emit(name, detail) 這個介面，因此兩者可以互換：
- 測試和預設遊戲使用 EventBus，事件立即送到監聽器。
- 主程式使用 PygameEventSink，事件在下一幀由主迴圈轉交給 EventBus。
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Tuple

import pygame

import config

# 拾取物事件在 Pygame 佇列中的自訂事件類型
PICKUP_EVENT = pygame.event.custom_type()


class EventBus:
    def __init__(self):
        """
        初始化事件匯流排。

        原理：
        - 以事件名稱為鍵保存監聽器列表，發出事件時按註冊順序呼叫。
        - history 記錄所有發出過的 (名稱, 內容)，方便除錯和測試。
        """
        self._listeners: Dict[str, List[Callable[[Any], None]]] = defaultdict(list)
        self.history: List[Tuple[str, Optional[dict]]] = []

    def add_listener(self, name: str, callback: Callable[[Any], None]) -> None:
        """
        註冊監聽器。

        Args:
            name (str): 事件名稱（例如 'awardPoints'）。
            callback (Callable): 事件發生時呼叫，參數為事件內容（可能為 None）。
        """
        if not callable(callback):
            raise TypeError(f"Listener for '{name}' must be callable, got {callback!r}")
        self._listeners[name].append(callback)

    def remove_listener(self, name: str, callback: Callable[[Any], None]) -> None:
        if callback in self._listeners.get(name, []):
            self._listeners[name].remove(callback)

    def emit(self, name: str, detail: Optional[dict] = None) -> None:
        """
        發出事件，依序呼叫所有監聽器。

        Args:
            name (str): 事件名稱。
            detail (dict, optional): 事件內容，例如 {'points': 10}。
        """
        self.history.append((name, detail))
        if config.DEBUG_EVENTS:
            print(f"event {name}: {detail}")
        # 複製列表，允許監聽器在回呼中移除自己
        for callback in list(self._listeners.get(name, [])):
            callback(detail)

    def relay(self, event: pygame.event.Event) -> bool:
        """
        將 PygameEventSink 投遞的事件轉交給監聽器。

        Returns:
            bool: 是否為拾取物事件（其他事件不處理）。
        """
        if event.type != PICKUP_EVENT:
            return False
        self.emit(event.name, event.detail)
        return True

    def emitted(self, name: str) -> List[Optional[dict]]:
        """返回指定事件名稱所有發出過的內容。"""
        return [detail for event_name, detail in self.history if event_name == name]


class PygameEventSink:
    """
    將事件投遞到 Pygame 事件佇列，由主迴圈在下一幀交給 EventBus.relay。
    """
    def emit(self, name: str, detail: Optional[dict] = None) -> None:
        pygame.event.post(pygame.event.Event(PICKUP_EVENT, name=name, detail=detail))
