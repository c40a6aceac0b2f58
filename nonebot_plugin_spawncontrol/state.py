from typing import Set

from .entity import EntityType


class State:
    """插件运行时状态

    ``blocked_types`` 只会被整体替换，生成事件读到的总是一次完整核对的结果。
    """

    def __init__(self):
        self.blocked_types: Set[EntityType] = set()
        self.debug = False
        self.enabled = False
