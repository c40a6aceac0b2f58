from pathlib import Path
from typing import Set, Optional

from nonebot.log import logger
from nonebot.utils import escape_tag

from .data import Data
from .state import State
from .filter import SpawnFilter
from .entity import EntityType
from .exception import ConfigError
from .event import EntitySpawnEvent
from .reconcile import reconcile as reconcile_config


class SpawnControl:
    def __init__(self, config_file: Path, debug: Optional[bool] = None):
        self.data = Data(config_file)
        self.state = State()
        self.filter = SpawnFilter(self.state)
        self._debug_override = debug

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    def enable(self) -> bool:
        """加载配置并开始阻止实体生成，配置无效时插件会被禁用"""
        try:
            if self.data.save_default():
                logger.opt(colors=True).info(
                    "Created default config at"
                    f" <y>{escape_tag(str(self.data.path))}</y>"
                )
        except ConfigError as e:
            logger.warning(str(e))

        try:
            debug = self.data.load().get("debug", False)
        except ConfigError:
            debug = False
        if self._debug_override is not None:
            debug = self._debug_override
        self.state.debug = debug is True

        if self.state.debug:
            logger.info("Debug mode enabled")

        if not self.load_blocked_entities_config(True, False):
            logger.warning(
                "Error: Invalid configuration."
                " Please backup your config and create a new one"
            )
            self.disable()
            return False

        self.state.enabled = True
        return True

    def disable(self):
        self.state.enabled = False
        self.state.blocked_types = set()

    def get_blocked_types(self) -> Set[EntityType]:
        """需要阻止的实体类型

        返回的集合可以直接修改，无需重新加载配置即可改变插件的行为，
        重新加载配置后集合会被替换。
        """
        return self.state.blocked_types

    def is_debug(self) -> bool:
        return self.state.debug

    def set_debug(self, debug: bool):
        self.state.debug = debug

    def load_blocked_entities_config(
        self, save_on_update: bool = True, quiet: bool = False
    ) -> bool:
        """清空并从配置文件重新加载需要阻止的实体类型

        参数:
            save_on_update: 补全了新的实体类型时是否保存配置文件
            quiet: 是否不输出失败时的警告

        返回:
            是否加载成功
        """
        try:
            self.reconcile(save_on_update, quiet)
        except ConfigError:
            return False
        return True

    def reconcile(self, persist_on_change: bool = True, quiet: bool = False) -> bool:
        """同 `load_blocked_entities_config`

        返回配置文件是否被补全，配置无效时抛出 `ConfigError`。
        """
        return reconcile_config(self.state, self.data, persist_on_change, quiet)

    def on_entity_spawn(self, event: EntitySpawnEvent):
        self.filter(event)
