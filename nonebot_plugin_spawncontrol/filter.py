from nonebot.log import logger

from .state import State
from .event import EntitySpawnEvent


class SpawnFilter:
    def __init__(self, state: State):
        self.state = state

    def __call__(self, event: EntitySpawnEvent) -> None:
        """阻止配置中禁用的实体生成

        已被其他处理者取消的事件不做处理，也不会撤销任何取消标记。
        """
        if event.is_cancelled() or not self.state.enabled:
            return
        if event.entity_type not in (self.state.blocked_types or ()):
            return

        event.set_cancelled(True)

        if self.state.debug:
            location = event.location
            logger.info(
                f"Prevented {event.entity_type.name} from spawning in world"
                f" {location.world} at {location.block_x} {location.block_y}"
                f" {location.block_z}"
            )
