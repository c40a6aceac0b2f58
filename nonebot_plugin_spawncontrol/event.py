from nonebot.adapters import Event, Message

from .entity import Location, EntityType


class EntitySpawnEvent(Event):
    """实体即将在世界中生成

    由游戏服务端适配器投递，任意处理者都可以将其标记为取消，
    适配器负责在事件处理结束后阻止被取消的生成。
    """

    entity_type: EntityType
    location: Location
    cancelled: bool = False

    def get_type(self) -> str:
        return "notice"

    def get_event_name(self) -> str:
        return "entity_spawn"

    def get_event_description(self) -> str:
        return f"{self.entity_type.name} at {self.location}"

    def get_user_id(self) -> str:
        raise ValueError("Event has no user_id!")

    def get_session_id(self) -> str:
        raise ValueError("Event has no session_id!")

    def get_message(self) -> Message:
        raise ValueError("Event has no message!")

    def is_tome(self) -> bool:
        return False

    def is_cancelled(self) -> bool:
        return self.cancelled

    def set_cancelled(self, cancelled: bool) -> None:
        self.cancelled = cancelled
