from pathlib import Path
from tempfile import mkdtemp

import pytest
import nonebot
from nonebug import NONEBOT_INIT_KWARGS, App


def pytest_configure(config: pytest.Config) -> None:
    config.stash[NONEBOT_INIT_KWARGS] = {
        "driver": "~none",
        "superusers": {"10000"},
        "spawncontrol_config_file": Path(mkdtemp()) / "config.yml",
    }


@pytest.fixture
async def app(nonebug_init: None):
    nonebot.require("nonebot_plugin_spawncontrol")

    yield App()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "spawncontrol" / "config.yml"


@pytest.fixture
def write_config(config_file: Path):
    def write(content: str) -> Path:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return write


@pytest.fixture
def control(app: App, config_file: Path):
    from nonebot_plugin_spawncontrol.control import SpawnControl

    return SpawnControl(config_file)


@pytest.fixture
def log_records():
    from nonebot.log import logger

    records = []
    handler_id = logger.add(lambda message: records.append(message.record))
    yield records
    logger.remove(handler_id)


@pytest.fixture
def FakeMessageEvent():
    from nonebot.adapters import Event, Message, MessageSegment

    class FakeMessageSegment(MessageSegment["FakeMessage"]):
        @classmethod
        def get_message_class(cls):
            return FakeMessage

        def __str__(self) -> str:
            return self.data["text"] if self.type == "text" else f"[{self.type}]"

        def is_text(self) -> bool:
            return self.type == "text"

    class FakeMessage(Message[FakeMessageSegment]):
        @classmethod
        def get_segment_class(cls):
            return FakeMessageSegment

        @staticmethod
        def _construct(msg: str):
            yield FakeMessageSegment("text", {"text": msg})

    class FakeMessageEvent(Event):
        user_id: str = "10000"
        text: str

        def get_type(self) -> str:
            return "message"

        def get_event_name(self) -> str:
            return "message"

        def get_event_description(self) -> str:
            return self.text

        def get_user_id(self) -> str:
            return self.user_id

        def get_session_id(self) -> str:
            return self.user_id

        def get_message(self) -> Message:
            return FakeMessage(self.text)

        def is_tome(self) -> bool:
            return True

    return FakeMessageEvent
