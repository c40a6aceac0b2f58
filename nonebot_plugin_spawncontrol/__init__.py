from typing import Union
from argparse import Namespace

from nonebot.matcher import Matcher
from nonebot.params import ShellCommandArgs
from nonebot.permission import SUPERUSER
from nonebot.plugin import PluginMetadata
from nonebot.exception import ParserExit
from nonebot.message import event_preprocessor
from nonebot import require, get_driver, on_shell_command, get_plugin_config

require("nonebot_plugin_localstore")

from nonebot_plugin_localstore import get_plugin_config_dir

from .config import Config
from .__version__ import __version__
from .handle import Handle
from .parser import parser
from .control import SpawnControl
from .event import EntitySpawnEvent
from .entity import Location, EntityType

__plugin_meta__ = PluginMetadata(
    name="实体生成控制",
    description="按配置文件阻止指定类型的实体生成",
    usage="""
    # config.yml
    blocked-entities:
      ZOMBIE: true
    # 超级用户命令
    spawncontrol reload [--quiet] [--no-save]
    spawncontrol debug [on|off]
    spawncontrol list
    """,
    type="application",
    config=Config,
)

__all__ = [
    "EntitySpawnEvent",
    "EntityType",
    "Location",
    "__version__",
    "spawn_control",
]

plugin_config = get_plugin_config(Config)

driver = get_driver()
spawn_control = SpawnControl(
    plugin_config.spawncontrol_config_file or get_plugin_config_dir() / "config.yml",
    plugin_config.spawncontrol_debug,
)


@driver.on_startup
async def _():
    spawn_control.enable()


@driver.on_shutdown
async def _():
    spawn_control.disable()


@event_preprocessor
async def _(event: EntitySpawnEvent):
    spawn_control.on_entity_spawn(event)


spawncontrol = on_shell_command("spawncontrol", parser=parser, permission=SUPERUSER)


@spawncontrol.handle()
async def _(matcher: Matcher, args: Union[Namespace, ParserExit] = ShellCommandArgs()):
    if isinstance(args, ParserExit):
        await matcher.finish(args.message)
    await matcher.finish(Handle.handle(spawn_control, args))  # type: ignore
