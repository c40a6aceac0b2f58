from typing import Optional
from argparse import Namespace as BaseNamespace

from nonebot.rule import ArgumentParser


class Namespace(BaseNamespace):
    handle: Optional[str]
    quiet: bool
    no_save: bool
    value: Optional[str]


parser = ArgumentParser("spawncontrol")

subparsers = parser.add_subparsers(dest="handle")

reload = subparsers.add_parser("reload", help="重新加载配置文件")
reload.add_argument("-q", "--quiet", action="store_true", help="不输出警告")
reload.add_argument(
    "--no-save", action="store_true", help="补全的实体类型不写回配置文件"
)

debug = subparsers.add_parser("debug", help="查看或切换调试模式")
debug.add_argument("value", nargs="?", choices=["on", "off"])

subparsers.add_parser("list", help="列出被阻止生成的实体类型")
