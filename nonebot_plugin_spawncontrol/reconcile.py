from typing import Any, Set, Dict, Mapping, NamedTuple

from nonebot.log import logger
from nonebot.utils import escape_tag

from .data import Data
from .state import State
from .entity import EntityType
from .exception import ConfigError, MissingSectionError

SECTION = "blocked-entities"


class Reconciliation(NamedTuple):
    section: Dict[str, Any]
    blocked: Set[EntityType]
    changed: bool


def _warning(quiet: bool, message: str):
    if not quiet:
        logger.opt(colors=True).warning(message)


def reconcile_section(section: Mapping[Any, Any], quiet: bool = False) -> Reconciliation:
    """核对 ``blocked-entities`` 配置节

    返回补全后的新配置节、需要阻止的实体类型以及配置节是否被补全，
    传入的配置节不会被修改。

    参数:
        section: 从配置文件读取的原始配置节
        quiet: 是否不输出无效键的警告
    """
    # YAML 中的键不一定是字符串
    persisted = {str(key): value for key, value in section.items()}
    amended = dict(persisted)
    blocked: Set[EntityType] = set()
    changed = False

    for entity_type in EntityType:
        value = persisted.get(entity_type.name)
        if not isinstance(value, bool):
            amended[entity_type.name] = False
            changed = True
        elif value:
            blocked.add(entity_type)

    for key, value in persisted.items():
        if isinstance(value, bool):
            entity_type = EntityType.resolve(key)
            if entity_type is None:
                _warning(
                    quiet,
                    f"<y>{escape_tag(key)}</y> is not a valid EntityType,"
                    " it will be ignored",
                )
            elif value:
                blocked.add(entity_type)
        else:
            _warning(
                quiet,
                f"<y>{escape_tag(key)}</y> has a non boolean value,"
                " it will be ignored",
            )

    return Reconciliation(amended, blocked, changed)


def reconcile(
    state: State, data: Data, persist_on_change: bool = True, quiet: bool = False
) -> bool:
    """从配置文件重新加载需要阻止的实体类型

    参数:
        state: 接收核对结果的插件状态
        data: 配置文件
        persist_on_change: 配置节被补全时是否写回配置文件
        quiet: 是否不输出警告与提示

    返回:
        配置节是否被补全

    异常:
        ConfigError: 配置文件无法读取、解析或缺少 ``blocked-entities`` 配置节，
            此时 ``state.blocked_types`` 被置空；补全后的配置无法写回时
            ``state.blocked_types`` 保持不变
    """
    try:
        document = data.load()
        section = document.get(SECTION)
        if not isinstance(section, dict):
            raise MissingSectionError(SECTION)
    except ConfigError as e:
        state.blocked_types = set()
        _warning(quiet, escape_tag(str(e)))
        raise

    result = reconcile_section(section, quiet)

    if result.changed and persist_on_change:
        document[SECTION] = result.section
        try:
            data.save(document)
        except ConfigError as e:
            _warning(quiet, escape_tag(str(e)))
            raise
        if not quiet:
            logger.info("Configuration changed")

    state.blocked_types = result.blocked
    return result.changed
