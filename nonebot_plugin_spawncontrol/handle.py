from .parser import Namespace
from .entity import EntityType
from .control import SpawnControl
from .exception import ConfigError


class Handle:
    @classmethod
    def handle(cls, control: SpawnControl, args: Namespace) -> str:
        if not args.handle:
            return "用法: spawncontrol {reload,debug,list}"
        return getattr(cls, args.handle)(control, args)

    @classmethod
    def reload(cls, control: SpawnControl, args: Namespace) -> str:
        try:
            changed = control.reconcile(not args.no_save, args.quiet)
        except ConfigError as e:
            return f"配置加载失败: {e}"
        message = f"配置已重新加载，共阻止 {len(control.get_blocked_types())} 种实体"
        if changed:
            message += "，已补全缺失的实体类型"
            if args.no_save:
                message += "（未保存）"
        return message

    @classmethod
    def debug(cls, control: SpawnControl, args: Namespace) -> str:
        if args.value is not None:
            control.set_debug(args.value == "on")
        return f"调试模式: {'开启' if control.is_debug() else '关闭'}"

    @classmethod
    def list(cls, control: SpawnControl, args: Namespace) -> str:
        blocked = control.get_blocked_types()
        if not blocked:
            return "当前没有被阻止生成的实体"
        return "\n".join(
            entity_type.name for entity_type in EntityType if entity_type in blocked
        )
