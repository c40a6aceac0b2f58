from pathlib import Path
from typing import Any, Dict

from yaml import YAMLError, dump, safe_load

from .exception import ConfigError

DEFAULT_CONFIG = """\
# 记录每一次被阻止的实体生成
debug: false

# 实体类型 -> 是否阻止生成，启动时会自动补全所有已知的实体类型
blocked-entities: {}
"""


class Data:
    """插件的 YAML 配置文件"""

    __path: Path

    def __init__(self, path: Path):
        self.__path = path

    @property
    def path(self) -> Path:
        return self.__path

    def save_default(self) -> bool:
        """配置文件不存在时写入默认配置，已存在的文件不会被覆盖"""
        if self.__path.exists():
            return False
        try:
            self.__path.parent.mkdir(parents=True, exist_ok=True)
            self.__path.write_text(DEFAULT_CONFIG, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to write {self.__path}: {e}") from e
        return True

    def load(self) -> Dict[str, Any]:
        """从磁盘重新读取配置"""
        try:
            with self.__path.open("r", encoding="utf-8") as f:
                data = safe_load(f)
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read {self.__path}: {e}") from e
        except YAMLError as e:
            raise ConfigError(f"Failed to parse {self.__path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.__path} is not a mapping")
        return data

    def save(self, data: Dict[str, Any]):
        # 先写入临时文件再替换，写入中断时原配置文件保持不变
        tmp_path = self.__path.with_name(f".{self.__path.name}.tmp")
        try:
            self.__path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                dump(data, f, allow_unicode=True, sort_keys=False)
            tmp_path.replace(self.__path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise ConfigError(f"Failed to write {self.__path}: {e}") from e
