class ConfigError(Exception):
    """配置文件无法使用"""


class MissingSectionError(ConfigError):
    def __init__(self, section: str):
        super().__init__(f"Missing configuration section: {section}")
        self.section = section
