import importlib.metadata as importlib_metadata


def read_version() -> str:
    try:
        return importlib_metadata.version("nonebot-plugin-spawncontrol")
    except importlib_metadata.PackageNotFoundError:
        return "0.1.0"


__version__ = read_version()
