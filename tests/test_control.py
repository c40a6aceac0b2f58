from pathlib import Path

from nonebug import App


async def test_enable_creates_default_config(app: App, control, config_file: Path):
    from nonebot_plugin_spawncontrol.entity import EntityType

    assert control.enable()
    assert control.enabled
    assert not control.is_debug()
    assert control.get_blocked_types() == set()

    section = control.data.load()["blocked-entities"]
    assert list(section) == [entity_type.name for entity_type in EntityType]


async def test_enable_reads_debug(app: App, control, write_config, log_records):
    write_config("debug: true\nblocked-entities: {}\n")

    assert control.enable()
    assert control.is_debug()
    assert "Debug mode enabled" in [r["message"] for r in log_records]


async def test_debug_override(app: App, config_file: Path, write_config):
    from nonebot_plugin_spawncontrol.control import SpawnControl

    write_config("debug: true\nblocked-entities: {}\n")

    control = SpawnControl(config_file, debug=False)
    assert control.enable()
    assert not control.is_debug()

    control.set_debug(True)
    assert control.is_debug()


async def test_enable_missing_section(app: App, control, write_config, log_records):
    from nonebot_plugin_spawncontrol.entity import EntityType

    write_config("debug: false\n")
    control.get_blocked_types().add(EntityType.ZOMBIE)

    assert not control.enable()
    assert not control.enabled
    assert control.get_blocked_types() == set()
    assert (
        "Error: Invalid configuration. Please backup your config and create a new one"
        in [r["message"] for r in log_records]
    )


async def test_enable_invalid_yaml(app: App, control, write_config):
    write_config("blocked-entities: [\n")

    assert not control.enable()
    assert not control.enabled


async def test_disable(app: App, control, write_config):
    write_config("blocked-entities:\n  ZOMBIE: true\n")
    assert control.enable()
    assert control.get_blocked_types()

    control.disable()
    assert not control.enabled
    assert control.get_blocked_types() == set()


async def test_plugin_loaded(app: App):
    import nonebot

    from nonebot_plugin_spawncontrol import __version__, spawn_control
    from nonebot_plugin_spawncontrol.control import SpawnControl

    plugin = nonebot.get_plugin("nonebot_plugin_spawncontrol")
    assert plugin
    assert plugin.metadata
    assert isinstance(spawn_control, SpawnControl)
    assert spawn_control.data.path.name == "config.yml"
    assert __version__


async def test_enable_undecodable_file(
    app: App, control, config_file: Path, log_records
):
    config_file.parent.mkdir(parents=True)
    config_file.write_bytes(b"blocked-entities:\n  ZOMBIE: true\n# caf\xe9\n")

    assert not control.enable()
    assert not control.enabled
    assert control.get_blocked_types() == set()
    assert (
        "Error: Invalid configuration. Please backup your config and create a new one"
        in [r["message"] for r in log_records]
    )


async def test_enable_config_path_is_directory(app: App, control, config_file: Path):
    config_file.mkdir(parents=True)

    assert not control.enable()
    assert not control.enabled
