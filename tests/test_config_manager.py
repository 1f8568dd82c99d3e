import pytest

from managers.config_manager import ConfigManager
from models.config import AppConfig
from models.enums import LogLevel


def load(environ=None, config_path=None):
    return ConfigManager(config_path=config_path, environ=environ or {}, use_dotenv=False).load()


def test_defaults():
    config = load()

    assert config == AppConfig()
    assert config.host == "wled.local"
    assert config.port == 4048
    assert config.led_count == 250
    assert config.update_interval == 15
    assert config.auto_turn_on is True
    assert config.hue_step == 2


def test_environment_overrides_defaults():
    config = load({
        "WLED_HOST": "192.168.1.50",
        "WLED_PORT": "4049",
        "LED_COUNT": "60",
        "UPDATE_INTERVAL": "30",
        "WLED_AUTO_TURN_ON": "false",
        "LOG_LEVEL": "debug",
    })

    assert config.host == "192.168.1.50"
    assert config.port == 4049
    assert config.led_count == 60
    assert config.update_interval == 30
    assert config.auto_turn_on is False
    assert config.log_level is LogLevel.DEBUG


def test_yaml_layer(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "wled:\n  host: strip.lan\n  port: 5000\n"
        "animation:\n  led_count: 30\n  hue_step: 5\n"
    )

    config = load(config_path=str(path))

    assert config.host == "strip.lan"
    assert config.port == 5000
    assert config.led_count == 30
    assert config.hue_step == 5
    assert config.update_interval == 15


def test_environment_wins_over_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("animation:\n  led_count: 30\n")

    config = load({"LED_COUNT": "90"}, config_path=str(path))

    assert config.led_count == 90


def test_config_path_from_environment(tmp_path):
    path = tmp_path / "other.yaml"
    path.write_text("wled:\n  host: from-file\n")

    config = load({"WLED_CONFIG": str(path)})

    assert config.host == "from-file"


def test_missing_yaml_file_is_ignored(tmp_path):
    config = load(config_path=str(tmp_path / "missing.yaml"))
    assert config == AppConfig()


@pytest.mark.parametrize("environ", [
    {"WLED_PORT": "not-a-port"},
    {"WLED_PORT": "70000"},
    {"LED_COUNT": "-1"},
    {"UPDATE_INTERVAL": "0"},
    {"WLED_AUTO_TURN_ON": "maybe"},
    {"LOG_LEVEL": "LOUD"},
])
def test_invalid_values_rejected(environ):
    with pytest.raises(ValueError):
        load(environ)


def test_invalid_yaml_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("wled: [unclosed\n")

    with pytest.raises(ValueError):
        load(config_path=str(path))


@pytest.mark.parametrize("body", ["wled: 5\n", "animation: [1, 2]\n", "logging: debug\n"])
def test_non_mapping_section_rejected(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body)

    with pytest.raises(ValueError, match="must be a mapping"):
        load(config_path=str(path))


def test_interval_seconds():
    assert AppConfig(update_interval=15).interval_seconds == pytest.approx(0.015)
