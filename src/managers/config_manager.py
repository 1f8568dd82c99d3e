"""
Config Manager

Builds the AppConfig from three layers, later layers winning:

  1. Built-in defaults (models.config)
  2. Optional YAML file (config/config.yaml, or the path in WLED_CONFIG)
  3. Environment variables (a .env file is loaded first if present)

YAML layout:

    wled:
      host: wled.local
      port: 4048
      auto_turn_on: true
      http_timeout: 5.0
    animation:
      led_count: 250
      update_interval: 15
      hue_step: 2
    logging:
      level: INFO

Environment variables:
    WLED_HOST, WLED_PORT, WLED_AUTO_TURN_ON, LED_COUNT, UPDATE_INTERVAL,
    HUE_STEP, LOG_LEVEL
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from models.config import AppConfig
from models.enums import LogCategory, LogLevel
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

DEFAULT_CONFIG_PATH = "config/config.yaml"

# (yaml section, yaml key) → AppConfig field
_YAML_FIELDS = {
    ("wled", "host"): "host",
    ("wled", "port"): "port",
    ("wled", "auto_turn_on"): "auto_turn_on",
    ("wled", "http_timeout"): "http_timeout",
    ("animation", "led_count"): "led_count",
    ("animation", "update_interval"): "update_interval",
    ("animation", "hue_step"): "hue_step",
    ("logging", "level"): "log_level",
}

_ENV_FIELDS = {
    "WLED_HOST": "host",
    "WLED_PORT": "port",
    "WLED_AUTO_TURN_ON": "auto_turn_on",
    "LED_COUNT": "led_count",
    "UPDATE_INTERVAL": "update_interval",
    "HUE_STEP": "hue_step",
    "LOG_LEVEL": "log_level",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def _parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name}: expected an integer, got {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{name}: expected an integer, got {value!r}")


def _parse_float(name: str, value: Any) -> float:
    try:
        return float(str(value).strip())
    except ValueError:
        raise ValueError(f"{name}: expected a number, got {value!r}")


def _parse_log_level(name: str, value: Any) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    text = str(value).strip().upper()
    if text == "WARNING":
        text = "WARN"
    try:
        return LogLevel[text]
    except KeyError:
        raise ValueError(f"{name}: unknown log level {value!r} (expected one of {[l.name for l in LogLevel]})")


_PARSERS = {
    "host": lambda name, v: str(v).strip(),
    "port": _parse_int,
    "led_count": _parse_int,
    "update_interval": _parse_int,
    "hue_step": _parse_int,
    "auto_turn_on": _parse_bool,
    "http_timeout": _parse_float,
    "log_level": _parse_log_level,
}


class ConfigManager:
    """
    Loads the application configuration.

    Example:
        config = ConfigManager().load()
        print(config.host, config.led_count)

        # Tests: explicit environment, no .env lookup
        config = ConfigManager(config_path=None, environ={"LED_COUNT": "30"}, use_dotenv=False).load()
    """

    def __init__(
        self,
        config_path: Optional[str] = DEFAULT_CONFIG_PATH,
        environ: Optional[Mapping[str, str]] = None,
        use_dotenv: bool = True,
    ):
        """
        Args:
            config_path: YAML file path; None disables the file layer.
                WLED_CONFIG in the environment overrides this.
            environ: Environment mapping (defaults to os.environ)
            use_dotenv: Load a .env file into os.environ before reading
        """
        self.config_path = config_path
        self._environ = environ
        self.use_dotenv = use_dotenv

    def load(self) -> AppConfig:
        """
        Resolve all layers into an AppConfig.

        Raises:
            ValueError: Invalid value in YAML or environment
        """
        if self.use_dotenv:
            load_dotenv()
        environ = self._environ if self._environ is not None else os.environ

        values: Dict[str, Any] = {}

        path = environ.get("WLED_CONFIG", self.config_path)
        if path:
            values.update(self._load_yaml(Path(path)))

        for env_name, field_name in _ENV_FIELDS.items():
            raw = environ.get(env_name)
            if raw is not None and raw != "":
                values[field_name] = _PARSERS[field_name](env_name, raw)

        config = AppConfig(**values)
        log.info(
            "Configuration loaded",
            host=config.host,
            port=config.port,
            led_count=config.led_count,
            update_interval=f"{config.update_interval}ms",
            auto_turn_on=config.auto_turn_on,
        )
        return config

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Read the YAML layer. A missing file is not an error."""
        if not path.exists():
            log.debug(f"No config file at {path}, using defaults + environment")
            return {}

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"YAML parsing error in {path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level must be a mapping")

        values: Dict[str, Any] = {}
        for (section, key), field_name in _YAML_FIELDS.items():
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ValueError(f"{path}: section '{section}' must be a mapping")
            if key in section_data:
                values[field_name] = _PARSERS[field_name](f"{section}.{key}", section_data[key])

        log.debug(f"Loaded config file: {path}")
        return values
