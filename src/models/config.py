"""
Application configuration model.

Single immutable configuration struct; loading (YAML file, environment)
lives in managers.config_manager.
"""

from dataclasses import dataclass

from models.enums import LogLevel


DEFAULT_HOST = "wled.local"
DEFAULT_DDP_PORT = 4048
DEFAULT_LED_COUNT = 250
DEFAULT_UPDATE_INTERVAL_MS = 15
DEFAULT_HUE_STEP = 2


@dataclass(frozen=True)
class AppConfig:
    """
    Streaming session configuration

    Attributes:
        host: Hostname or IP of the WLED device (DDP target + JSON API)
        port: DDP UDP port
        led_count: Number of LEDs in the strip (frame length)
        update_interval: Tick interval in milliseconds
        auto_turn_on: Power the device on at startup if it reports off
        hue_step: Phase advance per tick (degrees)
        log_level: Minimum log level for the console logger
        http_timeout: JSON API request timeout in seconds
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_DDP_PORT
    led_count: int = DEFAULT_LED_COUNT
    update_interval: int = DEFAULT_UPDATE_INTERVAL_MS
    auto_turn_on: bool = True
    hue_step: int = DEFAULT_HUE_STEP
    log_level: LogLevel = LogLevel.INFO
    http_timeout: float = 5.0

    def __post_init__(self):
        if not self.host:
            raise ValueError("host must not be empty")
        if not 0 < self.port <= 65535:
            raise ValueError(f"port must be in 1-65535, got {self.port}")
        if self.led_count < 0:
            raise ValueError(f"led_count must not be negative, got {self.led_count}")
        if self.update_interval <= 0:
            raise ValueError(f"update_interval must be positive, got {self.update_interval}")
        if self.http_timeout <= 0:
            raise ValueError(f"http_timeout must be positive, got {self.http_timeout}")

    @property
    def interval_seconds(self) -> float:
        return self.update_interval / 1000.0
