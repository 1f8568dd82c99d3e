"""
DeviceSession — control plane of the WLED device.

Not on the per-frame path: the app runs initialize() once at startup as a
background task and does NOT wait for it before the first animation tick.
Frames sent while the device is still off are simply invisible until it
powers on.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from device.errors import BrightnessOutOfRangeError
from device.wled_client import WLEDJsonClient
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.DEVICE)


class DeviceSession:
    """
    Power and brightness control for one WLED device.

    Args:
        client: JSON API client (WLEDJsonClient or anything with the same
            get_state / get_info / set_state / aclose coroutines)
        auto_turn_on: Power the device on in initialize() if it reports off
    """

    def __init__(self, client: WLEDJsonClient, auto_turn_on: bool = True):
        self.client = client
        self.auto_turn_on = auto_turn_on

        self.info: Optional[Dict[str, Any]] = None
        self.state: Optional[Dict[str, Any]] = None
        self.initially_off = True
        self.ready = False
        self._closed = False

    async def initialize(self) -> None:
        """
        Startup sequence: read info/state, turn on if off and auto_turn_on.

        Raises:
            DeviceSessionError: Device unreachable or API error
        """
        self.info = await self.client.get_info()
        powered = await self.query_power()
        log.info(
            "Device session initialized",
            name=self.info.get("name", "?"),
            version=self.info.get("ver", "?"),
            on=powered,
            brightness=self.state.get("bri", "?") if self.state else "?",
        )

        self.initially_off = not powered
        if self.initially_off and self.auto_turn_on:
            await self.turn_on()
        self.ready = True

    async def query_power(self) -> bool:
        """Return True if the device reports it is on."""
        self.state = await self.client.get_state()
        return bool(self.state.get("on", False))

    async def turn_on(self) -> Dict[str, Any]:
        log.info("Turning device on")
        return await self.client.set_state({"on": True})

    async def set_brightness(self, brightness: int) -> Dict[str, Any]:
        """
        Set master brightness.

        Raises:
            BrightnessOutOfRangeError: brightness outside 0-255 (no request sent)
            DeviceSessionError: API call failed
        """
        if not isinstance(brightness, int) or isinstance(brightness, bool) or not 0 <= brightness <= 255:
            raise BrightnessOutOfRangeError(brightness)
        log.debug(f"Setting brightness → {brightness}")
        return await self.client.set_state({"bri": brightness})

    async def close(self) -> None:
        """Release the HTTP client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self.client.aclose()
