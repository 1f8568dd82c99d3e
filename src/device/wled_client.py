"""
WLEDJsonClient — async client for the WLED JSON API.

Endpoints used:
  GET  /json/state   current state ({"on": bool, "bri": int, ...})
  GET  /json/info    device info (name, version, led count)
  POST /json/state   partial state update
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from device.errors import DeviceSessionError
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.DEVICE)


class WLEDJsonClient:
    """Thin wrapper over httpx.AsyncClient; every transport failure becomes DeviceSessionError."""

    def __init__(
        self,
        host: str,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.host = host
        self._client = client or httpx.AsyncClient(base_url=f"http://{host}", timeout=timeout)

    async def get_state(self) -> Dict[str, Any]:
        return await self._request("GET", "/json/state")

    async def get_info(self) -> Dict[str, Any]:
        return await self._request("GET", "/json/info")

    async def set_state(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/json/state", json=payload)

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise DeviceSessionError(f"{method} {path} on {self.host} failed: {e}") from e
        except ValueError as e:
            raise DeviceSessionError(f"{method} {path} on {self.host} returned invalid JSON") from e

        if not isinstance(body, dict):
            raise DeviceSessionError(
                f"{method} {path} on {self.host} returned {type(body).__name__}, expected a JSON object"
            )
        return body

    async def aclose(self) -> None:
        await self._client.aclose()
