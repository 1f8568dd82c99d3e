from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from models.enums import LogCategory
from utils.logger import get_logger

if TYPE_CHECKING:
    from device.session import DeviceSession

log = get_logger().for_category(LogCategory.SHUTDOWN)


class DeviceShutdownHandler(IShutdownHandler):
    """
    Closes the device session's HTTP client.

    Priority: 70
    """

    def __init__(self, session: DeviceSession):
        self.session = session

    @property
    def shutdown_priority(self) -> int:
        return 70

    async def shutdown(self) -> None:
        await self.session.close()
        log.debug("Device session closed")
