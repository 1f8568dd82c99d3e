from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from models.enums import LogCategory
from utils.logger import get_logger

if TYPE_CHECKING:
    from engine.animation_scheduler import AnimationScheduler

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the animation scheduler.

    Stops the tick timer before anything else so no frame is sent into a
    socket that is about to close.

    Priority: 130 (runs first)
    """

    def __init__(self, scheduler: AnimationScheduler):
        self.scheduler = scheduler

    @property
    def shutdown_priority(self) -> int:
        return 130

    async def shutdown(self) -> None:
        log.info("Stopping animation...")
        await self.scheduler.stop_and_wait()
