from __future__ import annotations
import asyncio
from typing import List

from lifecycle.shutdown_protocol import IShutdownHandler
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class TaskCancellationHandler(IShutdownHandler):
    """
    Shutdown handler for background asyncio tasks (e.g. a device startup
    sequence still waiting on an unreachable host).

    Cancels and awaits the given tasks.

    Priority: 100
    """

    def __init__(self, tasks: List[asyncio.Task]):
        self.tasks = tasks

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        pending = [task for task in self.tasks if not task.done()]
        if not pending:
            return

        log.info(f"Cancelling {len(pending)} background task(s)...")
        for task in pending:
            task.cancel()
            log.debug(f"Cancelled task: {task.get_name()}")

        await asyncio.gather(*pending, return_exceptions=True)
