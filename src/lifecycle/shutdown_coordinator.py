"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import Dict, List, Optional

from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(SchedulerShutdownHandler(scheduler))
        coordinator.register(TransportShutdownHandler(transport))

        coordinator.setup_signal_handlers(asyncio.get_running_loop())
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List = []
        self._shutdown_event = asyncio.Event()
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}
        self._installed_signals: List[signal.Signals] = []

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Install SIGINT (Ctrl+C) and SIGTERM handlers that trigger shutdown."""
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, lambda s=sig: self.request_shutdown(s.name))
                self._installed_signals.append(sig)
            except (NotImplementedError, RuntimeError):
                # Not supported on this platform/loop (e.g. Windows)
                log.warn(f"Cannot install handler for {sig.name}")

        log.debug("Signal handlers installed", signals=[s.name for s in self._installed_signals])

    def remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._installed_signals:
            loop.remove_signal_handler(sig)
        self._installed_signals.clear()

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown (signal handler or programmatic)."""
        if self._shutdown_event.is_set():
            return
        self._shutdown_trigger["reason"] = reason
        log.info(f"Shutdown requested ({reason})")
        self._shutdown_event.set()

    async def wait_for_shutdown(self) -> None:
        await self._shutdown_event.wait()

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers run in descending priority order (highest first). A failing
        or hanging handler is logged and the sequence continues.
        """
        log.info("Initiating graceful shutdown sequence...", reason=self.reason or "UNKNOWN")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(f"Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)")
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"{handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"{handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except Exception as e:
                log.error(f"Error shutting down {handler_name}: {e}", exc_info=True)

        log.info("Shutdown sequence complete")
