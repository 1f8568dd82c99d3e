"""
main_asyncio.py — Application entry point for the WLED DDP stream
------------------------------------------------------------------

Responsible for:
- loading configuration
- wiring transport, encoder, generator, scheduler and device session
- starting the async main loop
- graceful shutdown on Ctrl+C / SIGTERM
"""

import asyncio
import sys
from typing import Optional

from animations import ColorGenerator, RainbowGenerator
from device import DeviceSession, DeviceSessionError, WLEDJsonClient
from engine import AnimationScheduler
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import (
    AnimationShutdownHandler,
    DeviceShutdownHandler,
    TaskCancellationHandler,
    TransportShutdownHandler,
)
from lifecycle.task_registry import TaskCategory, TaskRegistry, create_tracked_task
from managers import ConfigManager
from models.config import AppConfig
from models.enums import LogCategory
from protocol import DDPEncoder
from transport import UDPTransport
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


class LedAnimationApp:
    """
    Application context: owns every component for one streaming session.

    Constructed once by main(). The UDP socket is acquired here and released
    by the shutdown handlers or aclose() on every exit path.

    Device startup (power query, auto turn-on) is started as a background
    task and NOT awaited before the first tick. Frames sent to a device that
    is still off are dropped by the device; this ordering is intentional.
    """

    def __init__(
        self,
        config: AppConfig,
        generator: Optional[ColorGenerator] = None,
        session: Optional[DeviceSession] = None,
        transport: Optional[UDPTransport] = None,
    ):
        self.config = config

        log.info(
            "Initializing with config",
            host=config.host,
            port=config.port,
            led_count=config.led_count,
            update_interval=f"{config.update_interval}ms",
        )

        # Fatal if the socket cannot be opened
        self.transport = transport or UDPTransport(config.host, config.port)
        self.session = session or DeviceSession(
            WLEDJsonClient(config.host, timeout=config.http_timeout),
            auto_turn_on=config.auto_turn_on,
        )
        self.scheduler = AnimationScheduler(
            generator=generator or RainbowGenerator(),
            encoder=DDPEncoder(),
            transport=self.transport,
            led_count=config.led_count,
            interval_ms=config.update_interval,
            step=config.hue_step,
        )
        self.session_task: Optional[asyncio.Task] = None
        self.coordinator = ShutdownCoordinator()

    async def _initialize_session(self) -> None:
        try:
            await self.session.initialize()
        except DeviceSessionError as e:
            # Non-fatal: keep streaming into the void
            log.warn(f"Device session startup failed: {e}", category=LogCategory.DEVICE)

    def start(self) -> None:
        """Kick off device startup and the animation timer (no ordering between them)."""
        if self.session_task is None:
            self.session_task = create_tracked_task(
                self._initialize_session(),
                category=TaskCategory.DEVICE,
                description="Device session startup",
            )
        self.scheduler.start()

    def stop(self) -> None:
        """Stop ticking and release the socket (synchronous; see aclose())."""
        self.scheduler.stop()
        if self.session_task is not None and not self.session_task.done():
            self.session_task.cancel()
        self.transport.close()

    async def aclose(self) -> None:
        """Stop ticking, then release the device session and the socket. Idempotent."""
        await self.scheduler.stop_and_wait()
        if self.session_task is not None:
            if not self.session_task.done():
                self.session_task.cancel()
            await asyncio.gather(self.session_task, return_exceptions=True)
        await self.session.close()
        self.transport.close()

    async def run(self) -> None:
        """Run until SIGINT/SIGTERM, then shut down in priority order."""
        coordinator = self.coordinator
        loop = asyncio.get_running_loop()
        try:
            self.start()

            coordinator.register(AnimationShutdownHandler(self.scheduler))
            coordinator.register(TaskCancellationHandler([self.session_task]))
            coordinator.register(DeviceShutdownHandler(self.session))
            coordinator.register(TransportShutdownHandler(self.transport))

            coordinator.setup_signal_handlers(loop)

            log.info("Streaming. Waiting for exit signal...")
            await coordinator.wait_for_shutdown()
            await coordinator.shutdown_all()
            log.debug(TaskRegistry.instance().summary())
        finally:
            # Every exit path, including cancellation
            coordinator.remove_signal_handlers(loop)
            await self.aclose()


async def main() -> int:
    """Main async entry point."""
    config = ConfigManager().load()
    configure_logger(config.log_level)

    app = LedAnimationApp(config)
    await app.run()
    log.info("Shut down cleanly.")
    return 0


def run() -> None:
    """Console script entry point."""
    # UTF-8 output (the logger prints Unicode symbols)
    if hasattr(sys.stdout, "reconfigure") and sys.stdout.encoding != "UTF-8":
        sys.stdout.reconfigure(encoding="utf-8")  # type: ignore

    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        code = 0
    except (ValueError, OSError) as e:
        log.error(f"Fatal error: {e}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    run()
