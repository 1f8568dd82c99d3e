"""
AnimationScheduler — fixed-cadence frame pump.

Each tick:
  1. generator.generate(led_count, phase) → Frame
  2. encoder.encode(frame)                 → DDP packet
  3. transport.send(packet)                (fire-and-forget)
  4. phase = (phase + step) % 360

State machine:
  STOPPED --start()--> RUNNING --stop()--> STOPPED   (both calls idempotent)

The timer is one asyncio task sleeping to deadlines on the loop clock, like
setInterval: the first tick fires one interval after start(). A tick that
overruns its slot does not cause a catch-up burst; the next deadline is moved
to "now". Ticks are not locked against each other since only one timer task
can exist and the phase integer is the sole state it touches.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from animations.base import ColorGenerator
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import LogCategory, SchedulerState
from models.frame import Frame
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

PHASE_MODULUS = 360


class FrameEncoder(Protocol):
    def encode(self, frame: Frame) -> bytes: ...


class PacketSink(Protocol):
    def send(self, data: bytes) -> None: ...


class AnimationScheduler:
    """
    Owns the animation phase and the periodic timer.

    Example:
        scheduler = AnimationScheduler(RainbowGenerator(), DDPEncoder(), transport, led_count=250)
        scheduler.start()      # must be called with a running event loop
        ...
        scheduler.stop()
    """

    def __init__(
        self,
        generator: ColorGenerator,
        encoder: FrameEncoder,
        transport: PacketSink,
        led_count: int,
        interval_ms: float = 15,
        step: int = 2,
        phase: int = 0,
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self.generator = generator
        self.encoder = encoder
        self.transport = transport
        self.led_count = led_count
        self.interval_ms = interval_ms
        self.step = step

        self._phase = phase % PHASE_MODULUS
        self._state = SchedulerState.STOPPED
        self._task: Optional[asyncio.Task] = None

        self.ticks = 0
        self.failed_ticks = 0

    # === State ===

    @property
    def phase(self) -> int:
        return self._phase

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    # === Lifecycle ===

    def start(self) -> None:
        """Schedule the periodic timer. No-op when already running."""
        if self.is_running:
            log.debug("Scheduler already running")
            return

        self._task = create_tracked_task(
            self._run_loop(),
            category=TaskCategory.ANIMATION,
            description="Animation scheduler timer",
        )
        self._task.add_done_callback(self._on_task_done)
        self._state = SchedulerState.RUNNING
        log.info("Animation started", interval_ms=self.interval_ms, step=self.step, leds=self.led_count)

    def stop(self) -> None:
        """Cancel the timer. No-op when already stopped."""
        if not self.is_running:
            return

        task, self._task = self._task, None
        self._state = SchedulerState.STOPPED
        if task is not None:
            task.cancel()
        log.info("Animation stopped", ticks=self.ticks, failed_ticks=self.failed_ticks)

    async def stop_and_wait(self) -> None:
        """Stop and wait until the timer task has actually finished."""
        task = self._task
        self.stop()
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            pass

    def _on_task_done(self, task: asyncio.Task) -> None:
        # Timer ended without stop() (cancelled from outside): reflect it
        if task is self._task:
            self._task = None
            self._state = SchedulerState.STOPPED
            log.warn("Scheduler timer ended unexpectedly")

    # === Tick ===

    def tick(self) -> bool:
        """
        Produce, encode and send one frame, then advance the phase.

        A failure in the generator or encoder is logged and the tick is
        skipped (phase unchanged); it never stops the schedule.

        Returns:
            True if a packet was handed to the transport
        """
        try:
            frame = self.generator.generate(self.led_count, self._phase)
            packet = self.encoder.encode(frame)
            self.transport.send(packet)
        except Exception as e:
            self.failed_ticks += 1
            log.error(f"Tick skipped: {e}", phase=self._phase, exc_info=True)
            return False

        self._phase = (self._phase + self.step) % PHASE_MODULUS
        self.ticks += 1
        return True

    async def _run_loop(self) -> None:
        loop = asyncio.get_running_loop()
        interval = self.interval_ms / 1000.0
        deadline = loop.time() + interval

        try:
            while True:
                await asyncio.sleep(max(0.0, deadline - loop.time()))
                self.tick()

                deadline += interval
                now = loop.time()
                if deadline < now:
                    deadline = now
        except asyncio.CancelledError:
            log.debug("Scheduler timer cancelled")
            raise

    def __repr__(self) -> str:
        return (
            f"AnimationScheduler(state={self._state.name}, phase={self._phase}, "
            f"interval_ms={self.interval_ms}, ticks={self.ticks})"
        )
