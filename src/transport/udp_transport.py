"""
UDPTransport — fire-and-forget datagram sink.

One non-blocking IPv4 UDP socket (no explicit local bind) per transport,
opened at construction and owned until close(). Each send() is at most one
sendto(); failures are logged and counted, never raised to the caller.

send() never resolves names itself. A numeric host is used as-is; a host
name is resolved off the event loop by a background task (loop.getaddrinfo)
and frames sent before it completes are dropped. A failed lookup is retried
no sooner than RESOLVE_RETRY_SECONDS later.
"""

from __future__ import annotations

import asyncio
import ipaddress
import socket
import time
from typing import Optional

from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.TRANSPORT)

# Log the first N send errors, then only every Nth one
_ERROR_LOG_BURST = 10
_ERROR_LOG_EVERY = 100

RESOLVE_RETRY_SECONDS = 5.0


def _numeric_address(host: str, port: int) -> Optional[tuple]:
    try:
        return (str(ipaddress.IPv4Address(host)), port)
    except ValueError:
        return None


class UDPTransport:
    """
    Datagram sender bound to a fixed remote host:port.

    Example:
        with UDPTransport("wled.local", 4048) as transport:
            await transport.resolve()
            transport.send(packet)
    """

    def __init__(self, host: str, port: int):
        """
        Open the socket.

        Raises:
            OSError: If the socket cannot be created (fatal for the app)
        """
        self.host = host
        self.port = port
        self._sock: Optional[socket.socket] = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.setblocking(False)

        self._address: Optional[tuple] = _numeric_address(host, port)
        self._resolve_task: Optional[asyncio.Task] = None
        self._last_resolve_ts: Optional[float] = None

        self.packets_sent = 0
        self.bytes_sent = 0
        self.send_errors = 0
        self.resolve_attempts = 0

        log.debug(f"UDP socket opened → {host}:{port}")

    @property
    def closed(self) -> bool:
        return self._sock is None

    @property
    def resolved(self) -> bool:
        return self._address is not None

    def send(self, data: bytes) -> None:
        """Emit one datagram. Never blocks the caller, never raises on send failure."""
        if self._sock is None:
            log.warn("Send on closed transport dropped", bytes=len(data))
            return

        if self._address is None:
            self._schedule_resolve()
            self._count_error(f"{self.host} not resolved yet")
            return

        try:
            self._sock.sendto(data, self._address)
        except OSError as e:
            # BlockingIOError included: a saturated socket simply drops the frame
            self._count_error(e)
            return

        self.packets_sent += 1
        self.bytes_sent += len(data)

    async def resolve(self) -> bool:
        """
        Resolve host:port to an IPv4 address without blocking the loop.

        Returns True once an address is cached. Lookup failures are logged,
        not raised.
        """
        if self._address is not None:
            return True

        loop = asyncio.get_running_loop()
        self.resolve_attempts += 1
        self._last_resolve_ts = time.monotonic()
        try:
            infos = await loop.getaddrinfo(
                self.host, self.port, family=socket.AF_INET, type=socket.SOCK_DGRAM
            )
        except OSError as e:
            log.warn(
                f"DNS resolve failed for {self.host}",
                error=e,
                retry_in=f"{RESOLVE_RETRY_SECONDS}s",
            )
            return False

        if not infos:
            log.warn(f"DNS resolve returned no IPv4 address for {self.host}")
            return False

        self._address = infos[0][4]
        log.info(f"DNS resolved {self.host} → {self._address[0]}")
        return True

    def _schedule_resolve(self) -> None:
        if self._resolve_task is not None and not self._resolve_task.done():
            return
        if (
            self._last_resolve_ts is not None
            and time.monotonic() - self._last_resolve_ts < RESOLVE_RETRY_SECONDS
        ):
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No loop (synchronous use): nothing can resolve in the background
            return
        self._resolve_task = create_tracked_task(
            self.resolve(),
            category=TaskCategory.TRANSPORT,
            description=f"Resolve {self.host}",
        )

    def _count_error(self, error) -> None:
        self.send_errors += 1
        if self.send_errors <= _ERROR_LOG_BURST or self.send_errors % _ERROR_LOG_EVERY == 0:
            log.warn(
                "UDP send failed",
                target=f"{self.host}:{self.port}",
                error=error,
                errors_total=self.send_errors,
            )

    def close(self) -> None:
        """Release the socket. Safe to call more than once."""
        if self._sock is None:
            return
        if self._resolve_task is not None and not self._resolve_task.done():
            self._resolve_task.cancel()
        self._sock.close()
        self._sock = None
        log.info(
            "UDP socket closed",
            packets_sent=self.packets_sent,
            send_errors=self.send_errors,
        )

    def __enter__(self) -> "UDPTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"UDPTransport({self.host}:{self.port}, {state}, sent={self.packets_sent})"
