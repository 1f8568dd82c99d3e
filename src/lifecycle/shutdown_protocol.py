"""
Shutdown handler protocol for component-based graceful shutdown.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need graceful shutdown.

    The ShutdownCoordinator calls shutdown() on each handler in descending
    shutdown_priority order.

    Example:
        class TransportShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 50

            async def shutdown(self) -> None:
                self.transport.close()
    """

    @property
    def shutdown_priority(self) -> int:
        """Higher priority shuts down earlier."""
        ...

    async def shutdown(self) -> None:
        ...
