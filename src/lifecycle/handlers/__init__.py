"""
Shutdown handlers for application components.

Each handler is responsible for shutting down one aspect of the application.
They are called in priority order by ShutdownCoordinator.
"""

from .animation_shutdown_handler import AnimationShutdownHandler
from .device_shutdown_handler import DeviceShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler
from .transport_shutdown_handler import TransportShutdownHandler

__all__ = [
    "AnimationShutdownHandler",
    "DeviceShutdownHandler",
    "TaskCancellationHandler",
    "TransportShutdownHandler",
]
