"""
Enums for the DDP streaming client
"""

from enum import Enum, auto


class SchedulerState(Enum):
    """
    Animation scheduler lifecycle states

    STOPPED: No timer active (initial state)
    RUNNING: Periodic tick task is scheduled on the event loop
    """
    STOPPED = auto()
    RUNNING = auto()


class DDPDataType(Enum):
    """DDP data type byte values (only 8-bit RGB is streamed by this client)"""
    RGB8 = 0x01


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    PROTOCOL = auto()    # DDP packet encoding
    TRANSPORT = auto()   # UDP socket, datagram sends
    ANIMATION = auto()   # Scheduler start/stop, ticks
    DEVICE = auto()      # WLED JSON API (power, brightness)
    SYSTEM = auto()      # Startup, shutdown, errors

    SHUTDOWN = auto()
    TASK = auto()

    GENERAL = auto()    # Default general category
