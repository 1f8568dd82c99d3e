"""
Models package - Data models for the DDP streaming client
"""

from .enums import SchedulerState, DDPDataType, LogLevel, LogCategory
from .frame import Led, Frame, BLACK
from .config import AppConfig

__all__ = [
    'SchedulerState',
    'DDPDataType',
    'LogLevel',
    'LogCategory',
    'Led',
    'Frame',
    'BLACK',
    'AppConfig',
]
