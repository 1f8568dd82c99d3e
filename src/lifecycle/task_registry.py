"""
Task Registry
-------------

Tracks the asyncio tasks the application spawns (scheduler timer, device
startup) so failures are logged instead of disappearing with the task, and
shutdown can see what is still running.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Dict, List, Optional

from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.TASK)


# ---------------------------------------------------------------------------
# TASK CATEGORY ENUM
# ---------------------------------------------------------------------------

class TaskCategory(Enum):
    """Logical grouping of asynchronous tasks."""
    ANIMATION = auto()
    DEVICE = auto()
    TRANSPORT = auto()
    SYSTEM = auto()


# ---------------------------------------------------------------------------
# TASK METADATA
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaskInfo:
    """Immutable metadata captured at task creation time."""
    id: int
    category: TaskCategory
    description: str
    created_at: str  # ISO UTC string


@dataclass
class TaskRecord:
    """Internal structure tracking task state."""
    task: asyncio.Task
    info: TaskInfo
    cancelled: bool = False
    finished_with_error: Optional[BaseException] = None


# ---------------------------------------------------------------------------
# TASK REGISTRY SINGLETON
# ---------------------------------------------------------------------------

class TaskRegistry:
    """
    Global registry for the application's asyncio tasks.

    Responsibilities:
    - Track tasks and metadata
    - Detect and log task failures
    - Expose active tasks to the shutdown coordinator
    """

    _instance: Optional["TaskRegistry"] = None

    def __init__(self) -> None:
        self._records: Dict[int, TaskRecord] = {}
        self._next_id: int = 1

    @classmethod
    def instance(cls) -> "TaskRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (tests start from an empty registry)."""
        cls._instance = None

    def register(self, task: asyncio.Task, category: TaskCategory, description: str) -> int:
        """Register a new task with metadata."""
        task_id = self._next_id
        self._next_id += 1

        info = TaskInfo(
            id=task_id,
            category=category,
            description=description,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._records[task_id] = TaskRecord(task=task, info=info)

        log.debug(f"[Task {task_id}] Registered ({category.name}) - {description}")

        task.add_done_callback(self._on_task_done)
        return task_id

    def _on_task_done(self, task: asyncio.Task) -> None:
        record = self._get_record_by_task(task)
        if record is None:
            return

        if task.cancelled():
            record.cancelled = True
            log.debug(f"[Task {record.info.id}] Cancelled - {record.info.description}")
            return

        exc = task.exception()
        if exc:
            record.finished_with_error = exc
            log.error(f"[Task {record.info.id}] FAILED: {record.info.description}", error=repr(exc))
        else:
            log.debug(f"[Task {record.info.id}] Completed - {record.info.description}")

    def _get_record_by_task(self, task: asyncio.Task) -> Optional[TaskRecord]:
        for record in self._records.values():
            if record.task is task:
                return record
        return None

    # -----------------------------
    # Public API
    # -----------------------------

    def list_all(self) -> List[TaskRecord]:
        return list(self._records.values())

    def active(self) -> List[TaskRecord]:
        """Return only tasks that are still running."""
        return [r for r in self._records.values() if not r.task.done()]

    def failed(self) -> List[TaskRecord]:
        """Return tasks that ended with an exception."""
        return [r for r in self._records.values() if r.finished_with_error is not None]

    def summary(self) -> str:
        return (
            f"Tasks: total={len(self._records)}, running={len(self.active())}, "
            f"failed={len(self.failed())}"
        )


# ---------------------------------------------------------------------------
# Convenience wrapper function
# ---------------------------------------------------------------------------

def create_tracked_task(coro, *, category: TaskCategory, description: str) -> asyncio.Task:
    """Create a task on the running loop and register it in a single call."""
    task = asyncio.get_running_loop().create_task(coro)
    TaskRegistry.instance().register(task=task, category=category, description=description)
    return task
