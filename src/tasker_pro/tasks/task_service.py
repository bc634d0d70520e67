# src/tasker_pro/tasks/task_service.py

from __future__ import annotations

import itertools
import logging
import threading

from .task_models import AddResult, RejectReason, TaskItem

logger = logging.getLogger(__name__)


class TaskService:
    """
    In-memory task registry.

    Tasks live for the lifetime of the service, in insertion order.
    There is no remove operation.

    Thread-safety:
    - ids come from a monotonically increasing counter, never from the list size
    - every read and write holds the same lock
    - list methods return snapshot lists
    """

    def __init__(self) -> None:
        self._tasks: list[TaskItem] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    # ---- queries ----

    def get_tasks(self) -> list[TaskItem]:
        with self._lock:
            return list(self._tasks)

    def get_tasks_for_user(self, user_id: str) -> list[TaskItem]:
        with self._lock:
            return [t for t in self._tasks if t.user_id == user_id]

    def get_task(self, task_id: int) -> TaskItem | None:
        with self._lock:
            return self._find(task_id)

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.count_tasks()

    # ---- mutations ----

    def add_task(self, task: TaskItem | None) -> AddResult:
        """
        Validate and store a task, assigning its id.

        Invalid input is never raised to the caller: it is logged and reported
        through the returned AddResult, and the registry stays unchanged.
        """
        if task is None:
            logger.warning("Task is null, cannot add.")
            return AddResult.rejected(RejectReason.MISSING_TASK)

        if not task.user_id or not task.user_id.strip():
            logger.warning("UserId is empty, cannot add task title=%r.", task.title)
            return AddResult.rejected(RejectReason.MISSING_OWNER)

        with self._lock:
            if task.id != 0 or any(t is task for t in self._tasks):
                logger.warning("Task id=%s is already registered, cannot add again.", task.id)
                return AddResult.rejected(RejectReason.ALREADY_ADDED)
            task.id = next(self._ids)
            self._tasks.append(task)
            owned = sum(1 for t in self._tasks if t.user_id == task.user_id)

        logger.info("Adding task id=%s title=%r for user=%s", task.id, task.title, task.user_id)
        logger.debug("Task count for %s: %d", task.user_id, owned)
        return AddResult.added(task)

    def complete_task(self, task_id: int) -> bool:
        return self._set_completed(task_id, True)

    def uncheck_task(self, task_id: int) -> bool:
        return self._set_completed(task_id, False)

    # ---- helpers ----

    def _find(self, task_id: int) -> TaskItem | None:
        # True == 1, so a bool would match the first task.
        if isinstance(task_id, bool):
            return None
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def _set_completed(self, task_id: int, completed: bool) -> bool:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("Task id=%s not found; completed=%s ignored.", task_id, completed)
                return False
            task.is_completed = completed
        logger.debug("Task id=%s completed=%s", task_id, completed)
        return True
