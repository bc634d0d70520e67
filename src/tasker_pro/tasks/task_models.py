# src/tasker_pro/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(slots=True)
class TaskItem:
    """
    One task owned by one user.

    `id` stays 0 until the registry accepts the task and assigns it.
    """

    title: str = ""
    description: str | None = None
    is_completed: bool = False
    user_id: str = ""
    id: int = 0


class AddStatus(StrEnum):
    ADDED = "added"
    REJECTED = "rejected"


class RejectReason(StrEnum):
    MISSING_TASK = "missing_task"
    MISSING_OWNER = "missing_owner"
    ALREADY_ADDED = "already_added"


@dataclass(slots=True, frozen=True)
class AddResult:
    """Outcome of TaskService.add_task."""

    status: AddStatus
    task: TaskItem | None = None
    reason: RejectReason | None = None

    @property
    def ok(self) -> bool:
        return self.status is AddStatus.ADDED

    @classmethod
    def added(cls, task: TaskItem) -> AddResult:
        return cls(status=AddStatus.ADDED, task=task)

    @classmethod
    def rejected(cls, reason: RejectReason) -> AddResult:
        return cls(status=AddStatus.REJECTED, reason=reason)
