# src/tasker_pro/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the application shell.

Commands and helpers depend on this Protocol instead of TaskService,
so a persistent store can be dropped in without touching them.
"""

from typing import Protocol

from ..tasks.task_models import AddResult, TaskItem


class TaskRepo(Protocol):
    # Queries
    def get_tasks(self) -> list[TaskItem]: ...
    def get_tasks_for_user(self, user_id: str) -> list[TaskItem]: ...
    def get_task(self, task_id: int) -> TaskItem | None: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def add_task(self, task: TaskItem | None) -> AddResult: ...
    def complete_task(self, task_id: int) -> bool: ...
    def uncheck_task(self, task_id: int) -> bool: ...
