# src/tasker_pro/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import AddResult, TaskItem

logger = logging.getLogger(__name__)


def add_task_for_user(
    state: AppState,
    user_id: str | None,
    title: str,
    description: str | None = None,
) -> AddResult:
    """
    Convenience helper: add a task owned by user_id.
    Without a user the registry rejects it (missing owner).
    """
    task = TaskItem(
        title=title.strip(),
        description=(description or "").strip() or None,
        user_id=user_id or "",
    )
    return state.task_store.add_task(task)


def list_user_tasks(state: AppState, user_id: str | None) -> list[TaskItem]:
    if not user_id:
        return []
    return state.task_store.get_tasks_for_user(user_id)


def set_task_completed(
    state: AppState, user_id: str | None, task_id: int, completed: bool
) -> bool:
    """
    Complete or uncheck a task on behalf of user_id.

    Returns False when the task does not exist or belongs to someone else;
    in both cases nothing changes.
    """
    if not user_id:
        return False

    task = state.task_store.get_task(task_id)
    if task is None or task.user_id != user_id:
        logger.info("Task id=%s not visible to user=%s", task_id, user_id)
        return False

    if completed:
        return state.task_store.complete_task(task_id)
    return state.task_store.uncheck_task(task_id)


def format_task(task: TaskItem) -> str:
    mark = "x" if task.is_completed else " "
    line = f"[{mark}] #{task.id} {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line
