# tests/test_task_api.py

from __future__ import annotations

from tasker_pro.tasks.task_api import (
    add_task_for_user,
    format_task,
    list_user_tasks,
    set_task_completed,
)
from tasker_pro.tasks.task_models import RejectReason, TaskItem


def test_add_without_user_is_rejected(state) -> None:
    result = add_task_for_user(state, None, "Buy milk")

    assert not result.ok
    assert result.reason is RejectReason.MISSING_OWNER
    assert state.task_store.count_tasks() == 0


def test_add_and_list_for_user(state) -> None:
    add_task_for_user(state, "alice", "  Buy milk  ", "  2 litres ")
    add_task_for_user(state, "bob", "Walk dog", "   ")

    assert [t.title for t in list_user_tasks(state, "bob")] == ["Walk dog"]
    assert list_user_tasks(state, "bob")[0].description is None

    (task,) = list_user_tasks(state, "alice")
    assert task.title == "Buy milk"
    assert task.description == "2 litres"

    assert list_user_tasks(state, None) == []
    assert list_user_tasks(state, "") == []


def test_helpers_ignore_state_current_user(state) -> None:
    state.current_user_id = "alice"
    add_task_for_user(state, "bob", "bob's")

    assert list_user_tasks(state, "alice") == []
    assert state.task_store.get_task(1).user_id == "bob"


def test_set_completed_only_touches_own_tasks(state) -> None:
    state.task_store.add_task(TaskItem(title="theirs", user_id="bob"))
    add_task_for_user(state, "alice", "mine")

    assert set_task_completed(state, "alice", 1, True) is False
    assert state.task_store.get_task(1).is_completed is False

    assert set_task_completed(state, "alice", 2, True) is True
    assert state.task_store.get_task(2).is_completed is True

    assert set_task_completed(state, "alice", 2, False) is True
    assert state.task_store.get_task(2).is_completed is False

    assert set_task_completed(state, "alice", 999, True) is False


def test_set_completed_requires_user(state) -> None:
    state.task_store.add_task(TaskItem(title="x", user_id="alice"))
    assert set_task_completed(state, None, 1, True) is False
    assert state.task_store.get_task(1).is_completed is False


def test_format_task() -> None:
    task = TaskItem(title="Buy milk", user_id="alice", id=3)
    assert format_task(task) == "[ ] #3 Buy milk"

    task.is_completed = True
    task.description = "2 litres"
    assert format_task(task) == "[x] #3 Buy milk - 2 litres"
