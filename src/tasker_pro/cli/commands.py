# src/tasker_pro/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import (
    add_task_for_user,
    format_task,
    list_user_tasks,
    set_task_completed,
)

CommandEmitter = Callable[[str], None]
CommandHandler4 = Callable[[AppState, list[str], str | None, str | None], str]
CommandHandler5 = Callable[
    [AppState, list[str], str | None, str | None, CommandEmitter | None], str
]
CommandHandler = CommandHandler4 | CommandHandler5

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        user_id: str | None = None,
        room_id: str | None = None,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if user_id is None:
            user_id = state.current_user_id

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 5

        if nparams >= 5:
            h5 = cast(CommandHandler5, handler)
            return h5(state, args, user_id, room_id, emit)

        h4 = cast(CommandHandler4, handler)
        return h4(state, args, user_id, room_id)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].lstrip("#")
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    return registry.build_help()


def cmd_status(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    app_name = str(getattr(state.settings, "app_name", "tasker-pro"))
    who = user_id or "(nobody)"
    total = state.task_store.count_tasks()
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  User: {who}\n"
        f"  Tasks in registry: {total}"
    )


def cmd_login(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    if len(args) != 1 or not args[0].strip():
        return "Usage: /login <user_id>"
    state.current_user_id = args[0].strip()
    logger.info("Console user switched to %s", state.current_user_id)
    return f"Logged in as {state.current_user_id}."


def cmd_logout(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    if not state.current_user_id:
        return "Nobody is logged in."
    previous = state.current_user_id
    state.current_user_id = None
    logger.info("Console user %s logged out", previous)
    return f"Logged out {previous}."


def cmd_whoami(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    return user_id or "Nobody is logged in. Use /login <user_id>."


def cmd_add(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    """/add <title> [| description]"""
    text = " ".join(args).strip()
    if not text:
        return "Usage: /add <title> [| description]"

    title, sep, description = text.partition("|")
    if not title.strip():
        return "Task title is empty."

    result = add_task_for_user(state, user_id, title, description if sep else None)
    if not result.ok or result.task is None:
        return "Cannot add task: log in first with /login <user_id>."
    return f"Added {format_task(result.task)}"


def cmd_list(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    if not user_id:
        return "Nobody is logged in. Use /login <user_id>."
    tasks = list_user_tasks(state, user_id)
    if not tasks:
        return f"No tasks for {user_id}."
    lines = [f"Tasks for {user_id}:"]
    lines.extend(f"  {format_task(t)}" for t in tasks)
    return "\n".join(lines)


def cmd_all(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    tasks = state.task_store.get_tasks()
    if not tasks:
        return "Registry is empty."
    lines = [f"All tasks ({len(tasks)}):"]
    lines.extend(f"  {format_task(t)} ({t.user_id})" for t in tasks)
    return "\n".join(lines)


def _toggle(
    state: AppState, args: list[str], user_id: str | None, completed: bool, usage: str
) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return usage
    if not user_id:
        return "Nobody is logged in. Use /login <user_id>."
    if not set_task_completed(state, user_id, task_id, completed):
        return f"Task #{task_id} not found."
    task = state.task_store.get_task(task_id)
    return format_task(task) if task is not None else f"Task #{task_id} updated."


def cmd_done(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    return _toggle(state, args, user_id, True, "Usage: /done <task_id>")


def cmd_undo(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    return _toggle(state, args, user_id, False, "Usage: /undo <task_id>")


registry.register("help", cmd_help, "Show this help.")
registry.register("status", cmd_status, "Show current user and registry size.")
registry.register("login", cmd_login, "Act as the given user id.", aliases=["user"])
registry.register("logout", cmd_logout, "Forget the current user.")
registry.register("whoami", cmd_whoami, "Show the current user id.")
registry.register("add", cmd_add, "Add a task: /add <title> [| description].")
registry.register("list", cmd_list, "List your tasks.", aliases=["ls"])
registry.register("all", cmd_all, "List every task in the registry.")
registry.register("done", cmd_done, "Mark your task as completed: /done <id>.")
registry.register("undo", cmd_undo, "Uncheck your task: /undo <id>.", aliases=["uncheck"])
