# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..suggest.ranker import Suggestion
from ..tasks.task_api import (
    THEMES,
    active_count_label,
    build_share_link,
    change_theme,
    create_task,
    empty_state_message,
    filter_tasks,
    suggest_for_text,
)
from ..tasks.task_models import Priority, Task, TaskFilter
from ..tasks.validation import ValidationError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Validation errors raised by handlers are turned into the reply text.
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

        try:
            return handler(state, args)
        except ValidationError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    cat = f" @{task.category}" if task.category else ""
    return f"[{mark}] #{task.id} {task.text} ({task.priority.value}){cat}"


def format_suggestions(suggestions: list[Suggestion]) -> str:
    lines = ["Suggested categories:"]
    for s in suggestions:
        reasons = f" - {', '.join(s.matches)}" if s.matches else ""
        lines.append(f"  {s.category} ({s.confidence}%){reasons}")
    return "\n".join(lines)


def _suggestion_limit(state: AppState) -> int:
    return int(getattr(state.settings, "suggestion_limit", 4))


def add_with_suggestions(
    state: AppState, text: str, *, priority: Priority = Priority.MEDIUM
) -> str:
    """Add a task and append category suggestions for it (when enabled)."""
    task = create_task(state, text, priority=priority)
    reply = f"Added {format_task(task)}"

    if getattr(state.settings, "console_suggestions", True):
        suggestions = suggest_for_text(state.task_store, task.text, limit=_suggestion_limit(state))
        if suggestions:
            reply += "\n" + format_suggestions(suggestions)
            reply += f"\nUse /tag {task.id} <category> to categorize."
    return reply


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    categories = state.task_store.list_categories()
    return (
        "Status:\n"
        f"  Active: {active_count_label(tasks)} (total {len(tasks)})\n"
        f"  Categories: {', '.join(categories) if categories else '(none)'}\n"
        f"  Filter: {state.current_filter.value}\n"
        f"  Theme: {state.theme}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>              -> add with medium priority
    /add high <text>         -> add with explicit priority (low|medium|high)
    """
    priority = Priority.MEDIUM
    if args and args[0].lower() in {p.value for p in Priority}:
        priority = Priority(args[0].lower())
        args = args[1:]

    return add_with_suggestions(state, " ".join(args), priority=priority)


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list                         -> current filter
    /list all|active|completed    -> switch filter and show
    """
    if args:
        try:
            state.current_filter = TaskFilter(args[0].lower())
        except ValueError:
            return "Usage: /list [all|active|completed]"

    tasks = state.task_store.list_tasks()
    shown = filter_tasks(tasks, state.current_filter)
    if not shown:
        return f"{empty_state_message(state.current_filter)} ({active_count_label(tasks)})"

    lines = [f"Tasks ({state.current_filter.value}, {active_count_label(tasks)}):"]
    lines.extend(f"  {format_task(t)}" for t in shown)
    return "\n".join(lines)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    task = state.task_store.toggle_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return f"{'Completed' if task.completed else 'Reopened'} {format_task(task)}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if not state.task_store.delete_task(task_id):
        return f"No task #{task_id}."
    return f"Deleted task #{task_id}."


def cmd_cat(state: AppState, args: list[str]) -> str:
    """
    /cat              -> list categories
    /cat add <name>   -> create category
    /cat rm <name>    -> delete category (tasks keep existing, uncategorized)
    """
    usage = "Usage: /cat [list | add <name> | rm <name>]"
    sub = args[0].lower() if args else "list"
    name = " ".join(args[1:])

    if sub in ("list", "ls"):
        categories = state.task_store.list_categories()
        if not categories:
            return "No categories yet. Use /cat add <name>."
        return "Categories:\n" + "\n".join(f"  {c}" for c in categories)

    if sub == "add":
        if not name:
            return usage
        created = state.task_store.add_category(name)
        return f"Category added: {created}"

    if sub in ("rm", "del", "delete"):
        if not name:
            return usage
        cleared = state.task_store.delete_category(name)
        logger.info("Category deleted name=%s uncategorized=%d", name, cleared)
        return f"Category deleted: {name} ({cleared} task(s) uncategorized)"

    return usage


def cmd_tag(state: AppState, args: list[str]) -> str:
    """
    /tag <id> <category>  -> set category
    /tag <id>             -> clear category
    """
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /tag <id> [category]"
    category = " ".join(args[1:]) or None
    if not state.task_store.set_task_category(task_id, category):
        return f"No task #{task_id}."
    if category is None:
        return f"Cleared category of task #{task_id}."
    return f"Task #{task_id} -> {category}"


def cmd_suggest(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    suggestions = suggest_for_text(state.task_store, text, limit=_suggestion_limit(state))
    if not suggestions:
        return "No suggestions."
    return format_suggestions(suggestions)


def cmd_share(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /share <id>"
    task = state.task_store.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return build_share_link(task)


def cmd_theme(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Theme: {state.theme}. Available: {', '.join(THEMES)}"
    name = change_theme(state, args[0])
    return f"Theme set to {name}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, categories, filter and theme.")
registry.register("add", cmd_add, help_text="Add a task: /add [low|medium|high] <text>.")
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all|active|completed].", aliases=["ls"]
)
registry.register("done", cmd_done, help_text="Toggle completed: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("cat", cmd_cat, help_text="Categories: /cat [list | add <name> | rm <name>].")
registry.register("tag", cmd_tag, help_text="Set or clear a task category: /tag <id> [category].")
registry.register("suggest", cmd_suggest, help_text="Suggest categories for text: /suggest <text>.")
registry.register("share", cmd_share, help_text="Build a mailto: link for a task: /share <id>.")
registry.register("theme", cmd_theme, help_text="Show or change theme: /theme [name].")
