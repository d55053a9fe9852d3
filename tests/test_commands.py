# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.connectors.console_connector import handle_line
from taskpad.core.state import AppState
from taskpad.tasks.task_models import TaskFilter
from taskpad.tasks.validation import ValidationError


def test_command_registry_routes_aliases_and_unknown(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def echo(state, args):
        called.append(args)
        return "echo"

    def failing(state, args):
        raise ValidationError("nope")

    reg.register("echo", echo, "echo back", aliases=["e"])
    reg.register("fail", failing, "always fails")

    assert reg.handle(state, "not a command") is None
    assert reg.handle(state, "/ECHO a b") == "echo"
    assert reg.handle(state, "/e") == "echo"
    assert called == [["a", "b"], []]
    assert reg.handle(state, "/fail") == "nope"
    assert reg.handle(state, "/").startswith("Empty command")
    assert reg.handle(state, "/zzz").startswith("Unknown command: /zzz")
    assert "/echo - echo back" in reg.build_help()


def test_add_list_done_rm_flow(state: AppState) -> None:
    reply = registry.handle(state, "/add high Buy milk")
    assert reply == "Added [ ] #1 Buy milk (high)"

    assert registry.handle(state, "/add ab") == "Task must be at least 3 characters long."
    assert registry.handle(state, "/add buy MILK") == "This task already exists."

    registry.handle(state, "/add Walk the dog")
    listing = registry.handle(state, "/list")
    assert listing.splitlines() == [
        "Tasks (all, 2 tasks):",
        "  [ ] #2 Walk the dog (medium)",
        "  [ ] #1 Buy milk (high)",
    ]

    assert registry.handle(state, "/done 1") == "Completed [x] #1 Buy milk (high)"
    assert "#1" not in registry.handle(state, "/list active")
    assert state.current_filter is TaskFilter.ACTIVE
    assert "#1 Buy milk" in registry.handle(state, "/list completed")
    assert registry.handle(state, "/done #1") == "Reopened [ ] #1 Buy milk (high)"

    assert registry.handle(state, "/rm 1") == "Deleted task #1."
    assert registry.handle(state, "/rm 1") == "No task #1."
    assert registry.handle(state, "/done x") == "Usage: /done <id>"
    assert registry.handle(state, "/list bogus") == "Usage: /list [all|active|completed]"


def test_empty_list_message(state: AppState) -> None:
    assert registry.handle(state, "/list") == "No tasks yet. Add one above to get started! (0 tasks)"
    assert registry.handle(state, "/list completed") == "No completed tasks. (0 tasks)"


def test_categories_tagging_and_suggestions(state: AppState) -> None:
    assert registry.handle(state, "/cat") == "No categories yet. Use /cat add <name>."
    assert registry.handle(state, "/cat add Work") == "Category added: Work"
    assert registry.handle(state, "/cat add Work") == "Category already exists: Work"
    assert registry.handle(state, "/cat add") == "Usage: /cat [list | add <name> | rm <name>]"

    registry.handle(state, "/add finish work report")
    assert registry.handle(state, "/tag 1 Work") == "Task #1 -> Work"
    assert registry.handle(state, "/tag 1 Hobby") == "Unknown category: Hobby"

    suggestion_reply = registry.handle(state, "/suggest work")
    assert suggestion_reply.splitlines()[0] == "Suggested categories:"
    assert "Work (100%) - exact match, 100% similar, work" in suggestion_reply
    assert registry.handle(state, "/suggest wo") == "No suggestions."

    added = registry.handle(state, "/add work on slides")
    assert "Suggested categories:" in added
    assert "Use /tag 2 <category> to categorize." in added

    assert registry.handle(state, "/cat rm Work") == "Category deleted: Work (1 task(s) uncategorized)"
    assert state.task_store.get_task(1).category is None


def test_suggestions_can_be_disabled(state: AppState) -> None:
    state.settings.console_suggestions = False
    registry.handle(state, "/cat add Work")

    assert registry.handle(state, "/add work on slides") == "Added [ ] #1 work on slides (medium)"


def test_share_theme_and_status(state: AppState) -> None:
    registry.handle(state, "/add Buy milk")

    assert registry.handle(state, "/share 1").startswith("mailto:?subject=Task%3A%20Buy%20milk")
    assert registry.handle(state, "/share 7") == "No task #7."

    assert registry.handle(state, "/theme").startswith("Theme: default.")
    assert registry.handle(state, "/theme dark") == "Theme set to dark."
    assert registry.handle(state, "/theme neon").startswith("Unknown theme: neon")

    status = registry.handle(state, "/status")
    assert "Active: 1 task (total 1)" in status
    assert "Theme: dark" in status


def test_console_line_adds_plain_text_as_task(state: AppState) -> None:
    assert handle_line(state, "Water the plants") == "Added [ ] #1 Water the plants (medium)"
    assert handle_line(state, "no") == "Task must be at least 3 characters long."
    assert handle_line(state, "/help").startswith("Available commands:")
