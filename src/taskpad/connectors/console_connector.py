# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import add_with_suggestions
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.validation import ValidationError

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str:
    """
    One console turn.

    Slash commands go to the registry; any other text is added as a task and
    answered with category suggestions.
    """
    cmd_response = command_registry.handle(state, line)
    if cmd_response is not None:
        return cmd_response

    try:
        return add_with_suggestions(state, line)
    except ValidationError as e:
        return str(e)


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console connector started (theme=%s).", state.theme)
    _print_ts(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _print_ts(reply)

    logger.info("Console connector finished.")
