# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.ports import LineSource, OutputSink
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "
FAREWELL = "Goodbye!"


def run_console_loop(
    state: AppState,
    *,
    read_line: LineSource = input,
    write: OutputSink = print,
) -> None:
    """
    Read-evaluate-print loop: one command per line until `quit`, EOF or Ctrl+C.

    All three exits are graceful; the caller returns normally (exit code 0).
    """
    logger.info("Console connector started (tasks=%d, persist=%s).", len(state.tasks), state.persist)
    write("Welcome to the To-Do List CLI!")
    write('Type "help" for available commands or "quit" to exit.\n')

    while state.running:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            write(f"\n{FAREWELL}")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write(f"\n{FAREWELL}")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
