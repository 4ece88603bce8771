# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts the configured front end:
- console REPL in the main thread (default),
- browser page served by uvicorn (TODO_FRONTEND=web).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _run_web(state) -> None:
    import uvicorn

    from ..web.app import create_app

    settings = state.settings
    app = create_app(state)
    logger.info("Serving web page on http://%s:%s/", settings.web_host, settings.web_port)
    # log_config=None keeps the handlers installed by setup_logging.
    uvicorn.run(app, host=settings.web_host, port=settings.web_port, log_config=None)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    # The REPL shares the terminal: below WARNING goes to the log file only.
    if settings.frontend == "console":
        console_level = max(console_level, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.info("Starting %s (frontend=%s)...", settings.app_name, settings.frontend)

    state = create_initial_state(settings=settings)

    if settings.frontend == "web":
        _run_web(state)
    else:
        run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
