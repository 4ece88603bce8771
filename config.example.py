# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Local overrides go into:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todolist).",
    "TODO_LOG_LEVEL": "Logging level (default: INFO). The console front end shows WARNING+ only.",
    # Front end
    "TODO_FRONTEND": "Which front end to start: console or web (default: console).",
    "TODO_CONSOLE_PERSIST": "Load/save tasks from the console too (true/false, default: false).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todolist).",
    "TODO_STORE_PATH": "Key-value store JSON path (default: <data_dir>/store.json).",
    "TODO_STORE_SLOT": "Slot name the task list is stored under (default: tasks).",
    # Web page
    "TODO_WEB_HOST": "Bind address for the web page (default: 127.0.0.1).",
    "TODO_WEB_PORT": "Port for the web page (default: 8000).",
}
