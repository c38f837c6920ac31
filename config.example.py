# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App display name (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Console
    "TASKTRACK_PROMPT": "Prompt printed before each command (default: empty).",
    # Paths (gitignored)
    "TASKTRACK_DATA_DIR": "Local data directory (default: .local/tasktrack).",
    "TASKTRACK_TASKS_FILE": "Save file path (default: <data_dir>/tasks.txt).",
    "TASKTRACK_LOG_DIR": "Directory for tasktrack.log (default: <data_dir>).",
}
