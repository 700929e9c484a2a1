"""Constants used throughout the Do List application."""


# Storage layout
DATA_DIR_NAME = ".do-list"
DATA_DIR_ENV_VAR = "DO_LIST_DATA_DIR"
CONFIG_FILE_NAME = "config.json"
DEFAULT_STORAGE_KEY = "do-list-tasks"
STORAGE_FORMAT_VERSION = 1

# Display
DEFAULT_SHORT_ID_LENGTH = 8
MAX_TITLE_DISPLAY_LENGTH = 60
DATETIME_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Empty-state messages for the list view, keyed by filter value
EMPTY_STATE_MESSAGES = {
    "all": ("No tasks yet", "Add your first task to get started!"),
    "pending": ("No pending tasks", "All your tasks are completed. Great job!"),
    "completed": ("No completed tasks", "Complete some tasks to see them here."),
}
