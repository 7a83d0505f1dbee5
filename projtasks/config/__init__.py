from .builtin import DEFAULT_TASKS, build_project
from .loader import find_settings, load_settings
from .types import (
    ConfigError,
    ProjectConfig,
    Settings,
    TaskConfig,
    ToolsConfig,
    UnknownTask,
)

__all__ = [
    "DEFAULT_TASKS",
    "build_project",
    "find_settings",
    "load_settings",
    "ProjectConfig",
    "TaskConfig",
    "ToolsConfig",
    "Settings",
    "ConfigError",
    "UnknownTask",
]
