"""Configuration management for ezgo."""

from ezgo.core.config.loader import ConfigLoader
from ezgo.core.config.project import (
    PROJECT_CONFIG_FILE,
    add_packages,
    init_project_config,
    load_project_config,
    save_project_config,
)
from ezgo.core.config.settings import (
    LoggingSettings,
    PostBuildSettings,
    Settings,
    ToolchainSettings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "PROJECT_CONFIG_FILE",
    "load_project_config",
    "save_project_config",
    "init_project_config",
    "add_packages",
    "Settings",
    "ToolchainSettings",
    "PostBuildSettings",
    "LoggingSettings",
    "get_settings",
]
