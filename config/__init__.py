# config/__init__.py

from .config_manager import ConfigManager, PublishingConfig, LoggingConfig, get_config_manager

__all__ = [
    "ConfigManager",
    "PublishingConfig",
    "LoggingConfig",
    "get_config_manager"
]
