# config/config_manager.py

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class PublishingConfig:
    """Publish gate configuration"""
    post_types: List[str] = field(default_factory=lambda: ["post"])
    notice_ttl: int = 60
    notice_key: str = "haikupress_admin_notice"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[str] = None


class ConfigManager:
    """
    Manages configuration loading and access for HaikuPress.

    Handles loading from YAML files, environment variable overrides,
    and provides typed access to configuration sections.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self.logger = logging.getLogger(__name__)

        self._config: Dict[str, Any] = {}
        self._load_config()

    def _get_default_config_path(self) -> Path:
        """Get default configuration file path"""
        current_dir = Path(__file__).parent
        return current_dir / "default_config.yaml"

    def _load_config(self):
        """Load configuration from YAML file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            self.logger.info(f"Loaded configuration from {self.config_path}")
        except FileNotFoundError:
            self.logger.warning(f"Configuration file not found: {self.config_path}")
            self._config = {}
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing configuration file: {e}")
            self._config = {}

        # Environment wins over the file, even when the file is missing
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply environment variable overrides"""
        if os.getenv("HAIKUPRESS_LOG_LEVEL"):
            self._config.setdefault("logging", {})["level"] = os.getenv("HAIKUPRESS_LOG_LEVEL")

        if os.getenv("HAIKUPRESS_LOG_FILE"):
            self._config.setdefault("logging", {})["file"] = os.getenv("HAIKUPRESS_LOG_FILE")

        if os.getenv("HAIKUPRESS_NOTICE_TTL"):
            try:
                ttl = int(os.getenv("HAIKUPRESS_NOTICE_TTL"))
            except ValueError:
                self.logger.warning(f"Ignoring non-integer HAIKUPRESS_NOTICE_TTL: {os.getenv('HAIKUPRESS_NOTICE_TTL')}")
            else:
                self._config.setdefault("publishing", {})["notice_ttl"] = ttl

        if os.getenv("HAIKUPRESS_POST_TYPES"):
            post_types = [name.strip() for name in os.getenv("HAIKUPRESS_POST_TYPES").split(",") if name.strip()]
            self._config.setdefault("publishing", {})["post_types"] = post_types

    def get_publishing_config(self) -> PublishingConfig:
        """Get publish gate configuration"""
        pub_config = self._config.get("publishing", {})

        return PublishingConfig(
            post_types=list(pub_config.get("post_types", ["post"])),
            notice_ttl=pub_config.get("notice_ttl", 60),
            notice_key=pub_config.get("notice_key", "haikupress_admin_notice")
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration"""
        log_config = self._config.get("logging", {})

        return LoggingConfig(
            level=log_config.get("level", "INFO"),
            format=log_config.get("format", DEFAULT_LOG_FORMAT),
            file=log_config.get("file")
        )

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary"""
        return self._config.copy()

    def reload_config(self):
        """Reload configuration from file"""
        self._load_config()

    def validate_config(self) -> bool:
        """Validate configuration completeness"""
        pub_config = self.get_publishing_config()

        if not pub_config.post_types:
            self.logger.warning("No post types configured for haiku validation")
            return False

        if not isinstance(pub_config.notice_ttl, int) or pub_config.notice_ttl <= 0:
            self.logger.warning(f"Notice TTL must be a positive integer: {pub_config.notice_ttl}")
            return False

        level = self.get_logging_config().level
        if not isinstance(logging.getLevelName(str(level).upper()), int):
            self.logger.warning(f"Unknown logging level: {level}")
            return False

        return True

# Singleton instance for global access
_config_manager: Optional[ConfigManager] = None

def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager

    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)

    return _config_manager
