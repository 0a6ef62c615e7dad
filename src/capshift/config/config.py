"""Configuration management for the caption tool."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from capshift.exceptions import ConfigurationError

DEFAULT_MAX_OFFSET_MS = 10 * 60 * 1000
DEFAULT_BACKUP_SUFFIX = ".og"
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigManager:
    """Manages application configuration from environment variables."""

    def __init__(self, load_env_files: bool = True) -> None:
        """Initialize the configuration manager."""
        if load_env_files:
            self._load_environment()

    def _load_environment(self) -> bool:
        """
        Load environment variables in order of precedence:
        1. Current working directory .env
        2. User home directory .env
        3. ~/.config/capshift/.env, then /etc/capshift/.env
        4. System environment variables only

        Returns:
            True if .env file was found and loaded, False otherwise
        """
        home_dir = Path.home()
        env_locations = [
            Path.cwd() / ".env",
            home_dir / ".env",
            home_dir / ".config" / "capshift" / ".env",
            Path("/etc/capshift/.env"),  # Linux system-wide
        ]

        for env_path in env_locations:
            if env_path.exists():
                load_dotenv(env_path)
                return True

        # Fall back to system environment variables only
        return False

    def get_config_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get configuration value with fallback."""
        return os.getenv(key, default)

    def get_int_config_value(self, key: str, default: Optional[int] = None) -> int:
        """Get integer configuration value with fallback."""
        default_string = str(default) if default is not None else None
        value = self.get_config_value(key, default_string)
        if value is None:
            return default if default is not None else 0
        try:
            return int(value)
        except ValueError as e:
            error_message = "Invalid integer value for %s: %s" % (key, value)
            raise ConfigurationError(error_message, key) from e

    def get_max_offset_ms(self) -> int:
        """Largest offset accepted from user input; 0 means unlimited."""
        max_offset = self.get_int_config_value("CAPSHIFT_MAX_OFFSET_MS", DEFAULT_MAX_OFFSET_MS)
        if max_offset < 0:
            error_message = "CAPSHIFT_MAX_OFFSET_MS must not be negative: %d" % max_offset
            raise ConfigurationError(error_message, "CAPSHIFT_MAX_OFFSET_MS")
        return max_offset

    def get_backup_suffix(self) -> str:
        """Suffix inserted before the extension of backup files."""
        suffix = self.get_config_value("CAPSHIFT_BACKUP_SUFFIX", DEFAULT_BACKUP_SUFFIX)
        if not suffix:
            raise ConfigurationError(
                "CAPSHIFT_BACKUP_SUFFIX must not be empty", "CAPSHIFT_BACKUP_SUFFIX"
            )
        return suffix

    def get_log_level(self) -> str:
        """Console log level name."""
        level = self.get_config_value("CAPSHIFT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            error_message = "Invalid log level for CAPSHIFT_LOG_LEVEL: %s" % level
            raise ConfigurationError(error_message, "CAPSHIFT_LOG_LEVEL")
        return level

    def get_log_file(self) -> Optional[Path]:
        """Optional path of a debug log file."""
        log_file = self.get_config_value("CAPSHIFT_LOG_FILE")
        if not log_file:
            return None
        return Path(log_file).expanduser()


# Global configuration instance
config = ConfigManager()
