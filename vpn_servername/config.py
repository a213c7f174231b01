"""
Centralized Configuration Module

Application constants, writer settings and logging configuration.
Import from here instead of hardcoding values.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .formatters import RecordFormat

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        # Reload default .env
        load_dotenv(override=True)


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "vpn-servername"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Persist the chosen VPN server name next to a tunnel configuration"

    # Default Values
    DEFAULT_RECORD_FORMAT = "sidecar"
    DEFAULT_FILE_MODE = "600"


def validate_file_mode(file_mode: int):
    """
    Check that a record file mode is owner-only.

    Raises:
        ValueError: If the owner has no access or group/other have any
    """
    if file_mode & 0o700 == 0:
        raise ValueError(f"File mode {oct(file_mode)} gives the owner no access")
    if file_mode & 0o077:
        raise ValueError(f"File mode {oct(file_mode)} grants group/other access")


@dataclass(frozen=True)
class WriterSettings:
    """
    Server name writer settings.

    Attributes:
        record_format: Convention used for record files
        file_mode: Permission bits for written records
    """
    record_format: RecordFormat = RecordFormat.SIDECAR
    file_mode: int = 0o600

    def __post_init__(self):
        """Validate invariants"""
        validate_file_mode(self.file_mode)

    @staticmethod
    def parse_file_mode(value: str) -> int:
        """
        Parse an octal permission string such as '600' or '0o600'.

        Raises:
            ValueError: If the value is not an octal mode between 0 and 0o777
        """
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError:
            raise ValueError(f"Invalid file mode: {value!r} (expected octal, e.g. 600)") from None
        if not 0 <= mode <= 0o777:
            raise ValueError(f"Invalid file mode: {value!r} (out of range)")
        return mode

    @classmethod
    def from_env(cls) -> 'WriterSettings':
        """
        Create settings from SERVERNAME_FORMAT and SERVERNAME_FILE_MODE.

        Returns:
            WriterSettings instance
        """
        record_format = RecordFormat.from_string(
            os.getenv("SERVERNAME_FORMAT", AppConfig.DEFAULT_RECORD_FORMAT)
        )
        file_mode = cls.parse_file_mode(
            os.getenv("SERVERNAME_FILE_MODE", AppConfig.DEFAULT_FILE_MODE)
        )
        return cls(record_format=record_format, file_mode=file_mode)


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """
    Logging configuration.

    LOG_LEVEL and LOG_FILE are read when logging is set up, so values from
    an --env-file apply.
    """

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Verbose format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    LOG_FILE_MAX_BYTES = 1048576  # 1MB
    LOG_FILE_BACKUP_COUNT = 3

    @classmethod
    def log_level(cls) -> int:
        """Level named by LOG_LEVEL, INFO if unset or unknown"""
        level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def log_file(cls) -> Optional[str]:
        """Optional log file path from LOG_FILE"""
        return os.getenv("LOG_FILE") or None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path, overrides LOG_FILE
    """
    log_level = logging.DEBUG if verbose else LogConfig.log_level()
    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    file_path = log_file or LogConfig.log_file()
    if file_path:
        from logging.handlers import RotatingFileHandler

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if any setting is invalid.
    """
    errors = []

    try:
        RecordFormat.from_string(os.getenv("SERVERNAME_FORMAT", AppConfig.DEFAULT_RECORD_FORMAT))
    except ValueError as e:
        errors.append(str(e))

    try:
        mode = WriterSettings.parse_file_mode(os.getenv("SERVERNAME_FILE_MODE", AppConfig.DEFAULT_FILE_MODE))
        validate_file_mode(mode)
    except ValueError as e:
        errors.append(str(e))

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.info("Configuration validated")


__all__ = [
    'AppConfig',
    'WriterSettings',
    'validate_file_mode',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
