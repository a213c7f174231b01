"""
Record formatters - Strategy Pattern for the on-disk server name conventions.
"""

from .base_formatter import RecordFormat, RecordFormatter
from .sidecar_formatter import SidecarFormatter
from .env_formatter import EnvFormatter

__all__ = ['RecordFormat', 'RecordFormatter', 'SidecarFormatter', 'EnvFormatter']
