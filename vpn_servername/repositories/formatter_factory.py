"""
Formatter Factory - Factory Pattern implementation.
Creates record formatter instances based on record format.
"""

import logging
from typing import Dict, List, Type

from ..formatters import RecordFormat, RecordFormatter, SidecarFormatter, EnvFormatter

logger = logging.getLogger(__name__)


class FormatterFactory:
    """
    Factory for creating record formatter instances.

    Design Pattern: Factory Pattern + Registry Pattern
    """

    # Formatter registry
    _FORMATTERS: Dict[RecordFormat, Type[RecordFormatter]] = {
        RecordFormat.SIDECAR: SidecarFormatter,
        RecordFormat.ENV: EnvFormatter,
    }

    @classmethod
    def create_formatter(cls, record_format: RecordFormat) -> RecordFormatter:
        """
        Create a record formatter instance.

        Args:
            record_format: Server name file convention

        Returns:
            Formatter for the convention

        Raises:
            ValueError: If the format is not registered
        """
        formatter_class = cls._FORMATTERS.get(record_format)

        if not formatter_class:
            raise ValueError(f"Unknown record format: {record_format}")

        logger.debug(f"Creating formatter for format: {record_format.value}")
        return formatter_class()

    @classmethod
    def get_supported_formats(cls) -> List[RecordFormat]:
        """Get list of registered record formats"""
        return list(cls._FORMATTERS.keys())

    @classmethod
    def register_formatter(cls, record_format: RecordFormat, formatter_class: Type[RecordFormatter]):
        """
        Register a formatter (for extensibility).

        Args:
            record_format: Record format
            formatter_class: Formatter class to register
        """
        cls._FORMATTERS[record_format] = formatter_class
        logger.info(f"Registered formatter for format: {record_format.value}")
