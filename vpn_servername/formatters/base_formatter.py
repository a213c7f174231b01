"""
Base record formatter - Abstract base class for server name conventions.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Union

from ..models import ServerName, ServerNameRecord


class RecordFormat(Enum):
    """Server name file conventions"""
    SIDECAR = "sidecar"
    ENV = "env"

    @classmethod
    def from_string(cls, value: str) -> 'RecordFormat':
        """
        Look up a format by name (case-insensitive).

        Raises:
            ValueError: If the name is not a known format
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown record format: {value!r} (expected one of: {choices})") from None


class RecordFormatter(ABC):
    """
    Abstract base class for record formatters.

    Design Pattern: Strategy Pattern
    Each convention decides where the record lives relative to the output
    path, how a name is rendered into file content, and how it is read back.
    """

    @property
    @abstractmethod
    def record_format(self) -> RecordFormat:
        """Return the convention implemented by this formatter"""
        pass

    @abstractmethod
    def target_path(self, output_path: Union[str, Path]) -> Path:
        """
        Resolve the file the record is written to.

        Args:
            output_path: Base output path supplied by the caller

        Returns:
            Path of the record file
        """
        pass

    @abstractmethod
    def render(self, server_name: ServerName) -> str:
        """
        Render the exact file content for a server name.

        Raises:
            ValueError: If the name cannot be represented in this convention
        """
        pass

    @abstractmethod
    def parse(self, content: str) -> str:
        """
        Extract the server name from file content.

        Raises:
            ValueError: If the content holds no server name
        """
        pass

    def build_record(self, output_path: Union[str, Path], server_name: ServerName) -> ServerNameRecord:
        """Render a name into a record for the given output path"""
        return ServerNameRecord(path=self.target_path(output_path), content=self.render(server_name))
