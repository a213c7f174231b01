"""
Server name data models - Value Object pattern.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ServerName:
    """
    Immutable VPN server name.

    The value is opaque: something like
    'us_california-lax.pia.privateinternetaccess.com' is stored as given,
    with no trimming or parsing.

    Attributes:
        value: Server name text
    """
    value: str

    def __post_init__(self):
        """Validate invariants"""
        if not isinstance(self.value, str):
            raise TypeError(f"Server name must be a string, got {type(self.value).__name__}")
        if not self.value:
            raise ValueError("Server name cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ServerNameRecord:
    """
    A server name record as it will appear on disk.

    Attributes:
        path: File the record is written to
        content: Exact text content of the file
    """
    path: Path
    content: str
