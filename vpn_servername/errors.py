"""
Exceptions raised while persisting server name records.
"""

from pathlib import Path
from typing import Union


class WriteError(OSError):
    """
    Failure to create, write or chmod a server name record.

    Subclasses OSError so the original errno and strerror stay available,
    and callers that already catch OSError keep working.
    """

    @classmethod
    def from_os_error(cls, error: OSError, path: Union[str, Path]) -> 'WriteError':
        """
        Build a WriteError from the underlying OSError.

        Args:
            error: The error raised by the filesystem call
            path: Record path that was being written

        Returns:
            WriteError carrying the same errno/strerror and the record path
        """
        return cls(error.errno, error.strerror or str(error), str(path))
