"""
Writer Service - persists the chosen VPN server name next to a tunnel config.

Records are created or truncated on every write and left owner-only.
There is no locking: concurrent writers to the same path race and the last
write wins.
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..config import WriterSettings, validate_file_mode
from ..errors import WriteError
from ..formatters import RecordFormat, RecordFormatter
from ..models import ServerName, ServerNameRecord
from ..repositories import FormatterFactory

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ServerNameWriter:
    """
    Writes, reads back and removes server name records.

    Design Pattern: Facade Pattern
    Hides the formatter lookup and the file permission handling behind
    a three-method interface.
    """

    def __init__(self,
                 record_format: RecordFormat = RecordFormat.SIDECAR,
                 file_mode: int = 0o600):
        """
        Initialize writer.

        Args:
            record_format: Convention used for the record file
            file_mode: Permission bits applied to every written record (owner-only)

        Raises:
            ValueError: If file_mode is not owner-only
        """
        validate_file_mode(file_mode)
        self.record_format = record_format
        self.file_mode = file_mode
        self._formatter: RecordFormatter = FormatterFactory.create_formatter(record_format)

    def record_for(self, output_path: PathLike, server_name: Union[str, ServerName]) -> ServerNameRecord:
        """
        Build the record for a name without touching the filesystem.

        Raises:
            ValueError: If the name is empty or not representable in this format
        """
        if not isinstance(server_name, ServerName):
            server_name = ServerName(server_name)
        return self._formatter.build_record(output_path, server_name)

    def write(self, output_path: PathLike, server_name: Union[str, ServerName]) -> Path:
        """
        Write the server name record.

        Args:
            output_path: Tunnel config path the record belongs to
            server_name: Name of the chosen server

        Returns:
            Path of the written record

        Raises:
            ValueError: If the name is invalid for this format (nothing is written)
            WriteError: If the file cannot be created, written or chmod'ed
        """
        record = self.record_for(output_path, server_name)

        try:
            fd = os.open(record.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(record.content)
            # os.open only applies the mode on creation, and only after umask
            os.chmod(record.path, self.file_mode)
        except OSError as e:
            raise WriteError.from_os_error(e, record.path) from e

        logger.info(f"Wrote server name to {record.path} ({self.record_format.value})")
        return record.path

    def read(self, output_path: PathLike) -> str:
        """
        Read the stored server name back.

        Raises:
            FileNotFoundError: If no record exists
            ValueError: If the record holds no server name
        """
        path = self._formatter.target_path(output_path)
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()

        server_name = self._formatter.parse(content)
        logger.debug(f"Read server name {server_name} from {path}")
        return server_name

    def remove(self, output_path: PathLike) -> bool:
        """
        Delete the record.

        Returns:
            True if a record was removed, False if none existed
        """
        path = self._formatter.target_path(output_path)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug(f"No server name record at {path}")
            return False

        logger.info(f"Removed server name record {path}")
        return True


def write_server_name_file(output_path: PathLike,
                           server_name: str,
                           record_format: RecordFormat = RecordFormat.SIDECAR) -> Path:
    """
    Persist a server name for the tunnel config at output_path.

    With the default sidecar convention, 'test-wg.conf' gets a
    'test-wg.conf.servername' file holding exactly the name.

    Returns:
        Path of the written record

    Raises:
        WriteError: If the record cannot be written
    """
    return ServerNameWriter(record_format=record_format).write(output_path, server_name)


def initialize_writer() -> ServerNameWriter:
    """
    Initialize writer from environment variables.

    Returns:
        Configured ServerNameWriter instance
    """
    settings = WriterSettings.from_env()
    return ServerNameWriter(record_format=settings.record_format, file_mode=settings.file_mode)
