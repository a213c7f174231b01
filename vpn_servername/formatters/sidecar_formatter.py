"""
Sidecar formatter - the name lives in '<outfile>.servername'.

Output format (no trailing newline):
us_california-lax.pia.privateinternetaccess.com
"""

from pathlib import Path
from typing import Union

from .base_formatter import RecordFormat, RecordFormatter
from ..models import ServerName


class SidecarFormatter(RecordFormatter):
    """Writes the raw server name to a file next to the output path"""

    SUFFIX = ".servername"

    @property
    def record_format(self) -> RecordFormat:
        return RecordFormat.SIDECAR

    def target_path(self, output_path: Union[str, Path]) -> Path:
        # Suffix is appended, not substituted: test-wg.conf -> test-wg.conf.servername
        return Path(f"{output_path}{self.SUFFIX}")

    def render(self, server_name: ServerName) -> str:
        return server_name.value

    def parse(self, content: str) -> str:
        if not content:
            raise ValueError("Server name file is empty")
        return content
