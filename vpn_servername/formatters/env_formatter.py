"""
Env formatter - the output path is overwritten with a single .env line.

Output format:
SERVER_NAME='us_california-lax.pia.privateinternetaccess.com'
"""

import io
import re
from pathlib import Path
from typing import Union

from dotenv import dotenv_values

from .base_formatter import RecordFormat, RecordFormatter
from ..models import ServerName


class EnvFormatter(RecordFormatter):
    """
    Writes SERVER_NAME='<name>' directly to the output path.

    dotenv parsers unescape backslash sequences inside single quotes, and a
    quote or line break would end the value early. Names containing any of
    these are rejected instead of escaped, so read-back is exact.
    """

    KEY = "SERVER_NAME"

    # Characters that cannot appear inside a single-quoted value
    _UNSAFE_CHARS = re.compile(r"['\\\r\n]")

    @property
    def record_format(self) -> RecordFormat:
        return RecordFormat.ENV

    def target_path(self, output_path: Union[str, Path]) -> Path:
        return Path(output_path)

    def render(self, server_name: ServerName) -> str:
        if self._UNSAFE_CHARS.search(server_name.value):
            raise ValueError(
                f"Server name {server_name.value!r} contains a quote, backslash or line break "
                f"and cannot be stored as {self.KEY}"
            )
        return f"{self.KEY}='{server_name.value}'\n"

    def parse(self, content: str) -> str:
        values = dotenv_values(stream=io.StringIO(content), interpolate=False)
        value = values.get(self.KEY)
        if not value:
            raise ValueError(f"No {self.KEY} entry found")
        return value
