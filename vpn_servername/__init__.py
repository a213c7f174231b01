"""
VPN Server Name Package

Persists the name of the chosen VPN server next to a generated tunnel
configuration, either as a '<outfile>.servername' sidecar file or as a
SERVER_NAME='...' line in the configuration path itself.

Architecture:
- Strategy Pattern for record conventions
- Factory Pattern for creating formatters
- Facade Pattern for the writer service
- Value Object Pattern for data models
"""

from .errors import WriteError
from .models import ServerName, ServerNameRecord
from .formatters import RecordFormat, RecordFormatter, SidecarFormatter, EnvFormatter
from .repositories import FormatterFactory
from .services import ServerNameWriter, initialize_writer, write_server_name_file

__all__ = [
    # Errors
    "WriteError",
    # Models
    "ServerName",
    "ServerNameRecord",
    # Formatters
    "RecordFormat",
    "RecordFormatter",
    "SidecarFormatter",
    "EnvFormatter",
    # Factory
    "FormatterFactory",
    # Services
    "ServerNameWriter",
    "initialize_writer",
    "write_server_name_file",
]
