"""
Service layer - writing and reading server name records.
"""

from .writer_service import ServerNameWriter, initialize_writer, write_server_name_file

__all__ = ['ServerNameWriter', 'initialize_writer', 'write_server_name_file']
