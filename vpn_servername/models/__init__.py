"""
Data models and value objects.
"""

from .server_name import ServerName, ServerNameRecord

__all__ = ['ServerName', 'ServerNameRecord']
