"""
Repositories and factories - Factory Pattern implementation.
"""

from .formatter_factory import FormatterFactory

__all__ = ['FormatterFactory']
