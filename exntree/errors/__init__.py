# exntree/errors/__init__.py
"""
Errors raised by exntree itself.

This package defines:
- Stable error codes
- ExnTreeError, the exception type for configuration and other
  operational failures of the library

No side effects on import.
"""

from . import codes
from .exceptions import ExnTreeError

__all__ = [
    "codes",
    "ExnTreeError",
]
