# exntree/adapters/__init__.py
"""
Adapters between everyday Python error handling and exception trees.
"""

from .context import ensure, into_exn, ok_or_raise, or_raise
from .collect import Collected, collect_all
from .log_format import ExnFormatter, log_exn

__all__ = [
    "into_exn",
    "or_raise",
    "ok_or_raise",
    "ensure",
    "Collected",
    "collect_all",
    "ExnFormatter",
    "log_exn",
]
