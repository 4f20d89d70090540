# exntree/__init__.py
"""
exntree - exception trees with source locations

User-facing API:
- Exn: typed, raisable handle on an exception tree
- Exn.raise_(): wrap a tree under a new error
- Exn.raise_all(): merge many trees as siblings under a new error
- ExnAny: type-erased tree for application-level handling
- representation: Tree (default), List, Interop

Basic usage:

    >>> from exntree import Exn
    >>> class LogicError(Exception):
    ...     pass
    >>> class AppError(Exception):
    ...     pass
    >>> origin = Exn(LogicError("0 == 1"))
    >>> exn = origin.raise_(AppError("math no longer works"))
    >>> print(f"{exn:?}")  # doctest: +SKIP
    math no longer works, at app.py:6:7
    └─ 0 == 1, at app.py:5:10

Merging:

    >>> failures = [Exn(OSError(f"cannot open {p}")) for p in ("a", "b")]
    >>> summary = Exn.raise_all(failures, AppError("could not load inputs"))
    >>> [str(child) for child in summary.frame.children]
    ['cannot open a', 'cannot open b']

Adapters:

    >>> from exntree import or_raise
    >>> with or_raise(lambda: AppError("parse failed")):  # doctest: +SKIP
    ...     int("x")
"""

__version__ = "0.1.0"

from .core import Exn, Frame, Location, SourceError, render_frame, render_structure, render_tree
from .representation import ExnAny, Interop, List, Repr, Tree
from . import representation
from .adapters import (
    Collected,
    ExnFormatter,
    collect_all,
    ensure,
    into_exn,
    log_exn,
    ok_or_raise,
    or_raise,
)
from .config import ExnTreeConfig, RenderConfig, ImportConfig, get_config, load_config, set_config
from .errors import ExnTreeError

__all__ = [
    # Version
    "__version__",

    # Core
    "Exn",
    "Frame",
    "Location",
    "SourceError",
    "render_frame",
    "render_tree",
    "render_structure",

    # Erasure
    "ExnAny",
    "Repr",
    "Tree",
    "List",
    "Interop",
    "representation",

    # Adapters
    "into_exn",
    "or_raise",
    "ok_or_raise",
    "ensure",
    "collect_all",
    "Collected",
    "ExnFormatter",
    "log_exn",

    # Configuration
    "ExnTreeConfig",
    "RenderConfig",
    "ImportConfig",
    "get_config",
    "set_config",
    "load_config",

    # Errors
    "ExnTreeError",
]
