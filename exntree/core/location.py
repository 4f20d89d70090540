# exntree/core/location.py
"""
Source locations for exception frames.

A location is captured from the caller's stack frame at the public API
boundary. `stacklevel` follows the warnings/logging convention: 1 is the
function that calls capture_location(), 2 is its caller, and so on.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from types import FrameType
from typing import Any, Dict, Optional
import os
import sys


# Frames in these modules never count as a call site. typing shows up when a
# subscripted generic is called, e.g. Exn[MyError](error).
_SKIP_MODULES = frozenset({"typing"})


@dataclass(frozen=True)
class Location:
    """File, line and column of the call that produced a frame."""

    file: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    def format(self, path_style: str = "absolute") -> str:
        """
        Format as file:line:column.

        path_style:
            absolute: the file as recorded
            relative: relative to the working directory when the file is under it
            name: base name only
        """
        return f"{_format_path(self.file, path_style)}:{self.line}:{self.column}"

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "line": self.line, "column": self.column}


def _format_path(file: str, path_style: str) -> str:
    if path_style == "name":
        return os.path.basename(file)
    if path_style == "relative":
        try:
            rel = os.path.relpath(file)
        except ValueError:
            # different drive on Windows
            return file
        if rel.startswith(os.pardir):
            return file
        return rel
    return file


def _column_of(frame: FrameType) -> int:
    """1-based column of the instruction being executed, 0 if unknown."""
    code = frame.f_code
    if not hasattr(code, "co_positions") or frame.f_lasti < 0:
        return 0
    # co_positions() yields one entry per 2-byte code unit
    position = next(islice(code.co_positions(), frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def location_of(frame: FrameType) -> Location:
    return Location(
        file=frame.f_code.co_filename,
        line=frame.f_lineno or 0,
        column=_column_of(frame),
    )


def capture_location(stacklevel: int = 1) -> Location:
    """
    Capture the location of a caller.

    Args:
        stacklevel: 1 for the function calling capture_location(), 2 for its
            caller, and so on.
    """
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be >= 1, got {stacklevel}")

    frame: Optional[FrameType] = sys._getframe(stacklevel)
    while frame is not None and frame.f_globals.get("__name__") in _SKIP_MODULES:
        frame = frame.f_back
    if frame is None:
        return Location(file="<unknown>", line=0, column=0)
    return location_of(frame)


__all__ = [
    "Location",
    "capture_location",
    "location_of",
]
