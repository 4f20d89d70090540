# exntree/core/__init__.py
"""
Core exception-tree model.

- Location: where a frame was captured
- Frame: untyped tree node (error, location, children)
- Exn: typed, raisable handle owning one frame
- render_*: text forms of a tree
"""

from .location import Location, capture_location
from .frame import Frame, SourceError, import_source_chain
from .exn import Exn
from .render import render_frame, render_structure, render_tree

__all__ = [
    "Location",
    "capture_location",
    "Frame",
    "SourceError",
    "import_source_chain",
    "Exn",
    "render_frame",
    "render_tree",
    "render_structure",
]
