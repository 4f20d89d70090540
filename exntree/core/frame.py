# exntree/core/frame.py
"""
Frame: one node of an exception tree.

A frame holds an error, the location it was captured at, and its ordered
children. The first child is the primary cause. Frames are never mutated
once the Exn that builds them has been returned to the caller, so a subtree
can be shared between handles without copying.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from exntree.config import get_config
from .location import Location
from .render import format_node, render_frame, render_structure, render_tree, safe_str

if TYPE_CHECKING:
    from exntree.config import RenderConfig
    from .exn import Exn


class SourceError(Exception):
    """
    Opaque leaf holding the text of an imported cause.

    The original type of a foreign cause is not kept; only str(cause) is.
    """

    def __init__(self, text: str):
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return repr(self.text)


class Frame:
    """Node in an exception tree"""

    __slots__ = ("_error", "_location", "_children")

    def __init__(
        self,
        error: BaseException,
        location: Location,
        children: Iterable["Frame"] = (),
    ):
        if not isinstance(error, BaseException):
            raise TypeError(
                f"Frame error must be an exception instance, got {type(error).__name__}"
            )
        self._error = error
        self._location = location
        self._children: List[Frame] = list(children)

    # -------- inspection --------

    @property
    def error(self) -> BaseException:
        """The error that occurred at this frame."""
        return self._error

    @property
    def location(self) -> Location:
        """Source location where this frame was created."""
        return self._location

    @property
    def children(self) -> Tuple["Frame", ...]:
        """Child frames, in insertion order."""
        return tuple(self._children)

    def consume(self) -> Tuple[BaseException, List["Frame"]]:
        """Split this frame into its error and its children."""
        return self._error, list(self._children)

    @classmethod
    def from_exn(cls, exn: "Exn[Any]") -> "Frame":
        """Return the root frame of an Exn."""
        return exn.frame

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict structure, for logging."""
        root = self._node_dict()
        stack: List[Tuple[Frame, Dict[str, Any]]] = [(self, root)]
        while stack:
            frame, data = stack.pop()
            for child in frame._children:
                child_data = child._node_dict()
                data["children"].append(child_data)
                stack.append((child, child_data))
        return root

    def _node_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self._error).__name__,
            "message": safe_str(self._error),
            "location": self._location.to_dict(),
            "children": [],
        }

    # -------- rendering --------

    def render(self, style: Optional["RenderConfig"] = None) -> str:
        """Render only this frame (no children)."""
        return render_frame(self, style)

    def render_tree(self, style: Optional["RenderConfig"] = None) -> str:
        """Render this frame and its descendants."""
        return render_tree(self, style)

    def __str__(self) -> str:
        return safe_str(self._error)

    def __repr__(self) -> str:
        return render_structure(self)

    def __format__(self, spec: str) -> str:
        return format_node(self, spec, frame=self, debug=self.render)

    def __reduce__(self):
        return (Frame, (self._error, self._location, self._children))

    # -------- construction (owning Exn only) --------

    def _adopt(self, frames: Iterable["Frame"]) -> None:
        self._children.extend(frames)


def _source_of(error: BaseException, follow_context: bool) -> Optional[BaseException]:
    """Next link of a native cause chain, as the traceback module walks it."""
    if error.__cause__ is not None:
        return error.__cause__
    if follow_context and not error.__suppress_context__:
        return error.__context__
    return None


def import_source_chain(
    error: BaseException,
    location: Location,
    *,
    follow_context: Optional[bool] = None,
) -> List[Frame]:
    """
    Re-materialize an error's own cause chain as child frames.

    Each link becomes a SourceError leaf carrying str(link), at the location
    of the frame being built. The result is either empty or a single frame
    whose descendants form a chain of single children.
    """
    if follow_context is None:
        follow_context = get_config().importer.follow_context

    links: List[BaseException] = []
    seen = {id(error)}
    current = _source_of(error, follow_context)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        links.append(current)
        current = _source_of(current, follow_context)

    chain: List[Frame] = []
    for link in reversed(links):
        chain = [Frame(SourceError(safe_str(link)), location, chain)]
    return chain


__all__ = [
    "Frame",
    "SourceError",
    "import_source_chain",
]
