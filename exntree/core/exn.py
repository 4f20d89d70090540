# exntree/core/exn.py
"""
Exn: a typed, raisable handle on one exception tree.

Usage:
```python
class LoadError(Exception):
    pass

def load(paths):
    failures = []
    for path in paths:
        try:
            open(path).close()
        except OSError as e:
            failures.append(Exn(e).raise_(LoadError(f"failed to open {path}")))
    if failures:
        raise Exn.raise_all(failures, LoadError("could not load inputs"))
```

Rendering the raised Exn (f"{exn:?}") gives:

    could not load inputs, at app.py:11:15
    ├─ failed to open a.yml, at app.py:9:30
    │  └─ [Errno 2] No such file or directory: 'a.yml', at app.py:9:30
    └─ failed to open b.yml, at app.py:9:30
       └─ [Errno 2] No such file or directory: 'b.yml', at app.py:9:30
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, TypeVar, Union

from exntree.config import RenderConfig
from .frame import Frame, import_source_chain
from .location import Location, capture_location
from .render import format_node, render_frame, render_structure, render_tree, safe_str

E = TypeVar("E", bound=BaseException)
T = TypeVar("T", bound=BaseException)

ChildLike = Union["Exn[Any]", Frame, BaseException]


class Exn(Exception, Generic[E]):
    """
    Exception that holds an error tree rooted at an error of type E.

    The payload and its frame are created together here and the frame's
    error is never replaced, so `exn.error` is always an E.
    """

    def __init__(
        self,
        error: E,
        *,
        stacklevel: int = 1,
        location: Optional[Location] = None,
    ):
        if isinstance(error, Exn):
            raise TypeError("error is already an Exn; use raise_() to wrap it")
        if not isinstance(error, BaseException):
            raise TypeError(f"Exn error must be an exception instance, got {type(error).__name__}")

        if location is None:
            location = capture_location(stacklevel + 1)
        super().__init__(error)
        self._frame = Frame(error, location, import_source_chain(error, location))

    @classmethod
    def _from_frame(cls, frame: Frame) -> "Exn[Any]":
        exn = cls.__new__(cls)
        Exception.__init__(exn, frame.error)
        exn._frame = frame
        return exn

    # -------- propagation --------

    def raise_(
        self,
        error: T,
        *,
        stacklevel: int = 1,
        location: Optional[Location] = None,
    ) -> "Exn[T]":
        """
        Wrap this tree under a new error.

        The new root is captured at this call; this tree's root becomes its
        last child, after any children imported from error's own chain.
        """
        if location is None:
            location = capture_location(stacklevel + 1)
        new_exn: Exn[T] = Exn(error, location=location)
        new_exn._frame._adopt([self._frame])
        return new_exn

    @classmethod
    def raise_all(
        cls,
        children: Iterable[ChildLike],
        error: E,
        *,
        stacklevel: int = 1,
        location: Optional[Location] = None,
    ) -> "Exn[E]":
        """
        Merge many trees as siblings under a new error.

        Children keep their iteration order and come after any children
        imported from error's own chain. A plain exception in children is
        upgraded to an Exn at this call's location.
        """
        if location is None:
            location = capture_location(stacklevel + 1)
        new_exn: Exn[E] = Exn(error, location=location)
        new_exn._frame._adopt([_as_frame(child, location) for child in children])
        return new_exn

    # -------- inspection --------

    @property
    def frame(self) -> Frame:
        """The root frame."""
        return self._frame

    @property
    def error(self) -> E:
        """The root error, typed E."""
        return self._frame.error  # type: ignore[return-value]

    @property
    def location(self) -> Location:
        return self._frame.location

    def into_frame(self) -> Frame:
        """Return the root frame, leaving the typed handle behind."""
        return self._frame

    # -------- rendering --------

    def render(self, style: Optional[RenderConfig] = None) -> str:
        """Render only the root frame."""
        return render_frame(self._frame, style)

    def render_tree(self, style: Optional[RenderConfig] = None) -> str:
        """Render the whole tree."""
        return render_tree(self._frame, style)

    def __str__(self) -> str:
        return safe_str(self._frame.error)

    def __repr__(self) -> str:
        return f"Exn(frame={render_structure(self._frame)})"

    def __format__(self, spec: str) -> str:
        return format_node(self, spec, frame=self._frame, debug=self.render_tree)

    def __reduce__(self):
        return (_restore_exn, (self._frame,))


def _restore_exn(frame: Frame) -> "Exn[Any]":
    return Exn._from_frame(frame)


def _as_frame(child: ChildLike, location: Location) -> Frame:
    if isinstance(child, Exn):
        return child.frame
    if isinstance(child, Frame):
        return child
    if isinstance(child, BaseException):
        return Exn(child, location=location).frame
    raise TypeError(f"cannot merge {type(child).__name__} into an exception tree")


__all__ = [
    "Exn",
]
