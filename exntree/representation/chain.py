# exntree/representation/chain.py
"""
ExnAny representation that coerces the tree into a __cause__ chain.

Only the first child of every frame is kept, so code that understands a
single linear cause chain (the traceback module, logging, most error
reporters) can still walk it:

```python
child = Exn(OSError("child"))
parent = child.raise_(OSError("parent"))
erased = ExnAny(parent, List)

f"{erased:?}"            # "parent, at ..."  (one node only)
f"{erased.__cause__:?}"  # "child, at ..."
```
"""

from __future__ import annotations

from typing import Any, List as _List, Optional

from exntree.core import Exn, Frame
from .base import Repr, ReprWrapper


class ChainLink(ReprWrapper):
    """One node of a linearized tree. __cause__ is the next link."""

    def __init__(self, frame: Frame, cause: Optional["ChainLink"] = None):
        super().__init__(frame.error)
        self._frame = frame
        self.__cause__ = cause
        self.__suppress_context__ = True

    @classmethod
    def from_exn(cls, exn: Exn[Any]) -> "ChainLink":
        return linearize(exn.frame)

    @property
    def frame(self) -> Frame:
        return self._frame

    def __str__(self) -> str:
        return str(self._frame)

    def __repr__(self) -> str:
        return f"ChainLink({self._frame!r})"

    def __format__(self, spec: str) -> str:
        return format(self._frame, spec)

    def __reduce__(self):
        return (ChainLink, (self._frame, self.__cause__))


def linearize(frame: Frame) -> ChainLink:
    """
    Keep only the first child of every frame and link the result.

    Returns the head link. The link frames are copies holding at most one
    child; the original tree is not modified.
    """
    path: _List[Frame] = []
    node: Optional[Frame] = frame
    while node is not None:
        path.append(node)
        children = node.children
        node = children[0] if children else None

    linear: Optional[Frame] = None
    link: Optional[ChainLink] = None
    for original in reversed(path):
        linear = Frame(original.error, original.location, [linear] if linear is not None else [])
        link = ChainLink(linear, link)
    return link  # type: ignore[return-value]


class List(Repr):
    """
    Linear representation.

    f"{x:?}" renders only the root node; following __cause__ reaches the
    first child of each frame in turn. Later siblings are dropped.
    """

    wrapper = ChainLink


__all__ = [
    "List",
    "ChainLink",
    "linearize",
]
