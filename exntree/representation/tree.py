# exntree/representation/tree.py
"""ExnAny representation that keeps the Exn as is."""

from __future__ import annotations

from typing import Any, Optional

from exntree.core import Exn, Frame
from .base import Repr, ReprWrapper


class TreeExn(ReprWrapper):
    """Holds the original Exn; every format delegates to it."""

    def __init__(self, exn: Exn[Any]):
        super().__init__(exn)
        self._exn = exn
        self.__suppress_context__ = True

    @classmethod
    def from_exn(cls, exn: Exn[Any]) -> "TreeExn":
        return cls(exn)

    @property
    def frame(self) -> Frame:
        return self._exn.frame

    @property
    def original(self) -> Optional[Exn[Any]]:
        return self._exn

    def __str__(self) -> str:
        return str(self._exn)

    def __repr__(self) -> str:
        return f"TreeExn({self._exn!r})"

    def __format__(self, spec: str) -> str:
        return format(self._exn, spec)


class Tree(Repr):
    """
    Default representation: the whole tree is retained.

    str() is the root message and f"{x:?}" is the full tree.
    """

    wrapper = TreeExn


__all__ = [
    "Tree",
    "TreeExn",
]
