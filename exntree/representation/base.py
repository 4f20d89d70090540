# exntree/representation/base.py
"""
Representation framework.

A representation is a class-level selector: it names the wrapper class used
to hold an erased Exn (`wrapper`) and knows how to build one (`wrap`).
Representations are never instantiated.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Type

from exntree.core import Exn, Frame


class ReprWrapper(Exception):
    """Base for the exception objects a representation wraps an Exn in."""

    @classmethod
    def from_exn(cls, exn: Exn[Any]) -> "ReprWrapper":
        raise NotImplementedError

    @property
    def frame(self) -> Frame:
        """Root frame as this representation retains it."""
        raise NotImplementedError

    @property
    def original(self) -> Optional[Exn[Any]]:
        """The wrapped Exn, when this representation keeps it."""
        return None


class Repr:
    """
    ExnAny representation marker.

    Subclasses set `wrapper`; `wrap` converts any Exn into that wrapper.
    """

    wrapper: ClassVar[Type[ReprWrapper]]

    def __new__(cls, *args: Any, **kwargs: Any):
        raise TypeError(f"{cls.__name__} is a representation selector and cannot be instantiated")

    @classmethod
    def wrap(cls, exn: Exn[Any]) -> ReprWrapper:
        return cls.wrapper.from_exn(exn)


def is_repr(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, Repr) and hasattr(obj, "wrapper")


__all__ = [
    "Repr",
    "ReprWrapper",
    "is_repr",
]
