# exntree/representation/interop.py
"""
ExnAny representation for interoperation with Python's exception reporting.

The traceback module and logging print only str() of each exception in a
__cause__ chain. InteropExn therefore returns the inner representation's
*debug* form from __str__, so the whole tree shows up wherever the erased
error is reported:

```python
try:
    load_inputs()
except Exn as exn:
    raise RuntimeError("startup failed") from ExnAny(exn, Interop)
```

prints (locations elided):

    exntree.representation.erased.ExnAny: could not load inputs, at ...
    ├─ failed to open a.yml, at ...
    ...

    The above exception was the direct cause of the following exception:
    ...
    RuntimeError: startup failed

Interop takes an optional inner representation: Interop[List] reports a
linear chain instead of the full tree.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Optional, Tuple, Type

from exntree.core import Exn, Frame
from .base import Repr, ReprWrapper, is_repr
from .tree import Tree


class InteropExn(ReprWrapper):
    """Wraps another representation's wrapper; str() is its debug form."""

    def __init__(self, inner: ReprWrapper):
        super().__init__(inner)
        self._inner = inner
        self.__cause__ = inner.__cause__
        self.__suppress_context__ = True

    @property
    def inner(self) -> ReprWrapper:
        return self._inner

    @property
    def frame(self) -> Frame:
        return self._inner.frame

    @property
    def original(self) -> Optional[Exn[Any]]:
        return self._inner.original

    def __str__(self) -> str:
        # debug form, not the display form
        return format(self._inner, "?")

    def __repr__(self) -> str:
        return f"InteropExn({self._inner!r})"

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        return format(self._inner, spec)


class Interop(Repr):
    """
    Representation for traceback/logging interoperation.

    Interop alone wraps Tree (Interop[Tree] is Interop); Interop[R] wraps any
    other representation.
    """

    wrapper = InteropExn
    inner: ClassVar[Type[Repr]] = Tree

    @classmethod
    def wrap(cls, exn: Exn[Any]) -> InteropExn:
        return InteropExn(cls.inner.wrap(exn))

    def __class_getitem__(cls, inner: Type[Repr]) -> Type["Interop"]:
        return _parameterize(inner)


@lru_cache(maxsize=None)
def _parameterize(inner: Type[Repr]) -> Type[Interop]:
    if not is_repr(inner):
        raise TypeError(f"Interop[...] expects a representation, got {inner!r}")
    if inner is Tree:
        return Interop
    return type(
        f"Interop[{inner.__name__}]",
        (Interop,),
        {"inner": inner, "__module__": __name__, "_parameterized": True},
    )


def split_representation(representation: Type[Repr]) -> Tuple[Type[Repr], ...]:
    """
    Decompose a representation into importable classes.

    Interop[List] -> (Interop, List); plain representations -> (R,).
    Parameterized classes are built at runtime and cannot be pickled by
    name, so pickling goes through this form.
    """
    parts = []
    while representation.__dict__.get("_parameterized", False):
        parts.append(Interop)
        representation = representation.inner
    parts.append(representation)
    return tuple(parts)


def join_representation(parts: Tuple[Type[Repr], ...]) -> Type[Repr]:
    """Inverse of split_representation."""
    representation = parts[-1]
    for _ in parts[:-1]:
        representation = Interop[representation]
    return representation


__all__ = [
    "Interop",
    "InteropExn",
    "split_representation",
    "join_representation",
]
