# exntree/representation/erased.py
"""
ExnAny: type-erased Exn, suitable as an application-level error.

ExnAny is generic only over the representation, never over the original
error type, so one `except ExnAny` handles trees of every error type:

```python
def main() -> None:
    try:
        parse_config()      # raises Exn[ConfigError]
        open_database()     # raises Exn[OSError]
    except Exn as exn:
        raise ExnAny(exn) from None
```
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from exntree.core import Exn, Frame
from .base import Repr, ReprWrapper, is_repr
from .interop import join_representation, split_representation
from .tree import Tree

R = TypeVar("R", bound=Repr)
E = TypeVar("E", bound=BaseException)


class ExnAny(Exception, Generic[R]):
    """
    Type-erased Exn.

    Args:
        exn: tree of any error type
        representation: which tree shape to keep (Tree by default)
    """

    def __init__(self, exn: Exn[Any], representation: Type[Repr] = Tree):
        if not isinstance(exn, Exn):
            raise TypeError(f"ExnAny wraps an Exn, got {type(exn).__name__}")
        if not is_repr(representation):
            raise TypeError(f"not a representation: {representation!r}")

        wrapped = representation.wrap(exn)
        super().__init__(wrapped)
        self._wrapped = wrapped
        self._representation = representation
        self.__cause__ = wrapped.__cause__
        self.__suppress_context__ = True

    @property
    def representation(self) -> Type[Repr]:
        return self._representation

    @property
    def wrapped(self) -> ReprWrapper:
        """The representation-specific wrapper."""
        return self._wrapped

    @property
    def frame(self) -> Frame:
        """Root frame, as the representation retained it."""
        return self._wrapped.frame

    def downcast(self, error_type: Type[E]) -> Optional[Exn[E]]:
        """
        Recover the typed Exn.

        Returns None if the representation did not keep the Exn (List) or its
        root error is not an error_type.
        """
        original = self._wrapped.original
        if original is not None and isinstance(original.error, error_type):
            return original
        return None

    def __str__(self) -> str:
        return str(self._wrapped)

    def __repr__(self) -> str:
        return f"ExnAny[{self._representation.__name__}]({self._wrapped!r})"

    def __format__(self, spec: str) -> str:
        return format(self._wrapped, spec)

    def __reduce__(self):
        original = self._wrapped.original
        if original is None:
            original = Exn._from_frame(self.frame)
        return (_restore_exn_any, (original, split_representation(self._representation)))


def _restore_exn_any(exn: Exn[Any], parts: Tuple[Type[Repr], ...]) -> ExnAny[Any]:
    return ExnAny(exn, join_representation(parts))


__all__ = [
    "ExnAny",
]
