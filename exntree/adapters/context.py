# exntree/adapters/context.py
"""
Adapters from plain Python failure handling into exception trees.

- into_exn: upgrade an exception into an Exn (an Exn passes through)
- or_raise: on failure inside a block, wrap the failure under a new error
- ok_or_raise: treat None as failure
- ensure: raise when a condition does not hold
"""

from __future__ import annotations

from contextlib import ContextDecorator
from typing import Any, Callable, Optional, Tuple, Type, TypeVar, Union

from exntree.core import Exn, Location, capture_location

V = TypeVar("V")
E = TypeVar("E", bound=BaseException)

ErrorFactory = Callable[[], BaseException]


def into_exn(error: Union[BaseException, Exn[Any]], *, stacklevel: int = 1) -> Exn[Any]:
    """Return error as an Exn, capturing the caller's location if it is not one yet."""
    if isinstance(error, Exn):
        return error
    return Exn(error, stacklevel=stacklevel + 1)


class or_raise(ContextDecorator):
    """
    Wrap any failure in the block under a lazily built error.

    ```python
    with or_raise(lambda: ConfigError(f"cannot read {path}")):
        text = path.read_text()
    ```

    A failing block raises Exn[ConfigError] whose child is the original
    failure (upgraded to an Exn first if needed). Both frames carry the
    location of the or_raise(...) call. Exceptions not matching `catch`
    propagate untouched.
    """

    def __init__(
        self,
        make_error: ErrorFactory,
        catch: Tuple[Type[BaseException], ...] = (Exception,),
        *,
        stacklevel: int = 1,
    ):
        self._make_error = make_error
        self._catch = catch
        self._location: Location = capture_location(stacklevel + 1)

    @property
    def location(self) -> Location:
        return self._location

    def __enter__(self) -> "or_raise":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is None or not isinstance(exc, self._catch):
            return False
        child = exc if isinstance(exc, Exn) else Exn(exc, location=self._location)
        raise child.raise_(self._make_error(), location=self._location) from None


def ok_or_raise(value: Optional[V], make_error: ErrorFactory, *, stacklevel: int = 1) -> V:
    """Return value, or raise Exn(make_error()) if it is None."""
    if value is None:
        raise Exn(make_error(), stacklevel=stacklevel + 1)
    return value


def ensure(
    condition: Any,
    error: Union[BaseException, ErrorFactory],
    *,
    stacklevel: int = 1,
) -> None:
    """
    Raise Exn(error) unless condition is truthy.

    error may be an exception instance or a zero-argument factory; a factory
    is only called on failure.
    """
    if condition:
        return
    if not isinstance(error, BaseException):
        error = error()
    raise Exn(error, stacklevel=stacklevel + 1)


__all__ = [
    "into_exn",
    "or_raise",
    "ok_or_raise",
    "ensure",
]
