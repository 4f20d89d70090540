# exntree/adapters/collect.py
"""
Non-short-circuiting collection of many fallible calls.

Pairs with Exn.raise_all to report every failure instead of the first one:

```python
files, failures = collect_all(open_input, paths)
if failures:
    raise Exn.raise_all(failures, LoadError("could not open inputs"))
```
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, NamedTuple, Tuple, Type, TypeVar

from exntree.core import Exn, capture_location

T = TypeVar("T")
V = TypeVar("V")


class Collected(NamedTuple):
    values: List[Any]
    failures: List[Exn[Any]]

    @property
    def ok(self) -> bool:
        return not self.failures


def collect_all(
    func: Callable[[T], V],
    items: Iterable[T],
    *,
    catch: Tuple[Type[BaseException], ...] = (Exception,),
    stacklevel: int = 1,
) -> Collected:
    """
    Call func on every item, never stopping at a failure.

    Returns:
        Collected(values, failures). values holds the results of the calls
        that succeeded, failures holds one Exn per failed call; both keep
        input order. Failures that are not already an Exn are upgraded at
        the location of this call.
    """
    location = capture_location(stacklevel + 1)
    values: List[V] = []
    failures: List[Exn[Any]] = []
    for item in items:
        try:
            values.append(func(item))
        except catch as e:
            failures.append(e if isinstance(e, Exn) else Exn(e, location=location))
    return Collected(values, failures)


__all__ = [
    "Collected",
    "collect_all",
]
