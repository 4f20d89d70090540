# exntree/adapters/log_format.py
"""
logging integration.

ExnFormatter renders Exn/ExnAny trees in place of the usual exception text:

```python
handler = logging.StreamHandler()
handler.setFormatter(ExnFormatter("%(levelname)s %(message)s"))
logging.getLogger().addHandler(handler)

try:
    load_inputs()
except Exn:
    logger.exception("startup failed")
```

log_exn() logs a tree directly, without an active exception.
"""

from __future__ import annotations

from typing import Any, Optional, Union
import logging

from exntree.config import RenderConfig
from exntree.core import Exn, Frame
from exntree.representation import ExnAny

TreeLike = Union[Exn[Any], ExnAny[Any]]


def _frame_of(value: Any) -> Optional[Frame]:
    if isinstance(value, Exn):
        return value.frame
    if isinstance(value, ExnAny):
        return value.frame
    return None


class ExnFormatter(logging.Formatter):
    """
    Formatter that prints exception trees.

    Args:
        include_traceback: print the standard traceback before the tree
        style: render style; the active configuration's when None
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        *,
        include_traceback: bool = False,
        style: Optional[RenderConfig] = None,
    ):
        super().__init__(fmt, datefmt)
        self.include_traceback = include_traceback
        self.render_style = style

    def formatException(self, ei) -> str:
        frame = _frame_of(ei[1]) if ei else None
        if frame is None:
            return super().formatException(ei)

        tree = frame.render_tree(self.render_style)
        if self.include_traceback:
            return f"{super().formatException(ei)}\n{tree}"
        return tree


def log_exn(
    logger: logging.Logger,
    exn: TreeLike,
    msg: Optional[str] = None,
    *,
    level: int = logging.ERROR,
    style: Optional[RenderConfig] = None,
) -> None:
    """
    Log the full tree of exn.

    The structured tree is attached as `record.exn` (Frame.to_dict()).
    """
    frame = _frame_of(exn)
    if frame is None:
        raise TypeError(f"log_exn expects an Exn or ExnAny, got {type(exn).__name__}")

    tree = frame.render_tree(style)
    text = f"{msg}\n{tree}" if msg else tree
    logger.log(level, "%s", text, extra={"exn": frame.to_dict()})


__all__ = [
    "ExnFormatter",
    "log_exn",
]
