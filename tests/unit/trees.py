# tests/unit/trees.py
"""
Shared tree builders for the unit tests.
"""

from __future__ import annotations

from exntree import Exn


class Error(Exception):
    """Test error: str() is the message."""


def build_tree() -> Exn[Error]:
    """
    E6
    ├─ E5
    │  ├─ E3 ─ E1
    │  ├─ E10 ─ E9
    │  └─ E12 ─ E11
    ├─ E4 ─ E2
    └─ E8 ─ E7
    """
    e3 = Exn(Error("E1")).raise_(Error("E3"))
    e10 = Exn(Error("E9")).raise_(Error("E10"))
    e12 = Exn(Error("E11")).raise_(Error("E12"))
    e5 = Exn.raise_all([e3, e10, e12], Error("E5"))

    e4 = Exn(Error("E2")).raise_(Error("E4"))
    e8 = Exn(Error("E7")).raise_(Error("E8"))

    return Exn.raise_all([e5, e4, e8], Error("E6"))


def build_list() -> Exn[Error]:
    """E5 -> E4 -> E3 -> E2 -> E1, four consecutive wraps."""
    exn = Exn(Error("E1"))
    for name in ("E2", "E3", "E4", "E5"):
        exn = exn.raise_(Error(name))
    return exn


TREE_RENDERED = "\n".join([
    "E6",
    "├─ E5",
    "│  ├─ E3",
    "│  │  └─ E1",
    "│  ├─ E10",
    "│  │  └─ E9",
    "│  └─ E12",
    "│     └─ E11",
    "├─ E4",
    "│  └─ E2",
    "└─ E8",
    "   └─ E7",
])

LIST_RENDERED = "\n".join([
    "E5",
    "├─ E4",
    "├─ E3",
    "├─ E2",
    "└─ E1",
])
