# exntree/representation/__init__.py
"""
Representations for ExnAny via type erasure.

- Tree (default): the whole tree
- List: first-child chain exposed through __cause__
- Interop[R]: str() gives R's debug form, for traceback/logging output
"""

from .base import Repr, ReprWrapper
from .tree import Tree, TreeExn
from .chain import ChainLink, List, linearize
from .interop import Interop, InteropExn
from .erased import ExnAny

__all__ = [
    "Repr",
    "ReprWrapper",
    "Tree",
    "TreeExn",
    "List",
    "ChainLink",
    "linearize",
    "Interop",
    "InteropExn",
    "ExnAny",
]
