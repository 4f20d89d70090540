# exntree/core/render.py
"""
Text rendering of exception trees.

Three forms:
- render_frame: one node, "message, at file:line:column"
- render_tree: the node and all descendants, drawn with tree connectors
- render_structure: field-by-field dump (what repr() returns)

Single-child chains hanging off the root are flattened, so repeated
wrapping reads as a list instead of a staircase:

    E5, at a.py:9:5
    ├─ E4, at a.py:8:5
    ├─ E3, at a.py:7:5
    └─ E2, at a.py:6:5

Flattening is a display concern only; the stored tree is unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple

from exntree.config import RenderConfig, get_config

if TYPE_CHECKING:
    from .frame import Frame


def safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__} object>"


def _style(style: Optional[RenderConfig]) -> RenderConfig:
    return style if style is not None else get_config().render


def render_frame(frame: "Frame", style: Optional[RenderConfig] = None) -> str:
    """Render a single frame, without its children."""
    style = _style(style)
    text = safe_str(frame.error)
    if not style.show_location:
        return text
    return f"{text}, at {frame.location.format(style.path_style)}"


def render_tree(frame: "Frame", style: Optional[RenderConfig] = None) -> str:
    """Render a frame and its descendants."""
    style = _style(style)
    glyphs = style.glyphs
    lines: List[str] = []

    # (frame, on_root_chain, prefix for its children, text before its own line)
    stack: List[Tuple["Frame", bool, str, str]] = [(frame, True, "", "")]
    while stack:
        node, root, prefix, lead = stack.pop()
        lines.append(lead + render_frame(node, style))

        children = node.children
        count = len(children)
        pending = []
        for i, child in enumerate(children):
            if root and count == 1 and len(child.children) == 1:
                pending.append((child, True, prefix, prefix + glyphs["branch"]))
            elif i < count - 1:
                pending.append((child, False, prefix + glyphs["vertical"], prefix + glyphs["branch"]))
            else:
                pending.append((child, False, prefix + glyphs["blank"], prefix + glyphs["last"]))
        stack.extend(reversed(pending))

    return "\n".join(lines)


def render_structure(frame: "Frame") -> str:
    """Field-by-field dump of a frame and its descendants."""
    parts: List[str] = []

    # frames still to open, interleaved with the literal text that follows them
    stack: List[Any] = [frame]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        parts.append(
            f"Frame(error={safe_repr(item.error)}, "
            f"location={item.location!r}, "
            f"children=["
        )
        stack.append("])")
        children = item.children
        for i in reversed(range(len(children))):
            stack.append(children[i])
            if i > 0:
                stack.append(", ")

    return "".join(parts)


def format_node(obj: Any, spec: str, *, frame: "Frame", debug: Callable[[], str]) -> str:
    """
    Shared __format__ for tree nodes and handles.

    "" -> str(obj), "?" -> debug(), "frame"/"tree" -> explicit render,
    "#?" or "#" -> repr(obj).
    """
    if spec == "":
        return str(obj)
    if spec == "?":
        return debug()
    if spec == "frame":
        return render_frame(frame)
    if spec == "tree":
        return render_tree(frame)
    if spec in ("#?", "#"):
        return repr(obj)
    raise TypeError(f"unsupported format string passed to {type(obj).__name__}.__format__: {spec!r}")


__all__ = [
    "render_frame",
    "render_tree",
    "render_structure",
    "format_node",
    "safe_str",
    "safe_repr",
]
