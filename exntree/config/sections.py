# exntree/config/sections.py
"""
Section Configurations

One frozen dataclass per configurable concern:
- RenderConfig: how exception trees are drawn
- ImportConfig: how foreign cause chains are absorbed
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Final

from exntree.errors import ExnTreeError


CHARSETS: Final[Dict[str, Dict[str, str]]] = {
    "unicode": {
        "branch": "├─ ",
        "last": "└─ ",
        "vertical": "│  ",
        "blank": "   ",
    },
    "ascii": {
        "branch": "|- ",
        "last": "`- ",
        "vertical": "|  ",
        "blank": "   ",
    },
}

PATH_STYLES: Final[tuple[str, ...]] = ("absolute", "relative", "name")


@dataclass(frozen=True)
class SectionConfig:
    """Base class for all section configurations."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


@dataclass(frozen=True)
class RenderConfig(SectionConfig):
    """
    Render configuration.

    charset: "unicode" box-drawing connectors or plain "ascii"
    path_style: how a location's file is shown ("absolute", "relative", "name")
    show_location: append ", at file:line:column" to every node
    """

    charset: str = "unicode"
    path_style: str = "relative"
    show_location: bool = True

    @classmethod
    def default(cls) -> "RenderConfig":
        return cls()

    @classmethod
    def plain(cls) -> "RenderConfig":
        """Messages only, ASCII connectors. Stable across machines."""
        return cls(charset="ascii", show_location=False)

    @property
    def glyphs(self) -> Dict[str, str]:
        """
        Connector strings for this charset.

        Raises:
            ExnTreeError: CONFIG_INVALID for an unknown charset
        """
        if isinstance(self.charset, str) and self.charset in CHARSETS:
            return CHARSETS[self.charset]
        raise ExnTreeError.config_invalid(
            f"Invalid charset: {self.charset!r}",
            details={"issues": ["render.charset"]},
        )


@dataclass(frozen=True)
class ImportConfig(SectionConfig):
    """
    Source-chain importer configuration.

    follow_context: also follow implicit chaining (__context__) when no
        explicit __cause__ is set, the same way the traceback module does
    """

    follow_context: bool = True

    @classmethod
    def default(cls) -> "ImportConfig":
        return cls()
