# exntree/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Literal

from .sections import CHARSETS, PATH_STYLES, ImportConfig, RenderConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and error details.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "render.charset"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"{self.level}: [{self.path}] {self.message}{hint_str}"


def _is_one_of(value: Any, choices: Iterable[str]) -> bool:
    """value is a string and one of choices; YAML may hand us lists or mappings."""
    return isinstance(value, str) and value in choices


def validate_config(render: RenderConfig, importer: ImportConfig) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues: List[ConfigIssue] = []

    # Value domain validation (errors)
    if not _is_one_of(render.charset, CHARSETS):
        issues.append(ConfigIssue(
            level="error",
            path="render.charset",
            message=f"Invalid charset: {render.charset!r}",
            hint=f"Set render.charset to one of: {', '.join(sorted(CHARSETS))}",
        ))

    if not _is_one_of(render.path_style, PATH_STYLES):
        issues.append(ConfigIssue(
            level="error",
            path="render.path_style",
            message=f"Invalid path_style: {render.path_style!r}",
            hint=f"Set render.path_style to one of: {', '.join(PATH_STYLES)}",
        ))

    if not isinstance(render.show_location, bool):
        issues.append(ConfigIssue(
            level="error",
            path="render.show_location",
            message=f"show_location must be a boolean, got {type(render.show_location).__name__}",
        ))

    if not isinstance(importer.follow_context, bool):
        issues.append(ConfigIssue(
            level="error",
            path="importer.follow_context",
            message=f"follow_context must be a boolean, got {type(importer.follow_context).__name__}",
        ))

    # Settings without effect (warnings)
    if render.show_location is False and render.path_style != "relative":
        issues.append(ConfigIssue(
            level="warn",
            path="render.path_style",
            message=f"path_style='{render.path_style}' has no effect when show_location=false",
            hint="Set render.show_location=true to print locations",
        ))

    return issues
