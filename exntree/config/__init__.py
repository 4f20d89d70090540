# exntree/config/__init__.py
"""
exntree Configuration

Design principles:
1. Code has every default; YAML only overrides
2. Each section has its own frozen dataclass
3. Nothing is read on import; load_config() and set_config() are explicit
"""

from .sections import CHARSETS, PATH_STYLES, ImportConfig, RenderConfig, SectionConfig
from .validator import ConfigIssue, validate_config
from .loader import (
    CONFIG_ENV_VAR,
    ExnTreeConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    # Sections
    "SectionConfig",
    "RenderConfig",
    "ImportConfig",
    "CHARSETS",
    "PATH_STYLES",

    # Unified config
    "ExnTreeConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "CONFIG_ENV_VAR",

    # Validator
    "validate_config",
    "ConfigIssue",
]
