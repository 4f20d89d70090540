# exntree/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Nothing is read on import; loading is an explicit call
- The active configuration is process-global and lock-guarded
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
import logging
import os
import threading

import yaml

from exntree.errors import ExnTreeError
from .sections import ImportConfig, RenderConfig, SectionConfig
from .validator import ConfigIssue, validate_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EXNTREE_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".exntree" / "config.yml"

PathLike = Union[str, "os.PathLike[str]"]
S = TypeVar("S", bound=SectionConfig)


class ExnTreeConfig:
    """
    Unified exntree configuration.

    All fields have code defaults - YAML is optional.
    """

    SECTIONS = ("render", "importer")

    def __init__(
        self,
        render: Optional[RenderConfig] = None,
        importer: Optional[ImportConfig] = None,
    ):
        self.render = render or RenderConfig.default()
        self.importer = importer or ImportConfig.default()

    @classmethod
    def default(cls) -> "ExnTreeConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ExnTreeConfig":
        """
        Build configuration from a parsed mapping.

        Unknown sections and keys are logged and ignored.

        Raises:
            ExnTreeError: CONFIG_INVALID if the result fails validation
        """
        config = cls.default()
        if not data:
            return config

        for key in data:
            if key not in cls.SECTIONS:
                logger.warning("Ignoring unknown configuration section '%s'", key)

        if "render" in data:
            config.render = _merge_section(config.render, data["render"], RenderConfig, "render")
        if "importer" in data:
            config.importer = _merge_section(config.importer, data["importer"], ImportConfig, "importer")

        _raise_on_errors(config.validate())
        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[PathLike] = None) -> "ExnTreeConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $EXNTREE_CONFIG
                2. ~/.exntree/config.yml

        Returns:
            ExnTreeConfig instance (always has code defaults as fallback)

        Raises:
            Exn[ExnTreeError]: the path was given explicitly but is missing,
                the YAML is malformed, or the values are invalid
        """
        from exntree.core.exn import Exn

        data = _load_yaml(config_path)
        if data is None:
            logger.debug("No configuration file found, using defaults")
            return cls.default()
        try:
            return cls.from_dict(data)
        except ExnTreeError as e:
            raise Exn(e) from None

    def validate(self) -> List[ConfigIssue]:
        """Validate configuration for illegal/misleading combinations."""
        return validate_config(self.render, self.importer)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "render": self.render.to_dict(),
            "importer": self.importer.to_dict(),
        }

    def __repr__(self) -> str:
        return f"ExnTreeConfig(render={self.render!r}, importer={self.importer!r})"


def _merge_section(default_instance: S, section_data: Any, config_class: Type[S], name: str) -> S:
    """Merge one YAML section into its default instance"""
    if section_data is None:
        return default_instance
    if not isinstance(section_data, dict):
        raise ExnTreeError.config_invalid(
            f"section '{name}' must be a mapping, got {type(section_data).__name__}",
            details={"section": name},
        )

    known = config_class.field_names()
    for key in section_data:
        if key not in known:
            logger.warning("Ignoring unknown configuration key '%s.%s'", name, key)

    merged = {**default_instance.to_dict(), **{k: v for k, v in section_data.items() if k in known}}
    return config_class(**merged)


def _raise_on_errors(issues: List[ConfigIssue]) -> None:
    for issue in issues:
        if issue.level == "warn":
            logger.warning("Configuration warning: %s", issue)

    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        raise ExnTreeError.config_invalid(
            f"{len(errors)} invalid configuration value(s): " + "; ".join(str(e) for e in errors),
            details={"issues": [e.path for e in errors]},
        )


def _candidate_paths() -> List[Path]:
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        paths.append(Path(env_path))
    paths.append(DEFAULT_CONFIG_PATH)
    return paths


def _load_yaml(config_path: Optional[PathLike] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if no implicit location exists (not an error)"""
    # exntree.core imports this package, so Exn is imported lazily.
    from exntree.core.exn import Exn

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise Exn(ExnTreeError.config_not_found(path))
    else:
        path = next((p for p in _candidate_paths() if p.exists()), None)
        if path is None:
            return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise Exn(e).raise_(ExnTreeError.config_parse_failed(path)) from None
    except OSError as e:
        raise Exn(e).raise_(ExnTreeError.config_parse_failed(path, reason="unreadable")) from None

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise Exn(ExnTreeError.config_parse_failed(path, reason="top level must be a mapping"))

    logger.info("Loaded exntree configuration from %s", path)
    return data


def load_config(config_path: Optional[PathLike] = None) -> ExnTreeConfig:
    """
    Load exntree configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        ExnTreeConfig instance (always has code defaults)

    Note:
        - If no implicit YAML is found, returns code defaults
        - An explicit path that does not exist is an error
        - The loaded config is NOT activated; pass it to set_config()
    """
    return ExnTreeConfig.from_yaml(config_path)


# ---- active configuration ----

_active_config: Optional[ExnTreeConfig] = None
_active_lock = threading.Lock()


def get_config() -> ExnTreeConfig:
    """Return the active configuration (code defaults until set_config is called)."""
    global _active_config
    with _active_lock:
        if _active_config is None:
            _active_config = ExnTreeConfig.default()
        return _active_config


def set_config(config: ExnTreeConfig) -> ExnTreeConfig:
    """
    Activate a configuration.

    Returns:
        The previously active configuration

    Raises:
        ExnTreeError: CONFIG_INVALID if the configuration has errors
    """
    global _active_config
    _raise_on_errors(config.validate())
    with _active_lock:
        previous = _active_config or ExnTreeConfig.default()
        _active_config = config
    logger.debug("Activated configuration %r", config)
    return previous


def reset_config() -> None:
    """Restore code defaults."""
    global _active_config
    with _active_lock:
        _active_config = None


__all__ = [
    "ExnTreeConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "CONFIG_ENV_VAR",
]
