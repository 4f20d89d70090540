# exntree/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes should not leak into reports.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class ExnTreeError(Exception):
    """
    The one public exception type for exntree's own operational failures.

    Misuse of the tree API (wrong argument types) raises TypeError instead;
    this type covers failures of the ambient machinery, such as loading
    configuration.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_config(self) -> bool:
        return self.error_code in codes.CONFIG_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def config_not_found(cls, path: Any) -> "ExnTreeError":
        return cls(
            message=f"configuration file not found: {path}",
            error_code=codes.CONFIG_NOT_FOUND,
            details={"path": str(path)},
        )

    @classmethod
    def config_parse_failed(
        cls,
        path: Any,
        *,
        reason: str = "invalid YAML",
    ) -> "ExnTreeError":
        return cls(
            message=f"failed to parse configuration {path}: {reason}",
            error_code=codes.CONFIG_PARSE_FAILED,
            details={"path": str(path), "reason": reason},
        )

    @classmethod
    def config_invalid(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ExnTreeError":
        return cls(
            message=message,
            error_code=codes.CONFIG_INVALID,
            details=details or {},
        )
