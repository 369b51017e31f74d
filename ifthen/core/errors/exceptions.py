# ifthen/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded so callers can switch on them safely.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class IfThenError(Exception):
    """
    Base exception for every error raised by ifthen itself.

    Validation failures are never raised; they are recorded on the model.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "IFTHEN_ERROR"
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ConfigurationError(IfThenError):
    """
    A rule specification is malformed (missing attributes or validator kind,
    unknown kind, unreadable rule file). Programming error, never recovered.
    """
    error_code: str = codes.INVALID_RULE
    error_type: str = "CONFIGURATION_ERROR"

    @classmethod
    def invalid_rule(cls, owner: str, rule: Any) -> "ConfigurationError":
        return cls(
            message=(
                f"{owner} has an invalid validation rule. The rule must specify "
                f"attributes to be validated and the validator name."
            ),
            error_code=codes.INVALID_RULE,
            details={"owner": owner, "rule": repr(rule)},
        )

    @classmethod
    def unknown_validator(cls, owner: str, kind: str) -> "ConfigurationError":
        return cls(
            message=f"{owner} refers to an unknown validator kind '{kind}'.",
            error_code=codes.UNKNOWN_VALIDATOR,
            details={"owner": owner, "kind": kind},
        )


@dataclass
class SynthesisError(IfThenError):
    """
    A sub-validator's client check could not be turned into a guard condition.
    Only the current synthesis call fails; server-side evaluation is unaffected.
    """
    error_code: str = codes.CLIENT_CHECK_UNPARSEABLE
    error_type: str = "SYNTHESIS_ERROR"
