# ifthen/core/validate/contracts/v1/rule.py
"""
RuleSpecV1: Declarative description of one sub-validator.

Raw rules come in two shapes:
- Sequence: [attributes, kind, {option: value}, ...]
- Mapping:  {"attributes": ..., "kind": ..., option: value, ...}

Element 0 selects attributes (comma-separated string or list of strings),
element 1 names the validator kind. Everything else is forwarded verbatim
to the validator as options.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ....errors import ConfigurationError


def split_attributes(selector: Any) -> Tuple[str, ...]:
    """Normalize an attribute selector into an ordered tuple of names"""
    if isinstance(selector, str):
        parts = selector.split(",")
    elif isinstance(selector, Sequence):
        parts = [str(p) for p in selector]
    else:
        return ()
    return tuple(p.strip() for p in parts if p and p.strip())


class RuleSpecV1(BaseModel):
    """
    Normalized rule specification.

    Immutable once built; its dump is part of the compiled-rule fingerprint.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    attributes: Tuple[str, ...] = Field(description="Bound attribute names, in order")
    kind: str = Field(description="Validator kind identifier (e.g. 'match')")
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Validator-specific options, forwarded verbatim"
    )

    @classmethod
    def from_raw(cls, raw: Any, owner: str = "Model") -> "RuleSpecV1":
        """
        Build a RuleSpecV1 from a raw rule.

        Args:
            raw: Sequence or mapping rule as written by the user
            owner: Type name of the model the rule belongs to (for errors)

        Raises:
            ConfigurationError: If attributes or kind are missing
        """
        if isinstance(raw, RuleSpecV1):
            return raw

        if isinstance(raw, Mapping):
            data = dict(raw)
            selector = data.pop("attributes", None)
            kind = data.pop("kind", None)
            if kind is None:
                kind = data.pop("validator", None)
            options = data
        elif isinstance(raw, Sequence) and not isinstance(raw, str):
            if len(raw) < 2:
                raise ConfigurationError.invalid_rule(owner, raw)
            selector, kind = raw[0], raw[1]
            options = {}
            for extra in raw[2:]:
                if not isinstance(extra, Mapping):
                    raise ConfigurationError.invalid_rule(owner, raw)
                options.update(extra)
        else:
            raise ConfigurationError.invalid_rule(owner, raw)

        attributes = split_attributes(selector)
        if not attributes or not isinstance(kind, str) or not kind.strip():
            raise ConfigurationError.invalid_rule(owner, raw)

        return cls(attributes=attributes, kind=kind.strip(), options=options)

    def to_raw(self) -> list:
        """Inverse of from_raw (sequence form)"""
        return [list(self.attributes), self.kind, dict(self.options)]
