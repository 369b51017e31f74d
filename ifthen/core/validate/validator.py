# ifthen/core/validate/validator.py
"""
Validator core: base class every validator kind derives from.

A validator is bound to an ordered list of attributes. Server-side it records
violations on the model via add_error(); client-side it renders a script
fragment of the conventional shape:

    if(<failure condition>) {
        <statements, e.g. messages.push("...")>
    }

where the token `value` stands for the current field value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .model import attribute_label


@dataclass(frozen=True)
class ClientCheck:
    """
    Structured client check: failure condition plus statement body.

    `condition` is a boolean script expression that is true when the
    attribute is invalid; `body` runs in that case.
    """
    condition: str
    body: str

    def render(self) -> str:
        return f"if({self.condition}) {{\n\t{self.body}\n}}\n"


class ValidatorOptions(BaseModel):
    """Options shared by all builtin kinds; subclasses add their own"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    message: Optional[str] = Field(default=None, description="Custom error message")
    skip_on_error: bool = Field(
        default=False,
        alias="skipOnError",
        description="Skip attributes that already carry errors"
    )


def js_string(text: Any) -> str:
    """Encode text as a double-quoted script string literal"""
    return json.dumps("" if text is None else str(text))


def is_empty(value: Any, trim: bool = False) -> bool:
    if value is None or value == [] or value == {}:
        return True
    if isinstance(value, str):
        return (value.strip() if trim else value) == ""
    return False


class BaseValidator(ABC):
    """
    Base class for validator kinds.

    Subclasses set `kind` and implement validate_attribute(); client support
    comes from client_check() (structured) or client_validate_attribute()
    (free text).

    When `options_model` is set, options are validated through it and exposed
    as `settings`; otherwise `settings` is None and only the raw `options`
    mapping is available.
    """

    kind: str = ""
    default_message: str = "{attribute} is invalid."
    options_model: Optional[type[BaseModel]] = ValidatorOptions

    def __init__(
        self,
        attributes: Sequence[str],
        options: Optional[Mapping[str, Any]] = None,
        registry: Any = None,
    ):
        self.registry = registry
        self.attributes: Tuple[str, ...] = tuple(attributes)
        self.options: Dict[str, Any] = dict(options or {})
        self.settings: Any = None
        if self.options_model is not None:
            self.settings = self.options_model.model_validate(self.options)
            self.message: Optional[str] = getattr(self.settings, "message", None)
            self.skip_on_error = bool(getattr(self.settings, "skip_on_error", False))
        else:
            self.message = self.options.get("message")
            self.skip_on_error = bool(self.options.get("skip_on_error", False))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(attributes={list(self.attributes)!r})"

    # -------- server side --------

    def validate(self, model: Any, attributes: Optional[Iterable[str]] = None) -> None:
        """
        Validate bound attributes (optionally restricted to `attributes`).

        Records violations on the model; never raises for invalid data.
        """
        if attributes is None:
            targets = self.attributes
        else:
            wanted = set(attributes)
            targets = tuple(a for a in self.attributes if a in wanted)

        for attribute in targets:
            if self.skip_on_error and model.has_errors(attribute):
                continue
            self.validate_attribute(model, attribute)

    @abstractmethod
    def validate_attribute(self, model: Any, attribute: str) -> None:
        ...

    def add_error(
        self,
        model: Any,
        attribute: str,
        template: Optional[str] = None,
        **params: Any,
    ) -> None:
        message = self.format_message(model, attribute, template, **params)
        model.add_errors({attribute: [message]})

    def format_message(
        self,
        model: Any,
        attribute: str,
        template: Optional[str] = None,
        **params: Any,
    ) -> str:
        """User `message` option wins over the kind's own template"""
        text = self.message or template or self.default_message
        params.setdefault("attribute", attribute_label(model, attribute))
        # plain token replacement: user messages may contain literal braces
        for key, value in params.items():
            text = text.replace("{" + key + "}", str(value))
        return text

    # -------- client side --------

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        """Structured client check, or None when the kind has no client support"""
        return None

    def client_validate_attribute(self, model: Any, attribute: str) -> str:
        """Client check script text for one attribute ('' when unsupported)"""
        check = self.client_check(model, attribute)
        if check is None:
            return ""
        return check.render()


__all__ = [
    "BaseValidator",
    "ValidatorOptions",
    "ClientCheck",
    "js_string",
    "is_empty",
]
