# ifthen/core/validate/builtin/match.py
"""
Match validator: the attribute must (or, with `not_match`, must not) match a
regular expression. Patterns are searched, not anchored; use ^ and $.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import Field, field_validator

from ..validator import BaseValidator, ClientCheck, ValidatorOptions, is_empty, js_string


class MatchOptions(ValidatorOptions):
    pattern: str = Field(description="Regular expression (Python and script compatible)")
    not_match: bool = Field(default=False, alias="not")
    allow_empty: bool = Field(default=True, alias="allowEmpty")

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid pattern {v!r}: {e}") from e
        return v


def js_regex(pattern: str) -> str:
    """Script regex literal for a pattern"""
    return "/" + pattern.replace("/", "\\/") + "/"


class MatchValidator(BaseValidator):
    kind = "match"
    options_model = MatchOptions

    def validate_attribute(self, model: Any, attribute: str) -> None:
        value = getattr(model, attribute, None)
        if self.settings.allow_empty and is_empty(value):
            return

        if isinstance(value, (list, dict, set, tuple)):
            self.add_error(model, attribute)
            return

        found = re.search(self.settings.pattern, "" if value is None else str(value)) is not None
        if found == self.settings.not_match:
            self.add_error(model, attribute)

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        negate = "" if self.settings.not_match else "!"
        condition = f"{negate}value.match({js_regex(self.settings.pattern)})"
        if self.settings.allow_empty:
            condition = f"jQuery.trim(value)!='' && {condition}"

        message = self.format_message(model, attribute)
        return ClientCheck(
            condition=condition,
            body=f"messages.push({js_string(message)});",
        )
