# ifthen/core/validate/builtin/required.py
"""
Required validator: the attribute must not be blank.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from ..validator import BaseValidator, ClientCheck, ValidatorOptions, is_empty, js_string


class RequiredOptions(ValidatorOptions):
    trim: bool = Field(default=True, description="Whitespace-only strings count as blank")


class RequiredValidator(BaseValidator):
    kind = "required"
    default_message = "{attribute} cannot be blank."
    options_model = RequiredOptions

    def validate_attribute(self, model: Any, attribute: str) -> None:
        value = getattr(model, attribute, None)
        if is_empty(value, trim=self.settings.trim):
            self.add_error(model, attribute)

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        message = self.format_message(model, attribute)
        condition = "jQuery.trim(value)==''" if self.settings.trim else "value==''"
        return ClientCheck(
            condition=condition,
            body=f"messages.push({js_string(message)});",
        )
