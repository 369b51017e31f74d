# ifthen/core/validate/builtin/length.py
"""
Length validator: bounds on the string length of the attribute.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, model_validator

from ..validator import BaseValidator, ClientCheck, ValidatorOptions, is_empty, js_string


class LengthOptions(ValidatorOptions):
    min: Optional[int] = Field(default=None, ge=0)
    max: Optional[int] = Field(default=None, ge=0)
    exact: Optional[int] = Field(default=None, ge=0, alias="is")
    too_short: Optional[str] = Field(default=None, alias="tooShort")
    too_long: Optional[str] = Field(default=None, alias="tooLong")
    allow_empty: bool = Field(default=True, alias="allowEmpty")

    @model_validator(mode="after")
    def _has_bound(self) -> "LengthOptions":
        if self.min is None and self.max is None and self.exact is None:
            raise ValueError("length validator needs at least one of min, max, is")
        return self


class LengthValidator(BaseValidator):
    kind = "length"
    default_message = "{attribute} is of the wrong length (should be {length} characters)."
    options_model = LengthOptions

    TOO_SHORT = "{attribute} is too short (minimum is {min} characters)."
    TOO_LONG = "{attribute} is too long (maximum is {max} characters)."

    def _short_message(self, model: Any, attribute: str) -> str:
        return self.format_message(
            model, attribute, self.settings.too_short or self.TOO_SHORT, min=self.settings.min
        )

    def _long_message(self, model: Any, attribute: str) -> str:
        return self.format_message(
            model, attribute, self.settings.too_long or self.TOO_LONG, max=self.settings.max
        )

    def validate_attribute(self, model: Any, attribute: str) -> None:
        s = self.settings
        value = getattr(model, attribute, None)
        if s.allow_empty and is_empty(value):
            return

        length = len("" if value is None else str(value))
        if s.min is not None and length < s.min:
            model.add_errors({attribute: [self._short_message(model, attribute)]})
        if s.max is not None and length > s.max:
            model.add_errors({attribute: [self._long_message(model, attribute)]})
        if s.exact is not None and length != s.exact:
            self.add_error(model, attribute, length=s.exact)

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        s = self.settings
        conditions: List[str] = []
        branches: List[str] = []

        if s.min is not None:
            conditions.append(f"value.length<{s.min}")
            branches.append(
                f"if(value.length<{s.min}) {{ messages.push({js_string(self._short_message(model, attribute))}); }}"
            )
        if s.max is not None:
            conditions.append(f"value.length>{s.max}")
            branches.append(
                f"if(value.length>{s.max}) {{ messages.push({js_string(self._long_message(model, attribute))}); }}"
            )
        if s.exact is not None:
            message = self.format_message(model, attribute, length=s.exact)
            conditions.append(f"value.length!={s.exact}")
            branches.append(
                f"if(value.length!={s.exact}) {{ messages.push({js_string(message)}); }}"
            )

        condition = " || ".join(conditions)
        if s.allow_empty:
            condition = f"jQuery.trim(value)!='' && ({condition})"
        return ClientCheck(condition=condition, body="\n\t".join(branches))
