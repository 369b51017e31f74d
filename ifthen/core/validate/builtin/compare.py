# ifthen/core/validate/builtin/compare.py
"""
Compare validator: compares the attribute with a constant or another attribute.

Operators: == (alias =), !=, >, >=, <, <=. Ordered operators compare
numerically when both sides parse as numbers. Non-strict equality compares
string forms, so 1 and "1" are equal.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import Field, field_validator

from ..client.html import active_id
from ..model import attribute_label
from ..validator import BaseValidator, ClientCheck, ValidatorOptions, is_empty, js_string


MESSAGES: Dict[str, str] = {
    "==": "{attribute} must be repeated exactly.",
    "!=": '{attribute} must not be equal to "{compare_value}".',
    ">": '{attribute} must be greater than "{compare_value}".',
    ">=": '{attribute} must be greater than or equal to "{compare_value}".',
    "<": '{attribute} must be less than "{compare_value}".',
    "<=": '{attribute} must be less than or equal to "{compare_value}".',
}

# operator -> client-side failure operator
NEGATED: Dict[str, str] = {
    "==": "!=",
    "!=": "==",
    ">": "<=",
    ">=": "<",
    "<": ">=",
    "<=": ">",
}


class CompareOptions(ValidatorOptions):
    compare_value: Any = Field(default=None, alias="compareValue")
    compare_attribute: Optional[str] = Field(default=None, alias="compareAttribute")
    operator: Literal["=", "==", "!=", ">", ">=", "<", "<="] = Field(default="==")
    strict: bool = Field(default=False)
    allow_empty: bool = Field(default=False, alias="allowEmpty")

    @field_validator("operator")
    @classmethod
    def _normalize_operator(cls, v: str) -> str:
        return "==" if v == "=" else v


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def compare_values(operator: str, left: Any, right: Any, strict: bool = False) -> bool:
    if operator in ("==", "!="):
        if strict:
            equal = type(left) is type(right) and left == right
        else:
            equal = str("" if left is None else left) == str("" if right is None else right)
        return equal if operator == "==" else not equal

    a, b = _as_number(left), _as_number(right)
    if a is None or b is None:
        a, b = str(left), str(right)
    if operator == ">":
        return a > b
    if operator == ">=":
        return a >= b
    if operator == "<":
        return a < b
    return a <= b


class CompareValidator(BaseValidator):
    kind = "compare"
    options_model = CompareOptions

    def _target(self, model: Any, attribute: str):
        s = self.settings
        if s.compare_attribute:
            return getattr(model, s.compare_attribute, None), attribute_label(model, s.compare_attribute)
        if s.compare_value is not None:
            return s.compare_value, s.compare_value
        # no explicit target: compare with '<attribute>_repeat'
        repeat = f"{attribute}_repeat"
        return getattr(model, repeat, None), attribute_label(model, repeat)

    def validate_attribute(self, model: Any, attribute: str) -> None:
        value = getattr(model, attribute, None)
        if self.settings.allow_empty and is_empty(value):
            return

        compare_to, shown = self._target(model, attribute)
        operator = self.settings.operator
        if not compare_values(operator, value, compare_to, self.settings.strict):
            self.add_error(model, attribute, MESSAGES[operator], compare_value=shown)

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        s = self.settings
        operator = s.operator
        compare_to, shown = self._target(model, attribute)

        if s.compare_attribute:
            right = f'jQuery("#{active_id(model, s.compare_attribute)}").val()'
        elif s.compare_value is not None:
            right = js_string(s.compare_value)
        else:
            right = f'jQuery("#{active_id(model, attribute + "_repeat")}").val()'

        if operator in ("==", "!="):
            failure = NEGATED[operator] + ("=" if s.strict else "")
            condition = f"value{failure}{right}"
        else:
            condition = f"parseFloat(value){NEGATED[operator]}parseFloat({right})"

        if s.allow_empty:
            condition = f"jQuery.trim(value)!='' && {condition}"

        message = self.format_message(model, attribute, MESSAGES[operator], compare_value=shown)
        return ClientCheck(
            condition=condition,
            body=f"messages.push({js_string(message)});",
        )
