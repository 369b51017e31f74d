"""
Test doubles shared across the ifthen test suite.
"""

from dataclasses import dataclass
from typing import List

from ifthen.core.validate import BaseValidator, FormModel


@dataclass
class Contact(FormModel):
    type: int = 1
    phone: str = "8999"
    name: str = "ok"


class MarkerValidator(BaseValidator):
    """Records every attribute it is asked to validate; never adds errors"""
    kind = "marker"
    options_model = None
    calls: List[str] = []

    def validate_attribute(self, model, attribute):
        MarkerValidator.calls.append(attribute)


class ExplodingValidator(BaseValidator):
    """Adds an error, then raises"""
    kind = "explode"
    options_model = None

    def validate_attribute(self, model, attribute):
        model.add_errors({attribute: ["half-written"]})
        raise RuntimeError("validator crashed")


class TextOnlyValidator(BaseValidator):
    """Client support through free text only (no structured check)"""
    kind = "text_only"
    options_model = None

    def validate_attribute(self, model, attribute):
        if getattr(model, attribute) == self.options.get("forbidden"):
            model.add_errors({attribute: ["forbidden value"]})

    def client_validate_attribute(self, model, attribute):
        return self.options.get(
            "script",
            "if (value == 'x') {\n    messages.push('forbidden value');\n}\n",
        )
