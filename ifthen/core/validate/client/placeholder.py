# ifthen/core/validate/client/placeholder.py
"""
Placeholder substitution for client guard conditions.

Client checks refer to the field being checked through a bare token
(`value`). When a check is reused as a guard for another field, the token has
to point at the guard attribute instead. One strategy is chosen per rule:

- DynamicFieldValue: live lookup of the rendered input
  ('jQuery("#Contact_type").val()')
- StaticSnapshotValue: the attribute's value at render time, as a string
  literal ('"1"')
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from .html import active_id

DEFAULT_TOKEN = "value"
DEFAULT_FIELD_LOOKUP = 'jQuery("#{id}").val()'


class PlaceholderStrategy(ABC):
    """Rewrites the whole-word value token of a condition"""

    def __init__(self, token: str = DEFAULT_TOKEN):
        self.token = token
        self._pattern = re.compile(rf"\b{re.escape(token)}\b")

    @abstractmethod
    def replacement(self, model: Any, attribute: str) -> str:
        ...

    def apply(self, condition: str, model: Any, attribute: str) -> str:
        replacement = self.replacement(model, attribute)
        # callable replacement: the text may contain backslashes
        return self._pattern.sub(lambda _m: replacement, condition)


class DynamicFieldValue(PlaceholderStrategy):
    def __init__(self, token: str = DEFAULT_TOKEN, lookup_template: str = DEFAULT_FIELD_LOOKUP):
        super().__init__(token)
        self.lookup_template = lookup_template

    def replacement(self, model: Any, attribute: str) -> str:
        return self.lookup_template.replace("{id}", active_id(model, attribute))


class StaticSnapshotValue(PlaceholderStrategy):
    def replacement(self, model: Any, attribute: str) -> str:
        value = getattr(model, attribute, None)
        return json.dumps("" if value is None else str(value))


def placeholder_strategy(dynamic: bool, config: Optional[Any] = None) -> PlaceholderStrategy:
    """
    Pick the strategy for a rule.

    Args:
        dynamic: True for live form values, False for render-time snapshots
        config: Optional ClientConfig (token and lookup template)
    """
    token = getattr(config, "value_placeholder", DEFAULT_TOKEN)
    if dynamic:
        template = getattr(config, "field_lookup_template", DEFAULT_FIELD_LOOKUP)
        return DynamicFieldValue(token=token, lookup_template=template)
    return StaticSnapshotValue(token=token)


__all__ = [
    "PlaceholderStrategy",
    "DynamicFieldValue",
    "StaticSnapshotValue",
    "placeholder_strategy",
]
