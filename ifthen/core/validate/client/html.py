# ifthen/core/validate/client/html.py
"""
Form field naming helpers.

Rendered inputs are named `Form[attribute]` and get an element id derived
from that name (`Form_attribute`). Tabular inputs use an attribute prefix
such as `[0]address`, giving `Form[0][address]` / `Form_0_address`.
"""

from __future__ import annotations

import re
from typing import Any

_ID_REPLACEMENTS = (
    ("[]", ""),
    ("][", "_"),
    ("[", "_"),
    ("]", ""),
    (" ", "_"),
)

_PREFIX_RE = re.compile(r"^(\[\w*\])?(\w+)(.*)$")


def form_name(model: Any) -> str:
    getter = getattr(model, "form_name", None)
    if callable(getter):
        return getter()
    return type(model).__name__


def active_name(model: Any, attribute: str) -> str:
    """Rendered input name for an attribute ('Contact[phone]')"""
    match = _PREFIX_RE.match(attribute)
    if match is None:
        return f"{form_name(model)}[{attribute}]"
    prefix, name, suffix = match.groups()
    return f"{form_name(model)}{prefix or ''}[{name}]{suffix}"


def id_by_name(name: str) -> str:
    for old, new in _ID_REPLACEMENTS:
        name = name.replace(old, new)
    return name


def active_id(model: Any, attribute: str) -> str:
    """Rendered element id for an attribute ('Contact_phone')"""
    return id_by_name(active_name(model, attribute))


__all__ = ["active_id", "active_name", "id_by_name", "form_name"]
