"""
Client-side script generation for conditional rules.
"""

from .html import active_id, active_name, id_by_name
from .placeholder import (
    PlaceholderStrategy,
    DynamicFieldValue,
    StaticSnapshotValue,
    placeholder_strategy,
)
from .synthesizer import ClientScriptSynthesizer, extract_condition

__all__ = [
    "active_id",
    "active_name",
    "id_by_name",
    "PlaceholderStrategy",
    "DynamicFieldValue",
    "StaticSnapshotValue",
    "placeholder_strategy",
    "ClientScriptSynthesizer",
    "extract_condition",
]
