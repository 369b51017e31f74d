"""
Stable rule contracts.

These contracts define the declarative input of the compiler and the
conditional validator. They are serializable and versioned (v1, ...), so
rule files written today keep loading.
"""

from .v1 import (
    RuleSpecV1 as RuleSpec,
    ConditionalRuleV1 as ConditionalRule,
    split_attributes,
)

__all__ = [
    "RuleSpec",
    "ConditionalRule",
    "split_attributes",
]
