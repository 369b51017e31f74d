"""
V1 contracts for ifthen.
"""

from .rule import RuleSpecV1, split_attributes
from .conditional import ConditionalRuleV1

__all__ = [
    "RuleSpecV1",
    "ConditionalRuleV1",
    "split_attributes",
]
