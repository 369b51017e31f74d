# ifthen/core/validate/__init__.py
"""
Validation system.

Conditional (if-then) rules composed from other validators:
- Rule compiler with a bounded compiled-rule cache
- Conditional evaluator with isolated guard error state
- Client script synthesis for the same rules
"""

from .contracts import RuleSpec, ConditionalRule, split_attributes
from .model import ErrorHost, FormModel
from .scope import ErrorScope, union_errors
from .validator import BaseValidator, ClientCheck, ValidatorOptions
from .registry import (
    ValidatorRegistry,
    get_default_registry,
    set_default_registry,
    reset_default_registry,
)
from .compiler import RuleCompiler, CompiledRuleCache, compute_fingerprint
from .conditional import ConditionalValidator
from .client import (
    ClientScriptSynthesizer,
    PlaceholderStrategy,
    DynamicFieldValue,
    StaticSnapshotValue,
    placeholder_strategy,
    extract_condition,
    active_id,
)
from .builtin import (
    RequiredValidator,
    CompareValidator,
    MatchValidator,
    LengthValidator,
    register_builtin_validators,
)
from .loader import (
    load_conditional_rule,
    load_rules,
    parse_conditional_rule,
    parse_document,
    parse_rules,
    serialize_conditional_rule,
)

__all__ = [
    # Contracts
    "RuleSpec",
    "ConditionalRule",
    "split_attributes",

    # Host model
    "ErrorHost",
    "FormModel",
    "ErrorScope",
    "union_errors",

    # Validators
    "BaseValidator",
    "ClientCheck",
    "ValidatorOptions",
    "ConditionalValidator",
    "RequiredValidator",
    "CompareValidator",
    "MatchValidator",
    "LengthValidator",

    # Registry & compiler
    "ValidatorRegistry",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
    "register_builtin_validators",
    "RuleCompiler",
    "CompiledRuleCache",
    "compute_fingerprint",

    # Client
    "ClientScriptSynthesizer",
    "PlaceholderStrategy",
    "DynamicFieldValue",
    "StaticSnapshotValue",
    "placeholder_strategy",
    "extract_condition",
    "active_id",

    # Loader
    "load_conditional_rule",
    "load_rules",
    "parse_conditional_rule",
    "parse_document",
    "parse_rules",
    "serialize_conditional_rule",
]
