# ifthen/__init__.py
"""
ifthen - conditional (if-then) validation rules.

    from ifthen import ConditionalValidator, FormModel

    rule = ConditionalValidator(["phone"], {
        "if": [["type", "compare", {"compare_value": 1}]],
        "then": [["phone", "match", {"pattern": "^7"}]],
    })
    rule.validate(model)                          # server side
    script = rule.client_validate_attribute(model, "phone")  # client side
"""

from .core.errors import IfThenError, ConfigurationError, SynthesisError
from .core.validate import (
    RuleSpec,
    ConditionalRule,
    FormModel,
    ErrorScope,
    BaseValidator,
    ClientCheck,
    ConditionalValidator,
    ValidatorRegistry,
    get_default_registry,
    RuleCompiler,
    CompiledRuleCache,
    ClientScriptSynthesizer,
    load_conditional_rule,
    load_rules,
)
from .config import IfThenConfig, CompilerConfig, ClientConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "IfThenError",
    "ConfigurationError",
    "SynthesisError",
    "RuleSpec",
    "ConditionalRule",
    "FormModel",
    "ErrorScope",
    "BaseValidator",
    "ClientCheck",
    "ConditionalValidator",
    "ValidatorRegistry",
    "get_default_registry",
    "RuleCompiler",
    "CompiledRuleCache",
    "ClientScriptSynthesizer",
    "load_conditional_rule",
    "load_rules",
    "IfThenConfig",
    "CompilerConfig",
    "ClientConfig",
    "load_config",
    "__version__",
]
