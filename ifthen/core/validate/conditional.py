# ifthen/core/validate/conditional.py
"""
Conditional Validator: if-then rules built from other validators.

    ConditionalValidator(["phone", "name"], {
        "if": [
            ["type", "compare", {"compare_value": 1}],
        ],
        "then": [
            ["phone", "match", {"pattern": "^7", "message": "phone must start with 7"}],
            ["name", "length", {"max": 255}],
        ],
    })

Server side, for each bound attribute:
1. Run the guard ("if") rules inside a discarded error scope. Their
   violations are never visible on the model.
2. Only if no guard validator reported an error on any of its attributes,
   run the consequence ("then") rules; their violations are kept.

Client side, the same rules are turned into one script fragment by the
ClientScriptSynthesizer.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence

from .client.placeholder import placeholder_strategy
from .client.synthesizer import ClientScriptSynthesizer
from .compiler import RuleCompiler
from .contracts import ConditionalRule
from .model import model_type_name
from .scope import ErrorScope
from .validator import BaseValidator, ClientCheck

logger = logging.getLogger(__name__)


class ConditionalValidator(BaseValidator):
    """
    Composite if-then validator.

    Args:
        attributes: Attributes the rule is declared on (the consequence
            attributes it renders client checks for)
        options: ConditionalRule fields ("if", "then", ...)
        registry: Validator-kind factory for sub-rules
        compiler: Compiler to share a compiled-rule cache across rules
            (a private one built from CompilerConfig when None)
        client_config: ClientConfig for script synthesis (defaults when None)
    """

    kind = "conditional"
    options_model = ConditionalRule

    def __init__(
        self,
        attributes: Sequence[str] = (),
        options: Optional[Mapping[str, Any]] = None,
        registry: Any = None,
        compiler: Optional[RuleCompiler] = None,
        client_config: Any = None,
    ):
        super().__init__(attributes, options, registry)
        from ifthen.config import ClientConfig

        self.compiler = compiler or RuleCompiler.from_config(registry=registry)
        self.client_config = client_config or ClientConfig.default()

        dynamic = self.settings.use_dynamic_guard_value
        if dynamic is None:
            dynamic = self.client_config.use_dynamic_guard_value
        self.synthesizer = ClientScriptSynthesizer(
            compiler=self.compiler,
            placeholder=placeholder_strategy(dynamic, self.client_config),
            guard_expression_override=self.settings.guard_expression_override,
        )

    @property
    def guard_rules(self) -> List[Any]:
        return self.settings.guard_rules

    @property
    def consequence_rules(self) -> List[Any]:
        return self.settings.consequence_rules

    # -------- server side --------

    def validate_attribute(self, model: Any, attribute: str) -> None:
        """Evaluate the rule for one attribute (mutates the model's errors)"""
        guard_ok = self.run_validators(model, self.guard_rules, discard=True)
        if guard_ok:
            self.run_validators(model, self.consequence_rules)
        else:
            logger.debug(
                f"Guard failed for {model_type_name(model)}.{attribute}; "
                f"consequence rules skipped"
            )

    evaluate = validate_attribute

    def run_validators(self, model: Any, rules: Sequence[Any], discard: bool = False) -> bool:
        """
        Compile and run `rules` against `model` in an isolated error scope.

        Args:
            model: Host model
            rules: Raw rule list
            discard: Guard mode; stop at the first attribute with errors and
                restore the model's errors exactly

        Returns:
            False if discard mode found an error, True otherwise (errors
            recorded by the pass are merged with the pre-existing ones)
        """
        validators = self.compiler.compile(model, rules)

        with ErrorScope(model) as scope:
            for validator in validators:
                validator.validate(model)
                if not discard:
                    continue
                for attribute in validator.attributes:
                    if model.has_errors(attribute):
                        logger.debug(
                            f"{type(validator).__name__} reported '{attribute}' "
                            f"on {model_type_name(model)}; discarding guard errors"
                        )
                        scope.discard()
                        return False
        return True

    # -------- client side --------

    def client_check(self, model: Any, attribute: str) -> Optional[ClientCheck]:
        # composite script is not a single (condition, body) pair
        return None

    def client_validate_attribute(self, model: Any, attribute: str) -> str:
        """
        Client script for `attribute`.

        Raises:
            SynthesisError: If a guard validator's client check is unparseable
        """
        return self.synthesizer.synthesize(
            model, attribute, self.guard_rules, self.consequence_rules
        )


__all__ = ["ConditionalValidator"]
