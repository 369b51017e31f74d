# ifthen/core/validate/client/synthesizer.py
"""
Client Script Synthesizer: builds the client-side twin of a conditional rule.

Output shape:

    if(!(<guard failure 1>) && !(<guard failure 2>)){<consequence checks>}

Guard conditions come from each guard validator, per bound attribute:
1. client_check(): structured (condition, body), used as is
2. otherwise client_validate_attribute() text; the condition is extracted
   from its leading `if (...) {`

Text extraction only works for checks written in that conventional shape;
anything else raises SynthesisError.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Sequence

from ...errors import SynthesisError
from ..compiler import RuleCompiler
from .placeholder import PlaceholderStrategy

logger = logging.getLogger(__name__)

IF_CONDITION_RE = re.compile(r"if\s*?\((.+)\)\s*?\{", re.S)


def extract_condition(script: str) -> str:
    """
    Condition of the leading `if (...) {` of a client check.

    Raises:
        SynthesisError: If the script does not have that shape
    """
    match = IF_CONDITION_RE.search(script or "")
    if match is None:
        raise SynthesisError(
            message="Can't extract client condition for 'if' validator.",
            details={"script": script},
        )
    return match.group(1)


class ClientScriptSynthesizer:
    """
    Args:
        compiler: Rule compiler shared with server-side evaluation
        placeholder: Value-token substitution strategy for guard conditions
        guard_expression_override: Guard expression used verbatim when set
    """

    def __init__(
        self,
        compiler: RuleCompiler,
        placeholder: PlaceholderStrategy,
        guard_expression_override: str = "",
    ):
        self.compiler = compiler
        self.placeholder = placeholder
        self.guard_expression_override = guard_expression_override

    def guard_condition(self, validator: Any, model: Any, attribute: str) -> str:
        client_check = getattr(validator, "client_check", None)
        check = client_check(model, attribute) if callable(client_check) else None
        if check is not None:
            return check.condition

        try:
            return extract_condition(validator.client_validate_attribute(model, attribute))
        except SynthesisError as e:
            e.details.update({
                "validator": type(validator).__name__,
                "attribute": attribute,
            })
            raise

    def build_guard_expression(self, model: Any, guard_rules: Sequence[Any]) -> str:
        """Conjunction of the negated guard failure conditions"""
        if self.guard_expression_override:
            return self.guard_expression_override

        parts: List[str] = []
        for validator in self.compiler.compile(model, guard_rules):
            for attribute in validator.attributes:
                condition = self.guard_condition(validator, model, attribute)
                condition = self.placeholder.apply(condition, model, attribute)
                parts.append(f"!({condition})")
        return " && ".join(parts)

    def build_consequence_script(
        self,
        model: Any,
        attribute: str,
        consequence_rules: Sequence[Any],
    ) -> str:
        """Client checks of every consequence validator bound to `attribute`"""
        script = ""
        for validator in self.compiler.compile(model, consequence_rules):
            if attribute in validator.attributes:
                script += validator.client_validate_attribute(model, attribute)
        return script

    def synthesize(
        self,
        model: Any,
        attribute: str,
        guard_rules: Sequence[Any],
        consequence_rules: Sequence[Any],
    ) -> str:
        """
        Client script for `attribute`.

        Empty guard or consequence parts are kept as is (`if(){}`); the page
        script is expected to tolerate them.

        Raises:
            SynthesisError: If a guard check cannot be turned into a condition
            ConfigurationError: On malformed rules
        """
        guard = self.build_guard_expression(model, guard_rules)
        consequence = self.build_consequence_script(model, attribute, consequence_rules)
        if not guard or not consequence:
            logger.debug(
                f"Client script for {type(model).__name__}.{attribute} has an empty "
                f"{'guard' if not guard else 'consequence'}"
            )
        return f"\nif({guard}){{{consequence}}}\n"


__all__ = [
    "ClientScriptSynthesizer",
    "extract_condition",
    "IF_CONDITION_RE",
]
