# ifthen/core/validate/contracts/v1/conditional.py
"""
ConditionalRuleV1: Options recognized by the conditional validator.

Keys accept both the Python names and the short declarative aliases used in
rule files ("if", "then"):

    attributes: phone, name
    kind: conditional
    if:
      - [type, compare, {compare_value: 1}]
    then:
      - [phone, match, {pattern: "^7", message: "phone must start with 7"}]
      - [name, length, {max: 255}]
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConditionalRuleV1(BaseModel):
    """
    Conditional (if-then) rule configuration.

    Rule lists are kept raw; they are normalized at compile time so that
    errors can name the model they were declared on.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    guard_rules: List[Any] = Field(
        default_factory=list,
        alias="if",
        description="Guard ('if') rules; violations are never surfaced"
    )
    consequence_rules: List[Any] = Field(
        default_factory=list,
        alias="then",
        description="Consequence ('then') rules; run only when the guard passes"
    )
    use_dynamic_guard_value: Optional[bool] = Field(
        default=None,
        description="Read the live form value in client guards (None = config default)"
    )
    guard_expression_override: str = Field(
        default="",
        description="Client guard expression used verbatim instead of synthesis"
    )
    skip_on_error: bool = Field(
        default=False,
        description="Skip attributes that already carry errors"
    )
    message: Optional[str] = Field(default=None, description="Unused by the composite")
