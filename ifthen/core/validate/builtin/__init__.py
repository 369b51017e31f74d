# ifthen/core/validate/builtin/__init__.py
"""
Builtin validator kinds.

Reference collaborators for the conditional validator. Register them on a
registry with register_builtin_validators().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .required import RequiredValidator
from .compare import CompareValidator
from .match import MatchValidator
from .length import LengthValidator

if TYPE_CHECKING:
    from ..registry import ValidatorRegistry

logger = logging.getLogger(__name__)


def register_builtin_validators(registry: "ValidatorRegistry") -> None:
    """Register every builtin kind (and the conditional kind) on `registry`"""
    from ..conditional import ConditionalValidator

    registry.register("required", RequiredValidator)
    registry.register("compare", CompareValidator, aliases=["equals"])
    registry.register("match", MatchValidator, aliases=["matchesPattern"])
    registry.register("length", LengthValidator)
    registry.register("conditional", ConditionalValidator, aliases=["if_then"])
    logger.debug(f"Registered builtin validator kinds: {registry.list_kinds()}")


__all__ = [
    "RequiredValidator",
    "CompareValidator",
    "MatchValidator",
    "LengthValidator",
    "register_builtin_validators",
]
