# ifthen/core/validate/registry.py
"""
Validator Registry: maps validator kind names to validator classes.

The registry is the validator-kind factory used by the rule compiler:

    registry = ValidatorRegistry()
    registry.register("match", MatchValidator, aliases=["matchesPattern"])
    validator = registry.construct("match", model, ["phone"], {"pattern": "^7"})

Thread-safe (uses locks for registration).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence
import logging
import threading

from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from .model import model_type_name
from .validator import BaseValidator

logger = logging.getLogger(__name__)

# (attributes, options) -> validator instance; classes qualify
ValidatorFactory = Callable[..., BaseValidator]


class ValidatorRegistry:
    """
    Central registry of validator kinds.

    Responsibilities:
    - Store kind -> factory (and aliases)
    - Construct validator instances for the rule compiler
    """

    def __init__(self):
        self._factories: Dict[str, ValidatorFactory] = {}
        self._aliases: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(
        self,
        kind: str,
        factory: ValidatorFactory,
        aliases: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Register a validator kind.

        Raises:
            ValueError: If the kind or an alias is already registered
        """
        names = [kind, *(aliases or [])]
        with self._lock:
            for name in names:
                if name in self._factories or name in self._aliases:
                    raise ValueError(f"Validator kind '{name}' is already registered.")
            self._factories[kind] = factory
            for alias in aliases or []:
                self._aliases[alias] = kind
        logger.debug(f"Registered validator kind '{kind}' aliases={list(aliases or [])}")

    def unregister(self, kind: str) -> None:
        with self._lock:
            self._factories.pop(kind, None)
            for alias, target in list(self._aliases.items()):
                if target == kind:
                    del self._aliases[alias]

    def resolve(self, kind: str) -> Optional[str]:
        """Canonical kind name for a kind or alias"""
        if kind in self._factories:
            return kind
        return self._aliases.get(kind)

    def has(self, kind: str) -> bool:
        return self.resolve(kind) is not None

    def get(self, kind: str) -> Optional[ValidatorFactory]:
        canonical = self.resolve(kind)
        if canonical is None:
            return None
        return self._factories.get(canonical)

    def list_kinds(self) -> List[str]:
        return sorted(self._factories)

    def construct(
        self,
        kind: str,
        model: Any,
        attributes: Sequence[str],
        options: Mapping[str, Any],
    ) -> BaseValidator:
        """
        Build a validator instance.

        Raises:
            ConfigurationError: If the kind is unknown or its options are invalid
        """
        factory = self.get(kind)
        if factory is None:
            raise ConfigurationError.unknown_validator(model_type_name(model), kind)
        try:
            return factory(attributes, dict(options), registry=self)
        except (PydanticValidationError, TypeError, ValueError) as e:
            raise ConfigurationError(
                message=f"{model_type_name(model)} has invalid options for validator '{kind}': {e}",
                details={"kind": kind, "options": repr(dict(options))},
                cause=e,
            ) from e

    def count(self) -> int:
        return len(self._factories)

    def clear(self) -> None:
        """Clear all registered kinds (useful for testing)"""
        with self._lock:
            self._factories.clear()
            self._aliases.clear()

    def __repr__(self) -> str:
        return f"ValidatorRegistry(kinds={self.list_kinds()})"


# Default registry instance
_default_registry: Optional[ValidatorRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ValidatorRegistry:
    """
    Get the default registry, with builtin kinds registered.

    Lazily initialized on first access.
    """
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                from .builtin import register_builtin_validators
                registry = ValidatorRegistry()
                register_builtin_validators(registry)
                _default_registry = registry

    return _default_registry


def set_default_registry(registry: ValidatorRegistry) -> None:
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry


def reset_default_registry() -> None:
    """Drop the default registry; the next access rebuilds it. For tests."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


__all__ = [
    "ValidatorRegistry",
    "ValidatorFactory",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
]
