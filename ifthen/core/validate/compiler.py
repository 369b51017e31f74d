# ifthen/core/validate/compiler.py
"""
Rule Compiler: rule specifications -> validator instances.

Compilation is memoized in a CompiledRuleCache keyed by a fingerprint of
- the normalized rule list
- the model's type name
- a full snapshot of the model's field values (not its identity)

Two models with equal contents therefore share compiled validators. State
that influences construction but is missing from the snapshot is not seen
by the fingerprint.

The cache is owned by the compiler (no process-global cache):
- capacity limit with LRU eviction
- optional TTL
- at most one compilation per fingerprint under concurrent callers
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .contracts import RuleSpec
from .model import attribute_snapshot, model_type_name
from .registry import ValidatorRegistry, get_default_registry
from .validator import BaseValidator

logger = logging.getLogger(__name__)

CompiledRuleSet = Tuple[BaseValidator, ...]


def compute_fingerprint(payload: Any) -> str:
    """
    SHA256 fingerprint of a JSON-like payload.

    Falls back to repr() for values json cannot encode.
    """
    try:
        payload_str = json.dumps(payload, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        payload_str = repr(payload)
    return hashlib.sha256(payload_str.encode("utf-8")).hexdigest()


@dataclass
class _CacheEntry:
    validators: CompiledRuleSet
    created_at: float


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "size": self.size,
        }


class CompiledRuleCache:
    """
    Bounded cache of compiled rule sets.

    get_or_compile() guarantees that concurrent callers asking for the same
    fingerprint trigger a single compilation and all observe the completed
    tuple.
    """

    def __init__(
        self,
        max_size: int = 256,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, _CacheEntry]" = OrderedDict()
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()
        self._stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, fingerprint: str) -> bool:
        with self._lock:
            return self._lookup(fingerprint) is not None

    def _lookup(self, fingerprint: str) -> Optional[CompiledRuleSet]:
        # caller holds self._lock
        entry = self._entries.get(fingerprint)
        if entry is None:
            return None
        if self.ttl_seconds is not None and self._clock() - entry.created_at > self.ttl_seconds:
            del self._entries[fingerprint]
            return None
        self._entries.move_to_end(fingerprint)
        return entry.validators

    def _store(self, fingerprint: str, validators: CompiledRuleSet) -> None:
        # caller holds self._lock
        self._entries[fingerprint] = _CacheEntry(validators, self._clock())
        self._entries.move_to_end(fingerprint)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(f"Evicted compiled rule set {evicted[:12]}")

    def get(self, fingerprint: str) -> Optional[CompiledRuleSet]:
        with self._lock:
            return self._lookup(fingerprint)

    def get_or_compile(
        self,
        fingerprint: str,
        compile_fn: Callable[[], CompiledRuleSet],
    ) -> CompiledRuleSet:
        with self._lock:
            cached = self._lookup(fingerprint)
            if cached is not None:
                self._stats.hits += 1
                return cached
            key_lock = self._key_locks.setdefault(fingerprint, threading.Lock())

        with key_lock:
            # another caller may have finished while we waited
            with self._lock:
                cached = self._lookup(fingerprint)
                if cached is not None:
                    self._stats.hits += 1
                    return cached

            try:
                validators = tuple(compile_fn())
                with self._lock:
                    self._stats.misses += 1
                    self._store(fingerprint, validators)
            finally:
                with self._lock:
                    self._key_locks.pop(fingerprint, None)
            return validators

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._stats = CacheStats()

    def stats(self) -> Dict[str, int]:
        with self._lock:
            self._stats.size = len(self._entries)
            return self._stats.to_dict()

    def __repr__(self) -> str:
        return f"CompiledRuleCache(size={len(self._entries)}, max_size={self.max_size})"


class RuleCompiler:
    """
    Turns raw rule lists into ordered validator tuples.

    Args:
        registry: Validator-kind factory (default registry when None)
        cache: Compiled-rule cache; None disables memoization
    """

    def __init__(
        self,
        registry: Optional[ValidatorRegistry] = None,
        cache: Optional[CompiledRuleCache] = None,
    ):
        self._registry = registry
        self.cache = cache

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    @classmethod
    def from_config(
        cls,
        config: Any = None,
        registry: Optional[ValidatorRegistry] = None,
    ) -> "RuleCompiler":
        """Build a compiler from a CompilerConfig (defaults when None)"""
        from ifthen.config import CompilerConfig

        config = config or CompilerConfig.default()
        cache = None
        if config.enabled:
            cache = CompiledRuleCache(max_size=config.max_size, ttl_seconds=config.ttl_seconds)
        return cls(registry=registry, cache=cache)

    def normalize(self, model: Any, rules: Sequence[Any]) -> List[RuleSpec]:
        """
        Normalize raw rules.

        Raises:
            ConfigurationError: If a rule misses its attributes or kind
        """
        owner = model_type_name(model)
        return [RuleSpec.from_raw(rule, owner=owner) for rule in rules]

    def fingerprint(self, model: Any, specs: Sequence[RuleSpec]) -> str:
        return compute_fingerprint({
            "model": model_type_name(model),
            "rules": [spec.model_dump() for spec in specs],
            "fields": attribute_snapshot(model),
        })

    def compile(self, model: Any, rules: Sequence[Any]) -> CompiledRuleSet:
        """
        Compile `rules` for `model`.

        Returns:
            Tuple of validator instances in rule order

        Raises:
            ConfigurationError: On malformed rules or unknown validator kinds
        """
        specs = self.normalize(model, rules)

        def _build() -> CompiledRuleSet:
            validators = tuple(
                self.registry.construct(spec.kind, model, spec.attributes, spec.options)
                for spec in specs
            )
            logger.debug(f"Compiled {len(validators)} validator(s) for {model_type_name(model)}")
            return validators

        if self.cache is None:
            return _build()

        fingerprint = self.fingerprint(model, specs)
        return self.cache.get_or_compile(fingerprint, _build)


__all__ = [
    "CompiledRuleCache",
    "CompiledRuleSet",
    "RuleCompiler",
    "compute_fingerprint",
]
