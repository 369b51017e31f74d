# ifthen/config/modules/compiler.py
"""
Compiler Module Configuration

Configuration for the compiled-rule cache.
"""

from dataclasses import dataclass
from typing import Optional
from .base import ModuleConfig


@dataclass(frozen=True)
class CompilerConfig(ModuleConfig):
    """
    Rule compiler configuration.

    enabled: If False, every compile() builds fresh validators (no cache)
    max_size: Maximum number of compiled rule sets kept (LRU eviction)
    ttl_seconds: Optional lifetime of a compiled rule set
    """

    enabled: bool = True
    max_size: int = 256
    ttl_seconds: Optional[float] = None

    @classmethod
    def default(cls) -> "CompilerConfig":
        return cls(enabled=True, max_size=256, ttl_seconds=None)

    @classmethod
    def uncached(cls) -> "CompilerConfig":
        """No memoization (useful when construction depends on state outside the snapshot)"""
        return cls(enabled=False, max_size=256, ttl_seconds=None)
