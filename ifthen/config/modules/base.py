# ifthen/config/modules/base.py
"""
Base Module Configuration
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Set, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="ModuleConfig")


@dataclass(frozen=True)
class ModuleConfig:
    """
    Base configuration for all modules.

    enabled: Whether the module's feature is switched on
    """

    enabled: bool = True

    @classmethod
    def field_names(cls) -> Set[str]:
        return {f.name for f in fields(cls)}

    def to_dict(self) -> Dict[str, Any]:
        """Plain field mapping (YAML-safe)"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def merged(self: C, overrides: Mapping[str, Any]) -> C:
        """Copy with `overrides` applied; unknown keys are logged and ignored"""
        known = self.field_names()
        unknown = sorted(set(overrides) - known)
        if unknown:
            logger.warning(f"Ignoring unknown {type(self).__name__} keys: {unknown}")
        return replace(self, **{k: v for k, v in overrides.items() if k in known})
