"""
ifthen Configuration

Design principles:
1. Code has defaults; YAML only overrides them (YAML can be deleted)
2. Each module has its own semantic configuration
"""

from .modules import (
    ModuleConfig,
    CompilerConfig,
    ClientConfig,
)
from .loader import IfThenConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "ModuleConfig",
    "CompilerConfig",
    "ClientConfig",
    "IfThenConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
