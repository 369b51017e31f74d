"""
Module configurations.
"""

from .base import ModuleConfig
from .compiler import CompilerConfig
from .client import ClientConfig

__all__ = [
    "ModuleConfig",
    "CompilerConfig",
    "ClientConfig",
]
