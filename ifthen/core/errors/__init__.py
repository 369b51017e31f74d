# ifthen/core/errors/__init__.py
"""
Error types for ifthen.

No side effects on import.
"""

from . import codes
from .exceptions import IfThenError, ConfigurationError, SynthesisError

__all__ = [
    "codes",
    "IfThenError",
    "ConfigurationError",
    "SynthesisError",
]
