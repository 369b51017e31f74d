# ifthen/config/validator.py
"""
Configuration Validator

Checks compiler and client settings for values that are invalid or have no
effect. Problems are reported as ConfigIssue items; nothing is raised.
"""

from typing import List, Literal
from dataclasses import dataclass
from .modules import CompilerConfig, ClientConfig


@dataclass(frozen=True)
class ConfigIssue:
    """One finding of validate_config()"""
    level: Literal["warn", "error"]
    path: str  # e.g., "modules.compiler.max_size"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(compiler: CompilerConfig, client: ClientConfig) -> List[ConfigIssue]:
    """
    Returns:
        Issues in check order; `error` means the value cannot work, `warn`
        means it is ignored
    """
    issues = []

    if compiler.max_size < 1:
        issues.append(ConfigIssue(
            level="error",
            path="modules.compiler.max_size",
            message=f"max_size must be >= 1 (got {compiler.max_size})",
        ))

    if compiler.ttl_seconds is not None and compiler.ttl_seconds <= 0:
        issues.append(ConfigIssue(
            level="error",
            path="modules.compiler.ttl_seconds",
            message=f"ttl_seconds must be positive (got {compiler.ttl_seconds})",
            hint="Leave ttl_seconds unset for no expiry",
        ))

    if not compiler.enabled and compiler.ttl_seconds is not None:
        issues.append(ConfigIssue(
            level="warn",
            path="modules.compiler.ttl_seconds",
            message="ttl_seconds has no effect when enabled=false (no cache)",
            hint="Set modules.compiler.enabled=true to cache compiled rules",
        ))

    if "{id}" not in client.field_lookup_template:
        issues.append(ConfigIssue(
            level="error",
            path="modules.client.field_lookup_template",
            message="field_lookup_template must contain the {id} placeholder",
        ))

    if not client.value_placeholder.isidentifier():
        issues.append(ConfigIssue(
            level="error",
            path="modules.client.value_placeholder",
            message=f"value_placeholder must be an identifier (got {client.value_placeholder!r})",
        ))

    return issues
