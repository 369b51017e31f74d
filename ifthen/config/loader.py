# ifthen/config/loader.py
"""
Configuration Loader

Code defaults are complete; a YAML file only overrides them:

    modules:
      compiler:
        max_size: 64
        ttl_seconds: 300
      client:
        use_dynamic_guard_value: false

A missing or unreadable file leaves the defaults in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import yaml

from .modules import CompilerConfig, ClientConfig
from .validator import validate_config, ConfigIssue

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".ifthen" / "config.yml"


class IfThenConfig:
    """Compiler and client configuration, defaults filled in"""

    def __init__(
        self,
        compiler: Optional[CompilerConfig] = None,
        client: Optional[ClientConfig] = None,
    ):
        self.compiler = compiler or CompilerConfig.default()
        self.client = client or ClientConfig.default()

    @classmethod
    def default(cls) -> "IfThenConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "IfThenConfig":
        """
        Apply a parsed `modules:` mapping on top of the defaults.

        Issues found by validate() are logged as warnings, not raised.
        """
        config = cls.default()
        modules = (data or {}).get("modules") or {}

        config.compiler = config.compiler.merged(modules.get("compiler") or {})
        config.client = config.client.merged(modules.get("client") or {})

        for issue in config.validate():
            logger.warning(f"Configuration issue: {issue}")
        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "IfThenConfig":
        """
        Args:
            config_path: YAML file; ~/.ifthen/config.yml when None
        """
        return cls.from_dict(_load_yaml(Path(config_path) if config_path else DEFAULT_CONFIG_PATH))

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self.compiler, self.client)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modules": {
                "compiler": self.compiler.to_dict(),
                "client": self.client.to_dict(),
            },
        }


def _load_yaml(path: Path) -> Optional[Dict[str, Any]]:
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return None

    if data is not None and not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: top level must be a mapping")
        return None
    return data


def load_config(config_path: Optional[Path] = None) -> IfThenConfig:
    """Load configuration (defaults when the file is missing or invalid)"""
    return IfThenConfig.from_yaml(config_path)
