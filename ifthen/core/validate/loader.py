# ifthen/core/validate/loader.py
"""
Rule Loader: rules-as-data.

This module provides:
- Core layer (pure, no I/O):
  - parse_document(content, format) -> dict
  - parse_conditional_rule(data) -> ConditionalRule
  - parse_rules(data) -> list[RuleSpec]
  - serialize_conditional_rule(rule, format) -> str
- API layer (with I/O):
  - load_conditional_rule(path) -> ConditionalRule
  - load_rules(path) -> list[RuleSpec]

A conditional rule file:

    if:
      - [type, compare, {compare_value: 1}]
    then:
      - [phone, match, {pattern: "^7"}]
      - {attributes: name, kind: length, max: 255}

A rule list file holds `rules:` with entries of either form.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union
import json

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError, codes
from .contracts import ConditionalRule, RuleSpec


def _rule_file_error(message: str, **details: Any) -> ConfigurationError:
    return ConfigurationError(
        message=message,
        error_code=codes.INVALID_RULE_FILE,
        details=details,
    )


# ============================================================================
# Core layer: pure functions
# ============================================================================

def parse_document(content: str, format: str = "yaml") -> Dict[str, Any]:
    """
    Parse a YAML or JSON document into a mapping.

    Raises:
        ConfigurationError: On syntax errors or a non-mapping document
    """
    try:
        if format == "yaml":
            data = yaml.safe_load(content)
        elif format == "json":
            data = json.loads(content)
        else:
            raise _rule_file_error(f"Unsupported rule format: {format}", format=format)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise _rule_file_error(f"Invalid {format} rule document: {e}", format=format) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise _rule_file_error(
            f"Rule document must be a mapping, got {type(data).__name__}",
            format=format,
        )
    return data


def parse_conditional_rule(data: Dict[str, Any]) -> ConditionalRule:
    """
    Build a ConditionalRule from a mapping ("if"/"then" or field names).

    Raises:
        ConfigurationError: If the mapping does not fit the contract
    """
    try:
        return ConditionalRule.model_validate(data)
    except PydanticValidationError as e:
        raise _rule_file_error(f"Invalid conditional rule: {e}") from e


def parse_rules(data: Dict[str, Any], owner: str = "RuleFile") -> List[RuleSpec]:
    """
    Normalize the `rules:` list of a document.

    Raises:
        ConfigurationError: If `rules` is not a list or an entry is malformed
    """
    rules = data.get("rules", [])
    if not isinstance(rules, list):
        raise _rule_file_error("'rules' must be a list", owner=owner)
    return [RuleSpec.from_raw(rule, owner=owner) for rule in rules]


def serialize_conditional_rule(rule: ConditionalRule, format: str = "yaml") -> str:
    """Serialize a ConditionalRule using the declarative aliases"""
    data = rule.model_dump(mode="json", by_alias=True, exclude_defaults=True)
    if format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise _rule_file_error(f"Unsupported rule format: {format}", format=format)


# ============================================================================
# API layer: I/O functions
# ============================================================================

def _read(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rule file not found: {path}")

    if path.suffix in (".yaml", ".yml"):
        format = "yaml"
    elif path.suffix == ".json":
        format = "json"
    else:
        raise _rule_file_error(f"Unsupported rule file format: {path.suffix}", path=str(path))

    return parse_document(path.read_text(encoding="utf-8"), format=format)


def load_conditional_rule(path: Union[str, Path]) -> ConditionalRule:
    """
    Load a conditional rule from a YAML or JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If file is invalid
    """
    return parse_conditional_rule(_read(path))


def load_rules(path: Union[str, Path]) -> List[RuleSpec]:
    """
    Load a rule list (`rules:`) from a YAML or JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If file is invalid
    """
    path = Path(path)
    return parse_rules(_read(path), owner=path.stem)


__all__ = [
    "parse_document",
    "parse_conditional_rule",
    "parse_rules",
    "serialize_conditional_rule",
    "load_conditional_rule",
    "load_rules",
]
