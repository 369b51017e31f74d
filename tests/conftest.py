"""
Shared fixtures for the ifthen test suite.
"""

import pytest

from ifthen.core.validate import (
    ValidatorRegistry,
    register_builtin_validators,
    reset_default_registry,
)

from tests.helpers import (
    Contact,
    ExplodingValidator,
    MarkerValidator,
    TextOnlyValidator,
)


@pytest.fixture(autouse=True)
def reset_registry():
    """Reset the default registry around each test"""
    reset_default_registry()
    MarkerValidator.calls = []
    yield
    reset_default_registry()


@pytest.fixture
def registry():
    """Registry with builtin kinds plus test-only kinds"""
    registry = ValidatorRegistry()
    register_builtin_validators(registry)
    registry.register("marker", MarkerValidator)
    registry.register("explode", ExplodingValidator)
    registry.register("text_only", TextOnlyValidator)
    return registry


@pytest.fixture
def contact():
    return Contact()


@pytest.fixture
def phone_rule_options():
    """Guard on type == 1; phone must start with 7, name at most 255 chars"""
    return {
        "if": [
            ["type", "compare", {"compare_value": 1}],
        ],
        "then": [
            ["phone", "match", {"pattern": "^7"}],
            ["name", "length", {"max": 255}],
        ],
    }
