# tests/unit/test_errors.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from ifthen import ConfigurationError, IfThenError, SynthesisError
from ifthen.core.errors import codes
from ifthen.core.validate import RuleSpec, split_attributes


def test_unknown_code_is_downgraded():
    err = IfThenError(message="boom", error_code="NOT_A_CODE")

    assert err.error_code == codes.UNKNOWN
    assert str(err) == "[UNKNOWN] boom"


def test_subclass_defaults():
    assert ConfigurationError(message="x").error_code == codes.INVALID_RULE
    assert SynthesisError(message="x").error_code == codes.CLIENT_CHECK_UNPARSEABLE
    assert isinstance(SynthesisError(message="x"), IfThenError)


def test_to_dict():
    err = ConfigurationError.unknown_validator("Contact", "nope")

    assert err.to_dict() == {
        "type": "CONFIGURATION_ERROR",
        "error_code": codes.UNKNOWN_VALIDATOR,
        "message": "Contact refers to an unknown validator kind 'nope'.",
        "details": {"owner": "Contact", "kind": "nope"},
    }


def test_invalid_rule_message():
    err = ConfigurationError.invalid_rule("Contact", ["phone"])

    assert err.message == (
        "Contact has an invalid validation rule. The rule must specify "
        "attributes to be validated and the validator name."
    )
    assert err.details["owner"] == "Contact"


def test_raise_and_catch_as_base():
    with pytest.raises(IfThenError):
        raise SynthesisError(message="Can't extract client condition for 'if' validator.")


@pytest.mark.parametrize("selector,expected", [
    ("phone", ("phone",)),
    ("phone, name", ("phone", "name")),
    (" phone ,, name ", ("phone", "name")),
    (["phone", "name"], ("phone", "name")),
    ("", ()),
    (None, ()),
])
def test_split_attributes(selector, expected):
    assert split_attributes(selector) == expected


def test_rule_spec_is_immutable():
    spec = RuleSpec.from_raw(["phone", "required"])

    with pytest.raises(ValidationError):
        spec.kind = "match"
