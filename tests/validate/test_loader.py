"""
Tests for loading rules from YAML/JSON documents.
"""

import json

import pytest

from ifthen.core.errors import ConfigurationError, codes
from ifthen.core.validate import (
    ConditionalRule,
    ConditionalValidator,
    load_conditional_rule,
    load_rules,
    parse_document,
    parse_rules,
    serialize_conditional_rule,
)

from tests.helpers import Contact

PHONE_RULE_YAML = """\
if:
  - [type, compare, {compare_value: 1}]
then:
  - [phone, match, {pattern: "^7"}]
  - {attributes: name, kind: length, max: 255}
"""


class TestParseDocument:

    def test_yaml(self):
        data = parse_document(PHONE_RULE_YAML)

        assert data["if"] == [["type", "compare", {"compare_value": 1}]]

    def test_empty_document(self):
        assert parse_document("") == {}

    def test_json(self):
        assert parse_document('{"rules": []}', format="json") == {"rules": []}

    def test_unsupported_format(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_document("rules: []", format="toml")

        assert exc_info.value.error_code == codes.INVALID_RULE_FILE

    def test_syntax_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_document("{not json", format="json")

        assert exc_info.value.error_code == codes.INVALID_RULE_FILE

    def test_non_mapping_document(self):
        with pytest.raises(ConfigurationError):
            parse_document("- a\n- b\n")


class TestConditionalRuleFiles:

    def test_load_yaml_and_evaluate(self, tmp_path):
        path = tmp_path / "phone.yaml"
        path.write_text(PHONE_RULE_YAML, encoding="utf-8")

        rule = load_conditional_rule(path)
        validator = ConditionalValidator(["phone"], rule.model_dump(by_alias=True))
        contact = Contact()
        validator.evaluate(contact, "phone")

        assert contact.get_errors() == {"phone": ["Phone is invalid."]}

    def test_load_json(self, tmp_path):
        path = tmp_path / "phone.json"
        path.write_text(json.dumps({
            "if": [["type", "compare", {"compare_value": 1}]],
            "then": [["phone", "required"]],
            "use_dynamic_guard_value": False,
        }), encoding="utf-8")

        rule = load_conditional_rule(path)

        assert rule.use_dynamic_guard_value is False
        assert rule.consequence_rules == [["phone", "required"]]

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("if: []\nelse: []\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_conditional_rule(path)

        assert exc_info.value.error_code == codes.INVALID_RULE_FILE

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_conditional_rule(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "rules.txt"
        path.write_text("if: []", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_conditional_rule(path)

    def test_serialize_uses_aliases(self):
        rule = ConditionalRule.model_validate({
            "if": [["type", "compare", {"compare_value": 1}]],
            "then": [["phone", "required"]],
        })

        text = serialize_conditional_rule(rule, format="json")

        assert json.loads(text) == {
            "if": [["type", "compare", {"compare_value": 1}]],
            "then": [["phone", "required"]],
        }

    def test_serialized_yaml_loads_back(self, tmp_path):
        rule = ConditionalRule.model_validate({
            "if": [["type", "compare", {"compare_value": 1}]],
            "then": [["phone", "required"]],
            "guard_expression_override": "true",
        })
        path = tmp_path / "rule.yaml"
        path.write_text(serialize_conditional_rule(rule), encoding="utf-8")

        assert load_conditional_rule(path) == rule


class TestRuleLists:

    def test_parse_rules(self):
        specs = parse_rules({"rules": [
            ["phone, name", "required"],
            {"attributes": ["type"], "validator": "compare", "compare_value": 1},
        ]})

        assert [s.attributes for s in specs] == [("phone", "name"), ("type",)]
        assert specs[1].kind == "compare"
        assert specs[1].options == {"compare_value": 1}

    def test_rules_must_be_a_list(self):
        with pytest.raises(ConfigurationError):
            parse_rules({"rules": "phone required"})

    def test_load_rules_names_file_in_errors(self, tmp_path):
        path = tmp_path / "contact_rules.yaml"
        path.write_text("rules:\n  - [phone]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_rules(path)

        assert exc_info.value.error_code == codes.INVALID_RULE
        assert exc_info.value.message.startswith("contact_rules has an invalid validation rule.")

    def test_load_rules(self, tmp_path):
        path = tmp_path / "contact_rules.yml"
        path.write_text("rules:\n  - [phone, match, {pattern: '^7'}]\n", encoding="utf-8")

        specs = load_rules(path)

        assert specs[0].to_raw() == [["phone"], "match", {"pattern": "^7"}]
