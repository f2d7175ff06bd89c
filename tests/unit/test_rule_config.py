"""
Unit tests for YAML rule configuration.
"""

import os
from pathlib import Path

import pytest

from fluentcheck import CascadeMode, ConfigurationError, Validator
from fluentcheck.core.rules import RuleConfigLoader, build_validator


@pytest.mark.unit
class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    @pytest.fixture
    def validator(self, test_data_dir) -> Validator:
        return RuleConfigLoader(os.path.join(test_data_dir, "customer_rules.yaml")).load_validator()

    def test_loads_rules_in_file_order(self, validator):
        assert [rule.property_name for rule in validator] == ["name", "age", "email"]

    def test_disabled_entries_are_skipped(self, validator):
        email_rule = validator.rules[2]
        assert [v.rule_type for v in email_rule.validators] == ["email"]

    def test_display_name_and_cascade(self, validator):
        age_rule = validator.rules[1]
        assert age_rule.property_description == "Age in years"
        assert age_rule.cascade_mode == CascadeMode.STOP_ON_FIRST_FAILURE
        assert validator.rules[0].cascade_mode == CascadeMode.CONTINUE

    def test_configured_validator_validates(self, validator):
        result = validator.validate({"name": "", "age": 200, "email": "bob@example.com"})

        assert [(e.property_name, e.error_message) for e in result.errors] == [
            ("name", "'Name' should not be empty."),
            ("age", "'Age in years' must be between 0 and 130. You entered 200."),
        ]

    def test_custom_message_from_config(self, validator):
        result = validator.validate({"name": "Bob", "age": 30, "email": "bob@example.com"})
        assert [e.error_message for e in result.errors] == ["'Age in years' must be under 18"]

    def test_valid_record(self, validator):
        assert validator.validate({"name": "Bob", "age": 12, "email": "bob@example.com"}).is_valid

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "missing.yaml")

    def test_missing_rules_section_raises(self, tmp_path):
        path = Path(tmp_path) / "rules.yaml"
        path.write_text("validators: []\n")

        with pytest.raises(ConfigurationError, match="rules"):
            RuleConfigLoader(path).load_validator()

    def test_invalid_yaml_raises(self, tmp_path):
        path = Path(tmp_path) / "rules.yaml"
        path.write_text("rules: [unclosed\n")

        with pytest.raises(ConfigurationError):
            RuleConfigLoader(path).load_validator()

    def test_adds_to_existing_validator(self, test_data_dir):
        validator = Validator()
        validator.rule_for("id").not_null()

        RuleConfigLoader(os.path.join(test_data_dir, "customer_rules.yaml")).load_validator(validator)

        assert [rule.property_name for rule in validator] == ["id", "name", "age", "email"]


@pytest.mark.unit
class TestBuildValidator:
    """Tests for build_validator on parsed configuration"""

    def test_unknown_rule_type_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown rule type"):
            build_validator({"rules": {"name": [{"type": "telepathy"}]}})

    def test_missing_type_raises(self):
        with pytest.raises(ConfigurationError, match="missing 'type'"):
            build_validator({"rules": {"name": [{"params": {}}]}})

    def test_rule_list_must_be_a_list(self):
        with pytest.raises(ConfigurationError, match="must be a list"):
            build_validator({"rules": {"name": "not_empty"}})

    def test_unknown_parameters_raise(self):
        with pytest.raises(ConfigurationError, match="Unknown parameters"):
            build_validator({"rules": {"age": [{"type": "greater_than", "params": {"minimum": 1}}]}})

    def test_missing_parameters_raise(self):
        with pytest.raises(ConfigurationError, match="Invalid parameters"):
            build_validator({"rules": {"age": [{"type": "greater_than"}]}})

    def test_invalid_cascade_raises(self):
        with pytest.raises(ConfigurationError):
            build_validator({"cascade": "sometimes", "rules": {"age": ["not_null"]}})

    def test_regex_rule(self):
        validator = build_validator(
            {"rules": {"code": [{"type": "matches", "params": {"pattern": "^TXN[0-9]{3}$"}}]}}
        )
        assert validator.validate({"code": "TXN123"}).is_valid
        assert not validator.validate({"code": "123"}).is_valid
