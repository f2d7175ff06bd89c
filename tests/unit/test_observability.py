"""
Unit tests for logging and metrics.
"""

import json
import logging

import pytest

from fluentcheck import ConfigurationError, Validator
from fluentcheck.observability import logger as logger_module
from fluentcheck.observability import metrics


def sample_value(name, labels):
    return metrics.REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
class TestMetrics:
    """Tests for validation metrics"""

    def test_valid_and_invalid_runs_are_counted(self):
        class MetricsCountedValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("name").not_empty()

        labels = {"validator": "MetricsCountedValidator"}
        valid_before = sample_value("fluentcheck_validations_total", {**labels, "outcome": "valid"})
        invalid_before = sample_value("fluentcheck_validations_total", {**labels, "outcome": "invalid"})
        failures_before = sample_value(
            "fluentcheck_validation_failures_total", {**labels, "property": "name"}
        )

        validator = MetricsCountedValidator()
        validator.validate({"name": "ok"})
        validator.validate({"name": ""})

        assert sample_value("fluentcheck_validations_total", {**labels, "outcome": "valid"}) == valid_before + 1
        assert sample_value("fluentcheck_validations_total", {**labels, "outcome": "invalid"}) == invalid_before + 1
        assert (
            sample_value("fluentcheck_validation_failures_total", {**labels, "property": "name"})
            == failures_before + 1
        )

    def test_configuration_errors_are_counted(self):
        class UnnamedRuleValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for(lambda obj: obj).not_null()

        labels = {"validator": "UnnamedRuleValidator", "outcome": "error"}
        before = sample_value("fluentcheck_validations_total", labels)

        try:
            UnnamedRuleValidator().validate({})
        except ConfigurationError:
            pass

        assert sample_value("fluentcheck_validations_total", labels) == before + 1

    def test_nested_validators_are_not_counted_separately(self):
        class NestedChildValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("line1").not_empty()

        class NestedParentValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("address").set_validator(NestedChildValidator())

        child = {"validator": "NestedChildValidator", "outcome": "invalid"}
        parent = {"validator": "NestedParentValidator", "outcome": "invalid"}
        child_before = sample_value("fluentcheck_validations_total", child)
        parent_before = sample_value("fluentcheck_validations_total", parent)

        result = NestedParentValidator().validate({"address": {"line1": ""}})

        assert [e.property_name for e in result.errors] == ["address.line1"]
        assert sample_value("fluentcheck_validations_total", parent) == parent_before + 1
        assert sample_value("fluentcheck_validations_total", child) == child_before

    def test_nested_configuration_error_counted_once(self):
        class BrokenChildValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for(lambda obj: obj).not_null()

        class BrokenParentValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("child").set_validator(BrokenChildValidator())

        child = {"validator": "BrokenChildValidator", "outcome": "error"}
        parent = {"validator": "BrokenParentValidator", "outcome": "error"}
        child_before = sample_value("fluentcheck_validations_total", child)
        parent_before = sample_value("fluentcheck_validations_total", parent)

        with pytest.raises(ConfigurationError):
            BrokenParentValidator().validate({"child": {}})

        assert sample_value("fluentcheck_validations_total", parent) == parent_before + 1
        assert sample_value("fluentcheck_validations_total", child) == child_before

    def test_generate_metrics_exposes_text_format(self):
        Validator().validate({})
        output = metrics.generate_metrics().decode()
        assert "fluentcheck_validations_total" in output
        assert "fluentcheck_validation_duration_seconds" in output


@pytest.mark.unit
class TestLogger:
    """Tests for structured logging"""

    def test_loggers_live_under_package_logger(self):
        assert logger_module.get_logger("rules").name == "fluentcheck.rules"
        assert logger_module.get_logger("fluentcheck.core").name == "fluentcheck.core"

    def test_json_formatter_adds_fields(self):
        formatter = logger_module.CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(message)s"
        )
        record = logging.LogRecord("fluentcheck.test", logging.INFO, __file__, 10, "hello", None, None)

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "fluentcheck.test"
        assert "timestamp" in payload

    def test_setup_logger_respects_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        try:
            root = logger_module.setup_logger()
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
        finally:
            logger_module.setup_logger(level="WARNING")

    def test_log_operation_does_not_swallow_errors(self):
        log = logger_module.get_logger("test")
        try:
            with logger_module.log_operation("failing", logger=log):
                raise ValueError("boom")
        except ValueError as e:
            assert str(e) == "boom"
        else:
            raise AssertionError("exception was swallowed")
