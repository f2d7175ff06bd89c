"""
Rule configuration management.

Loads validation rules from YAML files and turns them into a Validator.
"""

from pathlib import Path
from typing import Any

import yaml

from fluentcheck.observability.logger import get_logger, log_operation

from ..exceptions import ConfigurationError
from .rule_builder import RuleBuilder

logger = get_logger(__name__)


class RuleConfigLoader:
    """
    Loads validation rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    cascade: continue            # optional default for every rule
    rules:
      email:
        - type: not_empty
        - type: email
          message: "Please enter a valid email address"

      age:
        display_name: Age in years
        cascade: stop
        validators:
          - type: not_null
          - type: inclusive_between
            params:
              from_value: 0
              to_value: 130
    ```

    A property maps either to a list of validator entries, or to a mapping
    with display_name/cascade and a "validators" list. Each entry has a
    "type" (a RuleBuilder method name), optional "params" passed as keyword
    arguments, an optional "message" template, and "enabled" (default true).
    """

    # Builder methods that can be named in YAML, with the parameters they accept.
    VALIDATOR_REGISTRY: dict[str, tuple[str, ...]] = {
        "not_null": (),
        "not_empty": (),
        "null": (),
        "empty": (),
        "equal": ("value_to_compare",),
        "not_equal": ("value_to_compare",),
        "less_than": ("value_to_compare",),
        "less_than_or_equal_to": ("value_to_compare",),
        "greater_than": ("value_to_compare",),
        "greater_than_or_equal_to": ("value_to_compare",),
        "inclusive_between": ("from_value", "to_value"),
        "exclusive_between": ("from_value", "to_value"),
        "length": ("min_length", "max_length"),
        "exact_length": ("length",),
        "max_length": ("max_length",),
        "min_length": ("min_length",),
        "matches": ("pattern", "flags"),
        "email": (),
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_config(self) -> dict[str, Any]:
        """Read and parse the YAML file."""
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise ConfigurationError("Configuration file must contain 'rules' section")
        return config

    def load_validator(self, validator: Any = None) -> Any:
        """
        Build a Validator from the configuration file.

        Args:
            validator: Existing Validator to add the rules to (a new one if None)

        Returns:
            The Validator with the configured rules appended
        """
        with log_operation("Loading rule configuration", logger=logger, config_path=str(self.config_path)):
            return build_validator(self.load_config(), validator)


def build_validator(config: dict[str, Any], validator: Any = None) -> Any:
    """
    Build a Validator from an already-parsed configuration mapping.

    Raises:
        ConfigurationError: If the configuration is malformed
    """
    from ..validator import Validator

    if not isinstance(config, dict) or "rules" not in config:
        raise ConfigurationError("Configuration must contain 'rules' section")

    rules = config["rules"]
    if not isinstance(rules, dict):
        raise ConfigurationError("'rules' must map property names to validator lists")

    validator = validator if validator is not None else Validator()
    default_cascade = config.get("cascade")

    for property_name, property_config in rules.items():
        if isinstance(property_config, list):
            property_config = {"validators": property_config}
        if not isinstance(property_config, dict) or not isinstance(property_config.get("validators"), list):
            raise ConfigurationError(f"Rules for property '{property_name}' must be a list")

        builder = validator.rule_for(str(property_name))
        if property_config.get("display_name"):
            builder.with_name(property_config["display_name"])
        cascade = property_config.get("cascade", default_cascade)
        if cascade is not None:
            builder.cascade(cascade)

        for idx, entry in enumerate(property_config["validators"]):
            _apply_entry(builder, property_name, entry, idx)

    logger.info(f"Built {validator.name} with {len(validator.rules)} configured rules")
    return validator


def _apply_entry(builder: RuleBuilder, property_name: str, entry: Any, idx: int) -> None:
    """
    Add a single validator entry to the rule being built.

    Raises:
        ConfigurationError: If the entry is invalid
    """
    if isinstance(entry, str):
        entry = {"type": entry}
    if not isinstance(entry, dict) or "type" not in entry:
        raise ConfigurationError(f"Validator #{idx} for property '{property_name}' is missing 'type'")

    if not entry.get("enabled", True):
        logger.debug(f"Skipping disabled validator #{idx} for property '{property_name}'")
        return

    rule_type = entry["type"]
    allowed = RuleConfigLoader.VALIDATOR_REGISTRY.get(rule_type)
    if allowed is None:
        raise ConfigurationError(f"Unknown rule type: {rule_type}")

    params = entry.get("params", entry.get("parameters")) or {}
    if not isinstance(params, dict):
        raise ConfigurationError(f"'params' for {rule_type} on '{property_name}' must be a mapping")
    unknown = set(params) - set(allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown parameters for {rule_type} on '{property_name}': {', '.join(sorted(unknown))}"
        )

    try:
        getattr(builder, rule_type)(**params)
    except TypeError as e:
        raise ConfigurationError(f"Invalid parameters for {rule_type} on '{property_name}': {e}")

    if entry.get("message"):
        builder.with_message(entry["message"])
