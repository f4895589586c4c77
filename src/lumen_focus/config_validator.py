"""
Configuration validator for Lumen-Focus.

Provides validation utilities for YAML configuration files against the
bundled JSON Schema and the pydantic settings models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator
from pydantic import ValidationError

from .config import ConfigError, FocusSettings


class ConfigValidator:
    """
    Validator for Lumen-Focus configuration files.

    Supports both JSON Schema validation and Pydantic model validation.
    """

    def __init__(self, schema_path: Path | None = None):
        """
        Initialize validator.

        Args:
            schema_path: Optional path to JSON Schema file.
                        If None, uses bundled schema.
        """
        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "focus_config-schema.yaml"

        if not schema_path.exists():
            raise FileNotFoundError(f"Schema file not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            self.schema = yaml.safe_load(f)

        self.validator = Draft7Validator(self.schema)

    def validate_file(
        self, config_path: Path | str, strict: bool = True
    ) -> tuple[bool, list[str]]:
        """
        Validate configuration file.

        Args:
            config_path: Path to configuration YAML file
            strict: If True, run Pydantic validation after the JSON Schema.
                   If False, use JSON Schema only.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        config_path = Path(config_path)

        if not config_path.exists():
            return False, [f"Configuration file not found: {config_path}"]

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            return False, [f"Invalid YAML syntax: {e}"]
        except OSError as e:
            return False, [f"Failed to load file: {e}"]

        return self.validate_data(config_data or {}, strict=strict)

    def validate_data(
        self, config_data: Any, strict: bool = True
    ) -> tuple[bool, list[str]]:
        is_valid, errors = self._validate_with_jsonschema(config_data)
        if not is_valid or not strict:
            return is_valid, errors
        return self._validate_with_pydantic(config_data)

    def _validate_with_jsonschema(self, config_data: Any) -> tuple[bool, list[str]]:
        """Validate using JSON Schema"""
        errors = sorted(self.validator.iter_errors(config_data), key=lambda e: list(e.path))

        if not errors:
            return True, []

        error_messages = []
        for error in errors:
            path = ".".join(str(p) for p in error.path) if error.path else "root"
            error_messages.append(f"{error.message} (at: {path})")

        return False, error_messages

    def _validate_with_pydantic(self, config_data: Any) -> tuple[bool, list[str]]:
        """Validate using Pydantic models"""
        try:
            FocusSettings.model_validate(config_data)
            return True, []
        except ValidationError as e:
            error_messages = []
            for error in e.errors():
                loc = ".".join(str(loc_part) for loc_part in error["loc"])
                msg = error["msg"]
                error_messages.append(f"{msg} (at: {loc})")
            return False, error_messages

    def validate_and_load(self, config_path: Path | str) -> FocusSettings:
        """
        Validate and load configuration file.

        Args:
            config_path: Path to configuration YAML file

        Returns:
            Validated FocusSettings instance

        Raises:
            ConfigError: If validation fails
        """
        config_path = Path(config_path)

        is_valid, errors = self.validate_file(config_path, strict=True)

        if not is_valid:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {err}" for err in errors
            )
            raise ConfigError(error_msg)

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        return FocusSettings.model_validate(config_data or {})


def validate_config_file(
    config_path: Path | str, schema_path: Path | str | None = None
) -> tuple[bool, list[str]]:
    """
    Convenience function to validate a configuration file.

    Example:
        >>> is_valid, errors = validate_config_file("focus.yaml")
        >>> if not is_valid:
        ...     for error in errors:
        ...         print(f"Error: {error}")
    """
    schema_path_obj = Path(schema_path) if schema_path else None
    validator = ConfigValidator(schema_path_obj)
    return validator.validate_file(config_path, strict=True)


def load_and_validate_config(config_path: Path | str) -> FocusSettings:
    """
    Load and validate configuration file.

    This is the recommended way to load configuration in production.

    Raises:
        ConfigError: If validation fails or file not found
    """
    validator = ConfigValidator()
    return validator.validate_and_load(config_path)
