"""Configuration validation utilities."""

import string
from dataclasses import dataclass, fields
from typing import Any, Iterable

from .defaults import ActionDefaults, LoggingParams

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_action_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate example action defaults."""
        errors = []

        if "error_marker" in params:
            value = params["error_marker"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="error_marker",
                    message="Must be a string",
                    value=value
                ))

        if "print_template" in params:
            value = params["print_template"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="print_template",
                    message="Must be a string",
                    value=value
                ))
            else:
                fields = {
                    name for _, name, _, _ in string.Formatter().parse(value)
                    if name is not None
                }
                if not fields <= {"a", "b"}:
                    errors.append(ValidationError(
                        field="print_template",
                        message="May only reference the fields {a} and {b}",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_section_shape(section: str, params: Any, known_keys: Iterable[str]) -> list[ValidationError]:
        """Check that a section is a mapping holding only known keys."""
        if not isinstance(params, dict):
            return [ValidationError(
                field=section,
                message="Must be a mapping",
                value=params
            )]

        known = set(known_keys)
        return [
            ValidationError(
                field=f"{section}.{key}",
                message=f"Unknown key, expected one of {', '.join(sorted(known))}",
                value=params[key]
            )
            for key in params
            if key not in known
        ]

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []
        sections = {
            "actions": (ActionDefaults, cls.validate_action_params),
            "logging": (LoggingParams, cls.validate_logging_params),
        }

        for section in config:
            if section not in sections:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))

        for section, (params_cls, validate) in sections.items():
            params = config.get(section, {})
            shape_errors = cls.validate_section_shape(
                section, params, (field.name for field in fields(params_cls))
            )
            errors.extend(shape_errors)
            if isinstance(params, dict):
                errors.extend(validate(params))

        return errors
