"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import GeneratorParams, RangeParams, VocabularyParams

_SECTIONS = {
    "ranges": RangeParams,
    "vocabulary": VocabularyParams,
    "generator": GeneratorParams,
}

_FORMATS = ("timestamp", "iso8601")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_unknown_keys(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Reject keys the section's dataclass does not define."""
        known = {f.name for f in fields(_SECTIONS[section])}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=params[key])
            for key in params
            if key not in known
        ]

    @staticmethod
    def validate_range_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate range parameters."""
        errors = []

        for name in ("days_per_year", "hours_per_day", "anytime_years"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"ranges.{name}",
                        message="Must be a positive integer",
                        value=value
                    ))

        if "boundary_offset_hours" in params:
            value = params["boundary_offset_hours"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="ranges.boundary_offset_hours",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_vocabulary_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate vocabulary parameters."""
        errors = []

        for name in ("min_year", "max_year"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 1 or value > 9999:
                    errors.append(ValidationError(
                        field=f"vocabulary.{name}",
                        message="Must be an integer year between 1 and 9999",
                        value=value
                    ))

        if not errors and "min_year" in params and "max_year" in params:
            if params["min_year"] > params["max_year"]:
                errors.append(ValidationError(
                    field="vocabulary.min_year",
                    message="Must not exceed max_year",
                    value=params["min_year"]
                ))

        return errors

    @staticmethod
    def validate_generator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate generator parameters."""
        errors = []

        if "seed" in params:
            value = params["seed"]
            if value is not None and not _is_int(value):
                errors.append(ValidationError(
                    field="generator.seed",
                    message="Must be an integer or null",
                    value=value
                ))

        if "default_format" in params:
            value = params["default_format"]
            if value not in _FORMATS:
                errors.append(ValidationError(
                    field="generator.default_format",
                    message=f"Must be one of {', '.join(_FORMATS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in _SECTIONS:
                errors.append(ValidationError(field=section, message="Unknown section", value=config[section]))
            elif not isinstance(config[section], dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=config[section]))
            else:
                errors.extend(ConfigValidator.validate_unknown_keys(section, config[section]))

        if isinstance(config.get("ranges"), dict):
            errors.extend(ConfigValidator.validate_range_params(config["ranges"]))

        if isinstance(config.get("vocabulary"), dict):
            errors.extend(ConfigValidator.validate_vocabulary_params(config["vocabulary"]))

        if isinstance(config.get("generator"), dict):
            errors.extend(ConfigValidator.validate_generator_params(config["generator"]))

        return errors
