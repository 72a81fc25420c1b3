"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import (
    ChipParams,
    LoggingParams,
    ProjectionParams,
    SelectionParams,
    WindowParams,
)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

SECTIONS = {
    "window": WindowParams,
    "projection": ProjectionParams,
    "chips": ChipParams,
    "selection": SelectionParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_window_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate comparison window parameters."""
        errors = []

        if "offset_months" in params:
            value = params["offset_months"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="offset_months",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_projection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate projection parameters."""
        errors = []

        if "horizon_months" in params:
            value = params["horizon_months"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="horizon_months",
                    message="Must be a positive integer",
                    value=value
                ))

        if "adjustment_step_pct" in params:
            value = params["adjustment_step_pct"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="adjustment_step_pct",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_chip_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate chip lookup parameters."""
        errors = []

        if "storage_technology" in params:
            value = params["storage_technology"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="storage_technology",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_selection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate module family filter parameters."""
        errors = []

        for marker in ("sbc_marker", "compute_module_marker"):
            if marker in params:
                value = params[marker]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=marker,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "default_memory_size" in params:
            value = params["default_memory_size"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="default_memory_size",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_known_fields(section: str, params: Any) -> list[ValidationError]:
        """Reject non-mapping sections and keys the section does not define."""
        if not isinstance(params, dict):
            return [ValidationError(field=section, message="Must be a mapping", value=params)]

        known = {f.name for f in fields(SECTIONS[section])}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items()
            if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))

        for section in SECTIONS:
            if section in config:
                errors.extend(ConfigValidator.validate_known_fields(section, config[section]))

        if isinstance(config.get("window"), dict):
            errors.extend(ConfigValidator.validate_window_params(config["window"]))

        if isinstance(config.get("projection"), dict):
            errors.extend(ConfigValidator.validate_projection_params(config["projection"]))

        if isinstance(config.get("chips"), dict):
            errors.extend(ConfigValidator.validate_chip_params(config["chips"]))

        if isinstance(config.get("selection"), dict):
            errors.extend(ConfigValidator.validate_selection_params(config["selection"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
