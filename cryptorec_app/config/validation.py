"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from zoneinfo import available_timezones

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate prices folder parameters."""
        errors = []

        if "prices_folder" in params:
            value = params["prices_folder"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="prices_folder",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "file_suffix" in params:
            value = params["file_suffix"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="file_suffix",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "header_lines" in params:
            value = params["header_lines"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="header_lines",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "use_folder_codes" in params:
            value = params["use_folder_codes"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="use_folder_codes",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate store parameters."""
        errors = []

        if "db_path" in params:
            value = params["db_path"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="db_path",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "seed_codes" in params:
            value = params["seed_codes"]
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(code, str) and code.isalpha() and len(code) <= 5 for code in value
            ):
                errors.append(ValidationError(
                    field="seed_codes",
                    message="Must be a list of alphabetic codes of at most 5 characters",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate calendar parameters."""
        errors = []

        if "timezone" in params:
            value = params["timezone"]
            if not isinstance(value, str) or value not in available_timezones() | {"UTC"}:
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be an IANA timezone name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_history_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate history lookback bounds."""
        errors = []
        min_months = params.get("min_months", 1)
        max_months = params.get("max_months", 36)

        if not isinstance(min_months, int) or min_months <= 0:
            errors.append(ValidationError(
                field="min_months",
                message="Must be a positive integer",
                value=min_months
            ))
        elif not isinstance(max_months, int) or max_months < min_months:
            errors.append(ValidationError(
                field="max_months",
                message="Must be an integer not lower than min_months",
                value=max_months
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
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "source" in config:
            errors.extend(ConfigValidator.validate_source_params(config["source"]))

        if "storage" in config:
            errors.extend(ConfigValidator.validate_storage_params(config["storage"]))

        if "time" in config:
            errors.extend(ConfigValidator.validate_time_params(config["time"]))

        if "history" in config:
            errors.extend(ConfigValidator.validate_history_params(config["history"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
