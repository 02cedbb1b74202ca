"""
Configuration validation module.
"""

from dataclasses import dataclass
from typing import Dict
from pathlib import Path


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    log_dir = Path(path).parent
    if not log_dir.exists():
        return ValidationResult(False, f"Log directory does not exist: {log_dir}")
    return ValidationResult(True, "Valid log file path")


def validate_bool(value: str) -> ValidationResult:
    """Validate a boolean flag."""
    if value.strip().lower() in ("1", "0", "true", "false", "yes", "no", "on", "off"):
        return ValidationResult(True, "Valid flag")
    return ValidationResult(False, f"Invalid flag value: {value}")


def validate_padding(value: str) -> ValidationResult:
    """Validate the alignment padding."""
    if value.strip().isdigit():
        return ValidationResult(True, "Valid padding")
    return ValidationResult(
        False, f"Invalid padding: {value}. Must be a non-negative integer"
    )


def validate_config(config: Dict[str, str]) -> Dict[str, ValidationResult]:
    """Validate all configuration settings."""
    results = {}

    if config.get("LOG_LEVEL") is not None:
        results["LOG_LEVEL"] = validate_log_level(config["LOG_LEVEL"])

    if config.get("LOG_FILE") is not None:
        results["LOG_FILE"] = validate_log_file(config["LOG_FILE"])

    if config.get("CHECK_HEADS") is not None:
        results["CHECK_HEADS"] = validate_bool(config["CHECK_HEADS"])

    if config.get("ALIGN_PADDING") is not None:
        results["ALIGN_PADDING"] = validate_padding(config["ALIGN_PADDING"])

    return results
