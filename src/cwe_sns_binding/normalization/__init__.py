"""Normalization helpers for raw ``cweSns`` event configuration."""

from .config_normalizer import (
    USAGE,
    InvalidFieldTypeError,
    MissingRequiredFieldError,
    normalize_config,
    pascal_case,
)

__all__ = [
    "InvalidFieldTypeError",
    "MissingRequiredFieldError",
    "USAGE",
    "normalize_config",
    "pascal_case",
]
