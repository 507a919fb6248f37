"""Configuration loading and validation for the translator.

This package provides utilities for loading, parsing, and validating configuration
settings from an INI file.
"""

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigTypeError",
    "ConfigValueError",
]
