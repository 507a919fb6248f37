"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from core.trans.languages import Language
from models.config_models import Config
from models.translation_models import ProviderKind
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField
else:
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    This class reads the configuration file, applies formatting rules, and validates settings.
    It raises exceptions for any issues encountered during the loading process.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        provider (str | None): Optional override for the translation provider.
        debug (bool): Force debug mode on.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        **args,
    ) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()

        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)
        self.config.GENERAL.SCRIPT_NAME = script_name
        # Apply command-line argument overrides
        if args.get("provider") is not None:
            self.config.TRANSLATION.PROVIDER = args["provider"]
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Convert configuration settings from the parser to the Config object.

        Args:
            parser (ConfigParser): Parsed INI data.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            self._convert_section_field(parser, formatter, section)

    def _convert_section_field(
        self, parser: ConfigParser, formatter: _ConfigFormatter, section: DataclassField[Any]
    ) -> None:
        """Convert all fields in a configuration section.

        Args:
            parser (ConfigParser): Parsed INI data.
            formatter (_ConfigFormatter): Formatter used to coerce string values to typed values.
            section (Field[Any]): Target configuration section dataclass field.

        Raises:
            ConfigFormatError: If a value fails to format correctly.
        """
        for key in fields(getattr(self.config, section.name)):
            try:
                parser[section.name][key.name]
            except KeyError:
                logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                continue

            formatted_value = formatter.apply_format(section, key)
            setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the provider, the languages and the timeout.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        self._validate_provider("TRANSLATION", "PROVIDER")
        self._validate_language("TRANSLATION", "TARGET_LANGUAGE", required=True)
        self._validate_language("TRANSLATION", "SOURCE_LANGUAGE", required=False)
        self._validate_positive("TRANSLATION", "TIMEOUT")

    def _validate_provider(self, section_name: str, key_name: str) -> None:
        value: str = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"

        kind: ProviderKind | None = ProviderKind.parse(value)
        if kind is None:
            msg: str = f"Unknown translation provider set for '{field_name}': '{value}'"
            raise ConfigValueError(msg)
        if kind != value:
            logger.info("'%s' is set to '%s', normalized to '%s'.", field_name, value, kind)
        setattr(getattr(self.config, section_name), key_name, kind.value)

    def _validate_language(self, section_name: str, key_name: str, *, required: bool) -> None:
        """Check that a language setting names a known language.

        An empty value is accepted for optional settings and means automatic detection.

        Raises:
            ConfigValueError: If the language is unknown, or empty but required.
        """
        value: str = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"
        msg: str

        if not value:
            if required:
                msg = f"'{field_name}' must be set."
                raise ConfigValueError(msg)
            return

        try:
            lang: Language = Language.parse(value)
        except ValueError as err:
            msg = f"Unsupported language used for '{field_name}': '{value}'"
            raise ConfigValueError(msg) from err
        setattr(getattr(self.config, section_name), key_name, lang.value)

    def _validate_positive(self, section_name: str, key_name: str) -> None:
        value: float = getattr(getattr(self.config, section_name), key_name)
        if value <= 0:
            msg: str = f"'{section_name}.{key_name}' must be greater than 0: {value}"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Converts INI string values to typed Python objects (bool, int, float, str)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert INI value to the expected Python type based on the Config field type.

        Args:
            section (DataclassField[Any]): Configuration section field containing the key.
            key (DataclassField[Any]): Target field within the section.

        Returns:
            Any: Parsed value coerced to the type declared in the config dataclass.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If the field has a type the formatter does not handle.
        """
        formatters: dict[
            type[bool | int | float | str],
            Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float | str],
        ] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
            str: self.parse_as_string,
        }

        field_type: type = type(getattr(getattr(self.config, section.name), key.name))
        formatter: Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float | str] | None = (
            formatters.get(field_type)
        )
        if formatter is None:
            msg: str = f"Unsupported type for {section.name}.{key.name}: {field_type.__name__}"
            raise ConfigTypeError(msg)

        try:
            return formatter(section, key)
        except ValueError as err:
            msg = f"Invalid value for {section.name}.{key.name}: {err}"
            raise ConfigValueError(msg) from err

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        """Convert INI string to float."""
        return float(self.parse_as_string(section, key))

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        """Convert INI string to integer."""
        return int(float(self.parse_as_string(section, key)))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        """Convert INI string to boolean."""
        return self.parser.getboolean(section.name, key.name)

    def parse_as_string(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        """Return the INI string with surrounding whitespace and one pair of matching quotes removed."""
        value: str = self.parser.get(section.name, key.name).strip()
        for char in ("'", '"'):
            if len(value) >= 2 and value.startswith(char) and value.endswith(char):
                return value[1:-1]
        return value
