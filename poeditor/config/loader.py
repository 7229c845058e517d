"""Configuration file loader and validator.

Reads client settings from an optional INI file, applies environment and keyword overrides,
and validates the result. Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import ast
import configparser
import logging
import os
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from poeditor.models.config_models import Config
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import Callable
    from dataclasses import Field as DataclassField
else:
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TOKEN_ENV_VAR: Final[str] = "POEDITOR_API_TOKEN"
DEBUG_ENV_VAR: Final[str] = "DEBUG"


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration contains an invalid type."""


class ConfigLoader:
    """Builds a validated `Config`.

    Sources, lowest precedence first: dataclass defaults, the INI file, the environment
    (``POEDITOR_API_TOKEN``; ``DEBUG`` set to the literal ``"true"``), keyword overrides.

    Args:
        config_filename (str | Path | None): INI file to load; None skips the file.
        api_token (str | None): Override for ``POEDITOR.API_TOKEN``.
        debug (bool | None): Override for ``GENERAL.DEBUG``.

    Raises:
        ConfigFileNotFoundError: If a named configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(self, config_filename: str | Path | None = None, **args: Any) -> None:
        self.config = Config()
        msg: str

        if config_filename is not None:
            config_path = Path(config_filename)
            if not config_path.exists():
                msg = f"Configuration file '{config_filename}' not found."
                raise ConfigFileNotFoundError(msg)

            parser: ConfigParser = ConfigParser()
            try:
                parser.read(config_path, encoding="utf-8")
            except configparser.Error as err:
                msg = f"Failed to parse configuration file '{config_filename}': {err}"
                raise ConfigFormatError(msg) from None
            self._convert_settings(parser)

        self._apply_environment()
        if args.get("api_token") is not None:
            self.config.POEDITOR.API_TOKEN = args["api_token"]
        if args.get("debug") is not None:
            self.config.GENERAL.DEBUG = bool(args["debug"])
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every known key of every known section from the parser into the Config object."""
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                setattr(getattr(self.config, section.name), key.name, formatter.apply_format(section, key))

    def _apply_environment(self) -> None:
        token: str | None = os.getenv(TOKEN_ENV_VAR)
        if token:
            logger.debug("API token taken from '%s'", TOKEN_ENV_VAR)
            self.config.POEDITOR.API_TOKEN = token
        if os.getenv(DEBUG_ENV_VAR) == "true":
            self.config.GENERAL.DEBUG = True

    def _validate_settings(self) -> None:
        """Check the merged settings.

        Raises:
            ConfigValueError: If the token is missing, the base URL is not http(s), or the timeout is negative.
        """
        msg: str
        if not self.config.POEDITOR.API_TOKEN.strip():
            msg = f"'POEDITOR.API_TOKEN' is empty. Set it in the configuration file or in '{TOKEN_ENV_VAR}'."
            raise ConfigValueError(msg)
        if not self.config.POEDITOR.BASE_URL.startswith(("https://", "http://")):
            msg = f"Unsupported URL used for 'POEDITOR.BASE_URL': {self.config.POEDITOR.BASE_URL}"
            raise ConfigValueError(msg)
        if self.config.POEDITOR.TIMEOUT < 0:
            msg = f"'POEDITOR.TIMEOUT' must not be negative: {self.config.POEDITOR.TIMEOUT}"
            raise ConfigValueError(msg)
        if self.config.LOGGING.LEVEL.upper() not in logging.getLevelNamesMapping():
            logger.warning("Unknown value '%s' is set for 'LOGGING.LEVEL'", self.config.LOGGING.LEVEL)


class _ConfigFormatter:
    """Converts INI string values to the type declared on the Config field."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert an INI value to the type of the field's current value.

        Strings may be written quoted or bare.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If an unexpected type is encountered during coercion.
        """
        formatters: dict[type, Callable[[DataclassField[Any], DataclassField[Any]], bool | float]] = {
            bool: self.parse_as_boolean,
            float: self.parse_as_float,
        }

        formatter: Callable[[DataclassField[Any], DataclassField[Any]], bool | float] | None = formatters.get(
            type(getattr(getattr(self.config, section.name), key.name))
        )
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigTypeError(msg) from err

        return self.parse_as_string(section, key)

    def parse_as_string(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        value_str: str = self.parser.get(section.name, key.name, raw=True).strip()
        if value_str[:1] in ("'", '"'):
            try:
                value: Any = ast.literal_eval(value_str)
            except (ValueError, SyntaxError) as err:
                msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
                raise ConfigValueError(msg) from err
            if not isinstance(value, str):
                msg = f"Expected a string for {section.name}.{key.name}: {value_str}"
                raise ConfigTypeError(msg)
            return value
        return value_str

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return float(value)

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)
