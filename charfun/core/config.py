'''
Configuration management for charfun.

The configuration follows a layered approach:
1. Default values built into the dataclass sections below
2. An optional JSON user file named by the CHARFUN_CONFIG_FILE variable
3. Environment variables of the form CHARFUN_<SECTION>_<OPTION>
4. Runtime modifications through set_config

The numerical section holds the tuning constants of the characteristic
function engines (series tolerance, iteration cap of the Poisson series and
the chunk-size policy of the linear combinator). The logging section controls
the package logger.
'''

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import ConfigurationError
from .types import LogLevel

# Set up module-level logger
logger = logging.getLogger("charfun.core.config")

# Constants for configuration paths and environment variables
CONFIG_ENV_PREFIX = "CHARFUN_"
USER_CONFIG_FILE_ENV = "CHARFUN_CONFIG_FILE"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigSection(Enum):
    """Enumeration of configuration sections."""
    NUMERICAL = "numerical"
    LOGGING = "logging"


@dataclass
class NumericalConfig:
    """
    Numerical configuration settings.

    Attributes:
        series_tolerance: Poisson weight below which a mixture series stops
        max_series_terms: Iteration cap of the ascending Poisson branch
        chunk_budget: Number of components per chunk for a grid of grid_unit points
        grid_unit: Grid size at which a chunk holds exactly chunk_budget components
    """
    series_tolerance: float = 1e-12
    max_series_terms: int = 5000
    chunk_budget: int = 1000
    grid_unit: int = 2 ** 16


@dataclass
class LoggingConfig:
    """
    Logging configuration settings.

    Attributes:
        log_level: Level of the package logger
        log_format: Format string for log messages
        log_date_format: Format string for log message timestamps
        console_logging: Whether to attach a console handler
    """
    log_level: LogLevel = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    console_logging: bool = True


@dataclass
class CharFunConfig:
    """
    Complete configuration combining all sections.

    Attributes:
        numerical: Numerical configuration settings
        logging: Logging configuration settings
    """
    numerical: NumericalConfig = field(default_factory=NumericalConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Configuration manager.

    Holds the current configuration, applies the user file and environment
    overrides on initialization, validates every change and keeps the package
    logger in sync with the logging section.

    Attributes:
        _config: The current configuration object
        _initialized: Whether the manager has been initialized
        _config_file: Path to the user configuration file, if any
    """

    def __init__(self):
        """Initialize the configuration manager with default settings."""
        self._config = CharFunConfig()
        self._initialized = False
        self._config_file: Optional[Path] = None
        self._modified_keys = set()

    def initialize(self) -> None:
        """
        Initialize the configuration manager.

        Loads the user file if one is configured, applies environment
        overrides, validates the result and configures logging. Calling it
        again is a no-op.
        """
        if self._initialized:
            return

        self._load_user_config()
        self._apply_env_overrides()
        self._validate_config()
        self._setup_logging()

        self._initialized = True
        logger.debug("Configuration manager initialized")

    def _load_user_config(self) -> None:
        """Load the JSON file named by CHARFUN_CONFIG_FILE, if it exists."""
        env_file = os.environ.get(USER_CONFIG_FILE_ENV)
        if not env_file:
            return

        self._config_file = Path(env_file)
        if not self._config_file.exists():
            logger.debug(f"No user configuration file found at {self._config_file}")
            return

        try:
            with open(self._config_file, 'r') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load user configuration: {e}")
            return

        self._update_from_dict(user_config)
        logger.debug(f"Loaded user configuration from {self._config_file}")

    def _apply_env_overrides(self) -> None:
        """Apply CHARFUN_<SECTION>_<OPTION> environment variables."""
        for env_var, value in os.environ.items():
            if not env_var.startswith(CONFIG_ENV_PREFIX) or env_var == USER_CONFIG_FILE_ENV:
                continue

            # Remove prefix and split into section and option
            key = env_var[len(CONFIG_ENV_PREFIX):]
            parts = key.lower().split('_', 1)
            if len(parts) != 2:
                continue

            section, option = parts
            try:
                ConfigSection(section)
            except ValueError:
                continue

            section_obj = getattr(self._config, section)
            if not hasattr(section_obj, option):
                continue

            try:
                typed_value = self._coerce(getattr(section_obj, option), value)
            except ValueError as e:
                logger.warning(f"Failed to apply environment override {env_var}: {e}")
                continue

            setattr(section_obj, option, typed_value)
            logger.debug(f"Applied environment override: {env_var}={value}")

    @staticmethod
    def _coerce(current_value: Any, value: str) -> Any:
        """Convert an environment string to the type of the current value."""
        value_type = type(current_value)
        if value_type is bool:
            return value.lower() in ('true', 'yes', '1', 'y')
        if value_type is int:
            return int(value)
        if value_type is float:
            return float(value)
        if value_type is str and current_value in _VALID_LOG_LEVELS:
            return value.upper()
        return value

    def _setup_logging(self) -> None:
        """Configure the package logger from the logging section."""
        root_logger = logging.getLogger("charfun")

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(getattr(logging, self._config.logging.log_level))

        if self._config.logging.console_logging:
            formatter = logging.Formatter(
                fmt=self._config.logging.log_format,
                datefmt=self._config.logging.log_date_format
            )
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

    def _validate_config(self) -> None:
        """Validate every option of every section."""
        for section in ConfigSection:
            section_obj = getattr(self._config, section.value)
            for f in fields(section_obj):
                self._validate_option(section.value, f.name, getattr(section_obj, f.name))

    @staticmethod
    def _validate_option(section: str, option: str, value: Any) -> None:
        """
        Validate a single configuration value.

        Raises:
            ConfigurationError: If the value violates its constraint
        """
        if section == "numerical":
            if option == "series_tolerance":
                if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0 < value < 1:
                    raise ConfigurationError(
                        "series_tolerance must be a number in (0, 1)",
                        section=section, option=option, value=value
                    )
            elif not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(
                    f"{option} must be a positive integer",
                    section=section, option=option, value=value
                )
        elif section == "logging":
            if option == "log_level" and value not in _VALID_LOG_LEVELS:
                raise ConfigurationError(
                    f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}",
                    section=section, option=option, value=value
                )
            if option == "console_logging" and not isinstance(value, bool):
                raise ConfigurationError(
                    "console_logging must be a boolean",
                    section=section, option=option, value=value
                )

    def _update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update the configuration from a nested dictionary."""
        for section, options in config_dict.items():
            if not isinstance(options, dict) or not self.has_section(section):
                logger.warning(f"Ignoring unknown configuration section: {section}")
                continue
            section_obj = getattr(self._config, section)
            for option, value in options.items():
                if not hasattr(section_obj, option):
                    logger.warning(f"Ignoring unknown configuration option: {section}.{option}")
                    continue
                setattr(section_obj, option, value)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a nested dictionary."""
        return asdict(self._config)

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: Configuration section name
            option: Option name within the section
            default: Value returned when the option does not exist

        Returns:
            The configured value, or default
        """
        self.initialize()
        if not self.has_option(section, option):
            return default
        return getattr(getattr(self._config, section), option)

    def set(self, section: str, option: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Raises:
            ConfigurationError: If the section or option does not exist or
                the value is invalid
        """
        self.initialize()
        if not self.has_section(section):
            raise ConfigurationError(f"Unknown configuration section: {section}",
                                     section=section)
        if not self.has_option(section, option):
            raise ConfigurationError(f"Unknown configuration option: {section}.{option}",
                                     section=section, option=option)

        self._validate_option(section, option, value)
        setattr(getattr(self._config, section), option, value)
        self._modified_keys.add(f"{section}.{option}")
        logger.debug(f"Set configuration {section}.{option} = {value}")

        if section == "logging":
            self._setup_logging()

    def reset(self, section: Optional[str] = None, option: Optional[str] = None) -> None:
        """
        Reset configuration to defaults.

        Args:
            section: Section to reset, or None for the whole configuration
            option: Option to reset within section, or None for the whole section
        """
        if section is None:
            self._config = CharFunConfig()
            self._modified_keys.clear()
        else:
            if not self.has_section(section):
                raise ConfigurationError(f"Unknown configuration section: {section}",
                                         section=section)
            default_section = type(getattr(self._config, section))()
            if option is None:
                setattr(self._config, section, default_section)
                self._modified_keys = {k for k in self._modified_keys
                                       if not k.startswith(f"{section}.")}
            else:
                if not self.has_option(section, option):
                    raise ConfigurationError(f"Unknown configuration option: {section}.{option}",
                                             section=section, option=option)
                setattr(getattr(self._config, section), option, getattr(default_section, option))
                self._modified_keys.discard(f"{section}.{option}")

        self._setup_logging()
        logger.debug("Configuration reset")

    def get_modified_options(self) -> List[str]:
        """Return the options changed at runtime as 'section.option' keys."""
        return sorted(self._modified_keys)

    def has_section(self, section: str) -> bool:
        """Check whether a configuration section exists."""
        return section in {s.value for s in ConfigSection}

    def has_option(self, section: str, option: str) -> bool:
        """Check whether an option exists within a section."""
        return self.has_section(section) and hasattr(getattr(self._config, section), option)

    def get_section(self, section: str) -> Any:
        """Return the dataclass for a section."""
        self.initialize()
        if not self.has_section(section):
            raise ConfigurationError(f"Unknown configuration section: {section}",
                                     section=section)
        return getattr(self._config, section)


# Global configuration manager instance
_config_manager = ConfigManager()


def initialize_config() -> None:
    """Initialize the global configuration manager."""
    _config_manager.initialize()


def get_config(section: str, option: str, default: Any = None) -> Any:
    """Get a configuration value from the global manager."""
    return _config_manager.get(section, option, default)


def set_config(section: str, option: str, value: Any) -> None:
    """Set a configuration value on the global manager."""
    _config_manager.set(section, option, value)


def reset_config(section: Optional[str] = None, option: Optional[str] = None) -> None:
    """Reset the global configuration to defaults."""
    _config_manager.reset(section, option)


def get_config_manager() -> ConfigManager:
    """Return the global configuration manager."""
    return _config_manager


def get_numerical_config() -> NumericalConfig:
    """Return the numerical configuration section."""
    return _config_manager.get_section("numerical")


def get_logging_config() -> LoggingConfig:
    """Return the logging configuration section."""
    return _config_manager.get_section("logging")
