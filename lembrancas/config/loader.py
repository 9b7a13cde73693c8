"""
Configuration loader for the Lembrancas API.

Values come from the ``[Common]`` section of an INI file and may be
overridden by environment variables named after the upper-cased key
(``cors_origin`` -> ``CORS_ORIGIN``). Anything left unset falls back to
CONFIG_DEFAULTS.
"""

import configparser
import logging
import os
from typing import Any, Dict, Mapping, Optional

from lembrancas.config.defaults import CONFIG_DEFAULTS, get_default, get_type


logger = logging.getLogger(__name__)

SECTION = "Common"


class ConfigLoader:
    """
    Load configuration from an INI file with environment overrides.

    Attributes:
        cors_origin: Origin echoed in Access-Control-Allow-Origin
        log_level: Logging level name
        api_host: Interface the API server binds to
        api_port: Port the API server listens on
    """

    def __init__(
        self,
        config_file: str = "config/config.ini",
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the configuration loader.

        Args:
            config_file: Path to the INI configuration file (may not exist)
            environ: Environment lookup; defaults to the process environment
        """
        self.config_file = config_file
        self.environ = environ if environ is not None else os.environ
        self.config = configparser.ConfigParser()
        self.config_data: Dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load every known key from file and environment."""
        read_files = self.config.read(self.config_file)
        if not read_files:
            logger.debug(f"Config file {self.config_file} not found, using defaults")

        for key in CONFIG_DEFAULTS:
            raw = self.environ.get(key.upper())
            if not raw:
                raw = self.config.get(SECTION, key, fallback=None)
            self.config_data[key] = self._parse_value(key, raw)

    def _parse_value(self, key: str, value: Any) -> Any:
        """
        Parse a configuration value based on its expected data type.

        Args:
            key: Configuration key
            value: Raw value from file or environment

        Returns:
            Parsed value in the correct type
        """
        default_value = get_default(key)
        data_type = get_type(key)

        if value is None or value == "":
            return default_value

        if data_type == bool:
            return str(value).strip().lower() in ["true", "1", "yes"]

        if data_type in [int, float]:
            try:
                return data_type(value)
            except ValueError:
                logger.warning(
                    f"Key {key} has issues for {data_type.__name__} conversion, "
                    f"using default {default_value!r}"
                )
                return default_value

        return value

    def get(self, key: str, fallback: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            fallback: Value returned when the key is unknown

        Returns:
            Configuration value or fallback
        """
        return self.config_data.get(key, fallback)

    def get_log_level(self) -> str:
        """Get the logging level from configuration."""
        return str(self.config_data.get("log_level", "INFO")).upper()

    def as_environ(self) -> Dict[str, str]:
        """
        Export the resolved values as an environment-style mapping.

        This is the lookup handed to StaticCORSMiddleware.
        """
        return {key.upper(): str(value) for key, value in self.config_data.items()}

    def __getattr__(self, key: str) -> Any:
        """
        Enable attribute-style access to configuration values.

        Args:
            key: Configuration key

        Returns:
            Configuration value
        """
        config_data = self.__dict__.get("config_data", {})
        if key in config_data:
            return config_data[key]
        raise AttributeError(key)
