"""
Default configuration values for the Lembrancas API.

This module defines default values and their expected data types for all
configurable parameters. These defaults are used when values are not
specified in the configuration file or the environment.

Format: CONFIG_DEFAULTS[key] = (default_value, data_type)
"""

CONFIG_DEFAULTS = {
    # Logging configuration
    "log_level": ("INFO", str),

    # CORS: origin echoed in Access-Control-Allow-Origin
    "cors_origin": ("http://localhost:8081", str),

    # API server
    "api_host": ("0.0.0.0", str),
    "api_port": (8080, int),
}


def get_default(key: str):
    """
    Get the default value for a configuration key.

    Args:
        key: Configuration key name

    Returns:
        The default value, or None if key is not found
    """
    if key in CONFIG_DEFAULTS:
        return CONFIG_DEFAULTS[key][0]
    return None


def get_type(key: str):
    """
    Get the expected data type for a configuration key.

    Args:
        key: Configuration key name

    Returns:
        The expected data type, or str if key is not found
    """
    if key in CONFIG_DEFAULTS:
        return CONFIG_DEFAULTS[key][1]
    return str
