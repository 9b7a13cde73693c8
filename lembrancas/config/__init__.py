"""
Configuration management modules.
"""

from lembrancas.config.loader import ConfigLoader
from lembrancas.config.defaults import CONFIG_DEFAULTS, get_default, get_type

__all__ = [
    "ConfigLoader",
    "CONFIG_DEFAULTS",
    "get_default",
    "get_type",
]
