"""Configuration exception module.

This module defines exception types specific to the configuration system.
"""

from hemp.core.exceptions import HempError


class ConfigError(HempError):
    """Exception raised for configuration errors.

    This includes errors such as:
    - Invalid YAML in the configuration file
    - Unknown casing names
    - Configuration validation failures
    """
    pass
