"""hemp configuration system.

Presenter defaults can be set from a YAML file and from environment
variables, validated with Pydantic.

Example usage:
```python
from hemp.core.config import get_config, load_config

# Load configuration from hemp.yaml / HEMP_* variables
config = load_config()

# Casing used by presenters that leave it unset
casing = config.default_casing
```

Recognised environment variables:
- ``HEMP_CONFIG``: path of the YAML file (default ``hemp.yaml``)
- ``HEMP_DEFAULT_CASING``: ``snake_case`` or ``camelCase``
- ``HEMP_LOGGING_LEVEL``: level for the ``hemp`` loggers
"""

from .schema import LoggingConfig, PresenterConfig
from .loader import get_config, load_config, reset_config, set_config
from .exceptions import ConfigError

__all__ = [
    'PresenterConfig',
    'LoggingConfig',
    'load_config',
    'get_config',
    'set_config',
    'reset_config',
    'ConfigError'
]
