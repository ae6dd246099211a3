from .loader import ConfigError, load_config, parse_config
from .models import LoggingConfig, StoreConfig

# Config exports are intentionally small.
__all__ = ["ConfigError", "LoggingConfig", "StoreConfig", "load_config", "parse_config"]
