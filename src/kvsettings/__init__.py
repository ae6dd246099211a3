from .config import ConfigError, LoggingConfig, StoreConfig, load_config
from .domain import StoreClosedError
from .ports import AllocationError, Allocator
from .settings import Settings

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "Allocator",
    "ConfigError",
    "LoggingConfig",
    "Settings",
    "StoreClosedError",
    "StoreConfig",
    "__version__",
    "load_config",
]
