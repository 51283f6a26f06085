"""Configuration module for rnareport.

Constants are available via: from rnareport.config.constants import ...
Storage settings: from rnareport.config import StoreConfig
Debug/logging: from rnareport.config.debug import get_logger, set_log_level
"""

from rnareport.config.settings import StoreConfig
from rnareport.config.debug import (
    get_logger,
    set_log_level,
    get_log_level,
)

__all__ = [
    "StoreConfig",
    "get_logger",
    "set_log_level",
    "get_log_level",
]
