"""Core configuration and exceptions."""
from .config import Config, get_config, set_config, reset_config
from .exceptions import (
    TallyError, InvalidWorkError, InvalidWeightError, NotATrackerError,
    CyclicGroupError, DestinationError,
)

__all__ = [
    "Config", "get_config", "set_config", "reset_config",
    "TallyError", "InvalidWorkError", "InvalidWeightError", "NotATrackerError",
    "CyclicGroupError", "DestinationError",
]
