"""
Configuration management for TALLY.

Uses environment variables and sensible defaults.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class TrackingConfig:
    """Tracker validation and rendering configuration."""
    strict: bool = True                 # Reject negative work deltas and weights
    unnamed_label: str = "<unnamed>"    # Shown by debug() for nameless children
    root_label: str = "top"             # Shown by debug() for a nameless root group


@dataclass
class ReporterConfig:
    """Console reporter configuration."""
    bar_width: int = 40
    chunk_size: int = 64 * 1024         # Block size used when copying streams


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5


@dataclass
class Config:
    """Main library configuration."""
    logs_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")

    # Sub-configs
    tracking: TrackingConfig = field(default_factory=TrackingConfig)
    reporter: ReporterConfig = field(default_factory=ReporterConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def __post_init__(self):
        self._load_from_env()

    def _load_from_env(self):
        """Load configuration from environment variables."""
        if os.environ.get("TALLY_LOG_LEVEL"):
            self.log.level = os.environ["TALLY_LOG_LEVEL"]
        if os.environ.get("TALLY_STRICT"):
            self.tracking.strict = os.environ["TALLY_STRICT"].strip().lower() not in FALSE_VALUES
        if os.environ.get("TALLY_CHUNK_SIZE"):
            self.reporter.chunk_size = int(os.environ["TALLY_CHUNK_SIZE"])
        if os.environ.get("TALLY_LOGS_DIR"):
            self.logs_dir = Path(os.environ["TALLY_LOGS_DIR"])


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config):
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config():
    """Drop the global configuration so the next access rereads the environment."""
    global _config
    _config = None
