"""
Configuration for the waypoint route finder.

Defaults live here as module constants. ``SearchSettings.from_env`` reads
overrides from ``WAYPOINT_*`` environment variables; command-line flags
take precedence over both.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError
from .core.graph_paths.types import HeuristicMode
from .core.graph_paths.utils import MAX_QUEUE_SIZE

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_HEURISTIC = HeuristicMode.INERT
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_MEMORY_MB: Optional[float] = None  # No limit

ENV_PREFIX = "WAYPOINT_"


@dataclass(frozen=True)
class SearchSettings:
    """
    Settings for a search run.

    Attributes:
        heuristic (HeuristicMode): Built-in estimator to use
        max_queue_size (int): Frontier compaction threshold
        max_memory_mb (Optional[float]): Memory growth limit, None for unlimited
        log_level (str): Logging level name for the CLI
    """

    heuristic: HeuristicMode = DEFAULT_HEURISTIC
    max_queue_size: int = MAX_QUEUE_SIZE
    max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.max_queue_size <= 0:
            raise ConfigurationError("max_queue_size must be positive")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchSettings":
        """Build settings from ``WAYPOINT_*`` environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = environ.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        try:
            heuristic = HeuristicMode(get("HEURISTIC") or DEFAULT_HEURISTIC.value)
        except ValueError:
            raise ConfigurationError(f"Unknown heuristic mode: {get('HEURISTIC')}")

        try:
            raw_queue = get("MAX_QUEUE_SIZE")
            max_queue_size = int(raw_queue) if raw_queue else MAX_QUEUE_SIZE
            raw_memory = get("MAX_MEMORY_MB")
            max_memory_mb = float(raw_memory) if raw_memory else DEFAULT_MAX_MEMORY_MB
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}")

        return cls(
            heuristic=heuristic,
            max_queue_size=max_queue_size,
            max_memory_mb=max_memory_mb,
            log_level=get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )
