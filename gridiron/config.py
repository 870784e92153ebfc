"""
Season engine configuration.

Controls schedule shape, game length and worker behaviour.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class SimulationConfig:
    """Configuration for schedule generation and game simulation."""

    # Schedule shape
    weeks: int = field(default_factory=lambda: _env_int("GRIDIRON_WEEKS", 18))
    meetings: int = field(default_factory=lambda: _env_int("GRIDIRON_MEETINGS", 1))
    min_rematch_gap: int = field(default_factory=lambda: _env_int("GRIDIRON_MIN_REMATCH_GAP", 2))
    retry_budget: int = field(default_factory=lambda: _env_int("GRIDIRON_RETRY_BUDGET", 200))

    # Game simulation
    quarter_seconds: int = 900  # 15 minutes
    overtime_seconds: int = 600  # 10 minute regular season OT
    max_plays: int = field(default_factory=lambda: _env_int("GRIDIRON_MAX_PLAYS", 200))
    overtime: bool = field(
        default_factory=lambda: os.getenv("GRIDIRON_OVERTIME", "true").lower() == "true"
    )
    home_advantage: float = 1.5  # Rating points added to the home side

    # Worker bridge
    worker_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("GRIDIRON_WORKER_TIMEOUT", "60"))
    )

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.weeks < 1:
            errors.append("GRIDIRON_WEEKS must be at least 1")
        if self.meetings < 1:
            errors.append("GRIDIRON_MEETINGS must be at least 1")
        if self.min_rematch_gap < 0:
            errors.append("GRIDIRON_MIN_REMATCH_GAP cannot be negative")
        if self.retry_budget < 1:
            errors.append("GRIDIRON_RETRY_BUDGET must be at least 1")
        if self.max_plays < 1:
            errors.append("GRIDIRON_MAX_PLAYS must be at least 1")
        if self.worker_timeout_seconds <= 0:
            errors.append("GRIDIRON_WORKER_TIMEOUT must be positive")
        return errors


# Singleton config instance
_config: Optional[SimulationConfig] = None


def get_config() -> SimulationConfig:
    """Get the global simulation configuration."""
    global _config
    if _config is None:
        _config = SimulationConfig.from_env()
    return _config


def set_config(config: Optional[SimulationConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next ``get_config()`` re-read the environment.
    Useful for testing.
    """
    global _config
    _config = config
