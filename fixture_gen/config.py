"""Configuration management for fixture-gen."""

import os
from dataclasses import dataclass, field

from fixture_gen.exceptions import ConfigurationError

SEED_ENV = "FIXTURE_GEN_SEED"
LOG_LEVEL_ENV = "FIXTURE_GEN_LOG_LEVEL"
LOG_FORMAT_ENV = "FIXTURE_GEN_LOG_FORMAT"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"


@dataclass
class GeneratorConfig:
    """Main configuration for fixture-gen.

    A ``seed`` of ``None`` selects a time-based random source.
    """

    seed: int | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create config from environment variables."""
        raw_seed = os.getenv(SEED_ENV)
        seed = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as exc:
                raise ConfigurationError(f"{SEED_ENV} must be an integer, got {raw_seed!r}") from exc

        format_type = os.getenv(LOG_FORMAT_ENV, "standard").lower()
        if format_type not in ("standard", "json"):
            raise ConfigurationError(f"{LOG_FORMAT_ENV} must be 'standard' or 'json', got {format_type!r}")

        return cls(
            seed=seed,
            logging=LoggingConfig(
                level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
                format_type=format_type,
            ),
        )
