"""Reproducible random test data for unit tests."""

from fixture_gen.config import GeneratorConfig, LoggingConfig
from fixture_gen.exceptions import (
    ConfigurationError,
    EmptyChoiceError,
    FixtureGenError,
    PatternError,
)
from fixture_gen.generators import (
    Generator,
    RandomSource,
    build_time,
    fixed_rand,
    new,
    simple_rand,
    to_upper_first,
)

__all__ = [
    "ConfigurationError",
    "EmptyChoiceError",
    "FixtureGenError",
    "Generator",
    "GeneratorConfig",
    "LoggingConfig",
    "PatternError",
    "RandomSource",
    "build_time",
    "fixed_rand",
    "new",
    "simple_rand",
    "to_upper_first",
]
