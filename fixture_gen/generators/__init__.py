"""Random test data generators."""

from fixture_gen.generators.base import BaseGenerator
from fixture_gen.generators.generator import (
    DEFAULT_MAX_WORD_LEN,
    DEFAULT_MIN_WORD_LEN,
    MAX_WORD_LEN,
    MIN_WORD_LEN,
    Generator,
    new,
    to_upper_first,
)
from fixture_gen.generators.pattern import PATTERN_CLASSES, expand_pattern
from fixture_gen.generators.source import FIXED_SEED, RandomSource, fixed_rand, simple_rand
from fixture_gen.generators.times import build_time

__all__ = [
    "BaseGenerator",
    "DEFAULT_MAX_WORD_LEN",
    "DEFAULT_MIN_WORD_LEN",
    "FIXED_SEED",
    "Generator",
    "MAX_WORD_LEN",
    "MIN_WORD_LEN",
    "PATTERN_CLASSES",
    "RandomSource",
    "build_time",
    "expand_pattern",
    "fixed_rand",
    "new",
    "simple_rand",
    "to_upper_first",
]
