"""Pytest configuration and fixtures."""

import logging

import pytest

from fixture_gen.generators import Generator, RandomSource, fixed_rand


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def gen() -> Generator:
    """Generator with the fixed random source."""
    return Generator(fixed_rand())


@pytest.fixture
def seeded_gen(seed: int) -> Generator:
    """Generator with an explicitly seeded source."""
    return Generator(RandomSource(seed))


@pytest.fixture
def sample_names() -> list[str]:
    """Sample full names for text generation."""
    return ["Alice Keller", "Bruce T. Wagner", "Jean-Luc O'Brien"]


@pytest.fixture
def package_logger():
    """The package logger, with its handlers restored after the test."""
    logger = logging.getLogger("fixture_gen")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
