"""Base generator class owning the random source."""

from __future__ import annotations

from abc import ABC

from fixture_gen.generators.source import RandomSource, simple_rand


class BaseGenerator(ABC):
    """Base class for generators drawing from a ``RandomSource``.

    Parameters
    ----------
    source : RandomSource | None
        Source of all draws. When ``None`` a time-based source is
        created, use ``fixed_rand()`` for reproducible output.
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source = source if source is not None else simple_rand()

    @property
    def source(self) -> RandomSource:
        """The random source backing this generator."""
        return self._source

    def integer(self, lo: int, hi: int) -> int:
        """Return an int in ``[lo, hi]``, bounds may be given in any order."""
        return self._source.int_n(lo, hi)
