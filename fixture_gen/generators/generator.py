"""Random test data generator.

``Generator`` turns draws of its ``RandomSource`` into typed values,
selections, words, names, text and internet-style strings.  It keeps no
state besides the source, so one instance can be shared between threads.

Usage::

    gen = Generator(fixed_rand())
    gen.integer(1, 6)            # 1..6
    gen.pattern("^C^v^c-^0^0")   # e.g. "Kol-47"
    gen.sentence()               # e.g. "Tebu rakola fi"
    gen.email()                  # e.g. "muzo.ka@tiperu.org"
"""

from __future__ import annotations

import time as _time
from datetime import datetime, timedelta, tzinfo
from typing import Sequence, TypeVar

from fixture_gen.config import GeneratorConfig
from fixture_gen.exceptions import EmptyChoiceError
from fixture_gen.generators.base import BaseGenerator
from fixture_gen.generators.corpora import (
    FEMALE_FIRST_NAMES,
    LAST_NAMES,
    MALE_FIRST_NAMES,
    TOP_LEVEL_DOMAINS,
    URL_SCHEMES,
)
from fixture_gen.generators.pattern import expand_pattern
from fixture_gen.generators.source import RandomSource
from fixture_gen.logging import get_logger, setup_logging

logger = get_logger(__name__)

T = TypeVar("T")

# Absolute word length bounds
MIN_WORD_LEN = 1
MAX_WORD_LEN = 25

# Length bounds of word()
DEFAULT_MIN_WORD_LEN = 2
DEFAULT_MAX_WORD_LEN = 10

MIN_SENTENCE_WORDS = 2
MAX_SENTENCE_WORDS = 15

MIN_PARAGRAPH_SENTENCES = 2
MAX_PARAGRAPH_SENTENCES = 10

SENTENCE_SEPARATOR = ". "

# Chance in percent that sentence_with_names() puts a name in place of a word
NAME_SUBSTITUTION_PERCENT = 20

_MICROSECOND = timedelta(microseconds=1)


def to_upper_first(word: str) -> str:
    """Return ``word`` with its first character upper-cased."""
    if not word:
        return word
    return word[0].upper() + word[1:]


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


class Generator(BaseGenerator):
    """Generate random values for tests.

    Parameters
    ----------
    source : RandomSource | None
        Source of all draws. ``None`` selects a time-based source.
    """

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> Generator:
        """Create a generator and set up logging from ``config``."""
        setup_logging(config.logging.level, config.logging.format_type)
        if config.seed is None:
            return cls()
        return cls(RandomSource(config.seed))

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def byte(self, lo: int = 0, hi: int = 255) -> int:
        """Return a byte value in ``[lo, hi]``, bounds clamped to 0..255."""
        return self.integer(_clamp(lo, 0, 255), _clamp(hi, 0, 255))

    def byte_string(self, lo: int, hi: int, count: int) -> bytes:
        """Return ``count`` bytes, each in ``[lo, hi]``."""
        return bytes(self.byte(lo, hi) for _ in range(max(count, 0)))

    def integers(self, lo: int, hi: int, count: int) -> list[int]:
        """Return ``count`` ints, each in ``[lo, hi]``."""
        return [self.integer(lo, hi) for _ in range(max(count, 0))]

    def uuid(self) -> bytes:
        """Return 16 random bytes.

        No version or variant bits are set, the value is only shaped
        like a UUID.
        """
        return self.byte_string(0, 255, 16)

    def percent(self) -> int:
        """Return an int in ``[0, 100]``."""
        return self.integer(0, 100)

    def flip_coin(self, percent: int) -> bool:
        """Return True with a chance of ``percent`` out of 100.

        ``percent`` is clamped to 0..100, so 0 never and 100 always
        returns True.
        """
        return self.integer(0, 99) < _clamp(percent, 0, 100)

    def duration(self, lo: timedelta, hi: timedelta) -> timedelta:
        """Return a duration in ``[lo, hi]`` with microsecond resolution."""
        micros = self.integer(lo // _MICROSECOND, hi // _MICROSECOND)
        return timedelta(microseconds=micros)

    def time(self, location: tzinfo | None, base: datetime, max_offset: timedelta) -> datetime:
        """Return a time between ``base`` and ``base + max_offset``.

        A negative ``max_offset`` gives a time in
        ``[base + max_offset, base]``.

        Parameters
        ----------
        location : tzinfo | None
            Zone the result is expressed in. ``None`` keeps the zone of
            ``base``.
        base : datetime
            One end of the range, the earliest result for positive offsets.
        max_offset : timedelta
            Largest offset added to ``base``, may be negative.

        Returns
        -------
        datetime
            Generated time.
        """
        result = base + self.duration(timedelta(0), max_offset)
        if location is None:
            return result
        return result.astimezone(location)

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------

    def one_of(self, *candidates: T) -> T:
        """Return one of the candidates, chosen uniformly.

        Raises
        ------
        EmptyChoiceError
            If no candidates are given.
        """
        return self._pick(candidates)

    def one_byte_of(self, *candidates: int) -> int:
        """Return one of the byte candidates."""
        return self._pick(candidates)

    def one_rune_of(self, text: str) -> str:
        """Return one character of ``text``."""
        return self._pick(text)

    def one_int_of(self, *candidates: int) -> int:
        """Return one of the int candidates."""
        return self._pick(candidates)

    def one_string_of(self, *candidates: str) -> str:
        """Return one of the string candidates."""
        return self._pick(candidates)

    def one_duration_of(self, *candidates: timedelta) -> timedelta:
        """Return one of the duration candidates."""
        return self._pick(candidates)

    def sleep_one_of(self, *candidates: timedelta) -> timedelta:
        """Sleep for one of the durations and return it."""
        chosen = self._pick(candidates)
        _time.sleep(chosen.total_seconds())
        return chosen

    def _pick(self, candidates: Sequence[T]) -> T:
        if not candidates:
            logger.debug("Selection called without candidates")
            raise EmptyChoiceError("cannot choose from an empty set of candidates")
        return candidates[self.integer(0, len(candidates) - 1)]

    # ------------------------------------------------------------------
    # Patterns and words
    # ------------------------------------------------------------------

    def pattern(self, template: str) -> str:
        """Expand the ``^``-tokens of ``template``.

        See ``fixture_gen.generators.pattern`` for the token classes.
        """
        return expand_pattern(template, self._pick)

    def word(self) -> str:
        """Return a lower case pronounceable word of default length."""
        return self.limited_word(DEFAULT_MIN_WORD_LEN, DEFAULT_MAX_WORD_LEN)

    def words(self, count: int) -> list[str]:
        """Return ``count`` words."""
        return [self.word() for _ in range(max(count, 0))]

    def limited_word(self, lo: int, hi: int) -> str:
        """Return a word with a length in ``[lo, hi]``.

        Both bounds are clamped to ``MIN_WORD_LEN..MAX_WORD_LEN`` and may
        be given in any order. Consonants and vowels alternate.
        """
        lo = _clamp(lo, MIN_WORD_LEN, MAX_WORD_LEN)
        hi = _clamp(hi, MIN_WORD_LEN, MAX_WORD_LEN)
        length = self.integer(lo, hi)
        tokens = ("^c", "^v") if self.flip_coin(50) else ("^v", "^c")
        return self.pattern("".join(tokens[i % 2] for i in range(length)))

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def name(self) -> tuple[str, str, str]:
        """Return first, middle and last name of either gender."""
        if self.flip_coin(50):
            return self.male_name()
        return self.female_name()

    def male_name(self) -> tuple[str, str, str]:
        """Return first, middle and last name of a man."""
        return (
            self.one_string_of(*MALE_FIRST_NAMES),
            self.one_string_of(*MALE_FIRST_NAMES),
            self.one_string_of(*LAST_NAMES),
        )

    def female_name(self) -> tuple[str, str, str]:
        """Return first, middle and last name of a woman."""
        return (
            self.one_string_of(*FEMALE_FIRST_NAMES),
            self.one_string_of(*FEMALE_FIRST_NAMES),
            self.one_string_of(*LAST_NAMES),
        )

    def names(self, count: int) -> list[str]:
        """Return ``count`` full names, some with a middle initial."""
        result = []
        for _ in range(max(count, 0)):
            first, middle, last = self.name()
            if self.flip_coin(50):
                result.append(f"{first} {middle[0]}. {last}")
            else:
                result.append(f"{first} {last}")
        return result

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def sentence(self) -> str:
        """Return 2 to 15 words starting with an upper case letter.

        No terminal punctuation is added.
        """
        words = self.words(self.integer(MIN_SENTENCE_WORDS, MAX_SENTENCE_WORDS))
        words[0] = to_upper_first(words[0])
        return " ".join(words)

    def sentence_with_names(self, names: Sequence[str]) -> str:
        """Return a sentence where some words are replaced by ``names``.

        A name counts with all its words against the 2 to 15 word budget.
        The period of a middle initial is dropped ("Bruce T Wagner") so
        ``". "`` stays the sentence separator of paragraphs.
        """
        count = self.integer(MIN_SENTENCE_WORDS, MAX_SENTENCE_WORDS)
        parts: list[str] = []
        used = 0
        while used < count:
            if names and self.flip_coin(NAME_SUBSTITUTION_PERCENT):
                name_words = self._pick(names).replace(".", "").split()
                if 0 < len(name_words) <= count - used:
                    parts.extend(name_words)
                    used += len(name_words)
                    continue
            parts.append(self.word())
            used += 1
        parts[0] = to_upper_first(parts[0])
        return " ".join(parts)

    def paragraph(self) -> str:
        """Return 2 to 10 sentences joined by ``". "``."""
        count = self.integer(MIN_PARAGRAPH_SENTENCES, MAX_PARAGRAPH_SENTENCES)
        return SENTENCE_SEPARATOR.join(self.sentence() for _ in range(count))

    def paragraph_with_names(self, names: Sequence[str]) -> str:
        """Return a paragraph built from ``sentence_with_names``."""
        count = self.integer(MIN_PARAGRAPH_SENTENCES, MAX_PARAGRAPH_SENTENCES)
        return SENTENCE_SEPARATOR.join(self.sentence_with_names(names) for _ in range(count))

    # ------------------------------------------------------------------
    # Internet syntax
    # ------------------------------------------------------------------

    def domain(self) -> str:
        """Return a domain name like ``kelamo-17.tibu.org``."""
        labels = [self._domain_label() for _ in range(self.integer(1, 3))]
        labels.append(self.one_string_of(*TOP_LEVEL_DOMAINS))
        return ".".join(labels)

    def url(self) -> str:
        """Return a URL with an http, https or ftp scheme."""
        url = f"{self.one_string_of(*URL_SCHEMES)}://{self.domain()}"
        if self.flip_coin(60):
            url += "/" + "/".join(self.words(self.integer(1, 3)))
        if self.flip_coin(30):
            url += f"?{self.word()}={self.pattern('^z^z^z^z^z')}"
        return url

    def email(self) -> str:
        """Return an e-mail address with a generated domain."""
        form = self.integer(0, 3)
        if form == 0:
            local = self.word()
        elif form == 1:
            local = f"{self.word()}.{self.word()}"
        elif form == 2:
            local = self.word() + self.pattern("^0^0")
        else:
            local = f"{self.word()}+{self.word()}"
        return f"{local}@{self.domain()}"

    def _domain_label(self) -> str:
        label = self.limited_word(3, 10)
        if self.flip_coin(20):
            label += self.pattern("-^1^0")
        return label


def new(source: RandomSource | None = None) -> Generator:
    """Create a generator bound to ``source``."""
    return Generator(source)
