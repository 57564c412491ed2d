"""Two-character token template engine.

A template is copied left to right.  ``^`` followed by a class tag is
replaced by one character drawn from that class, ``^^`` yields a literal
``^``.  Everything else passes through unchanged.

=====  ==============================
Tag    Alphabet
=====  ==============================
``0``  digits 0-9
``1``  digits 1-9
``o``  octal digits 0-7
``h``  hex digits, lower case
``H``  hex digits, upper case
``a``  Latin letters, lower case
``A``  Latin letters, upper case
``c``  consonants, lower case
``C``  consonants, upper case
``v``  vowels, lower case
``V``  vowels, upper case
``z``  letters and digits, lower case
``Z``  letters and digits, upper case
=====  ==============================
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Callable, Mapping

from fixture_gen.exceptions import PatternError
from fixture_gen.logging import get_logger

logger = get_logger(__name__)

ESCAPE = "^"

VOWELS = "aeiou"
CONSONANTS = "".join(c for c in string.ascii_lowercase if c not in VOWELS)

PATTERN_CLASSES: Mapping[str, str] = MappingProxyType(
    {
        "0": string.digits,
        "1": string.digits[1:],
        "o": string.octdigits,
        "h": string.digits + "abcdef",
        "H": string.digits + "ABCDEF",
        "a": string.ascii_lowercase,
        "A": string.ascii_uppercase,
        "c": CONSONANTS,
        "C": CONSONANTS.upper(),
        "v": VOWELS,
        "V": VOWELS.upper(),
        "z": string.ascii_lowercase + string.digits,
        "Z": string.ascii_uppercase + string.digits,
    }
)


def expand_pattern(template: str, pick: Callable[[str], str]) -> str:
    """Expand all tokens of ``template``.

    Parameters
    ----------
    template : str
        Template containing ``^``-tokens.
    pick : Callable[[str], str]
        Chooses one character of the given alphabet.

    Returns
    -------
    str
        The expanded string.

    Raises
    ------
    PatternError
        If a ``^`` is followed by an unknown tag or ends the template.
    """
    out: list[str] = []
    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch != ESCAPE:
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            logger.debug("Trailing escape in pattern %r", template)
            raise PatternError(template, i)
        tag = template[i + 1]
        if tag == ESCAPE:
            out.append(ESCAPE)
        elif tag in PATTERN_CLASSES:
            out.append(pick(PATTERN_CLASSES[tag]))
        else:
            logger.debug("Unknown pattern tag %r in %r", tag, template)
            raise PatternError(template, i)
        i += 2
    return "".join(out)
