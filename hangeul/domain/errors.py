from __future__ import annotations

"""Error types raised by the transform layer.

Classification helpers never raise; only decomposition/composition do.
All errors derive from ValueError so callers that already guard jamo input
with ``except ValueError`` keep working.
"""

from typing import Any


class HangeulError(ValueError):
    """Base class for every Hangeul transform failure."""

    default_message = "Hangeul error"

    def __init__(self, value: Any = None, message: str | None = None) -> None:
        self.value = value
        if message is None:
            message = "%s: %r" % (self.default_message, value)
        super().__init__(message)


class NotASyllable(HangeulError):
    """Input is outside the composed syllable block U+AC00..U+D7A3."""

    default_message = "Not a Hangeul syllable"


class JamoNotFound(HangeulError):
    """Input does not classify as the expected lead / vowel / tail jamo."""

    default_message = "Jamo not found"


class Uncomposable(HangeulError):
    """The (lead, vowel, tail) input cannot form a syllable."""

    default_message = "Uncomposable"
