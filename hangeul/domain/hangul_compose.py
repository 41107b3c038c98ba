from __future__ import annotations

"""Hangeul composition / decomposition helpers (domain layer).

This module contains *no* I/O.

It centralises:
- `decompose()` / `decompose_sequence()` (syllable -> Syllable(lead, vowel, tail))
- `compose()` (lead + vowel [+ tail] -> syllable)
- Component getters returning compatibility jamo (`get_lead`, `get_vowel`, `get_tail`)
- Tail checks used for particle selection (`has_tail`, `ends_with_tail`)
- Lazy per-character views (`leads`, `vowels`, `tails`)

Primary API:
- decompose(ch)
- compose(lead, vowel, tail=None)
"""

import logging
from typing import Callable, Iterator, Optional, Union

from hangeul.domain.enums import Lead, Syllable, Tail, Vowel
from hangeul.domain.errors import JamoNotFound, NotASyllable, Uncomposable
from hangeul.domain.hangul_unicode import (
    HANGEUL_OFFSET,
    LEAD_STRIDE,
    TAIL_COUNT,
    CodeLike,
    has_tail_slot,
    lead_from_jamo,
    split_index,
    syllable_index,
    tail_from_jamo,
    vowel_from_jamo,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Decomposition
# -----------------------------------------------------------------------------

def decompose(value: CodeLike) -> Syllable:
    """Split a composed syllable into its components.

    Args:
        value: a syllable character (e.g. "한") or its code point

    Returns:
        Syllable(lead, vowel, tail) where tail is None for open syllables.

    Raises:
        NotASyllable: if `value` is outside U+AC00..U+D7A3.
    """
    index = syllable_index(value)
    if index is None:
        raise NotASyllable(value)

    lead_slot, vowel_slot, tail_slot = split_index(index)
    return Syllable(
        Lead.from_index(lead_slot),
        Vowel.from_index(vowel_slot),
        Tail.from_slot(tail_slot),
    )


def decompose_sequence(text: str) -> list[Union[Syllable, NotASyllable]]:
    """Decompose every character of `text`.

    A character that is not a syllable yields its NotASyllable error in place;
    the remaining characters are still processed.
    """
    results: list[Union[Syllable, NotASyllable]] = []
    for ch in text:
        try:
            results.append(decompose(ch))
        except NotASyllable as e:
            logger.debug("decompose_sequence: %s", e)
            results.append(e)
    return results


def get_lead(value: CodeLike) -> str:
    """Return the syllable's lead as a compatibility jamo (e.g. "한" -> "ㅎ")."""
    return decompose(value).lead.to_char()


def get_vowel(value: CodeLike) -> str:
    return decompose(value).vowel.to_char()


def get_tail(value: CodeLike) -> Optional[str]:
    """Return the syllable's tail as a compatibility jamo, or None for open syllables."""
    tail = decompose(value).tail
    return tail.to_char() if tail is not None else None


def has_tail(value: CodeLike) -> bool:
    """True if the syllable has a final consonant (no full decomposition needed)."""
    result = has_tail_slot(value)
    if result is None:
        raise NotASyllable(value)
    return result


def ends_with_tail(text: str) -> bool:
    """True if the last character of `text` is a syllable with a final consonant.

    Raises:
        NotASyllable: if `text` is empty or its last character is not a syllable.
    """
    if not text:
        raise NotASyllable(text, "Empty input has no last syllable")
    return has_tail(text[-1])


# -----------------------------------------------------------------------------
# Composition
# -----------------------------------------------------------------------------

def to_lead(value: Union[Lead, CodeLike]) -> Lead:
    """Resolve a lead jamo (enum member, compat/conjoined char or code point)."""
    if isinstance(value, Lead):
        return value
    lead = lead_from_jamo(value)
    if lead is None:
        raise JamoNotFound(value, "Not a lead jamo: %r" % (value,))
    return lead


def to_vowel(value: Union[Vowel, CodeLike]) -> Vowel:
    if isinstance(value, Vowel):
        return value
    vowel = vowel_from_jamo(value)
    if vowel is None:
        raise JamoNotFound(value, "Not a vowel jamo: %r" % (value,))
    return vowel


def to_tail(value: Union[Tail, CodeLike]) -> Tail:
    if isinstance(value, Tail):
        return value
    tail = tail_from_jamo(value)
    if tail is None:
        raise JamoNotFound(value, "Not a tail jamo: %r" % (value,))
    return tail


def compose(
    lead: Union[Lead, CodeLike],
    vowel: Union[Vowel, CodeLike],
    tail: Union[Tail, CodeLike, None] = None,
) -> str:
    """Compose a Hangeul syllable.

    Args:
        lead: choseong (e.g., Lead.GIYEOK, "ㄱ" or "\\u1100")
        vowel: jungseong (e.g., Vowel.A or "ㅏ")
        tail: jongseong (e.g., Tail.NIEUN or "ㄴ") or None for no final

    Returns:
        The composed syllable (e.g., "간").

    Raises:
        Uncomposable: if any component does not classify in its position
            (e.g. "ㄳ" as a lead).

    Notes:
        SBase + LIndex * 588 + VIndex * 28 + TSlot, with TSlot 0 meaning no tail.
    """
    try:
        li = to_lead(lead).index()
        vi = to_vowel(vowel).index()
        ti = to_tail(tail).slot if tail is not None else 0
    except JamoNotFound as e:
        logger.debug("compose rejected lead=%r vowel=%r tail=%r: %s", lead, vowel, tail, e)
        raise Uncomposable((lead, vowel, tail), "Uncomposable: %s" % e) from e

    return chr(HANGEUL_OFFSET + li * LEAD_STRIDE + vi * TAIL_COUNT + ti)


def compose_syllable(syllable: Syllable) -> str:
    return compose(*syllable)


# -----------------------------------------------------------------------------
# Lazy per-character views
# -----------------------------------------------------------------------------

class JamoView:
    """Restartable, lazy mapping of a text through a syllable component extractor.

    Each syllable is replaced by the extracted jamo, in compatibility form by
    default or conjoined form with ``form="conjoined"``. Anything that is not a
    syllable (jamo included) passes through unchanged.
    """

    def __init__(self, text: str, extract: Callable[[int], object], form: str = "compat") -> None:
        self._text = text
        self._extract = extract
        self._form = form

    def __iter__(self) -> Iterator[str]:
        for ch in self._text:
            index = syllable_index(ch)
            found = self._extract(index) if index is not None else None
            if found is None:
                yield ch
            elif self._form == "conjoined":
                yield chr(found.to_conjoined_codepoint())
            else:
                yield found.to_char()

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return "JamoView(%r, form=%r)" % (self._text, self._form)


def leads(text: str, form: str = "compat") -> JamoView:
    """Lead view, e.g. "a한b" -> "aㅎb"."""
    return JamoView(text, lambda index: Lead.from_index(split_index(index)[0]), form)


def vowels(text: str, form: str = "compat") -> JamoView:
    return JamoView(text, lambda index: Vowel.from_index(split_index(index)[1]), form)


def tails(text: str, form: str = "compat") -> JamoView:
    """Open syllables have no tail, so they pass through unchanged like non-Hangeul."""
    return JamoView(text, lambda index: Tail.from_slot(split_index(index)[2]), form)
