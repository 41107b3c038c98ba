from __future__ import annotations

"""Hangeul Unicode classification helpers.

This module is *domain* logic (no I/O, no state).

It provides:
  - The Unicode range constants for syllables, conjoined jamo and compatibility jamo
  - Boolean predicates (`is_syllable`, `is_jamo`, `is_consonant`, ...)
  - `classify_lead()` / `classify_vowel()` / `classify_tail()` returning enum members

Every function accepts either an ``int`` code point or a one-character ``str``.
Anything else (empty strings, multi-character strings, other types) is simply
"not Hangeul": classification never raises.

Notes:
  - Lead/tail membership for compatibility jamo is table-driven. A compound
    consonant such as "ㄳ" is a valid tail but not a valid lead; "ㄸ" is the
    opposite. The tables live on the enums in `hangeul.domain.enums`.
"""

from typing import Final, Optional, Union

from hangeul.domain.enums import Lead, Tail, Vowel


CodeLike = Union[int, str]

# Composed syllables
HANGEUL_OFFSET: Final[int] = 0xAC00
SYLLABLE_START: Final[int] = 0xAC00
SYLLABLE_END: Final[int] = 0xD7A3

# Mixed-radix sizes: 19 leads x 21 vowels x 28 tail slots (slot 0 = no tail)
LEAD_COUNT: Final[int] = 19
VOWEL_COUNT: Final[int] = 21
TAIL_COUNT: Final[int] = 28
LEAD_STRIDE: Final[int] = VOWEL_COUNT * TAIL_COUNT  # 588

# Conjoined (positional) jamo block
JAMO_START: Final[int] = 0x1100
JAMO_END: Final[int] = 0x11FF
CONJOINED_LEAD_START: Final[int] = 0x1100
CONJOINED_LEAD_END: Final[int] = 0x1112
CONJOINED_VOWEL_START: Final[int] = 0x1161
CONJOINED_VOWEL_END: Final[int] = 0x1175
CONJOINED_TAIL_START: Final[int] = 0x11A8
CONJOINED_TAIL_END: Final[int] = 0x11C2

# Hangul Compatibility Jamo block
COMPAT_JAMO_START: Final[int] = 0x3131
COMPAT_JAMO_END: Final[int] = 0x318E
COMPAT_CONSONANT_START: Final[int] = 0x3131
COMPAT_CONSONANT_END: Final[int] = 0x314E
COMPAT_VOWEL_START: Final[int] = 0x314F
COMPAT_VOWEL_END: Final[int] = 0x3163
# Archaic consonants; U+3187..U+318E after them are archaic vowels
COMPAT_OLD_CONSONANT_START: Final[int] = 0x3165
COMPAT_OLD_CONSONANT_END: Final[int] = 0x3186

_MAX_CODEPOINT: Final[int] = 0x10FFFF


def to_codepoint(value: object) -> Optional[int]:
    """Return the code point for `value`, or None if it is not a single character/code point."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= _MAX_CODEPOINT else None
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    return None


def _in(value: CodeLike, start: int, end: int) -> bool:
    code = to_codepoint(value)
    return code is not None and start <= code <= end


# -----------------------------------------------------------------------------
# Block predicates
# -----------------------------------------------------------------------------

def is_syllable(value: CodeLike) -> bool:
    return _in(value, SYLLABLE_START, SYLLABLE_END)


def is_jamo(value: CodeLike) -> bool:
    """True for anything in the conjoined jamo block U+1100..U+11FF."""
    return _in(value, JAMO_START, JAMO_END)


def is_compat_jamo(value: CodeLike) -> bool:
    return _in(value, COMPAT_JAMO_START, COMPAT_JAMO_END)


def is_hangeul(value: CodeLike) -> bool:
    return is_syllable(value) or is_jamo(value) or is_compat_jamo(value)


def is_consonant(value: CodeLike) -> bool:
    """True for a consonant jamo in either block (lead or tail sub-range)."""
    return (
        _in(value, CONJOINED_LEAD_START, CONJOINED_LEAD_END)
        or _in(value, CONJOINED_TAIL_START, CONJOINED_TAIL_END)
        or _in(value, COMPAT_CONSONANT_START, COMPAT_CONSONANT_END)
        or _in(value, COMPAT_OLD_CONSONANT_START, COMPAT_OLD_CONSONANT_END)
    )


def is_vowel(value: CodeLike) -> bool:
    return (
        _in(value, CONJOINED_VOWEL_START, CONJOINED_VOWEL_END)
        or _in(value, COMPAT_VOWEL_START, COMPAT_VOWEL_END)
    )


# -----------------------------------------------------------------------------
# Syllable digits
# -----------------------------------------------------------------------------

def syllable_index(value: CodeLike) -> Optional[int]:
    """Return ``code - 0xAC00`` for a composed syllable, else None."""
    if not is_syllable(value):
        return None
    return to_codepoint(value) - HANGEUL_OFFSET  # type: ignore[operator]


def split_index(index: int) -> tuple[int, int, int]:
    """Split a syllable index into (lead_slot, vowel_slot, tail_slot).

    Tail varies fastest, then vowel, then lead.
    """
    tail_slot = index % TAIL_COUNT
    vowel_slot = (index // TAIL_COUNT) % VOWEL_COUNT
    lead_slot = index // LEAD_STRIDE
    return lead_slot, vowel_slot, tail_slot


def has_tail_slot(value: CodeLike) -> Optional[bool]:
    """True/False for syllables (tail slot non-zero), None for anything else."""
    index = syllable_index(value)
    if index is None:
        return None
    return index % TAIL_COUNT != 0


# -----------------------------------------------------------------------------
# Jamo-only classification (table driven)
# -----------------------------------------------------------------------------

def lead_from_jamo(value: CodeLike) -> Optional[Lead]:
    code = to_codepoint(value)
    if code is None:
        return None
    if CONJOINED_LEAD_START <= code <= CONJOINED_LEAD_END:
        return Lead.from_conjoined_codepoint(code)
    return Lead.from_compat_codepoint(code)


def vowel_from_jamo(value: CodeLike) -> Optional[Vowel]:
    code = to_codepoint(value)
    if code is None:
        return None
    if CONJOINED_VOWEL_START <= code <= CONJOINED_VOWEL_END:
        return Vowel.from_conjoined_codepoint(code)
    return Vowel.from_compat_codepoint(code)


def tail_from_jamo(value: CodeLike) -> Optional[Tail]:
    code = to_codepoint(value)
    if code is None:
        return None
    if CONJOINED_TAIL_START <= code <= CONJOINED_TAIL_END:
        return Tail.from_conjoined_codepoint(code)
    return Tail.from_compat_codepoint(code)


def is_lead(value: CodeLike) -> bool:
    """True if `value` is a jamo that can open a syllable ("ㄸ" yes, "ㄳ" no)."""
    return lead_from_jamo(value) is not None


def is_vowel_jamo(value: CodeLike) -> bool:
    """True if `value` is one of the 21 modern vowel jamo (conjoined or compat)."""
    return vowel_from_jamo(value) is not None


def is_tail(value: CodeLike) -> bool:
    """True if `value` is a jamo that can close a syllable ("ㄳ" yes, "ㄸ" no)."""
    return tail_from_jamo(value) is not None


# -----------------------------------------------------------------------------
# Classification (syllable digit first, then jamo tables)
# -----------------------------------------------------------------------------

def classify_lead(value: CodeLike) -> Optional[Lead]:
    index = syllable_index(value)
    if index is not None:
        return Lead.from_index(split_index(index)[0])
    return lead_from_jamo(value)


def classify_vowel(value: CodeLike) -> Optional[Vowel]:
    index = syllable_index(value)
    if index is not None:
        return Vowel.from_index(split_index(index)[1])
    return vowel_from_jamo(value)


def classify_tail(value: CodeLike) -> Optional[Tail]:
    """Tail of a syllable (None when it has no final) or a tail jamo's enum member."""
    index = syllable_index(value)
    if index is not None:
        return Tail.from_slot(split_index(index)[2])
    return tail_from_jamo(value)
