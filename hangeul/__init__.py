"""
Hangeul package exports.

Korean alphabet classification and syllable (de)composition at the Unicode
code-point level. This file provides a stable import surface; the
implementations live in `hangeul.domain`.
"""

from .domain.enums import Lead, Syllable, Tail, Vowel  # noqa: F401
from .domain.errors import HangeulError, JamoNotFound, NotASyllable, Uncomposable  # noqa: F401
from .domain.hangul_compose import (  # noqa: F401
    JamoView,
    compose,
    decompose,
    decompose_sequence,
    ends_with_tail,
    get_lead,
    get_tail,
    get_vowel,
    has_tail,
    leads,
    tails,
    vowels,
)
from .domain.hangul_unicode import (  # noqa: F401
    HANGEUL_OFFSET,
    classify_lead,
    classify_tail,
    classify_vowel,
    is_compat_jamo,
    is_consonant,
    is_hangeul,
    is_jamo,
    is_lead,
    is_syllable,
    is_tail,
    is_vowel,
    is_vowel_jamo,
)
from .domain.particles import attach_particle, choose_particle, ends_in_consonant  # noqa: F401

__version__ = "0.2.0"

__all__ = [
    "HANGEUL_OFFSET",
    "HangeulError",
    "JamoNotFound",
    "JamoView",
    "Lead",
    "NotASyllable",
    "Syllable",
    "Tail",
    "Uncomposable",
    "Vowel",
    "attach_particle",
    "choose_particle",
    "classify_lead",
    "classify_tail",
    "classify_vowel",
    "compose",
    "decompose",
    "decompose_sequence",
    "ends_in_consonant",
    "ends_with_tail",
    "get_lead",
    "get_tail",
    "get_vowel",
    "has_tail",
    "is_compat_jamo",
    "is_consonant",
    "is_hangeul",
    "is_jamo",
    "is_lead",
    "is_syllable",
    "is_tail",
    "is_vowel",
    "is_vowel_jamo",
    "leads",
    "tails",
    "vowels",
]
