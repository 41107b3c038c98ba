from __future__ import annotations

"""Hangeul jamo enumerations (domain layer).

Each member's value is its Hangul Compatibility Jamo character, so members
compare equal to the plain letters used throughout the app:

    >>> Lead.HIEUH == "ㅎ"
    True

Member order is the Unicode composition order. The position of a member in
its enum is its composition index for the mixed-radix syllable formula.

Conjoined (positional) jamo live in contiguous, index-aligned runs:
  - leads   U+1100..U+1112
  - vowels  U+1161..U+1175
  - tails   U+11A8..U+11C2

Compatibility jamo are only contiguous for vowels. Leads and tails pick an
irregular subset of U+3131..U+314E, which is why the compat code point is
stored on the member itself instead of being computed.
"""

from enum import Enum
from typing import Final, NamedTuple, Optional


LEAD_CONJOINED_BASE: Final[int] = 0x1100
VOWEL_CONJOINED_BASE: Final[int] = 0x1161
TAIL_CONJOINED_BASE: Final[int] = 0x11A8


class _Jamo(str, Enum):
    """Shared behaviour for the three positional jamo enums."""

    @classmethod
    def _conjoined_base(cls) -> int:
        raise NotImplementedError

    @classmethod
    def _members(cls) -> tuple:
        # Enum iteration order is definition order, i.e. composition order.
        return tuple(cls)

    def index(self, *args) -> int:
        """Composition index (0-based position in Unicode order).

        Members are also strings: with arguments this is plain ``str.index``.
        """
        if args:
            return str.index(self, *args)
        return self._members().index(self)

    def to_char(self) -> str:
        """Return the compatibility jamo letter (e.g. "ㄱ")."""
        return self.value

    def to_compat_codepoint(self) -> int:
        return ord(self.value)

    def to_conjoined_codepoint(self) -> int:
        return self._conjoined_base() + self.index()

    @classmethod
    def from_index(cls, index: int):
        members = cls._members()
        if 0 <= index < len(members):
            return members[index]
        return None

    @classmethod
    def from_conjoined_codepoint(cls, code: int):
        return cls.from_index(code - cls._conjoined_base())

    @classmethod
    def from_compat_codepoint(cls, code: int):
        return _COMPAT_LOOKUP[cls].get(code)

    def __str__(self) -> str:
        return self.value


class Lead(_Jamo):
    """Choseong: the 19 initial consonants."""

    GIYEOK = "ㄱ"
    SSANG_GIYEOK = "ㄲ"
    NIEUN = "ㄴ"
    DIGEUT = "ㄷ"
    SSANG_DIGEUT = "ㄸ"
    RIEUL = "ㄹ"
    MIEUM = "ㅁ"
    BIEUP = "ㅂ"
    SSANG_BIEUP = "ㅃ"
    SIOT = "ㅅ"
    SSANG_SIOT = "ㅆ"
    IEUNG = "ㅇ"
    JIEUT = "ㅈ"
    SSANG_JIEUT = "ㅉ"
    CHIEUT = "ㅊ"
    KIEUK = "ㅋ"
    TIEUT = "ㅌ"
    PIEUP = "ㅍ"
    HIEUH = "ㅎ"

    @classmethod
    def _conjoined_base(cls) -> int:
        return LEAD_CONJOINED_BASE


class Vowel(_Jamo):
    """Jungseong: the 21 medial vowels."""

    A = "ㅏ"
    AE = "ㅐ"
    YA = "ㅑ"
    YAE = "ㅒ"
    EO = "ㅓ"
    E = "ㅔ"
    YEO = "ㅕ"
    YE = "ㅖ"
    O = "ㅗ"
    WA = "ㅘ"
    WAE = "ㅙ"
    OE = "ㅚ"
    YO = "ㅛ"
    U = "ㅜ"
    WEO = "ㅝ"
    WE = "ㅞ"
    WI = "ㅟ"
    YU = "ㅠ"
    EU = "ㅡ"
    YI = "ㅢ"
    I = "ㅣ"  # noqa: E741

    @classmethod
    def _conjoined_base(cls) -> int:
        return VOWEL_CONJOINED_BASE


class Tail(_Jamo):
    """Jongseong: the 27 final consonants (the "no final" case is ``None``)."""

    GIYEOK = "ㄱ"
    SSANG_GIYEOK = "ㄲ"
    GIYEOK_SIOT = "ㄳ"
    NIEUN = "ㄴ"
    NIEUN_JIEUT = "ㄵ"
    NIEUN_HIEUH = "ㄶ"
    DIGEUT = "ㄷ"
    RIEUL = "ㄹ"
    RIEUL_GIYEOK = "ㄺ"
    RIEUL_MIEUM = "ㄻ"
    RIEUL_BIEUP = "ㄼ"
    RIEUL_SIOT = "ㄽ"
    RIEUL_TIEUT = "ㄾ"
    RIEUL_PIEUP = "ㄿ"
    RIEUL_HIEUH = "ㅀ"
    MIEUM = "ㅁ"
    BIEUP = "ㅂ"
    BIEUP_SIOT = "ㅄ"
    SIOT = "ㅅ"
    SSANG_SIOT = "ㅆ"
    IEUNG = "ㅇ"
    JIEUT = "ㅈ"
    CHIEUT = "ㅊ"
    KIEUK = "ㅋ"
    TIEUT = "ㅌ"
    PIEUP = "ㅍ"
    HIEUH = "ㅎ"

    @classmethod
    def _conjoined_base(cls) -> int:
        return TAIL_CONJOINED_BASE

    @property
    def slot(self) -> int:
        """Tail digit in the syllable formula; 0 is reserved for "no tail"."""
        return self.index() + 1

    @classmethod
    def from_slot(cls, slot: int) -> Optional["Tail"]:
        if slot == 0:
            return None
        return cls.from_index(slot - 1)


# -----------------------------------------------------------------------------
# Compatibility jamo lookup (irregular for leads and tails)
# -----------------------------------------------------------------------------

_COMPAT_LOOKUP: Final[dict[type, dict[int, _Jamo]]] = {
    cls: {ord(m.value): m for m in cls} for cls in (Lead, Vowel, Tail)
}


class Syllable(NamedTuple):
    """A decomposed syllable: (lead, vowel, optional tail)."""

    lead: Lead
    vowel: Vowel
    tail: Optional[Tail] = None

    def to_compat(self) -> str:
        """Return the components as a compatibility jamo string (e.g. "ㅎㅏㄴ")."""
        return "".join(str(p) for p in self if p is not None)

    def to_conjoined(self) -> str:
        return "".join(chr(p.to_conjoined_codepoint()) for p in self if p is not None)
