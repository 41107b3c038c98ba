from __future__ import annotations

"""Post-position particle selection.

Korean particles come in pairs whose form depends on whether the preceding
syllable ends in a final consonant: 피카츄 + 이/가 -> 피카츄가, 감 + 이/가 -> 감이.
"""

import logging
from typing import Final

from hangeul.domain.hangul_compose import ends_with_tail

logger = logging.getLogger(__name__)


# (after a final consonant, after a vowel)
PARTICLE_PAIRS: Final[tuple[tuple[str, str], ...]] = (
    ("이", "가"),
    ("은", "는"),
    ("을", "를"),
    ("과", "와"),
    ("아", "야"),
    ("이랑", "랑"),
    ("이나", "나"),
)

_PAIR_BY_FORM: Final[dict[str, tuple[str, str]]] = {
    form: pair for pair in PARTICLE_PAIRS for form in pair
}


def ends_in_consonant(word: str) -> bool:
    """True if `word` ends in a syllable with a final consonant (NotASyllable otherwise)."""
    return ends_with_tail(word)


def choose_particle(word: str, particle: str) -> str:
    """Return the form of `particle` that fits after `word`.

    `particle` may be either form of a known pair ("이" or "가" both mean the
    subject marker). Unknown particles are returned unchanged.

    Raises:
        NotASyllable: if `word` is empty or does not end in a syllable.
    """
    pair = _PAIR_BY_FORM.get(particle)
    if pair is None:
        logger.debug("Unknown particle %r; returning as-is", particle)
        return particle
    with_tail, without_tail = pair
    return with_tail if ends_with_tail(word) else without_tail


def attach_particle(word: str, particle: str) -> str:
    return word + choose_particle(word, particle)
