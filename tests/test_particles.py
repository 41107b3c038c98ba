import pytest

from hangeul.domain.errors import NotASyllable
from hangeul.domain.particles import attach_particle, choose_particle, ends_in_consonant


@pytest.mark.parametrize("word,particle,expected", [
    ("피카츄", "이", "피카츄가"),
    ("피카츄", "가", "피카츄가"),
    ("감", "가", "감이"),
    ("사과", "을", "사과를"),
    ("책", "를", "책을"),
    ("친구", "은", "친구는"),
    ("선생님", "는", "선생님은"),
    ("빵", "와", "빵과"),
])
def test_attach_particle(word, particle, expected):
    assert attach_particle(word, particle) == expected


def test_unknown_particle_is_unchanged():
    assert choose_particle("감", "도") == "도"


def test_ends_in_consonant():
    assert ends_in_consonant("감") is True
    assert ends_in_consonant("피카츄") is False
    with pytest.raises(NotASyllable):
        ends_in_consonant("")


def test_particle_needs_a_syllable():
    with pytest.raises(NotASyllable):
        attach_particle("abc", "이")
