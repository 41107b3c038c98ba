import pytest

from hangeul.domain.enums import Lead, Syllable, Tail, Vowel
from hangeul.domain.errors import HangeulError, JamoNotFound, NotASyllable, Uncomposable
from hangeul.domain.hangul_compose import (
    compose,
    compose_syllable,
    decompose,
    decompose_sequence,
    ends_with_tail,
    get_lead,
    get_tail,
    get_vowel,
    has_tail,
    leads,
    tails,
    to_lead,
    vowels,
)


@pytest.mark.composition
def test_decompose_basic():
    assert decompose("한") == Syllable(Lead.HIEUH, Vowel.A, Tail.NIEUN)
    assert decompose("하") == Syllable(Lead.HIEUH, Vowel.A, None)
    assert decompose(0xAC00) == (Lead.GIYEOK, Vowel.A, None)
    assert decompose("힣") == (Lead.HIEUH, Vowel.I, Tail.HIEUH)


@pytest.mark.composition
def test_decompose_compares_with_compat_letters():
    assert decompose("한") == ("ㅎ", "ㅏ", "ㄴ")
    assert decompose("한").to_compat() == "ㅎㅏㄴ"
    assert decompose("한").to_conjoined() == "\u1112\u1161\u11ab"


@pytest.mark.composition
@pytest.mark.parametrize("value", ["a", "ㄱ", "ᄀ", 0xABFF, 0xD7A4, "", "한국"])
def test_decompose_rejects_non_syllables(value):
    with pytest.raises(NotASyllable):
        decompose(value)


@pytest.mark.composition
def test_compose_basic():
    assert compose(Lead.GIYEOK, Vowel.A) == "가"
    assert compose(Lead.GIYEOK, Vowel.A, Tail.GIYEOK) == "각"
    assert compose(Lead.GIYEOK, Vowel.A, Tail.BIEUP_SIOT) == "값"
    assert compose(Lead.GIYEOK, Vowel.A, Tail.GIYEOK_SIOT) == "갃"
    assert compose(Lead.HIEUH, Vowel.WA, Tail.HIEUH) == "홯"


@pytest.mark.composition
def test_compose_from_characters():
    assert compose("ㄱ", "ㅏ", None) == "가"
    assert compose("ㄱ", "ㅏ", "ㅄ") == "값"
    assert compose("ᄒ", "ᅡ", "ᆫ") == "한"
    assert compose(0x3131, 0x314F) == "가"


@pytest.mark.composition
@pytest.mark.parametrize("lead,vowel,tail", [
    ("ㄳ", "ㅏ", None),
    ("ㅄ", "ㅏ", None),
    (Tail.GIYEOK_SIOT, Vowel.A, None),
    ("ㄱ", "ㄱ", None),
    ("ㄱ", "ㅏ", "ㄸ"),
    ("ㄱ", "ㅏ", "ㅏ"),
    ("가", "ㅏ", None),
    ("a", "b", None),
])
def test_compose_rejects_invalid_jamo(lead, vowel, tail):
    with pytest.raises(Uncomposable) as excinfo:
        compose(lead, vowel, tail)
    assert isinstance(excinfo.value.__cause__, JamoNotFound)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        compose("ㄳ", "ㅏ")
    assert issubclass(NotASyllable, HangeulError)
    assert str(NotASyllable("a")) == "Not a Hangeul syllable: 'a'"


def test_to_lead_raises_jamo_not_found():
    assert to_lead("ㄸ") is Lead.SSANG_DIGEUT
    with pytest.raises(JamoNotFound):
        to_lead("ㄳ")


@pytest.mark.composition
def test_round_trip_every_syllable():
    for code in range(0xAC00, 0xD7A4):
        ch = chr(code)
        assert compose_syllable(decompose(ch)) == ch


@pytest.mark.composition
def test_round_trip_every_triple():
    for lead in Lead:
        for vowel in Vowel:
            for tail in [None, *Tail]:
                triple = Syllable(lead, vowel, tail)
                assert decompose(compose(*triple)) == triple


def test_decompose_sequence():
    assert decompose_sequence("대한민국") == [
        ("ㄷ", "ㅐ", None),
        ("ㅎ", "ㅏ", "ㄴ"),
        ("ㅁ", "ㅣ", "ㄴ"),
        ("ㄱ", "ㅜ", "ㄱ"),
    ]


def test_decompose_sequence_isolates_failures():
    results = decompose_sequence("한 a국")
    assert len(results) == 4
    assert results[0] == (Lead.HIEUH, Vowel.A, Tail.NIEUN)
    assert isinstance(results[1], NotASyllable)
    assert isinstance(results[2], NotASyllable)
    assert results[2].value == "a"
    assert results[3] == (Lead.GIYEOK, Vowel.U, Tail.GIYEOK)


def test_component_getters():
    assert get_lead("감") == "ㄱ"
    assert get_vowel("감") == "ㅏ"
    assert get_tail("감") == "ㅁ"
    assert get_tail("가") is None
    with pytest.raises(NotASyllable):
        get_lead("ㄱ")


def test_has_tail_and_ends_with_tail():
    assert has_tail("감") is True
    assert has_tail("하") is False
    assert ends_with_tail("감감") is True
    assert ends_with_tail("피카츄") is False
    with pytest.raises(NotASyllable):
        has_tail("a")
    with pytest.raises(NotASyllable):
        ends_with_tail("")
    with pytest.raises(NotASyllable):
        ends_with_tail("한글!")


def test_leads_passes_through_non_syllables():
    assert str(leads("a한b")) == "aㅎb"
    assert str(leads("야생의 피카츄가 나타났다!")) == "ㅇㅅㅇ ㅍㅋㅊㄱ ㄴㅌㄴㄷ!"


def test_leads_is_lazy_and_restartable():
    view = leads("대한민국")
    assert list(view) == ["ㄷ", "ㅎ", "ㅁ", "ㄱ"]
    assert list(view) == ["ㄷ", "ㅎ", "ㅁ", "ㄱ"]
    assert len(view) == 4

    it = iter(leads("한a"))
    assert next(it) == "ㅎ"
    assert next(it) == "a"


def test_vowel_and_tail_views():
    assert str(vowels("한국 1")) == "ㅏㅜ 1"
    assert str(tails("한가")) == "ㄴ가"


def test_views_leave_jamo_untouched():
    # only composed syllables are rewritten; conjoined and compat jamo pass through
    assert str(leads("ᄀa")) == "ᄀa"
    assert str(leads("ㄱᄒ")) == "ㄱᄒ"
    assert str(vowels("ᅡㅏ")) == "ᅡㅏ"
    assert str(tails("ㄳᆨ")) == "ㄳᆨ"


def test_views_conjoined_form():
    assert str(leads("a한", form="conjoined")) == "aᄒ"
    assert str(vowels("한", form="conjoined")) == "ᅡ"
    assert str(tails("한가", form="conjoined")) == "ᆫ가"
