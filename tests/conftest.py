"""
Shared fixtures and test configuration for mushaf tests.
"""

import pytest

import mushaf.config
from mushaf.data import to_arabic_number
from mushaf.models import CharClass, LineSlot, Word


WORD_TEXT = "كلمة"


def verse_record(surah, ayah, line, n_words=2, text=WORD_TEXT, marker=True):
    """One upstream verse in the quran.com `verses/by_page` shape."""
    words = [
        {
            "text_uthmani": text,
            "line_number": line,
            "char_type_name": "word",
            "position": i,
        }
        for i in range(1, n_words + 1)
    ]
    if marker:
        words.append(
            {
                "text_uthmani": to_arabic_number(ayah),
                "line_number": line,
                "char_type_name": "end",
                "position": n_words + 1,
            }
        )
    return {"verse_key": f"{surah}:{ayah}", "words": words}


def page_response(verses, **meta):
    """Wrap verse records into a page response with an optional meta block."""
    response = {"verses": list(verses)}
    if meta:
        response["meta"] = meta
    return response


@pytest.fixture(autouse=True)
def reset_settings():
    """Each test starts from default settings."""
    mushaf.config._default_settings = None
    yield
    mushaf.config._default_settings = None


@pytest.fixture
def make_verse():
    """Factory for upstream verse records."""
    return verse_record


@pytest.fixture
def make_response():
    """Factory for upstream page responses."""
    return page_response


@pytest.fixture
def make_word():
    """Factory for Word models."""

    def _make(surah=2, verse_number=5, position=1, text=WORD_TEXT,
              char_class=CharClass.WORD, line_hint=None):
        return Word(
            surah=surah, verse_number=verse_number, position=position,
            text=text, char_class=char_class, line_hint=line_hint,
        )

    return _make


@pytest.fixture
def marker():
    """Factory for verse-end marker words."""

    def _make(surah=2, verse_number=5, position=9, text=None, line_hint=None):
        return Word(
            surah=surah, verse_number=verse_number, position=position,
            text=text if text is not None else to_arabic_number(verse_number),
            char_class=CharClass.VERSE_END_MARKER, line_hint=line_hint,
        )

    return _make


@pytest.fixture
def empty_slots():
    """Fifteen empty text slots."""
    return tuple(LineSlot.text(n) for n in range(1, 16))


@pytest.fixture
def tawbah_page_response():
    """Page 187: At-Tawbah opens on line 2 under its banner, no basmala."""
    verses = [verse_record(9, ayah, line=ayah + 1) for ayah in range(1, 15)]
    return page_response(verses, surah_starts=[9], juz_number=10, hizb_number=19)


@pytest.fixture
def maryam_page_response():
    """Page 305 (synthetic): Al-Kahf closes, Maryam starts mid-page on line 7."""
    verses = [
        verse_record(18, 107, line=1, n_words=8),
        verse_record(18, 108, line=2, n_words=6),
        verse_record(18, 109, line=3, n_words=9),
        verse_record(18, 110, line=4, n_words=7),
    ]
    verses += [verse_record(19, ayah, line=ayah + 6) for ayah in range(1, 10)]
    return page_response(verses, surah_starts=[{"surah": 19, "line": 7}])


@pytest.fixture
def last_page_response():
    """Page 604: three short surahs, each with banner and basmala."""
    verses = [
        verse_record(112, 1, line=3), verse_record(112, 2, line=3),
        verse_record(112, 3, line=4), verse_record(112, 4, line=4),
        verse_record(113, 1, line=7), verse_record(113, 2, line=7),
        verse_record(113, 3, line=8), verse_record(113, 4, line=8),
        verse_record(113, 5, line=9),
        verse_record(114, 1, line=12), verse_record(114, 2, line=12),
        verse_record(114, 3, line=13), verse_record(114, 4, line=13),
        verse_record(114, 5, line=14), verse_record(114, 6, line=15),
    ]
    return page_response(verses, surah_starts=[112, 113, 114])


@pytest.fixture
def fatiha_page_response():
    """Page 1: Al-Fatiha, every line is verse text."""
    verses = [verse_record(1, ayah, line=ayah + 1) for ayah in range(1, 8)]
    return page_response(verses, surah_starts=[{"surah": 1, "line": 2}])
