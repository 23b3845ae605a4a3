"""
Shared fixtures and test configuration for ghareeb tests.
"""

import pytest

from ghareeb.config import GhareebSettings
from ghareeb.models import LexiconEntry


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return GhareebSettings(_env_file=None)


@pytest.fixture
def fatiha_page():
    """Page 1 of the mushaf: header, bismillah and the first verses of Al-Fatiha."""
    return [
        "سُورَةُ الفَاتِحَةِ",
        "بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ ﴿١﴾",
        "ٱلۡحَمۡدُ لِلَّهِ رَبِّ ٱلۡعَٰلَمِينَ ﴿٢﴾ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ ﴿٣﴾",
        "مَٰلِكِ يَوۡمِ ٱلدِّينِ ﴿٤﴾",
    ]


@pytest.fixture
def baqarah_page():
    """Two lines of Al-Baqarah (2:114-115) without a header."""
    return [
        "وَمَنۡ أَظۡلَمُ مِمَّن مَّنَعَ مَسَٰجِدَ ٱللَّهِ أَن يُذۡكَرَ فِيهَا ٱسۡمُهُۥ وَسَعَىٰ فِي خَرَابِهَا",
        "وَلِلَّهِ ٱلۡمَشۡرِقُ وَٱلۡمَغۡرِبُ ۚ فَأَيۡنَمَا تُوَلُّواْ فَثَمَّ وَجۡهُ ٱللَّهِ ۚ إِنَّ ٱللَّهَ وَٰسِعٌ عَلِيمٞ ﴿١١٥﴾",
    ]


def make_entry(word_text, surah_name="الفاتحة", surah_number=1, verse_number=1, word_index=0, **kwargs):
    """Build a lexicon entry with sensible defaults."""
    return LexiconEntry(
        word_text=word_text,
        meaning=kwargs.pop("meaning", "معنى"),
        surah_name=surah_name,
        surah_number=surah_number,
        verse_number=verse_number,
        word_index=word_index,
        **kwargs,
    )


@pytest.fixture
def entry_factory():
    """Factory for lexicon entries."""
    return make_entry


@pytest.fixture
def fatiha_entries():
    """Lexicon entries for Al-Fatiha, including a phrase."""
    return [
        make_entry("يَوۡمِ", verse_number=4, word_index=1),
        make_entry("يَوۡمِ ٱلدِّينِ", verse_number=4, word_index=2),
        make_entry("ٱلۡعَٰلَمِينَ", verse_number=2, word_index=3),
        make_entry("مَٰلِكِ", verse_number=4, word_index=0),
    ]


@pytest.fixture
def normalization_test_cases():
    """Diacritized text and its expected normalized form."""
    return [
        ("بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ", "بسم الله الرحمن الرحيم"),
        ("ٱلۡحَمۡدُ لِلَّهِ رَبِّ ٱلۡعَٰلَمِينَ", "الحمد لله رب العلمين"),
        ("أَعُوذُ بِاللَّهِ مِنَ الشَّيْطَانِ الرَّجِيمِ", "اعوذ بالله من الشيطان الرجيم"),
        ("وَٰسِعٌ عَلِيمٞ", "وسع عليم"),
    ]
