"""
Unit tests for Arabic text normalization and line rules.
"""

import pytest

from ghareeb.core.arabic import (
    classify_line,
    extract_surah_name,
    is_bismillah,
    is_surah_header,
    normalize,
    normalize_surah_name,
)
from ghareeb.models import LineKind


class TestNormalize:
    """Test the normalizer."""

    def test_diacritized_and_plain_compare_equal(self):
        assert normalize("بِسْمِ اللَّهِ") == normalize("بسم الله")

    def test_expected_forms(self, normalization_test_cases):
        for original, expected in normalization_test_cases:
            assert normalize(original) == expected

    @pytest.mark.parametrize("variant", ["أ", "إ", "آ", "ٱ", "ٲ", "ٳ", "ٵ"])
    def test_alef_variants_to_bare_alef(self, variant):
        assert normalize(variant) == "ا"

    @pytest.mark.parametrize("text,expected", [
        ("هُدًى", "هدي"),
        ("رَحۡمَةٌ", "رحمه"),
        ("مُؤۡمِنُونَ", "مومنون"),
        ("بَارِئِكُمۡ", "باريكم"),
        ("ٱلسَّمَآءِ", "السما"),
        ("شَيۡءٍ", "شي"),
        ("الـلـه", "الله"),
    ])
    def test_letter_unification(self, text, expected):
        assert normalize(text) == expected

    def test_collapses_whitespace(self):
        assert normalize("  بِسۡمِ \t\n  ٱللَّهِ  ") == "بسم الله"

    def test_drops_characters_outside_allow_list(self):
        assert normalize("abc بسم 123 ﴿٤﴾ الله!") == "بسم الله"

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_total_on_degenerate_input(self, value):
        assert normalize(value) == ""

    @pytest.mark.parametrize("text", [
        "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
        "ٱلسَّمَآءِ وَٱلۡأَرۡضِ ۚ",
        "hello world 🌙",
        "مُؤۡمِنُونَ‏​  شَيۡءٍ",
        "ـــ ء ء",
        "ۀ ة ى ئ ؤ",
        "\uFE91\uFEB4\uFEE2 \uFEFFالله",
        "\u064E",
        "\u0651\u0670 \u06E1",
        "ٱلۡحَمۡدُ\r\nلِلَّهِ\r\n",
        "\u0622\u0653\u0654",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    def test_presentation_forms_dropped(self):
        assert normalize("\uFE91\uFEB4\uFEE2 ٱللَّهِ") == "الله"

    @pytest.mark.parametrize("text", ["\u064E", "\u0651\u0670", "\u06DA", "\u0640\u0621"])
    def test_lone_marks_normalize_to_empty(self, text):
        assert normalize(text) == ""

    def test_crlf_is_whitespace(self):
        assert normalize("ٱلۡحَمۡدُ\r\nلِلَّهِ") == "الحمد لله"

    def test_surah_name_ignores_spaces(self):
        assert normalize_surah_name("آل عمران") == normalize_surah_name("آل_عمران") == "العمران"


class TestLineRules:
    """Test header and bismillah detection."""

    @pytest.mark.parametrize("line", [
        "سُورَةُ البَقَرَةِ",
        "سورة البقرة",
        "سُورَةُ آلِ عِمۡرَانَ",
    ])
    def test_surah_headers(self, line):
        assert is_surah_header(line)
        assert classify_line(line) == LineKind.SURAH_HEADER

    def test_verse_starting_with_surah_is_not_a_header(self):
        line = "سُورَةٌ أَنزَلۡنَٰهَا وَفَرَضۡنَٰهَا وَأَنزَلۡنَا فِيهَآ ءَايَٰتِۭ بَيِّنَٰتٖ"
        assert not is_surah_header(line)
        assert classify_line(line) == LineKind.TEXT

    def test_extract_surah_name(self):
        assert extract_surah_name("سُورَةُ آلِ عِمۡرَانَ") == "ال عمران"
        assert extract_surah_name("ٱلۡحَمۡدُ لِلَّهِ") == ""

    @pytest.mark.parametrize("line", [
        "بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ",
        "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ ﴿١﴾",
    ])
    def test_bismillah(self, line):
        assert is_bismillah(line)
        assert classify_line(line) == LineKind.BISMILLAH

    def test_regular_line(self):
        assert classify_line("مَٰلِكِ يَوۡمِ ٱلدِّينِ ﴿٤﴾") == LineKind.TEXT
