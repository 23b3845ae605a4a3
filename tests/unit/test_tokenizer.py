"""
Unit tests for line tokenization.
"""

import pytest

from ghareeb.core.tokenizer import (
    split_page_text,
    surah_context_map,
    tokenize,
    tokenize_page,
)
from ghareeb.models import LineKind, TokenKind


class TestTokenize:
    """Test tokenize()."""

    def test_word_whitespace_verse_number(self):
        line = "الرَّحْمٰنِ ﴿١﴾"
        tokens = tokenize(line)

        assert [t.kind for t in tokens] == [
            TokenKind.WORD,
            TokenKind.WHITESPACE,
            TokenKind.VERSE_NUMBER,
        ]
        assert "".join(t.text for t in tokens) == line
        assert tokens[0].normalized_text == "الرحمن"
        assert tokens[1].normalized_text == ""
        assert tokens[2].normalized_text == ""

    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "  ٱلۡحَمۡدُ   لِلَّهِ\t",
        "وَلِلَّهِ ٱلۡمَشۡرِقُ وَٱلۡمَغۡرِبُ ۚ فَأَيۡنَمَا ﴿١١٥﴾",
        "۞ إِنَّ ٱللَّهَ لَا يَسۡتَحۡيِۦٓ",
        "abc 123 ٤٥",
        "ٱلۡحَمۡدُ\r\nلِلَّهِ\r\n",
        "\u064E ٱللَّهِ \u0651",
        "\uFE91\uFEB4\uFEE2 ﴿١﴾",
        "\r\n",
        "\uFEFFبِسۡمِ",
    ])
    def test_reconstruction(self, line):
        assert "".join(t.text for t in tokenize(line)) == line

    @pytest.mark.parametrize("text", ["٢٥٥", "۲۵۵", "255", "﴿٢٥٥﴾", "(٣)"])
    def test_verse_numbers(self, text):
        tokens = tokenize(text)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.VERSE_NUMBER

    @pytest.mark.parametrize("text", ["ۚ", "۞", "ۖ"])
    def test_standalone_marks_are_decorative(self, text):
        tokens = tokenize(text)
        assert tokens[0].kind == TokenKind.DECORATIVE
        assert tokens[0].normalized_text == ""

    def test_lone_mark_is_decorative(self):
        tokens = tokenize("\u064E ٱللَّهِ")
        assert [t.kind for t in tokens] == [
            TokenKind.DECORATIVE,
            TokenKind.WHITESPACE,
            TokenKind.WORD,
        ]

    def test_token_text_is_verbatim(self):
        tokens = tokenize("﴿وَٰسِعٌ﴾")
        assert tokens[0].text == "﴿وَٰسِعٌ﴾"
        assert tokens[0].kind == TokenKind.WORD
        assert tokens[0].normalized_text == "وسع"

    def test_indices(self):
        tokens = tokenize("مَٰلِكِ يَوۡمِ ٱلدِّينِ", line_index=3)
        assert [t.token_index for t in tokens] == [0, 1, 2, 3, 4]
        assert all(t.line_index == 3 for t in tokens)


class TestTokenizePage:
    """Test page-level classification and surah context."""

    def test_header_and_bismillah_lines_have_no_tokens(self, fatiha_page):
        page = tokenize_page(fatiha_page)

        assert page[0].kind == LineKind.SURAH_HEADER
        assert page[1].kind == LineKind.BISMILLAH
        assert page[0].tokens == ()
        assert page[1].tokens == ()
        assert page[2].kind == LineKind.TEXT
        assert len(page[2].tokens) > 0

    def test_accepts_page_text(self, fatiha_page):
        page = tokenize_page("\n".join(fatiha_page))
        assert len(page) == len(fatiha_page)
        assert [line.text for line in page] == fatiha_page

    def test_surah_context_follows_headers(self):
        lines = [
            "إِنَّ ٱللَّهَ سَرِيعُ ٱلۡحِسَابِ",
            "سُورَةُ آلِ عِمۡرَانَ",
            "الٓمٓ ﴿١﴾",
        ]
        assert surah_context_map(lines) == ["", "العمران", "العمران"]
        assert surah_context_map(lines, "البقرة") == ["البقره", "العمران", "العمران"]

    def test_split_page_text_preserves_lines(self):
        assert split_page_text("a\n\nb") == ["a", "", "b"]
        assert split_page_text("") == []

    def test_crlf_page_text(self, fatiha_page):
        assert split_page_text("a\r\nb\n") == ["a", "b", ""]

        page = tokenize_page("\r\n".join(fatiha_page))
        assert [line.text for line in page] == fatiha_page
        assert [line.kind for line in page] == [
            LineKind.SURAH_HEADER,
            LineKind.BISMILLAH,
            LineKind.TEXT,
            LineKind.TEXT,
        ]
