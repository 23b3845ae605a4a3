"""
Unit tests for the lexicon index and record ingestion.
"""

import pytest

from ghareeb.core.lexicon import (
    LexiconIndex,
    arabic_to_int,
    build,
    extract_word_from_raw,
    make_candidate,
    parse_entries,
    parse_ghareeb_text,
    surah_number_for_name,
)
from ghareeb.exceptions import LexiconError


class TestBuild:
    """Test candidate building and ordering."""

    def test_sorted_by_word_count_descending(self, fatiha_entries):
        candidates = build(fatiha_entries)

        counts = [c.word_count for c in candidates]
        assert counts == sorted(counts, reverse=True)
        assert candidates[0].words == ("يوم", "الدين")

    def test_ties_keep_input_order(self, entry_factory):
        entries = [
            entry_factory("مَٰلِكِ", word_index=0),
            entry_factory("رَبِّ", word_index=1),
            entry_factory("ٱلدِّينِ", word_index=2),
        ]
        candidates = build(entries)
        assert [c.entry_id for c in candidates] == [e.entry_id for e in entries]

    def test_candidate_fields(self, entry_factory):
        entry = entry_factory("وَٰسِعٌ عَلِيمٞ", surah_name="آل عمران", surah_number=3)
        candidate = make_candidate(entry)

        assert candidate.normalized_full == "وسع عليم"
        assert candidate.words == ("وسع", "عليم")
        assert candidate.word_count == 2
        assert candidate.normalized_surah == "العمران"
        assert candidate.is_phrase

    def test_short_fragments_dropped(self, entry_factory):
        candidate = make_candidate(entry_factory("فَ ٱللَّهُ"))
        assert candidate.words == ("الله",)

    def test_empty_normalized_excluded_and_reported(self, entry_factory):
        entries = [
            entry_factory("ۚ", word_index=0),
            entry_factory("وَ", word_index=1),
            entry_factory("ٱلرَّحِيمِ", word_index=2),
        ]
        index = LexiconIndex.build(entries)

        assert [c.entry_id for c in index.candidates] == [entries[2].entry_id]
        assert index.empty_normalized_ids == [entries[0].entry_id, entries[1].entry_id]
        assert index.entry_count == 3

    def test_duplicate_ids_reported(self, entry_factory):
        first = entry_factory("مَٰلِكِ", verse_number=4)
        second = entry_factory("ٱلدِّينِ", verse_number=4)
        index = LexiconIndex.build([first, second])

        assert [c.entry for c in index.candidates] == [first]
        assert index.duplicates == [second]
        assert index.duplicate_ids == ["1_4_0"]
        assert index.entry_count == 2

    def test_accepts_prebuilt_candidates(self, entry_factory):
        phrase = make_candidate(entry_factory("يَوۡمِ ٱلدِّينِ", verse_number=4, word_index=1))
        word = entry_factory("مَٰلِكِ", verse_number=4, word_index=0)
        index = LexiconIndex.build([word, phrase])

        assert index.candidates[0] is phrase
        assert [c.entry_id for c in index.candidates] == ["1_4_1", "1_4_0"]

    def test_empty_input(self):
        index = LexiconIndex.build([])
        assert index.candidates == []
        assert index.empty_normalized == []


class TestParseEntries:
    """Test validation of raw records."""

    def test_camel_case_records(self):
        entries = parse_entries([
            {
                "wordText": "﴿وَٰسِعٌ﴾",
                "meaning": "واسع الفضل",
                "surahName": "البقرة",
                "surahNumber": 2,
                "verseNumber": 115,
                "wordIndex": 14,
                "pageNumber": 18,
            }
        ])

        assert len(entries) == 1
        entry = entries[0]
        assert entry.word_text == "وَٰسِعٌ"
        assert entry.page_number == 18
        assert entry.entry_id == "2_115_14"

    def test_explicit_entry_id_kept(self):
        entries = parse_entries([
            {
                "entry_id": "custom-1",
                "word_text": "وَٰسِعٌ",
                "surah_name": "البقرة",
                "surah_number": 2,
                "verse_number": 115,
            }
        ])
        assert entries[0].entry_id == "custom-1"

    def test_invalid_records_skipped(self):
        records = [
            {"wordText": "", "surahName": "البقرة", "surahNumber": 2, "verseNumber": 1},
            {"wordText": "ريب", "surahName": "البقرة", "surahNumber": 200, "verseNumber": 2},
            {"wordText": "ريب", "surahName": "البقرة", "surahNumber": 2, "verseNumber": 2},
        ]
        entries = parse_entries(records)
        assert [e.word_text for e in entries] == ["ريب"]

    def test_invalid_record_raises_when_strict(self):
        with pytest.raises(LexiconError) as exc_info:
            parse_entries(
                [{"wordText": "﴿﴾", "surahName": "البقرة", "surahNumber": 2, "verseNumber": 1}],
                skip_invalid=False,
            )
        assert exc_info.value.record_index == 0


class TestTextFormat:
    """Test the tab-separated lexicon format."""

    def test_parse_ghareeb_text(self):
        text = "\n".join([
            "# word\tsurah\tverse\tmeaning",
            "لَا رَيۡبَ\tالبقرة\t٢\tلا شك",
            "ٱلۡغَيۡبِ\tالبقرة\t٣\tما غاب عن الحواس",
            "ٱلۡغَيۡبِ\tالبقرة\t٣\tما غاب عن الحواس",
            "يُنفِقُونَ\tالبقرة\t٣\tيبذلون",
            "كلمة\tسورة مجهولة\t١\tمعنى",
            "ناقص\tالبقرة",
            "",
        ])
        entries = parse_ghareeb_text(text)

        assert [e.word_text for e in entries] == ["لَا رَيۡبَ", "ٱلۡغَيۡبِ", "يُنفِقُونَ"]
        assert [e.verse_number for e in entries] == [2, 3, 3]
        assert [e.word_index for e in entries] == [0, 0, 1]
        assert all(e.surah_number == 2 for e in entries)

    def test_extract_word_from_raw(self):
        assert extract_word_from_raw("﴿وَٰسِعٌ﴾ أي واسع الفضل") == "وَٰسِعٌ"
        assert extract_word_from_raw("بدون أقواس") == ""

    @pytest.mark.parametrize("digits,expected", [
        ("١١٥", 115),
        ("۱۱۵", 115),
        ("115", 115),
        ("﴿٧﴾", 7),
        ("", 0),
    ])
    def test_arabic_to_int(self, digits, expected):
        assert arabic_to_int(digits) == expected

    @pytest.mark.parametrize("name,number", [
        ("البقرة", 2),
        ("آل عمران", 3),
        ("آل_عمران", 3),
        ("ٱلۡفَاتِحَةِ", 1),
        ("الناس", 114),
    ])
    def test_surah_number_for_name(self, name, number):
        assert surah_number_for_name(name) == number
