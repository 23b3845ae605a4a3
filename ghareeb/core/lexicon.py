"""
Lexicon index: turning ghareeb entries into ordered match candidates.

This module also holds the ingestion boundary where raw lexicon records
(dicts from JSON, or the tab-separated text format) are validated once into
LexiconEntry models.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from pydantic import ValidationError

from ghareeb._logging import get_logger, log_empty_normalized, log_warning
from ghareeb.config import GhareebSettings, get_settings
from ghareeb.core.arabic import normalize, normalize_surah_name
from ghareeb.exceptions import LexiconError
from ghareeb.models.lexicon import LexiconEntry, MatchCandidate
from ghareeb.models.surah import SURAH_NAMES

logger = get_logger(__name__)

# The Quranic word inside a raw annotation: "... ﴿وَٰسِعٌ﴾ ..."
RAW_WORD_PATTERN = re.compile(r"﴿([^﴾]+)﴾")

_ARABIC_DIGITS = str.maketrans("٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹", "01234567890123456789")

_SURAH_NUMBERS: dict[str, int] = {
    normalize_surah_name(name): number for number, name in SURAH_NAMES.items()
}


def make_candidate(
    entry: LexiconEntry,
    settings: GhareebSettings | None = None,
) -> MatchCandidate:
    """
    Prepare one lexicon entry for matching.

    The entry text is normalized and split into words; fragments shorter than
    ``min_fragment_length`` (single letters left over from particles or
    stripped marks) are dropped.
    """
    settings = settings or get_settings()
    normalized_full = normalize(entry.word_text)
    words = tuple(
        word for word in normalized_full.split() if len(word) >= settings.min_fragment_length
    )
    return MatchCandidate(
        entry=entry,
        entry_id=entry.entry_id,
        normalized_full=normalized_full,
        words=words,
        word_count=len(words),
        normalized_surah=normalize_surah_name(entry.surah_name),
    )


@dataclass
class LexiconIndex:
    """
    Match candidates for a set of lexicon entries.

    Candidates are sorted by word count, longest first, so a phrase is always
    attempted before any single word that starts it. The sort is stable:
    entries with equal word counts keep their input order.

    Attributes:
        candidates: Ordered candidates ready for alignment
        empty_normalized: Entries excluded because no fragment survived
            normalization
        duplicates: Entries excluded because an earlier entry has the same
            ``entry_id``
    """

    candidates: list[MatchCandidate] = field(default_factory=list)
    empty_normalized: list[LexiconEntry] = field(default_factory=list)
    duplicates: list[LexiconEntry] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        entries: Iterable[LexiconEntry | MatchCandidate],
        settings: GhareebSettings | None = None,
    ) -> "LexiconIndex":
        """
        Build an index from lexicon entries.

        Prebuilt match candidates may be mixed in; they are kept as given.

        Never raises for unusable entries; they are reported in
        ``empty_normalized`` or ``duplicates`` and logged. The first entry
        with a given ``entry_id`` is kept.
        """
        settings = settings or get_settings()
        candidates: list[MatchCandidate] = []
        empty: list[LexiconEntry] = []
        duplicates: list[LexiconEntry] = []
        seen_ids: set[str] = set()

        for item in entries:
            entry = item.entry if isinstance(item, MatchCandidate) else item
            if entry.entry_id in seen_ids:
                duplicates.append(entry)
                log_warning(
                    "Skipping lexicon entry with duplicate id",
                    entry_id=entry.entry_id,
                    word_text=entry.word_text,
                )
                continue
            seen_ids.add(entry.entry_id)

            if isinstance(item, MatchCandidate):
                candidate = item
            else:
                candidate = make_candidate(entry, settings)
            if candidate.word_count == 0:
                empty.append(entry)
                log_empty_normalized(entry.entry_id, entry.word_text)
                continue
            candidates.append(candidate)

        candidates.sort(key=lambda c: c.word_count, reverse=True)
        return cls(candidates=candidates, empty_normalized=empty, duplicates=duplicates)

    @property
    def entry_count(self) -> int:
        return len(self.candidates) + len(self.empty_normalized) + len(self.duplicates)

    @property
    def empty_normalized_ids(self) -> list[str]:
        return [entry.entry_id for entry in self.empty_normalized]

    @property
    def duplicate_ids(self) -> list[str]:
        return [entry.entry_id for entry in self.duplicates]


def build(
    entries: Iterable[LexiconEntry],
    settings: GhareebSettings | None = None,
) -> list[MatchCandidate]:
    """
    Build ordered match candidates from lexicon entries.

    Args:
        entries: Validated lexicon entries
        settings: Optional settings (defaults to global settings)

    Returns:
        Candidates sorted by word count, descending
    """
    return LexiconIndex.build(entries, settings).candidates


# ============ Ingestion boundary ============


def parse_entries(
    records: Iterable[dict[str, Any] | LexiconEntry],
    *,
    skip_invalid: bool = True,
) -> list[LexiconEntry]:
    """
    Validate raw lexicon records into LexiconEntry models.

    Args:
        records: Dicts with snake_case or camelCase keys (or entries already
            validated, which pass through)
        skip_invalid: Log and skip invalid records instead of raising

    Returns:
        Validated entries in input order

    Raises:
        LexiconError: If a record is invalid and ``skip_invalid`` is False
    """
    entries: list[LexiconEntry] = []

    for index, record in enumerate(records):
        if isinstance(record, LexiconEntry):
            entries.append(record)
            continue
        try:
            entries.append(LexiconEntry.model_validate(record))
        except ValidationError as e:
            word_text = None
            if isinstance(record, dict):
                word_text = record.get("word_text") or record.get("wordText")
            if not skip_invalid:
                raise LexiconError(
                    f"Invalid lexicon record: {e.error_count()} validation error(s)",
                    record_index=index,
                    word_text=word_text,
                ) from e
            log_warning("Skipping invalid lexicon record", record_index=index, word_text=word_text)

    return entries


def extract_word_from_raw(raw: str) -> str:
    """
    Extract the Quranic word from a raw annotation field.

    The word is the text between the ornate brackets ﴿ and ﴾.

    Examples:
        >>> extract_word_from_raw("﴿وَٰسِعٌ﴾ أي واسع الفضل")
        'وَٰسِعٌ'
    """
    match = RAW_WORD_PATTERN.search(raw or "")
    if match:
        return match.group(1).strip()
    return ""


def arabic_to_int(digits: str) -> int:
    """
    Convert a string of Arabic-Indic, Persian or Latin digits to an int.

    Non-digit characters are ignored; returns 0 when no digit is present.
    """
    converted = "".join(ch for ch in (digits or "").translate(_ARABIC_DIGITS) if ch in "0123456789")
    return int(converted) if converted else 0


def surah_number_for_name(name: str) -> int | None:
    """Look up a surah number by (possibly diacritized) Arabic name."""
    return _SURAH_NUMBERS.get(normalize_surah_name(name))


def parse_ghareeb_text(text: str) -> list[LexiconEntry]:
    """
    Parse the tab-separated lexicon text format.

    Each line holds ``word<TAB>surah name<TAB>verse<TAB>meaning[<TAB>tags]``
    with the verse in Arabic-Indic digits. Comment lines (``#``), short rows,
    rows with a blank word or meaning, rows with an unknown surah and exact
    duplicates are skipped. ``word_index`` is the entry's ordinal within its
    verse.

    Args:
        text: Lexicon file content

    Returns:
        Validated entries in file order
    """
    entries: list[LexiconEntry] = []
    seen: set[tuple[str, str, int, str]] = set()
    per_verse: dict[tuple[int, int], int] = {}

    for line_no, line in enumerate((text or "").split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split("\t")
        if len(parts) < 4:
            continue

        word_text = re.sub(r"[﴾﴿()（）]", "", parts[0]).strip()
        surah_name = parts[1].strip()
        verse_number = arabic_to_int(parts[2])
        meaning = parts[3].strip()
        if not word_text or not meaning:
            continue

        key = (word_text, surah_name, verse_number, meaning)
        if key in seen:
            continue
        seen.add(key)

        surah_number = surah_number_for_name(surah_name)
        if surah_number is None or verse_number < 1:
            log_warning("Skipping lexicon line with unknown location", line=line_no, surah=surah_name)
            continue

        word_index = per_verse.get((surah_number, verse_number), 0)
        per_verse[(surah_number, verse_number)] = word_index + 1

        entries.append(
            LexiconEntry(
                word_text=word_text,
                meaning=meaning,
                surah_name=surah_name,
                surah_number=surah_number,
                verse_number=verse_number,
                word_index=word_index,
            )
        )

    logger.debug(f"Parsed {len(entries)} unique lexicon entries")
    return entries
