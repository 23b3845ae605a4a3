"""
Lexicon (ghareeb) entry and match candidate data models.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Decorative brackets that sometimes wrap the word in source records
_WORD_BRACKETS = re.compile(r"[﴿﴾()（）]")


class LexiconEntry(BaseModel):
    """
    A rare or difficult word/phrase annotated with its meaning and location.

    Records are validated once at the ingestion boundary. Both snake_case and
    camelCase keys are accepted (``word_text`` or ``wordText``).

    Attributes:
        word_text: The word or multi-word phrase as it appears in the mushaf
        meaning: Explanatory meaning (may be empty; flagged by the audit)
        surah_name: Arabic surah name
        surah_number: Surah number (1-114)
        verse_number: Verse number within the surah (1-based)
        word_index: Position of the word within the verse
        page_number: Optional page hint
        entry_id: Stable identity; derived from the location when absent
    """

    word_text: str = Field(
        ...,
        description="Word or phrase text",
        min_length=1,
    )
    meaning: str = Field(
        default="",
        description="Explanatory meaning of the word",
    )
    surah_name: str = Field(
        ...,
        description="Arabic surah name",
    )
    surah_number: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    verse_number: int = Field(
        ...,
        description="Verse number within the surah (1-based)",
        ge=1,
    )
    word_index: int = Field(
        default=0,
        description="Position of the word within the verse",
        ge=0,
    )
    page_number: Optional[int] = Field(
        default=None,
        description="Page hint from the source lexicon",
        ge=1,
    )
    entry_id: str = Field(
        ...,
        description="Stable entry identity",
        min_length=1,
    )

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "wordText": "وَٰسِعٌ",
                    "meaning": "واسع الفضل والعطاء",
                    "surahName": "البقرة",
                    "surahNumber": 2,
                    "verseNumber": 115,
                    "wordIndex": 14,
                    "pageNumber": 18,
                }
            ]
        },
    }

    @model_validator(mode="before")
    @classmethod
    def derive_entry_id(cls, data: Any) -> Any:
        """Derive ``entry_id`` from surah/verse/word index when not supplied."""
        if not isinstance(data, dict):
            return data
        if data.get("entry_id") or data.get("entryId"):
            return data

        surah = data.get("surah_number", data.get("surahNumber"))
        verse = data.get("verse_number", data.get("verseNumber"))
        word_index = data.get("word_index", data.get("wordIndex", 0))
        return {**data, "entry_id": f"{surah}_{verse}_{word_index}"}

    @field_validator("word_text")
    @classmethod
    def strip_brackets(cls, v: str) -> str:
        """Remove decorative brackets; a bracket-only word is invalid."""
        cleaned = _WORD_BRACKETS.sub("", v).strip()
        if not cleaned:
            raise ValueError("word_text is empty after removing brackets")
        return cleaned

    @field_validator("surah_name", "meaning")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    def __str__(self) -> str:
        return f"LexiconEntry({self.surah_number}:{self.verse_number}, {self.word_text})"


class MatchCandidate(BaseModel):
    """
    A lexicon entry prepared for alignment.

    Attributes:
        entry: The source lexicon entry
        entry_id: Identity of the source entry
        normalized_full: Normalized full text of the entry
        words: Normalized constituent words (short fragments dropped)
        word_count: Number of constituent words
        normalized_surah: Normalized surah name with spaces removed
    """

    entry: LexiconEntry
    entry_id: str
    normalized_full: str
    words: tuple[str, ...]
    word_count: int = Field(..., ge=0)
    normalized_surah: str

    model_config = {"frozen": True}

    @property
    def is_phrase(self) -> bool:
        """Whether the candidate spans more than one word."""
        return self.word_count > 1

    def __str__(self) -> str:
        return f"MatchCandidate({self.entry_id}, {' '.join(self.words)})"
