"""
Alignment and speech match result data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from ghareeb.models.lexicon import LexiconEntry


class MatchVia(str, Enum):
    """Which alignment pass produced a span."""

    EXACT = "exact"
    LOOSE = "loose"


class MatchSpan(BaseModel):
    """
    A lexicon entry bound to consecutive word tokens of one line.

    Attributes:
        entry_id: Identity of the matched entry
        line_index: Line the span lies on
        token_indices: Ordered indices of the word tokens covered
        matched_via: Pass that produced the match
        sequential_index: 0-based reading-order position on the page
        entry: The matched lexicon entry
    """

    entry_id: str
    line_index: int = Field(..., ge=0)
    token_indices: tuple[int, ...] = Field(..., min_length=1)
    matched_via: MatchVia
    sequential_index: int = Field(default=-1, ge=-1)
    entry: Optional[LexiconEntry] = None

    model_config = {"frozen": True}

    @property
    def first_token_index(self) -> int:
        return self.token_indices[0]

    @property
    def is_phrase(self) -> bool:
        """Whether the span covers more than one word token."""
        return len(self.token_indices) > 1

    @property
    def sort_key(self) -> tuple[int, int]:
        """Reading-order key: line first, then first token."""
        return (self.line_index, self.first_token_index)

    def __str__(self) -> str:
        return (
            f"MatchSpan(#{self.sequential_index} {self.entry_id} @ "
            f"{self.line_index}:{list(self.token_indices)}, {self.matched_via.value})"
        )


class AlignmentStats(BaseModel):
    """Statistics of one page alignment; anomalies are reported here, never raised."""

    total_entries: int = Field(default=0, ge=0)
    candidate_count: int = Field(default=0, ge=0)
    exact_count: int = Field(default=0, ge=0)
    loose_count: int = Field(default=0, ge=0)
    unmatched_entry_ids: list[str] = Field(default_factory=list)
    empty_normalized_entry_ids: list[str] = Field(default_factory=list)
    duplicate_entry_ids: list[str] = Field(default_factory=list)
    off_page_entry_ids: list[str] = Field(default_factory=list)
    header_lines: int = Field(default=0, ge=0)
    word_tokens: int = Field(default=0, ge=0)

    @computed_field
    @property
    def matched_count(self) -> int:
        return self.exact_count + self.loose_count

    @computed_field
    @property
    def coverage_percent(self) -> float:
        """Share of candidates matched on the page, as a percentage."""
        if self.candidate_count == 0:
            return 0.0
        return round(self.matched_count / self.candidate_count * 100, 2)


class AlignmentResult(BaseModel):
    """
    Result of aligning a lexicon onto one page.

    ``spans`` are sorted by (line_index, first token index); each span's
    ``sequential_index`` equals its position in this list.
    """

    spans: list[MatchSpan] = Field(default_factory=list)
    stats: AlignmentStats = Field(default_factory=AlignmentStats)

    def span_for_token(self, line_index: int, token_index: int) -> MatchSpan | None:
        """Find the span covering a token, if any."""
        for span in self.spans:
            if span.line_index == line_index and token_index in span.token_indices:
                return span
        return None

    def by_entry_id(self) -> dict[str, MatchSpan]:
        """Map entry ids to their spans."""
        return {span.entry_id: span for span in self.spans}


class SpeechMatchResult(BaseModel):
    """
    Result of matching hidden target words against a spoken transcript.

    Attributes:
        matched: Target words found, in target order
        missing: Target words not found, in target order
        score: Ratio of matched targets to all targets (0.0-1.0)
        spoken_indices: Spoken-word index consumed by each matched word
            (-1 for targets that normalize to nothing)
    """

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0)
    spoken_indices: list[int] = Field(default_factory=list)

    @computed_field
    @property
    def success(self) -> bool:
        """Whether every target word was matched."""
        return not self.missing

    def __str__(self) -> str:
        return (
            f"SpeechMatchResult({len(self.matched)}/{len(self.matched) + len(self.missing)}, "
            f"score={self.score:.2f})"
        )
