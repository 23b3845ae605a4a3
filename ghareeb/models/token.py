"""
Page token and line data models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class TokenKind(str, Enum):
    """Classification of a line token."""

    WORD = "word"
    WHITESPACE = "whitespace"
    VERSE_NUMBER = "verse_number"
    DECORATIVE = "decorative"  # ornaments and pause marks standing alone


class LineKind(str, Enum):
    """Classification of a page line."""

    TEXT = "text"
    SURAH_HEADER = "surah_header"  # سورة البقرة
    BISMILLAH = "bismillah"  # بسم الله الرحمن الرحيم


class Token(BaseModel):
    """
    A position-preserving piece of a mushaf line.

    Attributes:
        text: Verbatim token text
        line_index: Index of the line on the page
        token_index: Index of the token within the line
        kind: Word, whitespace or verse number
        normalized_text: Normalized text (empty for non-word tokens)
    """

    text: str
    line_index: int = Field(default=0, ge=0)
    token_index: int = Field(..., ge=0)
    kind: TokenKind
    normalized_text: str = ""

    model_config = {"frozen": True}

    @property
    def is_word(self) -> bool:
        return self.kind == TokenKind.WORD

    def __str__(self) -> str:
        return f"Token({self.line_index}:{self.token_index}, {self.kind.value}, {self.text!r})"


class PageLine(BaseModel):
    """
    A classified page line with its tokens and surah context.

    Header and bismillah lines carry no tokens and are excluded from matching.
    ``surah_context`` is the normalized surah name the line belongs to, or an
    empty string when unknown (matches any surah).
    """

    line_index: int = Field(..., ge=0)
    text: str
    kind: LineKind = LineKind.TEXT
    tokens: tuple[Token, ...] = ()
    surah_context: str = ""

    model_config = {"frozen": True}

    @property
    def is_matchable(self) -> bool:
        """Whether lexicon entries may be matched on this line."""
        return self.kind == LineKind.TEXT
