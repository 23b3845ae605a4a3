"""
Pydantic data models for the ghareeb library.

These models represent the core data structures used throughout the library:
- LexiconEntry: A ghareeb word/phrase with its meaning and location
- MatchCandidate: A lexicon entry prepared for alignment
- Token / PageLine: Position-preserving pieces of page text
- MatchSpan / AlignmentResult: Output of the alignment engine
- SpeechMatchResult: Output of the speech match engine
"""

from ghareeb.models.lexicon import LexiconEntry, MatchCandidate
from ghareeb.models.token import LineKind, PageLine, Token, TokenKind
from ghareeb.models.result import (
    AlignmentResult,
    AlignmentStats,
    MatchSpan,
    MatchVia,
    SpeechMatchResult,
)
from ghareeb.models.surah import SURAH_NAMES

__all__ = [
    "LexiconEntry",
    "MatchCandidate",
    "LineKind",
    "PageLine",
    "Token",
    "TokenKind",
    "AlignmentResult",
    "AlignmentStats",
    "MatchSpan",
    "MatchVia",
    "SpeechMatchResult",
    "SURAH_NAMES",
]
