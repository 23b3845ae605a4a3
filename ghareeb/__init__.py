"""
غريب (ghareeb): Align a lexicon of rare Quranic words onto mushaf pages,
and match recited words for memorization quizzes.

Usage:
    from ghareeb import LexiconIndex, align_page, match_hidden_words_in_order, parse_entries

    # Align
    entries = parse_entries(records)
    index = LexiconIndex.build(entries)
    result = align_page(page_lines, index, surah_name="البقرة")

    for span in result.spans:
        print(f"#{span.sequential_index} {span.entry.word_text}: line {span.line_index}")

    # Quiz
    quiz = match_hidden_words_in_order(transcript, ["الرحيم", "لله"], "medium")
    print(quiz.matched, quiz.missing, quiz.score)
"""

from ghareeb.models import (
    AlignmentResult,
    AlignmentStats,
    LexiconEntry,
    MatchCandidate,
    MatchSpan,
    MatchVia,
    SpeechMatchResult,
    Token,
    TokenKind,
)
from ghareeb.core import (
    Aligner,
    LexiconIndex,
    MatchLevel,
    align_page,
    audit_alignment,
    match_hidden_words_in_order,
    normalize,
    parse_entries,
    parse_ghareeb_text,
    similarity,
    tokenize,
)
from ghareeb.config import GhareebSettings, get_settings, configure
from ghareeb.exceptions import GhareebError, LexiconError, ConfigurationError

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "AlignmentResult",
    "AlignmentStats",
    "LexiconEntry",
    "MatchCandidate",
    "MatchSpan",
    "MatchVia",
    "SpeechMatchResult",
    "Token",
    "TokenKind",
    # Engines
    "Aligner",
    "LexiconIndex",
    "MatchLevel",
    "align_page",
    "audit_alignment",
    "match_hidden_words_in_order",
    "normalize",
    "parse_entries",
    "parse_ghareeb_text",
    "similarity",
    "tokenize",
    # Config
    "GhareebSettings",
    "get_settings",
    "configure",
    # Exceptions
    "GhareebError",
    "LexiconError",
    "ConfigurationError",
]
