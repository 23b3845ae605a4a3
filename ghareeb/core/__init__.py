"""
Core modules for the ghareeb library.

This package contains the core logic for:
- Arabic text normalization
- Position-preserving tokenization of mushaf lines
- Lexicon indexing and alignment onto page text
- Ordered fuzzy matching of speech transcripts

Primary API:
    from ghareeb.core import LexiconIndex, align_page, match_hidden_words_in_order

    index = LexiconIndex.build(entries)
    result = align_page(page_text, index, surah_name="البقرة")

    quiz = match_hidden_words_in_order(transcript, hidden_words, "medium")
"""

# Primary API - what most users need
from ghareeb.core.aligner import Aligner, AlignmentContext, align_page, assign_sequential_indices
from ghareeb.core.lexicon import LexiconIndex, build, parse_entries, parse_ghareeb_text
from ghareeb.core.speech import MatchLevel, match_hidden_words_in_order, select_threshold

# Text utilities - commonly used
from ghareeb.core.arabic import normalize, normalize_arabic, classify_line
from ghareeb.core.tokenizer import tokenize, tokenize_page
from ghareeb.core.matcher import levenshtein, similarity, is_loose_match

# Audit - for inspecting results
from ghareeb.core.audit import AuditReport, audit_alignment

__all__ = [
    # Primary API
    "Aligner",
    "AlignmentContext",
    "align_page",
    "assign_sequential_indices",
    "LexiconIndex",
    "build",
    "parse_entries",
    "parse_ghareeb_text",
    "MatchLevel",
    "match_hidden_words_in_order",
    "select_threshold",
    # Text utilities
    "normalize",
    "normalize_arabic",
    "classify_line",
    "tokenize",
    "tokenize_page",
    "levenshtein",
    "similarity",
    "is_loose_match",
    # Audit
    "AuditReport",
    "audit_alignment",
]
