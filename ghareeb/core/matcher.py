"""
Similarity matching primitives for Arabic text.

This module provides the word-level comparisons shared by the alignment
engine (exact and loose word tests) and the speech match engine (edit
distance similarity).

Uses SIMD-accelerated rapidfuzz for fast edit distance.
"""

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein

from ghareeb.core.arabic import normalize


def levenshtein(a: str, b: str) -> int:
    """
    Classic edit distance: insertions, deletions and substitutions, unit cost.

    Examples:
        >>> levenshtein("الرحمن", "الرحيم")
        2
    """
    return _rapidfuzz_levenshtein.distance(a, b)


def similarity(a: str, b: str, normalize_text: bool = False) -> float:
    """
    Compute the edit-distance similarity between two strings.

    ``1 - levenshtein(a, b) / max(len(a), len(b))``; two empty strings are
    identical (1.0).

    Args:
        a: First string to compare
        b: Second string to compare
        normalize_text: Whether to normalize Arabic text before comparison

    Returns:
        Similarity ratio between 0.0 and 1.0

    Examples:
        >>> similarity("الرحيم", "الرحيم")
        1.0
        >>> similarity("بِسْمِ", "بسم", normalize_text=True)
        1.0
    """
    if normalize_text:
        a = normalize(a)
        b = normalize(b)

    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    return 1.0 - levenshtein(a, b) / max_len


def is_exact_match(token_word: str, candidate_word: str) -> bool:
    """Exact comparison of two normalized words."""
    return token_word == candidate_word


def is_loose_match(
    token_word: str,
    candidate_word: str,
    max_length_diff: int = 2,
    min_length: int = 3,
) -> bool:
    """
    Loose comparison of two normalized words.

    Matches on equality, or when one word contains the other, their lengths
    differ by at most ``max_length_diff`` and the shorter word has at least
    ``min_length`` characters. Very short words never match by containment,
    otherwise particles would match inside unrelated words.

    Examples:
        >>> is_loose_match("والارض", "الارض")
        True
        >>> is_loose_match("من", "منهم")
        False
    """
    if token_word == candidate_word:
        return True

    if abs(len(token_word) - len(candidate_word)) > max_length_diff:
        return False

    if min(len(token_word), len(candidate_word)) < min_length:
        return False

    return token_word in candidate_word or candidate_word in token_word
