"""
Position-preserving tokenization of mushaf lines.

Lines are split on whitespace with the whitespace kept as tokens, so joining
the token texts always reproduces the line. Decorative glyphs are stripped
only to decide a token's kind; the token text itself is never altered.
"""

import re
from typing import Iterable

from ghareeb.core.arabic import (
    classify_line,
    extract_surah_name,
    normalize,
    normalize_surah_name,
)
from ghareeb.models.token import LineKind, PageLine, Token, TokenKind


WHITESPACE_SPLIT_PATTERN = re.compile(r"(\s+)")

# Ornate brackets, verse-end ornament, rub el hizb, punctuation and pause marks
DECORATIVE_PATTERN = re.compile(
    r"[\uFD3E\uFD3F()\[\]{}\u06DD\u06DE\u066D\u061F\u060C\u06D4\u06D6-\u06ED]"
)

# Arabic-Indic, Extended Arabic-Indic (Persian) and Latin digits
VERSE_NUMBER_PATTERN = re.compile(r"[\u0660-\u0669\u06F0-\u06F90-9]+")


def _classify_token(text: str) -> tuple[TokenKind, str]:
    """Return the token kind and its normalized text."""
    if text.isspace():
        return TokenKind.WHITESPACE, ""

    stripped = DECORATIVE_PATTERN.sub("", text).strip()
    if VERSE_NUMBER_PATTERN.fullmatch(stripped):
        return TokenKind.VERSE_NUMBER, ""

    normalized = normalize(stripped)
    if not normalized:
        return TokenKind.DECORATIVE, ""

    return TokenKind.WORD, normalized


def tokenize(line: str, line_index: int = 0) -> list[Token]:
    """
    Split a line into word, whitespace, verse-number and decorative tokens.

    Args:
        line: A single mushaf line
        line_index: Index of the line on its page

    Returns:
        Tokens in order; ``"".join(t.text for t in tokens) == line``

    Examples:
        >>> [t.kind.value for t in tokenize("الرَّحْمٰنِ ﴿١﴾")]
        ['word', 'whitespace', 'verse_number']
    """
    if not isinstance(line, str) or not line:
        return []

    tokens: list[Token] = []
    for part in WHITESPACE_SPLIT_PATTERN.split(line):
        if not part:
            continue
        kind, normalized = _classify_token(part)
        tokens.append(
            Token(
                text=part,
                line_index=line_index,
                token_index=len(tokens),
                kind=kind,
                normalized_text=normalized,
            )
        )
    return tokens


def split_page_text(text: str) -> list[str]:
    """
    Split page text into lines, preserving empty and whitespace-only lines.

    LF and CRLF line endings are both accepted.
    """
    if not text:
        return []
    return text.replace("\r\n", "\n").split("\n")


def surah_context_map(lines: Iterable[str], surah_name: str | None = None) -> list[str]:
    """
    Compute the normalized surah each line belongs to.

    Lines before the page's first header belong to the previous surah: they
    inherit ``surah_name`` when the caller knows it, otherwise the empty
    wildcard context.

    Args:
        lines: Page lines, top to bottom
        surah_name: Surah the page starts in, if known

    Returns:
        One normalized surah name (spaces removed) per line
    """
    current = normalize_surah_name(surah_name or "")
    contexts: list[str] = []

    for line in lines:
        if classify_line(line) == LineKind.SURAH_HEADER:
            current = normalize_surah_name(extract_surah_name(line))
        contexts.append(current)

    return contexts


def tokenize_page(lines: Iterable[str] | str, surah_name: str | None = None) -> list[PageLine]:
    """
    Classify and tokenize every line of a page.

    Header and bismillah lines bypass tokenization and carry no tokens.

    Args:
        lines: Page lines, or the whole page text separated by newlines
        surah_name: Surah the page starts in, if known

    Returns:
        One PageLine per input line
    """
    if isinstance(lines, str):
        lines = split_page_text(lines)
    else:
        lines = list(lines)

    contexts = surah_context_map(lines, surah_name)
    page: list[PageLine] = []

    for line_index, (line, context) in enumerate(zip(lines, contexts)):
        kind = classify_line(line)
        tokens = tuple(tokenize(line, line_index)) if kind == LineKind.TEXT else ()
        page.append(
            PageLine(
                line_index=line_index,
                text=line,
                kind=kind,
                tokens=tokens,
                surah_context=context,
            )
        )

    return page
