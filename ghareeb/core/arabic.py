"""
Arabic text normalization utilities.

This module provides the normalization shared by lexicon alignment and speech
matching, plus the line rules that identify surah headers and bismillah lines.
Two renderings of the same word (fully diacritized Uthmani script, plain
script, ASR output) must normalize to the same string.
"""

import re

from ghareeb.models.token import LineKind


# Diacritics, tajweed and Quranic annotation marks (all combining)
DIACRITICS_PATTERN = re.compile(r"[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06ED\u08D3-\u08FF]")

# Hamza-bearing and decorated alef forms, including alef wasla ٱ (U+0671)
ALEF_VARIANTS_PATTERN = re.compile(r"[\u0671\u0625\u0623\u0622\u0672\u0673\u0675]")

# Everything outside the Arabic letter blocks and whitespace is dropped
NOT_ALLOWED_PATTERN = re.compile(r"[^\u0621-\u064A\u066E-\u06D3\s]")

WHITESPACE_PATTERN = re.compile(r"\s+")

_LETTER_MAP = str.maketrans(
    {
        "ى": "ي",  # alef maqsura
        "ۀ": "ه",  # heh with yeh above
        "ة": "ه",  # teh marbuta
        "ؤ": "و",
        "ئ": "ي",
        "ء": None,  # standalone hamza
        "ـ": None,  # tatweel
    }
)

# Normalized forms used by the line rules
SURAH_HEADER_WORD = "سوره"
BASMALA_PREFIX = "بسم الله الرحمن الرحيم"

# A header line is "سورة" followed by a one or two word name
_MAX_HEADER_WORDS = 3


def normalize(text: str) -> str:
    """
    Normalize Arabic text for comparison.

    Performs the following normalizations:
    - Remove diacritics, tajweed marks and superscript alef
    - Replace all alef variants (ٱ إ أ آ ٲ ٳ ٵ) with plain alef (ا)
    - Replace alef maqsura (ى) with ya (ي) and ta marbuta (ة) with ha (ه)
    - Replace hamza carriers ؤ → و, ئ → ي and drop standalone hamza and tatweel
    - Drop any remaining character that is not an Arabic letter or whitespace
    - Collapse whitespace runs and trim

    The result is idempotent: ``normalize(normalize(s)) == normalize(s)``.
    Never raises; non-string input normalizes to an empty string.

    Args:
        text: Arabic text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize("بِسْمِ اللَّهِ")
        'بسم الله'
        >>> normalize("ٱلرَّحۡمَٰنِ ﴿١﴾")
        'الرحمن'
    """
    if not isinstance(text, str) or not text:
        return ""

    text = DIACRITICS_PATTERN.sub("", text)
    text = ALEF_VARIANTS_PATTERN.sub("ا", text)
    text = text.translate(_LETTER_MAP)
    text = NOT_ALLOWED_PATTERN.sub("", text)

    return WHITESPACE_PATTERN.sub(" ", text).strip()


normalize_arabic = normalize


def normalize_surah_name(name: str) -> str:
    """
    Normalize a surah name for context comparison.

    Spaces are removed entirely so "آل عمران" and "آل_عمران" compare equal.
    """
    return normalize(name).replace(" ", "")


def is_surah_header(line: str) -> bool:
    """
    Check if a page line is a surah header ("سُورَةُ البَقَرَةِ").

    The rule is applied to the normalized line: the first word is "سوره" and
    the line is short enough to be a title rather than a verse line such as
    "سُورَةٌ أَنزَلۡنَٰهَا وَفَرَضۡنَٰهَا ...".
    """
    words = normalize(line).split()
    return bool(words) and words[0] == SURAH_HEADER_WORD and len(words) <= _MAX_HEADER_WORDS


def is_bismillah(line: str) -> bool:
    """Check if a page line is the bismillah line."""
    return normalize(line).startswith(BASMALA_PREFIX)


def extract_surah_name(line: str) -> str:
    """
    Extract the surah name from a header line.

    Returns:
        Normalized surah name (words separated by single spaces), or an empty
        string when the line is not a header
    """
    if not is_surah_header(line):
        return ""
    return " ".join(normalize(line).split()[1:])


def classify_line(line: str) -> LineKind:
    """
    Classify a page line as surah header, bismillah or regular text.

    Examples:
        >>> classify_line("سُورَةُ البَقَرَةِ")
        <LineKind.SURAH_HEADER: 'surah_header'>
        >>> classify_line("بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ")
        <LineKind.BISMILLAH: 'bismillah'>
    """
    if is_surah_header(line):
        return LineKind.SURAH_HEADER
    if is_bismillah(line):
        return LineKind.BISMILLAH
    return LineKind.TEXT
