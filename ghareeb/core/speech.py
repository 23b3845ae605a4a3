"""
Ordered matching of hidden quiz words against a spoken transcript.

The quiz controller polls :func:`match_hidden_words_in_order` with the
growing transcript from the platform recognizer. Matching is a single forward
scan: each target word consumes the first spoken word (after the previous
match) that is similar enough, so extra recited words are tolerated but the
order of the targets is enforced.
"""

from enum import Enum
from typing import Sequence, Union

from ghareeb._logging import log_speech_match
from ghareeb.config import GhareebSettings, get_settings
from ghareeb.core.arabic import normalize
from ghareeb.core.matcher import similarity
from ghareeb.exceptions import ConfigurationError
from ghareeb.models import SpeechMatchResult


class MatchLevel(str, Enum):
    """Threshold policy levels chosen by the quiz user."""

    STRICT = "strict"
    MEDIUM = "medium"
    LOOSE = "loose"


Threshold = Union[float, MatchLevel, str, None]


def split_words(text: str) -> list[str]:
    """Split text into non-empty whitespace-separated words."""
    return text.split() if text else []


def _coerce_level(level: MatchLevel | str) -> MatchLevel:
    try:
        return MatchLevel(level)
    except ValueError:
        raise ConfigurationError(
            f"Unknown match level: {level!r}",
            setting_name="match_level",
            context={"allowed": [m.value for m in MatchLevel]},
        ) from None


def select_threshold(
    level: MatchLevel | str,
    target: str,
    settings: GhareebSettings | None = None,
) -> float:
    """
    Pick the similarity threshold for one target word.

    Short normalized targets (``short_target_length`` characters or fewer)
    use the stricter short-target threshold of the level: on a three-letter
    word a single wrong letter already drops similarity to 0.67.

    Args:
        level: Policy level (strict, medium, loose)
        target: The target word (normalized internally)
        settings: Optional settings (defaults to global settings)

    Returns:
        Threshold in [0, 1]

    Raises:
        ConfigurationError: If the level is unknown
    """
    settings = settings or get_settings()
    level = _coerce_level(level)
    long_threshold, short_threshold = settings.thresholds_for(level.value)

    if len(normalize(target)) <= settings.short_target_length:
        return short_threshold
    return long_threshold


def _threshold_for(
    threshold: Threshold,
    target: str,
    settings: GhareebSettings,
) -> float:
    if threshold is None:
        if settings.match_level is not None:
            return select_threshold(settings.match_level, target, settings)
        return settings.default_speech_threshold
    if isinstance(threshold, (MatchLevel, str)):
        return select_threshold(threshold, target, settings)
    return float(threshold)


def match_hidden_words_in_order(
    transcript: str,
    target_words: Sequence[str],
    threshold: Threshold = None,
    settings: GhareebSettings | None = None,
) -> SpeechMatchResult:
    """
    Match target words, in order, within a spoken transcript.

    For each target the cursor advances through the spoken words (never
    rewinding) until one reaches the threshold; spoken words passed over are
    never revisited. Targets that normalize to nothing count as matched
    without consuming a spoken word.

    Args:
        transcript: Raw transcript from the speech recognizer
        target_words: Hidden words to find, in reading order
        threshold: Similarity threshold applied to every target, or a match
            level resolved per target via :func:`select_threshold`. Defaults
            to the configured ``match_level``, or ``default_speech_threshold``
            when no level is configured.
        settings: Optional settings (defaults to global settings)

    Returns:
        SpeechMatchResult; an empty target list scores 1.0

    Raises:
        ConfigurationError: If a numeric threshold is outside [0, 1] or a
            level is unknown

    Examples:
        >>> r = match_hidden_words_in_order("الرحمن الرحيم الحمد لله", ["الرحيم", "لله"], 0.8)
        >>> r.matched, r.missing, r.score
        (['الرحيم', 'لله'], [], 1.0)
    """
    settings = settings or get_settings()

    if isinstance(threshold, (int, float)) and not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(
            f"Threshold must be between 0 and 1, got {threshold}",
            setting_name="threshold",
        )
    if isinstance(threshold, str):
        threshold = _coerce_level(threshold)

    if not target_words:
        return SpeechMatchResult(score=1.0)

    spoken = split_words(normalize(transcript))

    matched: list[str] = []
    missing: list[str] = []
    spoken_indices: list[int] = []
    cursor = 0

    for target in target_words:
        target_norm = normalize(target)
        if not target_norm:
            matched.append(target)
            spoken_indices.append(-1)
            continue

        required = _threshold_for(threshold, target, settings)
        found = False
        while cursor < len(spoken):
            word = spoken[cursor]
            cursor += 1
            if similarity(word, target_norm) >= required:
                matched.append(target)
                spoken_indices.append(cursor - 1)
                found = True
                break

        if not found:
            missing.append(target)

    score = len(matched) / len(target_words)
    log_speech_match(len(matched), len(target_words), score)

    return SpeechMatchResult(
        matched=matched,
        missing=missing,
        score=score,
        spoken_indices=spoken_indices,
    )
