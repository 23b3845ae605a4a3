"""
Speech Quiz Example

This example demonstrates matching a recited transcript against hidden words:
- Fixed similarity thresholds
- Threshold policy levels
- Custom configuration
"""

from ghareeb.config import configure
from ghareeb.core import MatchLevel, match_hidden_words_in_order


def main():
    hidden = ["ٱلرَّحِيمِ", "لِلَّهِ", "ٱلدِّينِ"]
    transcript = "الرحمن الرحيم الحمد الله رب العالمين مالك يوم الدين"

    print("Speech Quiz Example")
    print("=" * 80)

    # A single threshold for every word
    result = match_hidden_words_in_order(transcript, hidden, 0.8)
    print(f"\nThreshold 0.8: {result}")
    print(f"  Matched: {result.matched}")
    print(f"  Missing: {result.missing}")

    # Levels pick a stricter threshold for short words
    for level in MatchLevel:
        result = match_hidden_words_in_order(transcript, hidden, level)
        print(f"Level {level.value:6s}: score={result.score:.2f} missing={result.missing}")

    # Relax the loose level globally
    configure(loose_threshold=0.5, loose_short_threshold=0.6)
    result = match_hidden_words_in_order(transcript, hidden, "loose")
    print(f"\nRelaxed loose level: score={result.score:.2f}")


if __name__ == "__main__":
    main()
