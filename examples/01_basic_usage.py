"""
Basic Usage Example for ghareeb

This example demonstrates the simplest way to use ghareeb:
1. Load lexicon records
2. Build the lexicon index
3. Align the index onto a page
4. Access results and audit the page
"""

from ghareeb.core import LexiconIndex, align_page, audit_alignment, parse_entries


PAGE_LINES = [
    "وَمَنۡ أَظۡلَمُ مِمَّن مَّنَعَ مَسَٰجِدَ ٱللَّهِ أَن يُذۡكَرَ فِيهَا ٱسۡمُهُۥ وَسَعَىٰ فِي خَرَابِهَا",
    "وَلِلَّهِ ٱلۡمَشۡرِقُ وَٱلۡمَغۡرِبُ ۚ فَأَيۡنَمَا تُوَلُّواْ فَثَمَّ وَجۡهُ ٱللَّهِ ۚ إِنَّ ٱللَّهَ وَٰسِعٌ عَلِيمٞ ﴿١١٥﴾",
]

RECORDS = [
    {
        "wordText": "﴿خَرَابِهَا﴾",
        "meaning": "هدمها وتعطيلها",
        "surahName": "البقرة",
        "surahNumber": 2,
        "verseNumber": 114,
        "wordIndex": 12,
    },
    {
        "wordText": "فَثَمَّ وَجۡهُ ٱللَّهِ",
        "meaning": "فهناك جهته التي رضيها",
        "surahName": "البقرة",
        "surahNumber": 2,
        "verseNumber": 115,
        "wordIndex": 6,
    },
    {
        "wordText": "وَٰسِعٌ",
        "meaning": "واسع الفضل والعطاء",
        "surahName": "البقرة",
        "surahNumber": 2,
        "verseNumber": 115,
        "wordIndex": 11,
    },
]


def main():
    print("Aligning lexicon onto page 18...\n")

    # Step 1: Validate raw records
    entries = parse_entries(RECORDS)
    print(f"Step 1: Loaded {len(entries)} entries")

    # Step 2: Build candidates, longest phrases first
    index = LexiconIndex.build(entries)
    print(f"Step 2: Built {len(index.candidates)} candidates\n")

    # Step 3: Align
    result = align_page(PAGE_LINES, index, surah_name="البقرة", page_number=18)

    # Step 4: Display results
    print("Results:")
    print("-" * 80)
    for span in result.spans:
        print(f"#{span.sequential_index} line {span.line_index} "
              f"tokens {list(span.token_indices)} ({span.matched_via.value}): "
              f"{span.entry.word_text} = {span.entry.meaning}")

    # Step 5: Audit
    report = audit_alignment(index, result, page_number=18)
    print("\n" + "=" * 80)
    print(f"Coverage: {report.coverage_percent:.1f}%")
    print(f"Health score: {report.health_score}/100")
    for issue in report.issues:
        print(f"  [{issue.severity.value}] {issue.description}")


if __name__ == "__main__":
    main()
