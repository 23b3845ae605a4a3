"""
Lexicon-to-page alignment algorithm.

This module binds ghareeb lexicon candidates to token spans of a mushaf page.
Matching runs in two passes over the whole page:

1. Exact pass: every normalized word of the candidate must equal the token.
2. Loose pass: remaining candidates may match by close containment.

Exact matching runs page-wide before any loose matching. A short candidate
can be a loose substring of an unrelated earlier word while its true exact
occurrence comes later on the page (e.g. "وَسَعَىٰ" at 2:114 normalizes to
"وسعي", which loosely contains "وسع", the exact form of "وَٰسِعٌ" at 2:115);
page-wide exact priority makes the unambiguous match win regardless of
position.

Primary API:
    from ghareeb.core import Aligner, align_page

    result = align_page(page_lines, entries, surah_name="البقرة")
    for span in result.spans:
        print(span.sequential_index, span.entry_id, span.token_indices)
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, Union

from ghareeb._logging import get_logger, log_alignment_complete
from ghareeb.config import GhareebSettings, get_settings
from ghareeb.core.lexicon import LexiconIndex
from ghareeb.core.matcher import is_exact_match, is_loose_match
from ghareeb.core.tokenizer import tokenize_page
from ghareeb.models import (
    AlignmentResult,
    AlignmentStats,
    LexiconEntry,
    MatchCandidate,
    MatchSpan,
    MatchVia,
    PageLine,
    Token,
)

logger = get_logger(__name__)

WordTest = Callable[[str, str], bool]
Lexicon = Union[LexiconIndex, Iterable[Union[MatchCandidate, LexiconEntry]]]


@dataclass
class AlignmentContext:
    """
    Working state for one alignment call.

    Created fresh for every call and discarded on return; nothing here is
    shared between calls.
    """

    lines: list[PageLine]
    candidates: list[MatchCandidate]
    settings: GhareebSettings = field(default_factory=get_settings)

    # Entries already bound on this page
    used_entry_ids: set[str] = field(default_factory=set)
    # (line_index, token_index) pairs already covered by a span
    reserved_tokens: set[tuple[int, int]] = field(default_factory=set)

    # Results, in emission order
    spans: list[MatchSpan] = field(default_factory=list)

    # Statistics
    exact_count: int = 0
    loose_count: int = 0

    def is_reserved(self, line_index: int, token_index: int) -> bool:
        return (line_index, token_index) in self.reserved_tokens

    def bind(
        self,
        candidate: MatchCandidate,
        line_index: int,
        token_indices: tuple[int, ...],
        via: MatchVia,
    ) -> None:
        """Reserve the tokens, mark the entry used and record the span."""
        for token_index in token_indices:
            self.reserved_tokens.add((line_index, token_index))
        self.used_entry_ids.add(candidate.entry_id)
        self.spans.append(
            MatchSpan(
                entry_id=candidate.entry_id,
                line_index=line_index,
                token_indices=token_indices,
                matched_via=via,
                entry=candidate.entry,
            )
        )
        if via == MatchVia.EXACT:
            self.exact_count += 1
        else:
            self.loose_count += 1


def surah_matches(candidate_surah: str, line_context: str) -> bool:
    """
    Check whether a candidate may match on a line of the given surah context.

    An empty line context is a wildcard; otherwise the normalized names must
    be equal or one must contain the other.
    """
    if not line_context:
        return True
    return (
        candidate_surah == line_context
        or line_context in candidate_surah
        or candidate_surah in line_context
    )


def _consume_words(
    ctx: AlignmentContext,
    tokens: tuple[Token, ...],
    line_index: int,
    start: int,
    words: tuple[str, ...],
    word_test: WordTest,
) -> tuple[int, ...] | None:
    """
    Try to consume a candidate's words from ``start`` onward.

    Whitespace, verse numbers and decorative tokens between words are skipped.
    A reserved token aborts the attempt.

    Returns:
        Indices of the consumed word tokens, or None if the words don't match
    """
    consumed: list[int] = []
    position = start

    for word in words:
        while position < len(tokens) and not tokens[position].is_word:
            position += 1
        if position >= len(tokens):
            return None
        if ctx.is_reserved(line_index, position):
            return None
        if not word_test(tokens[position].normalized_text, word):
            return None
        consumed.append(position)
        position += 1

    return tuple(consumed)


def _find_in_line(
    ctx: AlignmentContext,
    line: PageLine,
    candidate: MatchCandidate,
    word_test: WordTest,
) -> tuple[int, ...] | None:
    """Scan start positions left to right and return the first full match."""
    for token in line.tokens:
        if not token.is_word or ctx.is_reserved(line.line_index, token.token_index):
            continue
        consumed = _consume_words(
            ctx, line.tokens, line.line_index, token.token_index, candidate.words, word_test
        )
        if consumed:
            return consumed
    return None


def _run_pass(ctx: AlignmentContext, via: MatchVia) -> None:
    """Run one matching pass over every matchable line of the page."""
    if via == MatchVia.EXACT:
        word_test: WordTest = is_exact_match
    else:
        word_test = partial(
            is_loose_match,
            max_length_diff=ctx.settings.loose_max_length_diff,
            min_length=ctx.settings.loose_min_length,
        )

    for line in ctx.lines:
        if not line.is_matchable or not line.tokens:
            continue

        for candidate in ctx.candidates:
            if candidate.entry_id in ctx.used_entry_ids or not candidate.words:
                continue
            if not surah_matches(candidate.normalized_surah, line.surah_context):
                continue

            consumed = _find_in_line(ctx, line, candidate, word_test)
            if consumed:
                ctx.bind(candidate, line.line_index, consumed, via)


def assign_sequential_indices(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
    """
    Sort spans into reading order and number them.

    Reading order is (line_index, first token index); the resulting position
    is each span's ``sequential_index``, the identifier rendering and
    highlighting use to walk the page.
    """
    ordered = sorted(spans, key=lambda span: span.sort_key)
    return [
        span.model_copy(update={"sequential_index": index})
        for index, span in enumerate(ordered)
    ]


def _prepare_lexicon(lexicon: Lexicon, settings: GhareebSettings) -> LexiconIndex:
    """Return the lexicon as an index, building it when given entries or candidates."""
    if isinstance(lexicon, LexiconIndex):
        return lexicon
    return LexiconIndex.build(lexicon, settings)


def page_eligible(candidate: MatchCandidate, page_number: int | None, window: int) -> bool:
    """
    Check whether a candidate's page hint allows it on the given page.

    Entries without a hint, and calls without a page number, are always
    eligible.
    """
    hint = candidate.entry.page_number
    if page_number is None or hint is None:
        return True
    return abs(hint - page_number) <= window


class Aligner:
    """
    Aligns lexicon entries onto mushaf pages.

    The aligner holds only configuration; every call to :meth:`align` starts
    from scratch, so it is safe to re-run on every render. Callers that want
    caching should memoize on (page text, lexicon version) themselves.

    Example:
        aligner = Aligner()
        result = aligner.align(page_text, entries, surah_name="البقرة")
    """

    def __init__(self, settings: GhareebSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def align(
        self,
        lines: Iterable[str] | str,
        lexicon: Lexicon,
        surah_name: str | None = None,
        page_number: int | None = None,
    ) -> AlignmentResult:
        """
        Align lexicon entries onto one page.

        Args:
            lines: Page lines, or the whole page text separated by newlines
            lexicon: A LexiconIndex, or match candidates and/or lexicon entries
            surah_name: Surah the page starts in, if known. Lines before the
                first header otherwise match entries of any surah.
            page_number: Page being aligned, if known. Entries whose page hint
                is more than ``page_window`` pages away are skipped.

        Returns:
            AlignmentResult with spans in reading order and statistics.
            Never raises for degenerate input.
        """
        page = tokenize_page(lines, surah_name)
        index = _prepare_lexicon(lexicon, self.settings)

        candidates: list[MatchCandidate] = []
        off_page: list[str] = []
        for candidate in index.candidates:
            if page_eligible(candidate, page_number, self.settings.page_window):
                candidates.append(candidate)
            else:
                off_page.append(candidate.entry_id)

        ctx = AlignmentContext(lines=page, candidates=candidates, settings=self.settings)

        _run_pass(ctx, MatchVia.EXACT)
        _run_pass(ctx, MatchVia.LOOSE)

        spans = assign_sequential_indices(ctx.spans)
        unmatched = [c.entry_id for c in candidates if c.entry_id not in ctx.used_entry_ids]

        stats = AlignmentStats(
            total_entries=index.entry_count,
            candidate_count=len(candidates),
            exact_count=ctx.exact_count,
            loose_count=ctx.loose_count,
            unmatched_entry_ids=unmatched,
            empty_normalized_entry_ids=index.empty_normalized_ids,
            duplicate_entry_ids=index.duplicate_ids,
            off_page_entry_ids=off_page,
            header_lines=sum(1 for line in page if not line.is_matchable),
            word_tokens=sum(1 for line in page for token in line.tokens if token.is_word),
        )

        log_alignment_complete(len(page), ctx.exact_count, ctx.loose_count, len(unmatched))
        if candidates and not spans:
            logger.debug("No lexicon entries matched on page")

        return AlignmentResult(spans=spans, stats=stats)


def align_page(
    lines: Iterable[str] | str,
    lexicon: Lexicon,
    *,
    surah_name: str | None = None,
    page_number: int | None = None,
    settings: GhareebSettings | None = None,
) -> AlignmentResult:
    """
    Align lexicon entries onto one page.

    Convenience function that creates an Aligner and runs it.

    Args:
        lines: Page lines, or the whole page text separated by newlines
        lexicon: A LexiconIndex, or match candidates and/or lexicon entries
        surah_name: Surah the page starts in, if known
        page_number: Page being aligned, used to skip entries hinted for
            distant pages
        settings: Optional settings (defaults to global settings)

    Returns:
        AlignmentResult with spans in reading order
    """
    return Aligner(settings).align(
        lines, lexicon, surah_name=surah_name, page_number=page_number
    )
