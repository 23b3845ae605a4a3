"""
Audit statistics for lexicon alignment.

Anomalies found while indexing and aligning (entries that normalize to
nothing or reuse an id, entries that never matched, missing meanings,
particles that should not be annotated) are collected here as issues.
Nothing in this module raises; the report is meant for diagnostic panels and batch checks.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from ghareeb.core.arabic import normalize
from ghareeb.core.lexicon import LexiconIndex
from ghareeb.models import AlignmentResult, LexiconEntry


class AuditIssueType(str, Enum):
    EMPTY_NORMALIZED = "empty_normalized"
    DUPLICATE_ENTRY = "duplicate_entry"
    UNMATCHED_ENTRY = "unmatched_entry"
    MISSING_MEANING = "missing_meaning"
    STOPWORD_ENTRY = "stopword_entry"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_SEVERITIES: dict[AuditIssueType, Severity] = {
    AuditIssueType.EMPTY_NORMALIZED: Severity.ERROR,
    AuditIssueType.DUPLICATE_ENTRY: Severity.ERROR,
    AuditIssueType.UNMATCHED_ENTRY: Severity.WARNING,
    AuditIssueType.MISSING_MEANING: Severity.WARNING,
    AuditIssueType.STOPWORD_ENTRY: Severity.INFO,
}

# Prepositions, conjunctions, particles, pronouns and demonstratives that
# should not carry a ghareeb annotation
ARABIC_STOPWORDS: frozenset[str] = frozenset(
    normalize(word)
    for word in (
        "من", "إلى", "على", "في", "عن", "مع",
        "ثم", "أو", "أم", "بل", "لكن", "حتى",
        "إن", "أن", "إذا", "إذ", "لو", "لولا", "لما", "ما", "لا", "لم", "لن",
        "قد", "هل", "يا", "أي", "أيا", "هذا", "هذه", "ذلك", "تلك",
        "هو", "هي", "هم", "هن", "أنت", "أنتم", "أنتن", "أنا", "نحن",
        "الذي", "التي", "الذين", "اللذان", "اللتان", "اللاتي", "اللائي",
        "كل", "بعض", "غير", "سوى", "كان", "كانت", "كانوا", "يكون", "تكون",
    )
)


def is_stopword(word: str) -> bool:
    """
    Check if a word is a particle or stopword.

    Words of one or two letters after normalization are treated as particles.
    """
    normalized = normalize(word)
    return normalized in ARABIC_STOPWORDS or len(normalized) <= 2


class AuditIssue(BaseModel):
    """A single audit finding for one lexicon entry."""

    type: AuditIssueType
    severity: Severity
    entry_id: str
    word_text: str
    description: str
    page_number: Optional[int] = None


class AuditReport(BaseModel):
    """Audit findings and summary statistics for one aligned page."""

    page_number: Optional[int] = None
    total_entries: int = Field(default=0, ge=0)
    matched_count: int = Field(default=0, ge=0)
    issues: list[AuditIssue] = Field(default_factory=list)

    @computed_field
    @property
    def issues_by_type(self) -> dict[str, int]:
        counts = {issue_type.value: 0 for issue_type in AuditIssueType}
        for issue in self.issues:
            counts[issue.type.value] += 1
        return counts

    @computed_field
    @property
    def coverage_percent(self) -> float:
        if self.total_entries == 0:
            return 0.0
        return round(self.matched_count / self.total_entries * 100, 2)

    @computed_field
    @property
    def health_score(self) -> int:
        """
        0-100 page health, weighting errors 5, warnings 2 and info 1 against
        an allowance of ten issues per page.
        """
        weights = {Severity.ERROR: 5, Severity.WARNING: 2, Severity.INFO: 1}
        penalty = sum(weights[issue.severity] for issue in self.issues)
        return round(max(0.0, min(100.0, 100 - penalty / 10 * 100)))


def _issue(
    issue_type: AuditIssueType,
    entry: LexiconEntry,
    description: str,
    page_number: Optional[int],
) -> AuditIssue:
    return AuditIssue(
        type=issue_type,
        severity=_SEVERITIES[issue_type],
        entry_id=entry.entry_id,
        word_text=entry.word_text,
        description=description,
        page_number=page_number,
    )


def audit_alignment(
    index: LexiconIndex,
    result: AlignmentResult,
    *,
    page_number: Optional[int] = None,
) -> AuditReport:
    """
    Audit the alignment of a lexicon index onto one page.

    Args:
        index: The index the page was aligned with
        result: The alignment result
        page_number: Page number to stamp on the issues

    Returns:
        AuditReport with one issue per finding
    """
    matched_ids = {span.entry_id for span in result.spans}
    unmatched_ids = set(result.stats.unmatched_entry_ids)
    issues: list[AuditIssue] = []

    for entry in index.empty_normalized:
        issues.append(
            _issue(
                AuditIssueType.EMPTY_NORMALIZED,
                entry,
                f'Word "{entry.word_text}" normalizes to an empty string',
                page_number,
            )
        )

    for entry in index.duplicates:
        issues.append(
            _issue(
                AuditIssueType.DUPLICATE_ENTRY,
                entry,
                f'Entry id "{entry.entry_id}" is already used by another entry',
                page_number,
            )
        )

    entries = [c.entry for c in index.candidates] + list(index.empty_normalized)
    for candidate in index.candidates:
        entry = candidate.entry
        if entry.entry_id in unmatched_ids:
            issues.append(
                _issue(
                    AuditIssueType.UNMATCHED_ENTRY,
                    entry,
                    f'Word "{entry.word_text}" was not found in the page text',
                    page_number,
                )
            )

    for entry in entries:
        if not entry.meaning:
            issues.append(
                _issue(
                    AuditIssueType.MISSING_MEANING,
                    entry,
                    f'Word "{entry.word_text}" has no meaning defined',
                    page_number,
                )
            )
        if is_stopword(entry.word_text):
            issues.append(
                _issue(
                    AuditIssueType.STOPWORD_ENTRY,
                    entry,
                    f'"{entry.word_text}" is a particle and probably should not be annotated',
                    page_number,
                )
            )

    return AuditReport(
        page_number=page_number,
        total_entries=index.entry_count,
        matched_count=len(matched_ids),
        issues=issues,
    )
