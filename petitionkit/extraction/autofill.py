"""Auto-fill of a case record from extracted candidates.

The merge only fills gaps: a field that already holds a value is never
changed. Candidates from all files are pooled in file order, so earlier
uploads win over later ones.
"""

from collections.abc import Iterable
from datetime import date, datetime

from petitionkit.models import CaseRecord, UploadedFileMeta
from petitionkit.utils.config import ExtractionConfig
from petitionkit.utils.logger import get_logger

from .rule_extractor import (
    CandidateKind,
    ExtractedCandidates,
    RuleExtractor,
    has_useful_data,
)

logger = get_logger(__name__)

CANDIDATE_DATE_FORMATS: list[str] = [
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y-%m-%d",
    "%B %d, %Y",
]


def parse_candidate_date(value: str) -> date | None:
    """Parse a candidate date string, or return ``None`` if it is invalid."""
    for fmt in CANDIDATE_DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


def years_before(reference: date, years: int) -> date:
    """Return the same calendar day ``years`` earlier (Feb 29 -> Feb 28)."""
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def infer_marriage_date(
    dates: Iterable[str], today: date, window_years: int = 10
) -> str | None:
    """Pick a plausible marriage date among candidate dates.

    The first candidate, in extraction order, that is a real calendar
    date strictly inside the trailing window ending at ``today`` is
    returned as ``YYYY-MM-DD``.

    Args:
        dates: Candidate date strings.
        today: End of the window.
        window_years: Window length in years.

    Returns:
        ISO-formatted date, or ``None`` if no candidate qualifies.
    """
    earliest = years_before(today, window_years)
    for value in dates:
        parsed = parse_candidate_date(value)
        if parsed is not None and earliest < parsed < today:
            return parsed.isoformat()
    return None


def _pool(
    candidate_sets: Iterable[ExtractedCandidates], kind: CandidateKind
) -> list[str]:
    pooled: list[str] = []
    for candidates in candidate_sets:
        for value in candidates.get(kind, []):
            if value not in pooled:
                pooled.append(value)
    return pooled


def _nth(values: list[str], index: int) -> str | None:
    return values[index] if len(values) > index else None


def merge_candidates(
    candidate_sets: list[ExtractedCandidates],
    existing: CaseRecord,
    today: date,
    config: ExtractionConfig | None = None,
) -> CaseRecord:
    """Fill empty case fields from pooled candidates.

    Args:
        candidate_sets: Per-file candidates, in file order.
        existing: Case record as entered by the user.
        today: Reference date for marriage-date inference.
        config: Extraction configuration.

    Returns:
        A new case record; ``existing`` is left untouched.
    """
    config = config or ExtractionConfig()
    names = _pool(candidate_sets, CandidateKind.NAMES)
    addresses = _pool(candidate_sets, CandidateKind.ADDRESSES)
    phones = _pool(candidate_sets, CandidateKind.PHONES)
    emails = _pool(candidate_sets, CandidateKind.EMAILS)
    dates = _pool(candidate_sets, CandidateKind.DATES)

    petitioner = existing.petitioner
    respondent = existing.respondent
    case_info = existing.case_info

    proposed = {
        "petitioner": {
            "full_name": _nth(names, 0),
            "address": _nth(addresses, 0),
            "phone": _nth(phones, 0),
            "email": _nth(emails, 0),
        },
        "respondent": {
            "full_name": _nth(names, 1),
            "address": _nth(addresses, 1),
        },
        "case_info": {
            "marriage_date": (
                infer_marriage_date(dates, today, config.marriage_window_years)
                if case_info.marriage_date is None
                else None
            ),
        },
    }

    updates = {}
    for section_name, section in (
        ("petitioner", petitioner),
        ("respondent", respondent),
        ("case_info", case_info),
    ):
        filled = {
            field: value
            for field, value in proposed[section_name].items()
            if value is not None and getattr(section, field) is None
        }
        if filled:
            logger.info("Auto-filled %s: %s", section_name, ", ".join(sorted(filled)))
            updates[section_name] = section.model_copy(update=filled)

    return existing.model_copy(update=updates)


def extract_and_merge(
    files: Iterable[UploadedFileMeta],
    existing: CaseRecord,
    now: datetime | date | None = None,
    config: ExtractionConfig | None = None,
    extractor: RuleExtractor | None = None,
) -> CaseRecord:
    """Extract candidates from every file's recognized text and gap-fill.

    Files without recognized text, or whose text yields no candidates,
    contribute nothing; if no file does, ``existing`` is returned as is.
    This never raises for bad input text.

    Args:
        files: Uploaded file metadata, in upload order.
        existing: Case record as entered by the user.
        now: Reference time for marriage-date inference. Defaults to
            the current date.
        config: Extraction configuration.
        extractor: Candidate extractor to use.

    Returns:
        The case record with gaps filled.
    """
    extractor = extractor or RuleExtractor()
    if now is None:
        today = date.today()
    elif isinstance(now, datetime):
        today = now.date()
    else:
        today = now

    candidate_sets: list[ExtractedCandidates] = []
    for meta in files:
        if not meta.recognized_text:
            continue
        candidates = extractor.extract_candidates(meta.recognized_text)
        if not has_useful_data(candidates):
            logger.debug("No usable candidates in %s", meta.name)
            continue
        candidate_sets.append(candidates)

    if not candidate_sets:
        return existing
    return merge_candidates(candidate_sets, existing, today, config)
