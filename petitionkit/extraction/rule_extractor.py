"""Rule-based candidate extraction using regex patterns.

Finds names, dates, street addresses, phone numbers, emails, masked
social-security numbers and case numbers in recognized document text.
Matches are candidates only: nothing here checks that a "name" is really
a person.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from petitionkit.utils.logger import get_logger

logger = get_logger(__name__)


class CandidateKind(StrEnum):
    NAMES = "names"
    DATES = "dates"
    ADDRESSES = "addresses"
    PHONES = "phones"
    EMAILS = "emails"
    SSN_LAST4 = "ssn_last4"
    CASE_NUMBERS = "case_numbers"


ExtractedCandidates = dict[CandidateKind, list[str]]


@dataclass
class ExtractedField:
    """A candidate value matched by a regex rule."""

    kind: CandidateKind
    value: str
    confidence: float
    start_pos: int
    end_pos: int
    extraction_method: str = "regex"


# Pattern definitions: (regex, base_confidence, optional_flags)
_NAME_PATTERNS: list[tuple[str, float, int]] = [
    (r"[A-Z][a-z]+ [A-Z][a-z]+ [A-Z][a-z]+", 0.7, 0),
    (r"[A-Z][a-z]+ [A-Z]\. [A-Z][a-z]+", 0.75, 0),
    (r"[A-Z][a-z]+ [A-Z][a-z]+", 0.6, 0),
]

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October"
    "|November|December"
)

_DATE_PATTERNS: list[tuple[str, float, int]] = [
    (r"\b\d{1,2}/\d{1,2}/\d{4}\b", 0.9, 0),
    (r"\b\d{1,2}-\d{1,2}-\d{4}\b", 0.9, 0),
    (r"\b\d{4}-\d{1,2}-\d{1,2}\b", 0.9, 0),
    (rf"\b(?:{_MONTHS}) \d{{1,2}}, \d{{4}}\b", 0.85, 0),
]

_STREET_SUFFIXES = "Street|St|Avenue|Ave|Road|Rd|Drive|Dr|Boulevard|Blvd|Lane|Ln"

# Number, capitalized street words, suffix, city words, state, ZIP; one line.
_ADDRESS_PATTERNS: list[tuple[str, float, int]] = [
    (
        rf"\b\d+[ \t]+(?:[A-Z][a-z]+[ \t]+)+(?:{_STREET_SUFFIXES})\b\.?"
        r"(?:[ \t]*,[ \t]*|[ \t]+)(?:[A-Z][a-z]+[ \t]+)*[A-Z][a-z]+,?"
        r"[ \t]+[A-Z]{2}[ \t]+\d{5}\b",
        0.8,
        0,
    ),
]

_PHONE_PATTERNS: list[tuple[str, float, int]] = [
    (r"\(\d{3}\)\s*\d{3}-\d{4}\b", 0.9, 0),
    (r"\b\d{3}-\d{3}-\d{4}\b", 0.9, 0),
    (r"\b\d{3}\.\d{3}\.\d{4}\b", 0.85, 0),
    (r"\b\d{10}\b", 0.6, 0),
]

_EMAIL_PATTERNS: list[tuple[str, float, int]] = [
    (r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b", 0.95, 0),
]

# Only the masked form is recognized; full SSNs are never captured.
_SSN_PATTERNS: list[tuple[str, float, int]] = [
    (r"\*{3}-\*{2}-(\d{4})\b", 0.9, 0),
]

_CASE_NUMBER_PATTERNS: list[tuple[str, float, int]] = [
    (r"\bCase\s+No[:.]\s*([A-Z0-9-]+)", 0.9, re.IGNORECASE),
    (r"\bDocket\s+No[:.]\s*([A-Z0-9-]+)", 0.9, re.IGNORECASE),
    (r"\bFile\s+No[:.]\s*([A-Z0-9-]+)", 0.85, re.IGNORECASE),
]


class RuleExtractor:
    """Regex-based extractor for candidate case values.

    Every pattern of a kind is applied to the whole text in turn; the
    results of one kind are the union of its patterns' matches, in
    pattern order and then text order.
    """

    def __init__(self) -> None:
        self.patterns: dict[CandidateKind, list[tuple[str, float, int]]] = {
            CandidateKind.NAMES: _NAME_PATTERNS,
            CandidateKind.DATES: _DATE_PATTERNS,
            CandidateKind.ADDRESSES: _ADDRESS_PATTERNS,
            CandidateKind.PHONES: _PHONE_PATTERNS,
            CandidateKind.EMAILS: _EMAIL_PATTERNS,
            CandidateKind.SSN_LAST4: _SSN_PATTERNS,
            CandidateKind.CASE_NUMBERS: _CASE_NUMBER_PATTERNS,
        }

    def extract(
        self, text: str, kinds: list[CandidateKind] | None = None
    ) -> list[ExtractedField]:
        """Extract every candidate match from text.

        Args:
            text: Recognized document text.
            kinds: Candidate kinds to look for. If ``None``, all kinds.

        Returns:
            Matches with their positions, duplicates included.
        """
        results: list[ExtractedField] = []
        target_kinds = kinds or list(self.patterns.keys())

        for kind in target_kinds:
            if kind not in self.patterns:
                continue
            for pattern, confidence, flags in self.patterns[kind]:
                for match in re.finditer(pattern, text, flags):
                    value = match.group(1) if match.groups() else match.group(0)
                    results.append(
                        ExtractedField(
                            kind=kind,
                            value=value.strip(),
                            confidence=confidence,
                            start_pos=match.start(),
                            end_pos=match.end(),
                        )
                    )

        logger.debug("Rule extraction found %d matches", len(results))
        return results

    def extract_candidates(self, text: str) -> ExtractedCandidates:
        """Group matches by kind, dropping repeats and empty kinds.

        Args:
            text: Recognized document text.

        Returns:
            Mapping of candidate kind to distinct values in first-seen
            order. Kinds without any match are absent.
        """
        candidates: ExtractedCandidates = {}
        for field in self.extract(text):
            values = candidates.setdefault(field.kind, [])
            if field.value not in values:
                values.append(field.value)

        logger.info(
            "Extracted candidates: %s",
            ", ".join(f"{kind}={len(values)}" for kind, values in candidates.items())
            or "none",
        )
        return candidates


def has_useful_data(candidates: ExtractedCandidates) -> bool:
    """Tell whether any candidate kind produced at least one value."""
    return any(values for values in candidates.values())
