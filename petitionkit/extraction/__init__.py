"""Candidate extraction from uploaded documents and case auto-fill."""

from .autofill import extract_and_merge, infer_marriage_date, merge_candidates
from .file_processor import FileProcessor, infer_category
from .recognizers import PlainTextRecognizer, StaticTextRecognizer, TextRecognizer
from .rule_extractor import (
    CandidateKind,
    ExtractedCandidates,
    ExtractedField,
    RuleExtractor,
    has_useful_data,
)

__all__ = [
    "CandidateKind",
    "ExtractedCandidates",
    "ExtractedField",
    "FileProcessor",
    "PlainTextRecognizer",
    "RuleExtractor",
    "StaticTextRecognizer",
    "TextRecognizer",
    "extract_and_merge",
    "has_useful_data",
    "infer_category",
    "infer_marriage_date",
    "merge_candidates",
]
