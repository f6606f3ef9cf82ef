"""Tests for required-field checks."""

import pytest

from petitionkit.errors import CaseValidationError
from petitionkit.models import CaseRecord
from petitionkit.validation.requirements import ensure_complete, missing_required_fields


class TestMissingRequiredFields:
    """Tests for missing_required_fields."""

    def test_complete_family_case(self, family_form, sample_case) -> None:
        assert missing_required_fields(sample_case, family_form) == []

    def test_empty_family_case(self, family_form) -> None:
        assert missing_required_fields(CaseRecord(), family_form) == [
            "Petitioner full name is required",
            "Respondent full name is required",
            "County of filing is required",
        ]

    def test_non_family_needs_only_petitioner(self, criminal_form) -> None:
        assert missing_required_fields(CaseRecord(), criminal_form) == [
            "Petitioner full name is required"
        ]

    def test_blank_name_counts_as_missing(self, criminal_form) -> None:
        case = CaseRecord.model_validate({"petitioner": {"fullName": "   "}})
        assert missing_required_fields(case, criminal_form) == [
            "Petitioner full name is required"
        ]


class TestEnsureComplete:
    def test_passes_silently(self, family_form, sample_case) -> None:
        ensure_complete(sample_case, family_form)

    def test_raises_with_all_errors(self, family_form) -> None:
        case = CaseRecord.model_validate({"petitioner": {"fullName": "Jane Doe"}})
        with pytest.raises(CaseValidationError) as exc_info:
            ensure_complete(case, family_form)
        assert exc_info.value.errors == [
            "Respondent full name is required",
            "County of filing is required",
        ]
        assert "County of filing is required" in str(exc_info.value)
