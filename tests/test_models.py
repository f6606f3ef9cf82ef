"""Tests for case records and upload metadata."""

import pytest
from pydantic import ValidationError

from petitionkit.models import (
    CaseRecord,
    Child,
    DocumentCategory,
    FileUpload,
    Gender,
    PetitionerInfo,
    RespondentInfo,
    UploadedFileMeta,
)


class TestCaseRecord:
    """Tests for parsing and normalizing case data."""

    def test_empty_record(self) -> None:
        case = CaseRecord()
        assert case.petitioner.full_name is None
        assert case.case_info.county is None
        assert case.children == ()
        assert case.has_minor_children is False

    def test_wizard_json_shape(self, sample_case: CaseRecord) -> None:
        assert sample_case.petitioner.full_name == "Jane Doe"
        assert sample_case.respondent.full_name == "John Doe"
        assert sample_case.case_info.county == "los-angeles"
        assert sample_case.children[0].gender is Gender.MALE
        assert sample_case.children[0].date_of_birth == "2015-04-01"

    def test_snake_case_names_accepted(self) -> None:
        case = CaseRecord(
            petitioner=PetitionerInfo(full_name="Jane Doe"),
            has_minor_children=True,
        )
        assert case.petitioner.full_name == "Jane Doe"
        assert case.has_minor_children is True

    def test_blank_strings_become_none(self) -> None:
        case = CaseRecord.model_validate(
            {"petitioner": {"fullName": "   ", "phone": "", "email": " a@b.co "}}
        )
        assert case.petitioner.full_name is None
        assert case.petitioner.phone is None
        assert case.petitioner.email == "a@b.co"

    def test_county_display_name_normalized(self) -> None:
        case = CaseRecord.model_validate({"case": {"county": "San Diego"}})
        assert case.case_info.county == "san-diego"

    def test_unknown_county_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CaseRecord.model_validate({"case": {"county": "Atlantis"}})

    def test_blank_county_allowed(self) -> None:
        case = CaseRecord.model_validate({"case": {"county": ""}})
        assert case.case_info.county is None

    def test_gender_normalized_and_constrained(self) -> None:
        assert Child(name="Sam", gender="Female").gender is Gender.FEMALE
        assert Child(name="Sam", gender="").gender is None
        with pytest.raises(ValidationError):
            Child(name="Sam", gender="other")

    def test_immutable(self, sample_case: CaseRecord) -> None:
        with pytest.raises(ValidationError):
            sample_case.has_minor_children = False

    def test_json_round_trip_uses_wizard_keys(self, sample_case: CaseRecord) -> None:
        data = sample_case.to_json_dict()
        assert data["petitioner"]["fullName"] == "Jane Doe"
        assert data["case"]["county"] == "los-angeles"
        assert data["hasMinorChildren"] is True
        assert CaseRecord.model_validate(data) == sample_case

    def test_has_data(self) -> None:
        assert RespondentInfo().has_data is False
        assert RespondentInfo(address="1 Oak Street").has_data is True
        assert PetitionerInfo(email="a@b.co").has_data is True


class TestUploadedFileMeta:
    """Tests for upload metadata."""

    def test_defaults(self) -> None:
        meta = UploadedFileMeta(name="scan.pdf", size_bytes=10)
        assert meta.category is DocumentCategory.GENERAL
        assert meta.recognized_text is None

    def test_camel_case_keys(self) -> None:
        meta = UploadedFileMeta.model_validate(
            {"name": "id.png", "sizeBytes": 2048, "category": "identity"}
        )
        assert meta.size_bytes == 2048
        assert meta.category is DocumentCategory.IDENTITY

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UploadedFileMeta(name="scan.pdf", size_bytes=-1)

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UploadedFileMeta(name="scan.pdf", size_bytes=1, category="medical")


class TestFileUpload:
    def test_size_from_content(self) -> None:
        assert FileUpload("a.txt", b"12345").size_bytes == 5
