"""Shared test fixtures for the petition toolkit test suite."""

from datetime import date
from pathlib import Path

import pytest

from petitionkit.catalog.forms import FormCatalog, FormDescriptor
from petitionkit.models import CaseRecord, DocumentCategory, UploadedFileMeta


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"


@pytest.fixture
def catalog() -> FormCatalog:
    return FormCatalog.default()


@pytest.fixture
def family_form(catalog: FormCatalog) -> FormDescriptor:
    return catalog.get("FL-100")


@pytest.fixture
def criminal_form(catalog: FormCatalog) -> FormDescriptor:
    return catalog.get("CR-180")


@pytest.fixture
def reference_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def sample_case() -> CaseRecord:
    """A dissolution case with one minor child, in the wizard's JSON shape."""
    return CaseRecord.model_validate(
        {
            "petitioner": {"fullName": "Jane Doe"},
            "respondent": {"fullName": "John Doe"},
            "case": {"county": "los-angeles"},
            "hasMinorChildren": True,
            "children": [
                {"name": "Sam Doe", "dateOfBirth": "2015-04-01", "gender": "male"}
            ],
        }
    )


@pytest.fixture
def sample_files() -> list[UploadedFileMeta]:
    return [
        UploadedFileMeta(
            name="marriage_certificate.pdf",
            size_bytes=1536,
            category=DocumentCategory.LEGAL,
        )
    ]
