"""Read-only catalog of California court forms.

The catalog is loaded once (from YAML when available, otherwise from the
built-in table) and handed to the generator; nothing mutates it at
runtime.
"""

from collections.abc import Iterator
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from petitionkit.utils.logger import get_logger

logger = get_logger(__name__)


class FormCategory(StrEnum):
    """Area of law a form belongs to."""

    FAMILY = "family"
    PROBATE = "probate"
    CIVIL = "civil"
    CRIMINAL = "criminal"

    @property
    def display_name(self) -> str:
        return "Family Law" if self is FormCategory.FAMILY else self.value.title()


class FormDescriptor(BaseModel):
    """Static metadata describing one court form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str
    category: FormCategory
    description: str = ""
    estimated_time: str | None = Field(default=None, alias="estimatedTime")
    required_documents: tuple[str, ...] = Field(
        default=("ID",), alias="requiredDocuments"
    )
    fields: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return f"{self.code} - {self.name}"


_DEFAULT_FORMS: list[dict] = [
    {
        "code": "FL-100",
        "name": "Petition for Dissolution, Legal Separation, or Nullity",
        "category": "family",
        "description": (
            "This form is used to start a divorce, legal separation, "
            "or annulment case in California."
        ),
        "estimated_time": "15-30 minutes",
        "required_documents": ["ID", "Marriage Certificate"],
        "fields": {
            "petitioner": ["fullName", "dateOfBirth", "address", "phone", "email"],
            "respondent": ["fullName", "dateOfBirth", "address"],
            "case": ["marriageDate", "separationDate", "county"],
            "children": ["hasMinorChildren"],
        },
    },
    {
        "code": "FL-200",
        "name": "Petition to Establish Parental Relationship",
        "category": "family",
        "description": "This form is used to establish paternity and parental rights.",
        "estimated_time": "20-35 minutes",
        "required_documents": ["ID", "Birth Certificate"],
        "fields": {
            "petitioner": ["fullName", "dateOfBirth", "address", "phone", "email"],
            "respondent": ["fullName", "dateOfBirth", "address"],
            "children": ["childName", "childDateOfBirth", "childGender"],
        },
    },
    {
        "code": "DE-111",
        "name": "Petition for Probate",
        "category": "probate",
        "description": "This form is used to open a probate case after someone dies.",
        "estimated_time": "25-40 minutes",
        "required_documents": ["Death Certificate", "Will", "ID"],
        "fields": {
            "petitioner": ["fullName", "address", "phone", "email"],
            "decedent": ["fullName", "dateOfDeath", "placeOfDeath"],
            "estate": ["estimatedValue", "hasWill"],
        },
    },
    {
        "code": "GC-210",
        "name": "Petition for Appointment of Guardian of Minor",
        "category": "probate",
        "description": "This form is used to request guardianship of a minor child.",
        "estimated_time": "30-45 minutes",
        "required_documents": ["ID", "Child's Birth Certificate", "Parental Consent"],
        "fields": {
            "petitioner": ["fullName", "dateOfBirth", "address", "phone", "email"],
            "child": ["fullName", "dateOfBirth", "currentAddress"],
            "parents": ["motherName", "fatherName", "parentStatus"],
        },
    },
    {
        "code": "CR-180",
        "name": "Petition for Dismissal (Expungement)",
        "category": "criminal",
        "description": "This form is used to request dismissal of a criminal conviction.",
        "estimated_time": "15-25 minutes",
        "required_documents": ["ID", "Case Information", "Probation Records"],
        "fields": {
            "petitioner": ["fullName", "dateOfBirth", "address", "phone"],
            "case": ["caseNumber", "convictionDate", "charges", "county"],
        },
    },
    {
        "code": "SC-100",
        "name": "Plaintiff's Claim and Order to Go to Small Claims Court",
        "category": "civil",
        "description": (
            "This form is used to file a small claims case for amounts up to $10,000."
        ),
        "estimated_time": "10-20 minutes",
        "required_documents": ["ID", "Supporting Documents", "Proof of Service"],
        "fields": {
            "plaintiff": ["fullName", "address", "phone", "email"],
            "defendant": ["fullName", "address"],
            "claim": ["amount", "reason", "supportingEvidence"],
        },
    },
    {
        "code": "MC-410",
        "name": "Motion to Change or Set Aside Judgment",
        "category": "civil",
        "description": "This form is used to request a change to a court judgment.",
        "estimated_time": "20-30 minutes",
        "required_documents": ["ID", "Original Judgment", "Supporting Evidence"],
        "fields": {
            "movant": ["fullName", "address", "phone", "email"],
            "case": ["caseNumber", "judgmentDate", "requestedChange"],
            "grounds": ["legalBasis", "supportingEvidence"],
        },
    },
    {
        "code": "ADOPT-200",
        "name": "Adoption Request",
        "category": "family",
        "description": "This form is used to request adoption of a child.",
        "estimated_time": "45-60 minutes",
        "required_documents": ["ID", "Child's Birth Certificate", "Home Study Report"],
        "fields": {
            "petitioner": ["fullName", "dateOfBirth", "address", "phone", "email"],
            "child": ["fullName", "dateOfBirth", "currentAddress"],
            "biological": ["motherName", "fatherName", "consentStatus"],
        },
    },
]


class FormCatalog:
    """Immutable lookup table of form descriptors keyed by form code.

    Args:
        forms: Descriptors in display order. Codes are matched
            case-insensitively.
    """

    def __init__(self, forms: list[FormDescriptor]) -> None:
        self._forms: dict[str, FormDescriptor] = {}
        for form in forms:
            key = form.code.upper()
            if key in self._forms:
                raise ValueError(f"Duplicate form code in catalog: {form.code}")
            self._forms[key] = form

    @classmethod
    def default(cls) -> "FormCatalog":
        """Build the catalog from the built-in form table."""
        return cls([FormDescriptor.model_validate(raw) for raw in _DEFAULT_FORMS])

    @classmethod
    def load(cls, path: Path = Path("configs/forms.yaml")) -> "FormCatalog":
        """Load the catalog from a YAML file.

        The file holds a top-level ``forms`` list. A missing or empty
        file falls back to the built-in table.

        Args:
            path: Path to the forms YAML file.

        Returns:
            Loaded catalog.
        """
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            raw_forms = data.get("forms") or []
            if raw_forms:
                logger.info("Loaded %d forms from %s", len(raw_forms), path)
                return cls([FormDescriptor.model_validate(raw) for raw in raw_forms])
        logger.debug("Using built-in form catalog")
        return cls.default()

    def get(self, code: str) -> FormDescriptor:
        """Look up a form by code.

        Raises:
            KeyError: If no form has this code.
        """
        try:
            return self._forms[code.upper()]
        except KeyError:
            raise KeyError(f"Unknown form code: {code}") from None

    def by_category(self, category: FormCategory | str) -> list[FormDescriptor]:
        """Return the forms of one category in catalog order."""
        wanted = FormCategory(category)
        return [form for form in self._forms.values() if form.category is wanted]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._forms

    def __iter__(self) -> Iterator[FormDescriptor]:
        return iter(self._forms.values())

    def __len__(self) -> int:
        return len(self._forms)
