"""Case data exchanged between the wizard, the extractor and the renderer.

All records are immutable. Optional text fields are stripped on input and
blank strings are stored as ``None``, so consumers only ever need to test
for ``None``. JSON produced by the wizard uses camelCase keys and ``case``
for the case section; both those keys and the Python field names are
accepted.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from petitionkit.catalog.counties import normalize_county


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"


class DocumentCategory(StrEnum):
    """Kind of supporting document, inferred from the upload's filename."""

    IDENTITY = "identity"
    LEGAL = "legal"
    FINANCIAL = "financial"
    PROPERTY = "property"
    GENERAL = "general"


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value


class PetitionerInfo(_Record):
    full_name: str | None = None
    date_of_birth: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None

    @property
    def has_data(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class RespondentInfo(_Record):
    full_name: str | None = None
    date_of_birth: str | None = None
    address: str | None = None

    @property
    def has_data(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class CaseInfo(_Record):
    marriage_date: str | None = None
    separation_date: str | None = None
    county: str | None = None

    @field_validator("county")
    @classmethod
    def _normalize_county(cls, value: str | None) -> str | None:
        return normalize_county(value) if value is not None else None


class Child(_Record):
    name: str | None = None
    date_of_birth: str | None = None
    gender: Gender | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _lowercase_gender(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value


class CaseRecord(_Record):
    """Partially or fully completed data for one petition."""

    petitioner: PetitionerInfo = Field(default_factory=PetitionerInfo)
    respondent: RespondentInfo = Field(default_factory=RespondentInfo)
    case_info: CaseInfo = Field(default_factory=CaseInfo, alias="case")
    children: tuple[Child, ...] = ()
    has_minor_children: bool = False

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with the wizard's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class UploadedFileMeta(_Record):
    """Metadata of one uploaded supporting document.

    ``recognized_text`` is ``None`` when text recognition was not run or
    failed for this file.
    """

    name: str
    size_bytes: int = Field(ge=0)
    category: DocumentCategory = DocumentCategory.GENERAL
    mime_type: str | None = None
    recognized_text: str | None = None


@dataclass(frozen=True)
class FileUpload:
    """Raw bytes of one upload, as handed to a text recognizer."""

    name: str
    content: bytes
    mime_type: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)
