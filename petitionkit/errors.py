"""Exception hierarchy shared by extraction, generation and validation."""


class PetitionKitError(Exception):
    """Base class for all petition toolkit errors."""


class UnprocessableFile(PetitionKitError):
    """An uploaded file whose text could not be recognized.

    Raised by text recognizers and absorbed by the file processor, which
    keeps the file's metadata and moves on to the next upload.
    """

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Cannot process {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class GenerationError(PetitionKitError):
    """The requested document set could not be rendered in full."""

    def __init__(self, message: str, document_type: str | None = None) -> None:
        super().__init__(message)
        self.document_type = document_type


class CaseValidationError(PetitionKitError):
    """A case record is missing fields required by its form."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)
