"""Required-field checks for the wizard's review step.

The renderer happily prints an incomplete petition; these checks are for
callers that want to stop a user before generating one.
"""

from petitionkit.catalog.forms import FormCategory, FormDescriptor
from petitionkit.errors import CaseValidationError
from petitionkit.models import CaseRecord
from petitionkit.utils.logger import get_logger

logger = get_logger(__name__)


def missing_required_fields(case: CaseRecord, form: FormDescriptor) -> list[str]:
    """List human-readable messages for every required field left empty.

    Args:
        case: Case data to check.
        form: Form the case is being filed on.

    Returns:
        Error messages; empty when the case is complete enough to file.
    """
    errors: list[str] = []

    if case.petitioner.full_name is None:
        errors.append("Petitioner full name is required")

    if form.category is FormCategory.FAMILY:
        if case.respondent.full_name is None:
            errors.append("Respondent full name is required")
        if case.case_info.county is None:
            errors.append("County of filing is required")

    logger.debug("%s requirement check: %d missing", form.code, len(errors))
    return errors


def ensure_complete(case: CaseRecord, form: FormDescriptor) -> None:
    """Raise :class:`CaseValidationError` if required fields are missing."""
    errors = missing_required_fields(case, form)
    if errors:
        raise CaseValidationError(errors)
