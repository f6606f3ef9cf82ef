"""Static reference data: California counties and court forms."""

from .counties import CALIFORNIA_COUNTIES, county_display, normalize_county
from .forms import FormCatalog, FormCategory, FormDescriptor

__all__ = [
    "CALIFORNIA_COUNTIES",
    "FormCatalog",
    "FormCategory",
    "FormDescriptor",
    "county_display",
    "normalize_county",
]
