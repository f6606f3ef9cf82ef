"""California legal petition toolkit.

Turns recognized text from uploaded documents into auto-filled case
data, and renders filled petitions, proofs of service and exhibit
indexes as PDF documents.
"""

from petitionkit.catalog.forms import FormCatalog, FormCategory, FormDescriptor
from petitionkit.errors import GenerationError, UnprocessableFile
from petitionkit.extraction.autofill import extract_and_merge
from petitionkit.models import CaseRecord, UploadedFileMeta
from petitionkit.rendering.generator import GeneratedDocument, generate_all
from petitionkit.utils.formatting import format_file_size

__version__ = "0.1.0"

__all__ = [
    "CaseRecord",
    "FormCatalog",
    "FormCategory",
    "FormDescriptor",
    "GeneratedDocument",
    "GenerationError",
    "UnprocessableFile",
    "UploadedFileMeta",
    "extract_and_merge",
    "format_file_size",
    "generate_all",
]
