"""Layout and PDF rendering of petitions and their companion documents."""

from .generator import DocumentGenerator, DocumentType, GeneratedDocument, generate_all
from .layout import Checkbox, Page, PageLayout, Rule, TextRun
from .pdf_renderer import PdfRenderer

__all__ = [
    "Checkbox",
    "DocumentGenerator",
    "DocumentType",
    "GeneratedDocument",
    "Page",
    "PageLayout",
    "PdfRenderer",
    "Rule",
    "TextRun",
    "generate_all",
]
