"""Generation of the complete document set for one petition.

The petition is always produced; the proof of service only for family
and civil forms; the exhibits index only when files were uploaded. The
set is all-or-nothing: if any document fails, the caller gets a
:class:`GenerationError` and no documents.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from petitionkit.catalog.forms import FormCatalog, FormCategory, FormDescriptor
from petitionkit.errors import GenerationError
from petitionkit.models import CaseRecord, UploadedFileMeta
from petitionkit.utils.config import RenderingConfig
from petitionkit.utils.formatting import format_file_size
from petitionkit.utils.logger import get_logger

from .documents import (
    EXHIBITS_TITLE,
    PROOF_OF_SERVICE_TITLE,
    build_exhibits_index,
    build_petition,
    build_proof_of_service,
)
from .layout import PageLayout
from .pdf_renderer import PdfRenderer

logger = get_logger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
PROOF_OF_SERVICE_CATEGORIES = frozenset({FormCategory.FAMILY, FormCategory.CIVIL})


class DocumentType(StrEnum):
    PETITION = "petition"
    PROOF_OF_SERVICE = "proof_of_service"
    EXHIBITS = "exhibits"


@dataclass(frozen=True)
class GeneratedDocument:
    """One rendered PDF, owned by the caller once returned."""

    type: DocumentType
    filename: str
    content: bytes
    page_count: int
    text_lines: tuple[str, ...]
    content_type: str = PDF_CONTENT_TYPE

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def size(self) -> str:
        return format_file_size(self.size_bytes)


class DocumentGenerator:
    """Builds and renders the documents for a petition.

    Args:
        config: Rendering configuration.
        catalog: Form catalog used by :meth:`generate_for_code`.
        renderer: PDF backend; defaults to the reportlab renderer.
    """

    def __init__(
        self,
        config: RenderingConfig | None = None,
        catalog: FormCatalog | None = None,
        renderer: PdfRenderer | None = None,
    ) -> None:
        self.config = config or RenderingConfig()
        self.catalog = catalog or FormCatalog.default()
        self.renderer = renderer or PdfRenderer(self.config)

    def generate_all(
        self,
        form: FormDescriptor,
        case: CaseRecord,
        files: Sequence[UploadedFileMeta] = (),
        now: datetime | date | None = None,
    ) -> list[GeneratedDocument]:
        """Generate every document that applies to this petition.

        Args:
            form: Descriptor of the form being filed.
            case: Case data; missing fields are tolerated.
            files: Uploaded supporting documents, in exhibit order.
            now: Date printed in footers. Defaults to today.

        Returns:
            The petition, then the proof of service and the exhibits
            index when they apply.

        Raises:
            GenerationError: If any document cannot be rendered.
        """
        today = _as_date(now)
        files = list(files)

        plan: list[tuple[DocumentType, str, str, Callable[[], PageLayout]]] = [
            (
                DocumentType.PETITION,
                f"{form.code}-filled.pdf",
                form.display_name,
                lambda: build_petition(form, case, today, self.config),
            )
        ]
        if form.category in PROOF_OF_SERVICE_CATEGORIES:
            plan.append(
                (
                    DocumentType.PROOF_OF_SERVICE,
                    "POS-040-proof-of-service.pdf",
                    PROOF_OF_SERVICE_TITLE,
                    lambda: build_proof_of_service(form, case, self.config),
                )
            )
        if files:
            plan.append(
                (
                    DocumentType.EXHIBITS,
                    "exhibits-index.pdf",
                    EXHIBITS_TITLE,
                    lambda: build_exhibits_index(files, today, self.config),
                )
            )

        documents = [self._render(*entry) for entry in plan]
        logger.info(
            "Generated %d documents for %s: %s",
            len(documents),
            form.code,
            ", ".join(f"{doc.filename} ({doc.size})" for doc in documents),
        )
        return documents

    def generate_for_code(
        self,
        code: str,
        case: CaseRecord,
        files: Sequence[UploadedFileMeta] = (),
        now: datetime | date | None = None,
    ) -> list[GeneratedDocument]:
        """Look up a form by code and generate its documents.

        Raises:
            GenerationError: If the code is not in the catalog or any
                document cannot be rendered.
        """
        try:
            form = self.catalog.get(code)
        except KeyError as exc:
            logger.error("Cannot generate documents for unknown form %s", code)
            raise GenerationError(f"Unknown form code: {code}") from exc
        return self.generate_all(form, case, files, now)

    def _render(
        self,
        doc_type: DocumentType,
        filename: str,
        title: str,
        build: Callable[[], PageLayout],
    ) -> GeneratedDocument:
        try:
            layout = build()
            content = self.renderer.render(layout, title=title)
        except Exception as exc:
            logger.error("Failed to generate %s document: %s", doc_type, exc)
            raise GenerationError(
                f"Failed to generate {doc_type} document: {exc}", doc_type.value
            ) from exc

        return GeneratedDocument(
            type=doc_type,
            filename=filename,
            content=content,
            page_count=len(layout.pages),
            text_lines=tuple(layout.text_lines()),
        )


def _as_date(now: datetime | date | None) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def generate_all(
    form: FormDescriptor,
    case: CaseRecord,
    files: Sequence[UploadedFileMeta] = (),
    now: datetime | date | None = None,
    config: RenderingConfig | None = None,
) -> list[GeneratedDocument]:
    """Generate the document set with a default :class:`DocumentGenerator`."""
    return DocumentGenerator(config).generate_all(form, case, files, now)
