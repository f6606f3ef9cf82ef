"""Best-effort processing of uploaded supporting documents.

Each upload is categorized from its filename and passed to a text
recognizer. A file that cannot be recognized is still returned, with its
metadata and no text, so one bad upload never blocks the others.
"""

from collections.abc import Iterable

from petitionkit.models import DocumentCategory, FileUpload, UploadedFileMeta
from petitionkit.utils.config import ExtractionConfig
from petitionkit.utils.logger import get_logger

from .recognizers import TextRecognizer

logger = get_logger(__name__)


def infer_category(
    filename: str, keywords: dict[str, list[str]] | None = None
) -> DocumentCategory:
    """Guess a document's category from keywords in its filename.

    Categories are tried in order and the first keyword hit wins; files
    without a hit are ``general``.

    Args:
        filename: Upload filename.
        keywords: Ordered mapping of category name to filename keywords.
            Defaults to the standard keyword table.

    Returns:
        Inferred document category.
    """
    if keywords is None:
        keywords = ExtractionConfig().category_keywords
    name = filename.lower()
    for category, words in keywords.items():
        if any(word in name for word in words):
            return DocumentCategory(category)
    return DocumentCategory.GENERAL


class FileProcessor:
    """Runs text recognition over a batch of uploads.

    Args:
        recognizer: Strategy that turns an upload into text.
        config: Extraction configuration (category keywords).
    """

    def __init__(
        self, recognizer: TextRecognizer, config: ExtractionConfig | None = None
    ) -> None:
        self.recognizer = recognizer
        self.config = config or ExtractionConfig()

    def process_files(self, uploads: Iterable[FileUpload]) -> list[UploadedFileMeta]:
        """Process every upload, in order.

        Args:
            uploads: Raw uploads.

        Returns:
            One metadata record per upload.
        """
        processed = [self.process_file(upload) for upload in uploads]
        recognized = sum(1 for meta in processed if meta.recognized_text is not None)
        logger.info("Recognized text in %d of %d files", recognized, len(processed))
        return processed

    def process_file(self, upload: FileUpload) -> UploadedFileMeta:
        """Categorize one upload and recognize its text if possible."""
        category = infer_category(upload.name, self.config.category_keywords)
        try:
            text: str | None = self.recognizer(upload)
        except Exception as exc:
            logger.warning("Skipping text extraction for %s: %s", upload.name, exc)
            text = None

        return UploadedFileMeta(
            name=upload.name,
            size_bytes=upload.size_bytes,
            category=category,
            mime_type=upload.mime_type,
            recognized_text=text,
        )
