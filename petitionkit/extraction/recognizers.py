"""Pluggable text recognition for uploaded documents.

Real OCR lives outside this package. A recognizer is any callable that
turns a :class:`FileUpload` into text and raises
:class:`UnprocessableFile` when it cannot.
"""

from collections.abc import Mapping
from typing import Protocol

from petitionkit.errors import UnprocessableFile
from petitionkit.models import FileUpload
from petitionkit.utils.logger import get_logger

logger = get_logger(__name__)


class TextRecognizer(Protocol):
    def __call__(self, upload: FileUpload) -> str: ...


class PlainTextRecognizer:
    """Reads text uploads directly; every other MIME type is rejected.

    Args:
        encoding: Text encoding of accepted uploads.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def __call__(self, upload: FileUpload) -> str:
        mime_type = upload.mime_type or ""
        if not mime_type.startswith("text/"):
            raise UnprocessableFile(
                upload.name, f"unsupported MIME type {mime_type or 'unknown'}"
            )
        try:
            text = upload.content.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise UnprocessableFile(upload.name, f"not valid {self.encoding}") from exc
        logger.debug("Read %d characters from %s", len(text), upload.name)
        return text


class StaticTextRecognizer:
    """Returns preset text per filename.

    Useful wherever recognition already happened elsewhere, and for
    deterministic tests.

    Args:
        texts: Recognized text keyed by upload filename.
    """

    def __init__(self, texts: Mapping[str, str]) -> None:
        self.texts = dict(texts)

    def __call__(self, upload: FileUpload) -> str:
        try:
            return self.texts[upload.name]
        except KeyError:
            raise UnprocessableFile(upload.name, "no recognized text available") from None
