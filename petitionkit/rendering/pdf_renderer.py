"""PDF output for page layouts, using the reportlab canvas."""

import io

from reportlab.pdfgen import canvas

from petitionkit.utils.config import RenderingConfig
from petitionkit.utils.logger import get_logger

from .layout import Checkbox, PageLayout, Rule, TextRun

logger = get_logger(__name__)

# Standard Type 1 fonts are drawn with WinAnsiEncoding (cp1252); other
# characters come out as a filled notdef box.
STANDARD_FONT_ENCODING = "cp1252"


def unencodable_characters(text: str) -> str:
    """Return the distinct characters of ``text`` a standard font cannot show."""
    missing: dict[str, None] = {}
    for char in text:
        try:
            char.encode(STANDARD_FONT_ENCODING)
        except UnicodeEncodeError:
            missing[char] = None
    return "".join(missing)


class PdfRenderer:
    """Turns a :class:`PageLayout` into PDF bytes.

    Output is produced in reportlab's invariant mode, so the same layout
    always yields the same bytes.

    Args:
        config: Page size and compression settings.
    """

    def __init__(self, config: RenderingConfig | None = None) -> None:
        self.config = config or RenderingConfig()

    def render(self, layout: PageLayout, title: str | None = None) -> bytes:
        """Render every page of a layout.

        Args:
            layout: Finished document layout.
            title: Optional PDF document title.

        Returns:
            The complete PDF file content.
        """
        buffer = io.BytesIO()
        pdf = canvas.Canvas(
            buffer,
            pagesize=(self.config.page_width, self.config.page_height),
            pageCompression=int(self.config.page_compression),
            invariant=1,
        )
        if title:
            pdf.setTitle(title)

        for page in layout.pages:
            for instruction in page.instructions:
                if isinstance(instruction, TextRun):
                    self._warn_unencodable(instruction.text)
                    pdf.setFillColorRGB(*instruction.color)
                    pdf.setFont(instruction.font, instruction.size)
                    pdf.drawString(instruction.x, instruction.y, instruction.text)
                elif isinstance(instruction, Checkbox):
                    self._warn_unencodable(instruction.text)
                    pdf.setStrokeColorRGB(*instruction.color)
                    pdf.setLineWidth(0.75)
                    pdf.rect(
                        instruction.x,
                        instruction.y - 1,
                        instruction.box_size,
                        instruction.box_size,
                        stroke=1,
                        fill=0,
                    )
                    pdf.setFillColorRGB(*instruction.color)
                    pdf.setFont(instruction.font, instruction.size)
                    pdf.drawString(instruction.text_x, instruction.y, instruction.text)
                elif isinstance(instruction, Rule):
                    pdf.setStrokeColorRGB(*instruction.color)
                    pdf.setLineWidth(instruction.thickness)
                    pdf.line(
                        instruction.x1, instruction.y1, instruction.x2, instruction.y2
                    )
                else:
                    raise TypeError(f"Unknown draw instruction: {instruction!r}")
            pdf.showPage()

        pdf.save()
        content = buffer.getvalue()
        logger.debug("Rendered %d pages into %d bytes", len(layout.pages), len(content))
        return content

    def _warn_unencodable(self, text: str) -> None:
        missing = unencodable_characters(text)
        if missing:
            logger.warning(
                "Characters %r in %r have no glyph in the standard fonts and "
                "will print as boxes",
                missing,
                text,
            )
