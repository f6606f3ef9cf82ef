"""Draw-instruction model for generated documents.

A document is laid out as an ordered list of pages, each an ordered list
of text runs and rules in PDF point coordinates (origin bottom-left).
Layout code moves a vertical cursor down the page; when the cursor would
cross the bottom margin a continuation page is started.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from petitionkit.utils.config import RGB, RenderingConfig


@dataclass(frozen=True)
class TextRun:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: RGB


@dataclass(frozen=True)
class Rule:
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    color: RGB


@dataclass(frozen=True)
class Checkbox:
    """An empty, outlined box followed by a label on the same baseline."""

    x: float
    y: float
    text: str
    font: str
    size: float
    color: RGB
    box_size: float
    gap: float

    @property
    def text_x(self) -> float:
        return self.x + self.box_size + self.gap


# Stands in for a drawn box in extracted text lines.
CHECKBOX_MARK = "☐"

DrawInstruction = TextRun | Rule | Checkbox


@dataclass
class Page:
    instructions: list[DrawInstruction] = field(default_factory=list)

    def text_lines(self) -> list[str]:
        lines: list[str] = []
        for instruction in self.instructions:
            if isinstance(instruction, TextRun):
                lines.append(instruction.text)
            elif isinstance(instruction, Checkbox):
                lines.append(f"{CHECKBOX_MARK} {instruction.text}")
        return lines


class PageLayout:
    """Accumulates draw instructions for one document.

    Args:
        config: Page geometry and typography.
        top_margin: Distance from the page top to the first line of a
            continuation page.
    """

    def __init__(self, config: RenderingConfig, top_margin: float = 50) -> None:
        self.config = config
        self.top_margin = top_margin
        self.pages: list[Page] = [Page()]
        self.cursor = config.page_height - top_margin
        self.on_new_page: Callable[["PageLayout"], None] | None = None

    @property
    def width(self) -> float:
        return self.config.page_width

    @property
    def height(self) -> float:
        return self.config.page_height

    @property
    def page(self) -> Page:
        return self.pages[-1]

    def move_to(self, y: float) -> None:
        """Place the cursor at an absolute height on the current page."""
        self.cursor = y

    def skip(self, amount: float) -> None:
        self.cursor -= amount

    def new_page(self) -> None:
        """Start a continuation page and run the page-start hook."""
        self.pages.append(Page())
        self.cursor = self.height - self.top_margin
        if self.on_new_page is not None:
            self.on_new_page(self)

    def ensure_room(self, needed: float = 0) -> None:
        """Break the page unless ``needed`` points fit above the margin."""
        if self.cursor - needed < self.config.bottom_margin:
            self.new_page()

    def draw_text(
        self,
        text: str,
        y: float,
        x: float | None = None,
        size: float | None = None,
        color: RGB | None = None,
        font: str | None = None,
        page: Page | None = None,
    ) -> TextRun:
        """Place a text run at an absolute position without moving the cursor."""
        run = TextRun(
            x=self.config.margin_left if x is None else x,
            y=y,
            text=text,
            font=font or self.config.font_name,
            size=size or self.config.body_font_size,
            color=color or self.config.text_color,
        )
        (page or self.page).instructions.append(run)
        return run

    def draw_rule(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float = 1,
        color: RGB | None = None,
    ) -> Rule:
        rule = Rule(x1, y1, x2, y2, thickness, color or self.config.text_color)
        self.page.instructions.append(rule)
        return rule

    def line(
        self,
        text: str,
        x: float | None = None,
        size: float | None = None,
        color: RGB | None = None,
        advance: float | None = None,
    ) -> TextRun:
        """Write one line at the cursor, then move down.

        Args:
            text: Line content.
            x: Left edge; defaults to the page margin.
            size: Font size; defaults to the body size.
            color: Fill colour; defaults to the text colour.
            advance: Distance to move down afterwards; defaults to the
                line height.
        """
        self.ensure_room()
        run = self.draw_text(text, self.cursor, x=x, size=size, color=color)
        self.skip(self.config.line_height if advance is None else advance)
        return run

    def checkbox(
        self, text: str, x: float | None = None, advance: float | None = None
    ) -> Checkbox:
        """Write an unticked checkbox and its label at the cursor, then move down."""
        self.ensure_room()
        box = Checkbox(
            x=self.config.margin_left if x is None else x,
            y=self.cursor,
            text=text,
            font=self.config.font_name,
            size=self.config.body_font_size,
            color=self.config.text_color,
            box_size=self.config.checkbox_size,
            gap=self.config.checkbox_gap,
        )
        self.page.instructions.append(box)
        self.skip(self.config.line_height if advance is None else advance)
        return box

    def heading(self, text: str) -> TextRun:
        """Write a section heading preceded by the section gap."""
        self.skip(self.config.section_gap)
        self.ensure_room(self.config.heading_gap)
        run = self.draw_text(
            text,
            self.cursor,
            size=self.config.heading_font_size,
            color=self.config.accent_color,
        )
        self.skip(self.config.heading_gap)
        return run

    def footer(self, lines: list[tuple[str, float]]) -> None:
        """Draw the same footer lines at fixed heights on every page."""
        for page in self.pages:
            for text, y in lines:
                self.draw_text(
                    text,
                    y,
                    size=self.config.footer_font_size,
                    color=self.config.footer_color,
                    page=page,
                )

    def text_lines(self) -> list[str]:
        """All text runs of the document, in drawing order."""
        return [line for page in self.pages for line in page.text_lines()]
