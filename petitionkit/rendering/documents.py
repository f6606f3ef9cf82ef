"""Layouts of the three generated documents.

Each builder returns a :class:`PageLayout`; nothing here touches PDF
bytes. Absent case fields are skipped on the petition and replaced by a
blank line on the proof of service.
"""

from collections.abc import Sequence
from datetime import date

from petitionkit.catalog.counties import county_display
from petitionkit.catalog.forms import FormCategory, FormDescriptor
from petitionkit.models import CaseRecord, UploadedFileMeta
from petitionkit.utils.config import RenderingConfig
from petitionkit.utils.formatting import exhibit_label, format_file_size, truncate_name

from .layout import PageLayout

PROOF_OF_SERVICE_TITLE = "POS-040 - PROOF OF SERVICE BY MAIL"
EXHIBITS_TITLE = "EXHIBITS INDEX"

# Exhibit table columns: header text and left edge.
EXHIBIT_COLUMNS: list[tuple[str, float]] = [
    ("Exhibit", 50),
    ("Document Name", 120),
    ("Category", 350),
    ("Size", 450),
]
EXHIBIT_RULE_END = 550


def format_generated_date(today: date) -> str:
    return f"{today.month}/{today.day}/{today.year}"


def _caption(layout: PageLayout, title: str, case: CaseRecord | None) -> None:
    """Title line and court caption at the top of the first page."""
    config = layout.config
    layout.draw_text(
        title,
        layout.height - 50,
        size=config.title_font_size,
        color=config.accent_color,
    )
    layout.draw_text(
        "SUPERIOR COURT OF CALIFORNIA",
        layout.height - 80,
        size=config.caption_font_size,
    )
    county = case.case_info.county if case is not None else None
    county_name = county_display(county) if county else config.default_county
    layout.draw_text(
        f"COUNTY OF {county_name}",
        layout.height - 100,
        size=config.caption_font_size,
    )


def _section(
    layout: PageLayout, heading: str, rows: Sequence[tuple[str, str | None]]
) -> None:
    present = [(label, value) for label, value in rows if value]
    if not present:
        return
    layout.heading(heading)
    for label, value in present:
        layout.line(f"{label}: {value}")


def build_petition(
    form: FormDescriptor,
    case: CaseRecord,
    today: date,
    config: RenderingConfig | None = None,
) -> PageLayout:
    """Lay out the main petition.

    Sections appear only when they have something to show: petitioner,
    respondent (family forms), case dates, and minor children when the
    case says there are any.
    """
    layout = PageLayout(config or RenderingConfig())
    _caption(layout, form.display_name, case)
    layout.move_to(layout.height - 150 + layout.config.section_gap)

    petitioner = case.petitioner
    _section(
        layout,
        "PETITIONER INFORMATION",
        [
            ("Name", petitioner.full_name),
            ("Date of Birth", petitioner.date_of_birth),
            ("Address", petitioner.address),
            ("Phone", petitioner.phone),
            ("Email", petitioner.email),
        ],
    )

    if form.category is FormCategory.FAMILY and case.respondent.has_data:
        respondent = case.respondent
        _section(
            layout,
            "RESPONDENT INFORMATION",
            [
                ("Name", respondent.full_name),
                ("Date of Birth", respondent.date_of_birth),
                ("Address", respondent.address),
            ],
        )

    _section(
        layout,
        "CASE INFORMATION",
        [
            ("Date of Marriage", case.case_info.marriage_date),
            ("Date of Separation", case.case_info.separation_date),
        ],
    )

    named_children = [child for child in case.children if child.name]
    if case.has_minor_children and named_children:
        layout.heading("MINOR CHILDREN")
        for number, child in enumerate(named_children, 1):
            gender = child.gender.value if child.gender else "N/A"
            layout.line(
                f"{number}. {child.name} - DOB: {child.date_of_birth or 'N/A'}"
                f" - Gender: {gender}"
            )

    layout.footer(
        [
            (f"Generated on: {format_generated_date(today)}", 50),
            (layout.config.attribution, 35),
        ]
    )
    return layout


def build_proof_of_service(
    form: FormDescriptor,
    case: CaseRecord,
    config: RenderingConfig | None = None,
) -> PageLayout:
    """Lay out a proof of service by mail for the given form."""
    layout = PageLayout(config or RenderingConfig())
    caption_size = layout.config.caption_font_size
    indent = layout.config.indent
    blank = layout.config.blank_placeholder
    _caption(layout, PROOF_OF_SERVICE_TITLE, case)

    layout.move_to(layout.height - 150)
    layout.line("I served the following documents:", size=caption_size, advance=30)
    layout.checkbox(form.display_name, x=indent, advance=40)

    layout.line("Person served:", size=caption_size, advance=25)
    layout.line(f"Name: {case.respondent.full_name or blank}", x=indent)
    layout.line(f"Address: {case.respondent.address or blank}", x=indent, advance=40)

    layout.line("Date of service: _________________", advance=30)
    layout.line("Method of service:", size=caption_size, advance=25)
    layout.checkbox("By mail to the address shown above", x=indent)
    layout.checkbox("Personal service", x=indent, advance=60)

    layout.line("Server information:", size=caption_size, advance=25)
    layout.line(f"Name: {case.petitioner.full_name or blank}", x=indent)
    layout.line(f"Address: {case.petitioner.address or blank}", x=indent, advance=40)
    layout.line(f"Signature: {blank}     Date: _________", x=indent)
    return layout


def _exhibit_table_header(layout: PageLayout) -> None:
    caption_size = layout.config.caption_font_size
    for title, x in EXHIBIT_COLUMNS:
        layout.draw_text(title, layout.cursor, x=x, size=caption_size)
    layout.draw_rule(
        EXHIBIT_COLUMNS[0][1],
        layout.cursor - 5,
        EXHIBIT_RULE_END,
        layout.cursor - 5,
    )
    layout.skip(25)


def build_exhibits_index(
    files: Sequence[UploadedFileMeta],
    today: date,
    config: RenderingConfig | None = None,
) -> PageLayout:
    """Lay out the index of uploaded supporting documents.

    Rows that do not fit on the first page continue on further pages,
    each starting with the table header.
    """
    layout = PageLayout(config or RenderingConfig())
    config = layout.config
    layout.draw_text(
        EXHIBITS_TITLE,
        layout.height - 50,
        size=config.title_font_size,
        color=config.accent_color,
    )
    layout.draw_text(
        "Supporting Documents for Legal Petition",
        layout.height - 80,
        size=config.caption_font_size,
    )

    layout.move_to(layout.height - 120)
    _exhibit_table_header(layout)
    layout.on_new_page = _exhibit_table_header

    for index, meta in enumerate(files):
        layout.ensure_room()
        y = layout.cursor
        layout.draw_text(exhibit_label(index), y, x=EXHIBIT_COLUMNS[0][1])
        layout.draw_text(truncate_name(meta.name), y, x=EXHIBIT_COLUMNS[1][1])
        layout.draw_text(meta.category.value, y, x=EXHIBIT_COLUMNS[2][1])
        layout.draw_text(format_file_size(meta.size_bytes), y, x=EXHIBIT_COLUMNS[3][1])
        layout.skip(config.line_height)

    layout.on_new_page = None
    layout.footer([(f"Generated on: {format_generated_date(today)}", 50)])
    return layout
