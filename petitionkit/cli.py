"""Command-line interface for form lookup, auto-fill and PDF generation.

Provides subcommands to list the form catalog, auto-fill a case file
from text documents, and write the generated PDFs for a petition.
"""

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from petitionkit.catalog.forms import FormCatalog, FormCategory
from petitionkit.errors import GenerationError
from petitionkit.extraction.autofill import extract_and_merge
from petitionkit.extraction.file_processor import FileProcessor
from petitionkit.extraction.recognizers import PlainTextRecognizer
from petitionkit.models import CaseRecord, FileUpload, UploadedFileMeta
from petitionkit.rendering.generator import DocumentGenerator, GeneratedDocument
from petitionkit.utils.config import AppConfig, load_config
from petitionkit.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _load_case(path: Path) -> CaseRecord:
    """Read a case record from a JSON file.

    Args:
        path: JSON file in the wizard's camelCase format.

    Returns:
        Parsed case record.
    """
    with open(path) as f:
        return CaseRecord.model_validate(json.load(f))


def _read_uploads(paths: list[Path]) -> list[FileUpload]:
    uploads: list[FileUpload] = []
    for path in paths:
        mime_type, _ = mimetypes.guess_type(path.name)
        uploads.append(
            FileUpload(name=path.name, content=path.read_bytes(), mime_type=mime_type)
        )
    return uploads


def list_forms(catalog: FormCatalog, category: str | None = None) -> list[str]:
    """Format catalog entries as display lines.

    Args:
        catalog: Form catalog.
        category: Optional category filter.

    Returns:
        One line per form.
    """
    forms = catalog.by_category(category) if category else list(catalog)
    return [
        f"{form.code:<10} {form.category.display_name:<11} {form.name}"
        for form in forms
    ]


def autofill_case(
    case_path: Path, document_paths: list[Path], config: AppConfig
) -> CaseRecord:
    """Auto-fill a case file from text documents.

    Args:
        case_path: JSON case file as entered by the user.
        document_paths: Supporting documents; only text files yield
            candidates, other files are kept as metadata only.
        config: Application configuration.

    Returns:
        The merged case record.
    """
    case = _load_case(case_path)
    processor = FileProcessor(PlainTextRecognizer(), config.extraction)
    files = processor.process_files(_read_uploads(document_paths))
    return extract_and_merge(files, case, config=config.extraction)


def generate_documents(
    form_code: str,
    case_path: Path,
    exhibit_paths: list[Path],
    output_dir: Path,
    config: AppConfig,
) -> list[GeneratedDocument]:
    """Generate every document for a petition and write them to disk.

    Args:
        form_code: Catalog code of the form being filed.
        case_path: JSON case file.
        exhibit_paths: Supporting documents to index as exhibits.
        output_dir: Directory for the PDF files.
        config: Application configuration.

    Returns:
        The generated documents.

    Raises:
        GenerationError: If the form is unknown or rendering fails.
    """
    case = _load_case(case_path)
    processor = FileProcessor(PlainTextRecognizer(), config.extraction)
    exhibits: list[UploadedFileMeta] = processor.process_files(
        _read_uploads(exhibit_paths)
    )

    catalog = FormCatalog.load(Path(config.catalog.forms_path))
    generator = DocumentGenerator(config.rendering, catalog)
    documents = generator.generate_for_code(form_code, case, exhibits)

    output_dir.mkdir(parents=True, exist_ok=True)
    for document in documents:
        (output_dir / document.filename).write_bytes(document.content)
    logger.info("Wrote %d documents to %s", len(documents), output_dir)
    return documents


def _print_summary(documents: list[GeneratedDocument], output_dir: Path) -> None:
    """Print the generated files to stdout."""
    print(f"\n{'=' * 50}")
    print("Documents Generated")
    print(f"{'=' * 50}")
    for document in documents:
        print(f"{document.type.value:<17} {document.filename:<32} {document.size}")
    print(f"Output:     {output_dir}")


def _missing(paths: list[Path]) -> list[Path]:
    return [path for path in paths if not path.exists()]


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="California Legal Petition Toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Configuration YAML file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    forms_parser = subparsers.add_parser("forms", help="List available forms")
    forms_parser.add_argument(
        "--category",
        choices=[category.value for category in FormCategory],
        help="Only list forms of this category",
    )

    extract_parser = subparsers.add_parser(
        "extract", help="Auto-fill a case file from supporting documents"
    )
    extract_parser.add_argument("case", type=Path, help="Case JSON file")
    extract_parser.add_argument(
        "documents", type=Path, nargs="+", help="Supporting documents"
    )
    extract_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate the PDF documents for a petition"
    )
    generate_parser.add_argument("form", help="Form code, e.g. FL-100")
    generate_parser.add_argument("case", type=Path, help="Case JSON file")
    generate_parser.add_argument(
        "-e",
        "--exhibit",
        type=Path,
        action="append",
        default=[],
        dest="exhibits",
        help="Supporting document to list as an exhibit (repeatable)",
    )
    generate_parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory (default: output)",
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config.log_level)

    if args.command == "forms":
        catalog = FormCatalog.load(Path(config.catalog.forms_path))
        for line in list_forms(catalog, args.category):
            print(line)
    elif args.command == "extract":
        missing = _missing([args.case, *args.documents])
        if missing:
            print(f"Error: {missing[0]} does not exist", file=sys.stderr)
            sys.exit(1)
        try:
            merged = autofill_case(args.case, args.documents, config)
        except ValueError as exc:
            print(f"Error: invalid case file {args.case}: {exc}", file=sys.stderr)
            sys.exit(1)
        output_str = json.dumps(merged.to_json_dict(), indent=2)
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output_str)
            print(f"Output written to {args.output}")
        else:
            print(output_str)
    elif args.command == "generate":
        missing = _missing([args.case, *args.exhibits])
        if missing:
            print(f"Error: {missing[0]} does not exist", file=sys.stderr)
            sys.exit(1)
        try:
            documents = generate_documents(
                args.form, args.case, args.exhibits, args.output_dir, config
            )
        except ValueError as exc:
            print(f"Error: invalid case file {args.case}: {exc}", file=sys.stderr)
            sys.exit(1)
        except GenerationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        _print_summary(documents, args.output_dir)
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
