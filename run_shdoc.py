#!/usr/bin/env python3
"""
Shell script documentation extraction runner.

Parses a shell script (or every script in a directory) and writes the
extracted documentation as JSON.

Usage:
    python run_shdoc.py scripts/deploy.sh
    python run_shdoc.py scripts/deploy.sh --name "Deploy helpers"
    python run_shdoc.py scripts/deploy.sh --find log_
    python run_shdoc.py scripts/ --output-dir out/docs
"""

import argparse
import logging
import os
import sys
from typing import Optional

from core.run_artifacts import write_document_json
from core.settings import SettingsError, load_settings
from core.structured_logging import configure_structured_logging, set_run_id
from shdoc.extractor import document_to_dict, parse, parse_directory
from shdoc.models import Document

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_DOCS = 2


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Shell script documentation extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_shdoc.py script.sh\n"
            "  python run_shdoc.py script.sh --find log_\n"
            "  python run_shdoc.py scripts/ --output-dir out/docs\n"
        )
    )

    parser.add_argument(
        "source",
        help="Path to a shell script or a directory of scripts."
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Override the document title (single script only)."
    )
    parser.add_argument(
        "--find",
        default=None,
        help="Only keep constants, variables and methods whose name contains this text."
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for JSON output. Default comes from settings."
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Path to a YAML or JSON settings file."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)."
    )

    return parser.parse_args(argv)


def _write(document: Document, output_dir: str, indent: int) -> str:
    path = write_document_json(
        document_to_dict(document),
        document.title,
        output_dir=output_dir,
        indent=indent,
    )
    logger.info("Wrote %s", path)
    return path


def process_script(
    file_path: str,
    output_dir: str,
    indent: int,
    title: Optional[str] = None,
    pattern: Optional[str] = None,
) -> int:
    """Parse one script and write its documentation.

    Returns:
        Process exit code.
    """
    document, errors = parse(file_path)

    if errors:
        logger.error("Shell script docs parsing errors:")
        for error in errors:
            logger.error("  %s", error)
        return EXIT_ERROR

    if not document.is_valid():
        logger.warning("File %s doesn't contain documentation", file_path)
        return EXIT_NO_DOCS

    if title:
        document = document.with_title(title)

    if pattern:
        document = document.find(pattern)

    _write(document, output_dir, indent)
    return EXIT_OK


def process_directory(directory: str, output_dir: str, indent: int, extensions) -> int:
    """Parse all scripts in a directory and write one JSON file per document.

    Returns:
        Process exit code.
    """
    documents, stats = parse_directory(directory, extensions=extensions)

    for document in documents:
        _write(document, output_dir, indent)

    logger.info("Final stats: %s", stats)

    if stats.files_failed:
        return EXIT_ERROR
    if not documents:
        return EXIT_NO_DOCS
    return EXIT_OK


def main(argv=None) -> int:
    """Main entry point for the runner."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        configure_structured_logging(logging.INFO)
        logger.error("Settings error: %s", e)
        return EXIT_ERROR

    configure_structured_logging(args.log_level or settings.log_level)
    set_run_id()

    output_dir = args.output_dir or settings.output_dir

    try:
        if os.path.isdir(args.source):
            return process_directory(
                args.source, output_dir, settings.json_indent, settings.script_extensions
            )
        return process_script(
            args.source,
            output_dir,
            settings.json_indent,
            title=args.name,
            pattern=args.find,
        )
    except OSError as e:
        logger.error("File error: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
