"""
High-level orchestrator for shell script documentation extraction.

This module runs the single-pass comment parser over a script and provides
the main entry points for parsing single files or entire directory trees.
"""

import logging
import os
from typing import List, Optional, Tuple, Iterable, Dict, Any

from core.structured_logging import script_scope
from shdoc.classifier import EntityKind, classify_line
from shdoc.comments import clean_lines
from shdoc.config import SHELL_EXTENSIONS, SKIPPED_DIRECTORIES
from shdoc.method_comments import parse_method_comment
from shdoc.models import Document, Method, Variable
from shdoc.source import LineKind, LineSource, ParseState, classify_comment_line, comment_text
from shdoc.type_resolver import is_multiline_value, parse_variable_comment

logger = logging.getLogger(__name__)


class ExtractionStats:
    """Statistics for a directory extraction."""

    def __init__(self):
        self.files_processed = 0
        self.files_failed = 0
        self.files_undocumented = 0
        self.entities_extracted = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "files_processed": self.files_processed,
            "files_failed": self.files_failed,
            "files_undocumented": self.files_undocumented,
            "entities_extracted": self.entities_extracted,
        }

    def __str__(self) -> str:
        return (
            f"ExtractionStats(processed={self.files_processed}, "
            f"failed={self.files_failed}, undocumented={self.files_undocumented}, "
            f"entities={self.entities_extracted})"
        )


class DocumentBuilder:
    """Collects parsed entities into a document in file order."""

    def __init__(self, title: str):
        self.document = Document(title=title)

    def set_about(self, lines: List[str]) -> None:
        about = clean_lines(lines)
        if about:
            self.document.about = about

    def add_method(self, method: Method) -> bool:
        # Methods must have a description
        if not method.desc:
            return False
        self.document.methods.append(method)
        return True

    def add_variable(self, variable: Variable, kind: EntityKind) -> bool:
        # Variables must have a description
        if not variable.desc:
            return False
        if kind == EntityKind.CONSTANT:
            self.document.constants.append(variable)
        else:
            self.document.variables.append(variable)
        return True


def _process_declaration(
    line: str,
    line_num: int,
    source: LineSource,
    state: ParseState,
    builder: DocumentBuilder,
) -> None:
    """Handle one code line: classify it and attach the pending comment block."""
    entity = classify_line(line)
    block = state.take_buffer()

    if entity.kind == EntityKind.UNKNOWN or not block:
        if block:
            logger.debug("Dropping orphaned comment block before line %d", line_num)
        return

    if entity.kind == EntityKind.METHOD:
        method = parse_method_comment(entity.name, block)
        if method is None:
            logger.debug("Skipping private method %s at line %d", entity.name, line_num)
            return

        state.methods_seen = True
        method.line = line_num

        if not builder.add_method(method):
            logger.debug("Skipping method %s without description", entity.name)
        return

    # Assignments after the first method belong to function bodies
    if state.methods_seen:
        logger.debug("Ignoring %s %s after methods section", entity.kind.value, entity.name)
        return

    variable = parse_variable_comment(entity.name, entity.value, block)
    if variable is None:
        logger.debug("Skipping private %s %s at line %d", entity.kind.value, entity.name, line_num)
        return

    if is_multiline_value(variable.value):
        variable.value += source.read_continuation()

    variable.line = line_num

    if not builder.add_variable(variable, entity.kind):
        logger.debug("Skipping %s %s without description", entity.kind.value, entity.name)


def read_data(title: str, text: str) -> Document:
    """Run the comment parser over script text.

    The first line is reserved for the shebang and always skipped.

    Args:
        title: Document title.
        text: Full script text.

    Returns:
        The populated document. It may hold no entities at all.

    Example:
        >>> doc = read_data("demo.sh", "#!/bin/bash\\n# Greeting text\\nGREETING=hi\\n")
        >>> doc.constants[0].name
        'GREETING'
    """
    source = LineSource(text)
    state = ParseState()
    builder = DocumentBuilder(title)

    for line_num, raw_line in source:
        if line_num == 1:
            continue

        line = raw_line.lstrip(" ")
        kind = classify_comment_line(line)

        if kind == LineKind.LINT_DIRECTIVE:
            continue

        if kind == LineKind.BLANK:
            about_open = not state.about_claimed and not builder.document.is_valid()
            block = state.take_buffer()
            if block and about_open:
                builder.set_about(block)
            continue

        if kind == LineKind.BARE_MARKER:
            state.append_paragraph_break()
            continue

        if kind == LineKind.COMMENT:
            state.append(comment_text(line))
            continue

        _process_declaration(line, line_num, source, state, builder)

    return builder.document


def _load_script(file_path: str) -> Tuple[Optional[str], List[Exception]]:
    """Read a script as UTF-8 text, collecting I/O level errors."""
    if not os.path.exists(file_path):
        return None, [FileNotFoundError(f"File {file_path} doesn't exist or not accessible")]

    if not os.path.isfile(file_path):
        return None, [IsADirectoryError(f"File {file_path} is not a regular file")]

    if not os.access(file_path, os.R_OK):
        return None, [PermissionError(f"File {file_path} is not readable")]

    try:
        with open(file_path, "rb") as f:
            source_bytes = f.read()
    except OSError as e:
        return None, [e]

    if not source_bytes:
        return None, [ValueError(f"File {file_path} is empty")]

    try:
        return source_bytes.decode("utf-8"), []
    except UnicodeDecodeError as e:
        return None, [ValueError(f"File {file_path} is not valid UTF-8: {e}")]


def parse(file_path: str) -> Tuple[Optional[Document], List[Exception]]:
    """Parse a shell script and return its documentation.

    Args:
        file_path: Path to the script.

    Returns:
        A tuple of (document, errors). Errors are only reported for I/O
        problems (missing, unreadable or empty file), in which case the
        document is None. Undocumented or private declarations are dropped
        silently.

    Example:
        >>> doc, errors = parse("scripts/deploy.sh")
        >>> if not errors and doc.is_valid():
        ...     print([m.name for m in doc.methods])
    """
    with script_scope(file_path):
        text, errors = _load_script(file_path)

        if errors:
            for error in errors:
                logger.error("Error reading %s: %s", file_path, error)
            return None, errors

        document = read_data(os.path.basename(file_path), text)
        logger.info(
            "Parsed %s: %d constants, %d variables, %d methods",
            file_path,
            len(document.constants),
            len(document.variables),
            len(document.methods),
        )
        return document, []


def parse_file(file_path: str, title: Optional[str] = None) -> Document:
    """Parse a shell script, raising on I/O errors.

    Args:
        file_path: Path to the script.
        title: Optional title overriding the file name.

    Returns:
        The parsed document.

    Raises:
        FileNotFoundError: If the file does not exist.
        IsADirectoryError: If the path is not a regular file.
        PermissionError: If the file is not readable.
        ValueError: If the file is empty or not UTF-8 text.
    """
    document, errors = parse(file_path)
    if errors:
        raise errors[0]
    if title:
        document = document.with_title(title)
    return document


def discover_shell_scripts(
    directory: str,
    extensions: Iterable[str] = SHELL_EXTENSIONS,
) -> List[str]:
    """Recursively discover shell scripts in a directory.

    Args:
        directory: Root directory to search.
        extensions: File extensions treated as shell scripts.

    Returns:
        Sorted list of absolute paths.
    """
    extensions = set(extensions)
    scripts = []
    directory = os.path.abspath(directory)

    logger.info("Discovering shell scripts in %s", directory)

    for root, dirs, files in os.walk(directory):
        # Skip hidden directories and common build/cache directories
        dirs[:] = [
            d for d in dirs
            if not d.startswith('.') and d not in SKIPPED_DIRECTORIES
        ]

        for file in files:
            if os.path.splitext(file)[1] in extensions:
                scripts.append(os.path.join(root, file))

    logger.info("Found %d shell scripts", len(scripts))
    return sorted(scripts)


def parse_directory(
    directory: str,
    continue_on_error: bool = True,
    extensions: Iterable[str] = SHELL_EXTENSIONS,
) -> Tuple[List[Document], ExtractionStats]:
    """Parse every shell script in a directory tree.

    Args:
        directory: Root directory to process.
        continue_on_error: If False, raise the first I/O error instead of
            counting it and moving on.
        extensions: File extensions treated as shell scripts.

    Returns:
        A tuple of (documents, stats). Only documents with at least one
        entity are returned.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    directory = os.path.abspath(directory)

    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")

    stats = ExtractionStats()
    documents: List[Document] = []

    scripts = discover_shell_scripts(directory, extensions)

    if not scripts:
        logger.warning("No shell scripts found in %s", directory)
        return documents, stats

    for file_path in scripts:
        document, errors = parse(file_path)

        if errors:
            stats.files_failed += 1
            if not continue_on_error:
                raise errors[0]
            continue

        stats.files_processed += 1

        if not document.is_valid():
            logger.warning("File %s doesn't contain documentation", file_path)
            stats.files_undocumented += 1
            continue

        stats.entities_extracted += (
            len(document.constants) + len(document.variables) + len(document.methods)
        )
        documents.append(document)

    logger.info("Extraction complete: %s", stats)
    return documents, stats


def document_to_dict(document: Document) -> Dict[str, Any]:
    """Convert a document into a JSON-ready dictionary."""
    return document.to_dict()
