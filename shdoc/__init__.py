"""
Shell script documentation extractor.

Line-oriented parser that turns specially formatted comments in shell
scripts into a structured document: about preamble, constants, global
variables and functions with their arguments, exit code and echo
conventions and usage examples.
"""

from shdoc.models import Argument, Document, Method, Variable, VariableType
from shdoc.classifier import EntityKind, ClassifiedLine, classify_line
from shdoc.type_resolver import guess_variable_type, parse_variable_comment
from shdoc.method_comments import parse_argument_comment, parse_method_comment
from shdoc.extractor import (
    parse,
    parse_file,
    read_data,
    parse_directory,
    discover_shell_scripts,
    document_to_dict,
    ExtractionStats,
)

__all__ = [
    # Data models
    "Argument",
    "Document",
    "Method",
    "Variable",
    "VariableType",
    "ExtractionStats",
    # Low-level parsing
    "EntityKind",
    "ClassifiedLine",
    "classify_line",
    "guess_variable_type",
    "parse_variable_comment",
    "parse_argument_comment",
    "parse_method_comment",
    # High-level orchestration
    "parse",
    "parse_file",
    "read_data",
    "parse_directory",
    "discover_shell_scripts",
    "document_to_dict",
]
