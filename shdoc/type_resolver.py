"""
Type resolution for documented variables and constants.

A type comes from an explicit ``(Boolean)``, ``(Number)`` or ``(String)``
annotation at the end of a comment line, or, failing that, is guessed from
the assigned literal.
"""

from typing import List, Optional, Tuple

from shdoc.comments import clean_lines, is_private
from shdoc.config import BOOLEAN_LITERAL, NUMBER_PATTERN, TYPE_COMMENT_PATTERN
from shdoc.models import Variable, VariableType


def guess_variable_type(value: str) -> VariableType:
    """Guess a type from a raw literal value.

    Example:
        >>> guess_variable_type("42")
        <VariableType.NUMBER: 2>
    """
    if value == "":
        return VariableType.UNKNOWN
    if value == BOOLEAN_LITERAL:
        return VariableType.BOOLEAN
    if NUMBER_PATTERN.match(value):
        return VariableType.NUMBER
    return VariableType.STRING


def extract_type_annotation(lines: List[str]) -> Tuple[List[str], VariableType]:
    """Find the first type annotation in a comment block.

    The annotated line is replaced by its text without the annotation. Lines
    after the first match are kept unchanged, even if they carry an
    annotation themselves.

    Args:
        lines: Raw comment lines.

    Returns:
        A tuple of (cleaned lines, type), where type is UNKNOWN if no line
        is annotated.
    """
    result: List[str] = []
    found = VariableType.UNKNOWN

    for line in lines:
        if found == VariableType.UNKNOWN:
            match = TYPE_COMMENT_PATTERN.match(line)
            if match:
                result.append(match.group(1))
                found = VariableType[match.group(2).upper()]
                continue
        result.append(line)

    return clean_lines(result), found


def parse_variable_comment(name: str, value: str, lines: List[str]) -> Optional[Variable]:
    """Build a variable from its comment block and assigned value.

    Args:
        name: Variable name.
        value: Raw assigned value.
        lines: Comment lines preceding the assignment.

    Returns:
        The variable, or None if the block is empty or marked private. The
        description may be empty; callers decide whether to keep it.
    """
    if not lines or is_private(lines):
        return None

    desc, var_type = extract_type_annotation(lines)

    if var_type == VariableType.UNKNOWN:
        var_type = guess_variable_type(value)

    return Variable(name=name, desc=desc, type=var_type, value=value)


def is_multiline_value(value: str) -> bool:
    """Check if a value opens a double-quoted string it does not close."""
    return value.startswith('"') and not value.endswith('"')
