"""
Comment block helpers shared by the variable and method parsers.
"""

from typing import List

from shdoc.config import PRIVACY_MARKERS


def clean_lines(lines: List[str]) -> List[str]:
    """Drop trailing empty lines and strip trailing spaces from each line.

    Empty lines between non-empty ones are kept as paragraph breaks.

    Args:
        lines: Raw comment text lines.

    Returns:
        Cleaned lines; empty if no line has any text.

    Example:
        >>> clean_lines(["First  ", "", "Second", "", ""])
        ['First', '', 'Second']
    """
    last_non_empty = -1
    for index, line in enumerate(lines):
        if line != "":
            last_non_empty = index

    return [line.rstrip(" ") for line in lines[:last_non_empty + 1]]


def is_private(lines: List[str]) -> bool:
    """Check if a comment block opens with a privacy marker."""
    if not lines:
        return False
    return lines[0].rstrip(" ") in PRIVACY_MARKERS
