"""
Line source and comment accumulator for the script parser.

The parser reads a script strictly forward. ``LineSource`` hands out lines
with their 1-indexed numbers and also serves continuation reads for
multiline values, so every consumer shares one cursor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from shdoc.config import COMMENT_MARKER, LINT_DIRECTIVE_PATTERN


class LineKind(Enum):
    """Role of a left-stripped line in comment accumulation."""

    BLANK = "blank"
    BARE_MARKER = "bare_marker"
    COMMENT = "comment"
    LINT_DIRECTIVE = "lint_directive"
    CODE = "code"


class LineSource:
    """Forward-only iterator over the lines of a script.

    Yields ``(line_number, line)`` tuples. Lines are split on ``\\n``; a
    trailing ``\\r`` is removed and the empty segment after a final newline
    is not reported as a line.
    """

    def __init__(self, text: str):
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        self._position = 0

    @property
    def line_number(self) -> int:
        """1-indexed number of the last line handed out (0 before the first)."""
        return self._position

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self

    def __next__(self) -> Tuple[int, str]:
        if self._position >= len(self._lines):
            raise StopIteration
        line = self._lines[self._position]
        self._position += 1
        return self._position, line

    def read_continuation(self, terminator: str = '"') -> str:
        """Concatenate raw lines up to and including one ending with ``terminator``.

        Stops silently at the end of the script.
        """
        parts: List[str] = []
        for _, line in self:
            parts.append(line)
            if line.endswith(terminator):
                break
        return "".join(parts)


def classify_comment_line(line: str) -> LineKind:
    """Classify a line that has already had its leading spaces stripped."""
    if line == "":
        return LineKind.BLANK
    if LINT_DIRECTIVE_PATTERN.match(line):
        return LineKind.LINT_DIRECTIVE
    if line.strip(COMMENT_MARKER) == "":
        return LineKind.BARE_MARKER
    if line.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    return LineKind.CODE


def comment_text(line: str) -> str:
    """Return comment text without the marker and its separating space."""
    return line[2:]


@dataclass
class ParseState:
    """Mutable state threaded through the line-processing loop.

    Attributes:
        buffer: Comment lines collected since the last reset, or None if no
            comment block is open
        methods_seen: Whether a method has been interpreted already
        about_claimed: Whether a comment block has already been closed, which
            rules out any later about preamble
    """

    buffer: Optional[List[str]] = None
    methods_seen: bool = False
    about_claimed: bool = False

    def append(self, text: str) -> None:
        if self.buffer is None:
            self.buffer = []
        self.buffer.append(text)

    def append_paragraph_break(self) -> None:
        # A bare marker only separates paragraphs inside an open block
        if self.buffer is not None:
            self.buffer.append("")

    def take_buffer(self) -> List[str]:
        """Return the collected block and reset the buffer."""
        block = self.buffer or []
        if self.buffer is not None:
            self.about_claimed = True
        self.buffer = None
        return block
