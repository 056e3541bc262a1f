"""
Unit tests for source.py
"""

import unittest

from shdoc.source import LineKind, LineSource, ParseState, classify_comment_line, comment_text


class TestLineSource(unittest.TestCase):
    """Test forward line iteration."""

    def test_numbering_and_newlines(self):
        """Test 1-indexed numbering, CRLF handling and final newline."""
        source = LineSource("a\r\nb\n\nc\n")
        self.assertEqual(list(source), [(1, "a"), (2, "b"), (3, ""), (4, "c")])
        self.assertEqual(source.line_number, 4)

    def test_no_final_newline(self):
        """Test text without trailing newline."""
        self.assertEqual(list(LineSource("a\nb")), [(1, "a"), (2, "b")])

    def test_continuation_shares_cursor(self):
        """Test continuation reads advance the same cursor."""
        source = LineSource('x="a\nb\nc"\nd\n')
        self.assertEqual(next(source), (1, 'x="a'))
        self.assertEqual(source.read_continuation(), 'bc"')
        self.assertEqual(next(source), (4, "d"))

    def test_continuation_stops_at_end(self):
        """Test an unterminated continuation ends with the text."""
        source = LineSource('x="a\nb\n')
        next(source)
        self.assertEqual(source.read_continuation(), "b")
        self.assertEqual(list(source), [])


class TestClassifyCommentLine(unittest.TestCase):
    """Test line kinds used by the accumulator."""

    def test_kinds(self):
        """Test each line kind."""
        self.assertEqual(classify_comment_line(""), LineKind.BLANK)
        self.assertEqual(classify_comment_line("#"), LineKind.BARE_MARKER)
        self.assertEqual(classify_comment_line("#####"), LineKind.BARE_MARKER)
        self.assertEqual(classify_comment_line("# text"), LineKind.COMMENT)
        self.assertEqual(classify_comment_line("# "), LineKind.COMMENT)
        self.assertEqual(classify_comment_line("VAR=1"), LineKind.CODE)

    def test_lint_directive(self):
        """Test shellcheck directives are recognized only as whole comments."""
        self.assertEqual(
            classify_comment_line("# shellcheck disable=SC2034"),
            LineKind.LINT_DIRECTIVE,
        )
        self.assertEqual(
            classify_comment_line("#  shellcheck  disable=SC1090,SC1091"),
            LineKind.LINT_DIRECTIVE,
        )
        self.assertEqual(
            classify_comment_line("VAR=1 # shellcheck disable=SC2034"),
            LineKind.CODE,
        )
        self.assertEqual(
            classify_comment_line("# shellcheck source=lib.sh"),
            LineKind.COMMENT,
        )

    def test_comment_text(self):
        """Test marker and separating space removal."""
        self.assertEqual(comment_text("# Hello"), "Hello")
        self.assertEqual(comment_text("#   indented"), "  indented")
        self.assertEqual(comment_text("# "), "")


class TestParseState(unittest.TestCase):
    """Test comment buffer transitions."""

    def test_paragraph_break_needs_open_block(self):
        """Test bare markers are ignored before any comment text."""
        state = ParseState()
        state.append_paragraph_break()
        self.assertIsNone(state.buffer)

        state.append("text")
        state.append_paragraph_break()
        self.assertEqual(state.buffer, ["text", ""])

    def test_take_buffer_claims_about(self):
        """Test that closing a block rules out later about text."""
        state = ParseState()
        self.assertEqual(state.take_buffer(), [])
        self.assertFalse(state.about_claimed)

        state.append("text")
        self.assertEqual(state.take_buffer(), ["text"])
        self.assertTrue(state.about_claimed)
        self.assertIsNone(state.buffer)


if __name__ == "__main__":
    unittest.main()
