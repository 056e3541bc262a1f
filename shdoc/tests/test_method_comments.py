"""
Unit tests for method_comments.py
"""

import unittest

from shdoc.method_comments import parse_argument_comment, parse_method_comment
from shdoc.models import VariableType


class TestParseArgumentComment(unittest.TestCase):
    """Test argument line parsing."""

    def test_typed_optional_argument(self):
        """Test type and optional markers are removed from the description."""
        arg = parse_argument_comment("2: Timeout in seconds (Number) [Optional]")
        self.assertEqual(arg.index, "2")
        self.assertEqual(arg.desc, "Timeout in seconds")
        self.assertEqual(arg.type, VariableType.NUMBER)
        self.assertTrue(arg.is_optional)
        self.assertFalse(arg.is_wildcard)

    def test_wildcard_ignores_type(self):
        """Test that a wildcard argument is always untyped."""
        arg = parse_argument_comment("*: Remaining words (String)")
        self.assertTrue(arg.is_wildcard)
        self.assertEqual(arg.type, VariableType.UNKNOWN)
        self.assertEqual(arg.desc, "Remaining words")

    def test_tokens_anywhere(self):
        """Test markers are recognized in any position."""
        arg = parse_argument_comment("1: [Optional] (Boolean) Force flag")
        self.assertEqual(arg.desc, "Force flag")
        self.assertEqual(arg.type, VariableType.BOOLEAN)
        self.assertTrue(arg.is_optional)

    def test_no_space_after_colon(self):
        """Test the separating space is optional."""
        arg = parse_argument_comment("10:Last argument")
        self.assertEqual(arg.index, "10")
        self.assertEqual(arg.desc, "Last argument")

    def test_not_an_argument(self):
        """Test that text not starting with an index is rejected."""
        self.assertIsNone(parse_argument_comment("Runs at 10:30 every day"))
        self.assertIsNone(parse_argument_comment("Code: Yes"))


class TestParseMethodComment(unittest.TestCase):
    """Test method comment interpretation."""

    def test_description_only(self):
        """Test a block without directives becomes the whole description."""
        method = parse_method_comment("f", ["First line", "", "Second paragraph  ", ""])
        self.assertEqual(method.desc, ["First line", "", "Second paragraph"])
        self.assertEqual(method.arguments, [])
        self.assertFalse(method.result_code)
        self.assertIsNone(method.result_echo)
        self.assertIsNone(method.example)

    def test_private_and_empty(self):
        """Test that private or empty blocks produce no method."""
        self.assertIsNone(parse_method_comment("f", []))
        self.assertIsNone(parse_method_comment("f", ["private"]))
        self.assertIsNone(parse_method_comment("f", ["PRIVATE  ", "Hidden"]))
        self.assertIsNone(parse_method_comment("f", ["-", "Hidden"]))

    def test_privacy_marker_must_be_whole_line(self):
        """Test that a marker inside text does not hide the method."""
        method = parse_method_comment("f", ["- list item"])
        self.assertEqual(method.desc, ["- list item"])

    def test_echo_none_freezes_description(self):
        """Test a negative echo still ends the description."""
        method = parse_method_comment("f", ["Desc", "Echo: none", "More text"])
        self.assertEqual(method.desc, ["Desc"])
        self.assertIsNone(method.result_echo)

    def test_negative_values(self):
        """Test the negative forms for code and echo."""
        for value in ("none", "None", "No", "not really", "false", "FALSE", "NONE"):
            method = parse_method_comment("f", ["Desc", f"Code: {value}", f"Echo: {value}"])
            self.assertFalse(method.result_code, value)
            self.assertIsNone(method.result_echo, value)

    def test_positive_code(self):
        """Test that any other code text enables the exit code convention."""
        method = parse_method_comment("f", ["Desc", "Code: 0 on success"])
        self.assertTrue(method.result_code)

    def test_empty_directives_are_positive(self):
        """Test that empty code and echo remainders count as positive."""
        method = parse_method_comment("f", ["Desc", "Code:", "Echo:"])
        self.assertTrue(method.result_code)
        self.assertEqual(method.result_echo.type, VariableType.UNKNOWN)
        self.assertEqual(method.result_echo.desc, [])

    def test_directive_remainder_skips_one_separator(self):
        """Test that only one character after the directive prefix is skipped."""
        method = parse_method_comment("f", ["Desc", "Code:none"])
        self.assertTrue(method.result_code)

        method = parse_method_comment("f", ["Desc", "Code:  none"])
        self.assertTrue(method.result_code)

        method = parse_method_comment("f", ["Desc", "Echo: none  "])
        self.assertIsNone(method.result_echo)

    def test_echo_type(self):
        """Test that the echo description is typed like a variable."""
        method = parse_method_comment("f", ["Desc", "Echo: Path to file (String)"])
        self.assertEqual(method.result_echo.desc, ["Path to file"])
        self.assertEqual(method.result_echo.type, VariableType.STRING)
        self.assertEqual(method.result_echo.name, "")
        self.assertEqual(method.result_echo.value, "")

    def test_echo_without_type(self):
        """Test that an untyped echo description is unknown."""
        method = parse_method_comment("f", ["Desc", "Echo: Something"])
        self.assertEqual(method.result_echo.type, VariableType.UNKNOWN)

    def test_example_is_last(self):
        """Test that lines after Example are literal example lines."""
        method = parse_method_comment("f", [
            "Desc",
            "Example:",
            "f 1: not an argument",
            "Code: not a directive",
            "",
        ])
        self.assertEqual(method.example, ["f 1: not an argument", "Code: not a directive"])
        self.assertFalse(method.result_code)
        self.assertEqual(method.arguments, [])

    def test_empty_example(self):
        """Test that an example directive without lines gives no example."""
        method = parse_method_comment("f", ["Desc", "Example:", ""])
        self.assertIsNone(method.example)
        self.assertFalse(method.has_example())

    def test_directive_only_block_has_empty_description(self):
        """Test that a block starting with a directive has no description."""
        method = parse_method_comment("f", ["Code: Yes"])
        self.assertEqual(method.desc, [])
        self.assertTrue(method.result_code)

    def test_arguments_accumulate_in_order(self):
        """Test that argument lines are collected in order."""
        method = parse_method_comment("f", [
            "Copy file",
            "",
            "1: Source (String)",
            "Some remark",
            "2: Destination (String)",
        ])
        self.assertEqual(method.desc, ["Copy file"])
        self.assertEqual([a.index for a in method.arguments], ["1", "2"])


if __name__ == "__main__":
    unittest.main()
