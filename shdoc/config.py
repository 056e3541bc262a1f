"""
Configuration constants for shell script documentation extraction.

Defines the compiled patterns, privacy markers and annotation tokens used by
the comment parser. All patterns are compiled once at import time and shared
read-only between parses.
"""

import re
from typing import Pattern, Set, Tuple

# Function definition: name immediately followed by "()"
METHOD_PATTERN: Pattern[str] = re.compile(r"^([a-zA-Z0-9._]+)\(\)")

# Assignment: name=value (value may be empty)
ASSIGNMENT_PATTERN: Pattern[str] = re.compile(r"^([a-zA-Z0-9_.\[\]]+)=(.*)$")

# Assignment names matching this pattern are constants
CONSTANT_NAME_PATTERN: Pattern[str] = re.compile(r"^[A-Z0-9_]+$")

# Literal value made of digits only
NUMBER_PATTERN: Pattern[str] = re.compile(r"^[0-9]+$")

# "<text> (Boolean|String|Number)" type annotation in a comment line
TYPE_COMMENT_PATTERN: Pattern[str] = re.compile(r"^(.*) \((Boolean|String|Number)\)")

# "<N or *>: <rest>" argument declaration in a method comment
ARGUMENT_PATTERN: Pattern[str] = re.compile(r"^([0-9]+|\*):[ ]*(.*)")

# Directive remainder explicitly opting out of a convention
NEGATIVE_VALUE_PATTERN: Pattern[str] = re.compile(r"^(none|not?|false)", re.IGNORECASE)

# Lint suppression comments are dropped without touching the buffer
LINT_DIRECTIVE_PATTERN: Pattern[str] = re.compile(r"^# +shellcheck +disable=")

# First comment line (right-trimmed) that hides the entity
PRIVACY_MARKERS: Set[str] = {
    "private",
    "PRIVATE",
    "-",
}

COMMENT_MARKER: str = "#"

# Argument annotation tokens
ARGUMENT_TYPE_TOKENS: dict = {
    "(Boolean)": "BOOLEAN",
    "(Number)": "NUMBER",
    "(String)": "STRING",
}
OPTIONAL_TOKEN: str = "[Optional]"
WILDCARD_INDEX: str = "*"

# Method comment directives
CODE_DIRECTIVE: str = "Code:"
ECHO_DIRECTIVE: str = "Echo:"
EXAMPLE_DIRECTIVE: str = "Example:"

# Literal treated as a boolean value
BOOLEAN_LITERAL: str = "true"

# Type name styles
TYPE_NAME_DEFAULT: int = 0
TYPE_NAME_LOWERCASE: int = 1
TYPE_NAME_UPPERCASE: int = 2
TYPE_NAME_UPPERCASE_SHORT: int = 3
TYPE_NAME_LOWERCASE_SHORT: int = 4

TYPE_NAMES: dict = {
    "STRING": ("String", "string", "STRING", "S", "s"),
    "NUMBER": ("Number", "number", "NUMBER", "N", "n"),
    "BOOLEAN": ("Boolean", "boolean", "BOOLEAN", "B", "b"),
}

# Shell script extensions picked up by directory discovery
SHELL_EXTENSIONS: Set[str] = {
    ".sh",
    ".bash",
    ".zsh",
    ".ksh",
}

# Directories never descended into during discovery
SKIPPED_DIRECTORIES: Tuple[str, ...] = (
    "node_modules",
    "venv",
    "__pycache__",
    "dist",
    "build",
    "out",
)
