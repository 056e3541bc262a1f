"""
Data models for documentation extracted from shell scripts.
"""

from dataclasses import dataclass, asdict, field, replace
from enum import IntEnum
from typing import Optional, List, Dict, Any

from shdoc.config import TYPE_NAMES, TYPE_NAME_DEFAULT, TYPE_NAME_LOWERCASE_SHORT


class VariableType(IntEnum):
    """Semantic type of a variable, constant, argument or echoed value."""

    UNKNOWN = 0
    STRING = 1
    NUMBER = 2
    BOOLEAN = 3


def get_type_name(var_type: VariableType, style: int = TYPE_NAME_DEFAULT) -> str:
    """Return the display name of a type in the given style.

    Args:
        var_type: Type to render.
        style: One of the ``TYPE_NAME_*`` styles; out-of-range values are
            clamped to the nearest valid style.

    Returns:
        Type name, or an empty string for unknown types.
    """
    names = TYPE_NAMES.get(VariableType(var_type).name)
    if names is None:
        return ""
    style = max(TYPE_NAME_DEFAULT, min(style, TYPE_NAME_LOWERCASE_SHORT))
    return names[style]


def merge_desc(lines: List[str]) -> str:
    """Join non-empty description lines into one space-separated string."""
    return " ".join(line for line in lines if line)


class _TypedMixin:
    """Type predicates shared by variables and arguments."""

    type: VariableType

    def type_name(self, style: int = TYPE_NAME_DEFAULT) -> str:
        return get_type_name(self.type, style)

    def is_string(self) -> bool:
        return self.type == VariableType.STRING

    def is_number(self) -> bool:
        return self.type == VariableType.NUMBER

    def is_boolean(self) -> bool:
        return self.type == VariableType.BOOLEAN

    def is_unknown(self) -> bool:
        return self.type == VariableType.UNKNOWN


@dataclass
class Argument(_TypedMixin):
    """A positional or wildcard argument of a documented method.

    Attributes:
        index: Positional number as text, or ``*`` for a wildcard argument
        desc: Description with type and optional markers removed
        type: Declared type (always UNKNOWN for wildcard arguments)
        is_optional: Whether the argument was marked ``[Optional]``
        is_wildcard: Whether the argument covers all remaining arguments
    """

    index: str
    desc: str = ""
    type: VariableType = VariableType.UNKNOWN
    is_optional: bool = False
    is_wildcard: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Variable(_TypedMixin):
    """A documented global variable or constant.

    Also used for the echoed value of a method, in which case ``name`` and
    ``value`` are empty.

    Attributes:
        name: Variable name as written in the assignment
        desc: Description lines, paragraph breaks kept as empty strings
        type: Annotated or inferred type
        value: Raw literal text (multiline values are concatenated)
        line: 1-indexed line of the assignment
    """

    name: str
    desc: List[str] = field(default_factory=list)
    type: VariableType = VariableType.UNKNOWN
    value: str = ""
    line: int = 0

    def merged_desc(self) -> str:
        return merge_desc(self.desc)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Method:
    """A documented shell function.

    Attributes:
        name: Function name
        desc: Description lines preceding the first directive
        arguments: Declared arguments in comment order
        result_code: Whether the function reports success through its exit code
        result_echo: Description of the value written to stdout, if any
        example: Usage example lines, if any
        line: 1-indexed line of the function definition
    """

    name: str
    desc: List[str] = field(default_factory=list)
    arguments: List[Argument] = field(default_factory=list)
    result_code: bool = False
    result_echo: Optional[Variable] = None
    example: Optional[List[str]] = None
    line: int = 0

    def has_arguments(self) -> bool:
        return len(self.arguments) != 0

    def has_echo(self) -> bool:
        return self.result_echo is not None

    def has_example(self) -> bool:
        return bool(self.example)

    def merged_desc(self) -> str:
        return merge_desc(self.desc)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Document:
    """All documentation extracted from one shell script.

    Attributes:
        title: Document title (script file name unless overridden)
        about: Free-text preamble of the script, if any
        constants: Documented constants in file order
        variables: Documented global variables in file order
        methods: Documented functions in file order
    """

    title: str
    about: Optional[List[str]] = None
    constants: List[Variable] = field(default_factory=list)
    variables: List[Variable] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)

    def is_valid(self) -> bool:
        """Return True if at least one constant, variable or method is documented."""
        return bool(self.constants or self.variables or self.methods)

    def has_about(self) -> bool:
        return bool(self.about)

    def has_constants(self) -> bool:
        return len(self.constants) != 0

    def has_variables(self) -> bool:
        return len(self.variables) != 0

    def has_methods(self) -> bool:
        return len(self.methods) != 0

    def with_title(self, title: str) -> "Document":
        """Return a copy of the document with the given title."""
        return replace(self, title=title)

    def find(self, pattern: str) -> "Document":
        """Return a document holding only entities whose name contains ``pattern``.

        The about preamble is not carried over.

        Example:
            >>> doc.find("log").methods
            [Method(name='log_info', ...), Method(name='log_error', ...)]
        """
        return Document(
            title=self.title,
            constants=[c for c in self.constants if pattern in c.name],
            variables=[v for v in self.variables if pattern in v.name],
            methods=[m for m in self.methods if pattern in m.name],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the document to a dictionary suitable for JSON serialization."""
        return asdict(self)
