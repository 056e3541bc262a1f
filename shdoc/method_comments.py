"""
Interpretation of function comment blocks.

A function comment starts with free-text description and may continue with
directives, in any order except that ``Example:`` always comes last::

    # Print message to stderr
    #
    # 1: Message (String)
    # *: Format arguments
    #
    # Code: Yes
    # Echo: Number of written bytes (Number)
    #
    # Example:
    # log_error "Oops: %s" "$reason"

The description ends at the first directive line.
"""

from typing import List, Optional

from shdoc.comments import clean_lines, is_private
from shdoc.config import (
    ARGUMENT_PATTERN,
    ARGUMENT_TYPE_TOKENS,
    CODE_DIRECTIVE,
    ECHO_DIRECTIVE,
    EXAMPLE_DIRECTIVE,
    NEGATIVE_VALUE_PATTERN,
    OPTIONAL_TOKEN,
    WILDCARD_INDEX,
)
from shdoc.models import Argument, Method, VariableType
from shdoc.type_resolver import parse_variable_comment


def parse_argument_comment(line: str) -> Optional[Argument]:
    """Parse an ``<N or *>: <description>`` argument line.

    Type tokens and ``[Optional]`` are removed from the description. A
    wildcard argument never has a type.

    Args:
        line: Comment text of the argument line.

    Returns:
        The argument, or None if the line is not an argument declaration.

    Example:
        >>> parse_argument_comment("2: Timeout (Number) [Optional]")
        Argument(index='2', desc='Timeout', type=<VariableType.NUMBER: 2>, is_optional=True, is_wildcard=False)
    """
    match = ARGUMENT_PATTERN.match(line)
    if not match:
        return None

    argument = Argument(index=match.group(1))
    words = []

    for word in match.group(2).split():
        if word in ARGUMENT_TYPE_TOKENS:
            argument.type = VariableType[ARGUMENT_TYPE_TOKENS[word]]
        elif word == OPTIONAL_TOKEN:
            argument.is_optional = True
        else:
            words.append(word)

    argument.desc = " ".join(words)

    if argument.index == WILDCARD_INDEX:
        argument.is_wildcard = True
        argument.type = VariableType.UNKNOWN

    return argument


def _directive_value(line: str, directive: str) -> str:
    # Prefix plus exactly one separating character
    return line[len(directive) + 1:]


def _is_negative(value: str) -> bool:
    return NEGATIVE_VALUE_PATTERN.match(value) is not None


def parse_method_comment(name: str, lines: List[str]) -> Optional[Method]:
    """Build a method from its comment block.

    Args:
        name: Function name.
        lines: Comment lines preceding the function definition.

    Returns:
        The method, or None if the block is empty or marked private. The
        description may be empty; callers decide whether to keep it.
    """
    if not lines or is_private(lines):
        return None

    method = Method(name=name)
    desc: Optional[List[str]] = None

    for index, line in enumerate(lines):
        argument = parse_argument_comment(line)

        if argument is None and not line.startswith(
            (CODE_DIRECTIVE, ECHO_DIRECTIVE, EXAMPLE_DIRECTIVE)
        ):
            continue

        if desc is None:
            desc = clean_lines(lines[:index])

        if argument is not None:
            method.arguments.append(argument)

        elif line.startswith(CODE_DIRECTIVE):
            if not _is_negative(_directive_value(line, CODE_DIRECTIVE)):
                method.result_code = True

        elif line.startswith(ECHO_DIRECTIVE):
            value = _directive_value(line, ECHO_DIRECTIVE)
            if not _is_negative(value):
                method.result_echo = parse_variable_comment("", "", [value])

        else:
            method.example = clean_lines(lines[index + 1:]) or None
            break

    method.desc = desc if desc is not None else clean_lines(lines)
    return method
