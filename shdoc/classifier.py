"""
Classification of non-comment lines into documentable declarations.
"""

from dataclasses import dataclass
from enum import Enum

from shdoc.config import METHOD_PATTERN, ASSIGNMENT_PATTERN, CONSTANT_NAME_PATTERN


class EntityKind(Enum):
    """Kind of declaration found on a code line."""

    UNKNOWN = "unknown"
    METHOD = "method"
    VARIABLE = "variable"
    CONSTANT = "constant"


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one code line.

    Attributes:
        kind: Declaration kind
        name: Captured function or variable name (empty for UNKNOWN)
        value: Raw assigned value (empty for methods and UNKNOWN)
    """

    kind: EntityKind
    name: str = ""
    value: str = ""

    @property
    def is_assignment(self) -> bool:
        return self.kind in (EntityKind.VARIABLE, EntityKind.CONSTANT)


UNRECOGNIZED = ClassifiedLine(EntityKind.UNKNOWN)


def classify_line(line: str) -> ClassifiedLine:
    """Classify a left-stripped code line.

    Function definitions take precedence over assignments. Assignment names
    made only of uppercase letters, digits and underscores are constants.

    Args:
        line: Code line with leading spaces removed.

    Returns:
        The classified declaration, or ``UNRECOGNIZED``.

    Example:
        >>> classify_line("MAX_RETRIES=3")
        ClassifiedLine(kind=<EntityKind.CONSTANT: 'constant'>, name='MAX_RETRIES', value='3')
    """
    match = METHOD_PATTERN.match(line)
    if match:
        return ClassifiedLine(EntityKind.METHOD, match.group(1))

    match = ASSIGNMENT_PATTERN.match(line)
    if match:
        name, value = match.group(1), match.group(2)
        if CONSTANT_NAME_PATTERN.match(name):
            return ClassifiedLine(EntityKind.CONSTANT, name, value)
        return ClassifiedLine(EntityKind.VARIABLE, name, value)

    return UNRECOGNIZED
