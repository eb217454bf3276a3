"""Runtime support for generated resource-name modules.

Generated code imports its base model and error types from here. The
module also exposes small helpers to format, scan, match and sanity-check
resource names against a pattern without generating any code.

Errors raised here are recoverable: every failure is a `ResourceNameError`
(a `ValueError`), and the same input always raises the same error.
"""

from typing import TYPE_CHECKING

from pydantic import ConfigDict

from aip_names.models import SchemaModel
from aip_names.patterns import SEPARATOR, parse_pattern

if TYPE_CHECKING:
    from typing import Self

__all__ = (
    'WILDCARD',
    'ArityMismatch',
    'FieldEmpty',
    'IllegalCharacter',
    'LiteralMismatch',
    'NoMatchingPattern',
    'ResourceNameError',
    'ResourceNameModel',
    'match',
    'sprint',
    'sscan',
    'validate_name',
)

#: Reserved value meaning "any" in place of a variable segment.
WILDCARD = '-'


class ResourceNameError(ValueError):
    """Base error for invalid resource names."""


class FieldEmpty(ResourceNameError):
    """A resource name field is the empty string."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'{field}: empty')


class IllegalCharacter(ResourceNameError):
    """A resource name field contains a forbidden character."""

    def __init__(self, field: str, character: str = SEPARATOR) -> None:
        self.field = field
        self.character = character
        super().__init__(f"{field}: contains illegal character '{character}'")


class ArityMismatch(ResourceNameError):
    """A resource name has the wrong number of segments for its pattern."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'expected {expected} parts, got {actual}')


class LiteralMismatch(ResourceNameError):
    """A literal segment of a resource name differs from its pattern."""

    def __init__(self, literal: str, position: int, part: str) -> None:
        self.literal = literal
        self.position = position
        self.part = part
        super().__init__(f"expected '{literal}' at position {position}, got '{part}'")


class NoMatchingPattern(ResourceNameError):
    """A resource name matches none of the patterns of a resource."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__('no matching pattern')


class ResourceNameModel(SchemaModel):
    """Base model for generated resource names.

    Concrete subclasses are generated per pattern (one field per variable
    segment) or per multi-pattern resource (a closed union over the
    per-pattern types). Construction never validates field contents;
    `parse` always does.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        protected_namespaces=(),
    )

    @classmethod
    def resource_type(cls) -> str:
        """Return the resource type, e.g. `library.googleapis.com/Book`."""
        raise NotImplementedError

    def validate(self) -> None:  # type: ignore[override]
        """Check every field for emptiness and illegal characters.

        Raises:
            FieldEmpty: If a field is the empty string.
            IllegalCharacter: If a field contains a `/`.
        """
        raise NotImplementedError

    def contains_wildcard(self) -> bool:
        """Return true if any field equals the wildcard `-`."""
        raise NotImplementedError

    @classmethod
    def parse(cls, name: str) -> 'Self':
        """Parse and validate a resource name string.

        Raises:
            ResourceNameError: If the name does not match or is invalid.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Format the resource name."""
        raise NotImplementedError


def sprint(pattern: str, *values: str) -> str:
    """Format variable values into a pattern.

    Variables are substituted in order; missing values are rendered as
    empty segments, extra values are ignored.

    Args:
        pattern: Resource name pattern.
        values: Values of the variable segments in pattern order.

    Returns:
        The formatted resource name.
    """
    remaining = iter(values)

    return SEPARATOR.join(
        next(remaining, '') if segment.variable else segment.literal
        for segment in parse_pattern(pattern).segments
    )


def sscan(name: str, pattern: str) -> tuple[str, ...]:
    """Extract variable values from a resource name.

    Args:
        name: Resource name, e.g. `publishers/p1/books/b1`.
        pattern: Pattern the name is expected to follow.

    Returns:
        Values of the variable segments in pattern order.

    Raises:
        ArityMismatch: If the segment counts differ.
        LiteralMismatch: If a literal segment differs.
    """
    segments = parse_pattern(pattern).segments
    parts = name.split(SEPARATOR)
    if len(parts) != len(segments):
        raise ArityMismatch(len(segments), len(parts))

    values = []
    for position, (segment, part) in enumerate(zip(segments, parts, strict=True)):
        if segment.variable:
            values.append(part)
        elif part != segment.literal:
            raise LiteralMismatch(segment.literal, position, part)

    return tuple(values)


def match(pattern: str, name: str) -> bool:
    """Test whether a resource name matches a pattern."""
    try:
        sscan(name, pattern)
    except ResourceNameError:
        return False

    return True


def validate_name(name: str) -> None:
    """Check the general shape of a resource name.

    Args:
        name: Resource name to check.

    Raises:
        ResourceNameError: If the name is empty, has an empty segment,
            or starts or ends with `/`.
    """
    if not name:
        raise ResourceNameError('resource name cannot be empty')

    if SEPARATOR * 2 in name:
        raise ResourceNameError('resource name cannot contain empty segments')

    if name.startswith(SEPARATOR) or name.endswith(SEPARATOR):
        raise ResourceNameError(f"resource name cannot start or end with '{SEPARATOR}'")
