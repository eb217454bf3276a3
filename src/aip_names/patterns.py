"""Resource name pattern model and parser.

A pattern such as `publishers/{publisher}/books/{book}` is split on `/`
into an ordered sequence of segments. A token wrapped in braces is a
variable segment, every other token is a literal segment. Segment order
is the wire order used for formatting and parsing resource names.
"""

from pydantic import Field

from aip_names.errors import PatternError
from aip_names.models import SchemaModel

#: Separator between resource name segments.
SEPARATOR = '/'


class Segment(SchemaModel):
    """One slash-delimited token of a pattern."""

    literal: str = Field(
        title='Segment text',
        description=(
            'Raw text of a literal segment, or the unwrapped name '
            'of a variable segment.'
        ),
    )

    variable: bool = Field(
        default=False,
        title='Variable marker',
        description='True if the token was written as `{name}`.',
    )

    def __str__(self) -> str:
        """Render the token as it was written in the pattern."""
        if self.variable:
            return f'{{{self.literal}}}'

        return self.literal


class Pattern(SchemaModel):
    """Parsed resource name pattern.

    Patterns round-trip: `str(parse_pattern(source)) == source`.
    """

    source: str
    segments: tuple[Segment, ...]

    def __str__(self) -> str:
        """Join the segments back into the pattern string."""
        return SEPARATOR.join(str(segment) for segment in self.segments)

    def __len__(self) -> int:
        """Number of segments, i.e. the expected part count of a name."""
        return len(self.segments)

    @property
    def variables(self) -> tuple[str, ...]:
        """Variable names in pattern order."""
        return tuple(
            segment.literal
            for segment in self.segments
            if segment.variable
        )

    @property
    def literals(self) -> tuple[str, ...]:
        """Literal segments in pattern order."""
        return tuple(
            segment.literal
            for segment in self.segments
            if not segment.variable
        )


def parse_segment(token: str) -> Segment:
    """Parse a single token into a segment.

    Args:
        token: Token without separators.

    Returns:
        A variable segment if the token is wrapped in braces, otherwise
        a literal segment holding the token verbatim.
    """
    if token.startswith('{') and token.endswith('}') and len(token) > 1:
        return Segment(literal=token[1:-1], variable=True)

    return Segment(literal=token)


def parse_pattern(pattern: str) -> Pattern:
    """Parse a pattern string into an ordered sequence of segments.

    No trimming or normalization is applied; empty tokens become empty
    literal segments, so the empty string yields one empty literal.

    Args:
        pattern: Pattern string, for example `shelves/{shelf}/books/{book}`.

    Returns:
        The parsed pattern.

    Raises:
        PatternError: If the pattern is not a string.
    """
    if not isinstance(pattern, str):
        raise PatternError(f'Pattern must be a string, got {type(pattern).__name__}')

    return Pattern(
        source=pattern,
        segments=tuple(
            parse_segment(token)
            for token in pattern.split(SEPARATOR)
        ),
    )
