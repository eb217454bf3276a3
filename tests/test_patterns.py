"""Tests for pattern parsing."""

import pytest

from aip_names.errors import PatternError
from aip_names.patterns import Segment, parse_pattern, parse_segment


@pytest.mark.parametrize('token, expected', (
    pytest.param('books', Segment(literal='books'), id='literal'),
    pytest.param('{book}', Segment(literal='book', variable=True), id='variable'),
    pytest.param('', Segment(literal=''), id='empty'),
    pytest.param('{', Segment(literal='{'), id='single brace'),
    pytest.param('{book', Segment(literal='{book'), id='unclosed'),
    pytest.param('book}', Segment(literal='book}'), id='unopened'),
    pytest.param('{}', Segment(literal='', variable=True), id='empty variable'),
))
def test_parse_segment(token: str, expected: Segment) -> None:
    """Parse single tokens."""
    assert parse_segment(token) == expected


def test_parse_pattern() -> None:
    """Split a pattern into ordered segments."""
    pattern = parse_pattern('publishers/{publisher}/books/{book}')

    assert pattern.segments == (
        Segment(literal='publishers'),
        Segment(literal='publisher', variable=True),
        Segment(literal='books'),
        Segment(literal='book', variable=True),
    )
    assert pattern.variables == ('publisher', 'book')
    assert pattern.literals == ('publishers', 'books')
    assert len(pattern) == 4


@pytest.mark.parametrize('source', (
    'publishers/{publisher}/books/{book}',
    '{parent}/books/{book}',
    'config',
    '',
    '/leading',
    'trailing/',
    'double//slash',
    ' spaced /{ var }',
))
def test_pattern_round_trip(source: str) -> None:
    """Render parsed patterns back verbatim."""
    pattern = parse_pattern(source)

    assert str(pattern) == source
    assert pattern.source == source


def test_empty_pattern() -> None:
    """Parse the empty string as one empty literal."""
    assert parse_pattern('').segments == (Segment(literal=''),)


def test_segments_are_not_trimmed() -> None:
    """Keep whitespace inside tokens."""
    pattern = parse_pattern(' spaced /{ var }')

    assert pattern.segments == (
        Segment(literal=' spaced '),
        Segment(literal=' var ', variable=True),
    )


@pytest.mark.parametrize('value', (None, 42, b'books/{book}'))
def test_parse_invalid_pattern(value: object) -> None:
    """Reject non-string patterns."""
    with pytest.raises(PatternError, match=r'^Pattern must be a string'):
        parse_pattern(value)  # type: ignore[arg-type]
