"""Tests for single-pattern type planning and emission."""

import pytest

from aip_names.core.shapes import TypeShapeGenerator
from aip_names.core.writer import SourceWriter
from aip_names.errors import PatternError


def test_build_type() -> None:
    """Plan one field per variable in pattern order."""
    spec = TypeShapeGenerator.build(
        'publishers/{publisher}/books/{bookId}',
        'BookResourceName',
        'library.googleapis.com/Book',
    )

    assert spec.type_name == 'BookResourceName'
    assert spec.resource_type == 'library.googleapis.com/Book'
    assert [field.name for field in spec.fields] == ['publisher', 'book_id']
    assert [field.variable for field in spec.fields] == ['publisher', 'bookId']


def test_build_type_without_fields() -> None:
    """Plan a type for a pattern without variables."""
    spec = TypeShapeGenerator.build('config', 'ConfigResourceName', 'example.com/Config')

    assert spec.fields == ()


@pytest.mark.parametrize('pattern, except_message', (
    pytest.param(
        'books/{book}/pages/{book}',
        r"declares the field 'book' twice$",
        id='repeated variable',
    ),
    pytest.param(
        'books/{bookId}/pages/{book_id}',
        r"declares the field 'book_id' twice$",
        id='same field name',
    ),
    pytest.param(
        'books/{book id}',
        r'is not a valid field name$',
        id='invalid variable',
    ),
))
def test_build_invalid_type(pattern: str, except_message: str) -> None:
    """Reject patterns whose variables cannot become fields."""
    with pytest.raises(PatternError, match=except_message):
        TypeShapeGenerator.build(pattern, 'BookResourceName', 'library.googleapis.com/Book')


def test_emit_type() -> None:
    """Emit the full contract of a single-pattern type."""
    spec = TypeShapeGenerator.build(
        'publishers/{publisher}/books/{book}',
        'BookResourceName',
        'library.googleapis.com/Book',
    )

    writer = SourceWriter()
    TypeShapeGenerator.emit(writer, spec)
    source = writer.getvalue()

    assert source.startswith('class BookResourceName(ResourceNameModel):\n')
    assert source.endswith('        return result\n')

    expected_lines = (
        '    publisher: str',
        '    book: str',
        '    def __init__(self, publisher: str, book: str) -> None:',
        '        super().__init__(publisher=publisher, book=book)',
        "        return 'library.googleapis.com/Book'",
        "            raise FieldEmpty('publisher')",
        "            raise IllegalCharacter('book')",
        '        return self.publisher == WILDCARD or self.book == WILDCARD',
        "        return '/'.join(('publishers', self.publisher, 'books', self.book))",
        '            raise ArityMismatch(4, len(parts))',
        "        if parts[2] != 'books':",
        "            raise LiteralMismatch('books', 2, parts[2])",
        '        result = cls(parts[1], parts[3])',
    )
    lines = source.splitlines()
    for line in expected_lines:
        assert line in lines


def test_emit_type_without_fields() -> None:
    """Emit constant members for a pattern without variables."""
    spec = TypeShapeGenerator.build('config', 'ConfigResourceName', 'example.com/Config')

    writer = SourceWriter()
    TypeShapeGenerator.emit(writer, spec)
    lines = writer.getvalue().splitlines()

    assert '    def __init__(self) -> None:' in lines
    assert '        super().__init__()' in lines
    assert '        return False' in lines
    assert "        return '/'.join(('config',))" in lines
    assert '        result = cls()' in lines


def test_emit_escapes_literals() -> None:
    """Emit literal segments as Python literals."""
    spec = TypeShapeGenerator.build("it's/{id}", 'ItemResourceName', 'example.com/Item')

    writer = SourceWriter()
    TypeShapeGenerator.emit(writer, spec)
    lines = writer.getvalue().splitlines()

    assert '''        if parts[0] != "it's":''' in lines
