"""Tests for the source writer."""

import pytest

from aip_names.core.writer import SourceWriter, escape_docstring


def test_writer_blocks() -> None:
    """Indent block bodies and keep blank lines unindented."""
    writer = SourceWriter()

    with writer.block('class A:'):
        writer.line('x: int')
        writer.blank()
        with writer.block('def f(self) -> int:'):
            writer.line('return 1')
    writer.blank(2)

    assert writer.getvalue() == (
        'class A:\n'
        '    x: int\n'
        '\n'
        '    def f(self) -> int:\n'
        '        return 1\n'
    )


def test_writer_docstrings() -> None:
    """Write one-line and multi-line docstrings."""
    writer = SourceWriter()

    writer.docstring('Summary.')
    with writer.block('def f():'):
        writer.docstring('Summary.', '', 'Details.')

    assert writer.getvalue() == (
        '"""Summary."""\n'
        'def f():\n'
        '    """Summary.\n'
        '\n'
        '    Details.\n'
        '    """\n'
    )


def test_empty_writer() -> None:
    """Return an empty string without lines."""
    assert SourceWriter().getvalue() == ''


@pytest.mark.parametrize('text, expected', (
    pytest.param('plain', 'plain', id='plain'),
    pytest.param('a\\b', 'a\\\\b', id='backslash'),
    pytest.param('a"""b', 'a\\"\\"\\"b', id='triple quote'),
    pytest.param('ends with "', 'ends with \\"', id='trailing quote'),
))
def test_escape_docstring(text: str, expected: str) -> None:
    """Escape text breaking triple-quoted strings."""
    assert escape_docstring(text) == expected
