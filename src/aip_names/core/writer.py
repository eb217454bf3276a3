"""Indentation-aware source text buffer."""

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

INDENT = '    '
NEWLINE = '\n'


class SourceWriter:
    """Line buffer used by the emitters.

    Lines are collected in order and joined with `\\n`; blank lines never
    carry indentation, so output is byte-identical across platforms.
    """

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent
        self.level = 0
        self.lines: list[str] = []

    def line(self, *parts: str) -> None:
        """Append one line at the current indentation level."""
        text = ''.join(parts)
        if not text:
            self.lines.append('')
            return

        self.lines.append(f'{self.indent * self.level}{text}')

    def blank(self, count: int = 1) -> None:
        """Append blank lines."""
        self.lines.extend('' for _ in range(count))

    def docstring(self, *lines: str) -> None:
        """Append a docstring, one-line or multi-line."""
        if len(lines) == 1:
            self.line('"""', escape_docstring(lines[0]), '"""')
            return

        head, *body = lines
        self.line('"""', escape_docstring(head))
        for item in body:
            self.line(escape_docstring(item))
        self.line('"""')

    @contextmanager
    def block(self, *header: str) -> 'Iterator[None]':
        """Write a header line and indent everything written inside."""
        self.line(*header)
        self.level += 1
        try:
            yield
        finally:
            self.level -= 1

    def getvalue(self) -> str:
        """Return the collected text with a single trailing newline."""
        while self.lines and not self.lines[-1]:
            self.lines.pop()

        if not self.lines:
            return ''

        return NEWLINE.join(self.lines) + NEWLINE


def escape_docstring(text: str) -> str:
    """Escape text for use inside a triple-quoted docstring."""
    text = text.replace('\\', '\\\\').replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text = f'{text[:-1]}\\"'

    return text
