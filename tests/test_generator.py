"""Tests for per-resource generation."""

from typing import TYPE_CHECKING

import pytest

from aip_names.core import ResourceGenerator
from aip_names.errors import NamingError, PatternError
from aip_names.schema import History

if TYPE_CHECKING:
    from collections.abc import Callable

    from aip_names.schema import ResourceDescriptor


def test_generate_without_patterns(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Generate nothing for a resource without patterns."""
    generator = ResourceGenerator(make_descriptor())

    assert generator.generate() == ''
    assert generator.shapes() == ((), None)


def test_generate_single(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Generate exactly one type for a single-pattern resource."""
    generator = ResourceGenerator(make_descriptor('publishers/{publisher}/books/{book}'))

    types, dispatch = generator.shapes()
    source = generator.generate()

    assert dispatch is None
    assert [spec.type_name for spec in types] == ['BookResourceName']
    assert source.count('class ') == 1
    assert source.startswith('class BookResourceName(ResourceNameModel):\n')
    assert 'model_rebuild' not in source
    assert source.endswith('return result\n')


@pytest.mark.parametrize('history', (
    History.UNSPECIFIED,
    History.ORIGINALLY_SINGLE_PATTERN,
))
def test_generate_originally_single(make_descriptor: 'Callable[..., ResourceDescriptor]',
                                    history: History) -> None:
    """Keep the single shape unless more patterns are announced."""
    generator = ResourceGenerator(make_descriptor('publishers/{publisher}/books/{book}',
                                                  history=history))

    assert generator.needs_dispatch is False
    assert generator.shapes()[1] is None


def test_generate_multi(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Emit the union, the entry point and the per-pattern types in order."""
    generator = ResourceGenerator(make_descriptor(
        'shelves/{shelf}/books/{book}',
        'publishers/{publisher}/books/{book}',
    ))

    types, dispatch = generator.shapes()
    source = generator.generate()

    assert [spec.type_name for spec in types] == [
        'ShelvesBookResourceName',
        'PublishersBookResourceName',
    ]
    assert dispatch is not None
    assert dispatch.union_name == 'BookResourceName'
    assert dispatch.parse_function == 'parse_book_resource_name'
    assert [variant.name for variant in dispatch.variants] == ['Shelves', 'Publishers']

    positions = [
        source.index(item)
        for item in (
            'class BookResourceName(ResourceNameModel):',
            'def parse_book_resource_name(name: str) -> BookResourceName:',
            'class ShelvesBookResourceName(ResourceNameModel):',
            'class PublishersBookResourceName(ResourceNameModel):',
            'BookResourceName.model_rebuild()',
        )
    ]
    assert positions == sorted(positions)
    assert source.endswith('\n\n\nBookResourceName.model_rebuild()\n')


def test_generate_future_multi(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Emit the union instead of the bare type for a future multi-pattern resource."""
    generator = ResourceGenerator(make_descriptor(
        'authors/{author}',
        type_='library.googleapis.com/Author',
        plural='authors',
        history=History.FUTURE_MULTI_PATTERN,
    ))

    assert generator.needs_dispatch is True

    source = generator.generate()

    assert "    variant: Literal['Authors']" in source.splitlines()
    assert 'class AuthorsAuthorResourceName(ResourceNameModel):' in source
    assert source.count('class ') == 2


def test_dispatch_source(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Emit the ordered first-match parse of the union."""
    source = ResourceGenerator(make_descriptor(
        'shelves/{shelf}/books/{book}',
        'publishers/{publisher}/books/{book}',
    )).generate()

    lines = source.splitlines()

    assert "    variant: Literal['Shelves', 'Publishers']" in lines
    assert '    value: ShelvesBookResourceName | PublishersBookResourceName' in lines
    assert "            case ('Shelves', ShelvesBookResourceName()):" in lines

    first = lines.index(
        "            return cls('Shelves', ShelvesBookResourceName.parse(name))",
    )
    second = lines.index(
        "            return cls('Publishers', PublishersBookResourceName.parse(name))",
    )
    assert first < second
    assert lines[second + 1] == '        raise NoMatchingPattern(name)'


def test_generate_is_deterministic(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Generate byte-identical output for identical descriptors."""
    patterns = ('shelves/{shelf}/books/{book}', 'publishers/{publisher}/books/{book}')

    first = ResourceGenerator(make_descriptor(*patterns)).generate()
    second = ResourceGenerator(make_descriptor(*patterns)).generate()

    assert first == second


def test_generate_invalid_pattern(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Abort generation of a resource with an invalid variable."""
    generator = ResourceGenerator(make_descriptor(
        'shelves/{shelf}/books/{book}',
        'publishers/{9publisher}/books/{book}',
    ))

    with pytest.raises(PatternError, match=r"'9publisher' is not a valid field name$"):
        generator.generate()


def test_generate_strict_collision(make_descriptor: 'Callable[..., ResourceDescriptor]') -> None:
    """Abort generation on colliding names in strict mode."""
    generator = ResourceGenerator(make_descriptor(
        'projects/{project}/books/{book}',
        '{parent}/projects/{project}/books/{book}',
    ), strict=True)

    with pytest.raises(NamingError):
        generator.generate()
