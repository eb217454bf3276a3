"""Identifier primitives and case conversion rules.

This module defines the case conversions used to turn pattern segments
and resource kinds into Python identifiers, together with the patterns
that generated identifiers must satisfy.

The conversions are part of the public naming contract: changing them
changes the names of every generated type.
"""

from keyword import iskeyword
from re import ASCII
from re import compile as regexp
from typing import Annotated

from pydantic import Field

from aip_names.errors import PatternError

#: Compiled pattern for generated class names.
CLASS_NAME_PATTERN = regexp(r'^[A-Za-z_][A-Za-z0-9_]*$', flags=ASCII)

#: Compiled pattern for generated field and function names.
FIELD_NAME_PATTERN = regexp(r'^[a-z][a-z0-9_]*$', flags=ASCII)

#: Names already used by the generated models, or by pydantic on them.
RESERVED_NAMES = frozenset((
    'construct',
    'contains_wildcard',
    'copy',
    'dict',
    'from_orm',
    'json',
    'parse',
    'parse_file',
    'parse_obj',
    'parse_raw',
    'resource_type',
    'schema',
    'schema_json',
    'self',
    'super',
    'update_forward_refs',
    'validate',
    'value',
    'variant',
))

#: Prefix of the attributes pydantic defines on every model.
MODEL_PREFIX = 'model_'

#: Separators dropped by `pascal_case`.
PASCAL_SEPARATORS = ('_', '-')


ResourceType = Annotated[
    str, Field(
        min_length=1,
        title='Resource type',
        description=(
            'Globally unique resource type in the form '
            '`<service>/<Kind>`, for example `library.googleapis.com/Book`. '
            'The `<Kind>` part names the generated types.'
        ),
        examples=[
            'library.googleapis.com/Book',
            'pubsub.googleapis.com/Topic',
        ],
    ),
]


def pascal_case(value: str) -> str:
    """Convert a snake or kebab case word to PascalCase.

    The first character and every character following `_` or `-` is
    uppercased; the separators are dropped; everything else is kept.

    Args:
        value: Word to convert, for example `user_events`.

    Returns:
        The PascalCase word, for example `UserEvents`.
    """
    result = []
    capitalize = True

    for char in value:
        if char in PASCAL_SEPARATORS:
            capitalize = True
        elif capitalize:
            result.append(char.upper() if 'a' <= char <= 'z' else char)
            capitalize = False
        else:
            result.append(char)

    return ''.join(result)


def snake_case(value: str) -> str:
    """Convert a camel or PascalCase word to snake_case.

    An underscore is inserted before every ASCII uppercase letter that is
    not the first character, then ASCII uppercase letters are lowered.

    Args:
        value: Word to convert, for example `BookShelf`.

    Returns:
        The snake_case word, for example `book_shelf`.
    """
    result = []

    for position, char in enumerate(value):
        if 'A' <= char <= 'Z':
            if position > 0:
                result.append('_')
            result.append(char.lower())
        else:
            result.append(char)

    return ''.join(result)


def field_name(variable: str) -> str:
    """Derive a Python field name from a variable segment.

    Args:
        variable: Variable name as written between braces in a pattern.

    Returns:
        A snake_case identifier, suffixed with `_` when it would clash with
        a keyword or a generated member.

    Raises:
        PatternError: If the variable cannot form a valid identifier.
    """
    name = snake_case(variable)
    if not FIELD_NAME_PATTERN.match(name):
        raise PatternError(f'Variable {variable!r} is not a valid field name')

    if iskeyword(name) or name in RESERVED_NAMES or name.startswith(MODEL_PREFIX):
        name += '_'

    return name
