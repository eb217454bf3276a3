"""Resource descriptor models.

A resource descriptor mirrors the `google.api.resource` annotation: a
resource type, an ordered list of name patterns, the plural and singular
forms and a history mode. Descriptors are consumed once per generation
and never mutated.
"""

from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from aip_names.models import SchemaModel
from aip_names.names import ResourceType  # noqa: TC001

#: History names accepted without the `HISTORY_` prefix.
HISTORY_ALIASES = {
    'UNSPECIFIED': 'HISTORY_UNSPECIFIED',
}


class History(StrEnum):
    """Pattern history of a resource.

    Values and their order match the `google.api.ResourceDescriptor.History`
    protobuf enum.
    """

    UNSPECIFIED = 'HISTORY_UNSPECIFIED'
    ORIGINALLY_SINGLE_PATTERN = 'ORIGINALLY_SINGLE_PATTERN'
    FUTURE_MULTI_PATTERN = 'FUTURE_MULTI_PATTERN'

    @classmethod
    def from_value(cls, value: Any) -> 'History':  # noqa: ANN401
        """Resolve a history from its name, alias or protobuf number.

        Args:
            value: `History` member, enum name, or integer enum number.

        Returns:
            The matching history member.

        Raises:
            ValueError: If the value does not name a history.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            members = tuple(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f'Unknown history number {value}')

        if isinstance(value, str):
            name = value.strip().upper()
            return cls(HISTORY_ALIASES.get(name, name))

        raise ValueError(f'Unknown history {value!r}')


class ResourceDescriptor(SchemaModel):
    """Declarative description of one resource.

    Pattern order is significant: it is preserved in the generated
    code and defines the parse priority of multi-pattern resources.
    """

    type: ResourceType

    pattern: tuple[str, ...] = Field(
        default=(),
        title='Resource name patterns',
        description=(
            'Ordered resource name patterns, for example '
            '`publishers/{publisher}/books/{book}`. A single string is '
            'accepted as a one-pattern list.'
        ),
        examples=[
            ['shelves/{shelf}/books/{book}', 'publishers/{publisher}/books/{book}'],
        ],
    )

    plural: str = Field(
        default='',
        title='Plural form',
        description=(
            'Collection identifier of the resource, e.g. `books`. Literal '
            'segments equal to it are left out of per-pattern type names.'
        ),
    )

    singular: str = Field(
        default='',
        title='Singular form',
        description='Singular form of the resource, e.g. `book`.',
    )

    history: History = Field(
        default=History.UNSPECIFIED,
        title='Pattern history',
        description=(
            'Whether the resource always had one pattern, or will gain '
            'more. `FUTURE_MULTI_PATTERN` forces the multi-pattern shape '
            'even for a single pattern.'
        ),
    )

    @field_validator('pattern', mode='before')
    @classmethod
    def ensure_patterns(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept a single pattern string as a one-item list."""
        if isinstance(value, str):
            return (value,)

        return value

    @field_validator('history', mode='before')
    @classmethod
    def ensure_history(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept history aliases and protobuf enum numbers."""
        if value is None:
            return History.UNSPECIFIED

        return History.from_value(value)

    @property
    def resource_kind(self) -> str:
        """Kind part of the resource type, `Resource` if absent."""
        parts = self.type.split('/')
        if len(parts) >= 2:  # noqa: PLR2004
            return parts[1]

        return 'Resource'

    @property
    def is_multi_pattern(self) -> bool:
        """Whether the resource has, or will have, several patterns."""
        return len(self.pattern) > 1 or self.history is History.FUTURE_MULTI_PATTERN
