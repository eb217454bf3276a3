"""Generator configuration.

Settings are resolved from keyword arguments first and `AIP_NAMES_*`
environment variables second. The protoc plugin passes its options as a
single comma-separated parameter string, parsed by
`GeneratorSettings.from_parameter`.
"""

from typing import TYPE_CHECKING

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict

from aip_names.errors import OptionsError
from aip_names.models import SettingsModel

if TYPE_CHECKING:
    from typing import Self

#: Separator between options in a protoc parameter string.
OPTIONS_SEPARATOR = ','


class GeneratorSettings(SettingsModel):
    """Settings shared by the command line and the protoc plugin."""

    model_config = SettingsConfigDict(
        env_prefix='AIP_NAMES_',
        frozen=True,
        extra='ignore',
    )

    file_suffix: str = Field(
        default='_resources.py',
        min_length=1,
        title='Output file suffix',
        description=(
            'Suffix replacing `.proto` in the names of files '
            'produced by the protoc plugin.'
        ),
    )

    runtime_module: str = Field(
        default='aip_names.runtime',
        pattern=r'^[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*$',
        title='Runtime module',
        description='Module that generated code imports its base types from.',
    )

    strict: bool = Field(
        default=False,
        title='Strict mode',
        description=(
            'Fail on any resource that cannot be generated and on name '
            'collisions instead of warning and continuing.'
        ),
    )

    @classmethod
    def from_parameter(cls, parameter: str | None) -> 'Self':
        """Build settings from a protoc parameter string.

        The string holds comma-separated `key=value` items; a bare key
        sets a boolean option to true. Empty items are ignored.

        Args:
            parameter: Raw parameter, e.g. `file_suffix=_rn.py,strict`.

        Returns:
            Resolved settings.

        Raises:
            OptionsError: If an option is unknown or has an invalid value.
        """
        options: dict[str, str] = {}

        for item in (parameter or '').split(OPTIONS_SEPARATOR):
            key, separator, value = item.strip().partition('=')
            if not key:
                if separator:
                    raise OptionsError(f'Invalid option format: {item!r}')
                continue

            if key not in cls.model_fields:
                raise OptionsError(f'Unknown option: {key!r}')

            if not separator:
                if cls.model_fields[key].annotation is not bool:
                    raise OptionsError(f'Option {key!r} requires a value')
                value = 'true'

            options[key] = value

        try:
            return cls(**options)
        except ValidationError as base:
            raise OptionsError(f'Invalid options: {parameter!r}') from base
