"""JSON Schema management."""

from functools import cache
from json import dumps
from typing import TYPE_CHECKING

from pydantic.json_schema import GenerateJsonSchema, JsonSchemaValue

from aip_names.schema import ResourceDescriptor
from aip_names.schema.descriptors import HISTORY_ALIASES

if TYPE_CHECKING:
    from pydantic_core import core_schema as core


class SchemaGenerator(GenerateJsonSchema):
    """Custom JSON Schema generator for descriptor documents.

    Descriptor files are written by hand, so the history field accepts
    the aliases understood by the loader in addition to the enum names.
    """

    @classmethod
    @cache
    def make_schema(cls, indent: int | str | None = 4) -> str:
        """Generate the JSON Schema of one descriptor document.

        Args:
            indent: Indentation level used for JSON formatting.

        Returns:
            Serialized JSON Schema string.
        """
        schema = {
            **ResourceDescriptor.model_json_schema(
                schema_generator=cls,
                union_format='primitive_type_array',
            ),
            'title': 'aip-names',
            'description': 'JSON Schema for aip-names resource descriptor documents',
            '$schema': cls.schema_dialect,
        }

        return dumps(
            schema,
            ensure_ascii=False,
            sort_keys=True,
            indent=indent,
        )

    def enum_schema(self, schema: 'core.EnumSchema') -> JsonSchemaValue:
        """Generate JSON Schema for enums, including the history aliases.

        Args:
            schema: Pydantic core schema describing an enum.

        Returns:
            The enum schema, extended with the alias values.
        """
        json_schema = super().enum_schema(schema)

        if values := json_schema.get('enum'):
            json_schema['enum'] = [
                *values,
                *(alias for alias, value in HISTORY_ALIASES.items() if value in values),
            ]

        return json_schema
