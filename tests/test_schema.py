"""Tests for the descriptor JSON Schema."""

from json import loads

from aip_names.jsonschema import SchemaGenerator


def test_make_schema() -> None:
    """Describe descriptor documents."""
    schema = loads(SchemaGenerator.make_schema())

    assert schema['$schema'] == SchemaGenerator.schema_dialect
    assert schema['additionalProperties'] is False
    assert schema['properties']['type']['minLength'] == 1


def test_history_aliases() -> None:
    """Accept history aliases in the schema."""
    schema = loads(SchemaGenerator.make_schema())

    assert schema['$defs']['History']['enum'] == [
        'HISTORY_UNSPECIFIED',
        'ORIGINALLY_SINGLE_PATTERN',
        'FUTURE_MULTI_PATTERN',
        'UNSPECIFIED',
    ]
