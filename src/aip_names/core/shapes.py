"""Single-pattern resource name type emission.

For one pattern, the emitted class holds one string field per variable
segment and implements the full resource name contract:

- construction with positional values in pattern order, unvalidated;
- `resource_type()`, a constant;
- `validate()`, rejecting empty fields and fields containing `/`;
- `contains_wildcard()`, true if any field equals `-`;
- `__str__`, formatting the fields into the pattern;
- `parse()`, the inverse of `__str__`, which always validates.
"""

from typing import TYPE_CHECKING

from aip_names.errors import PatternError
from aip_names.names import field_name
from aip_names.patterns import parse_pattern

from .specs import FieldSpec, TypeSpec

if TYPE_CHECKING:
    from .writer import SourceWriter

#: Base class of generated types, as imported by the generated module.
BASE_CLASS = 'ResourceNameModel'


class TypeShapeGenerator:
    """Builder and emitter of single-pattern types."""

    @classmethod
    def build(cls, pattern: str, type_name: str, resource_type: str) -> TypeSpec:
        """Plan the type backing one pattern.

        Args:
            pattern: Pattern string.
            type_name: Name of the generated class.
            resource_type: Resource type returned by `resource_type()`.

        Returns:
            The planned resource name type.

        Raises:
            PatternError: If a variable cannot become a field, or two
                variables map to the same field.
        """
        parsed = parse_pattern(pattern)

        fields: list[FieldSpec] = []
        for segment in parsed.segments:
            if not segment.variable:
                continue
            name = field_name(segment.literal)
            if any(field.name == name for field in fields):
                raise PatternError(f'Pattern {pattern!r} declares the field {name!r} twice')
            fields.append(FieldSpec(name=name, segment=segment))

        return TypeSpec(
            type_name=type_name,
            resource_type=resource_type,
            pattern=parsed,
            fields=tuple(fields),
        )

    @classmethod
    def emit(cls, writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit the class for a planned type."""
        with writer.block(f'class {spec.type_name}({BASE_CLASS}):'):
            writer.docstring(
                f'Resource name for `{spec.resource_type}`.',
                '',
                f'Pattern: `{spec.pattern.source}`',
            )
            if spec.fields:
                writer.blank()
            for field in spec.fields:
                writer.line(f'{field.name}: str')

            cls.emit_constructor(writer, spec)
            cls.emit_resource_type(writer, spec.resource_type)
            cls.emit_validate(writer, spec)
            cls.emit_contains_wildcard(writer, spec)
            cls.emit_format(writer, spec)
            cls.emit_parse(writer, spec)

    @staticmethod
    def emit_constructor(writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit `__init__` taking the field values positionally."""
        params = ''.join(f', {field.name}: str' for field in spec.fields)
        values = ', '.join(f'{field.name}={field.name}' for field in spec.fields)

        writer.blank()
        with writer.block(f'def __init__(self{params}) -> None:'):
            writer.docstring(f'Create a {spec.type_name} without validating it.')
            writer.line(f'super().__init__({values})')

    @staticmethod
    def emit_resource_type(writer: 'SourceWriter', resource_type: str) -> None:
        """Emit the constant `resource_type()` classmethod."""
        writer.blank()
        writer.line('@classmethod')
        with writer.block('def resource_type(cls) -> str:'):
            writer.docstring('Return the resource type.')
            writer.line(f'return {resource_type!r}')

    @staticmethod
    def emit_validate(writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit `validate()` checking every field in pattern order."""
        writer.blank()
        with writer.block('def validate(self) -> None:'):
            writer.docstring(
                'Validate the resource name fields.',
                '',
                'Raises:',
                '    FieldEmpty: If a field is empty.',
                "    IllegalCharacter: If a field contains '/'.",
            )
            for field in spec.fields:
                with writer.block(f'if not self.{field.name}:'):
                    writer.line(f'raise FieldEmpty({field.variable!r})')
                with writer.block(f"if '/' in self.{field.name}:"):
                    writer.line(f'raise IllegalCharacter({field.variable!r})')

    @staticmethod
    def emit_contains_wildcard(writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit `contains_wildcard()`; constant false without fields."""
        conditions = ' or '.join(f'self.{field.name} == WILDCARD' for field in spec.fields)

        writer.blank()
        with writer.block('def contains_wildcard(self) -> bool:'):
            writer.docstring('Return true if any field is the wildcard.')
            writer.line(f'return {conditions or False}')

    @staticmethod
    def emit_format(writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit `__str__` joining the segments in pattern order."""
        parts = ', '.join(
            f'self.{spec.field_for(segment).name}' if segment.variable else repr(segment.literal)
            for segment in spec.pattern.segments
        )
        if len(spec.pattern) == 1:
            parts += ','

        writer.blank()
        with writer.block('def __str__(self) -> str:'):
            writer.docstring('Format the resource name.')
            writer.line(f"return '/'.join(({parts}))")

    @staticmethod
    def emit_parse(writer: 'SourceWriter', spec: TypeSpec) -> None:
        """Emit `parse()`: arity check, literal checks, extraction, validation."""
        values = ', '.join(
            f'parts[{position}]'
            for position, segment in enumerate(spec.pattern.segments)
            if segment.variable
        )

        writer.blank()
        writer.line('@classmethod')
        with writer.block(f'def parse(cls, name: str) -> {spec.type_name}:'):
            writer.docstring(
                f'Parse and validate a `{spec.pattern.source}` resource name.',
                '',
                'Raises:',
                '    ArityMismatch: If the number of segments differs.',
                '    LiteralMismatch: If a literal segment differs.',
                '    ResourceNameError: If the extracted fields are invalid.',
            )
            writer.line("parts = name.split('/')")
            with writer.block(f'if len(parts) != {len(spec.pattern)}:'):
                writer.line(f'raise ArityMismatch({len(spec.pattern)}, len(parts))')
            for position, segment in enumerate(spec.pattern.segments):
                if segment.variable:
                    continue
                with writer.block(f'if parts[{position}] != {segment.literal!r}:'):
                    writer.line(
                        f'raise LiteralMismatch({segment.literal!r}, {position}, parts[{position}])',
                    )
            writer.line(f'result = cls({values})')
            writer.line('result.validate()')
            writer.line('return result')
