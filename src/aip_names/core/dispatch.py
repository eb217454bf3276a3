"""Multi-pattern resource name dispatch emission.

A resource with several patterns, or one flagged as future multi-pattern,
gets a closed tagged union over its per-pattern types. The set of
variants is fixed at generation time: the emitted model only accepts the
declared `(variant, type)` pairs, and parsing tries the variants strictly
in descriptor order, returning the first match.
"""

from typing import TYPE_CHECKING

from .shapes import BASE_CLASS
from .specs import DispatchSpec, TypeSpec, VariantSpec

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .naming import NameResolver
    from .writer import SourceWriter


class DispatchGenerator:
    """Builder and emitter of dispatch unions."""

    @classmethod
    def build(cls, resolver: 'NameResolver', types: 'Sequence[TypeSpec]') -> DispatchSpec:
        """Plan the union over the per-pattern types of a resource.

        Args:
            resolver: Name resolver of the resource.
            types: Per-pattern types in descriptor pattern order.

        Returns:
            The planned dispatch union.

        Raises:
            NamingError: If the variant names cannot be made unique.
        """
        return DispatchSpec(
            union_name=resolver.dispatch_name,
            resource_type=resolver.descriptor.type,
            parse_function=resolver.parse_function_name,
            variants=tuple(
                VariantSpec(name=resolver.variant_name(index), spec=spec)
                for index, spec in enumerate(types)
            ),
        )

    @classmethod
    def emit(cls, writer: 'SourceWriter', spec: DispatchSpec) -> None:
        """Emit the union class."""
        variants = ', '.join(repr(variant.name) for variant in spec.variants)
        values = ' | '.join(variant.spec.type_name for variant in spec.variants)

        with writer.block(f'class {spec.union_name}({BASE_CLASS}):'):
            writer.docstring(
                f'Resource name for `{spec.resource_type}`.',
                '',
                'One of:',
                *(
                    f'    {variant.name}: `{variant.spec.pattern.source}`'
                    for variant in spec.variants
                ),
            )
            writer.blank()
            writer.line(f'variant: Literal[{variants}]')
            writer.line(f'value: {values}')

            writer.blank()
            with writer.block(f'def __init__(self, variant: str, value: {values}) -> None:'):
                writer.docstring(f'Wrap a resource name in its {spec.union_name} variant.')
                writer.line('super().__init__(variant=variant, value=value)')

            cls.emit_check_variant(writer, spec)

            writer.blank()
            writer.line('@classmethod')
            with writer.block('def resource_type(cls) -> str:'):
                writer.docstring('Return the resource type.')
                writer.line(f'return {spec.resource_type!r}')

            writer.blank()
            with writer.block('def validate(self) -> None:'):
                writer.docstring('Validate the active variant.')
                writer.line('self.value.validate()')

            writer.blank()
            with writer.block('def contains_wildcard(self) -> bool:'):
                writer.docstring('Return true if the active variant contains the wildcard.')
                writer.line('return self.value.contains_wildcard()')

            writer.blank()
            with writer.block('def __str__(self) -> str:'):
                writer.docstring('Format the active variant.')
                writer.line('return str(self.value)')

            cls.emit_parse(writer, spec)

    @staticmethod
    def emit_check_variant(writer: 'SourceWriter', spec: DispatchSpec) -> None:
        """Emit the validator rejecting undeclared `(variant, value)` pairs."""
        writer.blank()
        writer.line("@model_validator(mode='after')")
        with writer.block(f'def check_variant(self) -> {spec.union_name}:'):
            with writer.block('match (self.variant, self.value):'):
                for variant in spec.variants:
                    with writer.block(f'case ({variant.name!r}, {variant.spec.type_name}()):'):
                        writer.line('return self')
            writer.line(
                "raise ValueError(f'variant {self.variant!r} cannot hold "
                "{type(self.value).__name__}')",
            )

    @staticmethod
    def emit_parse(writer: 'SourceWriter', spec: DispatchSpec) -> None:
        """Emit the ordered first-match `parse()`."""
        writer.blank()
        writer.line('@classmethod')
        with writer.block(f'def parse(cls, name: str) -> {spec.union_name}:'):
            writer.docstring(
                'Parse a resource name, trying the patterns in declaration order.',
                '',
                'Raises:',
                '    NoMatchingPattern: If no pattern matches.',
            )
            for variant in spec.variants:
                with writer.block('with suppress(ResourceNameError):'):
                    writer.line(
                        f'return cls({variant.name!r}, {variant.spec.type_name}.parse(name))',
                    )
            writer.line('raise NoMatchingPattern(name)')

    @staticmethod
    def emit_parse_function(writer: 'SourceWriter', spec: DispatchSpec) -> None:
        """Emit the module-level parse entry point."""
        with writer.block(f'def {spec.parse_function}(name: str) -> {spec.union_name}:'):
            writer.docstring(f'Parse a `{spec.resource_type}` resource name.')
            writer.line(f'return {spec.union_name}.parse(name)')
