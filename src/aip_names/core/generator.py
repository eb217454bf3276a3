"""Per-resource generation.

`ResourceGenerator` turns one descriptor into one block of Python source:

1. a descriptor without patterns yields nothing;
2. a resource with several patterns, or flagged as future multi-pattern,
   yields its dispatch union and parse entry point, then one type per
   pattern in descriptor order, then the rebuild of the union;
3. any other resource yields exactly one type for its only pattern.

All names and types are planned before any text is written, so a
resource that cannot be generated produces no output at all.
"""

from logging import getLogger
from typing import TYPE_CHECKING

from .dispatch import DispatchGenerator
from .naming import NameResolver
from .shapes import TypeShapeGenerator
from .writer import SourceWriter

if TYPE_CHECKING:
    from aip_names.schema import ResourceDescriptor

    from .specs import DispatchSpec, TypeSpec

logger = getLogger(__name__)

#: Blank lines between top-level definitions.
TOP_LEVEL_SPACING = 2


class ResourceGenerator:
    """Code generator for a single resource descriptor.

    The generator holds no state beyond its descriptor; distinct
    instances can run concurrently.

    Attributes:
        descriptor: Resource to generate code for.
        resolver: Name resolver bound to the descriptor.
    """

    def __init__(self, descriptor: 'ResourceDescriptor', *, strict: bool = False) -> None:
        self.descriptor = descriptor
        self.resolver = NameResolver(descriptor, strict=strict)

    @property
    def needs_dispatch(self) -> bool:
        """True if the resource is generated as a dispatch union."""
        return self.descriptor.is_multi_pattern

    def shapes(self) -> 'tuple[tuple[TypeSpec, ...], DispatchSpec | None]':
        """Plan the generated types without rendering them.

        Returns:
            The single-pattern types in emission order, and the dispatch
            union over them if the resource needs one.

        Raises:
            PatternError: If a pattern cannot be turned into a type.
            NamingError: If the derived names are invalid or collide.
        """
        patterns = self.descriptor.pattern
        if not patterns:
            return (), None

        if not self.needs_dispatch:
            single = TypeShapeGenerator.build(
                patterns[0],
                self.resolver.single_type_name,
                self.descriptor.type,
            )
            return (single,), None

        types = tuple(
            TypeShapeGenerator.build(
                pattern,
                self.resolver.multi_type_name(index),
                self.descriptor.type,
            )
            for index, pattern in enumerate(patterns)
        )

        return types, DispatchGenerator.build(self.resolver, types)

    def generate(self) -> str:
        """Render the source block of the resource.

        Returns:
            Python source with a single trailing newline, or an empty
            string if the resource has no patterns.

        Raises:
            PatternError: If a pattern cannot be turned into a type.
            NamingError: If the derived names are invalid or collide.
        """
        types, dispatch = self.shapes()
        if not types:
            logger.debug('resource %s has no patterns, skipped', self.descriptor.type)
            return ''

        writer = SourceWriter()

        if dispatch is not None:
            logger.debug(
                'resource %s: dispatch %s over %d variants',
                self.descriptor.type, dispatch.union_name, len(dispatch.variants),
            )
            DispatchGenerator.emit(writer, dispatch)
            writer.blank(TOP_LEVEL_SPACING)
            DispatchGenerator.emit_parse_function(writer, dispatch)
        else:
            logger.debug(
                'resource %s: single type %s',
                self.descriptor.type, types[0].type_name,
            )

        for position, spec in enumerate(types):
            if dispatch is not None or position > 0:
                writer.blank(TOP_LEVEL_SPACING)
            TypeShapeGenerator.emit(writer, spec)

        if dispatch is not None:
            writer.blank(TOP_LEVEL_SPACING)
            writer.line(f'{dispatch.union_name}.model_rebuild()')

        return writer.getvalue()
