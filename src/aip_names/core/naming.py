"""Deterministic type, variant and function naming.

All names derive from a single descriptor and nothing else: the resolver
keeps no state across resources, so concurrent or repeated generation of
the same descriptor always yields the same names.
"""

from collections import Counter
from functools import cached_property
from warnings import warn

from aip_names.errors import NamingError, NamingWarning, PatternError
from aip_names.names import CLASS_NAME_PATTERN, FIELD_NAME_PATTERN, pascal_case, snake_case
from aip_names.patterns import parse_pattern
from aip_names.schema import ResourceDescriptor  # noqa: TC001

#: Suffix of every generated resource name type.
TYPE_NAME_SUFFIX = 'ResourceName'

#: Short name of a pattern starting with a variable and without other literals.
SIMPLE_NAME = 'Simple'

#: Short name of a pattern that could not be parsed.
DEFAULT_NAME = 'Default'


class NameResolver:
    """Name derivation for one resource descriptor.

    Attributes:
        descriptor: Resource the names are derived for.
        strict_mode: If True, colliding short names raise instead of being
            disambiguated with a warning.
    """

    def __init__(self, descriptor: ResourceDescriptor, *, strict: bool = False) -> None:
        self.descriptor = descriptor
        self.strict_mode = strict

    @property
    def resource_kind(self) -> str:
        """Kind part of the resource type, `Resource` if absent."""
        return self.descriptor.resource_kind

    @cached_property
    def single_type_name(self) -> str:
        """Name of the type of a single-pattern resource."""
        return self.ensure_class_name(f'{pascal_case(self.resource_kind)}{TYPE_NAME_SUFFIX}')

    @property
    def dispatch_name(self) -> str:
        """Name of the union of a multi-pattern resource.

        Shares the single-pattern name: for callers it is the resource
        name type whenever several patterns exist.
        """
        return self.single_type_name

    @property
    def parse_function_name(self) -> str:
        """Name of the module-level parse entry point."""
        name = f'parse_{snake_case(self.resource_kind)}_resource_name'
        if not FIELD_NAME_PATTERN.match(name):
            raise NamingError(f'Resource kind {self.resource_kind!r} is not a valid function name')

        return name

    def short_name(self, pattern: str) -> str:
        """Derive the short name of a pattern.

        PascalCase literals other than the plural form are concatenated;
        if none remain, the first segment decides: its PascalCase form if
        it is a literal, `Simple` if it is a variable.

        Args:
            pattern: Pattern string of the resource.

        Returns:
            The short name, before any collision handling.
        """
        try:
            segments = parse_pattern(pattern).segments
        except PatternError:
            return DEFAULT_NAME

        prefix = ''.join(
            pascal_case(segment.literal)
            for segment in segments
            if not segment.variable and segment.literal != self.descriptor.plural
        )
        if prefix:
            return prefix

        first, *_ = segments
        if first.variable:
            return SIMPLE_NAME

        return pascal_case(first.literal)

    @cached_property
    def variant_names(self) -> tuple[str, ...]:
        """Variant names of all patterns in descriptor order.

        Short names shared by several patterns get the 1-based position of
        their pattern appended.

        Raises:
            NamingError: On a collision in strict mode, or if the names are
                still not unique after disambiguation.
        """
        names = [self.short_name(pattern) for pattern in self.descriptor.pattern]

        counts = Counter(names)
        if duplicates := sorted(name for name, count in counts.items() if count > 1):
            message = (
                f'Patterns of {self.descriptor.type!r} share the names '
                f'{", ".join(duplicates)}; positions are appended'
            )
            if self.strict_mode:
                raise NamingError(message)
            warn(message, category=NamingWarning, stacklevel=2)

            names = [
                f'{name}{position}' if counts[name] > 1 else name
                for position, name in enumerate(names, start=1)
            ]
            if len(set(names)) != len(names):
                raise NamingError(f'Patterns of {self.descriptor.type!r} have no unique names')

        return tuple(self.ensure_class_name(name) for name in names)

    def variant_name(self, index: int) -> str:
        """Variant name of the pattern at `index`."""
        return self.variant_names[index]

    def multi_type_name(self, index: int) -> str:
        """Type name backing the pattern at `index` of a multi-pattern resource."""
        return self.ensure_class_name(f'{self.variant_names[index]}{self.single_type_name}')

    @staticmethod
    def ensure_class_name(name: str) -> str:
        """Check that a derived name is a valid class name.

        Raises:
            NamingError: If it is not an ASCII identifier.
        """
        if not CLASS_NAME_PATTERN.match(name):
            raise NamingError(f'Derived name {name!r} is not a valid identifier')

        return name
