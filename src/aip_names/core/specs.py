"""Generation plan models.

These frozen models describe what is about to be emitted for one
resource, independently of the emitted text: one `TypeSpec` per
single-pattern type and, for multi-pattern resources, one
`DispatchSpec` for the union over them.
"""

from aip_names.models import SchemaModel
from aip_names.patterns import Pattern, Segment  # noqa: TC001


class FieldSpec(SchemaModel):
    """Field of a generated type backing one variable segment."""

    #: Python field name.
    name: str
    #: Variable segment the field is extracted from.
    segment: Segment

    @property
    def variable(self) -> str:
        """Variable name as written in the pattern."""
        return self.segment.literal


class TypeSpec(SchemaModel):
    """Single-pattern resource name type."""

    type_name: str
    resource_type: str
    pattern: Pattern
    #: Fields in pattern order.
    fields: tuple[FieldSpec, ...]

    def field_for(self, segment: Segment) -> FieldSpec:
        """Return the field backing a variable segment of the pattern."""
        for field in self.fields:
            if field.segment == segment:
                return field

        raise KeyError(segment.literal)


class VariantSpec(SchemaModel):
    """Tagged variant of a dispatch union."""

    name: str
    spec: TypeSpec


class DispatchSpec(SchemaModel):
    """Closed union over the per-pattern types of one resource."""

    union_name: str
    resource_type: str
    parse_function: str
    #: Variants in descriptor pattern order, which is the parse priority.
    variants: tuple[VariantSpec, ...]
