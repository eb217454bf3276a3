"""Declarative input schema of the generator.

Defines immutable pydantic models describing the resources that code is
generated for. The models mirror the `google.api.resource` annotation so
the same descriptors can come from YAML files or protobuf options.
"""

from .descriptors import History, ResourceDescriptor

__all__ = (
    'History',
    'ResourceDescriptor',
)
