"""Extraction of resource descriptors from protobuf file descriptors.

Resources are declared either on messages, with the `google.api.resource`
message option, or on files, with the repeated
`google.api.resource_definition` file option. Both carry a
`google.api.ResourceDescriptor`, converted here into the generator's own
`ResourceDescriptor` so nothing downstream depends on protobuf types.
"""

from logging import getLogger
from typing import TYPE_CHECKING
from warnings import warn

from google.api import resource_pb2
from pydantic import ValidationError

from aip_names.errors import DescriptorError, GenerationWarning
from aip_names.schema import ResourceDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from google.protobuf.descriptor_pb2 import DescriptorProto, FileDescriptorProto

logger = getLogger(__name__)


def descriptor_from_proto(resource: resource_pb2.ResourceDescriptor, *,
                          filename: str | None = None) -> ResourceDescriptor:
    """Convert a `google.api.ResourceDescriptor` message.

    Args:
        resource: Resource annotation.
        filename: Proto file the annotation comes from, for errors.

    Returns:
        The equivalent resource descriptor.

    Raises:
        DescriptorError: If the annotation is incomplete.
    """
    data = {
        'type': resource.type,
        'pattern': list(resource.pattern),
        'plural': resource.plural,
        'singular': resource.singular,
        'history': resource.history,
    }

    try:
        return ResourceDescriptor.model_validate(data)

    except ValidationError as base:
        raise DescriptorError.from_pydantic_error(base, data=data, filename=filename) from base


def iter_messages(messages: 'Iterable[DescriptorProto]',
                  prefix: str = '') -> 'Iterator[tuple[str, DescriptorProto]]':
    """Walk messages depth-first in declaration order.

    Args:
        messages: Top-level or nested message descriptors.
        prefix: Qualified name of the enclosing message, with a trailing dot.

    Yields:
        Qualified message name and message descriptor pairs.
    """
    for message in messages:
        name = f'{prefix}{message.name}'
        yield name, message
        yield from iter_messages(message.nested_type, f'{name}.')


def collect_descriptors(file: 'FileDescriptorProto') -> tuple[ResourceDescriptor, ...]:
    """Collect all resources declared in a proto file.

    File-level definitions come first, then message annotations in
    declaration order. A resource type declared twice keeps its first
    declaration.

    Args:
        file: File descriptor from the code generator request.

    Returns:
        Resource descriptors in declaration order.

    Raises:
        DescriptorError: If an annotation is incomplete.
    """
    resources: list[tuple[str, resource_pb2.ResourceDescriptor]] = [
        (file.name, resource)
        for resource in file.options.Extensions[resource_pb2.resource_definition]
    ]

    for name, message in iter_messages(file.message_type):
        if message.options.HasExtension(resource_pb2.resource):
            resources.append((name, message.options.Extensions[resource_pb2.resource]))

    descriptors: dict[str, ResourceDescriptor] = {}
    for origin, resource in resources:
        descriptor = descriptor_from_proto(resource, filename=file.name)
        if descriptor.type in descriptors:
            warn(
                f'Resource {descriptor.type!r} from {origin!r} is already declared',
                category=GenerationWarning,
                stacklevel=2,
            )
            continue

        logger.debug('found resource %s on %s', descriptor.type, origin)
        descriptors[descriptor.type] = descriptor

    return tuple(descriptors.values())
