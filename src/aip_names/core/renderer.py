"""Rendering of complete generated modules.

A generated module consists of a fixed header followed by the blocks of
all resources in input order, separated like top-level definitions. The
header imports everything the blocks may refer to from the configured
runtime module, so blocks can be concatenated freely.
"""

from logging import getLogger
from typing import TYPE_CHECKING
from warnings import warn

from aip_names.config import GeneratorSettings
from aip_names.errors import GenerationError, GenerationWarning

from .generator import ResourceGenerator
from .writer import SourceWriter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aip_names.schema import ResourceDescriptor

logger = getLogger(__name__)

#: First line of every generated module.
GENERATED_MARKER = '# Code generated by aip-names. DO NOT EDIT.'

#: Names imported from the runtime module, in import order.
RUNTIME_IMPORTS = (
    'WILDCARD',
    'ArityMismatch',
    'FieldEmpty',
    'IllegalCharacter',
    'LiteralMismatch',
    'NoMatchingPattern',
    'ResourceNameError',
    'ResourceNameModel',
)

#: Separator between top-level blocks.
BLOCK_SEPARATOR = '\n\n\n'


class FileRenderer:
    """Renderer of resource descriptors into one Python module.

    Attributes:
        settings: Generator settings; `runtime_module` selects the import
            source and `strict` the failure policy.
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self.settings = settings or GeneratorSettings()

    def render_header(self, source: str | None = None) -> str:
        """Render the module header.

        Args:
            source: Name of the input the module was generated from.

        Returns:
            Header text ending with the runtime imports.
        """
        writer = SourceWriter()

        writer.line(GENERATED_MARKER)
        if source:
            writer.line(f'# source: {source}')

        writer.blank()
        writer.line('from __future__ import annotations')
        writer.blank()
        writer.line('from contextlib import suppress')
        writer.line('from typing import Literal')
        writer.blank()
        writer.line('from pydantic import model_validator')
        writer.blank()
        with writer.block(f'from {self.settings.runtime_module} import ('):
            for name in RUNTIME_IMPORTS:
                writer.line(f'{name},')
        writer.line(')')

        return writer.getvalue()

    def render_resource(self, descriptor: 'ResourceDescriptor') -> str | None:
        """Render the block of one resource.

        Args:
            descriptor: Resource to render.

        Returns:
            The resource block, or `None` if the resource was skipped.

        Raises:
            GenerationError: If the resource cannot be generated in
                strict mode.
        """
        generator = ResourceGenerator(descriptor, strict=self.settings.strict)

        try:
            return generator.generate()

        except GenerationError as base:
            if self.settings.strict:
                raise

            warn(
                f'Resource {descriptor.type!r} skipped: {base.message}',
                category=GenerationWarning,
                stacklevel=2,
            )

        return None

    def render(self, descriptors: 'Iterable[ResourceDescriptor]',
               source: str | None = None) -> str:
        """Render a complete module.

        Args:
            descriptors: Resources in output order.
            source: Name of the input, written into the header.

        Returns:
            Module source with a single trailing newline. Identical input
            always renders to identical text.

        Raises:
            GenerationError: If any resource fails in strict mode.
        """
        blocks = [self.render_header(source).rstrip('\n')]

        for descriptor in descriptors:
            if block := self.render_resource(descriptor):
                blocks.append(block.rstrip('\n'))

        logger.debug('rendered %d resource blocks from %s', len(blocks) - 1, source or 'input')

        return BLOCK_SEPARATOR.join(blocks) + '\n'
