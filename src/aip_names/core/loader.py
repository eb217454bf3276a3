"""YAML loading of resource descriptors.

A descriptor file is a YAML stream in which every document describes one
resource, with the same fields as the `google.api.resource` annotation:

    type: library.googleapis.com/Book
    pattern:
      - publishers/{publisher}/books/{book}
    plural: books
    ---
    type: library.googleapis.com/Publisher
    pattern: publishers/{publisher}

Empty documents are ignored. Documents keep their stream order, which is
the order of the generated code.
"""

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError
from yaml import SafeLoader, load_all
from yaml.error import MarkedYAMLError

from aip_names.errors import DescriptorError
from aip_names.schema import ResourceDescriptor

if TYPE_CHECKING:
    from io import TextIOBase

if TYPE_CHECKING:
    from yaml import BaseLoader

logger = getLogger(__name__)

#: Parsed descriptors in stream order.
type Descriptors = tuple[ResourceDescriptor, ...]


class DescriptorLoader:
    """Parser of descriptor YAML streams.

    Attributes:
        loader: YAML loader class. Only safe loaders should be used, since
            descriptor files never need arbitrary Python objects.
    """

    def __init__(self, loader: type['BaseLoader'] = SafeLoader) -> None:
        self.loader = loader

    def parse(self, content: 'TextIOBase | str', *,
              filename: str | None = None) -> Descriptors:
        """Parse a YAML stream into validated descriptors.

        Args:
            content: YAML content as a string or file-like object.
            filename: Name reported in errors, if not known to the stream.

        Returns:
            Descriptors in stream order.

        Raises:
            DescriptorError: If YAML parsing or validation fails.
        """
        try:
            documents = list(load_all(content, Loader=self.loader))

        except MarkedYAMLError as base:
            raise DescriptorError.from_yaml_error(base) from base

        except Exception as base:
            raise DescriptorError('Unexpected error') from base

        descriptors = []

        for position, document in enumerate(documents):
            if document is None:
                continue

            try:
                descriptor = ResourceDescriptor.model_validate(document)

            except ValidationError as base:
                raise DescriptorError.from_pydantic_error(
                    base,
                    data=document,
                    filename=filename,
                    document_num=position,
                ) from base

            logger.debug('loaded resource %s', descriptor.type)
            descriptors.append(descriptor)

        return tuple(descriptors)

    def parse_file(self, path: Path | str) -> Descriptors:
        """Read and parse a descriptor file.

        Args:
            path: Path to the YAML file.

        Returns:
            Descriptors in file order.

        Raises:
            DescriptorError: If the file is invalid.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        logger.debug('loading descriptors from %s', path)

        with path.open('r', encoding='utf-8') as content:
            return self.parse(content, filename=str(path))
