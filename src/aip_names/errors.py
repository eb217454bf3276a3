"""Generation-time exception hierarchy.

This module defines the error and warning types raised while loading
resource descriptors and generating resource-name code. Runtime errors
raised by the generated code itself live in `aip_names.runtime` and are
deliberately unrelated to the types defined here.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, TypedDict

from yaml import dump
from yaml.error import MarkedYAMLError

if TYPE_CHECKING:
    from typing import Self

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails, ValidationError

SNIPPET_ELLIPSIS = f' ...{linesep}'
SNIPPET_INDENT = 2

FORMAT_REPLACER = '<runtime object>'
FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4

MAPPINGS = (dict,)
SCALARS = (str, bytes, int, float, bool)
SEQUENCES = (list, tuple, set)


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Line number in the source file.
    line_num: int | None
    #: Column number in the source file.
    column_num: int | None

    #: Number of the YAML document (resource) where the error occurred.
    document_num: int | None

    #: Underlying exception that triggered formatting.
    error: Exception | None

    #: Descriptor element associated with the error.
    element: Any


class ErrorFormatter:
    """Utility class for formatting generation errors.

    Produces human-readable messages with optional source location
    and a YAML snippet of the failing descriptor element.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, indent=FORMAT_INDENT * 2)

        return message

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string including filename, line,
            column and document number when available.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        if not filename:
            filename = FORMAT_FILENAME

        message = f'{indent}in "{filename}"'
        if (line_num := context.get('line_num')) is not None:
            line_num += 1
            message += f', line {line_num}'
            if (column_num := context.get('column_num')) is not None:
                column_num += 1
                message += f', column {column_num}'
        message += linesep

        if (document_num := context.get('document_num')) is not None:
            document_num += 1
            message += f'{indent}on resource {document_num}{linesep}'

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, *,
                           indent: str | int | None = None) -> str:
        """Generate a formatted snippet illustrating the error context.

        Args:
            context: Error context containing element or exception data.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted multi-line snippet string, or an empty string
            if no snippet data is available.
        """
        indent = cls._ensure_indent(indent)

        error = context.get('error')
        if isinstance(error, MarkedYAMLError) and error.problem_mark:
            snippet = error.problem_mark.get_snippet(indent=0) or ''
            return cls._make_indent(snippet, indent)

        if element := context.get('element'):
            snippet = f'{indent}{SNIPPET_ELLIPSIS}'
            snippet += cls._make_yaml(element, indent)
            return snippet + linesep

        return ''

    @classmethod
    def _filter_unsafe(cls, value: Any) -> Any:  # noqa: ANN401
        """Recursively sanitize values for safe YAML serialization.

        Args:
            value: Arbitrary value to sanitize.

        Returns:
            A YAML-safe representation of the value.
        """
        if value is None or isinstance(value, SCALARS):
            return value

        if isinstance(value, MAPPINGS):
            return type(value)({
                key: cls._filter_unsafe(item)
                for key, item in value.items()
            })

        if isinstance(value, SEQUENCES):
            return [cls._filter_unsafe(item) for item in value]

        return FORMAT_REPLACER

    @classmethod
    def _make_yaml(cls, value: Any, indent: str = '') -> str:  # noqa: ANN401
        """Serialize a value to an indented YAML string."""
        data = dump(
            cls._filter_unsafe(value),
            indent=SNIPPET_INDENT,
            sort_keys=False,
        )

        return cls._make_indent(data, indent)

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string, dropping blank lines."""
        if not indent:
            return value

        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation given as a string or number of spaces."""
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class GenerationWarning(UserWarning):
    """Warning emitted for non-fatal generation issues.

    Used in relaxed mode when a resource is skipped or a generated
    name had to be adjusted.
    """


class NamingWarning(GenerationWarning):
    """Warning emitted when derived names collide and are disambiguated."""


class GenerationError(Exception, ErrorFormatter):
    """Base exception for all aip-names generation errors.

    All custom generation-time exceptions inherit from this class to
    allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Error context containing optional location values.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String represenatation."""
        return self.format(self.message, self.context)


class PatternError(GenerationError):
    """Error raised when a resource pattern cannot be turned into code."""


class NamingError(GenerationError):
    """Error raised when no valid, unique identifier can be derived."""


class OptionsError(GenerationError):
    """Error raised for unknown or malformed generator options."""


class DescriptorError(GenerationError):
    """Error raised when a resource descriptor document is invalid.

    Wraps YAML syntax errors and pydantic validation failures while
    preserving as much location information as is available.
    """

    @classmethod
    def from_yaml_error(cls, error: MarkedYAMLError) -> 'Self':
        """Create a descriptor error from a YAML parsing failure.

        Args:
            error: Exception raised by the YAML parser.

        Returns:
            DescriptorError representing the YAML parsing failure.
        """
        error_context = ErrorContext(error=error)
        if mark := error.problem_mark:
            error_context.update(
                filename=mark.name,
                line_num=mark.line,
                column_num=mark.column,
            )

        message = 'Invalid YAML'
        if error.problem:
            message += f'{linesep}{' ' * FORMAT_INDENT}{error.problem}'

        return cls(message, context=error_context)

    @classmethod
    def from_pydantic_error(cls, error: 'ValidationError', *,
                            data: Any = None,  # noqa: ANN401
                            filename: str | None = None,
                            document_num: int | None = None) -> 'Self':
        """Create a descriptor error from a pydantic validation failure.

        The first error whose location can be found in `data` is used
        for both the message and the snippet.

        Args:
            error: ValidationError raised by pydantic.
            data: Raw descriptor document.
            filename: Name of the source file where the error occurred.
            document_num: Position of the document in the stream.

        Returns:
            DescriptorError representing the validation failure.
        """
        error_context = ErrorContext(
            filename=filename,
            document_num=document_num,
            error=error,
            element=data,
        )

        if not data or not isinstance(data, dict):
            return cls('Descriptor must be a mapping', context=error_context)

        for item in error.errors(include_url=False, include_input=False):
            if context := cls._locate_pydantic_context(data, item):
                message, value = context
                return cls(message, context=ErrorContext({**error_context, 'element': value}))

        return cls('Validation error', context=error_context)

    @classmethod
    def _locate_pydantic_context(cls, value: Any,  # noqa: ANN401
                                 error: 'ErrorDetails') -> tuple[str, Any] | None:
        """Locate the most specific failing element in validated data.

        Args:
            value: Root data structure being validated.
            error: Pydantic error details including location path.

        Returns:
            A tuple of (error message, extracted element) if a relevant
            context can be located, otherwise None.
        """
        container = last_item = value
        last_key: int | str | None = None

        for key in error['loc']:
            if isinstance(last_item, (list, tuple)):
                if isinstance(key, int) and 0 <= key < len(last_item):
                    container = last_item
                    last_item = last_item[key]
                    last_key = key
            elif isinstance(last_item, dict):
                if key in last_item:
                    container = last_item
                    last_item = last_item[key]
                    last_key = key
            else:
                return None

        message = None
        for item in (error.get('msg') or '').splitlines():
            if item_message := item.strip():
                message = item_message
                break

        if not message:
            return None

        if isinstance(container, (list, tuple)) and isinstance(last_key, int):
            return message, [last_item]
        if isinstance(container, dict) and isinstance(last_key, str):
            return message, {last_key: last_item}

        return message, container
