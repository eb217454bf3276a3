"""protoc plugin generating resource name modules.

The plugin reads a `CodeGeneratorRequest` from standard input and writes
a `CodeGeneratorResponse` to standard output. For every requested proto
file declaring resources, it emits one module named after the file with
`.proto` replaced by the configured suffix:

    protoc --python-aip_out=. --python-aip_opt=strict library.proto

Options are passed as a comma-separated parameter string, see
`GeneratorSettings.from_parameter`. Failures are reported to protoc
through the response error instead of a crash.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from logging import getLogger
from typing import TYPE_CHECKING

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest, CodeGeneratorResponse

from aip_names.config import GeneratorSettings
from aip_names.core import FileRenderer
from aip_names.errors import GenerationError

from .request import collect_descriptors

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = getLogger(__name__)

#: Name of the plugin executable.
PLUGIN_NAME = 'protoc-gen-python-aip'

#: Extension stripped from proto file names.
PROTO_SUFFIX = '.proto'


def output_name(proto_name: str, suffix: str) -> str:
    """Return the name of the module generated for a proto file.

    Args:
        proto_name: Proto file path, e.g. `example/library/v1/library.proto`.
        suffix: Output suffix, e.g. `_resources.py`.

    Returns:
        Output path, e.g. `example/library/v1/library_resources.py`.
    """
    return f'{proto_name.removesuffix(PROTO_SUFFIX)}{suffix}'


def generate(request: CodeGeneratorRequest) -> CodeGeneratorResponse:
    """Process a code generator request.

    Args:
        request: Request decoded from protoc.

    Returns:
        Response with one file per requested proto file declaring
        resources, or with `error` set on failure.
    """
    response = CodeGeneratorResponse(
        supported_features=CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL,
    )

    try:
        settings = GeneratorSettings.from_parameter(request.parameter)
    except GenerationError as error:
        response.error = str(error)
        return response

    renderer = FileRenderer(settings)
    files = {file.name: file for file in request.proto_file}

    for name in request.file_to_generate:
        if name not in files:
            response.error = f'{name}: missing from request'
            return response

        try:
            descriptors = collect_descriptors(files[name])
            if not descriptors:
                logger.debug('%s declares no resources, skipped', name)
                continue

            content = renderer.render(descriptors, source=name)

        except GenerationError as error:
            response.error = f'{name}: {error}'
            return response

        output = response.file.add()
        output.name = output_name(name, settings.file_suffix)
        output.content = content
        logger.debug('generated %s', output.name)

    return response


def main(argv: 'Sequence[str] | None' = None) -> None:
    """Run the plugin on standard streams."""
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ('--version', '-V'):
        try:
            print(f'{PLUGIN_NAME} {version("aip-names")}')  # noqa: T201
        except PackageNotFoundError:
            print(PLUGIN_NAME)  # noqa: T201
        return

    request = CodeGeneratorRequest.FromString(sys.stdin.buffer.read())
    response = generate(request)

    sys.stdout.buffer.write(response.SerializeToString())
    sys.stdout.buffer.flush()
