"""CLI utilities for aip-names code generation.

Descriptor files are rendered into a single Python module; the JSON
Schema of descriptor documents can be printed for editor integration.
"""

from logging import DEBUG, basicConfig
from pathlib import Path

from click import ClickException, argument, echo, group, option
from click import Path as PathParam
from pydantic import ValidationError

from aip_names.config import GeneratorSettings
from aip_names.core import DescriptorLoader, FileRenderer
from aip_names.errors import GenerationError
from aip_names.jsonschema import SchemaGenerator

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'

SourceFilepath = PathParam(
    exists=True,
    dir_okay=False,
    readable=True,
    path_type=Path,
)

OutputFilepath = PathParam(
    dir_okay=False,
    writable=True,
    path_type=Path,
)


@group(help='Command-line utilities for aip-names code generation.')
@option(
    '-v', '--verbose',
    is_flag=True,
    default=False,
    help='Log debug messages to standard error.',
)
def cli(verbose: bool) -> None:  # noqa: FBT001
    """Root CLI group for aip-names tools."""
    if verbose:
        basicConfig(level=DEBUG, format=LOG_FORMAT)


@cli.command(
    name='generate',
    help=(
        'Render resource descriptor YAML files into one Python module. '
        'The module is written to standard output unless an output '
        'file is given.'
    ),
)
@option(
    '-o', '--output',
    type=OutputFilepath,
    default=None,
    help='Output path for the generated module.',
)
@option(
    '--strict/--relaxed',
    default=None,
    help=(
        'Fail on resources that cannot be generated and on name '
        'collisions instead of warning.'
    ),
)
@option(
    '--runtime-module',
    default=None,
    help='Module the generated code imports its base types from.',
)
@argument(
    'sources',
    nargs=-1,
    required=True,
    type=SourceFilepath,
)
def generate(sources: tuple[Path, ...], output: Path | None,
             strict: bool | None, runtime_module: str | None) -> None:  # noqa: FBT001
    """Generate a resource name module.

    Args:
        sources: Descriptor files in output order.
        output: Output path, standard output if not given.
        strict: Strict mode override.
        runtime_module: Runtime module override.
    """
    overrides = {
        key: value
        for key, value in (('strict', strict), ('runtime_module', runtime_module))
        if value is not None
    }

    try:
        settings = GeneratorSettings(**overrides)
    except ValidationError as base:
        raise ClickException(f'Invalid options: {base.error_count()} errors') from base

    loader = DescriptorLoader()

    try:
        descriptors = [
            descriptor
            for source in sources
            for descriptor in loader.parse_file(source)
        ]
        content = FileRenderer(settings).render(
            descriptors,
            source=', '.join(source.as_posix() for source in sources),
        )

    except GenerationError as base:
        raise ClickException(str(base)) from base

    if output is None:
        echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open('wt', encoding='utf-8') as stream:
        stream.write(content)


@cli.command(
    name='schema',
    help='Print the descriptor JSON Schema to standard output.',
)
def print_schema() -> None:
    """Generate and print the JSON Schema."""
    echo(SchemaGenerator.make_schema())


if __name__ == '__main__':
    cli()
