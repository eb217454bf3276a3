"""Tests configurations and fixtures."""

import sys
from itertools import count
from types import ModuleType
from typing import TYPE_CHECKING

import pytest
import yaml

from aip_names.config import GeneratorSettings
from aip_names.core import FileRenderer
from aip_names.schema import History, ResourceDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable

#: Sequence of names for modules compiled during the test session.
MODULE_NUMBERS = count()


@pytest.fixture
def loader() -> type[yaml.SafeLoader]:
    """Provide an isolated YAML SafeLoader class for tests.

    Creates a dedicated subclass of `yaml.SafeLoader` to ensure that
    YAML constructors registered during a test do not leak into other
    tests or affect global loader state.

    Returns:
        A subclass of `yaml.SafeLoader` suitable for descriptor parsing.
    """
    class Loader(yaml.SafeLoader):
        pass

    return Loader


@pytest.fixture
def make_descriptor() -> 'Callable[..., ResourceDescriptor]':
    """Provide a factory of resource descriptors.

    Defaults describe the `library.googleapis.com/Book` resource.
    """
    def make(*patterns: str,
             type_: str = 'library.googleapis.com/Book',
             plural: str = 'books',
             history: History = History.UNSPECIFIED) -> ResourceDescriptor:
        return ResourceDescriptor(
            type=type_,
            pattern=patterns,
            plural=plural,
            history=history,
        )

    return make


@pytest.fixture
def compile_module(monkeypatch: pytest.MonkeyPatch) -> 'Callable[[str], ModuleType]':
    """Provide a factory executing generated source as a module.

    Each module is registered in `sys.modules` for the duration of the
    test, so pydantic can resolve the forward references of dispatch
    unions on `model_rebuild()`.
    """
    def compile_(source: str) -> ModuleType:
        name = f'tests_generated_{next(MODULE_NUMBERS)}'

        module = ModuleType(name)
        monkeypatch.setitem(sys.modules, name, module)

        exec(compile(source, f'<{name}>', 'exec'), module.__dict__)  # noqa: S102

        return module

    return compile_


@pytest.fixture
def generate_module(compile_module: 'Callable[[str], ModuleType]') -> 'Callable[..., ModuleType]':
    """Provide a factory rendering descriptors into a loaded module."""
    def generate(*descriptors: ResourceDescriptor, strict: bool = True) -> ModuleType:
        renderer = FileRenderer(GeneratorSettings(strict=strict))
        return compile_module(renderer.render(descriptors))

    return generate
