"""Tests for generator settings."""

import pytest

from aip_names.config import GeneratorSettings
from aip_names.errors import OptionsError


def test_default_settings() -> None:
    """Provide defaults without options."""
    settings = GeneratorSettings()

    assert settings.file_suffix == '_resources.py'
    assert settings.runtime_module == 'aip_names.runtime'
    assert settings.strict is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read settings from prefixed environment variables."""
    monkeypatch.setenv('AIP_NAMES_STRICT', 'true')
    monkeypatch.setenv('AIP_NAMES_FILE_SUFFIX', '_names.py')

    settings = GeneratorSettings()

    assert settings.strict is True
    assert settings.file_suffix == '_names.py'


@pytest.mark.parametrize('parameter, expected', (
    pytest.param(None, {}, id='none'),
    pytest.param('', {}, id='empty'),
    pytest.param('strict', {'strict': True}, id='bare flag'),
    pytest.param('strict=false', {'strict': False}, id='flag value'),
    pytest.param(
        'file_suffix=_rn.py, runtime_module=library.runtime,,',
        {'file_suffix': '_rn.py', 'runtime_module': 'library.runtime'},
        id='several options',
    ),
))
def test_settings_from_parameter(parameter: str | None, expected: dict) -> None:
    """Parse protoc parameter strings."""
    settings = GeneratorSettings.from_parameter(parameter)

    for key, value in expected.items():
        assert getattr(settings, key) == value


@pytest.mark.parametrize('parameter, except_message', (
    pytest.param('paths=source_relative', r"^Unknown option: 'paths'$", id='unknown'),
    pytest.param('=value', r"^Invalid option format: '=value'$", id='missing key'),
    pytest.param('file_suffix', r"^Option 'file_suffix' requires a value$", id='missing value'),
    pytest.param('strict=maybe', r'^Invalid options', id='invalid flag'),
    pytest.param('file_suffix=', r'^Invalid options', id='empty suffix'),
    pytest.param('runtime_module=not a module', r'^Invalid options', id='invalid module'),
))
def test_invalid_parameter(parameter: str, except_message: str) -> None:
    """Reject malformed protoc parameter strings."""
    with pytest.raises(OptionsError, match=except_message):
        GeneratorSettings.from_parameter(parameter)
