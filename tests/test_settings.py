from pathlib import Path

import pytest
from pydantic import ValidationError

from micheline import InvalidSettingsError
from micheline.conf import CodecSettings, get_global_settings
from micheline.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings_source

FIXTURES_DIR = Path(__file__).parent / 'fixtures' / 'settings'


def test_defaults():
    settings = CodecSettings()
    assert settings.MAX_NESTING_DEPTH == 100
    assert settings.MAX_ENCODED_BYTES is None
    assert settings.ALLOW_TRAILING_DATA is False


@pytest.mark.parametrize(
    'kwargs',
    [
        dict(MAX_NESTING_DEPTH=0),
        dict(MAX_NESTING_DEPTH=-1),
        dict(MAX_NESTING_DEPTH=201),
        dict(MAX_ENCODED_BYTES=0),
        dict(NOT_A_SETTING=1),
    ]
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        CodecSettings(**kwargs)


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.MAX_NESTING_DEPTH = 10  # type: ignore[misc]


def test_from_yaml():
    settings = CodecSettings.from_yaml(filepath=FIXTURES_DIR / 'valid.yml')
    assert settings == CodecSettings(MAX_NESTING_DEPTH=50, MAX_ENCODED_BYTES=1024)


def test_from_yaml_extends():
    settings = CodecSettings.from_yaml(filepath=FIXTURES_DIR / 'extends.yml')
    assert settings == CodecSettings(MAX_NESTING_DEPTH=20, MAX_ENCODED_BYTES=1024, ALLOW_TRAILING_DATA=True)


def test_from_empty_yaml():
    assert CodecSettings.from_yaml(filepath=FIXTURES_DIR / 'empty.yml') == CodecSettings()


@pytest.mark.parametrize(
    'filename',
    ['invalid.yml', 'unknown_key.yml', 'self_extends.yml', 'not_a_dict.yml', 'missing.yml'],
)
def test_from_yaml_invalid(filename):
    with pytest.raises(ValueError):
        CodecSettings.from_yaml(filepath=FIXTURES_DIR / filename)


def test_global_settings_defaults():
    settings = get_global_settings()
    assert settings == CodecSettings()
    assert get_global_settings() is settings
    assert get_settings_source() is None


def test_global_settings_from_env(monkeypatch):
    source = str(FIXTURES_DIR / 'valid.yml')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, source)
    settings = get_global_settings()
    assert settings.MAX_NESTING_DEPTH == 50
    assert get_settings_source() == source
    assert get_global_settings() is settings


def test_global_settings_different_source(monkeypatch):
    get_global_settings()
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(FIXTURES_DIR / 'valid.yml'))
    with pytest.raises(InvalidSettingsError):
        get_global_settings()


def test_global_settings_invalid_file(monkeypatch):
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(FIXTURES_DIR / 'invalid.yml'))
    with pytest.raises(InvalidSettingsError):
        get_global_settings()


def test_get_settings_source_before_loading():
    with pytest.raises(AssertionError):
        get_settings_source()
