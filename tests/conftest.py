import pytest

from micheline.conf.get_settings import CONFIG_YAML_ENV_VAR, _reset_settings_singleton


@pytest.fixture(autouse=True)
def _isolated_global_settings(monkeypatch):
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    _reset_settings_singleton()
    yield
    _reset_settings_singleton()
