import pytest

from databuilder.conf import CONFIG_YAML_ENV_VAR, get_settings


@pytest.fixture(autouse=True)
def default_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts without a settings file and without cached global settings."""
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
