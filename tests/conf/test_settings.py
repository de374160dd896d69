from pathlib import Path

import pytest
from pydantic import ValidationError

from databuilder import DataBuilder
from databuilder.byte_order import ByteOrder
from databuilder.conf import CONFIG_YAML_ENV_VAR
from databuilder.conf.get_settings import get_global_settings, get_settings_source
from databuilder.conf.settings import DataBuilderSettings
from databuilder.exceptions import DataBuilderError


def _write_yaml(tmp_path: Path, contents: str, name: str = 'settings.yml') -> Path:
    filepath = tmp_path / name
    filepath.write_text(contents)
    return filepath


def test_default_settings() -> None:
    settings = DataBuilderSettings()
    assert settings.DEFAULT_ENCODING == 'ascii'
    assert settings.DEFAULT_BYTE_ORDER is ByteOrder.LITTLE_ENDIAN
    assert settings.ENCODING_ERRORS == 'replace'
    assert settings.MAX_OUTPUT_BYTES is None


def test_settings_are_frozen() -> None:
    settings = DataBuilderSettings()
    with pytest.raises(ValidationError):
        settings.MAX_OUTPUT_BYTES = 10  # type: ignore[misc]


def test_valid_settings_from_yaml(tmp_path: Path) -> None:
    filepath = _write_yaml(tmp_path, '\n'.join([
        'DEFAULT_ENCODING: UTF-16',
        'DEFAULT_BYTE_ORDER: big',
        'ENCODING_ERRORS: strict',
        'MAX_OUTPUT_BYTES: 1024',
    ]))

    expected = DataBuilderSettings(
        DEFAULT_ENCODING='utf-16-le',
        DEFAULT_BYTE_ORDER=ByteOrder.BIG_ENDIAN,
        ENCODING_ERRORS='strict',
        MAX_OUTPUT_BYTES=1024,
    )
    assert DataBuilderSettings.from_yaml(filepath=filepath) == expected


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    filepath = _write_yaml(tmp_path, '')
    assert DataBuilderSettings.from_yaml(filepath=filepath) == DataBuilderSettings()


@pytest.mark.parametrize(['contents', 'error'], [
    ('DEFAULT_ENCODING: klingon', "Value error, unknown encoding: 'klingon'"),
    ('DEFAULT_ENCODING: base64', "Value error, not a text encoding: 'base64'"),
    ('ENCODING_ERRORS: shrug', "Value error, unknown encoding error handler: 'shrug'"),
    ('MAX_OUTPUT_BYTES: 0', 'Value error, MAX_OUTPUT_BYTES must be positive, got 0'),
])
def test_invalid_settings_from_yaml(tmp_path: Path, contents: str, error: str) -> None:
    filepath = _write_yaml(tmp_path, contents)

    with pytest.raises(ValidationError) as e:
        DataBuilderSettings.from_yaml(filepath=filepath)

    errors = e.value.errors()
    assert errors[0]['msg'] == error


def test_invalid_byte_order_from_yaml(tmp_path: Path) -> None:
    filepath = _write_yaml(tmp_path, 'DEFAULT_BYTE_ORDER: middle')

    with pytest.raises(ValidationError) as e:
        DataBuilderSettings.from_yaml(filepath=filepath)

    assert 'DEFAULT_BYTE_ORDER' in str(e.value)


def test_unknown_key_from_yaml(tmp_path: Path) -> None:
    filepath = _write_yaml(tmp_path, 'DEFAULT_ENDIANNESS: big')

    with pytest.raises(ValidationError) as e:
        DataBuilderSettings.from_yaml(filepath=filepath)

    assert 'DEFAULT_ENDIANNESS' in str(e.value)


def test_global_settings_default() -> None:
    settings = get_global_settings()
    assert settings == DataBuilderSettings()
    assert get_settings_source() is None
    # loaded only once
    assert get_global_settings() is settings


def test_global_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    filepath = _write_yaml(tmp_path, 'DEFAULT_BYTE_ORDER: big')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))

    settings = get_global_settings()
    assert settings.DEFAULT_BYTE_ORDER is ByteOrder.BIG_ENDIAN
    assert get_settings_source() == str(filepath)


def test_global_settings_used_by_builders(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    filepath = _write_yaml(tmp_path, 'DEFAULT_BYTE_ORDER: big\nDEFAULT_ENCODING: utf-8')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))

    assert DataBuilder().append_uint16(1).append_text('€').build() == b'\x00\x01\xe2\x82\xac'


def test_global_settings_from_a_different_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    get_global_settings()

    filepath = _write_yaml(tmp_path, 'DEFAULT_BYTE_ORDER: big')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))

    with pytest.raises(DataBuilderError, match='different source'):
        get_global_settings()
