from pathlib import Path

import pytest
from pydantic import ValidationError

from nbtree.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, NbtSettings, get_global_settings
from nbtree.conf.get_settings import _load_settings_singleton, load_yaml_settings
from nbtree.utils.yaml import dict_from_extended_yaml


def test_default_settings() -> None:
    settings = load_yaml_settings(DEFAULT_SETTINGS_FILEPATH)
    assert settings == NbtSettings()
    assert settings.MAX_DEPTH == 256
    assert settings.STRING_ENCODING == 'latin-1'
    assert settings.MAX_INPUT_BYTES is None
    assert settings.FILE_COMPRESSION == 'gzip'


def test_unittests_settings_extend_default() -> None:
    settings = load_yaml_settings(UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_DEPTH == 32
    assert settings.MAX_INPUT_BYTES == 1048576
    assert settings.STRING_ENCODING == 'latin-1'
    assert settings.FILE_COMPRESSION == 'gzip'


def test_global_settings_come_from_env() -> None:
    settings = get_global_settings()
    assert settings is get_global_settings()
    assert settings.MAX_DEPTH == 32


def test_global_settings_cannot_be_reloaded_from_another_file() -> None:
    get_global_settings()
    with pytest.raises(Exception, match='different file'):
        _load_settings_singleton(DEFAULT_SETTINGS_FILEPATH)


def test_extends_relative_to_file(tmp_path: Path) -> None:
    base = tmp_path / 'base.yml'
    base.write_text('MAX_DEPTH: 10\nSTRING_ENCODING: utf-8\n')
    child = tmp_path / 'child.yml'
    child.write_text('extends: base.yml\nMAX_DEPTH: 20\n')
    assert dict_from_extended_yaml(filepath=child) == dict(MAX_DEPTH=20, STRING_ENCODING='utf-8')
    settings = load_yaml_settings(str(child))
    assert settings.MAX_DEPTH == 20
    assert settings.STRING_ENCODING == 'utf-8'


def test_extends_bundled_file(tmp_path: Path) -> None:
    custom = tmp_path / 'custom.yml'
    custom.write_text('extends: default.yml\nFILE_COMPRESSION: zlib\n')
    settings = load_yaml_settings(str(custom))
    assert settings.FILE_COMPRESSION == 'zlib'
    assert settings.MAX_DEPTH == 256


def test_recursive_extends(tmp_path: Path) -> None:
    looped = tmp_path / 'looped.yml'
    looped.write_text('extends: looped.yml\n')
    with pytest.raises(ValueError, match='recursive'):
        dict_from_extended_yaml(filepath=looped)


def test_not_a_dict(tmp_path: Path) -> None:
    listed = tmp_path / 'listed.yml'
    listed.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        load_yaml_settings(str(listed))


@pytest.mark.parametrize('values', [
    dict(MAX_DEPTH=0),
    dict(MAX_DEPTH=-1),
    dict(MAX_INPUT_BYTES=-1),
    dict(STRING_ENCODING='utf-16'),
    dict(FILE_COMPRESSION='bz2'),
    dict(UNKNOWN_SETTING=1),
])
def test_invalid_settings(values: dict) -> None:
    with pytest.raises(ValidationError):
        NbtSettings(**values)


def test_settings_are_frozen() -> None:
    settings = NbtSettings()
    with pytest.raises(ValidationError):
        settings.MAX_DEPTH = 1  # type: ignore[misc]
