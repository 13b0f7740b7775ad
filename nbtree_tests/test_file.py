import gzip
import zlib
from pathlib import Path

import pytest

from nbtree import BadDataError, InvalidValueError, NbtSettings, TagType, load_file, write_file
from nbtree.codec import encode_bytes
from nbtree.tag import tag_compound, tag_int, tag_list, tag_string


def _build_tree():
    return tag_compound('Data', [
        tag_string('LevelName', 'world'),
        tag_list('Pos', TagType.INT, [tag_int('', 1), tag_int('', 64), tag_int('', -3)]),
    ])


@pytest.mark.parametrize('compression', ['gzip', 'zlib', 'none'])
def test_round_trip(tmp_path: Path, compression) -> None:
    path = tmp_path / 'level.dat'
    write_file(path, _build_tree(), compression=compression)
    assert load_file(path, compression=compression) == _build_tree()


def test_gzip_is_the_default(tmp_path: Path) -> None:
    path = tmp_path / 'level.dat'
    write_file(str(path), _build_tree())
    with gzip.open(path, 'rb') as fp:
        assert fp.read() == encode_bytes(_build_tree())
    assert load_file(str(path)) == _build_tree()


def test_zlib_layout(tmp_path: Path) -> None:
    path = tmp_path / 'chunk.nbt'
    write_file(path, _build_tree(), compression='zlib')
    assert zlib.decompress(path.read_bytes()) == encode_bytes(_build_tree())


def test_uncompressed_layout(tmp_path: Path) -> None:
    path = tmp_path / 'raw.nbt'
    write_file(path, _build_tree(), compression='none')
    assert path.read_bytes() == encode_bytes(_build_tree())


def test_compression_from_settings(tmp_path: Path) -> None:
    settings = NbtSettings(FILE_COMPRESSION='none')
    path = tmp_path / 'raw.nbt'
    write_file(path, _build_tree(), settings=settings)
    assert path.read_bytes() == encode_bytes(_build_tree())
    assert load_file(path, settings=settings) == _build_tree()


@pytest.mark.parametrize('compression', ['gzip', 'zlib'])
def test_corrupt_file(tmp_path: Path, compression) -> None:
    path = tmp_path / 'corrupt.nbt'
    path.write_bytes(b'not compressed at all')
    with pytest.raises(BadDataError):
        load_file(path, compression=compression)


def test_unknown_compression(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_file(tmp_path / 'x.nbt', _build_tree(), compression='bz2')  # type: ignore[arg-type]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / 'missing.nbt', compression='none')


@pytest.mark.parametrize('compression', ['gzip', 'zlib', 'none'])
def test_failed_write_keeps_existing_file(tmp_path: Path, compression) -> None:
    path = tmp_path / 'level.dat'
    write_file(path, _build_tree(), compression=compression)
    before = path.read_bytes()
    with pytest.raises(InvalidValueError):
        write_file(path, tag_compound('bad', [tag_int('x', 1 << 40)]), compression=compression)
    assert path.read_bytes() == before
    assert load_file(path, compression=compression) == _build_tree()
