# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Loading and saving NBT files.

Files are usually gzip-compressed, some (region file chunks, for instance) are zlib-compressed and a few are raw. The
wrapper is picked with `compression`, falling back to `settings.FILE_COMPRESSION`.
"""

import gzip
import os
import zlib
from typing import Optional, Union

from structlog import get_logger

from nbtree.codec import decode, decode_bytes, encode_bytes
from nbtree.conf.get_settings import get_global_settings
from nbtree.conf.settings import FileCompression, NbtSettings
from nbtree.node import Node
from nbtree.serialization import BadDataError, StreamReadError

logger = get_logger()

PathLike = Union[str, os.PathLike]


def _resolve(compression: Optional[FileCompression], settings: Optional[NbtSettings]) -> tuple[str, NbtSettings]:
    settings = settings if settings is not None else get_global_settings()
    resolved = compression if compression is not None else settings.FILE_COMPRESSION
    if resolved not in ('gzip', 'zlib', 'none'):
        raise ValueError(f'unknown compression: {resolved!r}')
    return resolved, settings


def load_file(
    path: PathLike,
    *,
    compression: Optional[FileCompression] = None,
    settings: Optional[NbtSettings] = None,
) -> Node:
    """Read the tree stored in the file at `path`."""
    compression, settings = _resolve(compression, settings)
    log = logger.new(path=str(path), compression=compression)
    log.debug('loading nbt file')

    if compression == 'zlib':
        with open(path, 'rb') as fp:
            compressed = fp.read()
        try:
            data = zlib.decompress(compressed)
        except zlib.error as e:
            raise BadDataError(f'invalid zlib data: {e}') from e
        return decode_bytes(data, settings=settings)

    if compression == 'gzip':
        with gzip.open(path, 'rb') as fp:
            try:
                return decode(fp, settings=settings)
            except (EOFError, zlib.error) as e:
                raise BadDataError(f'invalid gzip data: {e}') from e
            except StreamReadError as e:
                # the stream deserializer wraps every OSError, BadGzipFile included
                if isinstance(e.__cause__, gzip.BadGzipFile):
                    raise BadDataError(f'invalid gzip data: {e.__cause__}') from e.__cause__
                raise

    with open(path, 'rb') as fp:
        return decode(fp, settings=settings)


def write_file(
    path: PathLike,
    node: Node,
    *,
    compression: Optional[FileCompression] = None,
    settings: Optional[NbtSettings] = None,
) -> None:
    """Write `node` to the file at `path`, replacing its contents."""
    compression, settings = _resolve(compression, settings)
    log = logger.new(path=str(path), compression=compression)
    log.debug('writing nbt file')

    # a tree that fails to encode leaves the existing file untouched
    data = encode_bytes(node, settings=settings)

    if compression == 'zlib':
        data = zlib.compress(data)
    elif compression == 'gzip':
        data = gzip.compress(data)

    with open(path, 'wb') as fp:
        fp.write(data)
