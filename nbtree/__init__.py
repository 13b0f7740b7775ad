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
Reader and writer of NBT, the named binary tree format.

The entry points are `decode`/`encode` for binary streams, `decode_bytes`/`encode_bytes` for in-memory data and
`load_file`/`write_file` for (possibly compressed) files. Trees are made of `Node` objects, usually built with the
helpers in `nbtree.tag`.
"""

from nbtree.codec import TreeCodec, decode, decode_bytes, encode, encode_bytes
from nbtree.conf import NbtSettings
from nbtree.file import load_file, write_file
from nbtree.node import Node, NodeValue
from nbtree.serialization import (
    BadDataError,
    InvalidNodeError,
    InvalidValueError,
    MaxBytesExceededError,
    MaxDepthExceededError,
    NoTagError,
    OutOfDataError,
    SerializationError,
    StructuralError,
    UnsupportedTagTypeError,
)
from nbtree.tag import (
    tag_byte,
    tag_byte_array,
    tag_compound,
    tag_double,
    tag_float,
    tag_int,
    tag_int_array,
    tag_list,
    tag_long,
    tag_long_array,
    tag_short,
    tag_string,
)
from nbtree.tag_type import TagType
from nbtree.version import __version__

__all__ = [
    'TreeCodec',
    'decode',
    'decode_bytes',
    'encode',
    'encode_bytes',
    'NbtSettings',
    'load_file',
    'write_file',
    'Node',
    'NodeValue',
    'TagType',
    'tag_byte',
    'tag_short',
    'tag_int',
    'tag_long',
    'tag_float',
    'tag_double',
    'tag_byte_array',
    'tag_string',
    'tag_int_array',
    'tag_long_array',
    'tag_list',
    'tag_compound',
    'SerializationError',
    'OutOfDataError',
    'BadDataError',
    'InvalidValueError',
    'StructuralError',
    'UnsupportedTagTypeError',
    'MaxDepthExceededError',
    'NoTagError',
    'InvalidNodeError',
    'MaxBytesExceededError',
    '__version__',
]
