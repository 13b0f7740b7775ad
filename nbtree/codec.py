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

r"""
Reading and writing whole NBT trees.

A tag is written as [type: 1 byte][name: string][payload]. The payload of a COMPOUND is a sequence of tags terminated by
a lone END byte, the payload of a LIST is [element type: 1 byte][count: INT] followed by `count` payloads with no type
or name of their own.

>>> from nbtree.tag import tag_compound, tag_int
>>> data = encode_bytes(tag_compound('root', [tag_int('x', 42)]))
>>> data.hex()
'0a0004726f6f74030001780000002a00'

Breakdown of the result:

    0a: COMPOUND
    0004726f6f74: 'root'
    03: INT
    000178: 'x'
    0000002a: 42
    00: END, closes 'root'

>>> decode_bytes(data)
Node(type=COMPOUND, name='root', children=[Node(type=INT, name='x', value=42)])
"""

from functools import partial
from typing import BinaryIO, Callable, Optional

from structlog import get_logger

from nbtree.conf.get_settings import get_global_settings
from nbtree.conf.settings import NbtSettings
from nbtree.node import Node, NodeValue
from nbtree.serialization import (
    Deserializer,
    InvalidNodeError,
    MaxDepthExceededError,
    NoTagError,
    Serializer,
    StructuralError,
    UnsupportedTagTypeError,
)
from nbtree.serialization.encoding.array import (
    decode_byte_array,
    decode_int_array,
    decode_long_array,
    encode_byte_array,
    encode_int_array,
    encode_long_array,
)
from nbtree.serialization.encoding.float import decode_double, decode_float, encode_double, encode_float
from nbtree.serialization.encoding.int import (
    decode_byte,
    decode_int,
    decode_long,
    decode_short,
    encode_byte,
    encode_int,
    encode_long,
    encode_short,
)
from nbtree.serialization.encoding.string import decode_string, encode_string
from nbtree.serialization.types import Buffer
from nbtree.tag_type import TagType

logger = get_logger()

_ValueDecoder = Callable[[Deserializer], NodeValue]
_ValueEncoder = Callable[[Serializer, NodeValue], None]


class TreeCodec:
    """ Recursive encoder/decoder of NBT trees.

    Leaf payloads are delegated to the encoders in `nbtree.serialization.encoding`, this class only deals with tags,
    names and the nesting of LIST and COMPOUND. Nesting is limited to `settings.MAX_DEPTH` levels both when reading
    and when writing. Running into the interpreter recursion limit first raises the same MaxDepthExceededError.

    Any error aborts the whole operation, the only tolerated anomaly is a LIST whose data ends before all of its
    elements were read: the elements that were read are kept and decoding stops there.
    """

    def __init__(self, settings: Optional[NbtSettings] = None) -> None:
        self._settings = settings if settings is not None else get_global_settings()
        self.log = logger.new()

        encoding = self._settings.STRING_ENCODING
        self._decode_string = partial(decode_string, encoding=encoding)
        self._encode_string = partial(encode_string, encoding=encoding)

        self._value_decoders: dict[TagType, _ValueDecoder] = {
            TagType.BYTE: decode_byte,
            TagType.SHORT: decode_short,
            TagType.INT: decode_int,
            TagType.LONG: decode_long,
            TagType.FLOAT: decode_float,
            TagType.DOUBLE: decode_double,
            TagType.BYTE_ARRAY: decode_byte_array,
            TagType.STRING: self._decode_string,
            TagType.INT_ARRAY: decode_int_array,
            TagType.LONG_ARRAY: decode_long_array,
        }
        self._value_encoders: dict[TagType, _ValueEncoder] = {
            TagType.BYTE: encode_byte,
            TagType.SHORT: encode_short,
            TagType.INT: encode_int,
            TagType.LONG: encode_long,
            TagType.FLOAT: encode_float,
            TagType.DOUBLE: encode_double,
            TagType.BYTE_ARRAY: encode_byte_array,
            TagType.STRING: self._encode_string,
            TagType.INT_ARRAY: encode_int_array,
            TagType.LONG_ARRAY: encode_long_array,
        }

    @property
    def settings(self) -> NbtSettings:
        return self._settings

    def _check_depth(self, depth: int) -> None:
        if depth >= self._settings.MAX_DEPTH:
            raise MaxDepthExceededError(f'nesting is deeper than {self._settings.MAX_DEPTH} levels')

    def read(self, deserializer: Deserializer) -> Node:
        """Read exactly one top-level tag, bytes after it are left in the deserializer."""
        root = Node()
        try:
            found = self.read_tag(deserializer, root)
        except RecursionError as e:
            raise MaxDepthExceededError('nesting is deeper than the interpreter recursion limit allows') from e
        if not found:
            raise NoTagError('there is no tag to read')
        self.log.debug('tree decoded', name=root.name, type=root.type)
        return root

    def write(self, serializer: Serializer, node: Node) -> None:
        try:
            self.write_tag(serializer, node)
        except RecursionError as e:
            raise MaxDepthExceededError('nesting is deeper than the interpreter recursion limit allows') from e
        serializer.flush()

    def read_tag(self, deserializer: Deserializer, node: Node, depth: int = 0) -> bool:
        """ Read a full tag (type, name and payload) into `node`.

        Returns False, leaving `node` untouched, when the data is exhausted or an END is read (END is consumed).
        """
        if deserializer.is_empty():
            return False
        tag_type = TagType.from_code(deserializer.read_byte())
        if tag_type == TagType.END:
            return False
        node.type = tag_type
        node.name = self._decode_string(deserializer)
        self.read_payload(deserializer, tag_type, node, depth)
        return True

    def read_payload(self, deserializer: Deserializer, tag_type: TagType, node: Node, depth: int = 0) -> None:
        value_decoder = self._value_decoders.get(tag_type)
        if value_decoder is not None:
            node.value = value_decoder(deserializer)
        elif tag_type == TagType.LIST:
            self._read_list(deserializer, node, depth)
        elif tag_type == TagType.COMPOUND:
            self._read_compound(deserializer, node, depth)
        else:
            raise UnsupportedTagTypeError(f'Unsupported tag type: {tag_type!r}')

    def _read_list(self, deserializer: Deserializer, node: Node, depth: int) -> None:
        self._check_depth(depth)
        payload_type = TagType.from_code(deserializer.read_byte())
        length = decode_int(deserializer)
        node.payload_type = payload_type
        if payload_type == TagType.END and length > 0:
            raise StructuralError(f'list of END cannot have elements, it claims {length}')
        for i in range(length):
            if deserializer.is_empty():
                self.log.debug('list data ended early', name=node.name, expected=length, read=i)
                break
            element = Node.new_list_payload()
            self.read_payload(deserializer, payload_type, element, depth + 1)
            node.add_child(element)

    def _read_compound(self, deserializer: Deserializer, node: Node, depth: int) -> None:
        self._check_depth(depth)
        child = Node()
        while self.read_tag(deserializer, child, depth + 1):
            node.add_child(child)
            child = Node()

    def write_tag(self, serializer: Serializer, node: Node, depth: int = 0) -> None:
        if node.is_list_payload:
            raise InvalidNodeError('a list payload cannot be written as a tag')
        if node.type is None:
            raise InvalidNodeError(f'tag {node.name!r} has no type')
        if node.name is None:
            raise InvalidNodeError(f'{node.type!r} tag has no name')
        tag_type = TagType.from_code(node.type)
        if tag_type == TagType.END:
            raise InvalidNodeError('END is a terminator and cannot be written as a tag')
        serializer.write_byte(tag_type)
        self._encode_string(serializer, node.name)
        self.write_payload(serializer, tag_type, node, depth)

    def write_payload(self, serializer: Serializer, tag_type: TagType, node: Node, depth: int = 0) -> None:
        value_encoder = self._value_encoders.get(tag_type)
        if value_encoder is not None:
            value_encoder(serializer, node.value)
        elif tag_type == TagType.LIST:
            self._write_list(serializer, node, depth)
        elif tag_type == TagType.COMPOUND:
            self._write_compound(serializer, node, depth)
        else:
            raise UnsupportedTagTypeError(f'Unsupported tag type: {tag_type!r}')

    def _write_list(self, serializer: Serializer, node: Node, depth: int) -> None:
        self._check_depth(depth)
        if node.payload_type is None:
            raise InvalidNodeError(f'list {node.name!r} has no payload type')
        payload_type = TagType.from_code(node.payload_type)
        children = node.children
        if payload_type == TagType.END and children:
            raise InvalidNodeError(f'list {node.name!r} of END cannot have elements')
        serializer.write_byte(payload_type)
        encode_int(serializer, len(children))
        for child in children:
            if not child.is_list_payload:
                raise InvalidNodeError(f'element of list {node.name!r} is not a list payload')
            self.write_payload(serializer, payload_type, child, depth + 1)

    def _write_compound(self, serializer: Serializer, node: Node, depth: int) -> None:
        self._check_depth(depth)
        for child in node.children:
            self.write_tag(serializer, child, depth + 1)
        serializer.write_byte(TagType.END)


def _as_deserializer(stream: Deserializer | BinaryIO) -> Deserializer:
    if isinstance(stream, Deserializer):
        return stream
    return Deserializer.build_stream_deserializer(stream)


def _as_serializer(stream: Serializer | BinaryIO) -> Serializer:
    if isinstance(stream, Serializer):
        return stream
    return Serializer.build_stream_serializer(stream)


def decode(
    stream: Deserializer | BinaryIO,
    *,
    settings: Optional[NbtSettings] = None,
    max_bytes: Optional[int] = None,
) -> Node:
    """ Decode one tree from a deserializer or a binary file object.

    `max_bytes` bounds how much is read, it defaults to `settings.MAX_INPUT_BYTES`.
    """
    codec = TreeCodec(settings)
    if max_bytes is None:
        max_bytes = codec.settings.MAX_INPUT_BYTES
    deserializer = _as_deserializer(stream).with_optional_max_bytes(max_bytes)
    return codec.read(deserializer)


def encode(
    stream: Serializer | BinaryIO,
    node: Node,
    *,
    settings: Optional[NbtSettings] = None,
    max_bytes: Optional[int] = None,
) -> None:
    """Encode a tree to a serializer or a binary file object, `max_bytes` optionally bounds how much is written."""
    codec = TreeCodec(settings)
    serializer = _as_serializer(stream).with_optional_max_bytes(max_bytes)
    codec.write(serializer, node)


def decode_bytes(data: Buffer, *, settings: Optional[NbtSettings] = None) -> Node:
    """Decode one tree from an in-memory byte sequence, trailing bytes are ignored."""
    return decode(Deserializer.build_bytes_deserializer(data), settings=settings)


def encode_bytes(node: Node, *, settings: Optional[NbtSettings] = None) -> bytes:
    serializer = Serializer.build_bytes_serializer()
    encode(serializer, node, settings=settings)
    return bytes(serializer.finalize())
