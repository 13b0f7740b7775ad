#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
An array is a sequence of scalars of a single kind prefixed by its element count.

Layout: [N: signed INT][value_0]...[value_N-1]

N is a regular signed INT, a negative count is malformed data.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int_array(se, [1, -1])
>>> bytes(se.finalize()).hex()
'0000000200000001ffffffff'

Breakdown of the result:

    00000002: 2 as INT, the element count
    00000001: 1 as INT
    ffffffff: -1 as INT

Byte arrays decode to a list of signed values, `bytes` can be given when encoding:

>>> se = Serializer.build_bytes_serializer()
>>> encode_byte_array(se, b'\x01\xff')
>>> data = bytes(se.finalize())
>>> data.hex()
'0000000201ff'
>>> decode_byte_array(Deserializer.build_bytes_deserializer(data))
[1, -1]

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff'))
>>> try:
...     decode_long_array(de)
... except BadDataError as e:
...     print(*e.args)
negative array length: -1
"""

from collections.abc import Sequence
from typing import TypeVar

from nbtree.serialization import BadDataError, Deserializer, InvalidValueError, Serializer, TooLongError

from . import Decoder, Encoder
from .int import BYTE_BITS, decode_int, decode_long, encode_byte, encode_int, encode_long, unsigned_to_signed

T = TypeVar('T')

MAX_ARRAY_LENGTH = (1 << 31) - 1


def encode_array(serializer: Serializer, values: Sequence[T], encoder: Encoder[T]) -> None:
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Sequence):
        raise InvalidValueError(f'expected a sequence, got {type(values).__name__}')
    if len(values) > MAX_ARRAY_LENGTH:
        raise TooLongError(f'array has {len(values)} elements, maximum is {MAX_ARRAY_LENGTH}')
    encode_int(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_array_length(deserializer: Deserializer) -> int:
    length = decode_int(deserializer)
    if length < 0:
        raise BadDataError(f'negative array length: {length}')
    return length


def decode_array(deserializer: Deserializer, decoder: Decoder[T]) -> list[T]:
    length = decode_array_length(deserializer)
    return [decoder(deserializer) for _ in range(length)]


def encode_byte_array(serializer: Serializer, values: Sequence[int] | bytes | bytearray) -> None:
    if isinstance(values, (bytes, bytearray)):
        if len(values) > MAX_ARRAY_LENGTH:
            raise TooLongError(f'array has {len(values)} elements, maximum is {MAX_ARRAY_LENGTH}')
        encode_int(serializer, len(values))
        serializer.write_bytes(values)
        return
    encode_array(serializer, values, encode_byte)


def decode_byte_array(deserializer: Deserializer) -> list[int]:
    length = decode_array_length(deserializer)
    data = bytes(deserializer.read_bytes(length))
    return [unsigned_to_signed(b, BYTE_BITS) for b in data]


def encode_int_array(serializer: Serializer, values: Sequence[int]) -> None:
    encode_array(serializer, values, encode_int)


def decode_int_array(deserializer: Deserializer) -> list[int]:
    return decode_array(deserializer, decode_int)


def encode_long_array(serializer: Serializer, values: Sequence[int]) -> None:
    encode_array(serializer, values, encode_long)


def decode_long_array(deserializer: Deserializer) -> list[int]:
    return decode_array(deserializer, decode_long)
