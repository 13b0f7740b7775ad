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

"""
This module implements FLOAT (IEEE-754 single precision, 4 bytes) and DOUBLE (double precision, 8 bytes).

Values are packed with the host's native byte order and the bytes are reversed when the host is little-endian, so the
wire is always big-endian. The host byte order is detected once, at import, and every function takes a
`host_byte_order` keyword to pretend to be running on the other kind of host.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5)  # writes 3fc00000
>>> encode_double(se, -2.0)  # writes c000000000000000
>>> encode_float(se, 0.25, host_byte_order='big')  # writes 3e800000
>>> bytes(se.finalize()).hex()
'3fc00000c0000000000000003e800000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000c0000000000000003e800000'))
>>> decode_float(de)
1.5
>>> decode_double(de)
-2.0
>>> decode_float(de, host_byte_order='little')
0.25
>>> de.is_empty()
True
"""

import struct
import sys
from typing import Final

from nbtree.serialization import Deserializer, InvalidValueError, Serializer

HOST_BYTE_ORDER: Final[str] = sys.byteorder

_NATIVE_PREFIX = {
    'little': '<',
    'big': '>',
}

FLOAT_FORMAT = 'f'
DOUBLE_FORMAT = 'd'


def _native_prefix(host_byte_order: str) -> str:
    try:
        return _NATIVE_PREFIX[host_byte_order]
    except KeyError:
        raise ValueError(f'unknown byte order: {host_byte_order!r}')


def _encode_ieee754(serializer: Serializer, value: float, format: str, host_byte_order: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError(f'expected a float, got {type(value).__name__}')
    try:
        data = struct.pack(_native_prefix(host_byte_order) + format, value)
    except (struct.error, OverflowError) as e:
        raise InvalidValueError(f'{value} cannot be packed as {format!r}') from e
    if host_byte_order == 'little':
        data = data[::-1]
    serializer.write_bytes(data)


def _decode_ieee754(deserializer: Deserializer, format: str, host_byte_order: str) -> float:
    prefix = _native_prefix(host_byte_order)
    data = bytes(deserializer.read_bytes(struct.calcsize(format)))
    if host_byte_order == 'little':
        data = data[::-1]
    value, = struct.unpack(prefix + format, data)
    return value


def encode_float(serializer: Serializer, value: float, *, host_byte_order: str = HOST_BYTE_ORDER) -> None:
    _encode_ieee754(serializer, value, FLOAT_FORMAT, host_byte_order)


def decode_float(deserializer: Deserializer, *, host_byte_order: str = HOST_BYTE_ORDER) -> float:
    return _decode_ieee754(deserializer, FLOAT_FORMAT, host_byte_order)


def encode_double(serializer: Serializer, value: float, *, host_byte_order: str = HOST_BYTE_ORDER) -> None:
    _encode_ieee754(serializer, value, DOUBLE_FORMAT, host_byte_order)


def decode_double(deserializer: Deserializer, *, host_byte_order: str = HOST_BYTE_ORDER) -> float:
    return _decode_ieee754(deserializer, DOUBLE_FORMAT, host_byte_order)
