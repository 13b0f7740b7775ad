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
This module implements the fixed-size integers of NBT: BYTE (8 bits), SHORT (16), INT (32) and LONG (64).

They are all signed, big-endian and two's-complement on the wire. Decoding reads the unsigned wire value and converts it
with `unsigned_to_signed`, encoding does the inverse with `signed_to_unsigned` before emitting the bytes. A LONG is
handled as two unsigned 32-bit halves, high half first, recombined with Python's arbitrary-precision `int`.

SHORT, INT and LONG encoding accepts both the signed value and its unsigned representation (`encode_short(se, 65535)`
and `encode_short(se, -1)` both write `ffff`), anything outside of that range is an error instead of being truncated.
BYTE is the exception: only its low 8 bits are written, so `encode_byte(se, 0x1ff)` writes `ff`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_byte(se, -1)  # writes ff
>>> encode_short(se, 1234)  # writes 04d2
>>> encode_short(se, -1234)  # writes fb2e
>>> encode_int(se, -2)  # writes fffffffe
>>> encode_long(se, 2**32 + 5)  # writes 0000000100000005
>>> bytes(se.finalize()).hex()
'ff04d2fb2efffffffe0000000100000005'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ff04d2fb2efffffffe0000000100000005'))
>>> decode_byte(de)  # reads ff
-1
>>> decode_short(de)  # reads 04d2
1234
>>> decode_short(de)  # reads fb2e
-1234
>>> decode_int(de)  # reads fffffffe
-2
>>> decode_long(de)  # reads 0000000100000005
4294967301
>>> de.is_empty()
True

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_short(se, 70000)
... except InvalidValueError as e:
...     print(*e.args)
70000 does not fit in 16 bits
"""

from nbtree.serialization import Deserializer, InvalidValueError, Serializer

BYTE_BITS = 8
SHORT_BITS = 16
INT_BITS = 32
LONG_BITS = 64

_BYTE_MASK = 0xFF
_HALF_MASK = 0xFFFF_FFFF


def unsigned_to_signed(value: int, bits: int) -> int:
    """Convert the unsigned `bits`-wide value to signed, subtracting 2**bits when it is >= 2**(bits-1).

    >>> unsigned_to_signed(0xFFFF, 16)
    -1
    >>> unsigned_to_signed(0x7FFF, 16)
    32767
    """
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def signed_to_unsigned(value: int, bits: int) -> int:
    """Inverse of `unsigned_to_signed`, adds 2**bits to negative values.

    >>> signed_to_unsigned(-1, 16)
    65535
    >>> signed_to_unsigned(32767, 16)
    32767
    """
    if value < 0:
        value += 1 << bits
    return value


def _check_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f'expected an int, got {type(value).__name__}')


def _to_wire(value: int, bits: int) -> int:
    _check_int(value)
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise InvalidValueError(f'{value} does not fit in {bits} bits')
    return signed_to_unsigned(value, bits)


def encode_unsigned(serializer: Serializer, value: int, *, bits: int) -> None:
    """Write a plain unsigned big-endian value, used for length prefixes."""
    if not 0 <= value < (1 << bits):
        raise InvalidValueError(f'{value} does not fit in {bits} unsigned bits')
    serializer.write_bytes(value.to_bytes(bits // 8, byteorder='big'))


def decode_unsigned(deserializer: Deserializer, *, bits: int) -> int:
    data = deserializer.read_bytes(bits // 8)
    return int.from_bytes(data, byteorder='big')


def encode_byte(serializer: Serializer, value: int) -> None:
    """Write the low 8 bits of `value`.

    >>> se = Serializer.build_bytes_serializer()
    >>> encode_byte(se, 0x1ff)
    >>> encode_byte(se, -129)
    >>> bytes(se.finalize()).hex()
    'ff7f'
    """
    _check_int(value)
    serializer.write_byte(value & _BYTE_MASK)


def decode_byte(deserializer: Deserializer) -> int:
    return unsigned_to_signed(deserializer.read_byte(), BYTE_BITS)


def encode_short(serializer: Serializer, value: int) -> None:
    encode_unsigned(serializer, _to_wire(value, SHORT_BITS), bits=SHORT_BITS)


def decode_short(deserializer: Deserializer) -> int:
    return unsigned_to_signed(decode_unsigned(deserializer, bits=SHORT_BITS), SHORT_BITS)


def encode_int(serializer: Serializer, value: int) -> None:
    encode_unsigned(serializer, _to_wire(value, INT_BITS), bits=INT_BITS)


def decode_int(deserializer: Deserializer) -> int:
    return unsigned_to_signed(decode_unsigned(deserializer, bits=INT_BITS), INT_BITS)


def encode_long(serializer: Serializer, value: int) -> None:
    """ Encode a LONG as its high and low unsigned 32-bit halves.

    This modules's docstring has more details and examples.
    """
    unsigned = _to_wire(value, LONG_BITS)
    encode_unsigned(serializer, (unsigned >> 32) & _HALF_MASK, bits=32)
    encode_unsigned(serializer, unsigned & _HALF_MASK, bits=32)


def decode_long(deserializer: Deserializer) -> int:
    """ Decode a LONG from its high and low unsigned 32-bit halves.

    This modules's docstring has more details and examples.
    """
    high = decode_unsigned(deserializer, bits=32)
    low = decode_unsigned(deserializer, bits=32)
    return unsigned_to_signed((high << 32) | low, LONG_BITS)
