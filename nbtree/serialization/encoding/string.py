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
This module implements NBT strings: an unsigned 16-bit big-endian byte length followed by the encoded text.

The text encoding defaults to Latin-1, one byte per character, which is what existing files of this NBT variant
contain. UTF-8 can be selected with `encoding='utf-8'`, see `NbtSettings.STRING_ENCODING`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_string(se, 'hi')  # writes 00026869
>>> encode_string(se, 'café')  # writes 0004636166e9
>>> encode_string(se, 'café', encoding='utf-8')  # writes 0005636166c3a9
>>> bytes(se.finalize()).hex()
'000268690004636166e90005636166c3a9'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000268690004636166e90005636166c3a9'))
>>> decode_string(de)
'hi'
>>> decode_string(de)
'café'
>>> decode_string(de, encoding='utf-8')
'café'
>>> de.is_empty()
True

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_string(se, '😎')
... except InvalidValueError as e:
...     print(*e.args)
text cannot be encoded as 'latin-1'
"""

from nbtree.serialization import BadDataError, Deserializer, InvalidValueError, Serializer, TooLongError

from .int import SHORT_BITS, decode_unsigned, encode_unsigned

DEFAULT_STRING_ENCODING = 'latin-1'
MAX_STRING_LENGTH = (1 << SHORT_BITS) - 1


def encode_string(serializer: Serializer, value: str, *, encoding: str = DEFAULT_STRING_ENCODING) -> None:
    """ Encodes a string adding a 16-bit length prefix.

    This modules's docstring has more details and examples.
    """
    if not isinstance(value, str):
        raise InvalidValueError(f'expected a str, got {type(value).__name__}')
    try:
        data = value.encode(encoding)
    except UnicodeEncodeError as e:
        raise InvalidValueError(f'text cannot be encoded as {encoding!r}') from e
    if len(data) > MAX_STRING_LENGTH:
        raise TooLongError(f'string is {len(data)} bytes long, maximum is {MAX_STRING_LENGTH}')
    encode_unsigned(serializer, len(data), bits=SHORT_BITS)
    serializer.write_bytes(data)


def decode_string(deserializer: Deserializer, *, encoding: str = DEFAULT_STRING_ENCODING) -> str:
    """ Decodes a string with a 16-bit length prefix.

    This modules's docstring has more details and examples.
    """
    length = decode_unsigned(deserializer, bits=SHORT_BITS)
    data = bytes(deserializer.read_bytes(length))
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise BadDataError(f'text is not valid {encoding!r}') from e
