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

from enum import IntEnum

from nbtree.serialization import UnsupportedTagTypeError


class TagType(IntEnum):
    """Wire code of every kind of tag, written as a single unsigned byte."""

    END = 0  # end of compound, never materialized as a node
    BYTE = 1  # signed, 8 bits
    SHORT = 2  # signed, 16 bits, big endian
    INT = 3  # signed, 32 bits, big endian
    LONG = 4  # signed, 64 bits, big endian
    FLOAT = 5  # IEEE-754 single precision, big endian
    DOUBLE = 6  # IEEE-754 double precision, big endian
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12

    @classmethod
    def from_code(cls, code: int) -> 'TagType':
        """Return the tag type for a wire code, unknown codes are never skipped.

        >>> TagType.from_code(10)
        <TagType.COMPOUND: 10>
        >>> TagType.from_code(200)
        Traceback (most recent call last):
        ...
        nbtree.serialization.exceptions.UnsupportedTagTypeError: Unsupported tag type: 200
        """
        try:
            return cls(code)
        except ValueError:
            raise UnsupportedTagTypeError(f'Unsupported tag type: {code}') from None

    @property
    def is_container(self) -> bool:
        return self in (TagType.LIST, TagType.COMPOUND)

    @property
    def is_array(self) -> bool:
        return self in (TagType.BYTE_ARRAY, TagType.INT_ARRAY, TagType.LONG_ARRAY)
