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

from typing_extensions import override

from .exceptions import InvalidValueError
from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """In-memory Serializer, every write is kept as a separate part until finalize joins them."""

    def __init__(self) -> None:
        self._parts: list[bytes] = []

    @override
    def finalize(self) -> bytes:
        result = b''.join(self._parts)
        del self._parts
        return result

    @override
    def write_byte(self, data: int) -> None:
        try:
            part = int.to_bytes(data, length=1, byteorder='big')
        except OverflowError as e:
            raise InvalidValueError(f'not a byte: {data}') from e
        self._parts.append(part)

    @override
    def write_bytes(self, data: Buffer) -> None:
        # copy, the caller may reuse a bytearray after writing it
        self._parts.append(bytes(data))
