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

from .deserializer import Deserializer
from .exceptions import OutOfDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over an in-memory byte sequence, reads return views into it without copying."""

    def __init__(self, data: Buffer) -> None:
        self._data = memoryview(data).cast('B')
        self._offset = 0

    def _remaining(self) -> int:
        return len(self._data) - self._offset

    @override
    def is_empty(self) -> bool:
        return self._remaining() == 0

    @override
    def read_byte(self) -> int:
        if self.is_empty():
            raise OutOfDataError('not enough bytes to read')
        b = self._data[self._offset]
        self._offset += 1
        return b

    @override
    def read_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if self._remaining() < n:
            raise OutOfDataError(f'not enough bytes to read: wanted {n}, have {self._remaining()}')
        start = self._offset
        self._offset += n
        return self._data[start:self._offset]
