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

from typing import Generic, TypeVar

from typing_extensions import override

from nbtree.serialization.deserializer import Deserializer
from nbtree.serialization.exceptions import MaxBytesExceededError
from nbtree.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesSerializer(Serializer, Generic[S]):
    """Serializer that forwards to `inner` and fails before writing past `max_bytes` in total.

    The budget is only spent by writes that succeed.
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        self.inner = serializer
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return self._bytes_left

    def _check(self, write_size: int) -> None:
        if write_size > self._bytes_left:
            raise MaxBytesExceededError(f'write of {write_size} bytes exceeds the {self._bytes_left} bytes left')

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def flush(self) -> None:
        self.inner.flush()

    @override
    def write_byte(self, data: int) -> None:
        self._check(1)
        self.inner.write_byte(data)
        self._bytes_left -= 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        size = memoryview(data).nbytes
        self._check(size)
        self.inner.write_bytes(data)
        self._bytes_left -= size


class MaxBytesDeserializer(Deserializer, Generic[D]):
    """Deserializer that forwards to `inner` and fails before reading past `max_bytes` in total.

    The budget is only spent by reads that succeed.
    """

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return self._bytes_left

    def _check(self, read_size: int) -> None:
        if read_size > self._bytes_left:
            raise MaxBytesExceededError(f'read of {read_size} bytes exceeds the {self._bytes_left} bytes left')

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def read_byte(self) -> int:
        self._check(1)
        b = self.inner.read_byte()
        self._bytes_left -= 1
        return b

    @override
    def read_bytes(self, n: int) -> Buffer:
        self._check(n)
        data = self.inner.read_bytes(n)
        self._bytes_left -= n
        return data
