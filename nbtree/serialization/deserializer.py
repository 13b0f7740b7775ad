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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, overload

from typing_extensions import Self

from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .stream_deserializer import StreamDeserializer


class Deserializer(ABC):
    """Source of bytes that the decoders consume sequentially.

    Reads are exact: asking for `n` bytes either returns `n` bytes or raises `OutOfDataError`. `is_empty()` is the only
    way to check for the end of the data without failing, the codec uses it to end compounds and truncated lists.
    """

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_stream_deserializer(stream: BinaryIO) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(stream)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Buffer:
        """Read exactly n bytes."""
        raise NotImplementedError

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        """Wrap this deserializer in a byte budget, unless `max_bytes` is None."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
