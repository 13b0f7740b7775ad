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
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    """Sink of bytes that the encoders write to, in order, without ever seeking back."""

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_stream_serializer(stream: BinaryIO) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(stream)

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    def flush(self) -> None:
        """Push any buffered bytes to the underlying sink, a no-op for in-memory serializers."""
        pass

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte, given as an unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        """Write all of the given bytes or fail."""
        raise NotImplementedError

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Wrap this serializer in a byte budget, unless `max_bytes` is None."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
