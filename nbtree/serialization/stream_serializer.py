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

from typing import BinaryIO

from typing_extensions import override

from .exceptions import InvalidValueError, StreamWriteError
from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Serializer writing directly to a binary file object.

    Raw streams are allowed to accept fewer bytes than given, the remainder is written again until everything is
    committed. A write that accepts nothing is a failure. The stream is not closed by this class.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @override
    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise StreamWriteError(f'failed to flush stream: {e}') from e

    @override
    def write_byte(self, data: int) -> None:
        try:
            part = int.to_bytes(data, length=1, byteorder='big')
        except OverflowError as e:
            raise InvalidValueError(f'not a byte: {data}') from e
        self.write_bytes(part)

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        while view:
            try:
                written = self._stream.write(view)
            except OSError as e:
                raise StreamWriteError(f'failed to write to stream: {e}') from e
            if not written:
                raise StreamWriteError(f'stream did not accept {len(view)} pending bytes')
            view = view[written:]
