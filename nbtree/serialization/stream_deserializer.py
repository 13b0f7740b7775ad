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

from .deserializer import Deserializer
from .exceptions import OutOfDataError, StreamReadError

# upper bound of a single read() on the wrapped stream
_READ_CHUNK_SIZE = 64 * 1024


class StreamDeserializer(Deserializer):
    """Deserializer reading from a binary file object.

    The stream is never seeked. Bytes read ahead of time (including the single byte `is_empty` needs) are kept in a
    look-ahead buffer, so this works on pipes, sockets and decompressing readers as well as on regular files.

    The stream is not closed by this class.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead = bytearray()
        self._eof = False

    def _fill(self, n: int) -> None:
        """Try to have at least n bytes in the look-ahead buffer, stops early only at the end of the stream."""
        while len(self._lookahead) < n and not self._eof:
            try:
                chunk = self._stream.read(min(n - len(self._lookahead), _READ_CHUNK_SIZE))
            except OSError as e:
                raise StreamReadError(f'failed to read from stream: {e}') from e
            if not chunk:
                self._eof = True
                break
            self._lookahead += chunk

    @override
    def is_empty(self) -> bool:
        self._fill(1)
        return not self._lookahead

    @override
    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    @override
    def read_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._fill(n)
        if len(self._lookahead) < n:
            raise OutOfDataError(f'not enough bytes to read: wanted {n}, have {len(self._lookahead)}')
        data = bytes(self._lookahead[:n])
        del self._lookahead[:n]
        return data
