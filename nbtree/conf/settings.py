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

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

StringEncoding = Literal['latin-1', 'utf-8']
FileCompression = Literal['gzip', 'zlib', 'none']


class NbtSettings(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Maximum nesting of LIST/COMPOUND containers, the root compound is at depth 0. Each level costs three Python frames
    # when decoding, hitting the interpreter recursion limit first also raises MaxDepthExceededError.
    MAX_DEPTH: int = 256

    # Text encoding of every STRING payload and tag name. Existing files of this NBT variant use latin-1.
    STRING_ENCODING: StringEncoding = 'latin-1'

    # When set, `decode` fails with MaxBytesExceededError after reading this many bytes.
    MAX_INPUT_BYTES: Optional[int] = None

    # Wrapper used by `load_file`/`write_file` when none is given.
    FILE_COMPRESSION: FileCompression = 'gzip'

    @field_validator('MAX_DEPTH')
    @classmethod
    def _check_max_depth(cls, max_depth: int) -> int:
        if max_depth <= 0:
            raise ValueError(f'MAX_DEPTH must be positive, got {max_depth}')
        return max_depth

    @field_validator('MAX_INPUT_BYTES')
    @classmethod
    def _check_max_input_bytes(cls, max_input_bytes: Optional[int]) -> Optional[int]:
        if max_input_bytes is not None and max_input_bytes < 0:
            raise ValueError(f'MAX_INPUT_BYTES cannot be negative, got {max_input_bytes}')
        return max_input_bytes
