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


class SerializationError(Exception):
    """Base class for every error raised while encoding or decoding NBT data."""
    pass


class StreamError(SerializationError):
    """The underlying byte stream could not provide or accept the requested bytes."""
    pass


class OutOfDataError(StreamError):
    """End of stream reached before the expected number of bytes was available."""
    pass


class StreamReadError(StreamError):
    pass


class StreamWriteError(StreamError):
    """A write could not fully commit its bytes."""
    pass


class BadDataError(SerializationError):
    """The bytes read are not a valid encoding of the expected value."""
    pass


class TooLongError(SerializationError):
    """A length does not fit in its length prefix."""
    pass


class InvalidValueError(SerializationError):
    """A value cannot be represented by the wire type it is being written as."""
    pass


class StructuralError(SerializationError):
    """The tree, either on the wire or in memory, is not well-formed."""
    pass


class UnsupportedTagTypeError(StructuralError):
    pass


class MaxDepthExceededError(StructuralError):
    pass


class NoTagError(StructuralError):
    """There was no tag to read at the top level."""
    pass


class InvalidNodeError(StructuralError):
    pass


class MaxBytesExceededError(SerializationError):
    """ Raised when a bounded (de)serializer would go past its byte budget.

    The whole encode/decode that was running must be considered failed, whatever was already read or written is not
    meaningful on its own.
    """
    pass
