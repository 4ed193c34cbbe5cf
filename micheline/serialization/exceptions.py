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

from micheline.exception import MichelineError


class SerializationError(MichelineError):
    """Base class for every error raised while encoding or decoding."""
    pass


class TruncatedInputError(SerializationError):
    """Raised when a read goes past the end of the available data."""
    pass


class BadDataError(SerializationError):
    """Raised when the data is available but cannot be parsed."""
    pass


class UnknownTagError(BadDataError):
    """Raised when the discriminant byte of a node is not a known tag."""

    def __init__(self, tag: int) -> None:
        super().__init__(f'unknown node tag: {tag:#04x}')
        self.tag = tag


class InvalidPrimitiveError(BadDataError):
    """Raised when the primitive capability rejects its encoded value."""
    pass


class InvalidUtf8Error(BadDataError):
    """Raised when a string or annotation payload is not valid UTF-8."""
    pass


class FrameLengthMismatchError(BadDataError):
    """Raised when the children of a framed list do not add up to the declared length."""
    pass


class TrailingDataError(BadDataError):
    """Raised when there are bytes left after the root node."""
    pass


class IntegerOutOfRangeError(SerializationError):
    """Raised when an integer does not fit the integer backing of the zarith codec.

    This happens both when encoding (the value is a precondition violation) and when decoding (the encoded magnitude
    is too big).
    """
    pass


class InvalidAnnotationError(SerializationError):
    """Raised when an annotation cannot be encoded without breaking the space-separated format."""
    pass


class NestingTooDeepError(SerializationError):
    """Raised when a tree is nested deeper than the configured maximum depth."""
    pass


class TooLongError(SerializationError):
    """Raised when a length does not fit its length prefix."""
    pass


class MaxBytesExceededError(SerializationError):
    """Raised when an encoded tree grows past `MAX_ENCODED_BYTES`.

    The serializer that raised it cannot be used anymore, its output is incomplete.
    """
    pass
