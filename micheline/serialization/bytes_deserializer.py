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
from .exceptions import TrailingDataError, TruncatedInputError
from .types import Buffer

_EMPTY_VIEW = memoryview(b'')


class BytesDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence.

    This implementation maintains a memoryview that is shortened as the bytes are read. The view is only held while
    decoding, values that outlive the decoding must be copied out of it (`bytes(...)`).
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data)
        self._pos = 0

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError('trailing data')
        del self._view

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def is_empty(self) -> bool:
        # XXX: least amount of OPs, "not" converts to bool with the correct semantics of "is empty"
        return not self._view

    @override
    def peek_byte(self) -> int:
        if not len(self._view):
            raise TruncatedInputError('not enough bytes to read')
        return self._view[0]

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._view = self._view[1:]
        self._pos += 1
        return b

    @override
    def read_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._view) < n:
            raise TruncatedInputError(f'not enough bytes to read: {n} requested, {len(self._view)} available')
        b = self._view[:n]
        self._view = self._view[n:]
        self._pos += n
        return b

    @override
    def read_all(self) -> memoryview:
        b = self._view
        self._view = _EMPTY_VIEW
        self._pos += len(b)
        return b
