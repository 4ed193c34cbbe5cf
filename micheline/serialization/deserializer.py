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
from typing import TYPE_CHECKING

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    """Read side of the serialization layer.

    Every read is bounds-checked: implementations raise `TruncatedInputError` instead of reading past the end of the
    data, so decoders built on top of this never index a buffer directly.
    """

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of bytes consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_byte(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Buffer:
        """Consume exactly `n` bytes."""
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Consume everything that is left, possibly nothing."""
        raise NotImplementedError
