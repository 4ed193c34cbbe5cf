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

from micheline.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)


class GenericSerializerAdapter(Serializer, Generic[S]):
    """Serializer that forwards every call to `inner`, subclasses override the calls they need to intercept."""

    inner: S

    def __init__(self, serializer: S) -> None:
        self.inner = serializer

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self.inner.write_bytes(data)

    @override
    def reserve_bytes(self, n: int) -> int:
        return self.inner.reserve_bytes(n)

    @override
    def fill_reserved(self, handle: int, data: Buffer) -> None:
        self.inner.fill_reserved(handle, data)
