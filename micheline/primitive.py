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

from typing import Protocol, TypeVar

from typing_extensions import Self

from micheline.serialization import Deserializer, InvalidPrimitiveError, Serializer

P = TypeVar('P', bound='Primitive')


class Primitive(Protocol):
    """What the tree codec needs from a primitive type.

    The codec never looks at primitive values, it only forwards these calls. Encoding must have a fixed width so that
    a primitive can be read back without any framing.
    """

    def encode_primitive(self, serializer: Serializer) -> None:
        ...

    @classmethod
    def decode_primitive(cls, deserializer: Deserializer) -> Self:
        """Read a primitive, raises `InvalidPrimitiveError` when the encoded value is not part of the type."""
        ...


class BytePrimitive:
    """Mixin for primitive tables defined as an `IntEnum`, each member is encoded as a single byte with its value.

    Use it as `class MyPrimitive(BytePrimitive, IntEnum)`.
    """

    def encode_primitive(self, serializer: Serializer) -> None:
        assert isinstance(self, int)
        serializer.write_byte(self)

    @classmethod
    def decode_primitive(cls, deserializer: Deserializer) -> Self:
        value = deserializer.read_byte()
        try:
            return cls(value)  # type: ignore[call-arg]
        except ValueError:
            raise InvalidPrimitiveError(f'{value:#04x} is not a valid {cls.__name__}') from None
