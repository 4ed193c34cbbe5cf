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

r"""
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a 4-byte
big-endian unsigned integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'ab')  # will prepend b'\x00\x00\x00\x02' before writing b'ab'
>>> bytes(se.finalize()).hex()
'000000026162'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'')
>>> bytes(se.finalize()).hex()
'00000000'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x04test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x04testfoo')
>>> _ = decode_bytes(de)
>>> bytes(de.read_all())
b'foo'

A length prefix bigger than what is left is an error, never a short read:

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x08test')
>>> try:
...     decode_bytes(de)
... except TruncatedInputError as e:
...     print(*e.args)
not enough bytes to read: 8 requested, 4 available
"""

from micheline.serialization import Deserializer, Serializer, TooLongError, TruncatedInputError  # noqa: F401

LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 2**(8 * LENGTH_PREFIX_SIZE) - 1


def pack_length(length: int) -> bytes:
    """ Return the 4-byte big-endian representation of a length prefix.
    """
    if not 0 <= length <= MAX_LENGTH:
        raise TooLongError(f'length {length} does not fit a {LENGTH_PREFIX_SIZE}-byte prefix')
    return length.to_bytes(LENGTH_PREFIX_SIZE, byteorder='big', signed=False)


def encode_length(serializer: Serializer, length: int) -> None:
    serializer.write_bytes(pack_length(length))


def decode_length(deserializer: Deserializer) -> int:
    data = deserializer.read_bytes(LENGTH_PREFIX_SIZE)
    return int.from_bytes(data, byteorder='big', signed=False)


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, bytes)
    encode_length(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    The result is a copy, it does not keep a reference to the deserializer's buffer.
    """
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))
