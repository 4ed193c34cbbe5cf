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
A framed list is a list of values prefixed by the total size in bytes of the encoded values, not by their count.

Layout: [size: 4-byte big-endian unsigned][value_0]...[value_N]

>>> from micheline.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_framed_list(se, ['foo', 'π'], encode_utf8)
>>> bytes(se.finalize()).hex()
'0000000d00000003666f6f00000002cf80'

Breakdown of the result:

    0000000d: 13, the size of what follows
    00000003666f6f: 'foo' (with length prefix)
    00000002cf80: 'π' (with length prefix)

The size is not known until every value is written, so the encoder reserves the prefix and fills it at the end.

When decoding, values are read until exactly `size` bytes are consumed:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000d00000003666f6f00000002cf80'))
>>> decode_framed_list(de, decode_utf8, tuple)
('foo', 'π')
>>> de.finalize()

A value that runs past the declared size is an error, even when there is more data after the frame:

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x05\x00\x00\x00\x03foo')
>>> try:
...     decode_framed_list(de, decode_utf8, tuple)
... except FrameLengthMismatchError as e:
...     print(*e.args)
list items overrun the declared length of 5 bytes
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

from micheline.serialization import Deserializer, FrameLengthMismatchError, Serializer, TruncatedInputError
from micheline.serialization.encoding.bytes import LENGTH_PREFIX_SIZE, decode_length, pack_length

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R')


def encode_framed_list(serializer: Serializer, values: Iterable[T], encoder: Encoder[T]) -> None:
    handle = serializer.reserve_bytes(LENGTH_PREFIX_SIZE)
    start = serializer.cur_pos()
    for value in values:
        encoder(serializer, value)
    serializer.fill_reserved(handle, pack_length(serializer.cur_pos() - start))


def decode_framed_list(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    size = decode_length(deserializer)
    # the whole frame must be available before any value is decoded
    frame = Deserializer.build_bytes_deserializer(deserializer.read_bytes(size))
    values: list[T] = []
    try:
        while not frame.is_empty():
            values.append(decoder(frame))
    except TruncatedInputError as e:
        raise FrameLengthMismatchError(f'list items overrun the declared length of {size} bytes') from e
    return builder(values)
