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

"""
This module implements the zarith encoding for signed integers, used by Micheline `Int` nodes.

Zarith is a sign-magnitude relative of LEB128: the absolute value is split in groups that are written
least-significant group first, each byte carrying a continuation flag in its MSB. The first byte only has room for 6
bits of the magnitude because it also carries the sign:

- first byte: bits 0-5 are the low 6 bits of the magnitude, bit 6 is the sign (1 for negative), bit 7 is the
  continuation flag
- every following byte: bits 0-6 are the next 7 bits of the magnitude, bit 7 is the continuation flag
- encoding stops as soon as the remaining magnitude is zero

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'test')  # writes 74657374
>>> encode_zarith(se, 0)  # writes 00
>>> encode_zarith(se, 0x1337)  # writes b74c
>>> encode_zarith(se, -0x1337)  # writes f74c
>>> encode_zarith(se, 0x616263)  # writes a3898b06
>>> bytes(se.finalize()).hex()
'7465737400b74cf74ca3898b06'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00 b74c f74c a3898b06') + b'test')
>>> decode_zarith(de)  # reads 00
0
>>> hex(decode_zarith(de))  # reads b74c
'0x1337'
>>> hex(decode_zarith(de))  # reads f74c
'-0x1337'
>>> hex(decode_zarith(de))  # reads a3898b06
'0x616263'
>>> bytes(de.read_all())
b'test'
>>> de.finalize()

The arithmetic is delegated to a `ZarithBacking`, only `Int32Backing` is provided. Its range is symmetric, the
magnitude of -2**31 cannot be taken so that value is rejected instead of wrapped:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_zarith(se, -2**31)
... except IntegerOutOfRangeError as e:
...     print(*e.args)
-2147483648 is out of the 32-bit zarith range
"""

from typing import Protocol

from micheline.serialization import Deserializer, IntegerOutOfRangeError, Serializer


class ZarithBacking(Protocol):
    """The integer operations needed by the zarith codec.

    The wire layout only depends on these operations, so a wider backing can replace `Int32Backing` without changing
    the encoder or decoder.
    """

    def split_sign(self, value: int) -> tuple[bool, int]:
        """Return `(is_negative, magnitude)`, raises `IntegerOutOfRangeError` if the magnitude can't be represented."""
        ...

    def low_bits(self, magnitude: int, n: int) -> int:
        ...

    def shift_right(self, magnitude: int, n: int) -> int:
        ...

    def shift_left(self, group: int, n: int) -> int:
        """Return `group << n`, raises `IntegerOutOfRangeError` if the result can't be represented."""
        ...

    def is_zero(self, magnitude: int) -> bool:
        ...

    def combine(self, negative: bool, magnitude: int) -> int:
        ...


class Int32Backing:
    """Zarith backing bounded to the native signed 32-bit range, excluding -2**31."""

    MAX_MAGNITUDE = 2**31 - 1

    def split_sign(self, value: int) -> tuple[bool, int]:
        assert isinstance(value, int) and not isinstance(value, bool)
        negative = value < 0
        magnitude = -value if negative else value
        if magnitude > self.MAX_MAGNITUDE:
            raise IntegerOutOfRangeError(f'{value} is out of the 32-bit zarith range')
        return negative, magnitude

    def low_bits(self, magnitude: int, n: int) -> int:
        return magnitude & ((1 << n) - 1)

    def shift_right(self, magnitude: int, n: int) -> int:
        return magnitude >> n

    def shift_left(self, group: int, n: int) -> int:
        if group == 0:
            return 0
        if group.bit_length() + n > self.MAX_MAGNITUDE.bit_length():
            raise IntegerOutOfRangeError('encoded zarith value does not fit in 32 bits')
        return group << n

    def is_zero(self, magnitude: int) -> bool:
        return magnitude == 0

    def combine(self, negative: bool, magnitude: int) -> int:
        return -magnitude if negative else magnitude


INT32_BACKING = Int32Backing()


def encode_zarith(serializer: Serializer, value: int, *, backing: ZarithBacking = INT32_BACKING) -> None:
    """ Encodes a signed integer using zarith.

    This module's docstring has more details on zarith and examples.
    """
    negative, magnitude = backing.split_sign(value)
    byte = backing.low_bits(magnitude, 6)
    if negative:
        byte |= 0b0100_0000
    magnitude = backing.shift_right(magnitude, 6)
    while not backing.is_zero(magnitude):
        serializer.write_byte(byte | 0b1000_0000)
        byte = backing.low_bits(magnitude, 7)
        magnitude = backing.shift_right(magnitude, 7)
    serializer.write_byte(byte)


def decode_zarith(deserializer: Deserializer, *, backing: ZarithBacking = INT32_BACKING) -> int:
    """ Decodes a zarith-encoded signed integer.

    This module's docstring has more details on zarith and examples.
    """
    byte = deserializer.read_byte()
    negative = (byte & 0b0100_0000) != 0
    magnitude = byte & 0b0011_1111
    shift = 6
    while (byte & 0b1000_0000) != 0:
        byte = deserializer.read_byte()
        magnitude |= backing.shift_left(byte & 0b0111_1111, shift)
        shift += 7
    return backing.combine(negative, magnitude)
