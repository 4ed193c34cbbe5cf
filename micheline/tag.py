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

from enum import IntEnum
from typing import Optional

from micheline.serialization import UnknownTagError


class Tag(IntEnum):
    """Discriminant byte that starts every encoded node.

    Primitive applications with up to two args have dedicated tags so they don't need a length prefix for the args,
    with a separate tag for each depending on whether annotations follow. `PRIM_N` is the general form and always
    carries the annotation field, even when it's empty.
    """
    INT = 0
    STRING = 1
    SEQ = 2
    PRIM_0 = 3
    PRIM_0_ANNOTS = 4
    PRIM_1 = 5
    PRIM_1_ANNOTS = 6
    PRIM_2 = 7
    PRIM_2_ANNOTS = 8
    PRIM_N = 9
    BYTES = 10

    @classmethod
    def from_byte(cls, value: int) -> 'Tag':
        try:
            return cls(value)
        except ValueError:
            raise UnknownTagError(value) from None

    @classmethod
    def for_prim(cls, arity: int, has_annots: bool) -> 'Tag':
        """Select the tag for a primitive application with `arity` args."""
        assert arity >= 0
        if arity > 2:
            return cls.PRIM_N
        return _COMPACT_PRIM_TAGS[arity, has_annots]

    @property
    def prim_arity(self) -> Optional[int]:
        """Number of args of a compact primitive tag, None for every other tag (including PRIM_N)."""
        shape = _COMPACT_PRIM_SHAPES.get(self)
        return None if shape is None else shape[0]

    @property
    def has_annots(self) -> bool:
        """Whether an annotation field follows the args."""
        if self is Tag.PRIM_N:
            return True
        shape = _COMPACT_PRIM_SHAPES.get(self)
        return shape is not None and shape[1]


_COMPACT_PRIM_TAGS: dict[tuple[int, bool], Tag] = {
    (0, False): Tag.PRIM_0,
    (0, True): Tag.PRIM_0_ANNOTS,
    (1, False): Tag.PRIM_1,
    (1, True): Tag.PRIM_1_ANNOTS,
    (2, False): Tag.PRIM_2,
    (2, True): Tag.PRIM_2_ANNOTS,
}

_COMPACT_PRIM_SHAPES: dict[Tag, tuple[int, bool]] = {tag: shape for shape, tag in _COMPACT_PRIM_TAGS.items()}
