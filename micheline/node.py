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
Micheline trees.

A tree is made of five kinds of nodes, all immutable. Children are kept in tuples, lists passed to the constructors
are copied, so a node never shares mutable state with its caller:

>>> Seq([Int(1), String('two')])
Seq(items=(Int(value=1), String(value='two')))
>>> Seq([Int(1)]) == Seq((Int(1),))
True

`Prim` is generic over the primitive type, which is opaque to the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from typing_extensions import TypeAlias

P = TypeVar('P')


@dataclass(slots=True, frozen=True)
class Int:
    value: int


@dataclass(slots=True, frozen=True)
class String:
    value: str


@dataclass(slots=True, frozen=True)
class Bytes:
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, 'value', bytes(self.value))


@dataclass(slots=True, frozen=True)
class Seq(Generic[P]):
    items: tuple[Node[P], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'items', tuple(self.items))


@dataclass(slots=True, frozen=True)
class Prim(Generic[P]):
    """A primitive application: `prim` applied to `args`, with optional annotations.

    The number of args and whether there are annotations decide the tag used on the wire.
    """
    prim: P
    args: tuple[Node[P], ...] = ()
    annots: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'args', tuple(self.args))
        object.__setattr__(self, 'annots', tuple(self.annots))


Node: TypeAlias = Union[Int, String, Bytes, Seq[P], Prim[P]]
