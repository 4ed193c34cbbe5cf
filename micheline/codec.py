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
Binary encoding of Micheline trees.

Every node starts with a one-byte `Tag` followed by its payload:

    Int                  [0x00][zarith]
    String               [0x01][4-byte length][utf-8]
    Seq                  [0x02][4-byte length][node]...
    Prim, 0 args         [0x03|0x04][prim]([annotations] with 0x04)
    Prim, 1 arg          [0x05|0x06][prim][node]([annotations] with 0x06)
    Prim, 2 args         [0x07|0x08][prim][node][node]([annotations] with 0x08)
    Prim, 3 args or more [0x09][prim][4-byte length][node]...[annotations]
    Bytes                [0x0a][4-byte length][bytes]

>>> from enum import IntEnum
>>> from micheline.primitive import BytePrimitive
>>> class Op(BytePrimitive, IntEnum):
...     NOP = 0
...     PUSH = 1
>>> codec = MichelineCodec(Op, settings=CodecSettings())
>>> codec.encode(Seq([Int(1), Int(2)])).hex()
'020000000400010002'
>>> codec.encode(Prim(Op.PUSH, [String('a')], ['%x'])).hex()
'0601010000000161000000022578'
>>> codec.decode(b'\x03\x00')
Prim(prim=<Op.NOP: 0>, args=(), annots=())
"""

from functools import partial
from typing import Generic, Optional

from structlog import get_logger

from micheline.conf import CodecSettings, get_global_settings
from micheline.node import Bytes, Int, Node, Prim, Seq, String
from micheline.primitive import P
from micheline.serialization import Deserializer, NestingTooDeepError, SerializationError, Serializer
from micheline.serialization.compound_encoding.framed_list import decode_framed_list, encode_framed_list
from micheline.serialization.encoding.annotations import decode_annotations, encode_annotations
from micheline.serialization.encoding.bytes import decode_bytes, encode_bytes
from micheline.serialization.encoding.utf8 import decode_utf8, encode_utf8
from micheline.serialization.encoding.zarith import INT32_BACKING, ZarithBacking, decode_zarith, encode_zarith
from micheline.serialization.types import Buffer
from micheline.tag import Tag

logger = get_logger()


class MichelineCodec(Generic[P]):
    """Encoder and decoder of Micheline trees whose primitives are of type `P`.

    The codec holds no state between calls, the same instance can be shared by any number of callers.
    """

    def __init__(
        self,
        primitive_type: type[P],
        *,
        settings: Optional[CodecSettings] = None,
        backing: ZarithBacking = INT32_BACKING,
    ) -> None:
        self.primitive_type = primitive_type
        self._settings = settings or get_global_settings()
        self._backing = backing
        self.log = logger.new(primitive_type=primitive_type.__name__)

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def encode(self, node: Node[P]) -> bytes:
        """Encode a tree, raises `IntegerOutOfRangeError` for integers the zarith backing can't hold."""
        serializer = Serializer.build_bytes_serializer()
        self.encode_node(serializer.with_optional_max_bytes(self._settings.MAX_ENCODED_BYTES), node)
        return bytes(serializer.finalize())

    def decode(self, data: Buffer, *, allow_trailing: Optional[bool] = None) -> Node[P]:
        """Decode a tree that starts at the first byte of `data`.

        Unless trailing data is allowed (by argument or by the settings) every byte must belong to the tree and
        `TrailingDataError` is raised otherwise. With trailing data allowed the extra bytes are ignored, which is what
        other Micheline decoders do. Use `decode_at` to also learn where the tree ends.
        """
        if allow_trailing is None:
            allow_trailing = self._settings.ALLOW_TRAILING_DATA
        deserializer = Deserializer.build_bytes_deserializer(data)
        try:
            node = self.decode_node(deserializer)
            if not allow_trailing:
                deserializer.finalize()
        except SerializationError as e:
            self.log.debug('rejected micheline data', offset=deserializer.cur_pos(), error=repr(e))
            raise
        return node

    def decode_at(self, data: Buffer, offset: int = 0) -> tuple[Node[P], int]:
        """Decode the tree that starts at `offset`, returns it with the number of bytes it takes."""
        if offset < 0:
            raise ValueError('offset cannot be negative')
        deserializer = Deserializer.build_bytes_deserializer(memoryview(data)[offset:])
        try:
            node = self.decode_node(deserializer)
        except SerializationError as e:
            self.log.debug('rejected micheline data', offset=offset + deserializer.cur_pos(), error=repr(e))
            raise
        return node, deserializer.cur_pos()

    def encode_node(self, serializer: Serializer, node: Node[P], *, depth: int = 0) -> None:
        """Write one node and its children to `serializer`, `depth` is the number of levels above `node`."""
        self._check_depth(depth)
        match node:
            case Int(value):
                serializer.write_byte(Tag.INT)
                encode_zarith(serializer, value, backing=self._backing)
            case String(value):
                serializer.write_byte(Tag.STRING)
                encode_utf8(serializer, value)
            case Bytes(value):
                serializer.write_byte(Tag.BYTES)
                encode_bytes(serializer, value)
            case Seq(items):
                serializer.write_byte(Tag.SEQ)
                encode_framed_list(serializer, items, partial(self.encode_node, depth=depth + 1))
            case Prim():
                self._encode_prim(serializer, node, depth)
            case _:
                raise TypeError(f'not a micheline node: {node!r}')

    def _encode_prim(self, serializer: Serializer, node: Prim[P], depth: int) -> None:
        assert isinstance(node.prim, self.primitive_type)
        tag = Tag.for_prim(len(node.args), bool(node.annots))
        serializer.write_byte(tag)
        node.prim.encode_primitive(serializer)
        if tag is Tag.PRIM_N:
            encode_framed_list(serializer, node.args, partial(self.encode_node, depth=depth + 1))
        else:
            for arg in node.args:
                self.encode_node(serializer, arg, depth=depth + 1)
        if tag.has_annots:
            encode_annotations(serializer, node.annots)

    def decode_node(self, deserializer: Deserializer, *, depth: int = 0) -> Node[P]:
        """Read one node and its children from `deserializer`, `depth` is the number of levels above the node."""
        self._check_depth(depth)
        tag = Tag.from_byte(deserializer.read_byte())
        match tag:
            case Tag.INT:
                return Int(decode_zarith(deserializer, backing=self._backing))
            case Tag.STRING:
                return String(decode_utf8(deserializer))
            case Tag.BYTES:
                return Bytes(decode_bytes(deserializer))
            case Tag.SEQ:
                items = decode_framed_list(deserializer, partial(self.decode_node, depth=depth + 1), tuple)
                return Seq(items)
            case _:
                return self._decode_prim(deserializer, tag, depth)

    def _decode_prim(self, deserializer: Deserializer, tag: Tag, depth: int) -> Prim[P]:
        prim = self.primitive_type.decode_primitive(deserializer)
        args: tuple[Node[P], ...]
        if tag is Tag.PRIM_N:
            args = decode_framed_list(deserializer, partial(self.decode_node, depth=depth + 1), tuple)
        else:
            arity = tag.prim_arity
            assert arity is not None
            decoded_args = []
            for _ in range(arity):
                decoded_args.append(self.decode_node(deserializer, depth=depth + 1))
            args = tuple(decoded_args)
        annots = decode_annotations(deserializer) if tag.has_annots else ()
        return Prim(prim, args, annots)

    def _check_depth(self, depth: int) -> None:
        if depth > self._settings.MAX_NESTING_DEPTH:
            raise NestingTooDeepError(f'tree is nested deeper than {self._settings.MAX_NESTING_DEPTH} levels')
