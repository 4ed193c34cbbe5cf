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
This module implements the encoding of the annotations of a primitive application.

The annotations are joined with a single space and written as a length-prefixed utf-8 string, so the space is the
field separator and cannot be part of an annotation:

>>> se = Serializer.build_bytes_serializer()
>>> encode_annotations(se, ['%annot1', '%annot2'])
>>> bytes(se.finalize())
b'\x00\x00\x00\x0f%annot1 %annot2'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x0f%annot1 %annot2')
>>> decode_annotations(de)
('%annot1', '%annot2')
>>> de.finalize()


Splitting is done on every single space, so consecutive spaces give empty annotations:

>>> decode_annotations(Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x06%a  %b'))
('%a', '', '%b')

The only exception is the empty payload. Splitting it would give one empty annotation, but it is what an empty list
encodes to, so it decodes to no annotations:

>>> se = Serializer.build_bytes_serializer()
>>> encode_annotations(se, [])
>>> encoded = bytes(se.finalize())
>>> encoded
b'\x00\x00\x00\x00'
>>> decode_annotations(Deserializer.build_bytes_deserializer(encoded))
()

Because of that, the list made of a single empty annotation cannot be told apart from the empty list and is rejected
when encoding, along with annotations that contain the separator:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_annotations(se, ['%a b'])
... except InvalidAnnotationError as e:
...     print(*e.args)
annotation cannot contain a space: '%a b'
"""

from collections.abc import Sequence

from micheline.serialization import Deserializer, InvalidAnnotationError, Serializer

from .utf8 import decode_utf8, encode_utf8

ANNOTATION_SEPARATOR = ' '


def encode_annotations(serializer: Serializer, annots: Sequence[str]) -> None:
    """ Encodes a list of annotations as a single length-prefixed string.

    This module's docstring has more details and examples.
    """
    for annot in annots:
        assert isinstance(annot, str)
        if ANNOTATION_SEPARATOR in annot:
            raise InvalidAnnotationError(f'annotation cannot contain a space: {annot!r}')
    if len(annots) == 1 and not annots[0]:
        raise InvalidAnnotationError('a single empty annotation would decode as no annotations')
    encode_utf8(serializer, ANNOTATION_SEPARATOR.join(annots))


def decode_annotations(deserializer: Deserializer) -> tuple[str, ...]:
    """ Decodes a length-prefixed string into the list of annotations.

    This module's docstring has more details and examples.
    """
    text = decode_utf8(deserializer)
    if not text:
        return ()
    return tuple(text.split(ANNOTATION_SEPARATOR))
