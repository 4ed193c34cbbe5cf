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
Binary codec for Micheline trees, generic over the primitive table.

This module exports the types and functions that make the public API.
"""

from micheline.codec import MichelineCodec
from micheline.conf import CodecSettings
from micheline.exception import InvalidSettingsError, MichelineError
from micheline.node import Bytes, Int, Node, Prim, Seq, String
from micheline.primitive import BytePrimitive, Primitive
from micheline.serialization import (
    BadDataError,
    FrameLengthMismatchError,
    IntegerOutOfRangeError,
    InvalidAnnotationError,
    InvalidPrimitiveError,
    InvalidUtf8Error,
    MaxBytesExceededError,
    NestingTooDeepError,
    SerializationError,
    TrailingDataError,
    TruncatedInputError,
    UnknownTagError,
)
from micheline.tag import Tag
from micheline.version import __version__

__all__ = [
    'MichelineCodec',
    'CodecSettings',
    'Bytes',
    'Int',
    'Node',
    'Prim',
    'Seq',
    'String',
    'BytePrimitive',
    'Primitive',
    'Tag',
    'MichelineError',
    'InvalidSettingsError',
    'SerializationError',
    'BadDataError',
    'FrameLengthMismatchError',
    'IntegerOutOfRangeError',
    'InvalidAnnotationError',
    'InvalidPrimitiveError',
    'InvalidUtf8Error',
    'MaxBytesExceededError',
    'NestingTooDeepError',
    'TrailingDataError',
    'TruncatedInputError',
    'UnknownTagError',
    '__version__',
]
