from enum import IntEnum
from typing import Any

from micheline import BytePrimitive, CodecSettings, MichelineCodec


class DummyPrimitive(BytePrimitive, IntEnum):
    """Primitive table with a single primitive, encoded as 0x00."""
    DUMMY = 0


def build_codec(**settings: Any) -> MichelineCodec[DummyPrimitive]:
    return MichelineCodec(DummyPrimitive, settings=CodecSettings(**settings))
