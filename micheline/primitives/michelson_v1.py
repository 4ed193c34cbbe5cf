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
Primitive table of Michelson, version 1 of the Tezos smart contract language.

Each primitive is encoded as one byte with its code. The member names carry the namespace of the primitive as a
prefix: `K_` for keywords, `D_` for data constructors, `I_` for instructions and `T_` for types.

>>> MichelsonV1Primitive.I_PUSH.michelson_name
'PUSH'
>>> MichelsonV1Primitive.from_michelson_name('nat')
<MichelsonV1Primitive.T_nat: 98>
"""

from enum import IntEnum

from micheline.primitive import BytePrimitive


class MichelsonV1Primitive(BytePrimitive, IntEnum):
    K_parameter = 0x00
    K_storage = 0x01
    K_code = 0x02
    D_False = 0x03
    D_Elt = 0x04
    D_Left = 0x05
    D_None = 0x06
    D_Pair = 0x07
    D_Right = 0x08
    D_Some = 0x09
    D_True = 0x0a
    D_Unit = 0x0b
    I_PACK = 0x0c
    I_UNPACK = 0x0d
    I_BLAKE2B = 0x0e
    I_SHA256 = 0x0f
    I_SHA512 = 0x10
    I_ABS = 0x11
    I_ADD = 0x12
    I_AMOUNT = 0x13
    I_AND = 0x14
    I_BALANCE = 0x15
    I_CAR = 0x16
    I_CDR = 0x17
    I_CHECK_SIGNATURE = 0x18
    I_COMPARE = 0x19
    I_CONCAT = 0x1a
    I_CONS = 0x1b
    I_CREATE_ACCOUNT = 0x1c
    I_CREATE_CONTRACT = 0x1d
    I_IMPLICIT_ACCOUNT = 0x1e
    I_DIP = 0x1f
    I_DROP = 0x20
    I_DUP = 0x21
    I_EDIV = 0x22
    I_EMPTY_MAP = 0x23
    I_EMPTY_SET = 0x24
    I_EQ = 0x25
    I_EXEC = 0x26
    I_FAILWITH = 0x27
    I_GE = 0x28
    I_GET = 0x29
    I_GT = 0x2a
    I_HASH_KEY = 0x2b
    I_IF = 0x2c
    I_IF_CONS = 0x2d
    I_IF_LEFT = 0x2e
    I_IF_NONE = 0x2f
    I_INT = 0x30
    I_LAMBDA = 0x31
    I_LE = 0x32
    I_LEFT = 0x33
    I_LOOP = 0x34
    I_LSL = 0x35
    I_LSR = 0x36
    I_LT = 0x37
    I_MAP = 0x38
    I_MEM = 0x39
    I_MUL = 0x3a
    I_NEG = 0x3b
    I_NEQ = 0x3c
    I_NIL = 0x3d
    I_NONE = 0x3e
    I_NOT = 0x3f
    I_NOW = 0x40
    I_OR = 0x41
    I_PAIR = 0x42
    I_PUSH = 0x43
    I_RIGHT = 0x44
    I_SIZE = 0x45
    I_SOME = 0x46
    I_SOURCE = 0x47
    I_SENDER = 0x48
    I_SELF = 0x49
    I_STEPS_TO_QUOTA = 0x4a
    I_SUB = 0x4b
    I_SWAP = 0x4c
    I_TRANSFER_TOKENS = 0x4d
    I_SET_DELEGATE = 0x4e
    I_UNIT = 0x4f
    I_UPDATE = 0x50
    I_XOR = 0x51
    I_ITER = 0x52
    I_LOOP_LEFT = 0x53
    I_ADDRESS = 0x54
    I_CONTRACT = 0x55
    I_ISNAT = 0x56
    I_CAST = 0x57
    I_RENAME = 0x58
    T_bool = 0x59
    T_contract = 0x5a
    T_int = 0x5b
    T_key = 0x5c
    T_key_hash = 0x5d
    T_lambda = 0x5e
    T_list = 0x5f
    T_map = 0x60
    T_big_map = 0x61
    T_nat = 0x62
    T_option = 0x63
    T_or = 0x64
    T_pair = 0x65
    T_set = 0x66
    T_signature = 0x67
    T_string = 0x68
    T_bytes = 0x69
    T_mutez = 0x6a
    T_timestamp = 0x6b
    T_unit = 0x6c
    T_operation = 0x6d
    T_address = 0x6e
    I_SLICE = 0x6f
    I_DIG = 0x70
    I_DUG = 0x71
    I_EMPTY_BIG_MAP = 0x72
    I_APPLY = 0x73
    T_chain_id = 0x74
    I_CHAIN_ID = 0x75

    @property
    def michelson_name(self) -> str:
        """The name of the primitive as written in Michelson source."""
        _, _, name = self.name.partition('_')
        return name

    @classmethod
    def from_michelson_name(cls, name: str) -> 'MichelsonV1Primitive':
        """Look up a primitive by its Michelson source name, raises `KeyError` if there's none."""
        return _BY_MICHELSON_NAME[name]


_BY_MICHELSON_NAME: dict[str, MichelsonV1Primitive] = {prim.michelson_name: prim for prim in MichelsonV1Primitive}
