import pytest

from micheline import Bytes, Int, InvalidPrimitiveError, MichelineCodec, Prim, Seq, String
from micheline.conf import CodecSettings
from micheline.primitives import MichelsonV1Primitive as M


@pytest.fixture
def codec():
    return MichelineCodec(M, settings=CodecSettings())


def test_pair(codec):
    node = Prim(M.D_Pair, [String('KT1BuEZtb68c1Q4yjtckcNjGELqWt56Xyesc'), Bytes(b'deadbeef')])
    encoded = (
        b'\x07\x07'
        b'\x01\x00\x00\x00\x24KT1BuEZtb68c1Q4yjtckcNjGELqWt56Xyesc'
        b'\x0a\x00\x00\x00\x08deadbeef'
    )
    assert codec.encode(node) == encoded
    assert codec.decode(encoded) == node


def test_code_sequence(codec):
    node = Seq([
        Prim(M.I_PUSH, [Prim(M.T_nat), Int(1)], ['%one']),
        Prim(M.I_PUSH, [Prim(M.T_nat), Int(2)], ['%two']),
        Prim(M.I_ADD),
    ])
    encoded = (
        b'\x02\x00\x00\x00\x1e'
        b'\x08\x43\x03\x62\x00\x01\x00\x00\x00\x04%one'
        b'\x08\x43\x03\x62\x00\x02\x00\x00\x00\x04%two'
        b'\x03\x12'
    )
    assert codec.encode(node) == encoded
    assert codec.decode(encoded) == node


def test_contract_script(codec):
    node = Seq([
        Prim(M.K_parameter, [Prim(M.T_unit)]),
        Prim(M.K_storage, [Prim(M.T_unit)]),
        Prim(M.K_code, [Seq([Prim(M.I_CDR), Prim(M.I_NIL, [Prim(M.T_operation)]), Prim(M.I_PAIR)])]),
    ])
    encoded = codec.encode(node)
    assert encoded[:5] == b'\x02\x00\x00\x00\x17'
    assert encoded[5:9] == b'\x05\x00\x03\x6c'
    assert codec.decode(encoded) == node


def test_primitive_codes():
    assert len(M) == 0x76
    assert [prim.value for prim in M] == list(range(0x76))
    assert M.D_Pair == 0x07
    assert M.I_ADD == 0x12
    assert M.I_PUSH == 0x43
    assert M.T_nat == 0x62
    assert M.I_CHAIN_ID == 0x75


@pytest.mark.parametrize(
    ['prim', 'name'],
    [
        (M.K_parameter, 'parameter'),
        (M.D_Pair, 'Pair'),
        (M.I_PUSH, 'PUSH'),
        (M.I_EMPTY_BIG_MAP, 'EMPTY_BIG_MAP'),
        (M.T_big_map, 'big_map'),
        (M.T_chain_id, 'chain_id'),
    ]
)
def test_michelson_name(prim, name):
    assert prim.michelson_name == name
    assert M.from_michelson_name(name) is prim


def test_unknown_michelson_name():
    with pytest.raises(KeyError):
        M.from_michelson_name('NOT_A_PRIMITIVE')


@pytest.mark.parametrize('code', [0x76, 0x80, 0xff])
def test_unknown_primitive_code(codec, code):
    with pytest.raises(InvalidPrimitiveError):
        codec.decode(bytes([0x03, code]))
