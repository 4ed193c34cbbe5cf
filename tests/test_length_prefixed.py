import pytest

from micheline.serialization import (
    Deserializer,
    FrameLengthMismatchError,
    InvalidUtf8Error,
    Serializer,
    TooLongError,
    TruncatedInputError,
)
from micheline.serialization.compound_encoding.framed_list import decode_framed_list, encode_framed_list
from micheline.serialization.encoding.bytes import decode_bytes, encode_bytes, pack_length
from micheline.serialization.encoding.utf8 import decode_utf8, encode_utf8
from micheline.serialization.encoding.zarith import decode_zarith, encode_zarith


@pytest.mark.parametrize(
    ['data', 'encoded'],
    [
        (b'', '00000000'),
        (b'ab', '000000026162'),
        (b'\x00' * 256, '00000100' + '00' * 256),
    ]
)
def test_bytes(data, encoded):
    se = Serializer.build_bytes_serializer()
    encode_bytes(se, data)
    assert bytes(se.finalize()).hex() == encoded

    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    decoded = decode_bytes(de)
    de.finalize()
    assert decoded == data
    assert type(decoded) is bytes


def test_decoded_bytes_do_not_reference_the_input():
    buffer = bytearray(b'\x00\x00\x00\x02ab')
    decoded = decode_bytes(Deserializer.build_bytes_deserializer(buffer))
    buffer[4:6] = b'zz'
    assert decoded == b'ab'


@pytest.mark.parametrize('length', [-1, 2**32])
def test_length_does_not_fit(length):
    with pytest.raises(TooLongError):
        pack_length(length)


def test_max_length():
    assert pack_length(2**32 - 1) == b'\xff\xff\xff\xff'


@pytest.mark.parametrize('encoded', ['', '000000', '00000001', '0000000561626364'])
def test_bytes_truncated(encoded):
    with pytest.raises(TruncatedInputError):
        decode_bytes(Deserializer.build_bytes_deserializer(bytes.fromhex(encoded)))


@pytest.mark.parametrize('text', ['', 'Hello world', 'ハトホル', '😎'])
def test_utf8_round_trip(text):
    se = Serializer.build_bytes_serializer()
    encode_utf8(se, text)
    encoded = bytes(se.finalize())
    assert int.from_bytes(encoded[:4], 'big') == len(text.encode('utf-8'))
    de = Deserializer.build_bytes_deserializer(encoded)
    assert decode_utf8(de) == text
    de.finalize()


def test_utf8_invalid():
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x02\xc3\x28')
    with pytest.raises(InvalidUtf8Error):
        decode_utf8(de)
    se = Serializer.build_bytes_serializer()
    with pytest.raises(InvalidUtf8Error):
        encode_utf8(se, '\ud800')


def _encode_ints(values):
    se = Serializer.build_bytes_serializer()
    encode_framed_list(se, values, encode_zarith)
    return bytes(se.finalize())


def test_framed_list_backpatches_the_size():
    assert _encode_ints([]).hex() == '00000000'
    assert _encode_ints([1, 2]).hex() == '000000020102'
    assert _encode_ints([0x1337, -1]).hex() == '00000003b74c41'


def test_framed_list_after_other_data():
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'test')
    encode_framed_list(se, [1, 0x40], encode_zarith)
    se.write_bytes(b'end')
    assert bytes(se.finalize()) == b'test\x00\x00\x00\x03\x01\x80\x01end'


def test_framed_list_decode():
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x03\x01\x80\x01end')
    assert decode_framed_list(de, decode_zarith, list) == [1, 0x40]
    assert bytes(de.read_all()) == b'end'


def test_framed_list_item_overruns_frame():
    # the frame declares 2 bytes but the second item needs 2 bytes on its own
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x02\x01\x80\x01')
    with pytest.raises(FrameLengthMismatchError):
        decode_framed_list(de, decode_zarith, list)


def test_framed_list_truncated_frame():
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x10\x01\x02')
    with pytest.raises(TruncatedInputError):
        decode_framed_list(de, decode_zarith, list)
