import pytest
from structlog.testing import capture_logs

from micheline import (
    FrameLengthMismatchError,
    Int,
    IntegerOutOfRangeError,
    InvalidAnnotationError,
    InvalidPrimitiveError,
    InvalidUtf8Error,
    MaxBytesExceededError,
    NestingTooDeepError,
    Prim,
    Seq,
    SerializationError,
    String,
    TruncatedInputError,
    UnknownTagError,
)
from tests.utils import DummyPrimitive, build_codec

D = DummyPrimitive.DUMMY


@pytest.mark.parametrize('tag', [0x0b, 0x10, 0xff])
def test_unknown_tag(tag):
    codec = build_codec()
    with pytest.raises(UnknownTagError) as exc_info:
        codec.decode(bytes([tag, 0x00]))
    assert exc_info.value.tag == tag


def test_unknown_tag_inside_seq():
    codec = build_codec()
    with pytest.raises(UnknownTagError):
        codec.decode(b'\x02\x00\x00\x00\x03\x00\x01\xff')
    with pytest.raises(UnknownTagError):
        codec.decode(b'\x02\x00\x00\x00\x01\xff')


@pytest.mark.parametrize(
    'data',
    [
        b'',
        b'\x00',
        b'\x00\x80',
        b'\x01\x00\x00',
        b'\x01\x00\x00\x00\x05ab',
        b'\x0a\x00\x00\x00\x02a',
        b'\x02\x00\x00\x00\x10\x00\x01',
        b'\x03',
        b'\x05\x00',
        b'\x06\x00\x00\x2a',
        b'\x07\x00\x00\x2a',
        b'\x08\x00\x00\x2a\x00\x2b\x00\x00',
        b'\x09\x00\x00\x00\x00\x02\x00\x01',
        b'\x09\x00\x00\x00\x00\x02\x00\x01\x00\x00\x00\x03%a',
    ]
)
def test_truncated(data):
    codec = build_codec()
    with pytest.raises(TruncatedInputError):
        codec.decode(data)


@pytest.mark.parametrize(
    'data',
    [
        # the second Int runs past the declared length
        b'\x02\x00\x00\x00\x03\x00\x01\x00\x01',
        b'\x02\x00\x00\x00\x01\x00\x01',
        b'\x09\x00\x00\x00\x00\x03\x00\x01\x00\x02\x00\x00\x00\x00',
    ]
)
def test_frame_length_mismatch(data):
    codec = build_codec()
    with pytest.raises(FrameLengthMismatchError):
        codec.decode(data)


def test_invalid_primitive():
    codec = build_codec()
    with pytest.raises(InvalidPrimitiveError):
        codec.decode(b'\x03\x01')


@pytest.mark.parametrize(
    'data',
    [
        b'\x01\x00\x00\x00\x01\xff',
        b'\x04\x00\x00\x00\x00\x01\xff',
    ]
)
def test_invalid_utf8(data):
    codec = build_codec()
    with pytest.raises(InvalidUtf8Error):
        codec.decode(data)


def test_decode_integer_out_of_range():
    codec = build_codec()
    with pytest.raises(IntegerOutOfRangeError):
        codec.decode(b'\x00\x80\x80\x80\x80\x10')


@pytest.mark.parametrize('value', [2**31, -2**31, 2**64])
def test_encode_integer_out_of_range(value):
    codec = build_codec()
    with pytest.raises(IntegerOutOfRangeError):
        codec.encode(Int(value))


@pytest.mark.parametrize('annots', [['%a b'], [''], ['%a', 'b c']])
def test_encode_invalid_annotation(annots):
    codec = build_codec()
    with pytest.raises(InvalidAnnotationError):
        codec.encode(Prim(D, annots=annots))


def test_encode_invalid_string():
    codec = build_codec()
    with pytest.raises(InvalidUtf8Error):
        codec.encode(String('\ud800'))


def _nested_seq(depth):
    node = Seq()
    for _ in range(depth):
        node = Seq([node])
    return node


def test_nesting_limit():
    codec = build_codec(MAX_NESTING_DEPTH=3)
    accepted = _nested_seq(3)
    encoded = codec.encode(accepted)
    assert codec.decode(encoded) == accepted

    rejected = _nested_seq(4)
    with pytest.raises(NestingTooDeepError):
        codec.encode(rejected)
    with pytest.raises(NestingTooDeepError):
        codec.decode(build_codec().encode(rejected))


def test_nesting_limit_on_prim_args():
    codec = build_codec(MAX_NESTING_DEPTH=1)
    assert codec.decode(b'\x05\x00\x03\x00') == Prim(D, [Prim(D)])
    with pytest.raises(NestingTooDeepError):
        codec.decode(b'\x05\x00\x05\x00\x03\x00')


def test_deeply_nested_input_does_not_blow_the_stack():
    depth = 5000
    data = b''.join(
        b'\x02' + (5 * (depth - i)).to_bytes(4, 'big')
        for i in range(depth)
    ) + b'\x02\x00\x00\x00\x00'
    codec = build_codec()
    with pytest.raises(NestingTooDeepError):
        codec.decode(data)


def test_max_encoded_bytes():
    codec = build_codec(MAX_ENCODED_BYTES=4)
    assert codec.encode(Int(1)) == b'\x00\x01'
    with pytest.raises(MaxBytesExceededError):
        codec.encode(String('a'))
    assert issubclass(MaxBytesExceededError, SerializationError)


def test_rejected_data_is_logged():
    with capture_logs() as cap_logs:
        codec = build_codec()
        with pytest.raises(TruncatedInputError):
            codec.decode(b'\x05\x00')
    assert len(cap_logs) == 1
    entry = cap_logs[0]
    assert entry['event'] == 'rejected micheline data'
    assert entry['log_level'] == 'debug'
    assert entry['offset'] == 2
    assert entry['primitive_type'] == 'DummyPrimitive'
