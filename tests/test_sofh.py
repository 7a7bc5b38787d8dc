import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixwire.sofh import (
    Frame,
    IncompleteError,
    InvalidMessageLengthError,
    SofhCodec,
    SofhError,
)
from fixwire.sofh_encoding import EncodingType

U32_MAX = 0xFFFFFFFF


class _Sized:
    """Stands in for a payload too large to allocate."""

    def __init__(self, size):
        self.size = size

    def __len__(self):
        return self.size


def test_information_retrieval_is_consistent_with_new():
    frame = Frame(0x0, b"")
    assert frame.encoding_type == 0x0
    assert frame.payload == b""
    frame = Frame(0x1122, b"foobar")
    assert frame.encoding_type == 0x1122
    assert frame.payload == b"foobar"
    frame = Frame(0xFFFF, b"\x00")
    assert frame.encoding_type == 0xFFFF
    assert frame.payload == b"\x00"


def test_new_example():
    frame = Frame(0xF500, b"{}")
    assert len(frame.payload) == 2
    assert frame.encoding == EncodingType.JSON


def test_new_accepts_encoding_type():
    frame = Frame(EncodingType.JSON, b"")
    assert frame.encoding_type == 0xF500


def test_new_with_size_u32_max():
    with pytest.raises(ValueError):
        Frame(0x0, _Sized(U32_MAX))


def test_new_with_size_u32_max_minus_5():
    with pytest.raises(ValueError):
        Frame(0x0, _Sized(U32_MAX - 5))


def test_encoding_type_out_of_range():
    with pytest.raises(ValueError):
        Frame(0x10000, b"")


@pytest.mark.parametrize("data, needed", [(b"", 6), (b"\0\0\0", 3), (b"\0\0\0\0\0", 1)])
def test_decode_incomplete_header(data, needed):
    with pytest.raises(IncompleteError) as info:
        Frame.deserialize(data)
    assert info.value.needed == needed


def test_decode_empty_message():
    frame = Frame.deserialize(bytes([0, 0, 0, 6, 0, 0]))
    assert frame.encoding_type == 0
    assert frame.payload == b""


def test_decode_example():
    frame = Frame.deserialize(bytes([0, 0, 0, 7, 0, 0, 42]))
    assert frame.payload == bytes([42])


def test_decode_ignores_trailing_bytes():
    frame = Frame.deserialize(bytes([0, 0, 0, 7, 0x12, 0x34, 42, 99, 100]))
    assert frame.encoding_type == 0x1234
    assert frame.payload == bytes([42])


def test_decode_invalid_length():
    with pytest.raises(InvalidMessageLengthError):
        Frame.deserialize(bytes([0, 0, 0, 5, 0, 0]))


def test_decode_truncated_payload():
    with pytest.raises(IncompleteError) as info:
        Frame.deserialize(bytes([0, 0, 0, 10, 0, 0, 1]))
    assert info.value.needed == 3


def test_errors_share_base_class():
    with pytest.raises(SofhError):
        Frame.deserialize(b"")


def test_serialize_example():
    data = bytes([0, 0, 0, 7, 0, 0, 42])
    frame = Frame.deserialize(data)
    out = io.BytesIO()
    written = frame.serialize(out)
    assert out.getvalue() == data
    assert written == 7
    assert frame.to_bytes() == data


@given(st.integers(min_value=0, max_value=0xFFFF), st.binary())
def test_encode_then_decode_should_have_no_effect(encoding_type, payload):
    frame = Frame(encoding_type, payload)
    out = io.BytesIO()
    frame.serialize(out)
    decoded = Frame.deserialize(out.getvalue())
    assert decoded.encoding_type == encoding_type
    assert decoded.payload == payload


def test_codec_example():
    codec = SofhCodec()
    buffer = bytearray()
    codec.encode(Frame(0x1337, b"payload"), buffer)
    assert codec.decode(buffer) == Frame(0x1337, b"payload")
    assert buffer == bytearray()


def test_codec_waits_for_more_bytes():
    codec = SofhCodec()
    encoded = Frame(0x0102, b"abcdef").to_bytes()
    buffer = bytearray(encoded[:4])
    assert codec.decode(buffer) is None
    buffer += encoded[4:8]
    assert codec.decode(buffer) is None
    assert bytes(buffer) == encoded[:8]
    buffer += encoded[8:]
    assert codec.decode(buffer) == Frame(0x0102, b"abcdef")


def test_codec_decodes_successive_frames():
    codec = SofhCodec()
    buffer = bytearray()
    codec.encode(Frame(1, b"one"), buffer)
    codec.encode(Frame(2, b"two!"), buffer)
    assert codec.decode(buffer) == Frame(1, b"one")
    assert codec.decode(buffer) == Frame(2, b"two!")
    assert codec.decode(buffer) is None


def test_codec_invalid_length_raises():
    codec = SofhCodec()
    with pytest.raises(InvalidMessageLengthError):
        codec.decode(bytearray([0, 0, 0, 2, 0, 0]))