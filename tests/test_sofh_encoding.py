import pytest

from fixwire.sofh_encoding import EncodingKind, EncodingType


def test_new_examples():
    assert EncodingType.from_u16(0x4700) == EncodingType.PROTOBUF
    assert EncodingType.from_u16(0) is None


def test_from_bytes_examples():
    assert EncodingType.from_bytes(b"\xF0\x00") == EncodingType.TAG_VALUE
    assert EncodingType.from_bytes(b"\xFA\x42") == EncodingType.fast(0x42)


def test_to_bytes_examples():
    assert EncodingType.TAG_VALUE.to_bytes() == b"\xF0\x00"
    assert EncodingType.fast(0x42).to_bytes() == b"\xFA\x42"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x5BE0, EncodingType.SBE_V10_BE),
        (0xEB50, EncodingType.SBE_V10_LE),
        (0xA500, EncodingType.ASN1_PER),
        (0xA501, EncodingType.ASN1_BER),
        (0xA502, EncodingType.ASN1_OER),
        (0xF100, EncodingType.FIXML_SCHEMA),
        (0xF500, EncodingType.JSON),
        (0xFB00, EncodingType.BSON),
    ],
)
def test_fixed_codes(value, expected):
    assert EncodingType.from_u16(value) == expected


def test_convert_to_bytes_then_back_has_no_side_effects():
    for value in range(0x10000):
        etype = EncodingType.from_u16(value)
        if etype is not None:
            assert EncodingType.from_bytes(etype.to_bytes()) == etype


def test_convert_u16_into_encoding_type_then_back_has_no_side_effects():
    for value in range(0x10000):
        etype = EncodingType.from_u16(value)
        if etype is not None:
            assert int(etype) == value


def test_encoded_size_is_always_two_bytes():
    for value in range(0x10000):
        etype = EncodingType.from_u16(value)
        if etype is not None:
            assert len(etype.to_bytes()) == 2


def test_encoding_types_with_ranges_use_prefix_tagging():
    assert EncodingType.private(42).to_bytes()[1] == 42
    assert EncodingType.fast(100).to_bytes()[1] == 100


@pytest.mark.parametrize("value", [0x1, 0x82, 0xFF])
def test_low_values_correspond_to_private_encoding_types(value):
    etype = EncodingType.from_u16(value)
    assert etype.kind is EncodingKind.PRIVATE
    assert etype.number == value


@pytest.mark.parametrize("value", [0x0, 0x100])
def test_boundary_values_for_private_encoding_type(value):
    assert EncodingType.from_u16(value) is None


def test_lower_boundary_for_fast_encoding_type():
    assert EncodingType.from_u16(0xFA00) is None


def test_upper_boundary_for_fast_encoding_type():
    etype = EncodingType.from_u16(0xFB00)
    assert etype == EncodingType.BSON
    assert etype.kind is not EncodingKind.FAST


def test_ranged_number_out_of_range_raises():
    with pytest.raises(ValueError):
        EncodingType.private(256)
    with pytest.raises(ValueError):
        EncodingType.fast(-1)


def test_fixed_kind_with_number_raises():
    with pytest.raises(ValueError):
        EncodingType(EncodingKind.JSON, 3)


def test_from_bytes_wrong_length_raises():
    with pytest.raises(ValueError):
        EncodingType.from_bytes(b"\x00")