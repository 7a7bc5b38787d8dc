"""Encoding types carried in the Simple Open Framing Header."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional


class EncodingKind(enum.Enum):
    """The families of encoding types recognised by SOFH."""

    PRIVATE = "private"
    SBE_V10_BE = "sbe_v10_be"
    SBE_V10_LE = "sbe_v10_le"
    PROTOBUF = "protobuf"
    ASN1_PER = "asn1_per"
    ASN1_BER = "asn1_ber"
    ASN1_OER = "asn1_oer"
    TAG_VALUE = "tag_value"
    FIXML_SCHEMA = "fixml_schema"
    FAST = "fast"
    JSON = "json"
    BSON = "bson"


_RANGED_KINDS = frozenset({EncodingKind.PRIVATE, EncodingKind.FAST})

_FIXED_CODES = {
    EncodingKind.PROTOBUF: 0x4700,
    EncodingKind.SBE_V10_BE: 0x5BE0,
    EncodingKind.ASN1_PER: 0xA500,
    EncodingKind.ASN1_BER: 0xA501,
    EncodingKind.ASN1_OER: 0xA502,
    EncodingKind.SBE_V10_LE: 0xEB50,
    EncodingKind.TAG_VALUE: 0xF000,
    EncodingKind.FIXML_SCHEMA: 0xF100,
    EncodingKind.JSON: 0xF500,
    EncodingKind.BSON: 0xFB00,
}
_KINDS_BY_CODE = {code: kind for kind, code in _FIXED_CODES.items()}

_PRIVATE_START = 0x01
_PRIVATE_END = 0xFF
_FAST_OFFSET = 0xFA00
_FAST_START = _FAST_OFFSET + 0x01
_FAST_END = _FAST_OFFSET + 0xFF


@dataclass(frozen=True)
class EncodingType:
    """A SOFH encoding type.

    Private and FAST encodings carry an extra 8-bit number; every other kind
    has ``number == 0``.
    """

    kind: EncodingKind
    number: int = 0

    PROTOBUF: ClassVar[EncodingType]
    SBE_V10_BE: ClassVar[EncodingType]
    SBE_V10_LE: ClassVar[EncodingType]
    ASN1_PER: ClassVar[EncodingType]
    ASN1_BER: ClassVar[EncodingType]
    ASN1_OER: ClassVar[EncodingType]
    TAG_VALUE: ClassVar[EncodingType]
    FIXML_SCHEMA: ClassVar[EncodingType]
    JSON: ClassVar[EncodingType]
    BSON: ClassVar[EncodingType]

    def __post_init__(self) -> None:
        if self.kind in _RANGED_KINDS:
            if not 0 <= self.number <= 0xFF:
                raise ValueError(
                    f"{self.kind.name} encoding number must fit in one byte, "
                    f"got {self.number}"
                )
        elif self.number != 0:
            raise ValueError(f"{self.kind.name} encoding takes no number")

    @classmethod
    def private(cls, number: int) -> EncodingType:
        """A user-specified encoding type."""
        return cls(EncodingKind.PRIVATE, number)

    @classmethod
    def fast(cls, number: int) -> EncodingType:
        """A FAST encoding type."""
        return cls(EncodingKind.FAST, number)

    @classmethod
    def from_u16(cls, value: int) -> Optional[EncodingType]:
        """Return the encoding type for a 16-bit code, or None if it is unassigned."""
        if _PRIVATE_START <= value <= _PRIVATE_END:
            return cls.private(value)
        if _FAST_START <= value <= _FAST_END:
            return cls.fast(value - _FAST_OFFSET)
        kind = _KINDS_BY_CODE.get(value)
        return cls(kind) if kind is not None else None

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[EncodingType]:
        """Decode two big-endian bytes; None if the code is unassigned."""
        if len(data) != 2:
            raise ValueError(f"an encoding type takes exactly 2 bytes, got {len(data)}")
        return cls.from_u16(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        """Encode as two big-endian bytes."""
        return int(self).to_bytes(2, "big")

    def __int__(self) -> int:
        if self.kind is EncodingKind.PRIVATE:
            return self.number
        if self.kind is EncodingKind.FAST:
            return _FAST_OFFSET | self.number
        return _FIXED_CODES[self.kind]


EncodingType.PROTOBUF = EncodingType(EncodingKind.PROTOBUF)
EncodingType.SBE_V10_BE = EncodingType(EncodingKind.SBE_V10_BE)
EncodingType.SBE_V10_LE = EncodingType(EncodingKind.SBE_V10_LE)
EncodingType.ASN1_PER = EncodingType(EncodingKind.ASN1_PER)
EncodingType.ASN1_BER = EncodingType(EncodingKind.ASN1_BER)
EncodingType.ASN1_OER = EncodingType(EncodingKind.ASN1_OER)
EncodingType.TAG_VALUE = EncodingType(EncodingKind.TAG_VALUE)
EncodingType.FIXML_SCHEMA = EncodingType(EncodingKind.FIXML_SCHEMA)
EncodingType.JSON = EncodingType(EncodingKind.JSON)
EncodingType.BSON = EncodingType(EncodingKind.BSON)