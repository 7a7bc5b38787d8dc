"""Simple Open Framing Header: framing of messages with a 6-byte header.

Each message is preceded by a big-endian 32-bit total length (header
included) and a big-endian 16-bit encoding type.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional, Union

from fixwire.sofh_encoding import EncodingType

HEADER_LENGTH = 6
MAX_PAYLOAD_LENGTH = 0xFFFFFFFF - HEADER_LENGTH

_HEADER = struct.Struct(">IH")


class SofhError(Exception):
    """Raised when SOFH-enclosed data cannot be decoded."""


class InvalidMessageLengthError(SofhError):
    """The message length in the header is outside the legal range."""

    def __init__(self) -> None:
        super().__init__("The SOFH-enclosed message's length is outside the legal range.")


class IncompleteError(SofhError):
    """More bytes are needed to complete the message."""

    def __init__(self, needed: int) -> None:
        super().__init__(
            f"The SOFH-enclosed message is incomplete. {needed} more bytes are needed."
        )
        self.needed = needed


def _parse_header(data: bytes) -> tuple[int, int]:
    """Return (total message length, encoding type) from the start of ``data``."""
    if len(data) < HEADER_LENGTH:
        raise IncompleteError(HEADER_LENGTH - len(data))
    length, encoding_type = _HEADER.unpack_from(data)
    if length < HEADER_LENGTH:
        raise InvalidMessageLengthError()
    return length, encoding_type


def _header_bytes(payload_length: int, encoding_type: int) -> bytes:
    return _HEADER.pack(payload_length + HEADER_LENGTH, encoding_type)


@dataclass(frozen=True)
class Frame:
    """A SOFH-enclosed message: its 16-bit encoding type and its payload."""

    encoding_type: int
    payload: bytes

    def __init__(self, encoding_type: Union[int, EncodingType], payload) -> None:
        if isinstance(encoding_type, EncodingType):
            encoding_type = int(encoding_type)
        if not 0 <= encoding_type <= 0xFFFF:
            raise ValueError(f"encoding type must fit in 16 bits, got {encoding_type}")
        if len(payload) > MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"payload of {len(payload)} bytes exceeds {MAX_PAYLOAD_LENGTH} bytes"
            )
        object.__setattr__(self, "encoding_type", encoding_type)
        object.__setattr__(self, "payload", bytes(payload))

    @property
    def encoding(self) -> Optional[EncodingType]:
        """The encoding type as an EncodingType, or None if unassigned."""
        return EncodingType.from_u16(self.encoding_type)

    @classmethod
    def deserialize(cls, data: bytes) -> Frame:
        """Read one frame from the start of ``data``; trailing bytes are ignored."""
        length, encoding_type = _parse_header(data)
        if len(data) < length:
            raise IncompleteError(length - len(data))
        return cls(encoding_type, data[HEADER_LENGTH:length])

    def serialize(self, writer: BinaryIO) -> int:
        """Write the frame to ``writer`` and return the number of bytes written."""
        writer.write(_header_bytes(len(self.payload), self.encoding_type))
        writer.write(self.payload)
        return len(self.payload) + HEADER_LENGTH

    def to_bytes(self) -> bytes:
        """Return the frame, header included, as bytes."""
        return _header_bytes(len(self.payload), self.encoding_type) + self.payload


class SofhCodec:
    """Incremental encoder and decoder of frames over a growing byte buffer."""

    def encode(self, frame: Frame, buffer: bytearray) -> None:
        """Append the encoded ``frame`` to ``buffer``."""
        buffer += _header_bytes(len(frame.payload), frame.encoding_type)
        buffer += frame.payload

    def decode(self, buffer: bytearray) -> Optional[Frame]:
        """Remove and return the first complete frame in ``buffer``.

        Returns None, leaving ``buffer`` untouched, while more bytes are needed.
        """
        try:
            length, encoding_type = _parse_header(bytes(buffer[:HEADER_LENGTH]))
        except IncompleteError:
            return None
        if len(buffer) < length:
            return None
        payload = bytes(buffer[HEADER_LENGTH:length])
        del buffer[:length]
        return Frame(encoding_type, payload)