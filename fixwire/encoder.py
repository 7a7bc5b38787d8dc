"""Encoding of tag-value FIX messages with BodyLength and CheckSum."""

from __future__ import annotations

import enum
import math
from decimal import Decimal
from typing import Any, Optional

from fixwire.checks import checksum
from fixwire.config import Config

# Eight zero-padded digits reserve room for BodyLength <9> until it is known.
_BODY_LENGTH_DIGITS = 8
_BODY_LENGTH_PLACEHOLDER = b"0" * _BODY_LENGTH_DIGITS


def _serialize(value: Any) -> bytes:
    while isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        return b"Y" if value else b"N"
    if isinstance(value, int):
        return str(value).encode("ascii")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot encode non-finite float {value}")
        return format(Decimal(repr(value)), "f").encode("ascii")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"cannot encode non-finite decimal {value}")
        return format(value, "f").encode("ascii")
    raise TypeError(f"cannot encode a field value of type {type(value).__name__}")


class Encoder:
    """A content-agnostic FIX encoder that fills in BodyLength and CheckSum."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()

    def start_message(
        self, begin_string: bytes, buffer: bytearray, msg_type: bytes
    ) -> EncoderHandle:
        """Start a message whose bytes are appended to ``buffer``."""
        return EncoderHandle(self, buffer, begin_string, msg_type)


class EncoderHandle:
    """Sets the fields of a message started by Encoder.start_message."""

    def __init__(
        self, encoder: Encoder, buffer: bytearray, begin_string: bytes, msg_type: bytes
    ) -> None:
        self._encoder = encoder
        self._buffer = buffer
        self._start = len(buffer)
        self._finished = False
        self.set(8, begin_string)
        self.set(9, _BODY_LENGTH_PLACEHOLDER)
        self._body_start = len(buffer)
        self.set(35, msg_type)

    def set(self, tag: int, value: Any) -> None:
        """Append ``tag=value`` and the separator.

        Values may be bytes, str, bool (Y/N), int, float, Decimal or an enum
        member whose value is one of those.
        """
        if self._finished:
            raise RuntimeError("the message is already done")
        if tag < 0:
            raise ValueError(f"tags must not be negative, got {tag}")
        encoded = _serialize(value)
        self._buffer += str(tag).encode("ascii") + b"=" + encoded
        self._buffer.append(self._encoder.config.separator)

    def done(self) -> tuple[bytes, int]:
        """Write BodyLength and CheckSum.

        Returns the whole buffer contents and the offset of this message in it.
        """
        if self._finished:
            raise RuntimeError("the message is already done")
        body_length = len(self._buffer) - self._body_start
        digits = f"{body_length:0{_BODY_LENGTH_DIGITS}d}".encode("ascii")
        if len(digits) > _BODY_LENGTH_DIGITS:
            raise ValueError(f"message body of {body_length} bytes is too long")
        self._buffer[self._body_start - 9 : self._body_start - 1] = digits
        self.set(10, f"{checksum(self._buffer[self._start:]):03d}")
        self._finished = True
        return bytes(self._buffer), self._start