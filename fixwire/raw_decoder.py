"""Minimal decoding of tag-value messages: BodyLength and CheckSum only."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from fixwire.checks import (
    FIELD_CHECKSUM_LEN,
    MIN_FIX_MESSAGE_LEN,
    verify_body_length,
    verify_checksum,
)
from fixwire.config import SOH, Config
from fixwire.errors import InvalidMessageError


@dataclass(frozen=True)
class RawFrame:
    """The raw bytes of a message with the spans of BeginString and payload.

    The payload is everything after BodyLength <9> and before CheckSum <10>.
    """

    data: bytes
    begin_string_span: tuple[int, int]
    payload_span: tuple[int, int]

    def begin_string(self) -> bytes:
        """The value of BeginString <8>."""
        start, end = self.begin_string_span
        return self.data[start:end]

    def payload(self) -> bytes:
        """All fields besides BeginString <8>, BodyLength <9> and CheckSum <10>."""
        start, end = self.payload_span
        return self.data[start:end]


@dataclass(frozen=True)
class _HeaderInfo:
    begin_string_span: tuple[int, int]
    body_length_span: tuple[int, int]
    nominal_body_len: int

    @property
    def start_of_body(self) -> int:
        return self.body_length_span[1] + 1

    @classmethod
    def parse(cls, data: bytes, separator: int) -> Optional[_HeaderInfo]:
        sep = bytes([separator])
        eq = data.find(b"=")
        if eq < 0:
            return None
        start0 = eq + 1
        end0 = data.find(sep, start0)
        if end0 < 0:
            return None
        eq = data.find(b"=", end0 + 1)
        if eq < 0:
            return None
        start1 = eq + 1
        end1 = data.find(sep, start1)
        if end1 < 0:
            return None
        digits = data[start1:end1]
        if digits and not digits.isdigit():
            return None
        return cls((start0, end0), (start1, end1), int(digits) if digits else 0)


class RawDecoder:
    """Checks BodyLength <9> and CheckSum <10> and leaves the rest to the caller."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()

    def decode(self, data: bytes) -> RawFrame:
        """Validate ``data`` as one message and return its frame."""
        data = bytes(data)
        if len(data) < MIN_FIX_MESSAGE_LEN:
            raise InvalidMessageError()
        header = _HeaderInfo.parse(data, self.config.separator)
        if header is None:
            raise InvalidMessageError()
        verify_body_length(data, header.start_of_body, header.nominal_body_len)
        if self.config.verify_checksum and self.config.separator == SOH:
            verify_checksum(data)
        return RawFrame(
            data,
            header.begin_string_span,
            (header.start_of_body, len(data) - FIELD_CHECKSUM_LEN),
        )

    def streaming(self) -> RawDecoderStreaming:
        """A streaming decoder sharing this decoder's configuration."""
        return RawDecoderStreaming(self.config)


class _State(enum.Enum):
    EMPTY = "empty"
    HEADER = "header"


class RawDecoderStreaming:
    """Buffers incoming bytes and frames one message at a time.

    Feed it ``fillable_len()`` bytes at a time and call ``try_parse`` after
    each feed until it returns True; then read ``raw_frame()`` and ``clear()``.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self.buffer = bytearray()
        self._state = _State.EMPTY
        self._header: Optional[_HeaderInfo] = None
        self._expected_len = 0

    def num_bytes_required(self) -> int:
        """The total number of buffered bytes needed for the next step."""
        if self._state is _State.HEADER:
            return self._expected_len
        return MIN_FIX_MESSAGE_LEN

    def fillable_len(self) -> int:
        """How many more bytes to feed before calling ``try_parse``."""
        return max(0, self.num_bytes_required() - len(self.buffer))

    def feed(self, data: bytes) -> None:
        """Append ``data`` to the internal buffer."""
        self.buffer += data

    def clear(self) -> None:
        """Discard buffered bytes and start over with the next message."""
        self.buffer.clear()
        self._state = _State.EMPTY
        self._header = None
        self._expected_len = 0

    def try_parse(self) -> bool:
        """Advance parsing; True once a whole message is buffered."""
        if self._state is _State.EMPTY:
            if len(self.buffer) < MIN_FIX_MESSAGE_LEN:
                return False
            header = _HeaderInfo.parse(bytes(self.buffer), self.config.separator)
            if header is None:
                raise InvalidMessageError()
            self._header = header
            self._expected_len = (
                header.start_of_body + header.nominal_body_len + FIELD_CHECKSUM_LEN
            )
            self._state = _State.HEADER
        return len(self.buffer) >= self._expected_len

    def raw_frame(self) -> RawFrame:
        """The frame of the buffered message; only valid after ``try_parse`` is True."""
        if (
            self._state is not _State.HEADER
            or self._header is None
            or len(self.buffer) < self._expected_len
        ):
            raise RuntimeError("The message is not fully decoded. Check `try_parse` return value.")
        data = bytes(self.buffer[: self._expected_len])
        return RawFrame(
            data,
            self._header.begin_string_span,
            (self._header.start_of_body, len(data) - FIELD_CHECKSUM_LEN),
        )