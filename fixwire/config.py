"""Configuration shared by tag-value encoders and decoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SOH = 0x01
DEFAULT_MAX_MESSAGE_SIZE = 0xFFFF


@dataclass
class Config:
    """Options for tag-value encoding and decoding.

    ``separator`` terminates every tag-value pair, the last one included.
    ``max_message_size`` of None imposes no limit. ``verify_checksum`` has no
    effect when encoding. ``should_decode_associative`` enables lookups by tag;
    without it only sequential access is possible.
    """

    separator: int = SOH
    max_message_size: Optional[int] = DEFAULT_MAX_MESSAGE_SIZE
    verify_checksum: bool = True
    should_decode_associative: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.separator, (bytes, bytearray)):
            if len(self.separator) != 1:
                raise ValueError("separator must be a single byte")
            self.separator = self.separator[0]
        if not 0 <= self.separator <= 0xFF:
            raise ValueError(f"separator must be a byte value, got {self.separator}")
        if self.max_message_size is not None and self.max_message_size < 0:
            raise ValueError("max_message_size must not be negative")