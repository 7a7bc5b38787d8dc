"""Errors raised while decoding tag-value FIX messages."""

from __future__ import annotations

from typing import ClassVar, Optional


class DecodeError(Exception):
    """Raised when a FIX message cannot be decoded."""

    default_message: ClassVar[str] = "FIX message decoding failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class FieldPresenceError(DecodeError):
    """A mandatory field was not found."""

    default_message = "Field not found."


class InvalidMessageError(DecodeError):
    """Invalid syntax, a BodyLength <9> mismatch, or a similar problem."""

    default_message = "Invalid FIX message syntax."


class CheckSumError(DecodeError):
    """The CheckSum <10> field value is wrong."""

    default_message = "Invalid `CheckSum <10>` FIX field value."