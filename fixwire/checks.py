"""BodyLength <9> and CheckSum <10> helpers for tag-value messages."""

from __future__ import annotations

from fixwire.errors import CheckSumError, InvalidMessageError

# A tag-value message can't be shorter than "8=?|9=?|35=?|10=???|".
MIN_FIX_MESSAGE_LEN = 20

# "10=" plus three checksum digits plus the separator.
FIELD_CHECKSUM_LEN = 7


def checksum(data: bytes) -> int:
    """The FIX checksum of ``data``: the sum of its bytes modulo 256."""
    return sum(data) % 256


def checksum_digits(message: bytes) -> bytes:
    """The three CheckSum <10> digits at the end of ``message``."""
    if len(message) < 4:
        raise ValueError("message is too short to hold a checksum")
    return bytes(message[-4:-1])


def verify_checksum(message: bytes) -> None:
    """Raise CheckSumError unless the CheckSum <10> of ``message`` is right."""
    if len(message) < FIELD_CHECKSUM_LEN:
        raise CheckSumError()
    digits = checksum_digits(message)
    if not digits.isdigit():
        raise CheckSumError()
    if int(digits) != checksum(message[:-FIELD_CHECKSUM_LEN]):
        raise CheckSumError()


def verify_body_length(data: bytes, start_of_body: int, nominal_body_length: int) -> None:
    """Raise InvalidMessageError unless BodyLength <9> matches the body in ``data``."""
    end_of_body = len(data) - FIELD_CHECKSUM_LEN
    if start_of_body > end_of_body or nominal_body_length != end_of_body - start_of_body:
        raise InvalidMessageError()