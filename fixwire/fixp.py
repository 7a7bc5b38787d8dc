"""Message types of the FIX Performance Session Layer (FIXP)."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

_SESSION_ID_BITS = 128
_SEQ_NUMBER_BITS = 64


def _check_unsigned(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value}")


class FlowType(enum.Enum):
    """Delivery guarantees of a FIXP message flow."""

    RECOVERABLE = "recoverable"
    IDEMPOTENT = "idempotent"
    UNSEQUENCED = "unsequenced"
    NONE = "none"


class MessageType(enum.Enum):
    """Kinds of FIXP session messages."""

    SEQUENCE = "sequence"
    CONTEXT = "context"
    MESSAGE_TEMPLATE = "message_template"
    NEGOTIATE = "negotiate"


@dataclass(frozen=True)
class Sequence:
    """Announces the next sequence number of a flow."""

    next_seq_number: int

    def __post_init__(self) -> None:
        _check_unsigned("next_seq_number", self.next_seq_number, _SEQ_NUMBER_BITS)


@dataclass(frozen=True)
class Context:
    """Announces the session and next sequence number of a multiplexed flow."""

    session_id: int
    next_seq_number: int

    def __post_init__(self) -> None:
        _check_unsigned("session_id", self.session_id, _SESSION_ID_BITS)
        _check_unsigned("next_seq_number", self.next_seq_number, _SEQ_NUMBER_BITS)


@dataclass(frozen=True)
class MessageTemplate:
    """Carries a message template for a given encoding."""

    encoding_type: int
    effective_time: int
    version: bytes
    template: bytes

    def __post_init__(self) -> None:
        _check_unsigned("encoding_type", self.encoding_type, 32)
        _check_unsigned("effective_time", self.effective_time, 64)
        object.__setattr__(self, "version", bytes(self.version))
        object.__setattr__(self, "template", bytes(self.template))


@dataclass(frozen=True)
class Negotiate:
    """Asks to negotiate a session with the given client flow."""

    session_id: int
    client_flow: FlowType
    credentials: Optional[bytes] = None

    def __post_init__(self) -> None:
        _check_unsigned("session_id", self.session_id, _SESSION_ID_BITS)
        if not isinstance(self.client_flow, FlowType):
            raise TypeError(f"client_flow must be a FlowType, got {self.client_flow!r}")
        if self.credentials is not None:
            object.__setattr__(self, "credentials", bytes(self.credentials))


@dataclass(frozen=True)
class NegotiationReject:
    """Rejects a negotiation, optionally with a reason."""

    session_id: int
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        _check_unsigned("session_id", self.session_id, _SESSION_ID_BITS)


@dataclass(frozen=True)
class Establish:
    """Asks to establish a negotiated session."""

    session_id: int
    next_seq_number: int
    credentials: Optional[bytes] = None

    def __post_init__(self) -> None:
        _check_unsigned("session_id", self.session_id, _SESSION_ID_BITS)
        _check_unsigned("next_seq_number", self.next_seq_number, _SEQ_NUMBER_BITS)
        if self.credentials is not None:
            object.__setattr__(self, "credentials", bytes(self.credentials))


@dataclass(frozen=True)
class EstablishmentAck:
    """Acknowledges that a session has been established."""

    next_seq_number: int

    def __post_init__(self) -> None:
        _check_unsigned("next_seq_number", self.next_seq_number, _SEQ_NUMBER_BITS)