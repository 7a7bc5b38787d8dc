"""Tag-value FIX message decoding with access to fields and repeating groups."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from fixwire.config import Config
from fixwire.errors import InvalidMessageError
from fixwire.message import FieldLocator, Message
from fixwire.raw_decoder import RawDecoder, RawDecoderStreaming, RawFrame

_BEGIN_STRING_TAG = 8


class TagKind(enum.Enum):
    """Field kinds that change how the fields after them are decoded."""

    LENGTH = "length"
    NUM_IN_GROUP = "num_in_group"


@dataclass
class _GroupState:
    first_tag: int
    num_entries: int
    index_of_group_tag: int
    current_entry: int = 0


@dataclass(frozen=True)
class _PendingGroup:
    index_of_group_tag: int
    num_entries: int


def _parse_count(value: bytes) -> int:
    if not value.isdigit():
        raise InvalidMessageError()
    return int(value)


def _parse_tag(raw: bytes) -> int:
    if not raw:
        return 0
    if not raw.isdigit():
        raise InvalidMessageError()
    return int(raw)


class _MessageBuilder:
    """Collects the fields of one message and tracks repeating-group state."""

    def __init__(self, tag_kinds: Mapping[int, TagKind]) -> None:
        self._tag_kinds = tag_kinds
        self._groups: list[_GroupState] = []
        self._pending: Optional[_PendingGroup] = None
        self.data_field_length: Optional[int] = None
        self.entries: list[tuple[FieldLocator, bytes]] = []

    def _locator(self, tag: int) -> FieldLocator:
        if self._groups:
            group = self._groups[-1]
            return FieldLocator(tag, group.index_of_group_tag, group.current_entry)
        return FieldLocator(tag)

    def store(self, tag: int, value: bytes) -> None:
        if self._pending is not None:
            # The first tag after NumInGroup opens every entry of the group.
            self._groups.append(
                _GroupState(
                    first_tag=tag,
                    num_entries=self._pending.num_entries,
                    index_of_group_tag=self._pending.index_of_group_tag,
                )
            )
            self._pending = None
        elif self._groups:
            group = self._groups[-1]
            if group.current_entry >= group.num_entries:
                self._groups.pop()
            elif tag == group.first_tag:
                group.current_entry += 1

        self.entries.append((self._locator(tag), value))

        kind = self._tag_kinds.get(tag)
        if kind is TagKind.NUM_IN_GROUP:
            num_entries = _parse_count(value)
            if num_entries > 0:
                self._pending = _PendingGroup(len(self.entries) - 1, num_entries)
        elif kind is TagKind.LENGTH:
            self.data_field_length = _parse_count(value)


class Decoder:
    """Decodes tag-value messages into Message objects.

    ``tag_kinds`` tells which tags hold a NumInGroup count and which hold the
    length of the data field that follows them.
    """

    def __init__(
        self,
        tag_kinds: Union[Mapping[int, TagKind], Iterable[tuple[int, TagKind]], None] = None,
        config: Optional[Config] = None,
    ) -> None:
        self._raw = RawDecoder(config)
        self.tag_kinds: dict[int, TagKind] = dict(tag_kinds or {})

    @property
    def config(self) -> Config:
        """The configuration used for decoding."""
        return self._raw.config

    @config.setter
    def config(self, value: Config) -> None:
        self._raw.config = value

    def decode(self, data: bytes) -> Message:
        """Decode one whole message from ``data``."""
        return self._from_frame(self._raw.decode(data))

    def streaming(self) -> DecoderStreaming:
        """A streaming decoder sharing this decoder's tags and configuration."""
        return DecoderStreaming(self)

    def _from_frame(self, frame: RawFrame) -> Message:
        builder = _MessageBuilder(self.tag_kinds)
        builder.store(_BEGIN_STRING_TAG, frame.begin_string())
        payload = frame.payload()
        separator = bytes([self.config.separator])
        i = 0
        while i < len(payload):
            equal_sign = payload.find(b"=", i)
            if equal_sign < 0:
                break
            value_start = equal_sign + 1
            if builder.data_field_length is not None:
                value_len = builder.data_field_length
                builder.data_field_length = None
            else:
                value_end = payload.find(separator, value_start)
                if value_end < 0:
                    break
                value_len = value_end - value_start
            tag = _parse_tag(payload[i:equal_sign])
            if tag == 0:
                break
            if value_start + value_len > len(payload):
                raise InvalidMessageError()
            builder.store(tag, payload[value_start : value_start + value_len])
            i = value_start + value_len + 1
        return Message(
            frame.data,
            builder.entries,
            associative=self.config.should_decode_associative,
        )


class DecoderStreaming:
    """Buffers incoming bytes and decodes one message at a time.

    Feed it ``fillable_len()`` bytes at a time and call ``try_parse`` after
    each feed until it returns True; then read ``message()`` and ``clear()``.
    """

    def __init__(self, decoder: Decoder) -> None:
        self._decoder = decoder
        self._raw: RawDecoderStreaming = decoder._raw.streaming()
        self._message: Optional[Message] = None

    @property
    def config(self) -> Config:
        """The configuration used for decoding."""
        return self._decoder.config

    @property
    def buffer(self) -> bytearray:
        """The bytes buffered so far."""
        return self._raw.buffer

    def num_bytes_required(self) -> int:
        """The total number of buffered bytes needed for the next step."""
        return self._raw.num_bytes_required()

    def fillable_len(self) -> int:
        """How many more bytes to feed before calling ``try_parse``."""
        return self._raw.fillable_len()

    def feed(self, data: bytes) -> None:
        """Append ``data`` to the internal buffer."""
        self._raw.feed(data)

    def clear(self) -> None:
        """Discard buffered bytes and start over with the next message."""
        self._raw.clear()
        self._message = None

    def try_parse(self) -> bool:
        """Advance parsing; True once a whole message is decoded."""
        if not self._raw.try_parse():
            return False
        self._message = self._decoder._from_frame(self._raw.raw_frame())
        return True

    def message(self) -> Message:
        """The decoded message; only valid after ``try_parse`` returned True."""
        if self._message is None:
            raise RuntimeError("No message is ready. Check `try_parse` return value.")
        return self._message