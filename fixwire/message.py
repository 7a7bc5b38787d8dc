"""Decoded tag-value messages with sequential and associative field access."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from fixwire.errors import FieldPresenceError

_INT_PATTERN = re.compile(rb"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(rb"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_Context = tuple[Optional[int], Optional[int]]
_TOP_LEVEL: _Context = (None, None)


@dataclass(frozen=True)
class FieldLocator:
    """Locates a tag within a message, even inside repeating groups.

    Top-level fields have no group information. A field inside a group entry
    records the position of the group's NumInGroup field among all fields of
    the message and the index of the entry.
    """

    tag: int
    group_tag_index: Optional[int] = None
    entry_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tag < 1:
            raise ValueError(f"tags must be positive, got {self.tag}")
        if (self.group_tag_index is None) != (self.entry_index is None):
            raise ValueError("group_tag_index and entry_index go together")

    @property
    def is_top_level(self) -> bool:
        """True when the field is outside any repeating group."""
        return self.group_tag_index is None


class _Store:
    """The fields of one message, shared by the message and its group views."""

    __slots__ = ("data", "entries", "index")

    def __init__(
        self,
        data: bytes,
        entries: Iterable[tuple[FieldLocator, bytes]],
        associative: bool,
    ) -> None:
        self.data = bytes(data)
        self.entries = [(locator, bytes(value)) for locator, value in entries]
        self.index: dict[FieldLocator, tuple[bytes, int]] = {}
        if associative:
            for position, (locator, value) in enumerate(self.entries):
                self.index[locator] = (value, position)


def _deserialize(raw: bytes, kind: Union[type, Callable[[bytes], Any]]) -> Any:
    if kind is bytes:
        return raw
    if kind is str:
        return raw.decode("utf-8")
    if kind is bool:
        if raw == b"Y":
            return True
        if raw == b"N":
            return False
        raise ValueError(f"invalid boolean field value {raw!r}")
    if kind is int:
        if not _INT_PATTERN.fullmatch(raw):
            raise ValueError(f"invalid integer field value {raw!r}")
        return int(raw)
    if kind is float:
        if not _FLOAT_PATTERN.fullmatch(raw):
            raise ValueError(f"invalid float field value {raw!r}")
        return float(raw)
    return kind(raw)


class Message:
    """A decoded FIX message, or a view of one entry of a repeating group.

    ``entries`` are the message's fields in wire order. With ``associative``
    off, fields can only be iterated, not looked up by tag.
    """

    def __init__(
        self,
        data: bytes,
        entries: Iterable[tuple[FieldLocator, bytes]],
        *,
        associative: bool = True,
    ) -> None:
        self._store = _Store(data, entries, associative)
        self._context: _Context = _TOP_LEVEL

    @classmethod
    def _view(cls, store: _Store, context: _Context) -> Message:
        message = cls.__new__(cls)
        message._store = store
        message._context = context
        return message

    def fields(self) -> Iterator[tuple[int, bytes]]:
        """Iterate over all (tag, value) pairs of the message in wire order."""
        return ((locator.tag, value) for locator, value in self._store.entries)

    def as_bytes(self) -> bytes:
        """The raw bytes of the whole message."""
        return self._store.data

    def __len__(self) -> int:
        return len(self._store.entries)

    def _lookup(self, tag: int) -> Optional[tuple[bytes, int]]:
        if tag < 1:
            return None
        return self._store.index.get(FieldLocator(tag, *self._context))

    def get_raw(self, tag: int) -> Optional[bytes]:
        """The raw value of ``tag`` in this context, or None if absent."""
        found = self._lookup(tag)
        return found[0] if found is not None else None

    def get(self, tag: int, kind: Union[type, Callable[[bytes], Any]] = bytes) -> Any:
        """The value of ``tag`` converted with ``kind``.

        ``kind`` is bytes, str, int, float, bool (Y/N) or any callable taking
        the raw bytes. Raises FieldPresenceError if the field is absent and
        ValueError if its value does not convert.
        """
        raw = self.get_raw(tag)
        if raw is None:
            raise FieldPresenceError()
        return _deserialize(raw, kind)

    def group(self, tag: int) -> MessageGroup:
        """The repeating group whose NumInGroup field is ``tag``."""
        found = self._lookup(tag)
        if found is None:
            raise FieldPresenceError()
        value, position = found
        if not value.isdigit():
            raise ValueError(f"invalid NumInGroup value {value!r}")
        return MessageGroup(self, position, int(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return list(self.fields()) == list(other.fields())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Message({self._store.data!r})"


class MessageGroup:
    """A repeating group within a Message."""

    def __init__(self, message: Message, index_of_group_tag: int, length: int) -> None:
        self._store = message._store
        self._index_of_group_tag = index_of_group_tag
        self._length = length

    def __len__(self) -> int:
        return self._length

    def get(self, index: int) -> Optional[Message]:
        """The entry at ``index``, or None if out of range."""
        if not 0 <= index < self._length:
            return None
        return Message._view(self._store, (self._index_of_group_tag, index))

    def __iter__(self) -> Iterator[Message]:
        for index in range(self._length):
            yield Message._view(self._store, (self._index_of_group_tag, index))

    def __repr__(self) -> str:
        return f"MessageGroup(len={self._length})"