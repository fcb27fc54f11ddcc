"""A hash table with separate chaining, keyed by integers and holding fixed-size values."""

from __future__ import annotations

import struct
from collections.abc import Iterator

VALUE_SIZE = 64
_INVALID_BYTE = 0xCC
_MASK64 = 2**64 - 1
_INITIAL_BUCKETS = 16
_MAX_LOAD_FACTOR = 0.5
_INT_FORMAT = "<i"


class GenericValue:
    """A 64-byte opaque value. Moving it out with take() invalidates the original."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        raw = bytes(data) if data is not None else b""
        if len(raw) > VALUE_SIZE:
            raise ValueError(f"value holds at most {VALUE_SIZE} bytes, got {len(raw)}")
        self._data = bytearray(raw.ljust(VALUE_SIZE, b"\0"))

    @classmethod
    def from_int(cls, value: int) -> GenericValue:
        """Return a value whose leading bytes hold a 32-bit signed integer."""
        try:
            return cls(struct.pack(_INT_FORMAT, value))
        except struct.error as exc:
            raise ValueError(f"{value} does not fit in a 32-bit integer") from exc

    def as_int(self) -> int:
        """Interpret the leading bytes as a 32-bit signed integer."""
        (value,) = struct.unpack_from(_INT_FORMAT, self._data)
        return value

    @property
    def data(self) -> bytes:
        """The raw bytes of the value."""
        return bytes(self._data)

    def take(self) -> GenericValue:
        """Move the contents into a new value and mark this one as invalid."""
        moved = GenericValue(self._data)
        self._data[:] = bytes([_INVALID_BYTE]) * VALUE_SIZE
        return moved

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenericValue):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GenericValue({self.data!r})"


class Entry:
    """A key and its value; the key cannot be changed once set."""

    __slots__ = ("_key", "value")

    def __init__(self, key: int, value: GenericValue | None = None) -> None:
        self._key = key
        self.value = value if value is not None else GenericValue()

    @property
    def key(self) -> int:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key == other._key and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entry({self._key!r}, {self.value!r})"


class ChainingHashTable:
    """Integer keys hashed by identity into chains; doubles its buckets above load 0.5."""

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(_INITIAL_BUCKETS)]
        self._entries: list[Entry] = []

    def _bucket(self, key: int) -> list[Entry]:
        return self._buckets[(key & _MASK64) % len(self._buckets)]

    def _lookup(self, key: int) -> Entry | None:
        return next((entry for entry in self._bucket(key) if entry.key == key), None)

    def _add(self, entry: Entry) -> Entry:
        self._bucket(entry.key).insert(0, entry)
        self._entries.append(entry)
        if len(self._entries) / len(self._buckets) > _MAX_LOAD_FACTOR:
            self._rehash()
        return entry

    def _rehash(self) -> None:
        count = len(self._buckets) * 2
        buckets: list[list[Entry]] = [[] for _ in range(count)]
        for entry in self._entries:
            buckets[(entry.key & _MASK64) % count].insert(0, entry)
        self._buckets = buckets
        self._entries = [entry for bucket in buckets for entry in bucket]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._lookup(key) is not None

    def __getitem__(self, key: int) -> GenericValue:
        """Return the value for key, inserting an empty value if it is absent."""
        entry = self._lookup(key)
        if entry is None:
            entry = self._add(Entry(key))
        return entry.value

    def __setitem__(self, key: int, value: GenericValue) -> None:
        self.insert(key, value)

    def insert(self, key: int, value: GenericValue) -> GenericValue:
        """Move value into the table under key, replacing any previous value."""
        if not isinstance(key, int):
            raise TypeError(f"keys must be integers, not {type(key).__name__}")
        entry = self._lookup(key)
        if entry is not None:
            entry.value = value.take()
            return entry.value
        return self._add(Entry(key, value.take())).value

    def erase(self, key: int) -> None:
        """Remove key from the table if it is present."""
        bucket = self._bucket(key)
        entry = next((e for e in bucket if e.key == key), None)
        if entry is None:
            return
        bucket.remove(entry)
        self._entries = [e for e in self._entries if e is not entry]

    def find(self, key: int) -> Entry | None:
        """Return the entry for key, or None if it is absent."""
        return self._lookup(key)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)