"""Interned names: a global pool of strings plus a trailing numeric suffix."""

from __future__ import annotations

from dataclasses import dataclass

MAX_NAME_LENGTH = 1024
NO_DIGITS = 0

_U32 = 0xFFFFFFFF
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


@dataclass(frozen=True)
class NameEntry:
    """A single string stored in the name pool."""

    name: str

    def __post_init__(self) -> None:
        if len(self.name) >= MAX_NAME_LENGTH:
            raise ValueError(
                f"name is {len(self.name)} characters long; "
                f"the limit is {MAX_NAME_LENGTH - 1}"
            )

    @property
    def length(self) -> int:
        return len(self.name)


class NamePool:
    """Maps 32-bit hash keys to name entries."""

    def __init__(self) -> None:
        self._entries: dict[int, NameEntry] = {}

    def store(self, text: str) -> int:
        """Store ``text`` unless its key is already present; return the key."""
        key = self.generate_hash(text)
        if key not in self._entries:
            self._entries[key] = NameEntry(text)
        return key

    def generate_hash(self, text: str) -> int:
        """Return a stable 32-bit hash of ``text``."""
        value = _FNV_OFFSET
        for byte in text.encode("utf-16-le"):
            value = ((value ^ byte) * _FNV_PRIME) & _U32
        return value

    def find_entry(self, key: int) -> NameEntry:
        """Return the entry stored under ``key``; raise KeyError if absent."""
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"no name entry with key {key:#010x}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_POOL = NamePool()


def get_name_pool() -> NamePool:
    """Return the process-wide name pool."""
    return _POOL


def detect_trailing_digit(text: str) -> tuple[int, int]:
    """Return the trailing decimal number of ``text`` and its length in characters."""
    length = 0
    for char in reversed(text):
        if not "0" <= char <= "9":
            break
        length += 1
    if length == 0:
        return 0, 0
    return int(text[len(text) - length:]) & _U32, length


def make_name(text: str) -> tuple[int, int]:
    """Split ``text`` into a pooled base string key and a stored digit value.

    The stored digit is the real number plus one, so that zero means
    "no number".
    """
    if not text:
        return 0, NO_DIGITS
    digit, length = detect_trailing_digit(text)
    digits = digit if length == 0 else (digit + 1) & _U32
    key = get_name_pool().store(text[: len(text) - length])
    return key, digits


def get_name_string(key: int, digits: int) -> str:
    """Rebuild the display string of a name from its key and stored digits."""
    result = get_name_pool().find_entry(key).name
    if digits != NO_DIGITS:
        result += str(digits - 1)
    return result


class Name:
    """A pooled string with an optional numeric suffix."""

    __slots__ = ("_key", "_digits")

    def __init__(self, text: str = "") -> None:
        self._key, self._digits = make_name(text)

    @property
    def key(self) -> int:
        return self._key

    @property
    def digits(self) -> int:
        return self._digits

    def to_string(self) -> str:
        return get_name_string(self._key, self._digits)

    def is_valid(self) -> bool:
        return self._key != 0

    def get_hash(self) -> int:
        return (self._key << 32) | self._digits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._key == other._key and self._digits == other._digits

    def __hash__(self) -> int:
        return self.get_hash()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if not self.is_valid():
            return "Name()"
        return f"Name({self.to_string()!r})"