"""A fixed-size byte stack that holds values of differing sizes."""

from __future__ import annotations

import itertools
import struct
from typing import Any

DEFAULT_STACK_SIZE = 1024
_REFERENCE_FORMAT = "=Q"
_REFERENCE_SIZE = struct.calcsize(_REFERENCE_FORMAT)


class VariadicStack:
    """Stack of raw byte records in a fixed buffer."""

    def __init__(self, size: int = DEFAULT_STACK_SIZE) -> None:
        if size <= 0:
            raise ValueError("stack size must be positive")
        self._size = size
        self._storage = bytearray(size)
        self._offset = 0
        self._count = 0
        self._references: dict[int, Any] = {}
        self._tokens = itertools.count(1)

    @property
    def size(self) -> int:
        return self._size

    @property
    def top_offset(self) -> int:
        return self._offset

    @property
    def count(self) -> int:
        return self._count

    @property
    def data(self) -> bytes:
        return bytes(self._storage)

    def push(self, data: bytes) -> None:
        """Copy ``data`` on top of the stack."""
        length = len(data)
        if self._offset + length > self._size:
            raise OverflowError(
                f"pushing {length} bytes at offset {self._offset} "
                f"exceeds stack size {self._size}"
            )
        self._storage[self._offset:self._offset + length] = data
        self._offset += length
        self._count += 1

    def pop(self, size: int) -> bytes:
        """Remove and return the top ``size`` bytes."""
        if self._offset - size < 0:
            raise IndexError(
                f"popping {size} bytes from offset {self._offset} underflows the stack"
            )
        self._offset -= size
        self._count -= 1
        return bytes(self._storage[self._offset:self._offset + size])

    def push_value(self, fmt: str, value: Any) -> None:
        """Pack ``value`` with the struct format ``fmt`` and push it."""
        self.push(struct.pack(fmt, value))

    def pop_value(self, fmt: str) -> Any:
        """Pop a value packed with the struct format ``fmt``."""
        (value,) = struct.unpack(fmt, self.pop(struct.calcsize(fmt)))
        return value

    def push_reference(self, obj: Any) -> None:
        """Push a pointer-sized handle that refers to ``obj``."""
        if self._offset + _REFERENCE_SIZE > self._size:
            raise OverflowError("no room for a reference on the stack")
        token = next(self._tokens)
        self.push(struct.pack(_REFERENCE_FORMAT, token))
        self._references[token] = obj

    def pop_reference(self) -> Any:
        """Pop a handle pushed by push_reference and return its object."""
        (token,) = struct.unpack(_REFERENCE_FORMAT, self.pop(_REFERENCE_SIZE))
        try:
            return self._references.pop(token)
        except KeyError:
            raise LookupError("top of stack does not hold a reference") from None