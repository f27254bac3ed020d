"""Fixed-size, NUL-terminated text buffers for the debug text overlay."""

from __future__ import annotations

BUF_SIZE = 256


class TextBuffer:
    """Collects UTF-8 text up to a fixed number of bytes, dropping the rest."""

    def __init__(self, capacity: int = BUF_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._data = bytearray()
        self._truncated = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def truncated(self) -> bool:
        """True once any written text did not fit."""
        return self._truncated

    def __len__(self) -> int:
        return len(self._data)

    def write(self, text: str) -> bool:
        """Append text; return False if it had to be cut short."""
        encoded = text.encode("utf-8")
        room = self._capacity - len(self._data)
        if len(encoded) > room:
            self._data.extend(encoded[:room])
            self._truncated = True
            return False
        self._data.extend(encoded)
        return True

    def to_bytes(self) -> bytes:
        """Return the collected bytes followed by a terminating NUL."""
        return bytes(self._data) + b"\x00"


def format_text(text: str) -> bytes:
    """Return text as a NUL-terminated string of at most BUF_SIZE bytes."""
    buf = TextBuffer()
    buf.write(text)
    return buf.to_bytes()