"""Text output buffer, unbounded or limited to a fixed size."""

from __future__ import annotations

from typing import Optional, Union


class BufferOverflowError(Exception):
    """Raised when a bounded buffer could not hold the last write."""


class OutputBuffer:
    """Collects text; a bounded buffer keeps its content below ``limit`` characters.

    As with a fixed output area, a write that does not fit is dropped and
    marks the buffer as failed until a later write fits again.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit
        self._parts: list[str] = []
        self._size = 0
        self._error = False

    def _reserve(self, length: int) -> bool:
        if self.limit is None:
            return True
        self._error = self._size + length >= self.limit
        return not self._error

    def write(self, value: Union[str, int, float]) -> "OutputBuffer":
        """Append text or the decimal form of a number; return the buffer."""
        if isinstance(value, bool):
            text = str(int(value))
        elif isinstance(value, (int, float)):
            text = str(value)
        else:
            text = value
        if self._reserve(len(text)):
            self._parts.append(text)
            self._size += len(text)
        return self

    def clear(self) -> None:
        """Drop the content."""
        self._parts.clear()
        self._size = 0

    @property
    def failed(self) -> bool:
        """True if the last write did not fit."""
        return self._error

    def getvalue(self) -> str:
        """Return the content; raise BufferOverflowError if the last write failed."""
        if self._error:
            raise BufferOverflowError("output buffer overflow")
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._size