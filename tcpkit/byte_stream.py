"""A bounded in-memory byte stream with a writing and a reading side."""

from __future__ import annotations


class ByteStream:
    """A byte stream that holds at most ``capacity`` unread bytes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        accepted = bytes(data)[: self.available_capacity()]
        self._buffer += accepted
        self._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self.capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove ``length`` bytes from the front; flags an error if fewer are buffered."""
        if length < 0:
            raise ValueError("length must be non-negative")
        if length > len(self._buffer):
            self.set_error()
            return
        del self._buffer[:length]
        self._popped += length

    def is_finished(self) -> bool:
        """True once the stream is closed and fully read."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed and not yet popped."""
        return len(self._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._popped

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(stream: ByteStream, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``stream`` and return them."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < length:
        view = stream.peek()
        if not view:
            raise RuntimeError("ByteStream.peek() returned no bytes while data is buffered")
        chunk = view[: length - len(out)]
        out += chunk
        stream.pop(len(chunk))
    return bytes(out)