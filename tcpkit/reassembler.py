"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

import bisect

from tcpkit.byte_stream import ByteStream


class Reassembler:
    """Write out-of-order substrings into ``output`` in stream order.

    Bytes that fit within the output's available capacity but cannot be written
    yet are held until the gaps before them are filled. Bytes beyond the
    available capacity are discarded. The output is closed after the last byte
    has been written.
    """

    def __init__(self, output: ByteStream) -> None:
        self.output = output
        self._segments: list[tuple[int, bytes]] = []
        self._next_index = 0
        self._eof_index: int | None = None

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` whose first byte sits at ``first_index`` of the stream."""
        if first_index < 0:
            raise ValueError("first_index must be non-negative")
        if self.output.is_closed():
            return
        if self._eof_index is not None and first_index >= self._eof_index:
            return

        data = bytes(data)
        last_index = first_index + len(data)
        if is_last_substring:
            self._eof_index = last_index

        if not data:
            self._close_if_done()
            return

        window_end = self._next_index + self.output.available_capacity()
        start = max(first_index, self._next_index)
        end = min(last_index, window_end)
        if start >= end:
            return

        self._store(start, data[start - first_index : end - first_index])
        self._flush()
        self._close_if_done()

    def bytes_pending(self) -> int:
        """How many bytes are held here, waiting for earlier bytes."""
        return sum(len(chunk) for _, chunk in self._segments)

    def _store(self, start: int, data: bytes) -> None:
        """Keep the parts of ``data`` not already held; bytes held earlier win."""
        end = start + len(data)
        cursor = start
        pieces: list[tuple[int, bytes]] = []
        for seg_start, seg_data in self._segments:
            seg_end = seg_start + len(seg_data)
            if seg_end <= cursor:
                continue
            if seg_start >= end:
                break
            if seg_start > cursor:
                pieces.append((cursor, data[cursor - start : seg_start - start]))
            cursor = max(cursor, seg_end)
            if cursor >= end:
                break
        if cursor < end:
            pieces.append((cursor, data[cursor - start :]))
        for piece in pieces:
            bisect.insort(self._segments, piece)

    def _flush(self) -> None:
        while self._segments and self._segments[0][0] == self._next_index:
            _, chunk = self._segments.pop(0)
            self.output.push(chunk)
            self._next_index += len(chunk)

    def _close_if_done(self) -> None:
        if self._eof_index is not None and self._next_index >= self._eof_index:
            self.output.close()