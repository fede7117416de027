"""The receiving side of a TCP connection."""

from __future__ import annotations

from tcpkit.byte_stream import ByteStream
from tcpkit.messages import TCPReceiverMessage, TCPSenderMessage
from tcpkit.reassembler import Reassembler
from tcpkit.wrapping_integers import Wrap32

_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Places incoming segments into the stream and reports acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self.reassembler = reassembler
        self._isn = Wrap32(0)
        self._syn_seen = False

    @property
    def stream(self) -> ByteStream:
        """The byte stream the received data is written to."""
        return self.reassembler.output

    def receive(self, message: TCPSenderMessage) -> None:
        """Take in a segment from the peer's sender."""
        if message.rst:
            self.stream.set_error()
            return
        if not self._syn_seen:
            if not message.syn:
                return
            self._isn = message.seqno
            self._syn_seen = True
        absolute_seqno = message.seqno.unwrap(self._isn, self.stream.bytes_pushed())
        stream_index = absolute_seqno + int(message.syn) - 1
        if stream_index < 0:
            # A data segment carrying the ISN's own sequence number has no place in the stream.
            return
        self.reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment and window to send to the peer."""
        stream = self.stream
        window = min(stream.available_capacity(), _MAX_WINDOW)
        if not self._syn_seen:
            return TCPReceiverMessage(None, window, stream.has_error())
        ackno = stream.bytes_pushed() + 1 + int(stream.is_closed())
        return TCPReceiverMessage(Wrap32.wrap(ackno, self._isn), window, stream.has_error())