"""Messages exchanged between a TCP sender and a TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass, field

from tcpkit.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment from the sender: sequence number, flags and payload."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers this segment occupies."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """The receiver's acknowledgment and window advertisement."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False