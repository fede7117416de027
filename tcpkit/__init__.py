"""Building blocks of a TCP receiver: wrapping sequence numbers, byte streams, reassembly and messages."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "messages", "reassembler", "tcp_receiver", "wrapping_integers"]