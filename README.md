# tcpkit

Building blocks for the receiving half of a TCP connection. They are written
in plain Python and have no third-party dependencies.

- `Wrap32` (`tcpkit.wrapping_integers`): 32-bit sequence numbers that wrap
  around. It converts absolute stream indices to and from these sequence
  numbers, relative to an initial sequence number (ISN).
- `ByteStream` and `read` (`tcpkit.byte_stream`): a bounded in-memory byte
  stream. It has a writing side and a reading side, a close flag and an
  error flag.
- `Reassembler` (`tcpkit.reassembler`): takes substrings that arrive out of
  order or overlap, and writes them in order into a `ByteStream`.
- `TCPSenderMessage` and `TCPReceiverMessage` (`tcpkit.messages`): the
  segments that the two halves of a connection exchange.
- `TCPReceiver` (`tcpkit.tcp_receiver`): turns incoming `TCPSenderMessage`s
  into stream bytes. It builds the acknowledgement and the window
  advertisement to send back.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install ".[test]"
pytest
```

## Sequence numbers

```python
from tcpkit.wrapping_integers import Wrap32

isn = Wrap32(15)
seqno = Wrap32.wrap(3 * 2**32 + 17, isn)
assert seqno == Wrap32(32)
assert seqno.unwrap(isn, 3 * 2**32) == 3 * 2**32 + 17
assert Wrap32(10) + 5 == Wrap32(15)
```

`unwrap` returns the absolute index that is closest to the checkpoint.

## Byte streams

```python
from tcpkit.byte_stream import ByteStream, read

stream = ByteStream(8)
stream.push(b"hello, world")   # only as much as fits is accepted
assert stream.bytes_pushed() == 8
assert read(stream, 5) == b"hello"
assert stream.bytes_buffered() == 3
stream.close()
```

If `pop` is asked for more bytes than are buffered, it sets the stream's
error flag. Check the flag with `has_error()`.

## Reassembly

```python
from tcpkit.byte_stream import ByteStream, read
from tcpkit.reassembler import Reassembler

reassembler = Reassembler(ByteStream(64))
reassembler.insert(3, b"def", False)
assert reassembler.bytes_pending() == 3
reassembler.insert(0, b"abc", True)
assert read(reassembler.output, 6) == b"abcdef"
assert reassembler.output.is_finished()
```

The reassembler discards bytes that lie beyond the output's available
capacity. It closes the output once the last substring has been written.

## Receiver

```python
from tcpkit.byte_stream import ByteStream
from tcpkit.messages import TCPSenderMessage
from tcpkit.reassembler import Reassembler
from tcpkit.tcp_receiver import TCPReceiver
from tcpkit.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(1000)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(100), syn=True, payload=b"hi"))
reply = receiver.send()
assert reply.ackno == Wrap32(103)
assert reply.window_size == 998
```

The receiver ignores segments that arrive before the SYN. A segment with
`rst` set puts the stream into the error state, and the receiver reports
that state in the `rst` field of its replies. The advertised window is at
most 65535.

## What is not included

The package has no sending side. Nothing here splits an outbound stream
into segments, tracks the peer's window or retransmits unacknowledged
data. It also does no network I/O: there are no sockets, no wire formats
and no command-line tool. Messages are plain Python objects that your own
code passes between the parts.