# airmirror

Building blocks for a screen-mirroring receiver, written in pure Python on top of
`cryptography`.

## What is inside

- `airmirror.byteutils`: little- and big-endian integer reads (`get_short`,
  `get_int`, `get_long`, their `_be` variants, `get_float`), `put_int`, and NTP
  timestamp conversion to and from microseconds since the Unix epoch
  (`get_ntp_timestamp`, `put_ntp_timestamp`).
- `airmirror.logger`: a thread-safe `Logger` with syslog-style `LogLevel`
  values. It drops messages above its level (`LogLevel.WARNING` by default),
  hands the rest to a callback set with `set_callback(callback)`, which is
  called as `callback(level, message)`, or prints them to stderr when no
  callback is set. `console_log` prints a formatted message to stdout.
- `airmirror.crypto`: `AesCtr` and `AesCbc` (AES-128, no padding), `X25519Key`
  and `Ed25519Key` wrappers, and an incremental `Sha512`. Failures raise
  `CryptoError`.
- `airmirror.pairing`: the pair-verify handshake. A `Pairing` holds the
  long-term Ed25519 identity; each `PairingSession` (from
  `Pairing.new_session()`) runs one exchange: `handshake`, `get_public_key`,
  `get_signature`, `finish`. Out-of-order steps and failed verification raise
  `PairingError`.
- `airmirror.mirror_buffer`: `MirrorBuffer` derives the video stream key and IV
  from the audio key and a stream connection id (`init_aes`), then decrypts
  mirroring payloads that do not line up with AES block boundaries (`decrypt`).
- `airmirror.fairplay`: `FairPlay.setup` answers a 16-byte setup request with
  the 142-byte reply for its mode, and `FairPlay.handshake` stores the 164-byte
  key message and returns the 32-byte reply. Bad requests raise
  `FairPlayError`.
- `airmirror.http_response`: `HttpResponse`, which builds a serialized
  HTTP/RTSP response and adds `Content-Length` when a body is given.
- `airmirror.netutils`: `init_socket` binds a TCP or UDP socket to the wildcard
  address and returns it with its port, `get_address` packs the IP of a socket
  address (unwrapping IPv4-mapped IPv6), and `parse_address` turns a numeric IP
  string into a socket address.
- `airmirror.stream`: the `H264DecodeData` and `AudioDecodeData` dataclasses
  for payloads handed to renderers.

## Installing

```
pip install .
```

## Examples

Build a response:

```python
from airmirror.http_response import HttpResponse

response = HttpResponse("RTSP/1.0", 200, "OK")
response.add_header("CSeq", "1")
response.finish(b"")
wire_bytes = response.get_data()
# b"RTSP/1.0 200 OK\r\nCSeq: 1\r\n\r\n"
```

Work with NTP timestamps:

```python
from airmirror import byteutils

buf = bytearray(8)
byteutils.put_ntp_timestamp(buf, 0, 1_000_000)
assert byteutils.get_ntp_timestamp(buf, 0) == 1_000_000
```

Decrypt a mirroring stream:

```python
from airmirror.mirror_buffer import MirrorBuffer

buffer = MirrorBuffer(bytes(16))
buffer.init_aes(1234)
plaintext = buffer.decrypt(encrypted_chunk)
```

Route log messages to your own function:

```python
from airmirror.logger import Logger, LogLevel

logger = Logger()
logger.set_level(LogLevel.DEBUG)
logger.set_callback(lambda level, message: print(level, message))
logger.log(LogLevel.INFO, "listening on port %d", 7000)
```

## What it does not do

The package holds no HTTP/RTSP request parser and no server: it does not
accept connections, read requests or dispatch them. It builds responses, binds
sockets and provides the cryptographic steps, but a receiver that talks to
clients has to be put together on top of it. There is no command-line program,
no service advertisement and no video or audio playback.

## Running the tests

```
pip install .[test]
pytest
```