# fixwire

Building blocks for working with the FIX protocol family on the wire:

- **Tag-value messages** (`8=FIX.4.4|9=...|35=...|10=...|`): a raw decoder that
  checks `BodyLength <9>` and `CheckSum <10>`, a decoder with sequential and
  random access to fields and repeating groups, streaming variants of both, and
  an encoder that fills in body length and checksum.
- **SOFH** (Simple Open Framing Header): six-byte framing with a message length
  and an encoding type, plus an incremental codec for byte streams and a small
  TCP listener command.
- **FIXP** session message types.
- **FIXS** (FIX-over-TLS) recommended cipher suites and `ssl` contexts.

Only the Python standard library is required (Python 3.10 or newer).

## Installation

```
pip install fixwire
```

To run the test suite:

```
pip install "fixwire[test]"
pytest
```

## SOFH framing

```python
from fixwire.sofh import Frame
from fixwire.sofh_encoding import EncodingType

# Message length (4 bytes, header included), encoding type (2 bytes), payload.
frame = Frame.deserialize(bytes([0, 0, 0, 7, 0x00, 0x00, 42]))
assert frame.payload == b"*"
assert frame.to_bytes() == bytes([0, 0, 0, 7, 0x00, 0x00, 42])

assert EncodingType.from_u16(0x4700) == EncodingType.from_bytes(b"\x47\x00")
assert EncodingType.from_u16(0) is None
assert EncodingType.fast(0x42).to_bytes() == b"\xfa\x42"
```

`Frame(encoding_type, payload)` accepts either a 16-bit integer or an
`EncodingType`; `frame.encoding` gives the encoding back as an `EncodingType`
(or `None` for an unassigned code). `Frame.deserialize` ignores trailing bytes.
`frame.serialize(writer)` writes to a binary file-like object and returns the
number of bytes written.

`fixwire.sofh_encoding` defines `EncodingKind` and `EncodingType`, with
constants such as `EncodingType.TAG_VALUE`, `EncodingType.JSON` and
`EncodingType.SBE_V10_LE`, plus `EncodingType.private(n)` and
`EncodingType.fast(n)` for the two ranged kinds. `int(encoding)` gives the
16-bit code.

Decoding data shorter than the header, or shorter than the length the header
announces, raises `IncompleteError` (its `needed` attribute says how many bytes
are missing); a header whose length is below six bytes raises
`InvalidMessageLengthError`. Both derive from `SofhError`.

`SofhCodec` works on a growing `bytearray`: `encode(frame, buffer)` appends a
framed message, and `decode(buffer)` removes and returns the next complete
frame, or returns `None` and leaves the buffer alone while more bytes are
needed. An illegal length still raises `InvalidMessageLengthError`.

### Listening for SOFH frames

```
fixwire-sofh-listen --host 127.0.0.1 --port 8080
```

listens on the given address (these are the defaults), accepts a single TCP
connection and prints `Received message '<payload>'` for every frame, until the
client closes the connection or sends a malformed frame. The same is available
from Python as `fixwire.sofh_listen.serve(host, port, out)`, which returns the
number of messages received.

## Tag-value messages

### Raw decoding

`fixwire.raw_decoder.RawDecoder(config=None).decode(data)` checks the minimum
length, `BodyLength <9>` and (see below) `CheckSum <10>`, and returns a
`RawFrame` with `begin_string()` and `payload()` (everything between
`BodyLength` and `CheckSum`).

### Decoding into messages

`fixwire.decoder.Decoder(tag_kinds=None, config=None)` returns a
`fixwire.message.Message`. The package carries no FIX data dictionary, so you
tell the decoder which tags start repeating groups (`TagKind.NUM_IN_GROUP`)
and which give the length of the data field that follows
(`TagKind.LENGTH`):

```python
from fixwire.config import Config
from fixwire.decoder import Decoder, TagKind

decoder = Decoder({268: TagKind.NUM_IN_GROUP}, Config(separator=b"|"))
message = decoder.decode(
    b"8=FIX.4.2|9=196|35=X|49=A|56=B|34=12|52=20100318-03:21:11.364|262=A|"
    b"268=2|279=0|269=0|278=BID|55=EUR/USD|270=1.37215|15=EUR|271=2500000|346=1|"
    b"279=0|269=1|278=OFFER|55=EUR/USD|270=1.37224|15=EUR|271=2503200|346=1|10=171|"
)

assert message.get_raw(8) == b"FIX.4.2"
assert message.get(34, int) == 12
group = message.group(268)
assert len(group) == 2
assert group.get(0).get_raw(278) == b"BID"
assert [entry.get(15, str) for entry in group] == ["EUR", "EUR"]
```

A `Message` offers:

- `fields()` — `(tag, value)` pairs in wire order; `len(message)` counts them.
- `as_bytes()` — the raw message.
- `get_raw(tag)` — the raw value, or `None` if absent.
- `get(tag, kind=bytes)` — the value converted with `bytes`, `str`, `int`,
  `float`, `bool` (`Y`/`N`) or any callable taking the raw bytes. Raises
  `FieldPresenceError` if the field is absent and `ValueError` if it does not
  convert.
- `group(tag)` — a `MessageGroup`, which supports `len()`, `get(index)`
  (`None` when out of range) and iteration over its entries.

Two messages compare equal when their fields, in order, are equal. Fields
inside groups are identified by a `FieldLocator`.

### Streaming

`RawDecoder.streaming()` and `Decoder.streaming()` return streaming decoders.
Feed them `fillable_len()` bytes at a time with `feed(data)` and call
`try_parse()` after each feed; once it returns `True`, read the result with
`raw_frame()` or `message()`, then call `clear()` before the next message.

```python
import io

stream = io.BytesIO(b"8=FIX.4.2|9=40|35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|10=091|")
streaming = Decoder(config=Config(separator=b"|")).streaming()
while True:
    streaming.feed(stream.read(streaming.fillable_len()))
    if streaming.try_parse():
        break
assert streaming.message().get_raw(35) == b"D"
streaming.clear()
```

### Configuration and errors

`fixwire.config.Config` has four fields:

- `separator` — an integer byte value or a one-byte `bytes`; defaults to SOH
  (`0x01`).
- `max_message_size` — defaults to `0xFFFF`; `None` means no limit. It is held
  in the configuration but the decoders do not currently enforce it.
- `verify_checksum` — defaults to `True`. The checksum is only verified when
  the separator is SOH.
- `should_decode_associative` — defaults to `True`; when off, messages can be
  iterated with `fields()` but lookups by tag find nothing.

Decoding errors derive from `fixwire.errors.DecodeError`:
`InvalidMessageError`, `CheckSumError` and `FieldPresenceError`.

Checksum helpers live in `fixwire.checks` (`checksum`, `checksum_digits`,
`verify_checksum`, `verify_body_length`):

```python
from fixwire.checks import checksum_digits

assert checksum_digits(b"8=FIX.4.4|9=1337|35=?|...|10=000|") == b"000"
```

### Encoding

```python
from fixwire.config import Config
from fixwire.encoder import Encoder

buffer = bytearray()
handle = Encoder(Config(separator=b"|")).start_message(b"FIX.4.4", buffer, b"D")
handle.set(49, "CLIENT12")
handle.set(34, 215)
data, offset = handle.done()
```

`set(tag, value)` accepts `bytes`, `str`, `bool` (written as `Y`/`N`), `int`,
`float`, `Decimal`, or an enum member whose value is one of those. `BodyLength
<9>` is written as eight zero-padded digits. `done()` fills in the body length,
appends `CheckSum <10>`, and returns the whole buffer contents together with
the offset at which this message starts; the handle cannot be used afterwards.

## FIX-over-TLS

```python
from fixwire.ciphers import iana_to_openssl
from fixwire.fixs import FixOverTlsV10

fixs = FixOverTlsV10()
assert "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256" in fixs.recommended_cs_iana(False)
assert "DHE-RSA-AES128-GCM-SHA256" in fixs.recommended_cs_openssl(False)
print(":".join(fixs.recommended_cs_openssl(False)))

assert iana_to_openssl("TLS_RSA_WITH_NULL_MD5") == "NULL-MD5"
```

Passing `True` selects the PSK-only suites. `recommended_client_context()` and
`recommended_server_context()` return `ssl.SSLContext` objects requiring TLS
1.2 or newer, with compression disabled and the recommended (non-PSK) cipher
list applied; the server context also prefers the server's cipher order.

## FIXP

`fixwire.fixp` defines the FIXP session message types as frozen dataclasses —
`Sequence`, `Context`, `MessageTemplate`, `Negotiate`, `NegotiationReject`,
`Establish`, `EstablishmentAck` — along with the `FlowType` and `MessageType`
enumerations. Constructors check that session ids fit in 128 bits and sequence
numbers in 64 bits.

## What is not included

- No FIX data dictionaries or generated field and enum definitions: tags are
  plain integers, and repeating-group and length tags must be passed to
  `Decoder` by hand.
- No FIX session engine (logon, heartbeats, resend handling) and no
  encoding or decoding of FIXP messages on the wire; the FIXP module only
  defines the message types.
- No JSON, FIXML or other encodings of FIX messages besides tag-value.