import pytest

from fixwire.checks import checksum
from fixwire.config import Config
from fixwire.errors import CheckSumError, DecodeError, InvalidMessageError
from fixwire.raw_decoder import RawDecoder, RawFrame

SAMPLE = b"8=FIX.4.2|9=40|35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|10=091|"


def new_decoder() -> RawDecoder:
    return RawDecoder(Config(separator=ord("|")))


def test_empty_message_is_invalid():
    with pytest.raises(InvalidMessageError):
        new_decoder().decode(b"")


def test_sample_message_is_valid():
    frame = new_decoder().decode(SAMPLE)
    assert frame.begin_string() == b"FIX.4.2"
    assert frame.payload() == b"35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|"


def test_frame_keeps_raw_bytes_and_payload_length():
    data = b"8=FIX.4.2|9=42|35=0|49=A|56=B|34=12|52=20100304-07:59:30|10=022|"
    frame = new_decoder().decode(data)
    assert frame.data == data
    assert frame.begin_string() == b"FIX.4.2"
    assert len(frame.payload()) == 42


def test_message_with_only_msg_type_tag_is_valid():
    frame = new_decoder().decode(b"8=?|9=5|35=?|10=183|")
    assert frame.begin_string() == b"?"
    assert frame.payload() == b"35=?|"


def test_message_with_empty_payload_is_invalid():
    with pytest.raises(InvalidMessageError):
        new_decoder().decode(b"8=?|9=5|10=082|")


def test_message_with_wrong_body_length_is_invalid():
    data = b"8=FIX.4.2|9=41|35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|10=091|"
    with pytest.raises(InvalidMessageError):
        new_decoder().decode(data)


def test_message_with_bad_checksum_is_invalid():
    decoder = new_decoder()
    decoder.config.separator = 0x01
    decoder.config.verify_checksum = True
    with pytest.raises(CheckSumError):
        decoder.decode(SAMPLE.replace(b"|", b"\x01")[:-4] + b"000\x01")


def test_message_with_good_checksum_is_valid():
    body = SAMPLE.replace(b"|", b"\x01")[:-7]
    data = body + b"10=%03d\x01" % checksum(body)
    frame = RawDecoder().decode(data)
    assert frame.payload() == b"35=D\x0149=AFUNDMGR\x0156=ABROKER\x0115=USD\x0159=0\x01"


def test_checksum_ignored_when_disabled():
    decoder = RawDecoder(Config(verify_checksum=False))
    data = SAMPLE.replace(b"|", b"\x01")[:-4] + b"000\x01"
    assert decoder.decode(data).begin_string() == b"FIX.4.2"


@pytest.mark.parametrize(
    "data",
    [
        b"8=|9=0|10=225|",
        b"8=|9=0|10=|",
        b"8====|9=0|10=|",
        b"|||9=0|10=|",
        b"9999999999999",
        b"-9999999999999",
        b"==============",
        b"9999999999999|",
        b"|999999999999=|",
        b"|999=999999999999999999|=",
    ],
)
def test_edge_cases_raise_decode_error(data):
    with pytest.raises(DecodeError):
        new_decoder().decode(data)


def test_new_streaming_decoder_has_no_current_frame():
    decoder = new_decoder().streaming()
    assert decoder.num_bytes_required() == 20
    with pytest.raises(RuntimeError):
        decoder.raw_frame()


def test_new_streaming_decoder():
    stream = SAMPLE * 42
    decoder = new_decoder().streaming()
    position = 0
    ready = False
    while not ready:
        count = decoder.fillable_len()
        decoder.feed(stream[position:position + count])
        position += count
        ready = decoder.try_parse()
    frame = decoder.raw_frame()
    assert isinstance(frame, RawFrame)
    assert frame.begin_string() == b"FIX.4.2"
    assert frame.payload() == b"35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|"
    assert position == len(SAMPLE)


def test_streaming_decoder_reads_consecutive_messages():
    stream = SAMPLE * 3
    decoder = new_decoder().streaming()
    position = 0
    payloads = []
    for _ in range(3):
        while True:
            count = decoder.fillable_len()
            decoder.feed(stream[position:position + count])
            position += count
            if decoder.try_parse():
                break
        payloads.append(decoder.raw_frame().payload())
        decoder.clear()
    assert payloads == [b"35=D|49=AFUNDMGR|56=ABROKER|15=USD|59=0|"] * 3
    assert position == len(stream)


def test_streaming_decoder_expects_whole_message_after_header():
    decoder = new_decoder().streaming()
    decoder.feed(SAMPLE[:20])
    assert decoder.try_parse() is False
    assert decoder.num_bytes_required() == len(SAMPLE)
    assert decoder.fillable_len() == len(SAMPLE) - 20


def test_streaming_decoder_rejects_garbage_header():
    decoder = new_decoder().streaming()
    decoder.feed(b"====================")
    with pytest.raises(InvalidMessageError):
        decoder.try_parse()


def test_streaming_clear_resets_state():
    decoder = new_decoder().streaming()
    decoder.feed(SAMPLE[:20])
    decoder.try_parse()
    decoder.clear()
    assert decoder.num_bytes_required() == 20
    assert decoder.buffer == bytearray()