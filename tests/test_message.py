import pytest

from fixwire.errors import FieldPresenceError
from fixwire.message import FieldLocator, Message, MessageGroup

RAW = (
    b"8=FIX.4.2|9=0|35=X|34=12|43=Y|270=1.37215|268=2|"
    b"278=BID|15=EUR|278=OFFER|15=EUR|346=1|10=000|"
)


def _entries():
    return [
        (FieldLocator(8), b"FIX.4.2"),
        (FieldLocator(35), b"X"),
        (FieldLocator(34), b"12"),
        (FieldLocator(43), b"Y"),
        (FieldLocator(270), b"1.37215"),
        (FieldLocator(268), b"2"),
        (FieldLocator(278, 5, 0), b"BID"),
        (FieldLocator(15, 5, 0), b"EUR"),
        (FieldLocator(278, 5, 1), b"OFFER"),
        (FieldLocator(15, 5, 1), b"EUR"),
        (FieldLocator(346), b"1"),
    ]


@pytest.fixture
def message():
    return Message(RAW, _entries())


def test_fields_in_wire_order(message):
    tags = [tag for tag, _ in message.fields()]
    assert tags == [locator.tag for locator, _ in _entries()]
    assert next(message.fields()) == (8, b"FIX.4.2")


def test_len_matches_fields(message):
    assert len(message) == len(list(message.fields())) == len(_entries())


def test_as_bytes(message):
    assert message.as_bytes() == RAW


def test_get_raw_top_level(message):
    assert message.get_raw(35) == b"X"
    assert message.get_raw(346) == b"1"
    assert message.get_raw(278) is None
    assert message.get_raw(999) is None
    assert message.get_raw(0) is None


def test_get_conversions(message):
    assert message.get(34, int) == 12
    assert message.get(34) == b"12"
    assert message.get(35, str) == "X"
    assert message.get(43, bool) is True
    assert message.get(270, float) == pytest.approx(1.37215)
    assert message.get(35, lambda raw: raw.lower()) == b"x"


def test_get_missing_raises(message):
    with pytest.raises(FieldPresenceError):
        message.get(999, int)


def test_get_invalid_value_raises(message):
    with pytest.raises(ValueError):
        message.get(35, int)
    with pytest.raises(ValueError):
        message.get(35, bool)


def test_group_entries(message):
    group = message.group(268)
    assert isinstance(group, MessageGroup)
    assert len(group) == 2
    assert group.get(0).get_raw(278) == b"BID"
    assert group.get(1).get_raw(278) == b"OFFER"
    assert [entry.get(15, str) for entry in group] == ["EUR", "EUR"]


def test_group_out_of_range_is_none(message):
    group = message.group(268)
    assert group.get(2) is None
    assert group.get(-1) is None


def test_group_entry_does_not_see_top_level(message):
    entry = message.group(268).get(0)
    assert entry.get_raw(35) is None


def test_missing_group_raises(message):
    with pytest.raises(FieldPresenceError):
        message.group(453)


def test_group_with_invalid_count_raises(message):
    with pytest.raises(ValueError):
        message.group(35)


def test_empty_group():
    msg = Message(b"", [(FieldLocator(268), b"0"), (FieldLocator(346), b"1")])
    group = msg.group(268)
    assert len(group) == 0
    assert list(group) == []
    assert msg.get_raw(346) == b"1"


def test_non_associative_message_only_iterates():
    msg = Message(RAW, _entries(), associative=False)
    assert msg.get_raw(35) is None
    assert list(msg.fields())[1] == (35, b"X")


def test_equality_depends_on_fields():
    assert Message(RAW, _entries()) == Message(b"other", _entries())
    assert Message(RAW, _entries()) != Message(RAW, _entries()[:-1])


def test_field_locator_validation():
    with pytest.raises(ValueError):
        FieldLocator(0)
    with pytest.raises(ValueError):
        FieldLocator(5, 1, None)
    assert FieldLocator(5).is_top_level
    assert not FieldLocator(5, 1, 0).is_top_level