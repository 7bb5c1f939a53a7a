import time

import pytest

from wfrest.timestamp import Timestamp


def test_default_is_invalid():
    assert Timestamp().valid() is False
    assert Timestamp.invalid() == Timestamp(0)


def test_positive_is_valid():
    assert Timestamp(1).valid() is True


def test_to_str_fraction_unpadded():
    assert Timestamp(1_000_001).to_str() == "1.1"
    assert Timestamp(1_500_000).to_str() == "1.500000"


def test_now_is_close_to_clock():
    before = time.time()
    stamp = Timestamp.now()
    after = time.time()
    assert stamp.valid()
    seconds = stamp.micro_sec_since_epoch / Timestamp.K_MICRO_SEC_PER_SEC
    assert before - 1 <= seconds <= after + 1


def test_add_int_is_microseconds():
    assert Timestamp(10) + 5 == Timestamp(15)


def test_add_float_is_seconds():
    assert Timestamp(0) + 2.5 == Timestamp(2_500_000)


def test_sub_int_and_float():
    assert Timestamp(3_000_000) - 1_000_000 == Timestamp(2_000_000)
    assert Timestamp(3_000_000) - 1.0 == Timestamp(2_000_000)


def test_difference_in_seconds():
    high = Timestamp(5_000_000)
    low = Timestamp(2_500_000)
    assert high - low == 2.5


def test_add_then_subtract_round_trip():
    start = Timestamp(123_456_789)
    assert (start + 1_000) - 1_000 == start
    assert (start + 3.0) - start == 3.0


def test_ordering():
    assert Timestamp(1) < Timestamp(2)
    assert Timestamp(2) >= Timestamp(2)
    assert sorted([Timestamp(3), Timestamp(1)]) == [Timestamp(1), Timestamp(3)]


def test_negative_rejected():
    with pytest.raises(ValueError):
        Timestamp(-1)
    with pytest.raises(ValueError):
        Timestamp(5) - 10


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Timestamp(1) + "x"


def test_format_round_trip_local_time():
    seconds = 1_600_000_000
    stamp = Timestamp(seconds * Timestamp.K_MICRO_SEC_PER_SEC + 42)
    text = stamp.to_format_str("%Y-%m-%d %H:%M:%S")
    parsed = time.mktime(time.strptime(text, "%Y-%m-%d %H:%M:%S"))
    assert int(parsed) == seconds


def test_default_format_shape():
    text = Timestamp(1_600_000_000 * 1_000_000).to_format_str()
    date_part, time_part = text.split(" ", 1)
    assert len(date_part.split("-")) == 3
    assert ":" in time_part