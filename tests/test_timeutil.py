import pytest
from hypothesis import given
from hypothesis import strategies as st

from rctools.timeutil import (
    ms_to_ns,
    ns_to_ms,
    ns_to_s,
    ns_to_us,
    s_to_ns,
    steady_time_now,
    system_time_now,
    time_point_as_nanoseconds_string,
    time_point_as_seconds_string,
    us_to_ns,
)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


def test_to_ns_factors():
    assert s_to_ns(1) == 1000 * 1000 * 1000
    assert ms_to_ns(1) == 1000 * 1000
    assert us_to_ns(1) == 1000


@given(st.integers(min_value=-(10**9), max_value=10**9))
def test_conversion_round_trips(value):
    assert ns_to_s(s_to_ns(value)) == value
    assert ns_to_ms(ms_to_ns(value)) == value
    assert ns_to_us(us_to_ns(value)) == value


@given(st.integers(min_value=-(10**15), max_value=10**15))
def test_ns_to_s_truncates_toward_zero(value):
    result = ns_to_s(value)
    assert abs(result) * 1000 * 1000 * 1000 <= abs(value)
    assert ns_to_s(-value) == -result


def test_ns_to_s_negative_fraction_truncates():
    assert ns_to_s(-s_to_ns(1) // 2) == 0
    assert ns_to_ms(-ms_to_ns(3) - 1) == -3


def test_float_conversion_divides():
    assert ns_to_s(s_to_ns(1.5)) == 1.5


def test_clocks():
    first = steady_time_now()
    second = steady_time_now()
    assert second >= first
    assert system_time_now() > s_to_ns(1_000_000_000)


def test_nanoseconds_string_zero():
    assert time_point_as_nanoseconds_string(0) == "0" * 19


@given(int64s)
def test_nanoseconds_string_round_trip(value):
    text = time_point_as_nanoseconds_string(value)
    assert int(text) == value
    assert len(text) == (20 if value < 0 else 19)
    assert text.startswith("-") == (value < 0)


def test_nanoseconds_string_extremes():
    assert time_point_as_nanoseconds_string(INT64_MAX) == str(INT64_MAX)
    assert time_point_as_nanoseconds_string(INT64_MIN) == str(INT64_MIN)


@given(int64s)
def test_seconds_string_round_trip(value):
    text = time_point_as_seconds_string(value)
    negative = text.startswith("-")
    assert negative == (value < 0)
    whole, fraction = text.lstrip("-").split(".")
    assert len(whole) == 10
    assert len(fraction) == 9
    magnitude = int(whole) * 1000 * 1000 * 1000 + int(fraction)
    assert (-magnitude if negative else magnitude) == value


def test_seconds_string_example():
    assert time_point_as_seconds_string(s_to_ns(1) + 5) == "0000000001.000000005"


@pytest.mark.parametrize("bad", [INT64_MAX + 1, INT64_MIN - 1])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        time_point_as_nanoseconds_string(bad)
    with pytest.raises(ValueError):
        time_point_as_seconds_string(bad)


@pytest.mark.parametrize("bad", [1.5, "12", None, True])
def test_non_int_rejected(bad):
    with pytest.raises(TypeError):
        time_point_as_nanoseconds_string(bad)