"""Nanosecond time points: unit conversion, clocks and fixed-width formatting."""

from __future__ import annotations

import time

_NS_PER_US = 1000
_NS_PER_MS = 1000 * 1000
_NS_PER_S = 1000 * 1000 * 1000

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_NANOSECOND_DIGITS = 19
_SECONDS_DIGITS = 10
_FRACTION_DIGITS = 9


def _divide(value: int | float, divisor: int) -> int | float:
    """Divide like integer arithmetic does in C: truncate toward zero for ints."""
    if isinstance(value, int):
        quotient = abs(value) // divisor
        return -quotient if value < 0 else quotient
    return value / divisor


def s_to_ns(seconds: int | float) -> int | float:
    """Convert seconds to nanoseconds."""
    return seconds * _NS_PER_S


def ms_to_ns(milliseconds: int | float) -> int | float:
    """Convert milliseconds to nanoseconds."""
    return milliseconds * _NS_PER_MS


def us_to_ns(microseconds: int | float) -> int | float:
    """Convert microseconds to nanoseconds."""
    return microseconds * _NS_PER_US


def ns_to_s(nanoseconds: int | float) -> int | float:
    """Convert nanoseconds to seconds, truncating toward zero for integers."""
    return _divide(nanoseconds, _NS_PER_S)


def ns_to_ms(nanoseconds: int | float) -> int | float:
    """Convert nanoseconds to milliseconds, truncating toward zero for integers."""
    return _divide(nanoseconds, _NS_PER_MS)


def ns_to_us(nanoseconds: int | float) -> int | float:
    """Convert nanoseconds to microseconds, truncating toward zero for integers."""
    return _divide(nanoseconds, _NS_PER_US)


def system_time_now() -> int:
    """Return the system (wall clock) time in nanoseconds since the Unix epoch."""
    return time.time_ns()


def steady_time_now() -> int:
    """Return the time of a monotonically increasing clock in nanoseconds."""
    return time.monotonic_ns()


def _check_time_point(time_point: int) -> int:
    if isinstance(time_point, bool) or not isinstance(time_point, int):
        raise TypeError(f"time point must be an int, not {type(time_point).__name__}")
    if not _INT64_MIN <= time_point <= _INT64_MAX:
        raise ValueError("time point does not fit in a signed 64-bit integer")
    return time_point


def time_point_as_nanoseconds_string(time_point: int) -> str:
    """Format a time point as 19 zero-padded nanosecond digits, with '-' if negative."""
    value = _check_time_point(time_point)
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):0{_NANOSECOND_DIGITS}d}"


def time_point_as_seconds_string(time_point: int) -> str:
    """Format a time point as seconds: 10 zero-padded digits, '.', 9 fraction digits."""
    value = _check_time_point(time_point)
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), _NS_PER_S)
    return f"{sign}{whole:0{_SECONDS_DIGITS}d}.{fraction:0{_FRACTION_DIGITS}d}"