"""Split ``timedelta`` values into calendar units and build them from totals.

Resolution is one microsecond, the resolution of ``datetime.timedelta``.
"""

from __future__ import annotations

import math
from datetime import timedelta

from semstring.errors import InvalidTimeSpanError

MICROS_PER_MILLISECOND = 1_000
MICROS_PER_SECOND = 1_000_000
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60
SECONDS_PER_DAY = SECONDS_PER_HOUR * 24


def _whole_seconds(span: timedelta) -> int:
    return span.days * SECONDS_PER_DAY + span.seconds


def partial_days(span: timedelta) -> int:
    return _whole_seconds(span) // SECONDS_PER_DAY


def partial_hours(span: timedelta) -> int:
    return (_whole_seconds(span) % SECONDS_PER_DAY) // SECONDS_PER_HOUR


def partial_minutes(span: timedelta) -> int:
    return (_whole_seconds(span) % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE


def partial_seconds(span: timedelta) -> int:
    return _whole_seconds(span) % SECONDS_PER_MINUTE


def partial_milliseconds(span: timedelta) -> int:
    return span.microseconds // MICROS_PER_MILLISECOND


def total_seconds(span: timedelta) -> float:
    return _whole_seconds(span) + span.microseconds / MICROS_PER_SECOND


def total_days(span: timedelta) -> float:
    return _whole_seconds(span) / SECONDS_PER_DAY + span.microseconds / MICROS_PER_SECOND / SECONDS_PER_DAY


def total_hours(span: timedelta) -> float:
    return _whole_seconds(span) / SECONDS_PER_HOUR + span.microseconds / MICROS_PER_SECOND / SECONDS_PER_HOUR


def total_minutes(span: timedelta) -> float:
    return (
        _whole_seconds(span) / SECONDS_PER_MINUTE
        + span.microseconds / MICROS_PER_SECOND / SECONDS_PER_MINUTE
    )


def total_milliseconds(span: timedelta) -> float:
    return _whole_seconds(span) * 1000.0 + span.microseconds / MICROS_PER_MILLISECOND


def _check_total(value: float) -> float:
    value = float(value)
    if math.isnan(value) or math.isinf(value) or math.copysign(1.0, value) < 0:
        raise InvalidTimeSpanError(value)
    return value


def _from_seconds_float(seconds: float) -> timedelta:
    whole = math.trunc(seconds)
    micros = round((seconds - whole) * MICROS_PER_SECOND)
    return timedelta(seconds=whole, microseconds=micros)


def from_total_days(days: float) -> timedelta:
    return _from_seconds_float(_check_total(days) * SECONDS_PER_DAY)


def from_total_hours(hours: float) -> timedelta:
    return _from_seconds_float(_check_total(hours) * SECONDS_PER_HOUR)


def from_total_minutes(minutes: float) -> timedelta:
    return _from_seconds_float(_check_total(minutes) * SECONDS_PER_MINUTE)


def from_total_seconds(seconds: float) -> timedelta:
    return _from_seconds_float(_check_total(seconds))


def from_total_milliseconds(milliseconds: float) -> timedelta:
    ms = _check_total(milliseconds)
    whole = math.trunc(ms)
    micros = round((ms - whole) * MICROS_PER_MILLISECOND)
    return timedelta(milliseconds=whole, microseconds=micros)


def _check_whole(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidTimeSpanError(value)
    return value


def from_days(days: int) -> timedelta:
    return timedelta(seconds=_check_whole(days) * SECONDS_PER_DAY)


def from_hours(hours: int) -> timedelta:
    return timedelta(seconds=_check_whole(hours) * SECONDS_PER_HOUR)


def from_minutes(minutes: int) -> timedelta:
    return timedelta(seconds=_check_whole(minutes) * SECONDS_PER_MINUTE)


def from_seconds(seconds: int) -> timedelta:
    return timedelta(seconds=_check_whole(seconds))


def from_milliseconds(milliseconds: int) -> timedelta:
    return timedelta(milliseconds=_check_whole(milliseconds))
