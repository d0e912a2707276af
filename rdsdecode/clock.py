"""Clock-time (CT) decoding from the modified Julian day and UTC time."""

from dataclasses import dataclass

__all__ = ["ClockTime", "decode_clock_time"]


@dataclass(frozen=True)
class ClockTime:
    """Local date and time with the station's UTC offset in half hours."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    offset: int

    def offset_minutes(self) -> int:
        """Return the local offset from UTC in minutes."""
        return self.offset * 30


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def decode_clock_time(mjd: int, hour: int, minute: int, offset: int) -> ClockTime:
    """Convert a UTC MJD/hour/minute and half-hour offset to local time.

    Raises ValueError when the hour or minute is out of range.
    """
    if hour >= 24 or minute >= 60:
        raise ValueError(f"corrupted clock time: {hour}:{minute}")

    minute += _trunc_mod(offset, 2) * 30
    if minute >= 60:
        hour += 1
        minute %= 60
    elif minute < 0:
        hour -= 1
        minute += 60

    hour += _trunc_div(offset, 2)
    if hour >= 24:
        mjd += 1
        hour %= 24
    elif hour < 0:
        mjd -= 1
        hour += 24

    year = (mjd * 100 - 1507820) // 36525
    year_days = (year * 36525) // 100
    month = ((mjd * 100 - 1495610) - year_days * 100) * 100 // 306001
    month_days = (month * 306001) // 10000
    day = mjd - 14956 - year_days - month_days

    k = 1 if month in (14, 15) else 0
    return ClockTime(
        year=1900 + year + k,
        month=month - 1 - k * 12,
        day=day,
        hour=hour,
        minute=minute,
        offset=offset,
    )