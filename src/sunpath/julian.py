"""Julian Date conversion.

Algorithm from https://de.wikipedia.org/wiki/Julianisches_Datum. Without a
time of day the Julian Day Number at 0h is returned.
"""

import math

from sunpath.models import CalendarMoment

J2000 = 2451545.0  # Julian Date of 2000-01-01 12:00 UT


def julian_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    gregorian: bool = True,
) -> float:
    """Convert calendar date and time to a Julian Date.

    Components are not validated. Hours beyond 23 or negative minutes
    simply shift the result by the corresponding fraction of a day.

    Args:
        year: Astronomical year (1 BC = 0, 2 BC = -1, ...).
        month: Month from 1 to 12.
        day: Day from 1 to length of month.
        hour: Hour of day (UT).
        minute: Minute of hour.
        second: Second of minute.
        gregorian: Use the Gregorian calendar, else the proleptic Julian one
            (dates before 1582-10-15).

    Returns:
        Julian Date as a float.
    """
    # January and February count as months 13 and 14 of the previous year
    if month <= 2:
        month += 12
        year -= 1
    partial_day = (second + minute * 60 + hour * 3600) / 86400.0
    b = 0
    if gregorian:
        b = 2 - year // 100 + year // 400
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + partial_day
        + b
        - 1524.5
    )


def julian_date_of(moment: CalendarMoment, gregorian: bool = True) -> float:
    return julian_date(
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        gregorian=gregorian,
    )
