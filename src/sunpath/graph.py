"""Time series of solar positions, intended as input to chart renderers and tables."""

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from pytz import timezone

from sunpath.compute import solar_coordinates
from sunpath.models import (
    XY,
    CalendarMoment,
    ExposureSample,
    GeoLocation,
    LocalTimeInfo,
    MonthDay,
    PlaneOrientation,
    SunPathGraph,
)
from sunpath.tilt import panel_efficiency, relative_elevation

logger = logging.getLogger(__name__)


def local_time_info(
    year: int, month: int, day: int, lon_deg: float, tz_name: str
) -> LocalTimeInfo:
    """Offsets of local time at a given longitude.

    Really simplified: every time zone is assumed to be centred on a multiple
    of 15° longitude. The civil offset is taken at local midnight of the date,
    so daylight saving time is reflected.

    Args:
        year: Calendar year.
        month: Month from 1 to 12.
        day: Day of month.
        lon_deg: Geographic longitude (east positive).
        tz_name: IANA time zone name of the civil time.

    Returns:
        LocalTimeInfo with all offsets in seconds.
    """
    closest = round(lon_deg / 15)
    # offset of local mean time to the centre meridian of its zone
    local_offset = round((lon_deg - closest * 15) * 240)
    local_midnight = timezone(tz_name).localize(datetime(year, month, day))
    offset = int(local_midnight.utcoffset().total_seconds())
    return LocalTimeInfo(
        offset=offset,
        local_offset_utc=offset + local_offset,
        local_offset=local_offset,
    )


def solar_position_graph(
    location: GeoLocation,
    year: int,
    calendar_days: Sequence[MonthDay],
    use_solar_noon: bool = True,
    tz_name: str | None = None,
) -> SunPathGraph:
    """Compute hourly sun paths for a list of days of a year.

    With ``use_solar_noon`` the hours are true solar time: the longitude is
    ignored and hour 12 is solar noon. Otherwise the hours are civil time of
    ``tz_name``, shifted by the approximate offset from ``local_time_info``.

    Args:
        location: Observer position.
        year: Year of interest.
        calendar_days: Days for which solar positions are calculated.
        use_solar_noon: Use true solar time instead of civil time.
        tz_name: IANA time zone name, required unless ``use_solar_noon``.

    Returns:
        SunPathGraph with the positions above the horizon per day and per hour.

    Raises:
        ValueError: If civil time is requested without a time zone.
    """
    zone: str | None = None
    if use_solar_noon:
        location = GeoLocation(lat_deg=location.lat_deg, lon_deg=0.0)
    elif tz_name is None:
        raise ValueError("tz_name is required when use_solar_noon is False")
    else:
        zone = tz_name

    sun_paths: dict[MonthDay, tuple[XY, ...]] = {}
    timed: dict[int, list[XY]] = {}
    for day in calendar_days:
        offset_seconds = 0
        if zone is not None:
            info = local_time_info(year, day.month, day.day, location.lon_deg, zone)
            # whole minutes: sidereal time only uses hour and minute of a moment
            offset_seconds = round(info.local_offset_utc / 60) * 60
        midnight = datetime(year, day.month, day.day)
        path: list[XY] = []
        for hour in range(24):
            utc_dt = midnight + timedelta(hours=hour, seconds=-offset_seconds)
            coords = solar_coordinates(CalendarMoment.from_datetime(utc_dt), location)
            if coords.elevation_deg > 0.0:
                xy = XY(x=coords.azimuth_deg, y=coords.elevation_deg)
                path.append(xy)
                timed.setdefault(hour, []).append(xy)
        logger.debug("%s: %d hourly positions above the horizon", day.label, len(path))
        sun_paths[day] = tuple(path)

    return SunPathGraph(
        year=year,
        use_solar_noon=use_solar_noon,
        sun_paths=sun_paths,
        timed_positions={h: tuple(points) for h, points in sorted(timed.items())},
    )


def panel_exposure(
    location: GeoLocation,
    panel: PlaneOrientation,
    year: int,
    month: int,
    day: int,
    hours: Iterable[int] = range(5, 22),
    utc_offset_seconds: int = 0,
) -> tuple[ExposureSample, ...]:
    """Relative elevation of the sun on a panel for each local hour of one day.

    Args:
        location: Observer position.
        panel: Panel tilt and direction.
        year: Calendar year.
        month: Month from 1 to 12.
        day: Day of month.
        hours: Local hours to sample.
        utc_offset_seconds: Offset of local time to UTC in seconds
            (UTC = hour - offset), e.g. ``LocalTimeInfo.offset``.

    Returns:
        One ExposureSample per hour, including hours with the sun below the panel plane.
    """
    midnight = datetime(year, month, day)
    samples: list[ExposureSample] = []
    for hour in hours:
        utc_dt = midnight + timedelta(hours=hour, seconds=-utc_offset_seconds)
        coords = solar_coordinates(CalendarMoment.from_datetime(utc_dt), location)
        rel = relative_elevation(
            panel.tilt_rad, panel.direction_rad, coords.azimuth_rad, coords.elevation_rad
        )
        samples.append(
            ExposureSample(
                hour=hour,
                azimuth_deg=coords.azimuth_deg,
                elevation_deg=coords.elevation_deg,
                relative_elevation_deg=math.degrees(rel),
                efficiency=panel_efficiency(rel),
            )
        )
    return tuple(samples)
