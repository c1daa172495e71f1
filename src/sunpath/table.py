"""Tabular output: pandas DataFrames and ``;`` separated CSV text."""

from collections.abc import Sequence

import numpy as np
import pandas as pd

from sunpath.compute import solar_coordinates
from sunpath.models import CalendarMoment, ExposureSample, GeoLocation, MonthDay


def sun_table(
    location: GeoLocation,
    year: int,
    calendar_days: Sequence[MonthDay],
    start_minute: int = 180,
    end_minute: int = 1260,
    step_minutes: int = 60,
) -> pd.DataFrame:
    """Azimuth and elevation per sample time (rows) and day (columns).

    Times are UTC, from ``start_minute`` (inclusive) to ``end_minute``
    (exclusive) after midnight. Positions below the horizon are NaN.

    Returns:
        DataFrame indexed by "HH:MM" with a (day label, "azimuth"/"elevation")
        column MultiIndex.
    """
    minutes = range(start_minute, end_minute, step_minutes)
    index = [f"{m // 60:2d}:{m % 60:02d}" for m in minutes]
    columns = pd.MultiIndex.from_product(
        [[d.label for d in calendar_days], ["azimuth", "elevation"]],
        names=["day", "value"],
    )
    df = pd.DataFrame(np.nan, index=pd.Index(index, name="time"), columns=columns)
    for day in calendar_days:
        for label, minute in zip(index, minutes):
            moment = CalendarMoment(year, day.month, day.day, minute // 60, minute % 60)
            coords = solar_coordinates(moment, location)
            if coords.elevation_deg >= 0.0:
                df.loc[label, (day.label, "azimuth")] = coords.azimuth_deg
                df.loc[label, (day.label, "elevation")] = coords.elevation_deg
    return df


def exposure_frame(samples: Sequence[ExposureSample]) -> pd.DataFrame:
    """One row per hour with sun position, relative elevation and efficiency."""
    return pd.DataFrame(
        {
            "azimuth": [s.azimuth_deg for s in samples],
            "elevation": [s.elevation_deg for s in samples],
            "relative_elevation": [s.relative_elevation_deg for s in samples],
            "efficiency": [s.efficiency for s in samples],
        },
        index=pd.Index([s.hour for s in samples], name="hour"),
    )


def to_csv(df: pd.DataFrame) -> str:
    """Render a DataFrame as ``;`` separated text with two decimals, empty cells for NaN."""
    return df.to_csv(sep=";", float_format="%.2f", na_rep="")
