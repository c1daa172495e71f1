"""Value types of sunpath: moments, locations, solar coordinates, panel geometry and plot series."""

import math
from dataclasses import dataclass
from datetime import datetime, timezone

_MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True)
class CalendarMoment:
    """A UTC civil timestamp. Component ranges are not validated."""

    year: int
    month: int  # 1..12
    day: int  # 1..length of month
    hour: int = 0  # 0..23 (24 and negative values are accepted arithmetically)
    minute: int = 0
    second: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarMoment":
        """Build a moment from a datetime. Aware values are converted to UTC, naive ones taken as UTC."""
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)


@dataclass(frozen=True)
class GeoLocation:
    """Observer position on the earth."""

    lat_deg: float  # Latitude (decimal degrees), north positive
    lon_deg: float  # Longitude (decimal degrees), east positive


@dataclass(frozen=True)
class EclipticCoordinates:
    """Solar ecliptic and equatorial coordinates derived from a Julian Date."""

    julian_date: float
    days_since_epoch: float  # n, days since J2000.0 (2000-01-01 12:00 UT)
    mean_longitude_deg: float  # L
    mean_anomaly_deg: float  # g
    ecliptic_longitude_deg: float  # lambda, anomaly corrected
    obliquity_deg: float  # epsilon
    right_ascension_rad: float  # alpha
    declination_rad: float  # delta

    @property
    def right_ascension_deg(self) -> float:
        return math.degrees(self.right_ascension_rad)

    @property
    def declination_deg(self) -> float:
        return math.degrees(self.declination_rad)


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Sun position relative to the local horizon, with intermediate values for verification."""

    azimuth_rad: float  # (-pi, pi], 0 = south, east negative
    elevation_rad: float  # [-pi/2, pi/2]
    elevation_refracted_rad: float  # apparent elevation incl. atmospheric refraction
    julian_date0: float  # Julian Date of the day at 0h UT
    centuries0: float  # T0, Julian centuries since J2000.0 at 0h UT
    sidereal_hours: float  # mean Greenwich sidereal time (hours)
    hour_angle_deg: float  # theta, local hour angle of the vernal equinox
    ecliptic: EclipticCoordinates

    @property
    def azimuth_deg(self) -> float:
        return math.degrees(self.azimuth_rad)

    @property
    def elevation_deg(self) -> float:
        return math.degrees(self.elevation_rad)

    @property
    def elevation_refracted_deg(self) -> float:
        return math.degrees(self.elevation_refracted_rad)


@dataclass(frozen=True)
class PlaneOrientation:
    """Orientation of a tilted plane, e.g. a photovoltaic panel. Angles in radians."""

    tilt_rad: float  # Tilt from horizontal, [0, pi/2]
    direction_rad: float  # Measured from geographic south, east negative

    @classmethod
    def from_degrees(cls, tilt_deg: float, direction_deg: float) -> "PlaneOrientation":
        return cls(math.radians(tilt_deg), math.radians(direction_deg))

    @classmethod
    def from_compass(cls, inclination_deg: float, bearing_deg: float) -> "PlaneOrientation":
        """Build from a compass bearing counted clockwise from north (180 = facing south)."""
        return cls.from_degrees(inclination_deg, bearing_deg - 180.0)


@dataclass(frozen=True)
class MonthDay:
    """A calendar day without a year. Used to sample a year for sun path graphs."""

    month: int
    day: int

    @property
    def label(self) -> str:
        """Short display label, e.g. "21. Dec"."""
        return f"{self.day}. {_MONTH_ABBR[self.month - 1]}"


@dataclass(frozen=True)
class XY:
    """A single plot point: x = azimuth (degrees), y = elevation (degrees)."""

    x: float
    y: float


@dataclass(frozen=True)
class LocalTimeInfo:
    """Offsets between UTC, a civil time zone and local mean time. All values in seconds."""

    offset: int  # Offset of the civil time zone relative to UTC
    local_offset_utc: int  # Approximate offset of the longitude position relative to UTC
    local_offset: int  # Offset of the longitude position within its 15° zone


@dataclass(frozen=True)
class SunPathGraph:
    """The sole input to chart renderers. Fully computed sun path series."""

    year: int
    use_solar_noon: bool  # True: hours are true solar time, False: civil time of a zone
    sun_paths: dict[MonthDay, tuple[XY, ...]]  # Hourly positions above the horizon per day
    timed_positions: dict[int, tuple[XY, ...]]  # Same hour across all days (iso-hour curves)


@dataclass(frozen=True)
class ExposureSample:
    """Sun position and its elevation relative to a panel at one hour."""

    hour: int  # Local hour
    azimuth_deg: float
    elevation_deg: float
    relative_elevation_deg: float  # Elevation above the panel plane
    efficiency: float  # Cosine of the incidence angle on the panel


@dataclass(frozen=True)
class SiteConfig:
    """Result of loading a site configuration file."""

    name: str
    location: GeoLocation
    panel: PlaneOrientation
    timezone: str  # IANA zone name ("Europe/Berlin")
    year: int
    calendar_days: tuple[MonthDay, ...]
