"""Site configuration loading: JSON document with location and panel geometry."""

import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any

from pytz import UnknownTimeZoneError, timezone
from timezonefinder import TimezoneFinder

from sunpath.models import GeoLocation, MonthDay, PlaneOrientation, SiteConfig

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()

CONFIG_ENV_VAR = "SUNPATH_CONFIG"

# Winter solstice to summer solstice, roughly one month apart
DEFAULT_CALENDAR_DAYS: tuple[MonthDay, ...] = (
    MonthDay(12, 21),
    MonthDay(1, 20),
    MonthDay(2, 18),
    MonthDay(3, 20),
    MonthDay(4, 20),
    MonthDay(5, 21),
    MonthDay(6, 21),
)


class ConfigError(Exception):
    """Configuration file cannot be read or is malformed."""


def _number(section: dict[str, Any], key: str, where: str) -> float:
    try:
        return float(section[key])
    except KeyError:
        raise ConfigError(f"missing key: {where}.{key}") from None
    except (TypeError, ValueError):
        raise ConfigError(f"not a number: {where}.{key}={section[key]!r}") from None


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key)
    if not isinstance(section, dict):
        raise ConfigError(f"missing section: {key}")
    return section


def resolve_timezone(location: GeoLocation) -> str:
    """Look up the IANA time zone name at a location.

    Raises:
        ConfigError: When no time zone is found (e.g. open sea).
    """
    tz_str = _tf.timezone_at(lat=location.lat_deg, lng=location.lon_deg)
    if tz_str is None:
        raise ConfigError(
            f"Timezone not found: lat={location.lat_deg}, lng={location.lon_deg}"
        )
    logger.debug("resolved timezone %s for %s", tz_str, location)
    return tz_str


def parse_config(data: dict[str, Any]) -> SiteConfig:
    """Build a SiteConfig from an already decoded JSON document.

    Expected shape::

        {"name": "...",
         "location": {"lat": 50.83, "lon": 12.92},
         "panel": {"inclination": 30, "direction": 180},
         "timezone": "Europe/Berlin",            # optional
         "year": 2021,                           # optional
         "calendar_days": [[12, 21], [6, 21]]}   # optional

    ``panel.direction`` is a compass bearing (180 = facing south).

    Raises:
        ConfigError: On missing keys or invalid values.
    """
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")
    loc = _section(data, "location")
    panel = _section(data, "panel")
    location = GeoLocation(
        lat_deg=_number(loc, "lat", "location"),
        lon_deg=_number(loc, "lon", "location"),
    )
    if not -90.0 <= location.lat_deg <= 90.0:
        raise ConfigError(f"latitude out of range: {location.lat_deg}")
    if not -180.0 <= location.lon_deg <= 180.0:
        raise ConfigError(f"longitude out of range: {location.lon_deg}")
    orientation = PlaneOrientation.from_compass(
        _number(panel, "inclination", "panel"), _number(panel, "direction", "panel")
    )

    tz_name = data.get("timezone")
    if tz_name is None:
        tz_name = resolve_timezone(location)
    elif not isinstance(tz_name, str):
        raise ConfigError(f"timezone must be a string: {tz_name!r}")
    else:
        try:
            timezone(tz_name)
        except UnknownTimeZoneError:
            raise ConfigError(f"unknown timezone: {tz_name}") from None

    raw_days = data.get("calendar_days")
    try:
        if raw_days is None:
            calendar_days = DEFAULT_CALENDAR_DAYS
        else:
            calendar_days = tuple(MonthDay(int(m), int(d)) for m, d in raw_days)
        year = int(data.get("year", date.today().year))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid calendar values: {e}") from e

    return SiteConfig(
        name=str(data.get("name", "")),
        location=location,
        panel=orientation,
        timezone=tz_name,
        year=year,
        calendar_days=calendar_days,
    )


def load_config(path: str | Path) -> SiteConfig:
    """Read a site configuration JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed SiteConfig.

    Raises:
        ConfigError: When the file cannot be read, is not valid JSON or is malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from e
    logger.debug("loaded configuration from %s", path)
    return parse_config(data)


def config_path_from_env() -> Path | None:
    """Configuration path from the SUNPATH_CONFIG environment variable, if set."""
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None
