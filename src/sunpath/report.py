"""CLI entry point for the sun path report.

Reads the site configuration given as first argument (or SUNPATH_CONFIG,
also from .env), prints the panel exposure on the summer solstice, writes
the sun table as CSV and saves the sun path chart as PNG:

    uv run sunpath-report config.json
"""

import logging
import math
import sys
from pathlib import Path

from dotenv import load_dotenv

from sunpath.compute import describe
from sunpath.config import ConfigError, config_path_from_env, load_config
from sunpath.graph import local_time_info, panel_exposure, solar_position_graph
from sunpath.models import CalendarMoment, GeoLocation
from sunpath.renderers.static import save_static_chart
from sunpath.table import exposure_frame, sun_table, to_csv

logger = logging.getLogger(__name__)

# Worked example of https://de.wikipedia.org/wiki/Sonnenstand: Munich, 2006-08-06 08:00 CEST
_MUNICH = GeoLocation(lat_deg=48.1, lon_deg=11.6)
_MUNICH_MOMENT = CalendarMoment(2006, 8, 6, 6, 0)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else argv

    path = Path(args[0]) if args else config_path_from_env()
    if path is None:
        print("Reference example (Munich, 2006-08-06 06:00 UT):")
        print(describe(_MUNICH_MOMENT, _MUNICH))
        print("\nusage: sunpath-report CONFIG.json (or set SUNPATH_CONFIG)")
        return 2
    try:
        site = load_config(path)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    bearing = math.degrees(site.panel.direction_rad) + 180
    tilt = math.degrees(site.panel.tilt_rad)
    logger.info("analysing %s (timezone %s)", site.name or path.name, site.timezone)

    info = local_time_info(site.year, 6, 21, site.location.lon_deg, site.timezone)
    samples = panel_exposure(
        site.location,
        site.panel,
        site.year,
        6,
        21,
        utc_offset_seconds=info.offset,
    )
    print(f"Panel facing {bearing:.0f}° with tilt {tilt:.0f}°, {site.year}-06-21:")
    print(exposure_frame(samples).round(2).to_string())

    csv_path = path.with_suffix(".csv")
    csv_path.write_text(
        to_csv(sun_table(site.location, site.year, site.calendar_days)), encoding="utf-8"
    )
    print(f"Saved: {csv_path}")

    graph = solar_position_graph(
        site.location,
        site.year,
        site.calendar_days,
        use_solar_noon=False,
        tz_name=site.timezone,
    )
    png_path = save_static_chart(graph, name=site.name or path.stem)
    print(f"Saved: {png_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
