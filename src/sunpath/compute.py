"""Astronomy computation layer: ecliptic, equatorial and horizontal solar coordinates.

Low precision model from
https://de.wikipedia.org/wiki/Sonnenstand#Genauere_Ermittlung_des_Sonnenstandes_f%C3%BCr_einen_Zeitpunkt
adequate for visualisation, not for ephemeris work.
"""

import math

from sunpath.julian import J2000, julian_date, julian_date_of
from sunpath.models import (
    CalendarMoment,
    EclipticCoordinates,
    GeoLocation,
    HorizontalCoordinates,
)


def _divide(dividend: float, divisor: float) -> float:
    """Float division that yields NaN for a zero divisor instead of raising."""
    if divisor == 0.0:
        return math.nan
    return dividend / divisor


def ecliptic_coordinates(moment: CalendarMoment) -> EclipticCoordinates:
    """Compute ecliptic coordinates, right ascension and declination of the sun.

    Args:
        moment: UTC timestamp.

    Returns:
        EclipticCoordinates including all intermediate values.
    """
    jd = julian_date_of(moment)
    n = jd - J2000
    mean_longitude = (280.460 + 0.9856474 * n) % 360.0
    g = (357.528 + 0.9856003 * n) % 360.0
    g_rad = math.radians(g)
    # anomaly corrected ecliptic longitude [°]
    lam = mean_longitude + 1.915 * math.sin(g_rad) + 0.01997 * math.sin(2 * g_rad)
    lam_rad = math.radians(lam)
    epsilon = 23.439 - 0.0000004 * n
    epsilon_rad = math.radians(epsilon)

    alpha_rad = math.atan(math.cos(epsilon_rad) * math.tan(lam_rad))
    # atan only covers (-pi/2, pi/2); put alpha into the quadrant of lambda
    if math.cos(lam_rad) < 0:
        alpha_rad += math.pi
    delta_rad = math.asin(math.sin(epsilon_rad) * math.sin(lam_rad))

    return EclipticCoordinates(
        julian_date=jd,
        days_since_epoch=n,
        mean_longitude_deg=mean_longitude,
        mean_anomaly_deg=g,
        ecliptic_longitude_deg=lam,
        obliquity_deg=epsilon,
        right_ascension_rad=alpha_rad,
        declination_rad=delta_rad,
    )


def refraction_corrected_elevation(elevation_rad: float) -> float:
    """Apparent elevation of the sun caused by atmospheric refraction.

    The approximation degrades near and below the horizon and is not clamped.

    Args:
        elevation_rad: Geometric elevation in radians.

    Returns:
        Refracted elevation in radians (NaN where the formula divides by zero).
    """
    elevation = math.degrees(elevation_rad)
    ec = elevation + _divide(10.3, elevation + 5.11)
    r_minutes = _divide(1.02, math.tan(math.radians(ec)))
    return math.radians(elevation + r_minutes / 60.0)


def solar_coordinates(
    moment: CalendarMoment, location: GeoLocation
) -> HorizontalCoordinates:
    """Compute azimuth and elevation of the sun for an observer.

    Args:
        moment: UTC timestamp.
        location: Observer latitude/longitude (longitude east positive).

    Returns:
        HorizontalCoordinates with azimuth measured from south (east negative),
        elevation, refracted elevation and all intermediate values.
    """
    jd0 = julian_date(moment.year, moment.month, moment.day)
    t0 = (jd0 - J2000) / 36525  # Julian centuries since J2000.0 at 0h UT
    hours = moment.hour + moment.minute / 60.0
    # mean Greenwich sidereal time (hours)
    theta_gh = (6.697376 + 2400.05134 * t0 + 1.002738 * hours) % 24
    theta_g = theta_gh * 15
    # local hour angle of the vernal equinox
    theta = theta_g + location.lon_deg
    theta_rad = math.radians(theta)

    ecliptic = ecliptic_coordinates(moment)
    alpha_rad = ecliptic.right_ascension_rad
    delta_rad = ecliptic.declination_rad
    tau_rad = theta_rad - alpha_rad
    phi_rad = math.radians(location.lat_deg)

    divisor = math.cos(tau_rad) * math.sin(phi_rad) - math.tan(delta_rad) * math.cos(
        phi_rad
    )
    azimuth_rad = math.atan(_divide(math.sin(tau_rad), divisor))
    if divisor < 0.0:
        azimuth_rad += math.pi
    # azimuth angles > 180° become negative (eastward)
    if azimuth_rad > math.pi:
        azimuth_rad -= 2 * math.pi

    sin_elevation = math.cos(delta_rad) * math.cos(tau_rad) * math.cos(phi_rad) + math.sin(
        delta_rad
    ) * math.sin(phi_rad)
    # rounding can push the argument slightly beyond 1 with the sun at the zenith
    elevation_rad = math.asin(max(-1.0, min(1.0, sin_elevation)))

    return HorizontalCoordinates(
        azimuth_rad=azimuth_rad,
        elevation_rad=elevation_rad,
        elevation_refracted_rad=refraction_corrected_elevation(elevation_rad),
        julian_date0=jd0,
        centuries0=t0,
        sidereal_hours=theta_gh,
        hour_angle_deg=theta,
        ecliptic=ecliptic,
    )


def describe(moment: CalendarMoment, location: GeoLocation) -> str:
    """Format all intermediate values, comparable with the Wikipedia worked example."""
    r = solar_coordinates(moment, location)
    e = r.ecliptic
    return "\n".join(
        [
            f"JD = {e.julian_date:.5f}\tn = {e.days_since_epoch:.5f}\tL = {e.mean_longitude_deg:.4f}",
            f"g = {e.mean_anomaly_deg:.4f}\tlambda = {e.ecliptic_longitude_deg:.4f}\tepsilon = {e.obliquity_deg:.4f}",
            f"alpha = {e.right_ascension_deg:.4f}\tdelta = {e.declination_deg:.4f}\tJD0 = {r.julian_date0:.5f}",
            f"T0 = {r.centuries0:.9f}\tthetaGh = {r.sidereal_hours:.4f}\ttheta = {r.hour_angle_deg:.4f}",
            f"a = {r.azimuth_deg:.4f}\th = {r.elevation_deg:.4f}\thR = {r.elevation_refracted_deg:.4f}",
        ]
    )
