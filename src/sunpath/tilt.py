"""Sun elevation relative to a tilted and rotated plane (e.g. a photovoltaic panel)."""

import math


def relative_elevation(
    tilt: float, direction: float, azimuth: float, elevation: float
) -> float:
    """Elevation of the sun above a tilted plane.

    The solar position is placed on the unit sphere (x -> south, y -> east,
    z -> zenith), rotated around the z axis by ``direction`` and then around
    the rotated y axis by ``tilt``. Only the resulting z component is needed:

        x0 = cos(e) * cos(a)
        y0 = -cos(e) * sin(a)
        z0 = sin(e)
        x1 = x0 * cos(d) - y0 * sin(d)
        z2 = x1 * sin(t) + z0 * cos(t)

    All angles in radians.

    Args:
        tilt: Angle of the plane relative to horizontal.
        direction: Angle of the plane relative to geographic south, east negative.
        azimuth: Azimuth of the sun relative to geographic south.
        elevation: Elevation of the sun.

    Returns:
        Elevation angle relative to the tilted plane, within [-pi/2, pi/2].
    """
    if azimuth > math.pi:
        azimuth -= 2 * math.pi
    z2 = (
        math.cos(elevation) * math.cos(azimuth) * math.cos(direction)
        + math.cos(elevation) * math.sin(azimuth) * math.sin(direction)
    ) * math.sin(tilt) + math.sin(elevation) * math.cos(tilt)
    # rounding can push |z2| slightly above 1
    return math.asin(max(-1.0, min(1.0, z2)))


def panel_efficiency(rel_elevation: float) -> float:
    """Cosine of the incidence angle for a given relative elevation."""
    return math.cos(math.pi / 2.0 - rel_elevation)
