"""Short categorical labels for a precipitation rate."""

from __future__ import annotations

#: Liquid-to-snow ratio used when no direct snow rate is available
SNOW_RATIO = 10.0

# (upper bound exclusive, label), ascending; anything above the last bound
# gets the final label.
RAIN_BANDS: list[tuple[float, str]] = [
    (0.02, "misty"),
    (0.05, "drizzle"),
    (0.10, "light rain"),
    (0.15, "rain"),
]
RAIN_TOP = "downpour"

SNOW_BANDS: list[tuple[float, str]] = [
    (0.03, "flurries"),
    (0.5, "light snow"),
    (1.0, "snow"),
]
SNOW_TOP = "heavy snow"

FREEZING_F = 32.0


def _band(rate: float, bands: list[tuple[float, str]], top: str) -> str:
    for upper, label in bands:
        if rate < upper:
            return label
    return top


def describe_precip(
    rate_in_hr: float | None,
    is_snow: bool = False,
    snow_rate_in_hr: float | None = None,
) -> str:
    """
    Label a precipitation rate, e.g. ``"drizzle"`` or ``"light snow"``.

    Args:
        rate_in_hr: Liquid-equivalent rate (in/hr).
        is_snow: Whether precipitation is falling as snow.
        snow_rate_in_hr: Direct snowfall rate; defaults to 10x the liquid rate.

    Returns:
        Band label, or ``""`` when nothing is falling.
    """
    if rate_in_hr is None or rate_in_hr <= 0:
        return ""
    if is_snow:
        snow_rate = snow_rate_in_hr if snow_rate_in_hr is not None else rate_in_hr * SNOW_RATIO
        return _band(snow_rate, SNOW_BANDS, SNOW_TOP)
    return _band(rate_in_hr, RAIN_BANDS, RAIN_TOP)


def is_snow_likely(temp_f: float | None, snowfall_in: float | None) -> bool:
    """Snow phase: a positive snowfall sample, else temperature at/below freezing."""
    if snowfall_in is not None:
        return snowfall_in > 0
    return temp_f is not None and temp_f <= FREEZING_F
