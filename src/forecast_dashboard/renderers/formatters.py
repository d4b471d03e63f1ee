"""Display formatters and the hover readout line.

Every formatter shows a dash for a missing sample.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING

from forecast_dashboard.analysis.intervals import from_epoch_ms
from forecast_dashboard.analysis.precip import describe_precip, is_snow_likely

if TYPE_CHECKING:
    from forecast_dashboard.analysis.series import AlignedSeries

MISSING = "—"


def fmt_pct(v: float | None) -> str:
    return MISSING if v is None else f"{round(v)}%"


def fmt_f(v: float | None) -> str:
    return MISSING if v is None else f"{round(v)}°F"


def fmt_in(v: float | None) -> str:
    return MISSING if v is None else f"{v:.2f} in"


def fmt_mph(v: float | None) -> str:
    return MISSING if v is None else f"{round(v)} mph"


def fmt_inhg(v: float | None) -> str:
    return MISSING if v is None else f"{v:.2f} inHg"


def fmt_score(v: float | None) -> str:
    return MISSING if v is None else f"{round(v)}"


def fmt_hour(dt: datetime) -> str:
    """``"3 PM"``."""
    return f"{dt.hour % 12 or 12} {'AM' if dt.hour < 12 else 'PM'}"


def fmt_time(ms: float, tz: tzinfo = UTC) -> str:
    """``"Mon Oct 19 3 PM"`` in the given zone."""
    dt = from_epoch_ms(ms, tz)
    return f"{dt:%a %b} {dt.day} {fmt_hour(dt)}"


def fmt_date_label(ms: float, tz: tzinfo = UTC) -> str:
    """``"Mon 10/19"`` for once-per-day overlay labels."""
    dt = from_epoch_ms(ms, tz)
    return f"{dt:%a} {dt.month}/{dt.day}"


def hover_readout(series: AlignedSeries, i: int) -> str:
    """One-line summary of every channel at index ``i``."""
    parts = [
        f"Temp {fmt_f(series.temperature[i])}",
        f"Dew {fmt_f(series.dewpoint[i])}",
        f"RH {fmt_pct(series.humidity[i])}",
        f"Cloud {fmt_pct(series.cloud[i])}",
        f"PoP {fmt_pct(series.precip_probability[i])}",
        f"Wind {fmt_mph(series.wind_speed[i])}",
    ]
    if series.pressure is not None:
        parts.append(f"Press {fmt_inhg(series.pressure[i])}")

    qpf = series.precip_hourly[i]
    qpf_text = f"QPF {fmt_in(qpf)} (acc {fmt_in(series.precip_accumulated[i])})"
    snowfall = series.snowfall[i] if series.snowfall is not None else None
    label = describe_precip(
        qpf,
        is_snow=is_snow_likely(series.temperature[i], snowfall),
        snow_rate_in_hr=snowfall,
    )
    if label:
        qpf_text += f" {label}"
    parts.append(qpf_text)
    if series.snowfall is not None:
        parts.append(f"Snow {fmt_in(snowfall)}")
    parts.append(f"Score {fmt_score(series.favorability[i])}")

    return f"{fmt_time(series.time_axis[i], series.tz)} — " + " | ".join(parts)
