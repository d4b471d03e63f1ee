"""Day strip: one card per daytime forecast period."""

from __future__ import annotations

from datetime import UTC, tzinfo
from typing import TYPE_CHECKING, Any

from forecast_dashboard.renderers import render_template
from forecast_dashboard.renderers.colors import temperature_to_color
from forecast_dashboard.renderers.formatters import MISSING, fmt_in

if TYPE_CHECKING:
    from forecast_dashboard.analysis.sun import SunEvents
    from forecast_dashboard.schemas import DailyPeriod


def _night_low(periods: list[DailyPeriod], index: int) -> float | None:
    """Temperature of the night period immediately following ``index``."""
    if index + 1 < len(periods) and not periods[index + 1].is_daytime:
        return periods[index + 1].temperature
    return None


def build_day_cards(
    periods: list[DailyPeriod],
    sun: dict[str, SunEvents] | None = None,
    precip_by_day: dict[str, float] | None = None,
    tz: tzinfo = UTC,
) -> list[dict[str, Any]]:
    """Card data for each daytime period, paired with its night low."""
    sun = sun or {}
    precip_by_day = precip_by_day or {}
    cards = []
    for i, period in enumerate(periods):
        if not period.is_daytime:
            continue
        local = period.start_time.astimezone(tz)
        key = local.date().isoformat()
        low = _night_low(periods, i)
        events = sun.get(key)
        precip = precip_by_day.get(key)
        cards.append(
            {
                "name": f"{local:%a} {local.month}/{local.day}",
                "icon": period.icon,
                "short_forecast": period.short_forecast,
                "high": MISSING if period.temperature is None else f"{round(period.temperature)}°F",
                "high_color": temperature_to_color(period.temperature),
                "low": MISSING if low is None else f"{round(low)}°F",
                "sunrise": events.sunrise_label if events else MISSING,
                "sunset": events.sunset_label if events else MISSING,
                "precip": fmt_in(precip),
            }
        )
    return cards


def build_day_strip_html(
    periods: list[DailyPeriod],
    sun: dict[str, SunEvents] | None = None,
    precip_by_day: dict[str, float] | None = None,
    tz: tzinfo = UTC,
) -> str:
    """Render the day strip, or a placeholder when there are no periods."""
    cards = build_day_cards(periods, sun, precip_by_day, tz)
    if not cards:
        return "<p>No daily forecast available.</p>"
    return render_template("day_strip.html.j2", cards=cards)
