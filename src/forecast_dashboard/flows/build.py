"""
Prefect flow for rendering a loaded forecast into a static page.

Run locally:
    python -m forecast_dashboard.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from forecast_dashboard.dashboard import LoadedForecast
from forecast_dashboard.renderers import render_template
from forecast_dashboard.renderers.charts import build_charts_html
from forecast_dashboard.renderers.days import build_day_strip_html

SITE_DIR = Path("site")


def _updated_text(forecast: LoadedForecast) -> str:
    if forecast.updated is None:
        return ""
    local = forecast.updated.astimezone(forecast.tz)
    return f"Updated {local:%Y-%m-%d %H:%M %Z}"


@task(name="build-html")
def build_html(forecast: LoadedForecast, status: str = "") -> str:
    """Build the dashboard page for one forecast."""
    series = forecast.series
    day_strip_html = build_day_strip_html(
        forecast.daily_periods, forecast.sun, series.precip_by_day, forecast.tz
    )
    charts_html = build_charts_html(series)
    return render_template(
        "base.html.j2",
        place=forecast.label,
        updated=_updated_text(forecast),
        status=status,
        time_zone=forecast.time_zone,
        day_strip=day_strip_html,
        charts=charts_html,
    )


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-dashboard", log_prints=True, validate_parameters=False)
def build_dashboard(forecast: LoadedForecast, site_dir: Path | None = None) -> dict[str, Any]:
    """
    Render ``forecast`` and write ``index.html``.

    Args:
        forecast: A freshly loaded forecast.
        site_dir: Output directory (default: ``site/``).
    """
    site_dir = site_dir or SITE_DIR
    print(f"Building dashboard for {forecast.label}...")
    html = build_html(forecast)

    output_path = write_site(html, site_dir)
    print(f"Site built: {output_path}")
    return {"pages": 1, "output": str(output_path), "hours": len(forecast.series)}


if __name__ == "__main__":
    from forecast_dashboard.flows.load import load_forecast

    result = build_dashboard(load_forecast(39.7392, -104.9903))
    print(f"Flow complete: {result}")
