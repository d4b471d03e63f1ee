"""Chart payload for the synchronized facet charts.

The page draws one chart per facet against the shared ``labels`` time axis;
the payload carries the night bands, day boundaries, date labels and one
pre-formatted hover readout per hour so the browser side only plots.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from forecast_dashboard.renderers import render_template
from forecast_dashboard.renderers.colors import temperature_to_color
from forecast_dashboard.renderers.formatters import fmt_date_label, hover_readout

if TYPE_CHECKING:
    from forecast_dashboard.analysis.series import AlignedSeries


def _round(values: list[float | None], digits: int = 2) -> list[float | None]:
    return [None if v is None else round(v, digits) for v in values]


def _dataset(
    label: str,
    data: list[float | None],
    color: str,
    kind: str = "line",
    digits: int = 2,
    fill: bool = False,
) -> dict[str, Any]:
    return {
        "label": label,
        "data": _round(data, digits),
        "color": color,
        "type": kind,
        "fill": fill,
    }


def _chart(
    chart_id: str,
    title: str,
    unit: str,
    datasets: list[dict[str, Any]],
    y_min: float | None = None,
    y_max: float | None = None,
) -> dict[str, Any]:
    return {
        "id": chart_id,
        "title": title,
        "unit": unit,
        "datasets": datasets,
        "yMin": y_min,
        "yMax": y_max,
    }


def build_chart_payload(series: AlignedSeries) -> dict[str, Any]:
    """
    Build the JSON-able chart description for one aligned series.

    Pressure and snowfall charts appear only when the source grid had
    those fields.
    """
    charts = [
        _chart(
            "temperature",
            "Temperature & Dew Point",
            "°F",
            [
                _dataset("Temperature (°F)", series.temperature, "--temp", digits=1),
                _dataset("Dew Point (°F)", series.dewpoint, "--dew", digits=1),
            ],
        ),
        _chart(
            "percent",
            "Humidity, Cloud Cover & Chance of Precip",
            "%",
            [
                _dataset("Chance of Precip (%)", series.precip_probability, "--pop", fill=True),
                _dataset("Cloud Cover (%)", series.cloud, "--cloud", fill=True),
                _dataset("Humidity (%)", series.humidity, "--hum"),
            ],
            y_min=0,
            y_max=100,
        ),
        _chart(
            "wind",
            "Wind",
            "mph",
            [_dataset("Wind (mph)", series.wind_speed, "--wind", digits=1)],
            y_min=0,
        ),
    ]
    if series.pressure is not None:
        charts.append(
            _chart(
                "pressure",
                "Pressure",
                "inHg",
                [_dataset("Pressure (inHg)", series.pressure, "--press")],
            )
        )
    charts.append(
        _chart(
            "precip",
            "Precipitation",
            "in",
            [
                _dataset("Hourly Liquid (in)", series.precip_hourly, "--qpf", kind="bar"),
                _dataset("Precip Accum (in)", series.precip_accumulated, "--qpfacc"),
            ],
            y_min=0,
        )
    )
    if series.snowfall is not None:
        charts.append(
            _chart(
                "snowfall",
                "Snowfall",
                "in",
                [_dataset("Snowfall (in)", series.snowfall, "--snow", kind="bar")],
                y_min=0,
            )
        )
    charts.append(
        _chart(
            "favorability",
            "Outdoor Favorability",
            "score",
            [_dataset("Favorability", series.favorability, "--score", digits=0, fill=True)],
            y_min=0,
            y_max=100,
        )
    )

    return {
        "labels": series.time_axis,
        "readouts": [hover_readout(series, i) for i in range(len(series.time_axis))],
        "nightIntervals": [list(iv) for iv in series.night_intervals],
        "dayBoundaries": series.day_boundaries,
        "dateLabels": [
            {"x": center, "text": fmt_date_label(center, series.tz)}
            for center in series.label_centers
        ],
        "temperatureColors": [temperature_to_color(t) for t in series.temperature],
        "charts": charts,
    }


def build_charts_html(series: AlignedSeries) -> str:
    """Render the chart canvases plus the embedded payload."""
    payload = build_chart_payload(series)
    return render_template(
        "charts.html.j2",
        charts=payload["charts"],
        # Embedded in a <script> block, so "</" must not close it early
        payload_json=json.dumps(payload, ensure_ascii=False).replace("</", "<\\/"),
    )
