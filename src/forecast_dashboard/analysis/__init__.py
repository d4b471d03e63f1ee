"""Time-series normalization and derived metrics (pure, no I/O).

Modules:
  - units: SI -> Imperial converters (None-propagating)
  - intervals: parse ``validTime`` encodings, expand records to hourly channels
  - timeline: merge channel keys into one sorted time axis
  - series: GridChannels, AlignedSeries, build_series (+ night/day helpers)
  - favorability: 0-100 outdoor favorability score
  - sun: solar elevation, sunrise/sunset crossings per local day
  - precip: precipitation rate -> short label

Adding a derived metric
-----------------------
1. Write a pure function over ``AlignedSeries`` (or per-sample values) in
   its own module here. No network, no Prefect, no rendering.

2. If it is per-hour, add a field to ``AlignedSeries`` and fill it at the
   end of ``build_series()``; if it is per-day, return a dict keyed by local
   ISO date like ``sun_events()`` does.

3. Expose it to the page via ``renderers/charts.py``.

4. Add tests in ``tests/test_{name}.py``.
"""

from forecast_dashboard.analysis.favorability import favorability_score, score_series
from forecast_dashboard.analysis.intervals import expand_hourly, parse_valid_time
from forecast_dashboard.analysis.precip import describe_precip, is_snow_likely
from forecast_dashboard.analysis.series import (
    AlignedSeries,
    GridChannels,
    build_series,
    grid_channels_from_payload,
)
from forecast_dashboard.analysis.sun import SunEvents, solar_elevation, sun_events
from forecast_dashboard.analysis.timeline import merge_time_axis

__all__ = [
    "AlignedSeries",
    "GridChannels",
    "SunEvents",
    "build_series",
    "describe_precip",
    "expand_hourly",
    "favorability_score",
    "grid_channels_from_payload",
    "is_snow_likely",
    "merge_time_axis",
    "parse_valid_time",
    "score_series",
    "solar_elevation",
    "sun_events",
]
