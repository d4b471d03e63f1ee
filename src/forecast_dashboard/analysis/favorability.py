"""Outdoor-activity favorability score (0-100).

A fixed, product-tuned penalty model evaluated independently per hour:

    temp      = tanh(|T - 55| / 15)                      optimum at 55 F
    muggy     = tanh(max(0, DP - 55) / 7)
    cold_dry  = tanh(max(0, 40 - T) / 20 + max(0, 10 - DP) / 10)
    base      = 0.50 * temp + 0.30 * muggy + 0.20 * cold_dry

    T >= 65:  base *= 1 - 0.35 * tanh(wind / 12)         breeze helps in heat
    T <= 45:  base += 0.20 * tanh(max(0, wind - 5) / 10) wind chill hurts

    precip    = min(1, PoP * (1 - exp(-rate / 0.02))
                       + PoP * 0.10 * tanh(max(0, rate - 0.02) / 0.03))
    penalty   = min(1, base + 0.5 * precip)
    score     = 100 * (1 - penalty)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from forecast_dashboard.analysis.series import AlignedSeries

OPTIMUM_TEMP_F = 55.0
HEAT_BENEFIT_MIN_F = 65.0
WIND_CHILL_MAX_F = 45.0


def precip_penalty(precip_prob: float, precip_rate: float) -> float:
    """Combined precipitation penalty in [0, 1] (before its 50% weight)."""
    ramp = precip_prob * (1 - math.exp(-precip_rate / 0.02))
    extra = precip_prob * 0.10 * math.tanh(max(0.0, precip_rate - 0.02) / 0.03)
    return min(1.0, ramp + extra)


def favorability_score(
    temp_f: float,
    dewpoint_f: float,
    humidity: float,
    precip_prob: float,
    precip_rate: float,
    wind_mph: float,
) -> float:
    """
    Score one hour's conditions for outdoor activity.

    Args:
        temp_f: Air temperature (F).
        dewpoint_f: Dewpoint (F).
        humidity: Relative humidity as a 0-1 fraction (not used by the model;
            mugginess is carried by the dewpoint term).
        precip_prob: Probability of precipitation as a 0-1 fraction.
        precip_rate: Liquid precipitation rate (in/hr).
        wind_mph: Sustained wind speed (mph).

    Returns:
        Score in [0, 100]; higher is more pleasant.
    """
    temp_pen = math.tanh(abs(temp_f - OPTIMUM_TEMP_F) / 15)
    dew_pen = math.tanh(max(0.0, dewpoint_f - 55) / 7)
    cold_pen = math.tanh(max(0.0, 40 - temp_f) / 20 + max(0.0, 10 - dewpoint_f) / 10)
    penalty = 0.50 * temp_pen + 0.30 * dew_pen + 0.20 * cold_pen

    if temp_f >= HEAT_BENEFIT_MIN_F:
        penalty *= 1 - 0.35 * math.tanh(wind_mph / 12)
    if temp_f <= WIND_CHILL_MAX_F:
        penalty += 0.20 * math.tanh(max(0.0, wind_mph - 5) / 10)

    penalty += 0.5 * precip_penalty(precip_prob, precip_rate)
    penalty = min(1.0, penalty)
    return 100 * (1 - penalty)


def score_series(series: AlignedSeries) -> list[float | None]:
    """
    Score every hour of an aligned series.

    Missing humidity, PoP, precip or wind count as zero. An hour without a
    temperature or dewpoint sample has no score (None).
    """
    scores: list[float | None] = []
    for i in range(len(series.time_axis)):
        temp = series.temperature[i]
        dew = series.dewpoint[i]
        if temp is None or dew is None:
            scores.append(None)
            continue
        scores.append(
            favorability_score(
                temp,
                dew,
                (series.humidity[i] or 0) / 100,
                (series.precip_probability[i] or 0) / 100,
                series.precip_hourly[i] or 0,
                series.wind_speed[i] or 0,
            )
        )
    return scores
