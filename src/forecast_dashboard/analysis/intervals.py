"""Interval expansion: duration-encoded grid records -> hourly channel.

NWS grid values carry a ``validTime`` of the form ``<start>/<duration>``,
e.g. ``"2025-08-29T18:00:00+00:00/PT3H"``. Each record is stepped out to
one entry per covered hour, all carrying the same value::

    {"validTime": "2025-08-29T18:00:00+00:00/PT3H", "value": 20.0}
      -> {t18: 68.0, t19: 68.0, t20: 68.0}   (with convert=c_to_f)

Only day and hour components of the ISO-8601 duration are recognised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from forecast_dashboard.schemas import ObservationRecord

logger = logging.getLogger(__name__)

HOUR_MS = 3_600_000

_DURATION_RE = re.compile(r"P(?:(\d+)D)?T?(?:(\d+)H)?")

#: Expanded channel: hour-aligned epoch milliseconds -> converted value
Channel = dict[int, float | None]
Converter = Callable[[float | None], float | None]


def to_epoch_ms(dt: datetime) -> int:
    """Epoch milliseconds for an aware datetime (naive is taken as UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return round(dt.timestamp() * 1000)


def from_epoch_ms(ms: float, tz: Any = UTC) -> datetime:
    """Aware datetime for epoch milliseconds, expressed in ``tz``."""
    return datetime.fromtimestamp(ms / 1000, tz=tz)


def parse_duration_hours(duration: str | None) -> int:
    """
    Resolve an ISO-8601 duration to a whole number of hours (>= 1).

    ``"PT6H"`` -> 6, ``"P1D"`` -> 24, ``"P1DT3H"`` -> 27. A missing,
    unparseable or zero-length duration resolves to 1 hour.
    """
    if not duration:
        return 1
    m = _DURATION_RE.match(duration.strip())
    days = int(m.group(1)) if m and m.group(1) else 0
    hours = int(m.group(2)) if m and m.group(2) else 0
    total = days * 24 + hours
    return total if total > 0 else 1


def parse_valid_time(valid_time: str) -> tuple[datetime, int]:
    """
    Split a ``<start>[/<duration>]`` encoding into (start, hours).

    Raises:
        ValueError: If the start instant is not ISO-8601.
    """
    start_iso, _, duration_iso = valid_time.partition("/")
    start = datetime.fromisoformat(start_iso.strip())
    if start.tzinfo is None:
        start = start.replace(tzinfo=UTC)
    return start, parse_duration_hours(duration_iso)


def _record_fields(record: ObservationRecord | Mapping[str, Any]) -> tuple[str | None, Any]:
    if isinstance(record, ObservationRecord):
        return record.valid_time, record.value
    if not isinstance(record, Mapping):
        return None, None
    return record.get("validTime"), record.get("value")


def expand_hourly(
    records: Iterable[ObservationRecord | Mapping[str, Any]],
    convert: Converter | None = None,
) -> Channel:
    """
    Expand grid records into an hourly channel.

    Args:
        records: Records in source order; later records overwrite earlier
            ones at a colliding hour.
        convert: Unit converter applied once per record (default: identity).

    Returns:
        Dict of epoch-ms -> converted value. Records with a null value or a
        missing/unparseable ``validTime`` are skipped, as are non-numeric values.
    """
    channel: Channel = {}
    for record in records:
        valid_time, value = _record_fields(record)
        if value is None or not valid_time:
            continue
        if not isinstance(valid_time, str) or not isinstance(value, (int, float)):
            logger.debug("Dropping malformed record %r", record)
            continue
        try:
            start, hours = parse_valid_time(valid_time)
        except ValueError:
            logger.debug("Dropping record with unparseable validTime %r", valid_time)
            continue

        converted = convert(value) if convert else value
        start_ms = to_epoch_ms(start)
        for i in range(hours):
            channel[start_ms + i * HOUR_MS] = converted
    return channel
