"""Time-axis merging across expanded channels."""

from __future__ import annotations

from collections.abc import Mapping


def merge_time_axis(*channels: Mapping[int, object] | None) -> list[int]:
    """
    Union the timestamp keys of every channel into one sorted axis.

    ``None`` channels are ignored. No channels, or only empty ones, give an
    empty axis; callers treat that as "no forecast available".
    """
    keys: set[int] = set()
    for channel in channels:
        if channel:
            keys.update(channel)
    return sorted(keys)


def sample_at(channel: Mapping[int, float | None] | None, t: int) -> float | None:
    """Value of ``channel`` at exactly ``t``, or None when absent."""
    if channel is None:
        return None
    return channel.get(t)
