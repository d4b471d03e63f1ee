"""Unit conversion functions for grid channels.

NWS grids report SI units; the dashboard shows Imperial + inHg. Every
converter passes ``None`` through so missing samples stay missing.
"""

from __future__ import annotations


def c_to_f(celsius: float | None) -> float | None:
    """Convert Celsius to Fahrenheit."""
    if celsius is None:
        return None
    return celsius * 9 / 5 + 32


def mm_to_in(mm: float | None) -> float | None:
    """Convert millimetres to inches."""
    if mm is None:
        return None
    return mm / 25.4


def kmh_to_mph(kmh: float | None) -> float | None:
    """Convert km/h to miles per hour."""
    if kmh is None:
        return None
    return kmh * 0.621371


def pa_to_inhg(pa: float | None) -> float | None:
    """Convert pascals to inches of mercury."""
    if pa is None:
        return None
    return pa / 3386.389


def identity(value: float | None) -> float | None:
    return value
