"""Tests for grid unit converters."""

from __future__ import annotations

import pytest

from forecast_dashboard.analysis.units import c_to_f, identity, kmh_to_mph, mm_to_in, pa_to_inhg


class TestConverters:
    """Test each converter and None propagation."""

    @pytest.mark.parametrize(
        ("celsius", "fahrenheit"),
        [(0, 32.0), (100, 212.0), (-40, -40.0)],
    )
    def test_c_to_f(self, celsius: float, fahrenheit: float) -> None:
        assert c_to_f(celsius) == fahrenheit

    def test_mm_to_in(self) -> None:
        assert mm_to_in(25.4) == pytest.approx(1.0)

    def test_kmh_to_mph(self) -> None:
        assert kmh_to_mph(100) == pytest.approx(62.1371)

    def test_pa_to_inhg(self) -> None:
        assert pa_to_inhg(101325) == pytest.approx(29.92, abs=0.01)

    @pytest.mark.parametrize("convert", [c_to_f, mm_to_in, kmh_to_mph, pa_to_inhg, identity])
    def test_none_passes_through(self, convert: object) -> None:
        assert convert(None) is None  # type: ignore[operator]

    def test_zero_is_not_none(self) -> None:
        assert mm_to_in(0) == 0
        assert identity(0) == 0
