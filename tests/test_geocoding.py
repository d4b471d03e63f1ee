"""Tests for ZIP and place-name geocoding."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from forecast_dashboard.datasources.geocoding import geocode_query, lookup_zip, search_place
from forecast_dashboard.errors import FetchError, GeocodeError, PayloadError
from forecast_dashboard.schemas import GeocodeResult

ZIP_PAYLOAD = {
    "post code": "80202",
    "country": "United States",
    "places": [
        {
            "place name": "Denver",
            "longitude": "-104.9949",
            "latitude": "39.7482",
            "state": "Colorado",
            "state abbreviation": "CO",
        }
    ],
}

NOMINATIM = "https://nominatim.openstreetmap.org/search"

PLACE_PAYLOAD = [
    {
        "lat": "40.0149856",
        "lon": "-105.270545",
        "display_name": "Boulder, Boulder County, Colorado, United States",
    }
]


class TestLookupZip:
    """Test Zippopotam.us lookups."""

    @patch("forecast_dashboard.datasources.geocoding.postal.fetch_json")
    def test_success(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = ZIP_PAYLOAD
        result = lookup_zip("80202")
        assert result.lat == pytest.approx(39.7482)
        assert result.lon == pytest.approx(-104.9949)
        assert result.label == "80202 Denver, CO"
        url = mock_fetch.call_args.args[0]
        assert url == "https://api.zippopotam.us/us/80202"

    @patch("forecast_dashboard.datasources.geocoding.postal.fetch_json")
    def test_unknown_zip(self, mock_fetch: MagicMock) -> None:
        mock_fetch.side_effect = FetchError("https://api.zippopotam.us/us/00000", status=404)
        with pytest.raises(GeocodeError, match="ZIP not found"):
            lookup_zip("00000")

    @patch("forecast_dashboard.datasources.geocoding.postal.fetch_json")
    def test_empty_places(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = {"post code": "99999", "places": []}
        with pytest.raises(GeocodeError, match="ZIP not found"):
            lookup_zip("99999")

    @patch("forecast_dashboard.datasources.geocoding.postal.fetch_json")
    def test_malformed_place(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = {"post code": "80202", "places": [{"place name": "Denver"}]}
        with pytest.raises(GeocodeError, match="unexpected response"):
            lookup_zip("80202")

    @patch("forecast_dashboard.datasources.geocoding.postal.fetch_json")
    def test_server_error_propagates(self, mock_fetch: MagicMock) -> None:
        mock_fetch.side_effect = FetchError("https://api.zippopotam.us/us/80202", status=500)
        with pytest.raises(FetchError):
            lookup_zip("80202")


class TestSearchPlace:
    """Test Nominatim place search."""

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_success(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = PLACE_PAYLOAD
        result = search_place("Boulder, CO")
        assert result.lat == pytest.approx(40.0149856)
        assert result.label.startswith("Boulder, Boulder County")

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_query_params(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = PLACE_PAYLOAD
        search_place("Boulder, CO")
        params = mock_fetch.call_args.kwargs["params"]
        assert params["q"] == "Boulder, CO"
        assert params["countrycodes"] == "us"
        assert params["limit"] == 1
        assert params["format"] == "jsonv2"

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_label_falls_back_to_query(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = [{"lat": "40.0", "lon": "-105.0"}]
        assert search_place("somewhere").label == "somewhere"

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_no_results(self, mock_fetch: MagicMock) -> None:
        mock_fetch.return_value = []
        with pytest.raises(GeocodeError, match="No results"):
            search_place("Atlantis")

    @pytest.mark.parametrize(
        "payload",
        [[{"display_name": "Boulder"}], [{"lat": "north", "lon": "-105.0"}], {"error": "x"}, ["x"]],
    )
    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_malformed_result(self, mock_fetch: MagicMock, payload: object) -> None:
        mock_fetch.return_value = payload
        with pytest.raises(GeocodeError, match="unexpected response"):
            search_place("Boulder")

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_non_json_response(self, mock_fetch: MagicMock) -> None:
        mock_fetch.side_effect = PayloadError(NOMINATIM, "body is not JSON")
        with pytest.raises(GeocodeError, match="Place search failed"):
            search_place("Boulder")

    @patch("forecast_dashboard.datasources.geocoding.places.fetch_json")
    def test_request_failure(self, mock_fetch: MagicMock) -> None:
        mock_fetch.side_effect = FetchError(NOMINATIM, status=503)
        with pytest.raises(GeocodeError, match="Place search failed"):
            search_place("Boulder")


class TestGeocodeQuery:
    """Test query routing."""

    @patch("forecast_dashboard.datasources.geocoding.search_place")
    @patch("forecast_dashboard.datasources.geocoding.lookup_zip")
    def test_zip_routed_to_postal(self, mock_zip: MagicMock, mock_place: MagicMock) -> None:
        mock_zip.return_value = GeocodeResult(lat=39.7, lon=-105.0, label="80202 Denver, CO")
        result = geocode_query(" 80202 ")
        mock_zip.assert_called_once_with("80202")
        mock_place.assert_not_called()
        assert result.label == "80202 Denver, CO"

    @pytest.mark.parametrize("query", ["Boulder, CO", "1234", "802021", "80202-1234"])
    @patch("forecast_dashboard.datasources.geocoding.search_place")
    @patch("forecast_dashboard.datasources.geocoding.lookup_zip")
    def test_other_queries_routed_to_search(
        self, mock_zip: MagicMock, mock_place: MagicMock, query: str
    ) -> None:
        geocode_query(query)
        mock_place.assert_called_once_with(query)
        mock_zip.assert_not_called()

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, query: str) -> None:
        with pytest.raises(GeocodeError, match="Enter a ZIP code or place name"):
            geocode_query(query)
