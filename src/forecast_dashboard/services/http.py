"""
Shared HTTP client and JSON fetch helper.

Provides a pre-configured ``requests.Session`` with a default timeout and a
User-Agent (the NWS API rejects anonymous clients). Retries are disabled: a
failed request aborts the whole forecast load and is reported verbatim.

Usage::

    from forecast_dashboard.services.http import fetch_json

    data = fetch_json("https://api.weather.gov/points/39.7392,-104.9903")
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from forecast_dashboard.config import get_settings
from forecast_dashboard.errors import FetchError, PayloadError

logger = logging.getLogger(__name__)

#: No retries anywhere: connection errors and bad statuses surface immediately.
DEFAULT_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    redirect=5,
    raise_on_status=False,  # let fetch_json map the status to FetchError
)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = "forecast-dashboard/0.1 (noreply@example.com)"
GEOJSON_ACCEPT = "application/geo+json"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: Value for the ``User-Agent`` header.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session: import and use directly.
session: requests.Session = create_session(
    timeout=get_settings().http_timeout,
    user_agent=get_settings().user_agent,
)


def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    accept: str = GEOJSON_ACCEPT,
) -> Any:
    """
    GET ``url`` and decode the JSON body.

    Raises:
        FetchError: On a network error or any non-2xx status.
        PayloadError: If a successful response body is not JSON.
    """
    logger.info("GET %s", url)
    try:
        resp = session.get(url, params=params, headers={"Accept": accept})
    except requests.RequestException as exc:
        raise FetchError(url, reason=str(exc)) from exc

    if not resp.ok:
        raise FetchError(url, status=resp.status_code)
    try:
        return resp.json()
    except ValueError as exc:
        raise PayloadError(url, "body is not JSON") from exc
