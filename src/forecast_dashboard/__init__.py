"""Forecast Dashboard - multi-facet NWS forecast charts from one hourly timeline.

Architecture::

    datasources/   External APIs (NWS points/grid/hourly/daily, ZIP + place geocoding)
    analysis/      Pure time-series core (interval expansion, axis merge, series
                   building, favorability score, sun events, precip labels)
    dashboard.py   Single live-forecast slot with explicit teardown
    renderers/     Pure data → HTML (charts payload, day strip, hover readout)
    flows/         Prefect orchestration (load fetches + builds series, build renders page)
    services/      Shared utilities (HTTP session, JSON fetch)

Data flow: datasources → analysis → dashboard session → renderers → site/

Extension points (see each package's docstring for step-by-step guides):
  - New data source:   datasources/__init__.py
  - New derived metric: analysis/__init__.py
  - New chart facet:   renderers/__init__.py
"""

__version__ = "0.1.0"

from forecast_dashboard.config import Settings

__all__ = ["Settings", "__version__"]
