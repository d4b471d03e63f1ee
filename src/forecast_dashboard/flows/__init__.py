"""
Prefect flows for the forecast pipeline.

Flows:
- load: geocode, fetch NWS point/grid/hourly/daily, build the aligned series
- build: render a loaded forecast into a static HTML dashboard

Usage (local):
    python -m forecast_dashboard.flows.load
    python -m forecast_dashboard.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    forecast-dashboard show 80202
"""
