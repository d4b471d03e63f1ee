"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``geocoding/`` for a minimal example, ``nws/`` for a richer one.

2. Write fetch functions that return dicts or pydantic models::

       from forecast_dashboard.services.http import fetch_json

       def fetch_something(url) -> dict[str, Any]:
           return fetch_json(url)

   ``fetch_json`` raises ``FetchError`` on any failure; do not retry.

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/load.py``):
   - Add a ``@task`` that calls your fetch function
   - ``.submit()`` it alongside the other fetches in ``load_forecast()``

5. Add tests in ``tests/test_{name}.py``.
"""
