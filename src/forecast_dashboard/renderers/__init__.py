"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: AlignedSeries / LoadedForecast pieces (from analysis/ and flows/)
  - Output: str (HTML fragment, not a full page) or a JSON-able dict
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - charts: build_chart_payload, build_charts_html
  - days: build_day_strip_html
  - formatters: hover_readout, fmt_f, fmt_pct, fmt_in, fmt_mph, fmt_inhg
  - colors: temperature_to_color

Adding a chart facet
--------------------
1. Add a ``_chart(...)`` entry in ``renderers/charts.py::build_chart_payload``
   pointing at an ``AlignedSeries`` field. Optional fields must be checked
   for presence (``series.has_pressure``) rather than scanned for Nones.

2. If the facet needs a colour, add a CSS variable in
   ``templates/base.html.j2`` and reference it by name.

3. Add tests: build a small series and assert the payload contains the
   chart and the page contains its canvas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
