"""Geocoding API constants.

  - Zippopotam.us: https://www.zippopotam.us/ (US ZIP -> lat/lon)
  - Nominatim: https://nominatim.org/release-docs/latest/api/Search/
"""

import re

ZIPPOPOTAM_URL = "https://api.zippopotam.us/us/{zip}"
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"

#: Place search is restricted to one country and one result
COUNTRY_CODES = "us"
CONTACT_EMAIL = "noreply@example.com"

ZIP_RE = re.compile(r"^\d{5}$")
