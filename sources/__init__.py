# sources/__init__.py
from urllib.parse import urlparse

from . import http
from . import local

FETCHERS = {
    "http": http.fetch_manifest,
    "https": http.fetch_manifest,
    "file": local.fetch_manifest,
    "": local.fetch_manifest,
}


def fetcher_for(location: str):
    """Return the fetcher registered for the location's scheme, or None."""
    scheme = urlparse(location).scheme.lower()
    # Windows drive letters parse as one-letter schemes
    if len(scheme) == 1:
        scheme = ""
    return FETCHERS.get(scheme)
