# sources/http.py
import os
from typing import Any

import requests

from showcase.errors import MalformedSource, SourceUnavailable
from showcase.logger import get_logger

logger = get_logger(__name__)

USER_AGENT = os.getenv(
    "HOMEPAGE_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
)

# Manifests change whenever a project is published; never accept a stored copy
NO_STORE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_manifest(
    url: str,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> Any:
    """Fetch a manifest over HTTP(S) and return the decoded JSON document."""
    sess = session or new_session()
    logger.debug("Fetching manifest: %s", url)
    try:
        resp = sess.get(url, headers=NO_STORE_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        raise SourceUnavailable(f"Request to {url} failed: {exc}") from exc

    if not resp.ok:
        raise SourceUnavailable(f"Bad status code {resp.status_code} at {url}")

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedSource(f"Response from {url} is not JSON: {exc}") from exc
