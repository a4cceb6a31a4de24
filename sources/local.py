# sources/local.py
import json
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

from showcase.errors import MalformedSource, SourceUnavailable
from showcase.logger import get_logger

logger = get_logger(__name__)


def _to_path(location: str) -> Path:
    parsed = urlparse(location)
    if parsed.scheme.lower() == "file":
        return Path(unquote(parsed.path))
    return Path(location)


def fetch_manifest(location: str, session: Any = None, timeout: float = 30) -> Any:
    """
    Read a manifest from the local filesystem (plain path or file:// URL).
    `session` and `timeout` are accepted so every fetcher shares one signature.
    """
    path = _to_path(location)
    logger.debug("Reading manifest: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedSource(f"{path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise SourceUnavailable(f"Cannot read {path}: {exc}") from exc

    try:
        return json.loads(text)
    except ValueError as exc:
        raise MalformedSource(f"{path} is not valid JSON: {exc}") from exc
