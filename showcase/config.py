# showcase/config.py
import json
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Tuple

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = ("Modelado", "Programacion", "Edicion", "Musica", "IA", "Juegos")
DEFAULT_WINDOW_MS = 60 * 60 * 1000
DEFAULT_HOME_COUNT = 6

# JSON key -> HomeConfig field
_JSON_KEYS = {
    "categories": "categories",
    "rotateWindowMs": "rotate_window_ms",
    "homeCount": "home_count",
    "manifestBase": "manifest_base",
    "manifestName": "manifest_name",
    "mountId": "mount_id",
    "requestTimeout": "request_timeout",
    "refreshSeconds": "refresh_seconds",
    "timezone": "timezone",
    "themeByTime": "theme_by_time",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class HomeConfig:
    categories: Tuple[str, ...] = DEFAULT_CATEGORIES
    rotate_window_ms: int = DEFAULT_WINDOW_MS
    home_count: int = DEFAULT_HOME_COUNT
    manifest_base: str = "."
    manifest_name: str = "manifest.json"
    mount_id: str = "project-grid"
    request_timeout: float = 30.0
    refresh_seconds: int = 0
    # empty means the host's local zone
    timezone: str = ""
    theme_by_time: bool = True

    def __post_init__(self):
        if isinstance(self.categories, str) or not all(
            isinstance(c, str) and c for c in self.categories
        ):
            raise ValueError("categories must be a list of non-empty strings")
        object.__setattr__(self, "categories", tuple(self.categories))
        for name in ("rotate_window_ms", "home_count", "refresh_seconds"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"{name} must be a whole number")
        if not _is_number(self.request_timeout):
            raise ValueError("request_timeout must be a number")
        if not isinstance(self.theme_by_time, bool):
            raise ValueError("theme_by_time must be true or false")
        for name in ("manifest_base", "manifest_name", "mount_id", "timezone"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if self.rotate_window_ms <= 0:
            raise ValueError("rotate_window_ms must be positive")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.refresh_seconds < 0:
            raise ValueError("refresh_seconds must not be negative")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: "HomeConfig | None" = None) -> "HomeConfig":
        """Overlay the recognized camelCase keys of a JSON object onto `base`."""
        unknown = set(data) - set(_JSON_KEYS)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", sorted(unknown))
        overrides = {_JSON_KEYS[k]: v for k, v in data.items() if k in _JSON_KEYS}
        return replace(base or cls(), **overrides)

    @classmethod
    def from_env(cls) -> "HomeConfig":
        overrides: Dict[str, Any] = {}

        raw_categories = os.getenv("CATEGORIES", "").strip()
        if raw_categories:
            parts = [p.strip() for p in raw_categories.replace(";", ",").split(",")]
            overrides["categories"] = tuple(p for p in parts if p)

        for env_name, field_name, cast in (
            ("ROTATE_WINDOW_MS", "rotate_window_ms", int),
            ("HOME_COUNT", "home_count", int),
            ("REQUEST_TIMEOUT", "request_timeout", float),
            ("REFRESH_SECONDS", "refresh_seconds", int),
        ):
            value = os.getenv(env_name, "").strip()
            if value:
                overrides[field_name] = cast(value)

        for env_name, field_name in (
            ("MANIFEST_BASE", "manifest_base"),
            ("MANIFEST_NAME", "manifest_name"),
            ("MOUNT_ID", "mount_id"),
            ("THEME_TZ", "timezone"),
        ):
            value = os.getenv(env_name, "").strip()
            if value:
                overrides[field_name] = value

        theme_by_time = os.getenv("THEME_BY_TIME", "").strip().lower()
        if theme_by_time:
            overrides["theme_by_time"] = theme_by_time == "true"

        return cls(**overrides)


def load_config(path: str | None = None) -> HomeConfig:
    """
    Build the configuration from the environment, then overlay the JSON file
    at `path` when one is given. Invalid configuration is fatal.
    """
    try:
        config = HomeConfig.from_env()
    except (TypeError, ValueError) as e:
        logger.error("Invalid configuration in environment: %s", e)
        raise SystemExit(1)

    if not path:
        return config

    if not os.path.exists(path):
        logger.error("Config file not found at %s", path)
        raise SystemExit(1)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        logger.error("Failed to load config file at %s: %s", path, e)
        raise SystemExit(1)

    if not isinstance(data, dict):
        logger.error("Config file %s must contain a JSON object.", path)
        raise SystemExit(1)

    try:
        return HomeConfig.from_mapping(data, base=config)
    except (TypeError, ValueError) as e:
        logger.error("Invalid configuration in %s: %s", path, e)
        raise SystemExit(1)
