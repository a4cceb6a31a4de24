# showcase/theme.py
import datetime
import re

import pytz
from bs4 import BeautifulSoup

from .logger import get_logger

logger = get_logger(__name__)

DAY_START_HOUR = 7
NIGHT_START_HOUR = 19

PALETTES = {
    "day": {
        "--bg": "#f5f6fb",
        "--card": "#ffffff",
        "--text": "#0f1222",
        "--muted": "#5a6275",
    },
    "night": {
        "--bg": "#0b0e13",
        "--card": "#11151c",
        "--text": "#eaf0ff",
        "--muted": "#b1b8cc",
    },
}

_CUSTOM_PROP_RE = re.compile(r"^\s*(--[\w-]+)\s*:\s*(.*?)\s*$")


def theme_for_hour(hour: int) -> str:
    return "day" if DAY_START_HOUR <= hour < NIGHT_START_HOUR else "night"


def local_now(tz_name: str = "") -> datetime.datetime:
    """Current time in `tz_name`, or in the host's own zone when it is empty."""
    if not tz_name:
        return datetime.datetime.now().astimezone()
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r; using UTC for the theme.", tz_name)
        tz = pytz.UTC
    return datetime.datetime.now(tz=tz)


def _merge_style(style: str, props: dict) -> str:
    """Set CSS declarations in an inline style, keeping unrelated ones."""
    kept = []
    for decl in style.split(";"):
        if not decl.strip():
            continue
        m = _CUSTOM_PROP_RE.match(decl)
        if m and m.group(1) in props:
            continue
        kept.append(decl.strip())
    kept.extend(f"{name}: {value}" for name, value in props.items())
    return "; ".join(kept) + ";"


def apply_theme(
    surface: BeautifulSoup,
    now: datetime.datetime | None = None,
    tz_name: str = "",
) -> str:
    """
    Switch the page between the light and dark palettes by time of day.
    Returns the theme name that was applied.
    """
    if now is None:
        now = local_now(tz_name)
    theme = theme_for_hour(now.hour)
    palette = PALETTES[theme]

    root = surface.find("html")
    if root is not None:
        root["style"] = _merge_style(root.get("style", ""), palette)
    else:
        logger.debug("No <html> element; skipping theme properties.")

    meta = surface.find("meta", attrs={"name": "theme-color"})
    if meta is not None:
        meta["content"] = palette["--bg"]

    logger.debug("Applied %s theme (hour=%d).", theme, now.hour)
    return theme
