import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from bs4 import BeautifulSoup

from showcase.config import HomeConfig, load_config
from showcase.loader import ManifestLoader
from showcase.logger import get_logger
from showcase.models import ProjectItem
from showcase.render import TEMPLATE_DIR, render
from showcase.rotation import current_time_ms, select
from showcase.theme import apply_theme, local_now, theme_for_hour

logger = get_logger(__name__)

MODE = os.getenv("MODE", "once").lower()  # "once" or "daemon"
CONFIG_PATH = os.getenv("CONFIG_PATH", "")
PAGE_TEMPLATE = os.getenv("PAGE_TEMPLATE", str(TEMPLATE_DIR / "index.html"))
OUTPUT_PATH = os.getenv("OUTPUT_PATH", "index.html")

STATUS_RENDERED = "rendered"
STATUS_NO_MOUNT = "no-mount"


@dataclass
class InitResult:
    status: str
    items: List[ProjectItem] = field(default_factory=list)
    selected: List[ProjectItem] = field(default_factory=list)
    theme: str | None = None

    @property
    def loaded(self) -> int:
        return len(self.items)

    @property
    def rendered(self) -> bool:
        return self.status == STATUS_RENDERED


def load_page(path: str = PAGE_TEMPLATE) -> BeautifulSoup:
    with open(path, "r", encoding="utf-8") as f:
        return BeautifulSoup(f.read(), "html.parser")


def write_page(surface: BeautifulSoup, path: str = OUTPUT_PATH) -> None:
    out = Path(path)
    if out.parent and not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(str(surface), encoding="utf-8")
    logger.info("Wrote homepage to %s", out)


def show(
    config: HomeConfig,
    surface: BeautifulSoup,
    items: List[ProjectItem],
    now_ms: int | None = None,
) -> List[ProjectItem]:
    """Pick this window's items and put them on the page; returns the pick."""
    pick = select(items, config.home_count, config.rotate_window_ms, now_ms=now_ms)
    render(surface, pick, mount_id=config.mount_id)
    return pick


def initialize(
    config: HomeConfig,
    surface: BeautifulSoup,
    loader: ManifestLoader | None = None,
    now_ms: int | None = None,
    now=None,
) -> InitResult:
    """
    Fetch every category, pick this window's projects and render them.
    Nothing here raises for a missing category or a missing mount point.
    """
    loader = loader or ManifestLoader(config)
    all_items = loader.load_all()

    theme = None
    if config.theme_by_time:
        theme = apply_theme(surface, now=now, tz_name=config.timezone)

    if surface.find(id=config.mount_id) is None:
        logger.warning("Page has no #%s mount point; nothing rendered.", config.mount_id)
        return InitResult(status=STATUS_NO_MOUNT, items=all_items, theme=theme)

    pick = show(config, surface, all_items, now_ms=now_ms)
    logger.info(
        "Showing %d of %d projects: %s",
        len(pick), len(all_items), [p.title for p in pick],
    )
    return InitResult(
        status=STATUS_RENDERED, items=all_items, selected=pick, theme=theme
    )


def run_once(config: HomeConfig | None = None) -> int:
    config = config or load_config(CONFIG_PATH)
    surface = load_page(PAGE_TEMPLATE)
    initialize(config, surface)
    write_page(surface, OUTPUT_PATH)
    return 0


def run_daemon(config: HomeConfig | None = None) -> None:
    config = config or load_config(CONFIG_PATH)
    if config.refresh_seconds <= 0:
        logger.info("REFRESH_SECONDS is 0; rendering once.")
        run_once(config)
        return

    logger.info(
        "Starting daemon; re-selecting every %d seconds (window %d ms).",
        config.refresh_seconds, config.rotate_window_ms,
    )
    surface = load_page(PAGE_TEMPLATE)
    result = initialize(
        config, surface, now_ms=current_time_ms(), now=local_now(config.timezone)
    )
    write_page(surface, OUTPUT_PATH)
    if not result.rendered:
        return

    # Manifests are read once; afterwards only the pick and the palette can change
    items = result.items
    written = (result.selected, result.theme)

    while True:
        time.sleep(config.refresh_seconds)
        try:
            pick = select(items, config.home_count, config.rotate_window_ms, current_time_ms())
            now = local_now(config.timezone)
            theme = theme_for_hour(now.hour) if config.theme_by_time else None
            if (pick, theme) == written:
                logger.debug("Selection and theme unchanged; not rewriting page.")
                continue
            if pick != written[0]:
                render(surface, pick, mount_id=config.mount_id)
            if theme is not None:
                apply_theme(surface, now=now, tz_name=config.timezone)
            write_page(surface, OUTPUT_PATH)
            written = (pick, theme)
        except Exception as e:
            logger.exception("Unhandled error in daemon loop: %s", e)


if __name__ == "__main__":
    try:
        if MODE == "daemon":
            run_daemon()
        else:
            raise SystemExit(run_once())
    except SystemExit:
        raise
    except Exception as e:
        logger.exception("Fatal homepage error: %s", e)
        raise SystemExit(2)
