# showcase/render.py
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, List

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .logger import get_logger
from .models import DEFAULT_TITLE, ProjectItem
from .placeholder import placeholder_svg

logger = get_logger(__name__)

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)

DEFAULT_MOUNT_ID = "project-grid"
DEFAULT_LABEL = "Project"


@dataclass(frozen=True)
class CardImage:
    """
    Thumbnail of a card. `fallback` is what the image turns into when `src`
    fails to load in the browser.
    """
    src: str
    fallback: str
    alt: str = DEFAULT_TITLE

    @classmethod
    def for_item(cls, item: ProjectItem) -> "CardImage":
        fallback = placeholder_svg(item.title)
        return cls(src=item.image_ref or fallback, fallback=fallback, alt=item.title)

    @property
    def is_fallback(self) -> bool:
        return self.src == self.fallback

    def on_load_failure(self) -> "CardImage":
        return replace(self, src=self.fallback)

    @property
    def onerror(self) -> str:
        # swap once; clearing the handler stops a broken fallback from looping
        return f"this.onerror=null;this.src='{self.fallback}';"


def card_context(item: ProjectItem) -> Dict[str, Any]:
    return {
        "image": CardImage.for_item(item),
        "label": item.tag or DEFAULT_LABEL,
        "title": item.title,
        "description": item.description,
        "link": item.link or "#",
        "target": "_blank" if item.has_real_link else "_self",
    }


def build_card_html(item: ProjectItem) -> str:
    template = env.get_template("card.html")
    return template.render(**card_context(item))


def build_cards(items: Iterable[ProjectItem]) -> List[str]:
    return [build_card_html(it) for it in items]


def render(
    surface: BeautifulSoup,
    items: Iterable[ProjectItem],
    mount_id: str = DEFAULT_MOUNT_ID,
) -> bool:
    """
    Replace the contents of the mount point with one card per item, in order.
    Returns False, touching nothing, when the page has no such mount point.
    """
    mount = surface.find(id=mount_id)
    if mount is None:
        logger.debug("Mount point #%s not found; skipping render.", mount_id)
        return False

    mount.clear()
    count = 0
    for card_html in build_cards(items):
        fragment = BeautifulSoup(card_html, "html.parser")
        card = fragment.find("article")
        if card is None:
            continue
        mount.append(card.extract())
        count += 1

    logger.debug("Rendered %d cards into #%s.", count, mount_id)
    return True
