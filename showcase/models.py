# showcase/models.py
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

DEFAULT_TITLE = "Project"
DEFAULT_LINK = "#"


@dataclass(frozen=True)
class ProjectItem:
    """
    Normalized representation of one portfolio entry across all categories.
    Every field has a default, so an item built from an empty record still renders.
    """
    title: str = DEFAULT_TITLE
    image_ref: str = ""
    description: str = ""
    link: str = DEFAULT_LINK
    tag: str = ""
    gallery_refs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_real_link(self) -> bool:
        return bool(self.link) and self.link != DEFAULT_LINK


def _first(raw: Mapping[str, Any], *keys: str, default: str = "") -> str:
    # falsy values fall through to the next key
    for key in keys:
        value = raw.get(key)
        if value:
            return value if isinstance(value, str) else str(value)
    return default


def normalize_item(raw: Mapping[str, Any] | None = None) -> ProjectItem:
    """Map a raw manifest record onto a ProjectItem, defaulting field by field."""
    if not raw:
        return ProjectItem()

    gallery = raw.get("gallery")
    gallery_refs: Tuple[str, ...] = ()
    if isinstance(gallery, list):
        gallery_refs = tuple(g for g in gallery if isinstance(g, str) and g)

    return ProjectItem(
        title=_first(raw, "title", default=DEFAULT_TITLE),
        image_ref=_first(raw, "cover", "img"),
        description=_first(raw, "desc"),
        link=_first(raw, "href", "url", default=DEFAULT_LINK),
        tag=_first(raw, "tag", "category"),
        gallery_refs=gallery_refs,
    )
