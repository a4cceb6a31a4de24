# showcase/loader.py
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List

import requests

from sources import fetcher_for
from sources.http import new_session

from .config import HomeConfig
from .errors import ManifestError, MalformedSource
from .logger import get_logger
from .models import ProjectItem, normalize_item

logger = get_logger(__name__)


class ManifestLoader:
    """
    Loads the per-category manifests named by a HomeConfig.
    Failures never reach the caller: a broken category just contributes no items.
    """

    def __init__(self, config: HomeConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or new_session()

    def manifest_location(self, category: str) -> str:
        base = self.config.manifest_base.rstrip("/") or "."
        return f"{base}/{category}/{self.config.manifest_name}"

    def _parse(self, location: str, data: Any) -> List[ProjectItem]:
        if not isinstance(data, dict):
            raise MalformedSource(f"{location}: top level is {type(data).__name__}, expected object")
        projects = data.get("projects")
        if not isinstance(projects, list):
            raise MalformedSource(f"{location}: 'projects' is missing or not a list")

        items: List[ProjectItem] = []
        for raw in projects:
            if not isinstance(raw, dict):
                logger.debug("Skipping non-object project record in %s: %r", location, raw)
                continue
            items.append(normalize_item(raw))
        return items

    def load_category(self, category: str) -> List[ProjectItem]:
        location = self.manifest_location(category)
        fetcher = fetcher_for(location)
        if not fetcher:
            logger.error("No fetcher registered for manifest location %s; skipping.", location)
            return []

        try:
            data = fetcher(location, session=self.session, timeout=self.config.request_timeout)
            items = self._parse(location, data)
        except ManifestError as e:
            logger.warning("Category '%s' unavailable: %s", category, e)
            return []
        except Exception as e:
            logger.error("Unexpected error loading category '%s' from %s: %s", category, location, e)
            return []

        logger.info("Category '%s': loaded %d projects.", category, len(items))
        return items

    def load_all(self) -> List[ProjectItem]:
        categories = self.config.categories
        if not categories:
            return []

        with ThreadPoolExecutor(max_workers=len(categories)) as pool:
            groups = list(pool.map(self.load_category, categories))

        all_items = [item for group in groups for item in group if item]
        logger.info(
            "Loaded %d projects from %d categories.", len(all_items), len(categories)
        )
        return all_items
