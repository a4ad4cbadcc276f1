from __future__ import annotations
import logging
from typing import Iterator
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from internships.core.config import Settings, settings
from internships.crawlers.base import PaginationError

logger = logging.getLogger(__name__)


def _page_number(href: str, segment_index: int) -> int:
    path = urlsplit(href).path.rstrip("/")
    segments = path.split("/")
    try:
        return int(segments[segment_index])
    except (IndexError, ValueError) as exc:
        raise PaginationError(f"cannot read page number from pagination link {href!r}") from exc


def count_pages(soup: BeautifulSoup, cfg: Settings | None = None) -> int:
    cfg = cfg or settings
    anchors = soup.select(cfg.pagination_selector)
    if not anchors:
        # Single page of results: the site omits the pagination block entirely.
        logger.info("no pagination control found, assuming a single index page")
        return 1

    last_href = (anchors[-1].get("href") or "").strip()
    total = _page_number(last_href, cfg.page_segment_index)
    logger.info("found %d index pages", total)
    return total


def index_page_urls(total: int, cfg: Settings | None = None) -> Iterator[str]:
    cfg = cfg or settings
    for page in range(1, total + 1):
        yield cfg.index_url_template.format(page=page)
