from __future__ import annotations
import logging
from typing import Iterator

from bs4 import BeautifulSoup
import httpx

from internships.core.config import Settings, settings
from internships.crawlers.http_helpers import fetch_html, parse_html
from internships.crawlers.pagination import index_page_urls

logger = logging.getLogger(__name__)


def listing_urls(soup: BeautifulSoup, cfg: Settings | None = None) -> Iterator[str]:
    cfg = cfg or settings
    for a in soup.select(cfg.listing_selector):
        href = (a.get("href") or "").strip()
        if href:
            yield href


def fetch_listing_urls(index_url: str, cfg: Settings | None = None) -> Iterator[str]:
    cfg = cfg or settings
    html = fetch_html(index_url, timeout=cfg.http_timeout, user_agent=cfg.user_agent)
    yield from listing_urls(parse_html(html), cfg)


def collect_listing_urls(
    total: int, cfg: Settings | None = None, first_page: BeautifulSoup | None = None
) -> tuple[list[str], list[int]]:
    """
    Walk index pages 1..total and return (detail urls, skipped page numbers).

    URLs keep page order and in-page order and are not deduplicated. When
    `first_page` is given it is used instead of fetching page 1 again.
    """
    cfg = cfg or settings
    urls: list[str] = []
    skipped: list[int] = []

    for page, index_url in enumerate(index_page_urls(total, cfg), start=1):
        if page == 1 and first_page is not None:
            page_urls = list(listing_urls(first_page, cfg))
        else:
            try:
                page_urls = list(fetch_listing_urls(index_url, cfg))
            except httpx.HTTPError as exc:
                if not cfg.skip_failed_pages:
                    raise
                logger.warning("skipping index page %d (%s): %s", page, index_url, exc)
                skipped.append(page)
                continue

        logger.info("index page %d/%d: %d listings", page, total, len(page_urls))
        urls.extend(page_urls)

    return urls, skipped
