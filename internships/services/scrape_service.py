from __future__ import annotations
import logging
from datetime import datetime, timezone

from internships.core.config import Settings, settings
from internships.crawlers.base import ListingRecord
from internships.crawlers.detail import scrape_listing
from internships.crawlers.http_helpers import fetch_html, parse_html
from internships.crawlers.listing import collect_listing_urls
from internships.crawlers.pagination import count_pages
from internships.schemas.run import RunSummary
from internships.services.export_service import build_table, filter_by_keyword, write_table

logger = logging.getLogger(__name__)


def run_scrape(cfg: Settings | None = None) -> RunSummary:
    cfg = cfg or settings
    started_at = datetime.now(timezone.utc)

    first_url = cfg.index_url_template.format(page=1)
    logger.info("loading first index page %s", first_url)
    first_page = parse_html(fetch_html(first_url, timeout=cfg.http_timeout, user_agent=cfg.user_agent))
    pages = count_pages(first_page, cfg)

    urls, skipped = collect_listing_urls(pages, cfg, first_page=first_page)
    logger.info("collected %d listing urls from %d pages", len(urls), pages)

    records: list[ListingRecord] = []
    for i, link in enumerate(urls, start=1):
        records.append(scrape_listing(link, cfg))
        if i % 25 == 0 or i == len(urls):
            logger.info("scraped %d/%d listings", i, len(urls))

    table = build_table(records)
    output_path = write_table(table, cfg.output_path, sep=cfg.separator)

    filtered = filter_by_keyword(table, cfg.keyword)
    filtered_output_path = write_table(filtered, cfg.filtered_output_path, sep=cfg.separator)
    logger.info("%d of %d listings mention %r", len(filtered), len(table), cfg.keyword)

    return RunSummary(
        pages=pages,
        listing_urls=len(urls),
        rows=len(table),
        filtered_rows=len(filtered),
        keyword=cfg.keyword,
        output_path=str(output_path),
        filtered_output_path=str(filtered_output_path),
        skipped_pages=skipped,
        started_at=started_at,
        finished_at=datetime.now(timezone.utc),
    )
