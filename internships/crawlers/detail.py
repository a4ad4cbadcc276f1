from __future__ import annotations
import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from internships.core.config import Settings, settings
from internships.crawlers.base import RECORD_FIELDS, ListingRecord
from internships.crawlers.http_helpers import fetch_html, parse_html

logger = logging.getLogger(__name__)


FIELD_SELECTORS: dict[str, str] = {
    "title": "#titulo",
    "reference": "#referencia",
    "requirements": "#requisitos li",
    "hours": "#horario",
    "tasks": "#tareas",
    "activities": "#actividades",
    "location": "#localidad",
    "salary": "#remuneracion",
    "type": "#tipo",
    "period_start": "#fecha-inicio",
    "period_end": "#fecha-fin",
}


def _clean(text: str) -> str:
    return " ".join(text.split())


def select_text(soup: BeautifulSoup, selector: str) -> str | None:
    el = soup.select_one(selector)
    if el is None:
        return None
    return _clean(el.get_text(" ", strip=True))


def select_all_text(soup: BeautifulSoup, selector: str) -> str:
    return ", ".join(_clean(el.get_text(" ", strip=True)) for el in soup.select(selector))


def compose_period(start: str | None, end: str | None) -> str | None:
    if start is None and end is None:
        return None
    return f"{start or ''} - {end or ''}"


def _extract_field(soup: BeautifulSoup, name: str) -> str | None:
    if name == "requirements":
        return select_all_text(soup, FIELD_SELECTORS["requirements"])
    if name == "period":
        return compose_period(
            select_text(soup, FIELD_SELECTORS["period_start"]),
            select_text(soup, FIELD_SELECTORS["period_end"]),
        )
    return select_text(soup, FIELD_SELECTORS[name])


def extract_record(soup: BeautifulSoup, link: str) -> ListingRecord:
    values: dict[str, str | None] = {}
    for name in RECORD_FIELDS:
        try:
            values[name] = _extract_field(soup, name)
        except Exception as exc:  # noqa: BLE001
            logger.debug("field %r failed on %s: %s", name, link, exc)
            values[name] = None
            continue
        if values[name] is None:
            logger.debug("field %r missing on %s", name, link)
    return ListingRecord(**values, link=link)


def scrape_listing(link: str, cfg: Settings | None = None) -> ListingRecord:
    cfg = cfg or settings
    # Listing hrefs may be relative; resolve only for fetching, the record keeps them verbatim.
    url = urljoin(cfg.index_url_template.format(page=1), link)
    try:
        soup = parse_html(fetch_html(url, timeout=cfg.http_timeout, user_agent=cfg.user_agent))
    except Exception as exc:  # noqa: BLE001
        logger.warning("could not load detail page %s: %s", url, exc)
        return ListingRecord.missing(link)
    return extract_record(soup, link)
