from __future__ import annotations
import logging

from bs4 import BeautifulSoup
import httpx

from internships.core.config import settings

logger = logging.getLogger(__name__)


def fetch_html(url: str, timeout: int | None = None, user_agent: str | None = None) -> str:
    headers = {"User-Agent": user_agent or settings.user_agent}
    if timeout is None:
        timeout = settings.http_timeout
    logger.debug("GET %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True, headers=headers) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.text


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")
