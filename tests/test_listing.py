from __future__ import annotations

from bs4 import BeautifulSoup
import httpx
import pytest

from internships.core.config import Settings
from internships.crawlers import listing


BASE = "https://practicas.example.org/ofertas/pagina/{page}"

PAGE_1 = """
<div id='listado-ofertas'>
  <div class='oferta'><a href='/ofertas/oferta/101'>Prácticas en datos</a></div>
  <div class='oferta'><a>Sin enlace</a></div>
  <div class='oferta'><a href='/ofertas/oferta/102'>Prácticas web</a></div>
</div>
<a href='/contacto'>Contacto</a>
"""

PAGE_2 = """
<div id='listado-ofertas'>
  <div class='oferta'><a href='/ofertas/oferta/103'>Prácticas marketing</a></div>
  <div class='oferta'><a href='/ofertas/oferta/101'>Prácticas en datos</a></div>
</div>
"""


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_listing_urls_keeps_document_order_and_skips_missing_href():
    urls = list(listing.listing_urls(_soup(PAGE_1), Settings(index_url_template=BASE)))
    assert urls == ["/ofertas/oferta/101", "/ofertas/oferta/102"]


def test_listing_urls_is_a_one_shot_iterator():
    it = listing.listing_urls(_soup(PAGE_1), Settings(index_url_template=BASE))
    assert list(it) == ["/ofertas/oferta/101", "/ofertas/oferta/102"]
    assert list(it) == []


def test_collect_reuses_first_page_and_does_not_dedupe(monkeypatch):
    requested = []

    def fake_fetch(url, *_args, **_kwargs):
        requested.append(url)
        return {BASE.format(page=2): PAGE_2}[url]

    monkeypatch.setattr(listing, "fetch_html", fake_fetch)

    urls, skipped = listing.collect_listing_urls(2, Settings(index_url_template=BASE), first_page=_soup(PAGE_1))

    assert requested == [BASE.format(page=2)]
    assert urls == ["/ofertas/oferta/101", "/ofertas/oferta/102", "/ofertas/oferta/103", "/ofertas/oferta/101"]
    assert skipped == []


def test_collect_fetches_first_page_when_not_given(monkeypatch):
    pages = {BASE.format(page=1): PAGE_1}
    monkeypatch.setattr(listing, "fetch_html", lambda url, *_args, **_kwargs: pages[url])

    urls, _ = listing.collect_listing_urls(1, Settings(index_url_template=BASE))

    assert urls == ["/ofertas/oferta/101", "/ofertas/oferta/102"]


def _failing_page_two(url, *_args, **_kwargs):
    if url == BASE.format(page=2):
        raise httpx.ConnectError("connection reset")
    return PAGE_2


def test_collect_propagates_index_page_failures(monkeypatch):
    monkeypatch.setattr(listing, "fetch_html", _failing_page_two)

    with pytest.raises(httpx.ConnectError):
        listing.collect_listing_urls(3, Settings(index_url_template=BASE), first_page=_soup(PAGE_1))


def test_collect_can_skip_failed_index_pages(monkeypatch):
    monkeypatch.setattr(listing, "fetch_html", _failing_page_two)
    cfg = Settings(index_url_template=BASE, skip_failed_pages=True)

    urls, skipped = listing.collect_listing_urls(3, cfg, first_page=_soup(PAGE_1))

    assert skipped == [2]
    assert urls == ["/ofertas/oferta/101", "/ofertas/oferta/102", "/ofertas/oferta/103", "/ofertas/oferta/101"]
