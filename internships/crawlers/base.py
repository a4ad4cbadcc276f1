from __future__ import annotations
from dataclasses import dataclass, fields


class ScraperError(Exception):
    """Base exception for scraping failures that should stop the run."""


class PaginationError(ScraperError):
    pass


@dataclass(frozen=True)
class ListingRecord:
    """
    One internship/job posting as extracted from its detail page.

    None means the field was not present on the page; an empty string means it
    was present but empty. `link` is the detail URL exactly as listed.
    """

    title: str | None
    reference: str | None
    requirements: str | None
    hours: str | None
    tasks: str | None
    activities: str | None
    location: str | None
    salary: str | None
    type: str | None
    period: str | None
    link: str

    @classmethod
    def missing(cls, link: str) -> ListingRecord:
        return cls(**dict.fromkeys(RECORD_FIELDS), link=link)


COLUMNS: list[str] = [f.name for f in fields(ListingRecord)]
RECORD_FIELDS: tuple[str, ...] = tuple(name for name in COLUMNS if name != "link")
