from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel


class RunSummary(BaseModel):
    pages: int
    listing_urls: int
    rows: int
    filtered_rows: int
    keyword: str
    output_path: str
    filtered_output_path: str
    skipped_pages: list[int] = []
    started_at: datetime
    finished_at: datetime
