from __future__ import annotations
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

import pandas as pd

from internships.crawlers.base import COLUMNS, ListingRecord

logger = logging.getLogger(__name__)


def _none_for_missing(table: pd.DataFrame) -> pd.DataFrame:
    table = table.astype(object)
    return table.where(table.notna(), None)


def build_table(records: Iterable[ListingRecord]) -> pd.DataFrame:
    rows = [asdict(record) for record in records]
    table = pd.DataFrame(rows, columns=COLUMNS)
    return _none_for_missing(table)


def write_table(table: pd.DataFrame, path: str | Path, sep: str = ";") -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(out, sep=sep, index=False, encoding="utf-8", na_rep="")
    logger.info("wrote %d rows to %s", len(table), out)
    return out


def read_table(path: str | Path, sep: str = ";") -> pd.DataFrame:
    table = pd.read_csv(
        path,
        sep=sep,
        dtype=str,
        encoding="utf-8",
        keep_default_na=False,
        na_values=[""],
    )
    return _none_for_missing(table)


def filter_by_keyword(table: pd.DataFrame, keyword: str) -> pd.DataFrame:
    needle = keyword.casefold()
    mask = table["requirements"].map(lambda value: isinstance(value, str) and needle in value.casefold())
    return table.loc[mask.astype(bool)].reset_index(drop=True)
