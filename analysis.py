# analysis.py
# Monthly crash counts per year from the yearly FARS files.
#
# Usage:
#   from analysis import summarize_years
#   table = summarize_years([2013, 2014, 2015], data_dir="data")
#
# Output: rows MONTH 1..12, one column per year that loaded, cell = number of crashes.
# A month with no crashes in a year is <NA>, not 0.

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import pandas as pd

from errors import NoDataAvailable
from load_clean import MONTH_COL, YEAR_COL, PathLike, coerce_year, load_year_results

logger = logging.getLogger(__name__)

# ---------- Config ----------
MONTHS = list(range(1, 13))


def count_by_month_year(tables: Iterable[Optional[pd.DataFrame]],
                        years: Optional[List[int]] = None) -> pd.DataFrame:
    """
    Group MONTH/year tables by (year, MONTH), count rows and spread years into columns.
    None entries are skipped. `years` fixes the column order; by default it is the
    order in which years first appear in the data.
    """
    frames = [t for t in tables if t is not None]
    if not frames:
        raise NoDataAvailable("no data available: none of the requested years could be loaded")

    combined = pd.concat(frames, ignore_index=True)
    if years is None:
        years = combined[YEAR_COL].tolist()
    years = list(dict.fromkeys(int(y) for y in years))

    combined[MONTH_COL] = pd.to_numeric(combined[MONTH_COL], errors="coerce")
    in_range = combined[MONTH_COL].isin(MONTHS)
    if not in_range.all():
        logger.debug("%d records with MONTH outside 1..12 left out of the table",
                     int((~in_range).sum()))
    combined = combined[in_range].astype({MONTH_COL: int, YEAR_COL: int})

    if combined.empty:
        table = pd.DataFrame(index=MONTHS, columns=years, dtype="Int64")
    else:
        counts = (combined.groupby([YEAR_COL, MONTH_COL])
                          .size()
                          .unstack(YEAR_COL))
        # Pre-seeded month index so a month with no crashes in any year still gets a row
        table = counts.reindex(index=MONTHS, columns=years).astype("Int64")

    table.index.name = MONTH_COL
    table.columns.name = YEAR_COL
    return table


def summarize_years(years, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """Number of crashes by month (rows) and year (columns) for the given years."""
    results = load_year_results(years, data_dir)
    loaded = [r for r in results if r.ok]
    logger.debug("Loaded %d of %d requested years", len(loaded), len(results))
    return count_by_month_year([r.table for r in loaded],
                               years=[coerce_year(r.year) for r in loaded])
