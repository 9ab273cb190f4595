# load_clean.py
# Usage:
#   from load_clean import resolve_filename, load_year, load_years
#   df = load_year(resolve_filename(2013, data_dir="data"))
#   tables = load_years([2013, 2014, 2015], data_dir="data")   # None for missing years

from __future__ import annotations

import logging
import sys
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from errors import FileNotFound, InvalidArgument, InvalidYearWarning, ParseError

logger = logging.getLogger(__name__)

# ---------- Config ----------
FILENAME_TEMPLATE = "daccident_{year}.csv.bz2"
MONTH_COL = "MONTH"
YEAR_COL = "year"
BATCH_COLS = [MONTH_COL, YEAR_COL]

PathLike = Union[str, Path]


# ---------- Helpers ----------
def coerce_int(value, what: str = "value") -> int:
    """
    Coerce an int, an integral float or a numeric string like ' 2013 ' to int.
    Anything else raises InvalidArgument.
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}") from None
    if not np.isfinite(number) or not number.is_integer():
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    return int(number)


def coerce_year(year) -> int:
    return coerce_int(year, "year")


def require_columns(df: pd.DataFrame, columns: Iterable[str], source: str = "") -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        where = f" in '{source}'" if source else ""
        raise ParseError(f"Missing required columns{where}: {missing}. Found: {df.columns.tolist()}",
                         path=source)


# ---------- Filenames ----------
def resolve_filename(year, data_dir: Optional[PathLike] = None) -> str:
    """Return the FARS file name for a year, e.g. 2013 -> 'daccident_2013.csv.bz2'."""
    name = FILENAME_TEMPLATE.format(year=coerce_year(year))
    if data_dir is None:
        return name
    return str(Path(data_dir) / name)


# ---------- Single year ----------
def _read_csv(path: Path, **kwargs) -> pd.DataFrame:
    # The codec's own chatter (DtypeWarning and friends) is not the caller's business.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        return pd.read_csv(path, low_memory=False, **kwargs)


def load_year(path: PathLike) -> pd.DataFrame:
    """
    Read one FARS year from a (bz2-compressed) CSV.
    Raises FileNotFound if the file is missing and ParseError if it cannot be parsed.
    Column names are kept as they appear in the file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFound(path)

    # Try UTF-8, fall back to latin-1 for older releases
    try:
        try:
            return _read_csv(path)
        except UnicodeDecodeError:
            return _read_csv(path, encoding="latin1")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, OSError, EOFError) as exc:
        raise ParseError(f"could not parse '{path}': {exc}", path=str(path)) from exc


# ---------- Many years ----------
@dataclass
class YearResult:
    """Outcome of loading one year of a batch: a table, or the error that stopped it."""

    year: object
    table: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _load_month_year(year, data_dir: Optional[PathLike]) -> pd.DataFrame:
    year = coerce_year(year)
    path = resolve_filename(year, data_dir)
    df = load_year(path)
    require_columns(df, [MONTH_COL], path)
    # A single stray code turns the whole column into strings
    months = pd.to_numeric(df[MONTH_COL], errors="coerce")
    return df.assign(**{MONTH_COL: months, YEAR_COL: year})[BATCH_COLS]


def _warn_invalid_year(year) -> None:
    # Fresh registry on every call: repeated failures each get their own warning.
    caller = sys._getframe(2)
    warnings.warn_explicit(f"invalid year: {year}", InvalidYearWarning,
                           caller.f_code.co_filename, caller.f_lineno,
                           module=caller.f_globals.get("__name__"), registry=None)


def load_year_results(years, data_dir: Optional[PathLike] = None) -> List[YearResult]:
    """
    Load each year independently, keeping input order and length.
    A year that fails is reported with an InvalidYearWarning and does not stop the batch.
    """
    if isinstance(years, (str, bytes, int, np.integer)):
        years = [years]

    results = []
    for year in years:
        try:
            table = _load_month_year(year, data_dir)
        except Exception as exc:
            logger.debug("Skipping year %r: %s", year, exc)
            _warn_invalid_year(year)
            results.append(YearResult(year=year, error=exc))
        else:
            results.append(YearResult(year=year, table=table))
    return results


def load_years(years, data_dir: Optional[PathLike] = None) -> List[Optional[pd.DataFrame]]:
    """MONTH/year tables for each year, None where the year could not be loaded."""
    return [r.table for r in load_year_results(years, data_dir)]
