# run.py
# Command-line runner for the FARS toolkit.
#
#   python run.py 2013 2014 2015 --data-dir data
#   python run.py 2013 2014 --data-dir data --state 1 --map-year 2013 --out state_1_2013.png
#
# Prints the month x year crash counts; optionally saves one state's crash map.

from __future__ import annotations

import argparse
import logging
import sys
import warnings
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from analysis import summarize_years
from errors import FarsError, InvalidYearWarning
from load_clean import coerce_year
from state_map import plot_state

logger = logging.getLogger("run")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Summarize FARS crashes by month and year.")
    p.add_argument("years", nargs="+", help="years to summarize, e.g. 2013 2014 2015")
    p.add_argument("--data-dir", default=None, help="folder holding daccident_<year>.csv.bz2")
    p.add_argument("--state", default=None, help="STATE code to map")
    p.add_argument("--map-year", default=None, help="year to map (default: first year that loaded)")
    p.add_argument("--out", default=None, help="map image path (default: state_<STATE>_<YEAR>.png)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _print_year_warning(message, category, filename, lineno, file=None, line=None):
    print(f"warning: {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(name)s: %(message)s")

    logger.debug("Years requested: %s (data dir: %s)", args.years, args.data_dir or ".")
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("always", InvalidYearWarning)
            warnings.showwarning = _print_year_warning
            table = summarize_years(args.years, data_dir=args.data_dir)
        print("\n=== Crashes by month (rows) and year (columns) ===")
        print(table.to_string())

        if args.state is not None:
            # Default to the first year that actually loaded
            map_year = coerce_year(args.map_year if args.map_year is not None else table.columns[0])
            ax = plot_state(args.state, map_year, data_dir=args.data_dir)
            if ax is not None:
                out = args.out or f"state_{args.state}_{map_year}.png"
                ax.figure.tight_layout(); ax.figure.savefig(out, dpi=180); plt.close(ax.figure)
                print(f"\nMap saved to {out}")
    except FarsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
