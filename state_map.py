# state_map.py
# Plot the crash locations of one state for one FARS year.
#
# Usage:
#   from state_map import plot_state
#   ax = plot_state(1, 2013, data_dir="data")
#   ax.figure.savefig("state_1_2013.png", dpi=180)

from __future__ import annotations

import logging
from typing import Callable, Optional

import matplotlib.pyplot as plt
import pandas as pd

from errors import InvalidArgument, InvalidState
from load_clean import PathLike, coerce_int, coerce_year, load_year, require_columns, resolve_filename

logger = logging.getLogger(__name__)

# ---------- Config ----------
STATE_COL = "STATE"
LAT_COL = "LATITUDE"
LON_COL = "LONGITUD"
MAP_COLS = [STATE_COL, LAT_COL, LON_COL]

# FARS codes unknown positions as out-of-range values (e.g. 99.9999, 999.9999)
LAT_SENTINEL = 90
LON_SENTINEL = 900


def coerce_state(state_code) -> int:
    try:
        return coerce_int(state_code, "STATE")
    except InvalidArgument:
        raise InvalidArgument(f"invalid STATE number: {state_code!r}") from None


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Copy of df with sentinel LATITUDE/LONGITUD set to NaN. No rows are dropped."""
    out = df.copy()
    lon = pd.to_numeric(out[LON_COL], errors="coerce")
    lat = pd.to_numeric(out[LAT_COL], errors="coerce")
    out[LON_COL] = lon.mask(lon > LON_SENTINEL)
    out[LAT_COL] = lat.mask(lat > LAT_SENTINEL)
    return out


def filter_state(data: pd.DataFrame, state_code) -> pd.DataFrame:
    """
    Rows of one year's data for a single state, with sentinel coordinates
    replaced by NaN. Raises InvalidState if the code never occurs in STATE.
    """
    require_columns(data, MAP_COLS)
    state = coerce_state(state_code)
    if state not in set(data[STATE_COL].dropna().unique()):
        raise InvalidState(state)
    subset = data[data[STATE_COL] == state]
    return sanitize_coordinates(subset)


def valid_points(df: pd.DataFrame) -> pd.DataFrame:
    return df.dropna(subset=[LAT_COL, LON_COL])[[LAT_COL, LON_COL]]


def _padded_range(values: pd.Series, pad: float = 0.5):
    lo, hi = float(values.min()), float(values.max())
    if lo == hi:
        lo, hi = lo - pad, hi + pad
    return lo, hi


def render_state_map(records: pd.DataFrame, ax=None, title: Optional[str] = None):
    """
    Default renderer: one small black dot per crash with a known position.
    Axis limits follow the range of the known coordinates.
    """
    points = valid_points(records)
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 6))
    ax.set_xlim(*_padded_range(points[LON_COL]))
    ax.set_ylim(*_padded_range(points[LAT_COL]))
    ax.scatter(points[LON_COL], points[LAT_COL], s=2, c="black", marker=".")
    ax.set_xlabel("Longitude"); ax.set_ylabel("Latitude")
    if title:
        ax.set_title(title)
    return ax


def render_state_geo(records: pd.DataFrame, title: Optional[str] = None):
    """Plotly renderer: crashes over US state outlines, zoomed to the known positions."""
    import plotly.graph_objects as go

    points = valid_points(records)
    fig = go.Figure(go.Scattergeo(lon=points[LON_COL], lat=points[LAT_COL], mode="markers",
                                  marker=dict(size=3, color="black")))
    fig.update_geos(scope="usa", showsubunits=True, subunitcolor="#888", fitbounds="locations")
    fig.update_layout(title=title, template="plotly_white", margin=dict(l=10, r=10, t=40, b=10))
    return fig


def plot_state(state_code, year, data_dir: Optional[PathLike] = None,
               renderer: Callable = render_state_map):
    """
    Load `year`, keep the crashes of `state_code` and hand them to `renderer`.
    Returns whatever the renderer returns, or None when there is nothing to plot.
    """
    state = coerce_state(state_code)
    year = coerce_year(year)
    data = load_year(resolve_filename(year, data_dir))

    subset = filter_state(data, state)
    if subset.empty:
        logger.info("no accidents to plot")
        return None
    if valid_points(subset).empty:
        logger.info("no valid coordinates to plot (STATE %d, %d: %d crashes without a position)",
                    state, year, len(subset))
        return None

    return renderer(subset, title=f"FARS {year}: STATE {state} ({len(subset)} crashes)")
