import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

COLUMNS = ["ST_CASE", "STATE", "MONTH", "DAY", "LATITUDE", "LONGITUD"]


def crash(state, month, lat=32.5, lon=-86.5, case=0):
    return {"ST_CASE": case, "STATE": state, "MONTH": month, "DAY": 1,
            "LATITUDE": lat, "LONGITUD": lon}


def write_year(directory, year, rows, columns=COLUMNS):
    path = directory / f"daccident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=columns).to_csv(path, index=False)
    return path


@pytest.fixture
def data_dir(tmp_path):
    """
    Two small FARS years:
      2013: STATE 1 one crash per month plus two with sentinel positions,
            STATE 4 three crashes, STATE 6 two crashes without a position.
      2014: STATE 1 crashes in January to June only.
    """
    rows_2013 = [crash(1, m, lat=32.0 + m / 10, lon=-87.0 + m / 10) for m in range(1, 13)]
    rows_2013 += [crash(1, 1, lon=999.9999), crash(1, 2, lat=99.9999)]
    rows_2013 += [crash(4, 2, 33.4, -112.0), crash(4, 3, 34.1, -111.5), crash(4, 3, 35.2, -111.6)]
    rows_2013 += [crash(6, 5, 99.9999, 999.9999), crash(6, 5, 95.0, 999.0)]
    write_year(tmp_path, 2013, rows_2013)

    rows_2014 = [crash(1, m) for m in range(1, 7) for _ in range(m)]
    write_year(tmp_path, 2014, rows_2014)
    return tmp_path
