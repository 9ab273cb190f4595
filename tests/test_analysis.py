import pandas as pd
import pytest

from analysis import count_by_month_year, summarize_years
from conftest import crash, write_year
from errors import InvalidYearWarning, NoDataAvailable


def test_summary_has_twelve_month_rows_and_year_columns(data_dir):
    table = summarize_years([2013, 2014], data_dir=data_dir)
    assert list(table.index) == list(range(1, 13))
    assert list(table.columns) == [2013, 2014]
    assert table.index.name == "MONTH"
    assert table.columns.name == "year"


def test_summary_counts(data_dir):
    table = summarize_years([2013, 2014], data_dir=data_dir)
    assert table.loc[1, 2013] == 2
    assert table.loc[3, 2013] == 3
    assert table.loc[6, 2014] == 6


def test_summary_total_matches_record_count(data_dir):
    table = summarize_years([2013, 2014], data_dir=data_dir)
    assert int(table.sum().sum()) == 19 + 21


def test_months_without_crashes_are_missing_not_zero(data_dir):
    table = summarize_years([2014], data_dir=data_dir)
    assert len(table) == 12
    assert table.loc[7:12, 2014].isna().all()
    assert not (table.fillna(-1) == 0).any().any()


def test_month_absent_from_every_year_still_has_a_row(tmp_path):
    write_year(tmp_path, 2013, [crash(1, 1), crash(1, 3)])
    write_year(tmp_path, 2014, [crash(1, 1)])
    write_year(tmp_path, 2015, [crash(1, 3), crash(1, 3)])
    table = summarize_years([2013, 2014, 2015], data_dir=tmp_path)
    assert table.shape == (12, 3)
    assert table.loc[2].isna().all()
    assert table.loc[3, 2015] == 2


def test_failed_years_are_dropped_from_columns(data_dir):
    with pytest.warns(InvalidYearWarning):
        table = summarize_years([2013, 2099], data_dir=data_dir)
    assert list(table.columns) == [2013]


def test_all_years_invalid(data_dir):
    with pytest.warns(InvalidYearWarning):
        with pytest.raises(NoDataAvailable):
            summarize_years([2098, 2099], data_dir=data_dir)


def test_unknown_month_code_is_left_out(tmp_path):
    write_year(tmp_path, 2013, [crash(1, 1), crash(1, 99)])
    table = summarize_years([2013], data_dir=tmp_path)
    assert len(table) == 12
    assert int(table.sum().sum()) == 1


def test_count_by_month_year_skips_absence_markers():
    tables = [
        pd.DataFrame({"MONTH": [1, 1, 2], "year": [2013] * 3}),
        None,
        pd.DataFrame({"MONTH": [2], "year": [2014]}),
    ]
    table = count_by_month_year(tables)
    assert list(table.columns) == [2013, 2014]
    assert table.loc[1, 2013] == 2
    assert pd.isna(table.loc[1, 2014])
    assert str(table.dtypes[2013]) == "Int64"


def test_count_by_month_year_nothing_loaded():
    with pytest.raises(NoDataAvailable):
        count_by_month_year([None, None])


def test_stray_month_code_does_not_wipe_out_the_year(tmp_path):
    write_year(tmp_path, 2013, [crash(1, "1"), crash(1, "2"), crash(1, "x")])
    table = summarize_years([2013], data_dir=tmp_path)
    assert int(table.sum().sum()) == 2
    assert table.loc[1, 2013] == 1 and table.loc[2, 2013] == 1


def test_count_by_month_year_accepts_month_strings():
    tables = [pd.DataFrame({"MONTH": ["1", "1", "12", "unknown"], "year": [2015] * 4})]
    table = count_by_month_year(tables)
    assert table.loc[1, 2015] == 2
    assert table.loc[12, 2015] == 1
    assert int(table.sum().sum()) == 3
