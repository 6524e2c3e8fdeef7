import httpx
import numpy as np
import pandas as pd

from dataclasses import dataclass
from typing import Literal

from incdash.app.data_access.income_repository import IncomeDataset, load_income_dataset, parse_date
from incdash.app.exceptions import EmptyDatasetError
from incdash.naming_conventions import IncomeFrameColumns


date_col = IncomeFrameColumns.DATE.value
name_col = IncomeFrameColumns.NAME.value
gross_col = IncomeFrameColumns.GROSS.value
net_col = IncomeFrameColumns.NET.value

Field = Literal['bruto', 'liquido']


@dataclass(frozen=True)
class DerivedSeries:
    """The aggregates of an income dataset consumed by the dashboard charts and summary."""
    dates: list[str]
    categories: list[str]
    gross_by_category: dict[str, list]
    net_by_category: dict[str, list]
    gross_totals: list
    net_totals: list
    delta_dates: list[str]
    gross_deltas: list
    net_deltas: list
    latest_gross_total: int | float
    latest_net_total: int | float


def sort_dates(dataset: IncomeDataset) -> list[str]:
    """
    Sort the dates of the dataset by their calendar value

    Parameters
    ----------
    dataset : IncomeDataset
        the income dataset

    Returns
    -------
    list[str]
        the date keys in ascending calendar order. Dates with the same calendar value keep their dataset order
    """
    if not dataset:
        return []
    timestamps = pd.Series([parse_date(date) for date in dataset], index=list(dataset))
    return timestamps.sort_values(kind='stable').index.tolist()


def income_frame(dataset: IncomeDataset, dates: list[str]) -> pd.DataFrame:
    """
    Flatten the dataset to a frame with one row per record, ordered by the given dates and then by the order of
    the records in each date's list.
    """
    rows = []
    for date in dates:
        for record in dataset[date]:
            rows.append({
                date_col: date,
                name_col: record.nome,
                gross_col: record.bruto,
                net_col: record.liquido,
            })
    return pd.DataFrame(rows, columns=[date_col, name_col, gross_col, net_col])


def discover_categories(frame: pd.DataFrame) -> list[str]:
    """return the distinct category names of the frame in order of first appearance"""
    return frame[name_col].drop_duplicates().tolist()


def category_series(frame: pd.DataFrame, dates: list[str], categories: list[str], field: Field) -> dict[str, list]:
    """
    Get the values of a field for every category at every date.

    When a date has more than one record of the same category, only the first of them is used. A category without a
    record at a date gets None at that position (not zero), so the charts show a gap there.

    Parameters
    ----------
    frame : pd.DataFrame
        the income frame, as returned by ``income_frame``
    dates : list[str]
        the sorted dates
    categories : list[str]
        the categories to get the series of
    field : Field
        the record field to take the values from, 'bruto' or 'liquido'

    Returns
    -------
    dict[str, list]
        a series aligned with ``dates`` for each category, in the order of ``categories``
    """
    if not categories:
        return {}
    first_records = frame.drop_duplicates(subset=[date_col, name_col], keep='first')
    table = (
        first_records
        .pivot(index=date_col, columns=name_col, values=field)
        .reindex(index=dates, columns=categories)
    )
    return {
        category: table[category].astype(object).where(table[category].notna(), None).tolist()
        for category in categories
    }


def per_date_totals(frame: pd.DataFrame, dates: list[str], field: Field) -> list:
    """
    sum the field over all the records of each date, dates without records sum to 0.

    pandas sums floats with compensated summation, so a float total can differ in its last digit from adding the
    amounts one by one (0.1 + 0.2 + 0.3 gives 0.6 rather than 0.6000000000000001). Integer totals are exact.
    """
    return frame.groupby(date_col)[field].sum().reindex(dates, fill_value=0).tolist()


def day_over_day_deltas(totals: list) -> list:
    """
    Get the change of the totals between each date and the date before it

    Parameters
    ----------
    totals : list
        the per date totals, in date order

    Returns
    -------
    list
        ``totals[i] - totals[i - 1]`` for i from 1 on, one item shorter than ``totals`` (empty for fewer than 2 items)
    """
    return np.diff(np.asarray(totals)).tolist()


def latest_totals(frame: pd.DataFrame, dates: list[str]) -> tuple[int | float, int | float]:
    """return the gross and net totals of the last date"""
    if not dates:
        raise EmptyDatasetError()
    last_date = dates[-1:]
    return per_date_totals(frame, last_date, gross_col)[0], per_date_totals(frame, last_date, net_col)[0]


def build_derived_series(dataset: IncomeDataset) -> DerivedSeries:
    """
    Compute all the aggregates of the dataset

    Parameters
    ----------
    dataset : IncomeDataset
        the income dataset

    Returns
    -------
    DerivedSeries
        the aggregates of the dataset
    """
    if not dataset:
        raise EmptyDatasetError()

    dates = sort_dates(dataset)
    frame = income_frame(dataset, dates)
    categories = discover_categories(frame)
    gross_totals = per_date_totals(frame, dates, gross_col)
    net_totals = per_date_totals(frame, dates, net_col)
    latest_gross_total, latest_net_total = latest_totals(frame, dates)

    return DerivedSeries(
        dates=dates,
        categories=categories,
        gross_by_category=category_series(frame, dates, categories, gross_col),
        net_by_category=category_series(frame, dates, categories, net_col),
        gross_totals=gross_totals,
        net_totals=net_totals,
        delta_dates=dates[1:],
        gross_deltas=day_over_day_deltas(gross_totals),
        net_deltas=day_over_day_deltas(net_totals),
        latest_gross_total=latest_gross_total,
        latest_net_total=latest_net_total,
    )


async def load_dashboard(url: str, client: httpx.AsyncClient | None = None, **kwargs) -> DerivedSeries:
    """
    Load the income data at the given url and compute its aggregates.

    Raises ``FetchError``, ``ParseError`` or ``EmptyDatasetError`` (all ``LoadError``) when the data can't be
    loaded. Extra keyword arguments are passed on to ``fetch_income_json``.
    """
    dataset = await load_income_dataset(url, client, **kwargs)
    return build_derived_series(dataset)
