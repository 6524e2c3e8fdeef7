import json
import math
import os
import httpx
import pandas as pd

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

from incdash import ROOT_PATH
from incdash.app.exceptions import FetchError, ParseError
from incdash.app.utils.logs import get_logger
from incdash.naming_conventions import IncomeRecordFields


logger = get_logger(__name__)

name_field = IncomeRecordFields.NAME.value
gross_field = IncomeRecordFields.GROSS.value
net_field = IncomeRecordFields.NET.value

FETCH_ERROR_PREFIX = 'Erro ao carregar o arquivo JSON: '


@dataclass(frozen=True)
class IncomeRecord:
    nome: str
    bruto: int | float
    liquido: int | float


IncomeDataset = dict[str, tuple[IncomeRecord, ...]]


def parse_date(date: str) -> pd.Timestamp:
    """
    Parse a date key of the income data into a comparable timestamp

    Parameters
    ----------
    date : str
        the date key, in any format pandas can parse (e.g. '2024-01-31', '01/31/2024')

    Returns
    -------
    pd.Timestamp
        the parsed timestamp, timezone naive (aware dates are converted to UTC first)
    """
    if not isinstance(date, str):
        raise ParseError(f'Date keys should be strings, got {date!r}')
    try:
        timestamp = pd.to_datetime(date)
    except (ValueError, TypeError, OverflowError) as e:
        raise ParseError(f'Invalid date key {date!r}') from e
    if pd.isna(timestamp):
        raise ParseError(f'Invalid date key {date!r}')
    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_convert('UTC').tz_localize(None)
    return timestamp


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # json accepts NaN and Infinity, amounts must be finite
    return isinstance(value, float) and math.isfinite(value)


def _parse_record(date: str, record: Any) -> IncomeRecord:
    if not isinstance(record, dict):
        raise ParseError(f'Records of {date} should be objects, got {record!r}')
    name = record.get(name_field)
    if not isinstance(name, str):
        raise ParseError(f'Record of {date} is missing a string "{name_field}"')
    for field in (gross_field, net_field):
        if not _is_number(record.get(field)):
            raise ParseError(f'Record "{name}" of {date} is missing a finite numeric "{field}"')
    return IncomeRecord(nome=name, bruto=record[gross_field], liquido=record[net_field])


def parse_income_dataset(payload: Any) -> IncomeDataset:
    """
    Validate the decoded income document and convert it to an income dataset.

    Parameters
    ----------
    payload : Any
        the decoded JSON document, expected to map date strings to lists of records, each with the ``nome``,
        ``bruto`` and ``liquido`` fields

    Returns
    -------
    IncomeDataset
        the dataset, keeping the order of the document's dates and of each date's records
    """
    if not isinstance(payload, dict):
        raise ParseError('The income data should be a JSON object mapping dates to records')

    dataset = {}
    for date, records in payload.items():
        parse_date(date)
        if not isinstance(records, list):
            raise ParseError(f'Records of {date} should be a list')
        dataset[date] = tuple(_parse_record(date, record) for record in records)
    return dataset


async def _fetch_http(url: str, client: httpx.AsyncClient) -> Any:
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(f'{FETCH_ERROR_PREFIX}{e}') from e
    if not response.is_success:
        raise FetchError(f'{FETCH_ERROR_PREFIX}{response.reason_phrase}', status_code=response.status_code)
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f'The income data is not valid JSON: {e}') from e


def _read_file(path: str) -> Any:
    try:
        with open(path, 'rb') as file:
            content = file.read()
    except OSError as e:
        raise FetchError(f'{FETCH_ERROR_PREFIX}{e.strerror}') from e
    try:
        return json.loads(content.decode('utf-8'))
    except ValueError as e:
        raise ParseError(f'The income data is not valid JSON: {e}') from e


async def fetch_income_json(url: str, client: httpx.AsyncClient | None = None, base_url: str | None = None,
                            timeout: float | None = None, root_path: str = ROOT_PATH) -> Any:
    """
    Retrieve the income document and decode its JSON content.

    http(s) urls, and every url when a ``client`` or a ``base_url`` is given, are retrieved over http. ``file://``
    urls are read from disk, and any other url is read as a static file relative to ``root_path``.

    Parameters
    ----------
    url : str
        the url of the income document
    client : httpx.AsyncClient | None
        the client to use for the request. If None, a client is opened for this request only
    base_url : str | None
        the url relative urls are resolved against when a new client is opened
    timeout : float | None
        the request timeout in seconds of a new client. None means no timeout
    root_path : str
        the directory relative static files are resolved against

    Returns
    -------
    Any
        the decoded JSON document
    """
    assert isinstance(url, str), 'url should be a string'
    logger.debug('Loading the income data from %s', url)

    parsed_url = urlparse(url)
    if client is not None:
        return await _fetch_http(url, client)
    if parsed_url.scheme in ('http', 'https') or base_url:
        async with httpx.AsyncClient(base_url=base_url or '', timeout=timeout) as new_client:
            return await _fetch_http(url, new_client)
    if parsed_url.scheme == 'file':
        return _read_file(url2pathname(parsed_url.path))
    return _read_file(os.path.join(root_path, url))


async def load_income_dataset(url: str, client: httpx.AsyncClient | None = None, **kwargs) -> IncomeDataset:
    """retrieve the income document at the given url and parse it to an income dataset"""
    payload = await fetch_income_json(url, client, **kwargs)
    return parse_income_dataset(payload)
