import json
import httpx
import pytest
import datetime

from typing import Callable


SALARY_PAYLOAD = {
    "2024-01-01": [{"nome": "Salary", "bruto": 1000, "liquido": 800}],
    "2024-01-02": [{"nome": "Salary", "bruto": 1200, "liquido": 950}],
}


class DataFixtures:
    @pytest.fixture(scope='function')
    def salary_payload(self) -> dict:
        """return a two dates income document with a single category"""
        return json.loads(json.dumps(SALARY_PAYLOAD))

    @pytest.fixture(scope='function')
    def mixed_payload(self) -> dict:
        """
        return an income document with unsorted dates, a category missing on some dates, a date without records and
        a category recorded twice on the same date
        """
        return {
            "2024-03-01": [{"nome": "Salary", "bruto": 1100, "liquido": 900},
                           {"nome": "Stocks", "bruto": 50, "liquido": 40},
                           {"nome": "Salary", "bruto": 10, "liquido": 5}],
            "2024-01-01": [{"nome": "Salary", "bruto": 1000, "liquido": 800}],
            "2024-02-01": [],
            "2024-01-15": [{"nome": "Rent", "bruto": 300, "liquido": 250},
                           {"nome": "Salary", "bruto": 0, "liquido": 0}],
        }

    @pytest.fixture(scope='function')
    def fake_income_payload_maker(self, faker) -> Callable:
        """
        return a function that creates fake income documents of n_dates dates with n_categories records each
        """
        def example_payload(n_dates: int = 5, n_categories: int = 3) -> dict:
            start = faker.date_between(start_date='-5y', end_date='-1y')
            categories = [f'{faker.word()} {i}' for i in range(n_categories)]
            dates = [(start + datetime.timedelta(days=i)).strftime('%Y-%m-%d') for i in range(n_dates)]
            faker.random.shuffle(dates)
            return {
                date: [{"nome": category,
                        "bruto": faker.random_int(0, 100_000),
                        "liquido": faker.random_int(0, 100_000)} for category in categories]
                for date in dates
            }
        return example_payload

    @pytest.fixture(scope='function')
    def payload_file_maker(self, tmp_path) -> Callable:
        """return a function that writes a document to a temporary json file and returns its path"""
        def write_payload(payload, name: str = 'income.json') -> str:
            path = tmp_path / name
            content = payload if isinstance(payload, str) else json.dumps(payload)
            path.write_text(content, encoding='utf-8')
            return str(path)
        return write_payload


class HttpFixtures:
    @pytest.fixture(scope='function')
    def mock_client_maker(self) -> Callable:
        """
        return a function that creates an async http client answering every request with the given status and content
        """
        def make_client(status_code: int = 200, content: str | bytes = b'{}', requests: list | None = None):
            def handler(request: httpx.Request) -> httpx.Response:
                if requests is not None:
                    requests.append(request)
                return httpx.Response(status_code, content=content)
            return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url='https://example.com')
        return make_client
