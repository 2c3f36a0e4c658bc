import json
from pathlib import Path

import pytest

from buildit import RequestBuilder

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name):
    with open(FIXTURES / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def builder():
    return RequestBuilder()


@pytest.fixture(scope="session")
def requests_document():
    return load_fixture("requests.json")


@pytest.fixture(scope="session")
def top_level_document():
    return load_fixture("requests_top_level.json")


@pytest.fixture(scope="session")
def fixtures_dir():
    return FIXTURES
