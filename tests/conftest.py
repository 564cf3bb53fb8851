import copy

import pytest

from site_preview import config
from site_preview.pipeline.provider import MOCK_CONTENT


@pytest.fixture
def content() -> dict:
    return copy.deepcopy(MOCK_CONTENT)


@pytest.fixture(autouse=True)
def no_mock_delay(monkeypatch):
    monkeypatch.setattr(config, "MOCK_DELAY", 0)


@pytest.fixture
def no_sleep():
    calls = []
    return calls.append, calls
