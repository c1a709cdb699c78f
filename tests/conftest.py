# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import pytest
import requests_mock

from azurefuncs_tools import HINT_LEVEL, get_logger
from azurefuncs_tools.cache import VersionCache
from azurefuncs_tools.environment import AzureFuncsSettings

VERSIONS_URL = 'http://versions.test/versions.txt'


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = get_logger()
    logger.setLevel(HINT_LEVEL)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in AzureFuncsSettings.model_fields:
        monkeypatch.delenv(f'AZUREFUNCS_{name}', raising=False)
    monkeypatch.delenv('FUNCTIONS_CUSTOMHANDLER_PORT', raising=False)
    monkeypatch.setenv('AZUREFUNCS_VERSIONS_SOURCE', VERSIONS_URL)


@pytest.fixture()
def versions_url():
    return VERSIONS_URL


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def mock_versions():
    with requests_mock.Mocker() as m:
        yield m


@pytest.fixture()
def serve_versions(mock_versions):
    def server(*lines, status_code=200):
        mock_versions.get(VERSIONS_URL, text='\n'.join(lines) + '\n', status_code=status_code)
        return mock_versions

    return server


@pytest.fixture()
def version_cache(clock):
    return VersionCache(VERSIONS_URL, max_age=60, clock=clock)
