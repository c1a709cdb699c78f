# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import pytest

from azurefuncs.web import create_app
from azurefuncs_tools.environment import AzureFuncsSettings
from azurefuncs_tools.resolver import VersionResolver


@pytest.fixture()
def settings(versions_url):
    return AzureFuncsSettings(VERSIONS_SOURCE=versions_url, VERSION='1.2.3')


@pytest.fixture()
def resolver(version_cache):
    return VersionResolver(version_cache)


@pytest.fixture()
def app(settings, resolver):
    return create_app(settings, resolver=resolver)


@pytest.fixture()
def client(app):
    return app.test_client()
