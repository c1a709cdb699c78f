# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import logging
import subprocess

from azurefuncs.web import create_app
from azurefuncs.web.routes_misc import command_output
from azurefuncs_tools import LOGGING_NAMESPACE
from azurefuncs_tools.environment import AzureFuncsSettings


def test_helloworld(client):
    assert client.get('/api/helloworld').get_data(as_text=True) == 'Hello world'
    assert client.get('/api/helloworld?name=you').get_data(as_text=True) == 'Hello you'


def test_ping(client):
    response = client.get('/api/ping')

    assert response.status_code == 200
    assert response.get_data(as_text=True) == 'pong\nazurefuncs version 1.2.3\n'


def test_env_disabled_by_default(client):
    assert client.get('/api/env').status_code == 404


def test_env(monkeypatch, versions_url, resolver):
    monkeypatch.setenv('AZUREFUNCS_TEST_MARKER', 'marker-value')
    monkeypatch.setattr(
        'azurefuncs.web.routes_misc.ENV_COMMANDS', [['azurefuncs-no-such-command']]
    )
    settings = AzureFuncsSettings(VERSIONS_SOURCE=versions_url, ENABLE_ENV_ENDPOINT=True)
    client = create_app(settings, resolver=resolver).test_client()

    body = client.get('/api/env').get_data(as_text=True)

    assert 'AZUREFUNCS_TEST_MARKER=marker-value\n' in body
    assert 'azurefuncs-no-such-command\nerror: ' in body


def test_command_output(monkeypatch):
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 1, stdout=b'some output\n')

    monkeypatch.setattr(subprocess, 'run', fake_run)

    assert command_output(['which', 'docker']) == (
        'which docker\nerror: exit status 1\nsome output\n\n'
    )


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGING_NAMESPACE):
        client.get('/api/ping')
        client.get('/api/helloworld?name=you')

    messages = [record.message for record in caplog.records]
    assert 'got a request /api/ping' in messages
    assert 'got a request /api/helloworld?name=you' in messages
