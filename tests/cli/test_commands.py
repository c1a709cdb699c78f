# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import subprocess
import sys

import requests

from azurefuncs_tools import get_logger
from azurefuncs_tools.__version__ import __version__
from azurefuncs_tools.errors import (
    ConstraintParseError,
    FatalError,
    VersionNotFoundError,
)
from azurefuncs_tools.logging import WarningsAsErrorsFilter


def test_version(invoke_cli):
    output = invoke_cli('version').output

    assert output.strip() == __version__


def test_resolve_candidates(invoke_cli, mock_versions):
    result = invoke_cli('resolve', '-c', '1.x', '--candidates', '1.2.0,1.10.0,2.0.0')

    assert result.exit_code == 0
    assert result.output == '1.10.0\n'
    assert mock_versions.call_count == 0


def test_resolve_from_versions_list(invoke_cli, serve_versions):
    serve_versions('1.15.2', '1.16.1', '1.17rc1')

    result = invoke_cli('resolve', '--constraint', '~1.15')

    assert result.exit_code == 0
    assert result.output == '1.15.2\n'


def test_resolve_source_option(invoke_cli, mock_versions):
    mock_versions.get('http://other.test/list.txt', text='2.0.0\n1.9.0\n')

    result = invoke_cli('resolve', '--source', 'http://other.test/list.txt')

    assert result.output == '1.9.0\n'


def test_resolve_no_match(invoke_cli):
    result = invoke_cli('resolve', '-c', '1.5.2', '--candidates', '1.5.1,1.5.3', '--exclusive')

    assert isinstance(result.exception, VersionNotFoundError)
    assert result.exception.exit_code == 4


def test_resolve_invalid_constraint(invoke_cli):
    result = invoke_cli('resolve', '-c', 'not-a-version', '--candidates', '1.0.0')

    assert isinstance(result.exception, ConstraintParseError)


def test_resolve_fetch_failure(invoke_cli, mock_versions, versions_url):
    mock_versions.get(versions_url, exc=requests.exceptions.ConnectionError('down'))

    result = invoke_cli('resolve')

    assert isinstance(result.exception, FatalError)
    assert f'URL: {versions_url}' in str(result.exception)


def test_versions(invoke_cli, serve_versions):
    serve_versions('1.15.2', 'junk', '1.16')

    result = invoke_cli('versions')

    assert result.exit_code == 0
    assert result.output.splitlines() == ['1.15.2', '1.16']


def test_serve_uses_port_setting(invoke_cli, monkeypatch):
    calls = []
    monkeypatch.setattr(
        'azurefuncs.cli.serve.run_server',
        lambda app, host, port: calls.append((app.name, host, port)),
    )
    monkeypatch.setenv('FUNCTIONS_CUSTOMHANDLER_PORT', '7071')

    assert invoke_cli('serve').exit_code == 0
    assert invoke_cli('serve', '--host', '127.0.0.1', '--port', '8000').exit_code == 0

    assert calls == [
        ('azurefuncs.web.server', '0.0.0.0', 7071),
        ('azurefuncs.web.server', '127.0.0.1', 8000),
    ]


def test_safe_cli_exit_code():
    result = subprocess.run(
        [sys.executable, '-m', 'azurefuncs', 'resolve', '-c', 'nope', '--candidates', '1.0.0'],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    assert result.returncode == 2
    assert b'Invalid constraint "nope"' in result.stderr


def test_serve_ignores_warnings_as_errors(invoke_cli, monkeypatch):
    monkeypatch.setattr('azurefuncs.cli.serve.run_server', lambda app, host, port: None)

    assert invoke_cli('-W', 'serve').exit_code == 0

    handlers = get_logger().handlers
    assert len(handlers) == 2
    assert not any(
        isinstance(log_filter, WarningsAsErrorsFilter)
        for handler in handlers
        for log_filter in handler.filters
    )
