# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""
Small handlers: hello world, ping and an environment dump

GET /api/helloworld?name=you  greeting
GET /api/ping                 liveness check reporting the deployed version
GET /api/env                  environment variables and a few system commands
"""

import os
import subprocess  # nosec
import typing as t
from http import HTTPStatus

from flask import Blueprint, Response, abort, current_app, request

from azurefuncs_tools import AzureFuncsSettings, debug

misc_bp = Blueprint('misc', __name__)

ENV_COMMANDS: t.List[t.List[str]] = [
    ['whoami'],
    ['who', 'am', 'i'],
    ['uname', '-a'],
    ['which', 'runc'],
    ['which', 'docker'],
    ['cat', '/proc/version'],
]
COMMAND_TIMEOUT = 10


def _settings() -> AzureFuncsSettings:
    return current_app.config['AZUREFUNCS_SETTINGS']


def command_output(args: t.List[str]) -> str:
    """Command line followed by its combined output, or the error it failed with"""
    lines = [' '.join(args)]
    try:
        completed = subprocess.run(  # noqa: S603 # nosec
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=COMMAND_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        debug(f'Command "{lines[0]}" failed: {e}')
        lines.append(f'error: {e}')
        lines.append('')
        return '\n'.join(lines) + '\n'

    if completed.returncode != 0:
        lines.append(f'error: exit status {completed.returncode}')
    lines.append(completed.stdout.decode('utf-8', errors='replace'))
    return '\n'.join(lines) + '\n'


@misc_bp.route('/helloworld')
def helloworld():
    name = request.args.get('name') or 'world'
    return Response(f'Hello {name}', mimetype='text/plain')


@misc_bp.route('/ping')
def ping():
    return Response(f'pong\nazurefuncs version {_settings().VERSION}\n', mimetype='text/plain')


@misc_bp.route('/env')
def env():
    if not _settings().ENABLE_ENV_ENDPOINT:
        abort(HTTPStatus.NOT_FOUND)

    body = ''.join(f'{key}={value}\n' for key, value in os.environ.items())
    body += ''.join(command_output(args) for args in ENV_COMMANDS)
    return Response(body, mimetype='text/plain')
