# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import platform
import typing as t
from http import HTTPStatus

import requests
from requests_file import FileAdapter

from azurefuncs_tools.__version__ import __version__
from azurefuncs_tools.client_errors import NetworkConnectionError, VersionsFetchError
from azurefuncs_tools.messages import debug

DEFAULT_REQUEST_TIMEOUT = (
    10.05,  # Connect timeout
    60.1,  #  Read timeout
)

Timeout = t.Union[float, t.Tuple[float, float]]


def create_session() -> requests.Session:
    session = requests.Session()
    session.headers['User-Agent'] = user_agent()
    session.mount('file://', FileAdapter())

    return session


def user_agent() -> str:
    """
    Returns user agent string.
    """

    environment_info = [
        f'{platform.system()}/{platform.release()} {platform.machine()}',
        f'python/{platform.python_version()}',
    ]

    return 'azurefuncs/{version} ({env})'.format(
        version=__version__,
        env='; '.join(environment_info),
    )


def get_text(
    session: requests.Session,
    endpoint: str,
    timeout: t.Optional[Timeout] = None,
) -> str:
    """GET the endpoint and return the body, raising VersionsFetchError unless it is 200 OK"""
    if timeout is None:
        timeout = DEFAULT_REQUEST_TIMEOUT

    try:
        debug(f'HTTP request: GET {endpoint}')
        response = session.get(endpoint, timeout=timeout, allow_redirects=True)
    except requests.exceptions.ConnectionError as e:
        raise NetworkConnectionError(str(e), endpoint=endpoint)
    except requests.exceptions.RequestException as e:
        raise VersionsFetchError(f'HTTP request error {e}', endpoint=endpoint)

    debug(f'HTTP response: {response.status_code} total: {response.elapsed.total_seconds()}s')

    if response.status_code != HTTPStatus.OK:
        raise VersionsFetchError(
            'Versions source did not return the list of versions',
            endpoint=endpoint,
            status_code=response.status_code,
        )

    return response.text
